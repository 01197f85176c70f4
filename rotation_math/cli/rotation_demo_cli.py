################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Command line entry point for the rotation walkthrough
"""

import argparse
import dataclasses
import logging
import sys
from typing import Optional

from rotation_math.config.linalg_params import LinalgParams
from rotation_math.config.linalg_params import LinalgParamsError
from rotation_math.demo.rotation_demo import RotationDemo
from rotation_math.math_utils.errors import LinalgError


_LOG: logging.Logger = logging.getLogger(__name__)

# Exit status when the kernel rejects the inputs
EXIT_DOMAIN_ERROR: int = 2


################################################################################
# Command line entry point
################################################################################


def _parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    defaults: LinalgParams = LinalgParams.defaults()

    parser = argparse.ArgumentParser(
        description="Print rotations of basis vectors and a sample vector"
    )
    parser.add_argument(
        "--angle-deg",
        type=float,
        default=defaults.demo.angle_deg,
        help="Rotation angle in degrees",
    )
    parser.add_argument(
        "--axis",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=defaults.demo.axis.tolist(),
        help="Arbitrary rotation axis, normalized before use",
    )
    parser.add_argument(
        "--vector",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=defaults.demo.vector.tolist(),
        help="Vector rotated by each rotation",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=defaults.display.precision,
        help="Significant digits in printed values",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(args=args)


def _build_params(options: argparse.Namespace) -> LinalgParams:
    defaults: LinalgParams = LinalgParams.defaults()
    return defaults.replace(
        demo=dataclasses.replace(
            defaults.demo,
            angle_deg=options.angle_deg,
            axis=options.axis,
            vector=options.vector,
        ),
        display=dataclasses.replace(defaults.display, precision=options.precision),
    )


def main(args: Optional[list[str]] = None) -> int:
    options: argparse.Namespace = _parse_args(args=args)

    logging.basicConfig(
        level=getattr(logging, options.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params: LinalgParams = _build_params(options)
        demo: RotationDemo = RotationDemo(params)
        demo.run(sys.stdout)
    except (LinalgError, LinalgParamsError) as exc:
        _LOG.error("Rotation demo failed: %s", exc)
        return EXIT_DOMAIN_ERROR

    return 0


if __name__ == "__main__":
    sys.exit(main())
