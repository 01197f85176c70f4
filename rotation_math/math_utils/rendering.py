################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Human-readable display forms for vectors and matrices."""

from __future__ import annotations

from typing import Iterable
from typing import Sequence


# Significant digits shown per component
DEFAULT_PRECISION: int = 6
# Minimum column width for matrix entries
DEFAULT_WIDTH: int = 10


def format_scalar(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a scalar with the given number of significant digits.

    Values are first rounded to ``precision`` decimal places, so rounding
    noise such as ``6.1e-17`` from ``cos(pi / 2)`` prints as ``0``.
    """
    if precision <= 0:
        raise ValueError("precision must be positive")
    # Adding 0.0 folds -0.0 into 0.0
    rounded: float = round(float(value), precision) + 0.0
    return f"{rounded:.{precision}g}"


def format_vector(
    components: Iterable[float], precision: int = DEFAULT_PRECISION
) -> str:
    """Return the tuple form "(x, y, z)" of a vector."""
    return "(" + ", ".join(format_scalar(c, precision) for c in components) + ")"


def format_matrix(
    rows: Sequence[Sequence[float]],
    precision: int = DEFAULT_PRECISION,
    width: int = DEFAULT_WIDTH,
) -> str:
    """Return a grid with one "[ a b c ]" line per matrix row."""
    lines: list[str] = []
    for row in rows:
        cells: list[str] = [
            f"{format_scalar(value, precision):>{width}}" for value in row
        ]
        lines.append("[ " + " ".join(cells) + " ]")
    return "\n".join(lines)
