################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the rotation walkthrough command line entry point."""

from __future__ import annotations

import pytest

from rotation_math.cli.rotation_demo_cli import EXIT_DOMAIN_ERROR
from rotation_math.cli.rotation_demo_cli import main


def test_main_default_run(capsys: pytest.CaptureFixture[str]) -> None:
    """The default run prints the walkthrough and succeeds."""
    assert main([]) == 0
    out: str = capsys.readouterr().out
    assert out.startswith("In 2D\n")
    assert "Determinant(R) = 1\n" in out


def test_main_custom_angle(capsys: pytest.CaptureFixture[str]) -> None:
    """Command line options reach the walkthrough."""
    status: int = main(
        ["--angle-deg", "90", "--axis", "0", "0", "1", "--precision", "4"]
    )
    assert status == 0
    lines: list[str] = capsys.readouterr().out.splitlines()
    assert "R * e1 = (0, 1)" in lines
    assert "a = (0, 0, 1), theta = 1.571" in lines


@pytest.mark.parametrize(
    "args",
    [
        ["--axis", "0", "0", "0"],
        ["--precision", "0"],
        ["--angle-deg", "nan"],
        ["--vector", "1", "inf", "0"],
    ],
)
def test_main_domain_errors(
    args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """Rejected inputs exit with the domain error status."""
    assert main(args) == EXIT_DOMAIN_ERROR
    assert capsys.readouterr().out == ""
