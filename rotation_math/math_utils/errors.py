################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Domain errors raised by the vector and matrix kernel."""


class LinalgError(ValueError):
    """Raised when an operation is given data outside its domain."""


class DegenerateVectorError(LinalgError):
    """Raised when a zero-magnitude vector is used as a divisor."""


class SingularMatrixError(LinalgError):
    """Raised when inverting a matrix whose determinant is near zero."""


class NonUnitAxisError(LinalgError):
    """Raised when a rotation axis does not have unit magnitude."""
