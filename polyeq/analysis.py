# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Predicates on polynomials: coprimality, stability, conjugate symmetry
"""

import numpy as np

from .matrices import sylvesterresultantmatrix
from .polynomials import LaurentPolynomial
from .qr import rank
from .transformations import cconj, dconj


def iscoprime(a, b) -> bool:
    """
    True iff a and b have no common factor, i.e. the resultant-size
    Sylvester matrix has full rank deg(a) + deg(b).
    """
    if a.iszero or b.iszero:
        # gcd(p, 0) = p
        return (a.degree == 0 and b.iszero) or (b.degree == 0 and a.iszero)
    return rank(sylvesterresultantmatrix(a, b)) == a.degree + b.degree


def isschurstable(a) -> bool:
    """All roots inside the closed unit disk."""
    return bool(np.all(np.abs(a.roots()) <= 1))


def ishurwitzstable(a) -> bool:
    """All roots in the closed left half-plane."""
    return bool(np.all(a.roots().real <= 0))


def isconjsymmetric(a, tol: float = 0.0) -> bool:
    """
    Check whether a equals its own conjugate.

    For a `Polynomial` the conjugate is taken with respect to the imaginary
    axis, a(s) = ā(-s): odd coefficients vanish and even ones are real.
    For a `LaurentPolynomial` it is taken with respect to the unit circle,
    a(z) = ā(1/z): the coefficient vector reads the same reversed and
    conjugated, around z^0.

    With ``tol > 0`` the comparison is approximate (absolute tolerance on
    the coefficients), otherwise exact.
    """
    at = dconj(a) if isinstance(a, LaurentPolynomial) else cconj(a)
    if tol > 0:
        return a.isapprox(at, rtol=0.0, atol=tol)
    return a == at
