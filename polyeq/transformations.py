# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Coefficient-vector transformations of polynomials: scaling of the variable,
conjugation with respect to the imaginary axis and the unit circle,
reciprocal and shift.
"""

import numpy as np

from .polynomials import LaurentPolynomial, Polynomial, _PolynomialBase, as_laurent


def _exponents(a: _PolynomialBase) -> np.ndarray:
    return np.arange(a.first, a.last + 1)


def scale(a, rho):
    """
    Replace the variable s with rho·s, i.e. multiply the coefficient of s^k
    by rho^k.

    Example
    -------
    >>> scale(Polynomial([1, 2, 3, 4, 5]), 10).coef
    array([1.e+00, 2.e+01, 3.e+02, 4.e+03, 5.e+04])
    """
    r = np.asarray(rho)
    if not np.iscomplexobj(r):
        r = r.astype(float)
    c = a.coef * r ** _exponents(a)
    return a._new(type(a), c, a.first, a.symbol)


def cconj(a):
    """
    Conjugate with respect to the imaginary axis, ã(s) = ā(-s):
    complex-conjugate every coefficient and negate those at odd powers.
    """
    c = a.conj().coef
    odd = _exponents(a) % 2 == 1
    c[odd] = -c[odd]
    return a._new(type(a), c, a.first, a.symbol)


def conjreciprocal(a: Polynomial) -> Polynomial:
    """
    s^n ā(1/s) for a polynomial of degree n: conjugated coefficients in
    reverse order.

    The result is trimmed like any polynomial, so a zero constant term of a
    lowers the degree of the result and conjreciprocal is an involution only
    on polynomials with a(0) != 0.
    """
    if isinstance(a, LaurentPolynomial):
        raise TypeError("conjreciprocal is defined for ordinary polynomials only")
    return Polynomial(a.conj().coef[::-1], symbol=a.symbol)


def dconj(a) -> LaurentPolynomial:
    """
    Conjugate with respect to the unit circle, ã(z) = ā(1/z).

    The coefficients are conjugated and reversed and the exponent range
    [m, n] becomes [-n, -m]. An ordinary polynomial is read as a Laurent
    polynomial with m = 0.
    """
    a = as_laurent(a)
    return LaurentPolynomial(a.conj().coef[::-1], first=-a.last, symbol=a.symbol)


def shift(p, k: int = 1) -> LaurentPolynomial:
    """Multiply by z^k: every exponent moves by k, coefficients unchanged."""
    p = as_laurent(p)
    return LaurentPolynomial(p.coef, first=p.first + int(k), symbol=p.symbol)
