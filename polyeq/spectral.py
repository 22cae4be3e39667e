# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .polynomials import LaurentPolynomial, Polynomial

logger = logging.getLogger(__name__)

METHODS = ("roots",)


def _real_if_real(x: Polynomial, a) -> Polynomial:
    if np.iscomplexobj(a.coef):
        return x
    return Polynomial(x.coef.real, symbol=x.symbol)


def _factor_axis(a: Polynomial) -> Polynomial:
    r = a.roots()
    # roots on the imaginary axis are dropped
    s = r[r.real < 0]
    if 2 * s.shape[0] != a.degree:
        logger.warning(
            f"spectralfactor(): kept {s.shape[0]} of {r.shape[0]} roots, "
            "a has roots on or near the imaginary axis"
        )
    x = Polynomial.fromroots(s, symbol=a.symbol) * np.sqrt(abs(a[a.degree]))
    return _real_if_real(x, a)


def _factor_circle(a: LaurentPolynomial) -> Polynomial:
    if a.first != -a.last:
        raise ValueError(
            f"a circle-symmetric Laurent polynomial spans [-n, n], got [{a.first}, {a.last}]"
        )
    r = a.roots()
    s = r[np.abs(r) < 1]
    if 2 * s.shape[0] != r.shape[0]:
        logger.warning(
            f"spectralfactor(): kept {s.shape[0]} of {r.shape[0]} roots, "
            "a has roots on or near the unit circle"
        )
    x = Polynomial.fromroots(s, symbol=a.symbol)
    # the z^0 coefficient of x̃·x is ‖x‖²
    k = np.sqrt(abs(a[0]) / np.sum(np.abs(x.coef) ** 2))
    return _real_if_real(x * k, a)


def spectralfactor(a, method: str = "roots") -> Polynomial:
    """
    Find a stable spectral factor x of a conjugate-symmetric polynomial a,
    that is, x̃·x = a.

    - `Polynomial` a = b̃·b with b̃(s) = b̄(-s): x is Hurwitz stable
      (roots in the open left half-plane).
    - `LaurentPolynomial` a = b̃·b with b̃(z) = b̄(1/z): x is Schur stable
      (roots in the open unit disk).

    Parameters
    ----------
    a : Polynomial | LaurentPolynomial
    method : str
        Only ``"roots"`` is available: all roots of a are computed and the
        stable half kept. Roots on the stability boundary are not handled.

    Example
    -------
    >>> b = Polynomial([6, 5, 1])
    >>> spectralfactor(cconj(b) * b).coef.round(8)
    array([6., 5., 1.])
    """
    if method not in METHODS:
        raise ValueError(f"unsupported method {method!r}; available: {', '.join(METHODS)}")
    if isinstance(a, LaurentPolynomial):
        return _factor_circle(a)
    return _factor_axis(a)
