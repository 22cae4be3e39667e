# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Tuple

import numpy as np
from scipy.optimize import linprog

from .matrices import ltbtmatrix
from .polynomials import Polynomial
from .utils import pad_to

logger = logging.getLogger(__name__)


def _min_l1_residual(T: np.ndarray, b: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
    """
    minimize ‖y‖₁ subject to T x + y = b, posed as the linear program

        minimize    Σ y⁺ + Σ y⁻
        subject to  T x + y⁺ - y⁻ = b,   y⁺, y⁻ >= 0,   x free
    """
    n, k = T.shape
    A_eq = np.hstack([T, np.eye(n), -np.eye(n)])
    cost = np.concatenate([np.zeros(k), np.ones(2 * n)])
    bounds = [(None, None)] * k + [(0, None)] * (2 * n)

    res = linprog(cost, A_eq=A_eq, b_eq=b, bounds=bounds, method="highs")
    if not res.success:
        raise RuntimeError(f"linear program failed: {res.message}")

    x = res.x[:k]
    y = res.x[k : k + n] - res.x[k + n :]
    return x, y, float(res.fun)


def axycminl1(
    a: Polynomial,
    c: Polynomial,
    dymax: int = 100,
    emax: float = 1e-4,
) -> Tuple[Polynomial, Polynomial, float]:
    """
    Solve a·x + y = c with the 1-norm of the coefficient vector of y
    minimized.

    The degree of the minimizing y is not known a priori. Starting from
    deg(y) = max(deg a, deg c) the degree is raised by one per step, each step
    solving a linear program over the LTBT matrix of a, until the optimal
    value improves on the previous step by less than ``emax`` or ``dymax``
    is reached. Reaching ``dymax`` is not an error; the last solution is
    returned.

    Parameters
    ----------
    a, c : Polynomial
        Real coefficients.
    dymax : int
        Largest degree of y tried.
    emax : float
        Stop once |‖y‖₁(previous) - ‖y‖₁(current)| < emax.

    Returns
    -------
    x, y : Polynomial
    value : float
        ‖y‖₁ of the returned y.

    Raises
    ------
    RuntimeError : if the LP solver does not reach an optimum.

    References
    ----------
    Hurak, Z., A. Böttcher, and M. Sebek, "Minimum Distance to the Range of a
    Banded Lower Triangular Toeplitz Operator in l1 and Application in
    l1-Optimal Control", SIAM J. Control Optim., 45(1), pp. 107-122, 2006.
    """
    if np.iscomplexobj(a.coef) or np.iscomplexobj(c.coef):
        raise ValueError("axycminl1 requires real coefficients")
    if a.iszero:
        raise ValueError("a must be a non-zero polynomial")

    da = a.degree
    dymin = max(da, c.degree)
    if dymax < dymin:
        raise ValueError(f"dymax={dymax} is below the smallest admissible deg(y)={dymin}")

    b = pad_to(c.coef, dymin + 1)
    prev = np.inf
    for dy in range(dymin, dymax + 1):
        dx = dy - da
        T = ltbtmatrix(a, dx + 1)
        xs, ys, value = _min_l1_residual(T, b)
        logger.debug(f"|y|₁={value:f}  deg(x)={dx}  deg(y)={dy}")

        b = np.append(b, 0.0)
        if abs(prev - value) < emax:
            break
        prev = value
    else:
        logger.debug(f"dymax={dymax} reached without convergence")

    x = Polynomial(xs, symbol=a.symbol)
    y = Polynomial(ys, symbol=a.symbol)
    return x, y, value
