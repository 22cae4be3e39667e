# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Linear polynomial equations
===========================

- `axb`      a·x = b                 (exact division)
- `axby0`    a·x + b·y = 0           (minimal-degree homogeneous solution)
- `axbyc`    a·x + b·y = c           (Diophantine / Bezout equation)
- `axaxbb`   ã·x + a·x̃ = b + b̃       (symmetric, one unknown)
- `axbycd`   ã·x + b̃·y = c + d̃       (symmetric, two unknowns)

where ~ is the conjugate with respect to the imaginary axis (`cconj`).
Solvers that may fail return ``None`` in place of every unknown.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .matrices import alternating_signs, ltbtmatrix, sylvestermatrix
from .polynomials import Polynomial
from .qr import back_substitute, householder_qr, nullspace
from .transformations import cconj
from .utils import DIVISION_TOL, VERIFY_TOL, pad_to

logger = logging.getLogger(__name__)


class DegreePolicy(str, Enum):
    """Which unknown of a·x + b·y = c is kept at its minimal degree."""

    MIN_Y = "miny"
    MIN_X = "minx"


def _as_policy(policy) -> DegreePolicy:
    try:
        return DegreePolicy(policy)
    except ValueError:
        options = ", ".join(repr(p.value) for p in DegreePolicy)
        raise ValueError(
            f"unsupported option {policy!r} for the degree policy; expected one of {options}"
        ) from None


def axb(a: Polynomial, b: Polynomial, tol: float = DIVISION_TOL) -> Optional[Polynomial]:
    """
    Solve a·x = b, i.e. divide b by a exactly.

    The LTBT matrix A of a is factored as A = QR. The equation has a solution
    iff Qᴴb has no component outside the first deg(x)+1 rows; the remaining
    rows are checked against ``tol`` in the infinity norm and the quotient is
    read off R by back substitution.

    Returns
    -------
    x : Polynomial | None
        The quotient, or None when a does not divide b.

    Example
    -------
    >>> axb(Polynomial([1, 2]), Polynomial([1, 2, 3])) is None
    True
    """
    if a.iszero:
        raise ZeroDivisionError("division by the zero polynomial")
    if b.iszero:
        return Polynomial([0.0], symbol=a.symbol)

    dx = b.degree - a.degree
    if dx < 0:
        logger.debug(f"deg(b)={b.degree} < deg(a)={a.degree}, no polynomial quotient")
        return None

    A = ltbtmatrix(a, dx + 1)
    Q, R = householder_qr(A)
    y = Q.conj().T @ b.coef

    residual = np.linalg.norm(y[dx + 1 :], ord=np.inf) if y.shape[0] > dx + 1 else 0.0
    if residual >= tol:
        logger.debug(f"division not exact, residual {residual:.3e} >= {tol:.1e}")
        return None

    x = back_substitute(R[: dx + 1, :], y[: dx + 1])
    return Polynomial(x, symbol=a.symbol)


def _kernel_vector(N: np.ndarray) -> np.ndarray:
    """
    Pick one vector from the orthonormal kernel basis N.

    Each column is scaled so that its largest-magnitude entry is real
    positive; with more than one column the lexicographically smallest
    (rounded real parts, then imaginary parts) is chosen.
    """
    cols = []
    for k in range(N.shape[1]):
        v = N[:, k] / np.linalg.norm(N[:, k])
        i = int(np.argmax(np.abs(v)))
        v = v * (abs(v[i]) / v[i])
        cols.append(v)
    if len(cols) > 1:
        logger.debug(f"kernel of dimension {len(cols)}, picking a canonical column")

    def key(v):
        return tuple(np.round(np.concatenate([v.real, v.imag]), 8))

    return min(cols, key=key)


def axby0(a: Polynomial, b: Polynomial) -> Tuple[Polynomial, Polynomial]:
    """
    Solve the homogeneous equation a·x + b·y = 0 with y of minimal degree,
    that is, find the lowest-order representation -x/y of the fraction b/a.

    The pair (x, y) = (-b, a) always solves the equation. Starting from
    deg(x) = deg(b) - 1 the degrees of both unknowns are lowered one at a
    time for as long as the Sylvester matrix of the current size keeps a
    non-trivial kernel; the last kernel vector found gives the solution.

    Example
    -------
    >>> c = Polynomial([1, 1])
    >>> x, y = axby0(Polynomial([1, 2, 3]) * c, Polynomial([4, 5]) * c)
    >>> x.degree, y.degree
    (1, 2)
    """
    if a.iszero or b.iszero:
        raise ValueError("a and b must be non-zero polynomials")

    x, y = -b, a
    dx = b.degree - 1
    dy = a.degree - 1
    while dx >= 0 and dy >= 0:
        N = nullspace(sylvestermatrix(a, b, (dx + 1, dy + 1)))
        logger.debug(f"deg(x)={dx} deg(y)={dy} dim N(S)={N.shape[1]}")
        if N.shape[1] == 0:
            break
        v = _kernel_vector(N)
        x = Polynomial(v[: dx + 1], symbol=a.symbol)
        y = Polynomial(v[dx + 1 :], symbol=a.symbol)
        dx -= 1
        dy -= 1
    return x, y


def _degrees(da: int, db: int, dc: int, policy: DegreePolicy) -> Tuple[int, int, int]:
    """Return (deg x, deg y, size) of the square system for a·x + b·y = c."""
    if policy is DegreePolicy.MIN_Y:
        dy = da - 1
        m = max(da + 1, db + 1 + dy, dc + 1)
        dx = m - da - 1
    else:
        dx = db - 1
        m = max(db + 1, da + 1 + dx, dc + 1)
        dy = m - db - 1
    return dx, dy, m


def _satisfies(lhs: Polynomial, c: Polynomial, tol: float) -> bool:
    r = np.linalg.norm((lhs - c).coef, ord=np.inf)
    return bool(r <= tol * max(1.0, np.linalg.norm(c.coef, ord=np.inf)))


def axbyc(
    a: Polynomial,
    b: Polynomial,
    c: Polynomial,
    policy=DegreePolicy.MIN_Y,
    tol: float = VERIFY_TOL,
) -> Tuple[Optional[Polynomial], Optional[Polynomial]]:
    """
    Solve the linear Diophantine equation a·x + b·y = c.

    Parameters
    ----------
    a, b, c : Polynomial
    policy : DegreePolicy | str
        ``"miny"`` keeps deg(y) = deg(a) - 1, ``"minx"`` keeps
        deg(x) = deg(b) - 1; the other degree follows from the size of the
        square Sylvester system.
    tol : float
        Relative bound on ‖a·x + b·y - c‖∞ for accepting the solution.

    Returns
    -------
    (x, y) : (Polynomial, Polynomial) | (None, None)
        (None, None) when the computed pair does not satisfy the equation.

    Example
    -------
    >>> x, y = axbyc(Polynomial([1, 2, 3]), Polynomial([4, 5]), Polynomial([6, 7, 8]))
    >>> x.coef.round(4), y.coef.round(4)
    (array([4.1818]), array([ 0.4545, -0.9091]))
    """
    policy = _as_policy(policy)
    if a.iszero or b.iszero:
        raise ValueError("a and b must be non-zero polynomials")

    dx, dy, m = _degrees(a.degree, b.degree, c.degree, policy)
    S = sylvestermatrix(a, b, (dx + 1, dy + 1))
    rhs = pad_to(c.coef, m)

    try:
        xy = np.linalg.solve(S, rhs)
    except np.linalg.LinAlgError as e:
        logger.debug(f"{e}; Sylvester matrix is singular, falling back to least squares...")
        xy = np.linalg.lstsq(S, rhs, rcond=None)[0]

    x = Polynomial(xy[: dx + 1] if dx >= 0 else [0.0], symbol=a.symbol)
    y = Polynomial(xy[dx + 1 :] if dy >= 0 else [0.0], symbol=a.symbol)
    if not _satisfies(a * x + b * y, c, tol):
        logger.debug("solution of the Sylvester system does not satisfy a·x + b·y = c")
        return None, None
    return x, y


def axaxbb(a: Polynomial, b: Polynomial) -> Polynomial:
    """
    Solve the symmetric equation ã·x + a·x̃ = b + b̃ for x with real
    coefficients.

    With T = LTBT(a) the term a·x̃ is T·D·x, D = diag(+1, -1, +1, ...), so the
    system is (LTBT(ã) + T·D)·x = b + b̃. It is in general rectangular and
    rank deficient (x ↦ x + a·k with k̃ = -k leaves the left side unchanged)
    and is solved in the least squares sense.
    """
    bb = b + cconj(b)
    if bb.iszero:
        return Polynomial([0.0], symbol=a.symbol)

    dx = bb.degree - a.degree
    if dx < 0:
        raise ValueError(
            f"deg(b + b~)={bb.degree} is lower than deg(a)={a.degree}, no solution"
        )

    Tt = ltbtmatrix(cconj(a), dx + 1)
    T = ltbtmatrix(a, dx + 1)
    M = Tt + T @ alternating_signs(dx + 1)
    rhs = pad_to(bb.coef, M.shape[0])
    x = np.linalg.lstsq(M, rhs, rcond=None)[0]
    return Polynomial(x, symbol=a.symbol)


def axbycd(
    a: Polynomial,
    b: Polynomial,
    c: Polynomial,
    d: Polynomial,
    policy=DegreePolicy.MIN_Y,
    tol: float = VERIFY_TOL,
) -> Tuple[Optional[Polynomial], Optional[Polynomial]]:
    """
    Solve the symmetric equation ã·x + b̃·y = c + d̃.

    The x-block is the sign-corrected D·LTBT(a)·D, which is LTBT(ã), and the
    y-block is LTBT(b̃); degree selection, verification and the failure
    value are those of `axbyc`.
    """
    return axbyc(cconj(a), cconj(b), c + cconj(d), policy=policy, tol=tol)
