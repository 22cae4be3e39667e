# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Tuple

import numpy as np
from scipy.linalg import null_space

from .utils import EPS, result_dtype, scale_tol


def householder_qr(A: np.ndarray, mode: str = "complete") -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute the QR decomposition of an m-by-n matrix A using
    Householder transformations. Real and complex input.

    A = QR
    H = I - 2 w wᴴ,  ‖w‖ = 1

    Parameters
    ----------
    A : (m, n) ndarray
    mode : "complete" | "reduced"

    Returns
    -------
    complete:  Q : (m, m) unitary,            R : (m, n) upper-trapezoidal
    reduced:   Q : (m, k) orthonormal columns, R : (k, n), k = min(m, n)
    """
    if mode not in ("complete", "reduced"):
        raise ValueError(f"unsupported QR mode {mode!r}")
    A = np.asarray(A)
    dtype = result_dtype(A)
    R = A.astype(dtype, copy=True)
    m, n = R.shape
    Q = np.eye(m, dtype=dtype)
    tol = EPS * np.linalg.norm(R) if R.size else 0.0

    for j in range(min(m, n)):
        # ---- build the reflector for column j --------------------------------
        x = R[j:, j]
        norm_x = np.linalg.norm(x)
        if norm_x == 0 or norm_x <= tol:  # already zero
            continue
        # w = x + e^{i arg x0} ‖x‖ e₁
        w = x.copy()
        phase = x[0] / abs(x[0]) if x[0] != 0 else 1.0
        w[0] += phase * norm_x
        w /= np.linalg.norm(w)
        w = w.reshape(-1, 1)

        # ---- apply H from the left to R, accumulate Q = Q H --------------------
        R[j:, :] -= 2 * w @ (w.conj().T @ R[j:, :])
        Q[:, j:] -= 2 * (Q[:, j:] @ w) @ w.conj().T

    # force exact upper-trapezoidal shape / zero tiny noise
    R[np.tril_indices(m, -1, n)] = 0.0

    if mode == "reduced":
        k = min(m, n)
        return Q[:, :k], R[:k, :]
    return Q, R


def back_substitute(U: np.ndarray, c: np.ndarray) -> np.ndarray:
    """
    Parameters
    ----------
    U : (n, n) ndarray
        Upper-triangular matrix.
    c : (n,) or (n,k) ndarray
        Right-hand side.
    Returns
    -------
    x : (n,) or (n,k) ndarray
        Solution(s) of Ux = c.
    Raises
    ------
    ValueError : if the system is inconsistent or rank-deficient.
    """
    dtype = result_dtype(U, c)
    U = np.asarray(U, dtype=dtype)
    c = np.asarray(c, dtype=dtype)

    if c.ndim == 1:
        # (n,)  →  (n,1)
        c = c[:, None]
    n, k = c.shape
    x = np.zeros((n, k), dtype=dtype)
    tol = scale_tol(U)

    for i in reversed(range(n)):
        pivot = U[i, i]
        if abs(pivot) <= tol:
            if np.any(np.abs(c[i]) > tol):
                raise ValueError("inconsistent system (no solution)")
            else:
                raise ValueError("rank deficient (infinitely many solutions)")

        s = c[i] - U[i, i + 1 :] @ x[i + 1 :]
        x[i] = s / pivot

    # flatten if k == 1, regardless of ndim
    if x.shape[1] == 1:
        # (n,1)  →  (n,)
        return x.ravel()
    return x


def rank(A: np.ndarray) -> int:
    """Numerical rank (SVD based), 0 for an empty matrix."""
    A = np.asarray(A)
    if A.size == 0:
        return 0
    return int(np.linalg.matrix_rank(A))


def nullspace(A: np.ndarray) -> np.ndarray:
    """
    Orthonormal basis of the nullspace of A

    Returns
    -------
    N : (n, n-r) ndarray
        Columns form an orthonormal basis of N(A). If A has full column
        rank the returned array has shape (n, 0).
    """
    A = np.asarray(A)
    m, n = A.shape
    if n == 0:
        return np.zeros((0, 0), dtype=result_dtype(A))
    if m == 0:
        return np.eye(n, dtype=result_dtype(A))
    return null_space(A)
