# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-12

# Infinity-norm bound on the residual part of the projected right-hand side
# below which a polynomial division is accepted as exact.
DIVISION_TOL: float = 1e-8

# Relative bound on ‖a·x + b·y - c‖∞ for accepting a Diophantine solution.
VERIFY_TOL: float = 1e-8


def scale_tol(A: np.ndarray) -> float:
    """Return a tolerance relative to the infinity norm of A."""
    if A.size == 0:
        return EPS
    return EPS * np.linalg.norm(A, ord=np.inf)


def result_dtype(*arrays) -> np.dtype:
    """Common floating dtype: complex if any input is complex, else float64."""
    if any(np.iscomplexobj(a) for a in arrays):
        return np.dtype(complex)
    return np.dtype(float)


def pad_to(v: np.ndarray, n: int) -> np.ndarray:
    """
    Zero-pad the vector v at the end to length n.

    Raises
    ------
    ValueError : if v already has more than n entries.
    """
    v = np.asarray(v)
    if v.shape[0] > n:
        raise ValueError(f"cannot pad a vector of length {v.shape[0]} to {n}")
    out = np.zeros(n, dtype=result_dtype(v))
    out[: v.shape[0]] = v
    return out
