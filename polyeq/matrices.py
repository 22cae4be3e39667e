# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Structured matrices built from polynomial coefficients
"""

from typing import Optional, Tuple

import numpy as np

from .utils import result_dtype


def ltbtmatrix(a, c: int) -> np.ndarray:
    """
    Lower triangular banded Toeplitz (LTBT) matrix of the polynomial a with
    c columns, i.e. the matrix of x ↦ a·x for x of degree c - 1.

    Parameters
    ----------
    a : Polynomial | LaurentPolynomial
        For a Laurent polynomial with range [m, n] the band holds the
        coefficients a_m ... a_n.
    c : int
        Number of columns, c >= 1.

    Returns
    -------
    T : (n - m + c, c) ndarray
        T[i, j] = a_{m + i - j} for 0 <= i - j <= n - m, zero elsewhere.

    Example
    -------
    >>> ltbtmatrix(Polynomial([1, 2, 3, 4]), 3)
    array([[1., 0., 0.],
           [2., 1., 0.],
           [3., 2., 1.],
           [4., 3., 2.],
           [0., 4., 3.],
           [0., 0., 4.]])
    """
    if int(c) < 1:
        raise ValueError("an LTBT matrix needs at least one column")
    c = int(c)
    band = a.coef
    n = band.shape[0]
    T = np.zeros((n + c - 1, c), dtype=band.dtype)
    for j in range(c):
        T[j : j + n, j] = band
    return T


def _block(a, w: int) -> np.ndarray:
    if w == 0:
        return np.zeros((0, 0), dtype=a.coef.dtype)
    return ltbtmatrix(a, w)


def sylvestermatrix(
    a,
    b,
    widths: Optional[Tuple[int, int]] = None,
    *,
    degx: Optional[int] = None,
) -> np.ndarray:
    """
    Sylvester matrix [LTBT(a, w1)  LTBT(b, w2)] of the map
    (x, y) ↦ a·x + b·y with deg x = w1 - 1 and deg y = w2 - 1.

    The two blocks are zero-padded at the bottom to a common row count.
    Without ``widths`` the default-size matrix is built from ``degx``
    (default ``degree(b) - 1``): w1 = degx + 1 and
    w2 = degree(a) + degx - degree(b) + 1, which for the default gives the
    square (da + db)-by-(da + db) resultant-size matrix.

    Parameters
    ----------
    a, b : Polynomial
    widths : (int, int) | None
        Column counts of the two blocks. A width of 0 gives an empty block.
    degx : int | None
        Degree of x for the default-size form; ignored with ``widths``.

    Example
    -------
    >>> sylvestermatrix(Polynomial([1, 2, 3]), Polynomial([4, 5]))
    array([[1., 4., 0.],
           [2., 5., 4.],
           [3., 0., 5.]])
    """
    if widths is None:
        dx = b.degree - 1 if degx is None else int(degx)
        dy = a.degree + dx - b.degree
        widths = (dx + 1, dy + 1)

    w1, w2 = (int(w) for w in widths)
    if w1 < 0 or w2 < 0:
        raise ValueError(f"block widths must be non-negative, got {widths}")

    A = _block(a, w1)
    B = _block(b, w2)
    rows = max(A.shape[0], B.shape[0])

    S = np.zeros((rows, w1 + w2), dtype=result_dtype(a.coef, b.coef))
    S[: A.shape[0], :w1] = A
    S[: B.shape[0], w1:] = B
    return S


def sylvesterresultantmatrix(a, b) -> np.ndarray:
    """
    Square (da + db)-by-(da + db) Sylvester matrix whose determinant is the
    resultant of a and b.
    """
    return sylvestermatrix(a, b, (b.degree, a.degree))


def alternating_signs(n: int) -> np.ndarray:
    """Diagonal matrix diag(+1, -1, +1, ...) of size n."""
    return np.diag((-1.0) ** np.arange(n))
