# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Polynomial values
=================

Two numpy-backed variants share one interface:

- `Polynomial`        a_0 + a_1 s + ... + a_n s^n
- `LaurentPolynomial` a_m z^m + ... + a_n z^n, m possibly negative

Both store a dense coefficient vector ``coef`` (lowest power first) together
with the exponent ``first`` of ``coef[0]``. Exact zero padding is trimmed on
construction so that ``coef`` always spans the non-zero terms only.
"""

from typing import Optional, Tuple

import numpy as np
from numpy.polynomial import polynomial as P

from .utils import EPS, result_dtype


class _PolynomialBase:
    """Storage and arithmetic shared by both polynomial variants."""

    def __init__(self, coef, first: int = 0, symbol: str = "s"):
        arr = np.asarray(coef)
        if arr.ndim == 0:
            arr = arr.reshape(1)
        if arr.ndim != 1:
            raise ValueError("coefficients must form a 1-D sequence")
        if arr.size == 0:
            raise ValueError("at least one coefficient is required")
        if not np.issubdtype(arr.dtype, np.number) or arr.dtype == np.bool_:
            raise TypeError(f"coefficients must be numeric, got {arr.dtype}")

        arr = arr.astype(result_dtype(arr), copy=True)
        first, arr = self._trim(int(first), arr)
        self.coef = arr
        self.first = first
        self.symbol = symbol

    @staticmethod
    def _trim(first: int, arr: np.ndarray) -> Tuple[int, np.ndarray]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # structure
    # ------------------------------------------------------------------
    @property
    def last(self) -> int:
        return self.first + self.coef.shape[0] - 1

    @property
    def iszero(self) -> bool:
        return not np.any(self.coef)

    @property
    def degree(self) -> int:
        """Highest exponent with a non-zero coefficient (-1 for zero)."""
        return -1 if self.iszero else self.last

    def coeffs(self) -> np.ndarray:
        return self.coef.copy()

    def __getitem__(self, k: int):
        if not isinstance(k, (int, np.integer)):
            raise TypeError("polynomials are indexed by integer exponents")
        i = int(k) - self.first
        if 0 <= i < self.coef.shape[0]:
            return self.coef[i]
        return self.coef.dtype.type(0)

    def __call__(self, x):
        xv = np.asarray(x)
        if not np.iscomplexobj(xv):
            xv = xv.astype(float)
        val = P.polyval(xv, self.coef)
        if self.first:
            val = val * xv**self.first
        return val

    def roots(self) -> np.ndarray:
        """
        Roots of the ordinary polynomial z^{-first} a(z), multiplicity
        given by repetition.
        """
        if self.coef.shape[0] < 2:
            return np.zeros(0, dtype=complex)
        return P.polyroots(self.coef)

    def chop(self, atol: float = EPS):
        """Return a copy with every coefficient of magnitude <= atol set to 0."""
        c = self.coef.copy()
        c[np.abs(c) <= atol] = 0
        return self._new(type(self), c, self.first, self.symbol)

    def conj(self):
        """Complex-conjugate every coefficient."""
        return self._new(type(self), self.coef.conj(), self.first, self.symbol)

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------
    @staticmethod
    def _new(cls, coef, first, symbol):
        if cls is Polynomial:
            if first < 0:
                raise ValueError("an ordinary polynomial cannot hold negative powers")
            if first > 0:
                coef = np.concatenate([np.zeros(first, dtype=coef.dtype), coef])
            return Polynomial(coef, symbol=symbol)
        return LaurentPolynomial(coef, first=first, symbol=symbol)

    def _coerce(self, other) -> Optional["_PolynomialBase"]:
        if isinstance(other, _PolynomialBase):
            return other
        if isinstance(other, (int, float, complex, np.number)):
            return Polynomial([other], symbol=self.symbol)
        return None

    def _kind(self, other) -> type:
        if isinstance(self, LaurentPolynomial) or isinstance(other, LaurentPolynomial):
            return LaurentPolynomial
        return Polynomial

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        lo = min(self.first, o.first)
        hi = max(self.last, o.last)
        out = np.zeros(hi - lo + 1, dtype=result_dtype(self.coef, o.coef))
        out[self.first - lo : self.last - lo + 1] += self.coef
        out[o.first - lo : o.last - lo + 1] += o.coef
        return self._new(self._kind(o), out, lo, self.symbol)

    __radd__ = __add__

    def __neg__(self):
        return self._new(type(self), -self.coef, self.first, self.symbol)

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self + (-o)

    def __rsub__(self, other):
        return (-self) + other

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        out = np.convolve(self.coef, o.coef)
        return self._new(self._kind(o), out, self.first + o.first, self.symbol)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, (int, float, complex, np.number)):
            return NotImplemented
        return self._new(type(self), self.coef / other, self.first, self.symbol)

    # ------------------------------------------------------------------
    # comparison
    # ------------------------------------------------------------------
    def __eq__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if self.iszero or o.iszero:
            return self.iszero and o.iszero
        return self.first == o.first and np.array_equal(self.coef, o.coef)

    __hash__ = None

    def isapprox(self, other, rtol: float = 1e-8, atol: float = 0.0) -> bool:
        """
        ‖self - other‖₂ <= atol + rtol · max(‖self‖₂, ‖other‖₂)
        on the coefficient vectors.
        """
        o = self._coerce(other)
        if o is None:
            raise TypeError(f"cannot compare a polynomial with {type(other).__name__}")
        diff = np.linalg.norm((self - o).coef)
        scale = max(np.linalg.norm(self.coef), np.linalg.norm(o.coef))
        return bool(diff <= atol + rtol * scale)

    # ------------------------------------------------------------------
    # display
    # ------------------------------------------------------------------
    def _terms(self) -> str:
        if self.iszero:
            return "0"
        parts = []
        for k, c in enumerate(self.coef, start=self.first):
            if c == 0:
                continue
            if np.iscomplexobj(c):
                cs = f"({c.real:g}{c.imag:+g}j)"
            else:
                cs = f"{c:g}"
            if k == 0:
                parts.append(cs)
            elif k == 1:
                parts.append(f"{cs}*{self.symbol}")
            else:
                parts.append(f"{cs}*{self.symbol}^{k}")
        return " + ".join(parts).replace("+ -", "- ")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._terms()})"


class Polynomial(_PolynomialBase):
    """
    Ordinary univariate polynomial a_0 + a_1 s + ... + a_n s^n.

    Parameters
    ----------
    coef : sequence of numbers
        Coefficients, constant term first.
    symbol : str
        Name of the variable, used for display only.

    Example
    -------
    >>> a = Polynomial([1, 2, 3])
    >>> a.degree
    2
    """

    def __init__(self, coef, symbol: str = "s"):
        super().__init__(coef, first=0, symbol=symbol)

    @staticmethod
    def _trim(first, arr):
        nz = np.flatnonzero(arr)
        if nz.size == 0:
            return 0, arr[:1] * 0
        return first, arr[: nz[-1] + 1]

    @classmethod
    def fromroots(cls, roots, symbol: str = "s") -> "Polynomial":
        """
        Monic polynomial with the given roots. The coefficients come out
        real when the roots are closed under complex conjugation.
        """
        r = np.atleast_1d(np.asarray(roots))
        if r.size == 0:
            return cls([1.0], symbol=symbol)
        c = P.polyfromroots(r)
        if np.iscomplexobj(c):
            c = np.real_if_close(c, tol=1000)
        return cls(c, symbol=symbol)


class LaurentPolynomial(_PolynomialBase):
    """
    Univariate Laurent polynomial a_m z^m + ... + a_n z^n.

    ``coef[0]`` is the coefficient of z^first; ``first`` may be negative.
    """

    def __init__(self, coef, first: int = 0, symbol: str = "z"):
        super().__init__(coef, first=first, symbol=symbol)

    @staticmethod
    def _trim(first, arr):
        nz = np.flatnonzero(arr)
        if nz.size == 0:
            return 0, arr[:1] * 0
        return first + int(nz[0]), arr[nz[0] : nz[-1] + 1]

    @classmethod
    def from_polynomial(cls, p: _PolynomialBase) -> "LaurentPolynomial":
        return cls(p.coef, first=p.first, symbol=p.symbol)


def as_laurent(p: _PolynomialBase) -> LaurentPolynomial:
    """View either variant as a Laurent polynomial."""
    if isinstance(p, LaurentPolynomial):
        return p
    if isinstance(p, Polynomial):
        return LaurentPolynomial.from_polynomial(p)
    raise TypeError(f"expected a polynomial, got {type(p).__name__}")
