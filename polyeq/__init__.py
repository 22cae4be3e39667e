# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
polyeq
======

Solvers for algebraic equations whose unknowns are univariate polynomials,
built on structured (Toeplitz / Sylvester) matrices.

Public API
~~~~~~~~~~
- Polynomials
    - `Polynomial`, `LaurentPolynomial`
- Transformations
    - `scale`, `cconj`, `conjreciprocal`, `dconj`, `shift`
- Structured matrices
    - `ltbtmatrix`, `sylvestermatrix`, `sylvesterresultantmatrix`
- Linear equations
    - `axb`, `axby0`, `axbyc`, `axaxbb`, `axbycd`
- l1-optimal equations
    - `axycminl1`
- Analysis
    - `iscoprime`, `isschurstable`, `ishurwitzstable`, `isconjsymmetric`
- Spectral factorization
    - `spectralfactor`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import polyeq as pe
>>> a = pe.Polynomial([1, 2, 3]); b = pe.Polynomial([4, 5])
>>> x, y = pe.axbyc(a, b, pe.Polynomial([6, 7, 8]))
>>> (a * x + b * y).isapprox(pe.Polynomial([6, 7, 8]))
True
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .analysis import (
    iscoprime,
    isconjsymmetric,
    ishurwitzstable,
    isschurstable,
)
from .l1 import axycminl1
from .linear import (
    DegreePolicy,
    axaxbb,
    axb,
    axby0,
    axbyc,
    axbycd,
)
from .matrices import ltbtmatrix, sylvestermatrix, sylvesterresultantmatrix
from .polynomials import LaurentPolynomial, Polynomial
from .spectral import spectralfactor
from .transformations import cconj, conjreciprocal, dconj, scale, shift

__all__ = [
    "Polynomial",
    "LaurentPolynomial",
    "scale",
    "cconj",
    "conjreciprocal",
    "dconj",
    "shift",
    "ltbtmatrix",
    "sylvestermatrix",
    "sylvesterresultantmatrix",
    "DegreePolicy",
    "axb",
    "axby0",
    "axbyc",
    "axaxbb",
    "axbycd",
    "axycminl1",
    "iscoprime",
    "isschurstable",
    "ishurwitzstable",
    "isconjsymmetric",
    "spectralfactor",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show polyeq”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
