# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pytest

from polyeq.analysis import (
    iscoprime,
    isconjsymmetric,
    ishurwitzstable,
    isschurstable,
)
from polyeq.polynomials import LaurentPolynomial, Polynomial
from polyeq.transformations import cconj


def test_iscoprime():
    a = Polynomial([1, 2, 3])
    assert iscoprime(a, Polynomial([1, 2]))
    assert not iscoprime(a, a * Polynomial([1, 2]))


def test_iscoprime_constants_and_zero():
    assert iscoprime(Polynomial([2]), Polynomial([3]))
    assert iscoprime(Polynomial([2]), Polynomial([1, 1]))
    assert iscoprime(Polynomial([2]), Polynomial([0]))
    assert not iscoprime(Polynomial([1, 1]), Polynomial([0]))


def test_ishurwitzstable():
    assert ishurwitzstable(Polynomial.fromroots([-1, -2, -3 + 4j, -3 - 4j]))
    assert not ishurwitzstable(Polynomial.fromroots([-1, -2, 3 + 4j, 3 - 4j]))


def test_isschurstable():
    assert isschurstable(Polynomial.fromroots([-1 / 2, 0, 2 / 3, -1j / 3, 1j / 3]))
    assert not isschurstable(Polynomial.fromroots([2, 0, 2 / 3, -3j, 3j]))


def test_constant_is_stable():
    assert isschurstable(Polynomial([3]))
    assert ishurwitzstable(Polynomial([3]))


@pytest.mark.parametrize(
    "a,expected",
    [
        (Polynomial([1, 0, 2, 0, 3]), True),
        (Polynomial([1, 1]), False),
        (Polynomial([1, 1j]), True),
        (Polynomial([1j, 0, 1]), False),
        (LaurentPolynomial([3, 2, 1, 2, 3], first=-2), True),
        (LaurentPolynomial([3, 2, 1, 2, 3], first=-1), False),
        (LaurentPolynomial([1j, 2, -1j], first=-1), True),
    ],
)
def test_isconjsymmetric(a, expected):
    assert isconjsymmetric(a) is expected


def test_isconjsymmetric_with_tolerance():
    b = Polynomial([0.1, 0.7, 0.3])
    a = cconj(b) * b + Polynomial([0, 1e-14])
    assert not isconjsymmetric(a)
    assert isconjsymmetric(a, tol=1e-12)
