# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from polyeq.polynomials import LaurentPolynomial, Polynomial
from polyeq.transformations import cconj, conjreciprocal, dconj, scale, shift


def _random_polynomial(rng, n, complex_=False):
    c = rng.uniform(0.5, 2.0, size=n) * rng.choice([-1, 1], size=n)
    if complex_:
        c = c + 1j * rng.uniform(-1, 1, size=n)
    return Polynomial(c)


def test_scale():
    a = Polynomial(np.arange(1, 6))
    np.testing.assert_allclose(scale(a, 10).coef, [1, 20, 300, 4000, 50000])


def test_scale_laurent_negative_powers():
    a = LaurentPolynomial([1, 1, 1], first=-1)
    as_ = scale(a, 2)
    assert isinstance(as_, LaurentPolynomial)
    np.testing.assert_allclose(as_.coef, [0.5, 1.0, 2.0])
    assert as_.first == -1


def test_cconj_negates_odd_powers():
    assert cconj(Polynomial([1, 2, 3, 4])) == Polynomial([1, -2, 3, -4])
    assert cconj(Polynomial([1 + 1j, 2j])) == Polynomial([1 - 1j, 2j])


@pytest.mark.parametrize("transform", [cconj, conjreciprocal, dconj])
def test_conjugations_leave_argument_unchanged(transform):
    a = Polynomial([1, 2, 3, 4])
    transform(a)
    np.testing.assert_array_equal(a.coef, [1, 2, 3, 4])


@pytest.mark.parametrize("complex_", [False, True])
def test_cconj_involution(complex_):
    rng = np.random.default_rng(seed=1)
    for n in range(1, 8):
        a = _random_polynomial(rng, n, complex_)
        assert cconj(cconj(a)) == a


def test_conjreciprocal():
    assert conjreciprocal(Polynomial([1, 2, 3])) == Polynomial([3, 2, 1])
    assert conjreciprocal(Polynomial([1j, 2])) == Polynomial([2, -1j])


@pytest.mark.parametrize("complex_", [False, True])
def test_conjreciprocal_involution(complex_):
    rng = np.random.default_rng(seed=2)
    for n in range(1, 8):
        a = _random_polynomial(rng, n, complex_)
        assert conjreciprocal(conjreciprocal(a)) == a


def test_conjreciprocal_zero_constant_term_lowers_degree():
    a = Polynomial([0, 1, 2])
    assert conjreciprocal(a) == Polynomial([2, 1])
    assert conjreciprocal(conjreciprocal(a)) == Polynomial([1, 2])


def test_conjreciprocal_rejects_laurent():
    with pytest.raises(TypeError):
        conjreciprocal(LaurentPolynomial([1, 2], first=-1))


def test_dconj_laurent():
    a = LaurentPolynomial([1, 2, 3j], first=-1)
    at = dconj(a)
    assert (at.first, at.last) == (-1, 1)
    np.testing.assert_array_equal(at.coef, [-3j, 2, 1])
    assert dconj(at) == a


def test_dconj_ordinary_polynomial():
    at = dconj(Polynomial([1, 2, 3]))
    assert isinstance(at, LaurentPolynomial)
    assert (at.first, at.last) == (-2, 0)
    np.testing.assert_array_equal(at.coef, [3, 2, 1])


def test_dconj_evaluates_on_unit_circle():
    a = LaurentPolynomial([1 + 1j, 2, -0.5], first=-1)
    z = np.exp(1j * np.linspace(0, 2 * np.pi, 7))
    np.testing.assert_allclose(dconj(a)(z), np.conj(a(z)), atol=1e-12)


def test_shift():
    p = LaurentPolynomial([1, 2], first=-1)
    assert shift(p).first == 0
    assert shift(p, -3).first == -4
    np.testing.assert_array_equal(shift(p, 5).coef, p.coef)

    q = shift(Polynomial([1, 2]), -1)
    assert isinstance(q, LaurentPolynomial)
    assert (q.first, q.last) == (-1, 0)
