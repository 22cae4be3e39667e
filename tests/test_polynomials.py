# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

import polyeq
from polyeq.polynomials import LaurentPolynomial, Polynomial, as_laurent


def test_public_api_is_importable():
    for name in polyeq.__all__:
        assert hasattr(polyeq, name), name
    assert isinstance(polyeq.__version__, str)


def test_degree_ignores_trailing_zeros():
    a = Polynomial([1, 2, 0, 0])
    assert a.degree == 1
    assert a.coef.shape == (2,)
    assert a == Polynomial([1.0, 2.0])


def test_zero_polynomial():
    z = Polynomial([0, 0, 0])
    assert z.iszero
    assert z.degree == -1
    assert z == Polynomial([0])
    assert z == LaurentPolynomial([0.0], first=-3)


def test_laurent_trims_both_ends():
    a = LaurentPolynomial([0, 1, 2, 0], first=-2)
    assert (a.first, a.last) == (-1, 0)
    np.testing.assert_array_equal(a.coef, [1.0, 2.0])
    assert a.degree == 0


def test_coefficient_access_by_exponent():
    a = LaurentPolynomial([3, 2, 1], first=-1)
    assert a[-1] == 3
    assert a[0] == 2
    assert a[1] == 1
    assert a[5] == 0
    assert a[-4] == 0

    p = Polynomial([1, 2, 3])
    assert p[-1] == 0
    with pytest.raises(TypeError):
        p[1.5]


def test_evaluation():
    assert Polynomial([1, 2, 3])(2.0) == pytest.approx(17.0)
    assert LaurentPolynomial([1, 0, 1], first=-1)(2.0) == pytest.approx(2.5)
    np.testing.assert_allclose(Polynomial([0, 1])(np.array([1j, 2])), [1j, 2])


def test_arithmetic():
    a = Polynomial([1, 1])
    b = Polynomial([1, -1])
    assert a * b == Polynomial([1, 0, -1])
    assert a + b == Polynomial([2])
    assert a - a == Polynomial([0])
    assert 2 * a == Polynomial([2, 2])
    assert a + 1 == Polynomial([2, 1])
    assert 1 - a == Polynomial([0, -1])
    assert -a == Polynomial([-1, -1])
    assert a / 2 == Polynomial([0.5, 0.5])


def test_mixed_arithmetic_gives_laurent():
    p = Polynomial([1, 1])
    q = LaurentPolynomial([1], first=-1)
    r = p * q
    assert isinstance(r, LaurentPolynomial)
    assert (r.first, r.last) == (-1, 0)
    assert isinstance(p + q, LaurentPolynomial)
    assert isinstance(p * p, Polynomial)


def test_complex_coefficients_kept():
    a = Polynomial([1, 1j])
    assert np.iscomplexobj(a.coef)
    assert a * a == Polynomial([1, 2j, -1])


def test_fromroots_and_roots():
    a = Polynomial.fromroots([1j, -1j])
    assert not np.iscomplexobj(a.coef)
    np.testing.assert_allclose(a.coef, [1.0, 0.0, 1.0], atol=1e-14)

    r = np.array([-1.0, -2.0, 3.0])
    b = Polynomial.fromroots(r)
    np.testing.assert_allclose(np.sort(b.roots().real), np.sort(r), atol=1e-10)
    assert Polynomial([5]).roots().shape == (0,)


def test_isapprox_and_chop():
    a = Polynomial([1, 2, 3])
    assert a.isapprox(Polynomial([1, 2, 3 + 1e-12]))
    assert not a.isapprox(Polynomial([1, 2, 3.1]))
    assert Polynomial([1, 2, 1e-15]).chop() == Polynomial([1, 2])
    assert Polynomial([1, 2, 1e-3]).chop(atol=1e-2).degree == 1


def test_equality_ignores_symbol():
    assert Polynomial([1, 2], symbol="s") == Polynomial([1, 2], symbol="x")
    assert Polynomial([1, 2]) != Polynomial([1, 3])


def test_invalid_coefficients():
    with pytest.raises(ValueError):
        Polynomial([])
    with pytest.raises(ValueError):
        Polynomial([[1, 2], [3, 4]])
    with pytest.raises(TypeError):
        Polynomial(["a", "b"])


def test_as_laurent():
    p = Polynomial([1, 2])
    q = as_laurent(p)
    assert isinstance(q, LaurentPolynomial)
    assert (q.first, q.last) == (0, 1)
    assert as_laurent(q) is q
    with pytest.raises(TypeError):
        as_laurent([1, 2])


def test_repr():
    assert repr(Polynomial([1, 0, -3])) == "Polynomial(1 - 3*s^2)"
    assert repr(LaurentPolynomial([2, 1], first=-1)) == "LaurentPolynomial(2*z^-1 + 1)"
