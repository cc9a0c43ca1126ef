"""Tests for the elementary complex functions."""

import math

import pytest

from complexlib.complex import IMAGINARY_UNIT, Complex
from complexlib.functions import acos, cos, exp, log, pow, sqrt


def assert_close(actual, expected, abs_tol=1e-12):
    assert actual.real == pytest.approx(expected.real, abs=abs_tol)
    assert actual.imaginary == pytest.approx(expected.imaginary, abs=abs_tol)


class TestSqrt:

    def test_sqrt_of_minus_one_is_i(self):
        assert_close(sqrt(Complex(-1, 0)), IMAGINARY_UNIT)

    def test_sqrt_of_positive_real(self):
        assert_close(sqrt(4), Complex(2, 0))

    def test_sqrt_of_huge_real_overflows(self):
        r = sqrt(Complex(1e200, 0))
        assert r.real == math.inf
        assert math.isnan(r.imaginary)

    def test_sqrt_squared(self):
        c = Complex(3, -4)
        r = sqrt(c)
        assert_close(r * r, c, abs_tol=1e-9)
        assert r.real > 0


class TestExpLog:

    def test_euler_identity(self):
        assert_close(exp(IMAGINARY_UNIT * Complex(math.pi, 0)), Complex(-1, 0))

    def test_exp_of_real(self):
        assert_close(exp(Complex(1, 0)), Complex(math.e, 0))

    def test_exp_overflow_is_infinite(self):
        assert exp(Complex(1000, 0)).real == math.inf

    def test_log_of_e(self):
        assert_close(log(Complex(math.e, 0)), Complex(1, 0))

    def test_log_of_negative_real_uses_principal_branch(self):
        assert_close(log(Complex(-1, 0)), Complex(0, math.pi))

    def test_log_of_zero(self):
        c = log(Complex(0, 0))
        assert c.real == -math.inf
        assert c.imaginary == 0.0

    def test_exp_inverts_log(self):
        c = Complex(0.5, -2)
        assert_close(exp(log(c)), c, abs_tol=1e-9)


class TestPow:

    def test_zero_base_is_exactly_zero(self):
        result = pow(Complex(0, 0), Complex(2, 0))
        assert result == Complex(0, 0)
        assert result.real == 0.0 and result.imaginary == 0.0

    def test_zero_base_with_negative_power(self):
        assert pow(Complex(0, 0), -1) == Complex(0, 0)

    def test_integer_power(self):
        assert_close(pow(Complex(2, 0), 3), Complex(8, 0), abs_tol=1e-9)
        assert_close(pow(Complex(1, 1), 2), Complex(0, 2), abs_tol=1e-9)

    def test_i_to_the_i(self):
        assert_close(pow(IMAGINARY_UNIT, IMAGINARY_UNIT), Complex(math.exp(-math.pi / 2), 0))

    def test_operator(self):
        assert_close(Complex(2, 0) ** 2, Complex(4, 0), abs_tol=1e-9)
        assert_close(2 ** Complex(3, 0), Complex(8, 0), abs_tol=1e-9)


class TestTrigonometry:

    @pytest.mark.parametrize("x", [0.0, 0.5, 1.0, math.pi / 3, math.pi, -2.0])
    def test_cos_of_real_matches_math(self, x):
        assert_close(cos(Complex(x, 0)), Complex(math.cos(x), 0))

    def test_cos_of_imaginary_is_cosh(self):
        assert_close(cos(Complex(0, 1)), Complex(math.cosh(1), 0))

    @pytest.mark.parametrize("x", [0.0, 0.25, 0.5, 0.9])
    def test_acos_of_real_matches_math(self, x):
        assert_close(acos(Complex(x, 0)), Complex(math.acos(x), 0), abs_tol=1e-9)

    def test_cos_inverts_acos(self):
        c = Complex(0.3, 0.4)
        assert_close(cos(acos(c)), c, abs_tol=1e-9)
