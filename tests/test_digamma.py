"""
Tests for the digamma family and harmonic numbers.

Copyright (c) 2026 kmath contributors

MIT License
"""

import math

import numpy as np
import pytest
from scipy import special

from kmath import (
    Accuracy,
    digamma,
    digamma12,
    digamma_fast,
    digamma_ultra,
    pi_cot_pi,
    harmonic,
    harmonic12,
    H,
    H12,
)
from kmath.constants import DIGAMMA_INT, DIGAMMA_HALF_INT, EULER_GAMMA, GAMMAINT, GAMMAHALFINT, PHI

# psi(1), ..., psi(12)
INTEGER_VALUES = [
    -0.5772156649015329, 0.42278433509846713, 0.9227843350984671,
    1.2561176684318003, 1.5061176684318007, 1.7061176684318005,
    1.8727843350984674, 2.01564147795561, 2.14064147795561,
    2.2517525890667214, 2.351752589066721, 2.4426616799758123,
]

# psi(0.5), ..., psi(11.5)
HALF_INTEGER_VALUES = [
    -1.9635100260214235, 0.03648997397857652, 0.7031566406452432,
    1.103156640645243, 1.388870926359529, 1.611093148581751,
    1.792911330399933, 1.9467574842460866, 2.08009081757942,
    2.1977378764029494, 2.303001034297686, 2.398239129535781,
]


class TestKnownValues:
    """Test digamma at points with closed forms."""

    def test_one_is_minus_euler_gamma(self):
        """psi(1) = -gamma."""
        assert digamma(1.0) == pytest.approx(-0.5772156649015329, abs=1e-12)

    def test_half(self):
        """psi(1/2) = -gamma - 2 ln 2."""
        assert digamma(0.5) == pytest.approx(-1.9635100260214235, abs=1e-12)

    def test_integers(self):
        for n, expected in enumerate(INTEGER_VALUES, start=1):
            assert digamma(float(n)) == pytest.approx(expected, abs=1e-12)

    def test_half_integers(self):
        for n, expected in enumerate(HALF_INTEGER_VALUES):
            assert digamma(n + 0.5) == pytest.approx(expected, abs=1e-12)

    def test_negative_half_integer(self):
        """psi(-1/2) = psi(1/2) + 2."""
        assert digamma(-0.5) == pytest.approx(0.03648997397857652, abs=1e-12)

    def test_large_argument_uses_leading_terms(self):
        x = 1e9
        assert digamma(x) == pytest.approx(math.log(x) - 0.5 / x, rel=1e-15)

    def test_tiny_positive_argument(self):
        x = 1e-7
        expected = -EULER_GAMMA - 1.0 / x
        assert digamma(x) == pytest.approx(expected, rel=1e-13)

    def test_matches_scipy_on_grid(self):
        x = np.linspace(-30.5, 60.25, 1000)
        np.testing.assert_allclose(digamma(x), special.digamma(x), rtol=1e-10, atol=1e-10)


class TestPoles:
    """Test behavior at and near the nonpositive integers."""

    @pytest.mark.parametrize("x", [0.0, -1.0, -5.0, -100.0, -1e6])
    def test_pole_is_positive_infinity(self, x):
        assert digamma(x) == math.inf

    @pytest.mark.parametrize("accuracy", list(Accuracy))
    def test_pole_in_every_variant(self, accuracy):
        assert digamma(-3.0, accuracy) == math.inf

    def test_digamma12_pole(self):
        assert digamma12(0.0) == math.inf
        assert digamma12(-7.0) == math.inf

    def test_near_pole_sign_trend(self):
        """psi ~ -1/(x + n) next to the pole at -n."""
        for n in (0, 1, 5, 20):
            assert digamma(-n + 1e-9) < -1e8
            assert digamma(-n - 1e-9) > 1e8

    def test_near_pole_is_finite(self):
        assert math.isfinite(digamma(-2.0 + 1e-12))


class TestIdentities:
    """Test reflection and recurrence identities."""

    @pytest.mark.parametrize("x", [
        -999.3, -123.45, -8.5, -7.25, -2.6, -0.3, 0.1, 0.37, 2.75, 17.2, 512.9, 999.3,
    ])
    def test_reflection(self, x):
        """psi(x) - psi(1 - x) = -pi cot(pi x)."""
        expected = -math.pi / math.tan(math.pi * (x - math.floor(x)))
        assert digamma(x) - digamma(1.0 - x) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("x", [
        -999.7, -50.5, -8.2, -7.9, -3.3, -0.6, -1e-3, 0.2, 1.3, 11.5, 12.0, 99.9, 5e4,
    ])
    def test_recurrence(self, x):
        """psi(x + 1) - psi(x) = 1 / x."""
        assert digamma(x + 1.0) - digamma(x) == pytest.approx(1.0 / x, rel=1e-12, abs=1e-9)


class TestNonFinite:
    """Non-finite inputs pass through unchanged."""

    @pytest.mark.parametrize("fn", [digamma, digamma12, digamma_fast, digamma_ultra])
    def test_nan(self, fn):
        assert math.isnan(fn(math.nan))

    @pytest.mark.parametrize("fn", [digamma, digamma12, digamma_fast, digamma_ultra])
    def test_infinities(self, fn):
        assert fn(math.inf) == math.inf
        assert fn(-math.inf) == -math.inf


class TestAccuracyProfiles:
    """Test the FAST, ULTRA and HIGH_PRECISION variants."""

    def test_fast_close_to_standard(self):
        x = np.linspace(-20.3, 40.1, 700)
        np.testing.assert_allclose(digamma_fast(x), digamma(x), rtol=1e-5, atol=1e-4)

    def test_ultra_is_coarse_but_close(self):
        x = np.linspace(0.05, 40.0, 500)
        assert np.max(np.abs(digamma_ultra(x) - special.digamma(x))) < 0.05

    def test_accuracy_by_name(self):
        assert digamma(2.3, "fast") == digamma_fast(2.3)
        assert digamma(2.3, "ULTRA") == digamma_ultra(2.3)
        assert digamma(2.3, Accuracy.STANDARD) == digamma(2.3)

    def test_high_precision_is_digamma12(self):
        assert digamma(3.7, Accuracy.HIGH_PRECISION) == digamma12(3.7)
        assert digamma(3.7, "high_precision") == digamma12(3.7)

    def test_unknown_accuracy_raises(self):
        with pytest.raises(ValueError):
            digamma(1.0, "medium")


class TestDigamma12:
    """Test the high-precision variant and its exact shortcuts."""

    def test_integer_table(self):
        for n, expected in enumerate(INTEGER_VALUES[:11], start=1):
            assert digamma12(float(n)) == pytest.approx(expected, abs=1e-14)

    def test_half_integer_table(self):
        for n, expected in enumerate(HALF_INTEGER_VALUES):
            assert digamma12(n + 0.5) == pytest.approx(expected, abs=1e-13)

    def test_matches_scipy(self):
        x = np.linspace(-25.3, 45.7, 800)
        np.testing.assert_allclose(digamma12(x), special.digamma(x), rtol=1e-12, atol=1e-12)

    def test_large_precision_beyond_harmonic_table(self):
        """Integers past the 29-entry rational table are summed directly."""
        for n in (30, 35, 39):
            assert digamma12(float(n), precision=40) == pytest.approx(
                special.digamma(float(n)), abs=1e-13
            )

    def test_small_precision_still_accurate(self):
        assert digamma12(0.3, precision=3) == pytest.approx(special.digamma(0.3), abs=1e-5)

    def test_precision_changes_shift_target(self):
        assert digamma12(5.3, precision=1) != digamma12(5.3, precision=20)

    @pytest.mark.parametrize("x", [5e-7, -5e-7, 2e-6, -2e-6, 1e-6])
    def test_near_zero(self, x):
        """Arguments inside and just outside the 1e-6 Laurent/reflection band."""
        assert digamma12(x) == pytest.approx(special.digamma(x), rel=1e-12)

    def test_large_argument(self):
        """x >= 1e8 uses ln(x) - 1/(2x) directly."""
        assert digamma12(1e9) == pytest.approx(special.digamma(1e9), rel=1e-12)
        assert digamma12(1e8) == pytest.approx(math.log(1e8) - 0.5 / 1e8, rel=1e-15)


class TestTables:
    """Test the digamma lookup tables."""

    def test_integer_table_matches(self):
        np.testing.assert_allclose(DIGAMMA_INT, INTEGER_VALUES, rtol=0, atol=1e-14)

    def test_half_integer_table_matches(self):
        np.testing.assert_allclose(DIGAMMA_HALF_INT, HALF_INTEGER_VALUES, rtol=0, atol=1e-14)

    def test_tables_are_read_only(self):
        with pytest.raises(ValueError):
            DIGAMMA_INT[0] = 0.0

    def test_legacy_aliases(self):
        assert GAMMAINT is DIGAMMA_INT
        assert GAMMAHALFINT is DIGAMMA_HALF_INT

    def test_golden_ratio(self):
        assert PHI * PHI == pytest.approx(PHI + 1.0, rel=1e-15)


class TestPiCotPi:
    """Test the stable pi*cot(pi*x) helper."""

    def test_quarter(self):
        assert pi_cot_pi(0.25) == pytest.approx(math.pi, rel=1e-14)

    def test_periodic(self):
        assert pi_cot_pi(7.25) == pytest.approx(math.pi, rel=1e-12)

    def test_near_integer_uses_series(self):
        y = 1e-7
        assert pi_cot_pi(3.0 + y) == pytest.approx(1.0 / y, rel=1e-8)
        assert pi_cot_pi(-y) == pytest.approx(-1.0 / y, rel=1e-12)

    def test_integer_is_infinite(self):
        assert pi_cot_pi(2.0) == math.inf

    def test_matches_tan(self):
        x = np.linspace(0.05, 0.95, 19)
        np.testing.assert_allclose(pi_cot_pi(x), np.pi / np.tan(np.pi * x), rtol=1e-12, atol=1e-12)


class TestArrays:
    """Test scalar/array handling."""

    def test_scalar_returns_float(self):
        assert isinstance(digamma(1.5), float)
        assert isinstance(digamma12(1.5), float)

    def test_int_argument(self):
        assert digamma(1) == digamma(1.0)

    def test_list_returns_array(self):
        result = digamma([1.0, 0.5, -2.0])
        assert isinstance(result, np.ndarray)
        assert result.shape == (3,)
        assert result[2] == math.inf

    def test_shape_preserved(self):
        x = np.linspace(0.5, 6.0, 12).reshape(3, 4)
        assert digamma(x).shape == (3, 4)
        assert digamma12(x).shape == (3, 4)

    def test_array_matches_scalar(self):
        x = np.array([-9.5, -0.25, 0.75, 3.0, 17.5])
        for value, expected in zip(digamma(x), [digamma(v) for v in x]):
            assert value == expected

    def test_mixed_special_values(self):
        result = digamma(np.array([math.nan, math.inf, -1.0, 1.0]))
        assert math.isnan(result[0])
        assert result[1] == math.inf
        assert result[2] == math.inf
        assert result[3] == pytest.approx(-EULER_GAMMA, abs=1e-12)


class TestHarmonic:
    """Test harmonic numbers H(x) = psi(x + 1) + gamma."""

    def test_h10(self):
        assert harmonic(10) == pytest.approx(2.9289682539682538, abs=1e-11)

    def test_h0(self):
        assert harmonic(0) == pytest.approx(0.0, abs=1e-12)

    def test_h12_is_exact_for_small_integers(self):
        assert H12(10) == pytest.approx(7381.0 / 2520.0, abs=1e-14)

    def test_aliases(self):
        assert H is harmonic
        assert H12 is harmonic12

    def test_fractional(self):
        """H(1/2) = 2 - 2 ln 2."""
        assert harmonic(0.5) == pytest.approx(2.0 - 2.0 * math.log(2.0), abs=1e-12)

    def test_array(self):
        n = np.arange(1, 6)
        expected = np.cumsum(1.0 / n)
        np.testing.assert_allclose(harmonic(n), expected, atol=1e-12)
        np.testing.assert_allclose(harmonic12(n), expected, atol=1e-14)
