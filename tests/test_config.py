"""
Tests for config module and error handling utilities.

Copyright (c) 2026 kmath contributors

MIT License
"""

import math

import numpy as np
import pytest
from kmath.config import (
    ErrorMode,
    set_error_mode,
    get_error_mode,
    handle_error,
)
from kmath import digamma, digamma12, signed_noise, random_int, random_perm


class TestErrorMode:
    """Test ErrorMode enum."""

    def test_strict_mode_value(self):
        assert ErrorMode.STRICT.value == "strict"

    def test_lenient_mode_value(self):
        assert ErrorMode.LENIENT.value == "lenient"


class TestGetSetErrorMode:
    """Test get/set error mode functions."""

    def setup_method(self):
        """Save original mode before each test."""
        self._original_mode = get_error_mode()

    def teardown_method(self):
        """Restore original mode after each test."""
        set_error_mode(self._original_mode)

    def test_default_is_strict(self):
        set_error_mode(ErrorMode.STRICT)
        assert get_error_mode() == ErrorMode.STRICT

    def test_set_lenient(self):
        set_error_mode(ErrorMode.LENIENT)
        assert get_error_mode() == ErrorMode.LENIENT

    def test_set_strict(self):
        set_error_mode(ErrorMode.LENIENT)
        set_error_mode(ErrorMode.STRICT)
        assert get_error_mode() == ErrorMode.STRICT


class TestHandleError:
    """Test handle_error utility function."""

    def test_strict_mode_raises(self):
        set_error_mode(ErrorMode.STRICT)
        with pytest.raises(RuntimeError, match="test error"):
            handle_error("test error")

    def test_lenient_mode_warns(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        result = handle_error("test warning")
        assert result is True
        assert "test warning" in caplog.text

    def test_fatal_always_raises_in_strict(self):
        set_error_mode(ErrorMode.STRICT)
        with pytest.raises(RuntimeError, match="fatal error"):
            handle_error("fatal error", fatal=True)

    def test_fatal_always_raises_in_lenient(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(RuntimeError, match="fatal error"):
            handle_error("fatal error", fatal=True)

    def test_custom_exception_class(self):
        set_error_mode(ErrorMode.STRICT)
        with pytest.raises(ValueError, match="value error"):
            handle_error("value error", exception_class=ValueError)

    def test_override_mode_parameter(self):
        set_error_mode(ErrorMode.STRICT)
        # Even in strict mode, passing lenient should warn
        result = handle_error("override test", error_mode=ErrorMode.LENIENT)
        assert result is True

    def test_override_to_strict_raises(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(RuntimeError, match="override test"):
            handle_error("override test", error_mode=ErrorMode.STRICT)


class TestArgumentErrorHandling:
    """Argument validation in the public functions follows the error mode."""

    def test_precision_below_one_strict_raises(self):
        set_error_mode(ErrorMode.STRICT)
        with pytest.raises(ValueError, match="precision"):
            digamma12(2.5, precision=0)

    def test_precision_below_one_lenient_clamps(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        result = digamma12(2.5, precision=0)
        assert "precision" in caplog.text
        assert result == digamma12(2.5, precision=1)

    def test_fractional_precision_strict_raises(self):
        set_error_mode(ErrorMode.STRICT)
        with pytest.raises(ValueError, match="integer"):
            digamma12(2.5, precision=7.5)

    def test_fractional_precision_lenient_rounds_up(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        result = digamma12(2.5, precision=7.5)
        assert "integer" in caplog.text
        assert result == digamma12(2.5, precision=8)

    @pytest.mark.parametrize("precision", [math.inf, -math.inf, math.nan])
    def test_non_finite_precision_strict_raises(self, precision):
        set_error_mode(ErrorMode.STRICT)
        with pytest.raises(ValueError, match="finite"):
            digamma12(2.5, precision=precision)

    @pytest.mark.parametrize("precision", [math.inf, math.nan])
    def test_non_finite_precision_lenient_uses_default(self, caplog, precision):
        set_error_mode(ErrorMode.LENIENT)
        result = digamma12(2.5, precision=precision)
        assert "finite" in caplog.text
        assert result == digamma12(2.5)

    def test_unknown_accuracy_always_fatal(self):
        """An unknown accuracy name raises even in lenient mode."""
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(ValueError, match="Unknown accuracy"):
            digamma(1.0, accuracy="sloppy")

    def test_noise_dimension_always_fatal(self):
        set_error_mode(ErrorMode.LENIENT)
        with pytest.raises(ValueError, match="1 to 4 coordinates"):
            signed_noise(0.1, 0.2, 0.3, 0.4, 0.5)

    def test_inverted_range_strict_raises(self):
        set_error_mode(ErrorMode.STRICT)
        with pytest.raises(ValueError, match="exceeds"):
            random_int(5, 1, rng=np.random.default_rng(0))

    def test_inverted_range_lenient_swaps(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        value = random_int(5, 1, rng=np.random.default_rng(0))
        assert "exceeds" in caplog.text
        assert 1 <= value <= 5

    def test_negative_perm_lenient_is_empty(self, caplog):
        set_error_mode(ErrorMode.LENIENT)
        perm = random_perm(-3, rng=np.random.default_rng(0))
        assert perm.size == 0
        assert "size" in caplog.text

    def test_numeric_poles_never_raise(self):
        """Poles are answered with inf in both modes."""
        for mode in (ErrorMode.STRICT, ErrorMode.LENIENT):
            set_error_mode(mode)
            assert math.isinf(digamma(-3.0))
