"""Tests for shared financial utilities and input guards."""

import logging

import numpy as np
import pytest

from financial_formulas.core.errors import (
    FormulaInputError,
    require_greater_than,
    require_nonzero,
    require_not_equal,
)
from financial_formulas.utils.financial_utils import (
    calculate_discount_factors,
    real_power,
    to_percentage,
)


class TestToPercentage:
    """Tests for to_percentage."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [(0.25, 25.0), (-0.1, -10.0), (0, 0), (1.5, 150.0)],
    )
    def test_scales_by_hundred(self, number: float, expected: float) -> None:
        """Test x × 100 for positive, negative and zero inputs."""
        assert to_percentage(number) == pytest.approx(expected)


class TestDiscountFactors:
    """Tests for calculate_discount_factors."""

    def test_end_of_period_factors(self) -> None:
        """Test that the first factor is discounted by one period."""
        factors = calculate_discount_factors(0.05, 3)
        np.testing.assert_allclose(factors, [1 / 1.05, 1 / 1.05**2, 1 / 1.05**3])

    def test_first_period_zero(self) -> None:
        """Test a schedule that starts undiscounted at t=0."""
        factors = calculate_discount_factors(0.1, 3, first_period=0)
        np.testing.assert_allclose(factors, [1.0, 1 / 1.1, 1 / 1.21])

    def test_zero_rate(self) -> None:
        """Test that a zero rate gives unit factors."""
        np.testing.assert_array_equal(calculate_discount_factors(0, 4), np.ones(4))

    def test_empty_schedule(self) -> None:
        """Test that zero periods give an empty array."""
        assert len(calculate_discount_factors(0.05, 0)) == 0

    def test_minus_one_rate_rejected(self) -> None:
        """Test that r = -1 raises FormulaInputError."""
        with pytest.raises(FormulaInputError, match="discount_rate must not be -1"):
            calculate_discount_factors(-1, 3)


class TestGuards:
    """Tests for require_nonzero and require_not_equal."""

    def test_nonzero_passes(self) -> None:
        """Test that non-zero values pass silently."""
        require_nonzero(0.0001, "rate")
        require_nonzero(-5, "rate")

    def test_zero_rejected_with_details(self) -> None:
        """Test the error attributes and message."""
        with pytest.raises(FormulaInputError) as exc_info:
            require_nonzero(0, "useful_life")

        error = exc_info.value
        assert error.argument == "useful_life"
        assert error.value == 0
        assert str(error) == "useful_life must be non-zero, got 0"

    def test_not_equal_rejects_forbidden(self) -> None:
        """Test that only the forbidden value is rejected."""
        require_not_equal(0.3, 1, "tax_rate")
        with pytest.raises(FormulaInputError, match="tax_rate must not be 1"):
            require_not_equal(1.0, 1, "tax_rate")

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that rejected inputs are logged before raising."""
        with caplog.at_level(logging.DEBUG, logger="financial_formulas.core.errors"):
            with pytest.raises(FormulaInputError):
                require_nonzero(0, "current_liabilities")

        assert "current_liabilities" in caplog.text

    def test_greater_than_rejects_bound_and_below(self) -> None:
        """Test that only values strictly above the bound pass."""
        require_greater_than(-0.99, -1, "rate_of_returns")
        for value in (-1, -3):
            with pytest.raises(FormulaInputError, match="must be greater than -1"):
                require_greater_than(value, -1, "rate_of_returns")


class TestRealPower:
    """Tests for real_power."""

    def test_matches_float_power(self) -> None:
        """Test ordinary compounding of a positive factor."""
        assert real_power(1.1, 2, "rate", 0.1) == pytest.approx(1.21)

    def test_returns_float_for_integers(self) -> None:
        """Test that integer bases and exponents still give a float."""
        assert type(real_power(2, 3, "rate", 1)) is float

    def test_negative_base_whole_exponent(self) -> None:
        """Test that whole powers of a negative factor are real."""
        assert real_power(-2, 3, "rate", -3) == pytest.approx(-8.0)
        assert real_power(-2, -2.0, "rate", -3) == pytest.approx(0.25)

    def test_zero_base_negative_exponent_rejected(self) -> None:
        """Test that 0^-n reports the input the base came from."""
        with pytest.raises(FormulaInputError, match="zero base") as exc_info:
            real_power(0.0, -1, "rate_of_returns", -1)
        assert exc_info.value.argument == "rate_of_returns"
        assert exc_info.value.value == -1

    def test_zero_base_non_negative_exponent(self) -> None:
        """Test that 0^n for n >= 0 is defined."""
        assert real_power(0.0, 2, "rate", -1) == 0.0
        assert real_power(0.0, 0, "rate", -1) == 1.0

    def test_negative_base_fractional_exponent_rejected(self) -> None:
        """Test that a fractional power of a negative factor raises, never complex."""
        with pytest.raises(FormulaInputError, match="no real power"):
            real_power(-2, 0.5, "rate", -3)
