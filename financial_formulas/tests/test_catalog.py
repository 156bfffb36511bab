"""Tests for the formula catalog registry and its guard contracts."""

import inspect
import logging
import math
from typing import Any

import pytest

import financial_formulas
from financial_formulas import FORMULA_CATALOG, FormulaInputError, evaluate, get_formula
from financial_formulas.core.catalog import FormulaEntry
from financial_formulas.core.conventions import CONVENTIONS

# Inputs that cannot be the scalar 1 used for every other argument
SAMPLE_INPUTS: dict[tuple[str, str], Any] = {
    ("net_present_value", "cash_flows"): [100.0, 200.0, 300.0],
    ("geometric_mean", "rate_of_returns"): [0.1, 0.2],
    ("weighted_average", "pairs"): [(0.5, 100.0), (0.5, 200.0)],
    ("tax_equivalent_yield", "tax_rate"): 0.25,
}

GUARDED_CASES = [
    (entry, argument)
    for entry in FORMULA_CATALOG.values()
    for argument in entry.guarded
]


def _sample_arguments(entry: FormulaEntry) -> dict[str, Any]:
    """Build keyword arguments with a valid value for every required parameter."""
    kwargs: dict[str, Any] = {}
    for name, parameter in inspect.signature(entry.function).parameters.items():
        if parameter.default is not inspect.Parameter.empty:
            continue
        kwargs[name] = SAMPLE_INPUTS.get((entry.name, name), 1)
    return kwargs


class TestCatalogContents:
    """Tests that the catalog mirrors the public API."""

    def test_every_public_formula_registered(self) -> None:
        """Test that each exported formula has a catalog entry."""
        exported = set(financial_formulas.formulas.__all__) | {"to_percentage"}
        assert set(FORMULA_CATALOG) == exported

    def test_entries_point_at_exported_functions(self) -> None:
        """Test that catalog callables are the package-level functions."""
        for name, entry in FORMULA_CATALOG.items():
            assert entry.name == name
            assert getattr(financial_formulas, name) is entry.function

    def test_every_formula_documented(self) -> None:
        """Test that each registered formula carries a docstring."""
        undocumented = [
            name for name, entry in FORMULA_CATALOG.items() if not entry.function.__doc__
        ]
        assert undocumented == []

    def test_guarded_names_are_parameters(self) -> None:
        """Test that every guarded argument exists in the function signature."""
        for entry in FORMULA_CATALOG.values():
            parameters = inspect.signature(entry.function).parameters
            for argument in entry.guarded:
                assert argument in parameters, f"{entry.name}: {argument}"

    def test_rejected_values_cover_guards(self) -> None:
        """Test that each guarded argument has a rejected value recorded."""
        for entry in FORMULA_CATALOG.values():
            assert set(entry.rejected_values) == set(entry.guarded)
            assert set(entry.reported_as) == set(entry.guarded)

    def test_categories(self) -> None:
        """Test that categories match the formula modules."""
        categories = {entry.category for entry in FORMULA_CATALOG.values()}
        assert categories == {
            "activity",
            "financial_utils",
            "interest",
            "liquidity",
            "market",
            "profitability",
            "time_value",
        }
        assert get_formula("current_ratio").category == "liquidity"


class TestCatalogGuards:
    """Tests that every guarded formula rejects its zero denominator."""

    @pytest.mark.parametrize(
        ("entry", "argument"),
        GUARDED_CASES,
        ids=[f"{entry.name}-{argument}" for entry, argument in GUARDED_CASES],
    )
    def test_rejected_value_raises(self, entry: FormulaEntry, argument: str) -> None:
        """Test that the rejected value raises FormulaInputError, never inf/NaN."""
        kwargs = _sample_arguments(entry)
        kwargs[argument] = entry.rejected_values[argument]

        with pytest.raises(FormulaInputError) as exc_info:
            entry.function(**kwargs)
        assert exc_info.value.argument == entry.reported_as[argument]

    @pytest.mark.parametrize("name", sorted(FORMULA_CATALOG))
    def test_valid_inputs_give_finite_result(self, name: str) -> None:
        """Test that every formula returns a finite number for valid inputs."""
        entry = FORMULA_CATALOG[name]
        result = entry.function(**_sample_arguments(entry))

        assert isinstance(result, (int, float))
        assert math.isfinite(result)


class TestLookup:
    """Tests for get_formula and evaluate."""

    def test_get_formula(self) -> None:
        """Test lookup by name."""
        entry = get_formula("net_present_value")
        assert entry.formula == "Σ CF_i / (1 + r)^(i + 1) - I"
        assert entry.guarded == ("discount_rate",)

    def test_diluted_eps_reports_share_sum(self) -> None:
        """Test that the diluted EPS guard is recorded as the share-count sum."""
        entry = get_formula("diluted_earnings_per_share")
        assert entry.guarded == ("average_shares",)
        assert entry.reported_as == {
            "average_shares": "average_shares + other_convertible_instruments"
        }

    def test_unknown_formula(self) -> None:
        """Test that unknown names raise KeyError."""
        with pytest.raises(KeyError, match="Unknown formula"):
            get_formula("internal_rate_of_return")

    def test_evaluate_positional_and_keyword(self) -> None:
        """Test calling formulas by name."""
        assert evaluate("current_ratio", 100, 200) == pytest.approx(0.5)
        assert evaluate(
            "compound_interest", 5000, 0.05, 10, number_of_periods_per_year=12
        ) == pytest.approx(8235.0474884514)

    def test_evaluate_propagates_guard(self) -> None:
        """Test that guard errors surface through evaluate."""
        with pytest.raises(FormulaInputError):
            evaluate("current_ratio", 100, 0)

    def test_evaluate_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that evaluations are logged on the catalog logger."""
        with caplog.at_level(logging.DEBUG, logger="financial_formulas.core.catalog"):
            evaluate("rule_of_72", 8)

        assert "rule_of_72" in caplog.text


class TestConventions:
    """Tests that default arguments follow the declared conventions."""

    def test_defaults_match_conventions(self) -> None:
        """Test that each convention's default is bound in its formulas."""
        defaults = {
            "day_count": ("days_in_period", "days_to_maturity"),
            "compounding": ("number_of_periods_per_year",),
            "averaging": ("number_of_periods",),
        }
        for group, parameter_names in defaults.items():
            expected = next(
                value for key, value in CONVENTIONS[group].items() if key != "used_by"
            )
            for name in CONVENTIONS[group]["used_by"]:
                parameters = inspect.signature(FORMULA_CATALOG[name].function).parameters
                for parameter_name in parameter_names:
                    if parameter_name in parameters:
                        assert parameters[parameter_name].default == expected

    def test_conventions_reference_catalog(self) -> None:
        """Test that every formula named in CONVENTIONS is registered."""
        for group in CONVENTIONS.values():
            for name in group["used_by"]:
                assert name in FORMULA_CATALOG
