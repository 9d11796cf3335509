"""Macro scenario definitions and multi-scenario execution."""

import dataclasses

from housing_sim_ch.params import CALCULATION_YEARS, ParameterSet
from housing_sim_ch.results import SimulationResult, calculate_scenario

SCENARIOS = {
    "pessimistic": {
        "property_appreciation_rate": 0.0,
        "etf_return_rate": 3.0,
        "inflation_rate": 2.5,
    },
    "base": {
        "property_appreciation_rate": 2.0,
        "etf_return_rate": 6.0,
        "inflation_rate": 1.5,
    },
    "optimistic": {
        "property_appreciation_rate": 3.0,
        "etf_return_rate": 8.0,
        "inflation_rate": 1.0,
    },
}

SCENARIO_ORDER = ["pessimistic", "base", "optimistic"]


def apply_scenario(params: ParameterSet, overrides: dict) -> ParameterSet:
    """Copy of `params` with the macro rates replaced by `overrides`."""
    return dataclasses.replace(params, macro=dataclasses.replace(params.macro, **overrides))


def run_scenarios(
    params: ParameterSet,
    scenarios: dict[str, dict] | None = None,
    years: int = CALCULATION_YEARS,
) -> dict[str, SimulationResult]:
    """Execute the comparison once per macro scenario.

    Each run is independent; raises InvalidParameterError like calculate_scenario.
    """
    if scenarios is None:
        scenarios = SCENARIOS
    variants = {name: apply_scenario(params, overrides) for name, overrides in scenarios.items()}
    return {name: calculate_scenario(p, years) for name, p in variants.items()}
