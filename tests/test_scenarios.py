"""Tests for macro scenario comparison."""

import pytest
from housing_sim_ch import MacroParams, ParameterSet, calculate_scenario
from housing_sim_ch.scenarios import SCENARIO_ORDER, SCENARIOS, apply_scenario, run_scenarios


class TestApplyScenario:
    def test_replaces_macro_only(self):
        params = ParameterSet()
        p = apply_scenario(params, SCENARIOS["pessimistic"])
        assert p.macro == MacroParams(property_appreciation_rate=0.0, etf_return_rate=3.0, inflation_rate=2.5)
        assert p.mortgage == params.mortgage
        assert p.rent == params.rent

    def test_keeps_investment_flags(self):
        params = ParameterSet(macro=MacroParams(invest_cash_in_rent=False))
        p = apply_scenario(params, SCENARIOS["optimistic"])
        assert p.macro.invest_cash_in_rent is False


class TestRunScenarios:
    def setup_method(self):
        self.results = run_scenarios(ParameterSet())

    def test_returns_3_scenarios(self):
        assert list(self.results) == SCENARIO_ORDER

    def test_base_matches_defaults(self):
        assert self.results["base"] == calculate_scenario(ParameterSet())

    def test_ordering_final_wealth(self):
        low = self.results["pessimistic"].yearly_data[-1]
        mid = self.results["base"].yearly_data[-1]
        high = self.results["optimistic"].yearly_data[-1]
        assert high.net_wealth_ownership > mid.net_wealth_ownership > low.net_wealth_ownership
        assert high.net_wealth_rent > mid.net_wealth_rent > low.net_wealth_rent

    def test_property_value_follows_appreciation(self):
        assert self.results["pessimistic"].yearly_data[-1].property_value == pytest.approx(1_000_000)

    def test_custom_scenarios_and_horizon(self):
        results = run_scenarios(ParameterSet(), {"flat": {"inflation_rate": 0.0}}, years=10)
        assert list(results) == ["flat"]
        assert len(results["flat"].yearly_data) == 11
