"""Tests for break-even detection."""

from housing_sim_ch import (
    MacroParams,
    ParameterSet,
    RentParams,
    calculate_scenario,
    find_cost_break_even,
    find_first_crossing,
    find_wealth_break_even,
    set_once,
)


class TestSetOnce:
    def test_records_first_crossing(self):
        assert set_once(None, 7, True) == 7

    def test_no_crossing(self):
        assert set_once(None, 7, False) is None

    def test_sticky(self):
        assert set_once(3, 7, True) == 3
        assert set_once(3, 7, False) == 3


class TestFindFirstCrossing:
    def test_first_year_strictly_below(self):
        assert find_first_crossing([5, 3, 6], [4, 4, 4], [1, 2, 3]) == 2

    def test_equal_is_not_a_crossing(self):
        assert find_first_crossing([4, 4, 3], [4, 4, 4], [1, 2, 3]) == 3

    def test_never_crosses(self):
        assert find_first_crossing([5, 6, 7], [4, 4, 4], [1, 2, 3]) is None

    def test_later_recross_ignored(self):
        assert find_first_crossing([3, 5, 3], [4, 4, 4], [1, 2, 3]) == 1

    def test_empty(self):
        assert find_first_crossing([], [], []) is None


class TestAgainstSimulation:
    """Detection over the finished series matches the in-loop results."""

    def test_default_parameters(self):
        result = calculate_scenario(ParameterSet())
        assert find_cost_break_even(result.yearly_data) == result.break_even_year
        assert find_wealth_break_even(result.yearly_data) == result.wealth_break_even_year

    def test_pessimistic_macro(self):
        params = ParameterSet(macro=MacroParams(property_appreciation_rate=0, etf_return_rate=3, inflation_rate=2.5))
        result = calculate_scenario(params)
        assert find_cost_break_even(result.yearly_data) == result.break_even_year
        assert find_wealth_break_even(result.yearly_data) == result.wealth_break_even_year

    def test_year_zero_is_never_a_break_even(self):
        result = calculate_scenario(ParameterSet())
        assert result.break_even_year != 0
        assert result.wealth_break_even_year != 0

    def test_cheap_rent_never_breaks_even_on_cost(self):
        params = ParameterSet(rent=RentParams(net_rent=500, utilities=0, insurance=0))
        result = calculate_scenario(params)
        assert result.break_even_year is None
        assert find_cost_break_even(result.yearly_data) is None
