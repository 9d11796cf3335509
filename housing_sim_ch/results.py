"""Result aggregation: year-0 baseline, KPIs and the full SimulationResult."""

import dataclasses
from dataclasses import dataclass, field

from housing_sim_ch.affordability import AffordabilityResult, calc_affordability
from housing_sim_ch.params import (
    CALCULATION_YEARS,
    ParameterSet,
    calc_initial_investment,
)
from housing_sim_ch.simulation import YearlyRecord, simulate_years, validate_params

MILESTONE_YEARS = (10, 20, 30)


@dataclass(frozen=True)
class Kpis:
    monthly_rent: float
    monthly_ownership: float
    initial_investment: float
    total_mortgage: float
    equity_after_10_years: float
    equity_after_20_years: float


@dataclass(frozen=True)
class CostMilestones:
    """Cumulative cost of one scenario after 10, 20 and 30 years."""

    year10: float
    year20: float
    year30: float


@dataclass(frozen=True)
class SimulationResult:
    affordability: AffordabilityResult
    break_even_year: int | None
    wealth_break_even_year: int | None
    yearly_data: list[YearlyRecord]
    kpis: Kpis
    total_cost_rent: CostMilestones
    total_cost_ownership: CostMilestones
    years: int = field(default=CALCULATION_YEARS)

    def record(self, year: int) -> YearlyRecord | None:
        """Record for `year`, or None beyond the horizon."""
        if 0 <= year < len(self.yearly_data):
            return self.yearly_data[year]
        return None

    def to_dict(self) -> dict:
        """JSON-serializable representation."""
        return dataclasses.asdict(self)


def build_year0_record(params: ParameterSet) -> YearlyRecord:
    """Baseline before any housing cost is incurred.

    Uses the same initial-investment formula as the simulation start state so
    there is no jump between year 0 and year 1.
    """
    initial_investment = calc_initial_investment(params)
    wealth = params.initial_total_wealth
    equity = params.purchase.equity
    income = params.quick_start.household_income
    living = params.quick_start.annual_living_expenses
    return YearlyRecord(
        year=0,
        rent_cost=0.0,
        rent_utilities=0.0,
        rent_insurance=0.0,
        rent_total_annual=0.0,
        rent_cumulative_cost=0.0,
        ownership_mortgage_interest=0.0,
        ownership_amortization=0.0,
        ownership_utilities=0.0,
        ownership_insurance=0.0,
        ownership_maintenance=0.0,
        ownership_other=0.0,
        ownership_total_annual=0.0,
        ownership_cumulative_cost=initial_investment,
        tax_savings_interest_deduction=0.0,
        rental_value_tax=0.0,
        net_tax_effect=0.0,
        property_value=params.purchase.purchase_price,
        mortgage_balance=params.total_mortgage,
        net_equity=equity,
        opportunity_cost_etf=equity,
        net_wealth_rent=wealth,
        net_wealth_ownership=equity + wealth - initial_investment,
        annual_income=income,
        annual_living_expenses=living,
        net_savings_rent=0.0,
        net_savings_ownership=0.0,
    )


def _value_at(records: list[YearlyRecord], index: int, attr: str) -> float:
    """Attribute of records[index], 0 if the horizon is shorter."""
    if index < len(records):
        return getattr(records[index], attr)
    return 0.0


def _milestones(records: list[YearlyRecord], attr: str) -> CostMilestones:
    values = [_value_at(records, year - 1, attr) for year in MILESTONE_YEARS]
    return CostMilestones(*values)


def build_kpis(params: ParameterSet, records: list[YearlyRecord]) -> Kpis:
    """KPI summary from the simulated years (records start at year 1)."""
    return Kpis(
        monthly_rent=params.rent.net_rent,
        monthly_ownership=_value_at(records, 0, "ownership_total_annual") / 12,
        initial_investment=calc_initial_investment(params),
        total_mortgage=params.total_mortgage,
        equity_after_10_years=_value_at(records, 9, "net_equity"),
        equity_after_20_years=_value_at(records, 19, "net_equity"),
    )


def calculate_scenario(params: ParameterSet, years: int = CALCULATION_YEARS) -> SimulationResult:
    """Run the full rent vs. ownership comparison.

    Validates once before any work; raises InvalidParameterError on bad input.
    """
    validate_params(params)
    affordability = calc_affordability(params)
    final_state, records = simulate_years(params, years)
    return SimulationResult(
        affordability=affordability,
        break_even_year=final_state.break_even_year,
        wealth_break_even_year=final_state.wealth_break_even_year,
        yearly_data=[build_year0_record(params)] + records,
        kpis=build_kpis(params, records),
        total_cost_rent=_milestones(records, "rent_cumulative_cost"),
        total_cost_ownership=_milestones(records, "ownership_cumulative_cost"),
        years=years,
    )
