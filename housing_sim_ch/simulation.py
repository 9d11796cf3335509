"""Core simulation engine: year-by-year state transition for rent vs. ownership."""

from dataclasses import dataclass

from housing_sim_ch.breakeven import set_once
from housing_sim_ch.maintenance import calc_maintenance_cost
from housing_sim_ch.params import (
    CALCULATION_YEARS,
    ParameterSet,
    RenovationCycle,
    calc_initial_investment,
)
from housing_sim_ch.tax import calc_net_tax_effect

MAX_PERCENT = 100.0
MIN_GROWTH_RATE = -100.0  # rates at or below this wipe out value entirely


class InvalidParameterError(ValueError):
    """Raised when a ParameterSet cannot be simulated."""


def _check_percent(errors: list[str], label: str, value: float | None) -> None:
    if value is not None and not 0 <= value <= MAX_PERCENT:
        errors.append(f"{label} must be between 0 and {MAX_PERCENT:.0f}% (got {value})")


def _check_non_negative(errors: list[str], label: str, value: float | None) -> None:
    if value is not None and value < 0:
        errors.append(f"{label} must not be negative (got {value})")


def _check_renovation(errors: list[str], label: str, cycle: RenovationCycle | None) -> None:
    if cycle is None:
        return
    _check_non_negative(errors, f"{label} amount", cycle.amount)
    _check_non_negative(errors, f"{label} first year", cycle.first_year)
    _check_non_negative(errors, f"{label} interval", cycle.interval)


def collect_parameter_errors(params: ParameterSet) -> list[str]:
    """Validate a parameter set. Returns list of error messages (empty if valid)."""
    errors: list[str] = []

    if params.quick_start.household_income <= 0:
        errors.append(
            f"Household income must be positive (got {params.quick_start.household_income}); "
            "affordability and wealth ratios are undefined"
        )

    m = params.mortgage
    if m.second_mortgage > 0 and m.amortization_years <= 0:
        errors.append(
            f"Second mortgage of {m.second_mortgage:,.0f} needs a positive amortization "
            f"horizon (got {m.amortization_years} years)"
        )

    p = params.purchase
    _check_non_negative(errors, "Purchase price", p.purchase_price)
    _check_non_negative(errors, "Equity", p.equity)
    _check_non_negative(errors, "First mortgage", m.first_mortgage)
    _check_non_negative(errors, "Second mortgage", m.second_mortgage)
    _check_non_negative(errors, "Property valuation fee", p.property_valuation_fee)
    _check_percent(errors, "Notary fees", p.notary_fees)
    _check_percent(errors, "Land registry fees", p.land_registry_fees)
    _check_percent(errors, "Broker fees", p.broker_fees)
    _check_percent(errors, "Mortgage processing fee", p.mortgage_processing_fee)
    _check_percent(errors, "First mortgage rate", m.first_mortgage_rate)
    _check_percent(errors, "Second mortgage rate", m.second_mortgage_rate)

    r = params.rent
    _check_non_negative(errors, "Net rent", r.net_rent)
    _check_non_negative(errors, "Rent utilities", r.utilities)
    _check_non_negative(errors, "Rent insurance", r.insurance)
    if r.annual_increase <= MIN_GROWTH_RATE:
        errors.append(f"Annual rent increase must be above {MIN_GROWTH_RATE:.0f}% (got {r.annual_increase})")

    rc = params.running_costs
    _check_non_negative(errors, "Ownership utilities", rc.utilities)
    _check_non_negative(errors, "Ownership insurance", rc.insurance)
    _check_non_negative(errors, "Parking cost", rc.parking_cost)
    _check_non_negative(errors, "Condominium fees", rc.condominium_fees)
    _check_non_negative(errors, "Renovation reserve", rc.renovation_reserve)
    _check_percent(errors, "Simple maintenance rate", rc.maintenance_simple)
    for name, cycle in rc.renovation_cycles().items():
        _check_renovation(errors, f"Renovation '{name}'", cycle)

    t = params.tax
    _check_percent(errors, "Marginal tax rate", t.marginal_tax_rate)
    _check_percent(errors, "Imputed rental value rate", t.rental_value_rate)

    macro = params.macro
    for label, value in [
        ("Property appreciation rate", macro.property_appreciation_rate),
        ("Alternative investment return", macro.etf_return_rate),
        ("Inflation rate", macro.inflation_rate),
    ]:
        if value <= MIN_GROWTH_RATE:
            errors.append(f"{label} must be above {MIN_GROWTH_RATE:.0f}% (got {value})")

    _check_non_negative(errors, "Annual living expenses", params.quick_start.annual_living_expenses)
    return errors


def validate_params(params: ParameterSet) -> None:
    """Raise InvalidParameterError listing every problem found in `params`."""
    errors = collect_parameter_errors(params)
    if errors:
        raise InvalidParameterError("\n".join(errors))


@dataclass(frozen=True)
class YearlyRecord:
    """Snapshot of both scenarios for one simulated year."""

    year: int
    # Rent scenario
    rent_cost: float
    rent_utilities: float
    rent_insurance: float
    rent_total_annual: float
    rent_cumulative_cost: float
    # Ownership scenario
    ownership_mortgage_interest: float
    ownership_amortization: float
    ownership_utilities: float
    ownership_insurance: float
    ownership_maintenance: float
    ownership_other: float  # parking + condominium fees + renovation reserve
    ownership_total_annual: float
    ownership_cumulative_cost: float
    # Tax effects
    tax_savings_interest_deduction: float
    rental_value_tax: float
    net_tax_effect: float
    # Wealth
    property_value: float
    mortgage_balance: float
    net_equity: float
    opportunity_cost_etf: float
    net_wealth_rent: float
    net_wealth_ownership: float
    # Income and expenses
    annual_income: float
    annual_living_expenses: float
    net_savings_rent: float
    net_savings_ownership: float


@dataclass(frozen=True)
class SimulationState:
    """Accumulators carried from one year to the next."""

    mortgage_balance: float
    property_value: float
    cumulative_rent_cost: float
    cumulative_ownership_cost: float
    current_rent: float  # monthly net rent before this year's increase
    cash_rent: float
    cash_ownership: float
    break_even_year: int | None = None
    wealth_break_even_year: int | None = None


def initial_state(params: ParameterSet) -> SimulationState:
    """State before year 1.

    Ownership starts with the initial cash outlay already spent; the renter keeps
    the whole starting wealth as cash.
    """
    initial_investment = calc_initial_investment(params)
    wealth = params.initial_total_wealth
    return SimulationState(
        mortgage_balance=params.total_mortgage,
        property_value=params.purchase.purchase_price,
        cumulative_rent_cost=0.0,
        cumulative_ownership_cost=initial_investment,
        current_rent=params.rent.net_rent,
        cash_rent=wealth,
        cash_ownership=wealth - initial_investment,
    )


def _grow_cash(cash: float, invest: bool, return_rate: float) -> float:
    """Apply one year of investment return to a positive, invested cash pile."""
    if invest and cash > 0:
        return cash * (1 + return_rate / 100)
    return cash


def step_year(
    state: SimulationState, params: ParameterSet, year: int,
) -> tuple[SimulationState, YearlyRecord]:
    """Advance the simulation by one year. Pure: returns the new state and the year's record."""
    inflation = params.inflation_factor(year)

    # Rent: this year's rent is the rate in effect before the annual increase
    rent_cost = state.current_rent * 12
    rent_utilities = params.rent.utilities * 12 * inflation
    rent_insurance = params.rent.insurance * 12 * inflation
    rent_total = rent_cost + rent_utilities + rent_insurance
    cumulative_rent = state.cumulative_rent_cost + rent_total
    next_rent = state.current_rent * (1 + params.rent.annual_increase / 100)

    # Ownership: blended rate on the whole remaining balance, only 2nd tranche amortizes
    interest = state.mortgage_balance * params.blended_mortgage_rate() / 100
    amortization = params.annual_amortization(year)
    balance = max(0.0, state.mortgage_balance - amortization)

    rc = params.running_costs
    own_utilities = rc.utilities * 12 * inflation
    own_insurance = rc.insurance * 12 * inflation
    maintenance = calc_maintenance_cost(rc, params.purchase.purchase_price, year) * inflation
    other = (
        (rc.parking_cost + rc.condominium_fees) * 12 + rc.renovation_reserve
    ) * inflation
    own_total = interest + amortization + own_utilities + own_insurance + maintenance + other
    cumulative_own = state.cumulative_ownership_cost + own_total

    # Tax effects on the pre-appreciation property value
    tax_saving, rental_value_tax, net_tax = calc_net_tax_effect(
        interest, state.property_value, params.tax,
    )

    # Appreciation first, then equity against the post-amortization balance
    property_value = state.property_value * (1 + params.macro.property_appreciation_rate / 100)
    net_equity = property_value - balance
    opportunity_cost_etf = params.purchase.equity * (1 + params.macro.etf_return_rate / 100) ** year

    # Wealth: grow last year's cash, then add this year's savings
    income = params.quick_start.household_income
    living = params.quick_start.annual_living_expenses
    savings_rent = income - living - rent_total
    savings_own = income - living - own_total + net_tax
    macro = params.macro
    cash_rent = _grow_cash(state.cash_rent, macro.invest_cash_in_rent, macro.etf_return_rate) + savings_rent
    cash_own = (
        _grow_cash(state.cash_ownership, macro.invest_cash_in_ownership, macro.etf_return_rate)
        + savings_own
    )
    net_wealth_rent = cash_rent
    net_wealth_own = net_equity + cash_own

    break_even_year = set_once(state.break_even_year, year, cumulative_own < cumulative_rent)
    wealth_break_even_year = set_once(
        state.wealth_break_even_year, year, net_wealth_own > net_wealth_rent,
    )

    new_state = SimulationState(
        mortgage_balance=balance,
        property_value=property_value,
        cumulative_rent_cost=cumulative_rent,
        cumulative_ownership_cost=cumulative_own,
        current_rent=next_rent,
        cash_rent=cash_rent,
        cash_ownership=cash_own,
        break_even_year=break_even_year,
        wealth_break_even_year=wealth_break_even_year,
    )
    record = YearlyRecord(
        year=year,
        rent_cost=rent_cost,
        rent_utilities=rent_utilities,
        rent_insurance=rent_insurance,
        rent_total_annual=rent_total,
        rent_cumulative_cost=cumulative_rent,
        ownership_mortgage_interest=interest,
        ownership_amortization=amortization,
        ownership_utilities=own_utilities,
        ownership_insurance=own_insurance,
        ownership_maintenance=maintenance,
        ownership_other=other,
        ownership_total_annual=own_total,
        ownership_cumulative_cost=cumulative_own,
        tax_savings_interest_deduction=tax_saving,
        rental_value_tax=rental_value_tax,
        net_tax_effect=net_tax,
        property_value=property_value,
        mortgage_balance=balance,
        net_equity=net_equity,
        opportunity_cost_etf=opportunity_cost_etf,
        net_wealth_rent=net_wealth_rent,
        net_wealth_ownership=net_wealth_own,
        annual_income=income,
        annual_living_expenses=living,
        net_savings_rent=savings_rent,
        net_savings_ownership=savings_own,
    )
    return new_state, record


def simulate_years(
    params: ParameterSet, years: int = CALCULATION_YEARS,
) -> tuple[SimulationState, list[YearlyRecord]]:
    """Run years 1..`years`. Returns (final_state, records).

    Does not validate; callers go through validate_params first.
    """
    state = initial_state(params)
    records: list[YearlyRecord] = []
    for year in range(1, years + 1):
        state, record = step_year(state, params, year)
        records.append(record)
    return state, records
