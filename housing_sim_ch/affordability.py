"""Affordability check (Tragbarkeitsrechnung) under the one-third rule."""

from dataclasses import dataclass

from housing_sim_ch.maintenance import simple_maintenance_cost
from housing_sim_ch.params import ParameterSet
from housing_sim_ch.simulation import validate_params

# Kalkulatorischer Zins: stress-test rate applied to the whole mortgage,
# independent of the contracted tranche rates.
CALCULATORY_INTEREST_RATE = 5.0  # %
# Housing cost may use at most one third of gross income.
MAX_AFFORDABILITY_RATIO = 33.33  # %


@dataclass(frozen=True)
class AffordabilityResult:
    monthly_income: float
    required_monthly_income: float
    is_affordable: bool
    utilization_percent: float


def calc_affordability_annual_cost(
    params: ParameterSet, calculatory_rate: float = CALCULATORY_INTEREST_RATE,
) -> float:
    """Annual housing cost at today's prices as seen by the stress test.

    Maintenance always uses the simple percentage, whatever mode the simulation runs in.
    """
    rc = params.running_costs
    calculated_interest = params.total_mortgage * calculatory_rate / 100
    amortization = params.annual_amortization(1)
    monthly_running = rc.utilities + rc.parking_cost + rc.condominium_fees + rc.insurance
    running = (
        monthly_running * 12
        + rc.renovation_reserve
        + simple_maintenance_cost(rc, params.purchase.purchase_price)
    )
    return calculated_interest + amortization + running


def calc_affordability(
    params: ParameterSet,
    calculatory_rate: float = CALCULATORY_INTEREST_RATE,
    max_ratio: float = MAX_AFFORDABILITY_RATIO,
) -> AffordabilityResult:
    """Affordability of an already validated parameter set."""
    monthly_income = params.quick_start.household_income / 12
    monthly_cost = calc_affordability_annual_cost(params, calculatory_rate) / 12
    utilization = monthly_cost / monthly_income * 100
    return AffordabilityResult(
        monthly_income=monthly_income,
        required_monthly_income=monthly_cost / (max_ratio / 100),
        is_affordable=utilization <= max_ratio,
        utilization_percent=utilization,
    )


def evaluate_affordability(
    params: ParameterSet,
    calculatory_rate: float = CALCULATORY_INTEREST_RATE,
    max_ratio: float = MAX_AFFORDABILITY_RATIO,
) -> AffordabilityResult:
    """Check whether the property is affordable under the one-third rule.

    Raises InvalidParameterError for zero income or a second tranche without a
    positive amortization horizon.
    """
    validate_params(params)
    return calc_affordability(params, calculatory_rate, max_ratio)
