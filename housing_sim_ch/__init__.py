"""Rent vs. Ownership Projection Package."""

from housing_sim_ch.params import (
    CALCULATION_YEARS,
    MaintenanceMode,
    RenovationCycle,
    QuickStartParams,
    RentParams,
    PurchaseParams,
    MortgageParams,
    RunningCostsParams,
    TaxParams,
    MacroParams,
    ParameterSet,
    calc_closing_costs,
    calc_initial_investment,
)
from housing_sim_ch.maintenance import calc_maintenance_cost, renovation_due
from housing_sim_ch.affordability import (
    AffordabilityResult,
    evaluate_affordability,
    CALCULATORY_INTEREST_RATE,
    MAX_AFFORDABILITY_RATIO,
)
from housing_sim_ch.simulation import (
    InvalidParameterError,
    SimulationState,
    YearlyRecord,
    collect_parameter_errors,
    validate_params,
    initial_state,
    step_year,
    simulate_years,
)
from housing_sim_ch.breakeven import (
    set_once,
    find_first_crossing,
    find_cost_break_even,
    find_wealth_break_even,
)
from housing_sim_ch.results import (
    Kpis,
    CostMilestones,
    SimulationResult,
    build_year0_record,
    calculate_scenario,
)
from housing_sim_ch.quickstart import derive_from_quick_start
from housing_sim_ch.config import params_from_dict, params_to_dict, migrate_params_dict

__all__ = [
    "CALCULATION_YEARS",
    "MaintenanceMode",
    "RenovationCycle",
    "QuickStartParams",
    "RentParams",
    "PurchaseParams",
    "MortgageParams",
    "RunningCostsParams",
    "TaxParams",
    "MacroParams",
    "ParameterSet",
    "calc_closing_costs",
    "calc_initial_investment",
    "calc_maintenance_cost",
    "renovation_due",
    "AffordabilityResult",
    "evaluate_affordability",
    "CALCULATORY_INTEREST_RATE",
    "MAX_AFFORDABILITY_RATIO",
    "InvalidParameterError",
    "SimulationState",
    "YearlyRecord",
    "collect_parameter_errors",
    "validate_params",
    "initial_state",
    "step_year",
    "simulate_years",
    "set_once",
    "find_first_crossing",
    "find_cost_break_even",
    "find_wealth_break_even",
    "Kpis",
    "CostMilestones",
    "SimulationResult",
    "build_year0_record",
    "calculate_scenario",
    "derive_from_quick_start",
    "params_from_dict",
    "params_to_dict",
    "migrate_params_dict",
]
