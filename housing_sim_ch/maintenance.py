"""Maintenance cost model (simple percentage or cyclical renovations)."""

from housing_sim_ch.params import MaintenanceMode, RenovationCycle, RunningCostsParams


def simple_maintenance_cost(running_costs: RunningCostsParams, purchase_price: float) -> float:
    """Annual upkeep as a flat percentage of the purchase price (today's value)."""
    return purchase_price * running_costs.maintenance_simple / 100


def renovation_due(cycle: RenovationCycle | None, year: int) -> bool:
    """True if the renovation falls into `year` (first_year, first_year + interval, ...)."""
    if cycle is None or cycle.amount <= 0 or cycle.interval <= 0:
        return False
    if year < cycle.first_year:
        return False
    return (year - cycle.first_year) % cycle.interval == 0


def detailed_maintenance_cost(running_costs: RunningCostsParams, year: int) -> float:
    """Sum of all renovation categories due in `year`; concurrent triggers add up."""
    total = 0.0
    for cycle in running_costs.renovation_cycles().values():
        if renovation_due(cycle, year):
            total += cycle.amount
    return total


def calc_maintenance_cost(
    running_costs: RunningCostsParams, purchase_price: float, year: int,
) -> float:
    """Maintenance cost for `year` in today's money.

    Exactly one mode contributes. Inflation scaling is the caller's job.
    """
    if running_costs.maintenance_mode == MaintenanceMode.DETAILED:
        return detailed_maintenance_cost(running_costs, year)
    return simple_maintenance_cost(running_costs, purchase_price)
