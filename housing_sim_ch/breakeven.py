"""Break-even detection over the yearly series."""

from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from housing_sim_ch.simulation import YearlyRecord


def set_once(current: int | None, year: int, crossed: bool) -> int | None:
    """Sticky assignment: keep `current` once set, otherwise record `year` on the first crossing."""
    if current is None and crossed:
        return year
    return current


def find_first_crossing(
    lower: Iterable[float], upper: Iterable[float], years: Iterable[int],
) -> int | None:
    """Return the first year where lower < upper strictly, or None if it never happens."""
    result = None
    for lo, hi, year in zip(lower, upper, years):
        result = set_once(result, year, lo < hi)
        if result is not None:
            return result
    return None


def _simulated(records: Sequence["YearlyRecord"]) -> list["YearlyRecord"]:
    # Year 0 is a baseline, never a break-even candidate
    return [r for r in records if r.year > 0]


def find_cost_break_even(records: Sequence["YearlyRecord"]) -> int | None:
    """First year cumulative ownership cost drops below cumulative rent cost."""
    rs = _simulated(records)
    return find_first_crossing(
        (r.ownership_cumulative_cost for r in rs),
        (r.rent_cumulative_cost for r in rs),
        (r.year for r in rs),
    )


def find_wealth_break_even(records: Sequence["YearlyRecord"]) -> int | None:
    """First year net wealth under ownership exceeds net wealth under renting."""
    rs = _simulated(records)
    return find_first_crossing(
        (r.net_wealth_rent for r in rs),
        (r.net_wealth_ownership for r in rs),
        (r.year for r in rs),
    )
