"""CSV export of a simulation result (summary block + yearly table)."""

import csv
import dataclasses
from pathlib import Path

from housing_sim_ch.results import SimulationResult
from housing_sim_ch.simulation import YearlyRecord

YEARLY_COLUMNS = [f.name for f in dataclasses.fields(YearlyRecord)]


def summary_rows(result: SimulationResult) -> list[list[str]]:
    """Key figures as (label, value) rows."""
    a = result.affordability
    k = result.kpis
    return [
        ["monthly_rent", f"{k.monthly_rent:.2f}"],
        ["monthly_ownership", f"{k.monthly_ownership:.2f}"],
        ["total_mortgage", f"{k.total_mortgage:.2f}"],
        ["initial_investment", f"{k.initial_investment:.2f}"],
        ["affordable", "yes" if a.is_affordable else "no"],
        ["utilization_percent", f"{a.utilization_percent:.2f}"],
        ["break_even_year", str(result.break_even_year or "")],
        ["wealth_break_even_year", str(result.wealth_break_even_year or "")],
    ]


def yearly_rows(result: SimulationResult) -> list[list[str]]:
    rows = []
    for record in result.yearly_data:
        values = dataclasses.astuple(record)
        rows.append([str(values[0])] + [f"{v:.2f}" for v in values[1:]])
    return rows


def write_csv(result: SimulationResult, path: Path) -> Path:
    """Write summary rows, a blank line, then the yearly table. Returns `path`."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerows(summary_rows(result))
        writer.writerow([])
        writer.writerow(YEARLY_COLUMNS)
        writer.writerows(yearly_rows(result))
    return path
