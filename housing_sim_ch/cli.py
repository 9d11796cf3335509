"""CLI entry point for a single rent vs. ownership comparison."""

import json
import sys
from pathlib import Path

from housing_sim_ch.config import parse_args
from housing_sim_ch.export import write_csv
from housing_sim_ch.params import ParameterSet
from housing_sim_ch.results import SimulationResult, calculate_scenario

TABLE_YEARS = (1, 2, 3, 5, 10, 15, 20, 25, 30, 40, 50)


def _add_output_args(parser):
    parser.add_argument("--json", action="store_true", help="print the full result as JSON instead of tables")
    parser.add_argument("--csv", type=Path, default=None, help="also write the yearly table to this CSV file")


def _print_header(params: ParameterSet, years: int):
    p = params.purchase
    m = params.mortgage
    print("=" * 80)
    print(f"Miete vs. Eigentum ({years} Jahre)")
    print(f"  Kaufpreis: {p.purchase_price:,.0f} / Eigenkapital: {p.equity:,.0f} / Einkommen: {params.quick_start.household_income:,.0f} p.a.")
    print(f"  1. Hypothek: {m.first_mortgage:,.0f} zu {m.first_mortgage_rate:.2f}%")
    if m.second_mortgage > 0:
        print(f"  2. Hypothek: {m.second_mortgage:,.0f} zu {m.second_mortgage_rate:.2f}%, amortisiert über {m.amortization_years} Jahre")
    print(f"  Nettomiete: {params.rent.net_rent:,.0f}/Monat (+{params.rent.annual_increase:.1f}% p.a.)")
    macro = params.macro
    print(f"  Wertsteigerung {macro.property_appreciation_rate:.1f}% / Rendite {macro.etf_return_rate:.1f}% / Inflation {macro.inflation_rate:.1f}%")
    print(f"  Unterhalt: {params.running_costs.maintenance_mode.value}")
    print("=" * 80)
    print()


def _print_summary(result: SimulationResult):
    a = result.affordability
    k = result.kpis
    print("【Tragbarkeit】")
    status = "tragbar" if a.is_affordable else "NICHT tragbar"
    print(f"  Auslastung {a.utilization_percent:.1f}% ({status})")
    print(f"  Monatseinkommen {a.monthly_income:,.0f} / benötigt {a.required_monthly_income:,.0f}")
    print()
    print("【Kennzahlen】")
    print(f"  Monatliche Miete:         {k.monthly_rent:>14,.0f}")
    print(f"  Monatliche Kosten Eigentum:{k.monthly_ownership:>13,.0f}")
    print(f"  Hypothek total:           {k.total_mortgage:>14,.0f}")
    print(f"  Anfangsinvestition:       {k.initial_investment:>14,.0f}")
    print(f"  Eigenkapital nach 10 J.:  {k.equity_after_10_years:>14,.0f}")
    print(f"  Eigenkapital nach 20 J.:  {k.equity_after_20_years:>14,.0f}")
    be = f"Jahr {result.break_even_year}" if result.break_even_year else "nicht erreicht"
    wbe = f"Jahr {result.wealth_break_even_year}" if result.wealth_break_even_year else "nicht erreicht"
    print(f"  Kosten-Break-Even:        {be:>14}")
    print(f"  Vermögens-Break-Even:     {wbe:>14}")
    print()


def _print_yearly_table(result: SimulationResult):
    print("【Jahresverlauf】")
    print("-" * 110)
    print(
        f"{'Jahr':>4} {'Kum. Miete':>14} {'Kum. Eigentum':>14} {'Steuereffekt':>13} "
        f"{'Immobilie':>14} {'Hypothek':>12} {'Verm. Miete':>14} {'Verm. Eigentum':>15}"
    )
    print("-" * 110)
    for year in (0,) + TABLE_YEARS:
        r = result.record(year)
        if r is None:
            continue
        print(
            f"{r.year:>4} {r.rent_cumulative_cost:>14,.0f} {r.ownership_cumulative_cost:>14,.0f} "
            f"{r.net_tax_effect:>13,.0f} {r.property_value:>14,.0f} {r.mortgage_balance:>12,.0f} "
            f"{r.net_wealth_rent:>14,.0f} {r.net_wealth_ownership:>15,.0f}"
        )
    print("-" * 110)


def main():
    try:
        r, params, args = parse_args("Miete vs. Eigentum: Jahresprojektion", _add_output_args)
        result = calculate_scenario(params, r["years"])
    except ValueError as e:
        print(f"\n{e}\n", file=sys.stderr)
        raise SystemExit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_header(params, r["years"])
        _print_summary(result)
        _print_yearly_table(result)

    if args.csv is not None:
        path = write_csv(result, args.csv)
        print(f"  → {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
