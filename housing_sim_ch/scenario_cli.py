"""CLI entry point for macro scenario comparison."""

import sys

from housing_sim_ch.config import parse_args
from housing_sim_ch.scenarios import SCENARIO_ORDER, SCENARIOS, run_scenarios


def print_parameters():
    """Print scenario parameters"""
    print("=" * 80)
    print("【Szenarien】")
    print("-" * 80)
    print(f"{'Szenario':<14} {'Wertsteigerung':>15} {'Rendite':>10} {'Inflation':>10}")
    print("-" * 80)
    for name in SCENARIO_ORDER:
        s = SCENARIOS[name]
        print(
            f"{name:<14} {s['property_appreciation_rate']:>14.1f}% "
            f"{s['etf_return_rate']:>9.1f}% {s['inflation_rate']:>9.1f}%"
        )
    print("-" * 80)
    print()


def _format_year(year: int | None) -> str:
    return f"{year:>12}" if year is not None else f"{'---':>12}"


def print_results(all_results, years: int):
    """Print break-even years and final wealth per scenario"""
    print("=" * 80)
    print(f"【Ergebnis nach {years} Jahren】")
    print("-" * 80)
    print(f"{'Szenario':<14} {'Break-Even':>12} {'Verm.-BE':>12} {'Verm. Miete':>18} {'Verm. Eigentum':>18}")
    print("-" * 80)
    for name in SCENARIO_ORDER:
        result = all_results.get(name)
        if result is None:
            continue
        final = result.yearly_data[-1]
        print(
            f"{name:<14} {_format_year(result.break_even_year)} {_format_year(result.wealth_break_even_year)} "
            f"{final.net_wealth_rent:>18,.0f} {final.net_wealth_ownership:>18,.0f}"
        )
    print("-" * 80)


def main():
    try:
        r, params, _ = parse_args("Miete vs. Eigentum: Szenariovergleich")
        all_results = run_scenarios(params, years=r["years"])
    except ValueError as e:
        print(f"\n{e}\n", file=sys.stderr)
        raise SystemExit(1)
    print_parameters()
    print_results(all_results, r["years"])


if __name__ == "__main__":
    main()
