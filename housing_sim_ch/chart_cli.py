"""CLI entry point for chart generation."""

import sys
from pathlib import Path

from housing_sim_ch.charts import (
    plot_annual_costs,
    plot_cumulative_costs,
    plot_net_wealth,
    plot_scenario_wealth,
)
from housing_sim_ch.config import parse_args
from housing_sim_ch.results import calculate_scenario
from housing_sim_ch.scenarios import run_scenarios


def _add_chart_args(parser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="output directory (default: reports/charts)",
    )
    parser.add_argument(
        "--no-scenarios", action="store_true",
        help="skip the macro scenario chart",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="output file name suffix (e.g. zh → net_wealth-zh.png)",
    )


def main():
    try:
        r, params, args = parse_args("Miete vs. Eigentum: Charts", _add_chart_args)
        print(f"Simulation ({r['years']} Jahre)...", file=sys.stderr)
        result = calculate_scenario(params, r["years"])
        scenario_results = None if args.no_scenarios else run_scenarios(params, years=r["years"])
    except ValueError as e:
        print(f"\n{e}\n", file=sys.stderr)
        raise SystemExit(1)

    for plot in (plot_cumulative_costs, plot_net_wealth, plot_annual_costs):
        path = plot(result, args.output, args.name)
        print(f"  → {path}", file=sys.stderr)
    if scenario_results:
        path = plot_scenario_wealth(scenario_results, args.output, args.name)
        print(f"  → {path}", file=sys.stderr)
    print("fertig", file=sys.stderr)


if __name__ == "__main__":
    main()
