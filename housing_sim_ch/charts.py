"""Chart generation for rent vs. ownership results."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from housing_sim_ch.results import SimulationResult

COLOR_RENT = "#ff7f0e"       # orange
COLOR_OWNERSHIP = "#1f77b4"  # blue
COLOR_BREAK_EVEN = "#888888"

SCENARIO_COLORS = {
    "pessimistic": "#d62728",
    "base": "#1f77b4",
    "optimistic": "#2ca02c",
}
DEFAULT_COLOR = "#7f7f7f"


def _format_thousands_axis(ax: plt.Axes):
    """Thousands separators on the Y axis plus a secondary axis in millions."""
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x:,.0f}")
    )
    ax_right = ax.secondary_yaxis("right")
    ax_right.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x / 1_000_000:.1f} Mio" if x != 0 else "0")
    )
    ax_right.set_ylabel("")


def _mark_year(ax: plt.Axes, year: int | None, label: str):
    if year is None:
        return
    ax.axvline(year, color=COLOR_BREAK_EVEN, linewidth=1.0, linestyle=":", zorder=3)
    y_lo, y_hi = ax.get_ylim()
    ax.annotate(
        f"{label}: Jahr {year}",
        xy=(year, y_lo + (y_hi - y_lo) * 0.9),
        fontsize=10, color=COLOR_BREAK_EVEN,
        ha="left", va="bottom",
        bbox=dict(boxstyle="round,pad=0.4", fc="white", ec=COLOR_BREAK_EVEN, alpha=0.9, linewidth=0.8),
        zorder=10,
    )


def _save(fig, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_cumulative_costs(result: SimulationResult, output_path: Path, name: str = "") -> Path:
    """Line chart of cumulative rent vs. ownership cost with the cost break-even year.

    Returns:
        Path to the generated PNG file (cumulative_costs[-name].png).
    """
    data = result.yearly_data
    years = [r.year for r in data]

    fig, ax = plt.subplots(figsize=(14, 8))
    ax.plot(years, [r.rent_cumulative_cost for r in data], label="Miete", color=COLOR_RENT, linewidth=2)
    ax.plot(years, [r.ownership_cumulative_cost for r in data], label="Eigentum", color=COLOR_OWNERSHIP, linewidth=2)
    ax.set_xlabel("Jahr")
    ax.set_ylabel("Kumulierte Kosten")
    ax.set_title("Kumulierte Wohnkosten: Miete vs. Eigentum")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_thousands_axis(ax)
    _mark_year(ax, result.break_even_year, "Break-Even")
    return _save(fig, output_path, "cumulative_costs", name)


def plot_net_wealth(result: SimulationResult, output_path: Path, name: str = "") -> Path:
    """Net wealth under both scenarios plus the ownership equity line."""
    data = result.yearly_data
    years = [r.year for r in data]

    fig, ax = plt.subplots(figsize=(14, 8))
    ax.plot(years, [r.net_wealth_rent for r in data], label="Vermögen Miete", color=COLOR_RENT, linewidth=2)
    ax.plot(years, [r.net_wealth_ownership for r in data], label="Vermögen Eigentum", color=COLOR_OWNERSHIP, linewidth=2)
    ax.plot(years, [r.net_equity for r in data], label="Nettoeigenkapital Immobilie",
            color=COLOR_OWNERSHIP, linewidth=1, linestyle="--")
    ax.set_xlabel("Jahr")
    ax.set_ylabel("Nettovermögen")
    ax.set_title("Vermögensentwicklung: Miete vs. Eigentum")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_thousands_axis(ax)
    _mark_year(ax, result.wealth_break_even_year, "Vermögens-Break-Even")
    return _save(fig, output_path, "net_wealth", name)


def plot_annual_costs(result: SimulationResult, output_path: Path, name: str = "") -> Path:
    """Stacked bars of the yearly ownership cost breakdown with the rent total as a line."""
    data = [r for r in result.yearly_data if r.year > 0]
    years = [r.year for r in data]
    components = [
        ("Hypothekarzins", [r.ownership_mortgage_interest for r in data], "#1f77b4"),
        ("Amortisation", [r.ownership_amortization for r in data], "#aec7e8"),
        ("Nebenkosten", [r.ownership_utilities for r in data], "#2ca02c"),
        ("Versicherung", [r.ownership_insurance for r in data], "#98df8a"),
        ("Unterhalt", [r.ownership_maintenance for r in data], "#9467bd"),
        ("Übrige", [r.ownership_other for r in data], "#c5b0d5"),
    ]

    fig, ax = plt.subplots(figsize=(14, 8))
    bottom = [0.0] * len(data)
    for label, values, color in components:
        ax.bar(years, values, bottom=bottom, label=label, color=color, width=0.8)
        bottom = [b + v for b, v in zip(bottom, values)]
    ax.plot(years, [r.rent_total_annual for r in data], label="Miete total", color=COLOR_RENT, linewidth=2)
    ax.set_xlabel("Jahr")
    ax.set_ylabel("Jährliche Kosten")
    ax.set_title("Jährliche Wohnkosten")
    ax.legend(loc="upper left", fontsize=9)
    ax.grid(True, alpha=0.3, axis="y")
    _format_thousands_axis(ax)
    return _save(fig, output_path, "annual_costs", name)


def plot_scenario_wealth(
    results: dict[str, SimulationResult], output_path: Path, name: str = "",
) -> Path:
    """Ownership minus rent net wealth per macro scenario."""
    if not results:
        raise ValueError("No scenario results to plot")

    fig, ax = plt.subplots(figsize=(14, 8))
    for scenario_name, result in results.items():
        data = result.yearly_data
        color = SCENARIO_COLORS.get(scenario_name, DEFAULT_COLOR)
        ax.plot(
            [r.year for r in data],
            [r.net_wealth_ownership - r.net_wealth_rent for r in data],
            label=scenario_name, color=color, linewidth=2,
        )
    ax.axhline(0, color="#000000", linewidth=0.8)
    ax.set_xlabel("Jahr")
    ax.set_ylabel("Vermögensvorsprung Eigentum")
    ax.set_title("Vermögen Eigentum minus Miete je Szenario")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_thousands_axis(ax)
    return _save(fig, output_path, "scenario_wealth", name)
