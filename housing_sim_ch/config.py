"""Parameter (de)serialization, legacy migration and TOML/CLI resolution."""

import argparse
import copy
import dataclasses
import json
import re
import sys
import tomllib
from pathlib import Path

from housing_sim_ch.params import (
    CALCULATION_YEARS,
    MacroParams,
    MaintenanceMode,
    MortgageParams,
    ParameterSet,
    PurchaseParams,
    QuickStartParams,
    RenovationCycle,
    RentParams,
    RunningCostsParams,
    TaxParams,
)
from housing_sim_ch.quickstart import derive_from_quick_start

DEFAULT_CONFIG_PATH = Path("config.toml")

# v0: camelCase app export (flat renovation fields, rates partly at top level)
# v1: snake_case sections matching ParameterSet
SCHEMA_VERSION = 1

SECTION_TYPES = {
    "quick_start": QuickStartParams,
    "rent": RentParams,
    "purchase": PurchaseParams,
    "mortgage": MortgageParams,
    "running_costs": RunningCostsParams,
    "tax": TaxParams,
    "macro": MacroParams,
}

RENOVATION_CATEGORIES = ("roof", "facade", "heating", "kitchen_bath")
LEGACY_MACRO_KEYS = ("property_appreciation_rate", "etf_return_rate", "inflation_rate")

# CLI flag → ParameterSet fields it sets
FLAG_FIELDS: dict[str, tuple[tuple[str, str], ...]] = {
    "purchase_price": (("quick_start", "purchase_price"), ("purchase", "purchase_price")),
    "equity": (("quick_start", "equity"), ("purchase", "equity")),
    "household_income": (("quick_start", "household_income"),),
    "living_expenses": (("quick_start", "annual_living_expenses"),),
    "location": (("quick_start", "location"),),
    "property_type": (("quick_start", "property_type"),),
    "net_rent": (("rent", "net_rent"),),
    "marginal_tax_rate": (("tax", "marginal_tax_rate"),),
    "inflation_rate": (("macro", "inflation_rate"),),
    "etf_return_rate": (("macro", "etf_return_rate"),),
    "property_appreciation_rate": (("macro", "property_appreciation_rate"),),
}

DEFAULTS = {
    "purchase_price": 1_000_000.0,
    "equity": 200_000.0,
    "household_income": 150_000.0,
    "living_expenses": 0.0,
    "location": "good",
    "property_type": "apartment",
    "net_rent": 2500.0,
    "marginal_tax_rate": 25.0,
    "inflation_rate": 1.5,
    "etf_return_rate": 6.0,
    "property_appreciation_rate": 2.0,
    "years": CALCULATION_YEARS,
}


def _camel_to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _snake_keys(obj):
    if isinstance(obj, dict):
        return {_camel_to_snake(k): _snake_keys(v) for k, v in obj.items()}
    return obj


def _migrate_v0(raw: dict) -> dict:
    """v0 (web app export) → v1."""
    data = _snake_keys(raw)
    if "additional" in data:
        data.setdefault("macro", {})
        for k, v in data.pop("additional").items():
            data["macro"].setdefault(k, v)
    # Legacy flat rates at top level fill in only what macro doesn't have
    for key in LEGACY_MACRO_KEYS:
        if key in data:
            v = data.pop(key)
            data.setdefault("macro", {}).setdefault(key, v)
    rc = data.get("running_costs")
    if isinstance(rc, dict):
        for cat in RENOVATION_CATEGORIES:
            amount = rc.pop(f"{cat}_renovation", None)
            first = rc.pop(f"{cat}_initial_interval", None)
            interval = rc.pop(f"{cat}_interval", None)
            if cat in rc or not amount or not interval:
                continue
            rc[cat] = {
                "amount": amount,
                "first_year": first if first else interval,
                "interval": interval,
            }
        rc.setdefault("maintenance_mode", MaintenanceMode.SIMPLE.value)
    data["schema_version"] = 1
    return data


def migrate_params_dict(raw: dict) -> dict:
    """Bring a serialized parameter set up to SCHEMA_VERSION. Does not mutate `raw`."""
    data = copy.deepcopy(raw)
    version = data.get("schema_version", 0)
    if version > SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported parameter schema version {version} (newest known: {SCHEMA_VERSION})"
        )
    if version < 1:
        data = _migrate_v0(data)
    return data


def _build_section(cls, data: dict):
    """Construct a section dataclass, ignoring keys it doesn't know."""
    names = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in names})


def _build_running_costs(data: dict) -> RunningCostsParams:
    data = dict(data)
    if "maintenance_mode" in data:
        try:
            data["maintenance_mode"] = MaintenanceMode(data["maintenance_mode"])
        except ValueError:
            raise ValueError(
                f"Unknown maintenance mode: {data['maintenance_mode']!r} (simple / detailed)"
            ) from None
    for cat in RENOVATION_CATEGORIES:
        cycle = data.get(cat)
        if isinstance(cycle, dict):
            data[cat] = _build_section(RenovationCycle, cycle)
    return _build_section(RunningCostsParams, data)


def params_from_dict(raw: dict) -> ParameterSet:
    """Deserialize (and migrate) a parameter set. Missing sections use defaults."""
    data = migrate_params_dict(raw)
    sections = {}
    for name, cls in SECTION_TYPES.items():
        section = data.get(name)
        if section is None:
            continue
        if name == "running_costs":
            sections[name] = _build_running_costs(section)
        else:
            sections[name] = _build_section(cls, section)
    return ParameterSet(**sections)


def params_to_dict(params: ParameterSet) -> dict:
    """JSON-serializable dict in the current schema."""
    data = dataclasses.asdict(params)
    data["running_costs"]["maintenance_mode"] = params.running_costs.maintenance_mode.value
    data["schema_version"] = SCHEMA_VERSION
    return data


def load_params_json(path: Path) -> ParameterSet:
    """Load a saved parameter set (any schema version) from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return params_from_dict(json.load(f))


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Hand-written configs are always current-schema
    raw.setdefault("schema_version", SCHEMA_VERSION)
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared parameter flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="TOML config file (default: config.toml)")
    parser.add_argument("--params-json", type=Path, default=None, help="saved parameter set (JSON, any schema version); replaces --config")
    parser.add_argument("--quick-start", action="store_true", help="derive rent, mortgage and standard assumptions from the quick-start facts")
    parser.add_argument("--purchase-price", type=float, default=None, help=f"purchase price (default: {d['purchase_price']:,.0f})")
    parser.add_argument("--equity", type=float, default=None, help=f"equity (default: {d['equity']:,.0f})")
    parser.add_argument("--household-income", type=float, default=None, help=f"gross household income per year (default: {d['household_income']:,.0f})")
    parser.add_argument("--living-expenses", type=float, default=None, help=f"annual living expenses excluding housing (default: {d['living_expenses']:,.0f})")
    parser.add_argument("--location", type=str, default=None, choices=["prime", "good", "average", "peripheral"], help=f"location quality (default: {d['location']})")
    parser.add_argument("--property-type", type=str, default=None, choices=["apartment", "house", "condo"], help=f"property type (default: {d['property_type']})")
    parser.add_argument("--net-rent", type=float, default=None, help=f"monthly net rent of the comparison flat (default: {d['net_rent']:,.0f})")
    parser.add_argument("--marginal-tax-rate", type=float, default=None, help=f"marginal tax rate %% (default: {d['marginal_tax_rate']})")
    parser.add_argument("--inflation-rate", type=float, default=None, help=f"inflation %% p.a. (default: {d['inflation_rate']})")
    parser.add_argument("--etf-return-rate", type=float, default=None, help=f"alternative investment return %% p.a. (default: {d['etf_return_rate']})")
    parser.add_argument("--property-appreciation-rate", type=float, default=None, help=f"property appreciation %% p.a. (default: {d['property_appreciation_rate']})")
    parser.add_argument("--years", type=int, default=None, help=f"simulation horizon in years (default: {d['years']})")
    return parser


def _config_value(config: dict, key: str):
    if key in config:
        return config[key]
    for section, name in FLAG_FIELDS.get(key, ()):
        sec = config.get(section)
        if isinstance(sec, dict) and name in sec:
            return sec[name]
    return None


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config file > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        if cli_val is not None:
            resolved[key] = cli_val
            continue
        config_val = _config_value(config, key)
        resolved[key] = config_val if config_val is not None else default
    return resolved


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k] = _deep_merge(merged[k], v)
        else:
            merged[k] = v
    return merged


def build_params(
    r: dict, config: dict, quick_start: bool = False, explicit: set[str] | None = None,
) -> ParameterSet:
    """Build a ParameterSet from the resolved flat values and the config sections.

    With `quick_start`, the config sections are layered on top of the values
    derived from the quick-start facts. `explicit` limits which flat values are
    written over the sections (None = all of them).
    """
    data = migrate_params_dict(config)
    if quick_start:
        qs = QuickStartParams(
            purchase_price=r["purchase_price"],
            equity=r["equity"],
            household_income=r["household_income"],
            location=r["location"],
            property_type=r["property_type"],
            annual_living_expenses=r["living_expenses"],
        )
        data = _deep_merge(params_to_dict(derive_from_quick_start(qs)), data)
    for key, targets in FLAG_FIELDS.items():
        if explicit is not None and key not in explicit:
            continue
        for section, name in targets:
            data.setdefault(section, {})[name] = r[key]
    return params_from_dict(data)


def parse_args(
    description: str,
    add_args_fn=None,
) -> tuple[dict, ParameterSet, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, params, namespace). Raises ValueError for configs
    that cannot be deserialized.
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args()
    if args.params_json is not None:
        config = params_to_dict(load_params_json(args.params_json))
    else:
        config = load_config(args.config)
    r = resolve(args, config)
    # Values read back out of a section stay in that section only
    explicit = {
        key for key in DEFAULTS
        if getattr(args, key, None) is not None or key in config
    }
    params = build_params(r, config, quick_start=args.quick_start, explicit=explicit)
    return r, params, args
