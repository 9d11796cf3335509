"""Derive a full parameter set from the four quick-start facts."""

from housing_sim_ch.params import (
    MacroParams,
    MortgageParams,
    ParameterSet,
    PurchaseParams,
    QuickStartParams,
    RentParams,
    RunningCostsParams,
    TaxParams,
)

# Nettomiete CHF/m² pro Monat nach Objektart und Lage (Kanton Zürich)
BASE_RENT_PER_SQM: dict[str, dict[str, float]] = {
    "apartment": {"prime": 35, "good": 28, "average": 22, "peripheral": 18},
    "house": {"prime": 40, "good": 32, "average": 25, "peripheral": 20},
    "condo": {"prime": 38, "good": 30, "average": 24, "peripheral": 19},
}

# Kaufpreis CHF/m²
HOUSE_PRICE_PER_SQM = 8000
APARTMENT_PRICE_PER_SQM = 10000

# Standard mortgage structure as share of the purchase price
FIRST_MORTGAGE_RATIO = 0.65
SECOND_MORTGAGE_RATIO = 0.15

UTILITIES_SHARE_OF_RENT = 0.15
RENT_INSURANCE_MONTHLY = 50
OWNERSHIP_INSURANCE_MONTHLY = 100


def base_rent_per_sqm(location: str, property_type: str) -> float:
    """Monthly net rent per m² for a location/property type combination."""
    try:
        return BASE_RENT_PER_SQM[property_type][location]
    except KeyError:
        raise ValueError(
            f"Unknown property type/location: {property_type!r}/{location!r}"
        ) from None


def estimated_size(property_type: str, price: float) -> int:
    """Rough living area in m² from the purchase price."""
    per_sqm = HOUSE_PRICE_PER_SQM if property_type == "house" else APARTMENT_PRICE_PER_SQM
    return round(price / per_sqm)


def derive_from_quick_start(quick_start: QuickStartParams) -> ParameterSet:
    """Fill in comparison rent, mortgage split and standard assumptions.

    The mortgage need (price - equity) is split into a first tranche of at most
    65% and a second tranche of at most 15% of the price.
    """
    price = quick_start.purchase_price
    comparison_rent = base_rent_per_sqm(quick_start.location, quick_start.property_type) * estimated_size(
        quick_start.property_type, price,
    )
    mortgage_need = price - quick_start.equity
    if price > 0:
        first_ratio = max(0.0, min(FIRST_MORTGAGE_RATIO, mortgage_need / price))
        second_ratio = max(0.0, min(SECOND_MORTGAGE_RATIO, (mortgage_need - price * first_ratio) / price))
    else:
        first_ratio = second_ratio = 0.0

    utilities = comparison_rent * UTILITIES_SHARE_OF_RENT
    return ParameterSet(
        quick_start=quick_start,
        rent=RentParams(
            net_rent=comparison_rent,
            utilities=utilities,
            insurance=RENT_INSURANCE_MONTHLY,
            annual_increase=2.0,
        ),
        purchase=PurchaseParams(
            purchase_price=price,
            equity=quick_start.equity,
            notary_fees=0.5,
            land_registry_fees=0.3,
            broker_fees=3.0,
        ),
        mortgage=MortgageParams(
            first_mortgage=price * first_ratio,
            first_mortgage_rate=2.5,
            second_mortgage=price * second_ratio,
            second_mortgage_rate=3.0,
            amortization_years=15,
        ),
        running_costs=RunningCostsParams(
            utilities=utilities,
            insurance=OWNERSHIP_INSURANCE_MONTHLY,
            maintenance_simple=1.0,
        ),
        tax=TaxParams(
            marginal_tax_rate=25,
            interest_deduction=True,
            rental_value_taxation=True,
            rental_value_rate=3.5,
        ),
        macro=MacroParams(
            property_appreciation_rate=2.0,
            etf_return_rate=6.0,
            inflation_rate=1.5,
        ),
    )
