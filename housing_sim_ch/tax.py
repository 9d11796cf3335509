"""Tax effects of owner-occupied property (Schuldzinsenabzug, Eigenmietwert)."""

from housing_sim_ch.params import TaxParams


def calc_interest_deduction_saving(mortgage_interest: float, tax: TaxParams) -> float:
    """Tax saved by deducting mortgage interest at the marginal rate.

    Returns 0 when the deduction is disabled.
    """
    if not tax.interest_deduction:
        return 0.0
    return mortgage_interest * tax.marginal_tax_rate / 100


def calc_rental_value_tax(property_value: float, tax: TaxParams) -> float:
    """Tax on the imputed rental value (Eigenmietwert).

    Imputed income = property value × rental_value_rate, taxed at the marginal rate.
    """
    if not tax.rental_value_taxation:
        return 0.0
    imputed_income = property_value * tax.rental_value_rate / 100
    return imputed_income * tax.marginal_tax_rate / 100


def calc_net_tax_effect(
    mortgage_interest: float, property_value: float, tax: TaxParams,
) -> tuple[float, float, float]:
    """Return (saving, rental_value_tax, net) where net = saving - rental_value_tax."""
    saving = calc_interest_deduction_saving(mortgage_interest, tax)
    rental_tax = calc_rental_value_tax(property_value, tax)
    return saving, rental_tax, saving - rental_tax
