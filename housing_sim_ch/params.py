"""Simulation parameters (rent vs. ownership comparison).

All rates are stored as percentages (1.5 = 1.5%), monthly amounts as
per-month values, as in the saved-parameter format of the web app.
"""

from dataclasses import dataclass, field
from enum import Enum

CALCULATION_YEARS = 50


class MaintenanceMode(str, Enum):
    SIMPLE = "simple"
    DETAILED = "detailed"


@dataclass(frozen=True)
class QuickStartParams:
    purchase_price: float = 1_000_000
    equity: float = 200_000
    household_income: float = 150_000  # Brutto-Haushaltseinkommen pro Jahr
    location: str = "good"  # prime / good / average / peripheral
    property_type: str = "apartment"  # apartment / house / condo
    annual_living_expenses: float = 0.0
    # Gesamtvermögen vor Kauf/Miete; None → Eigenkapital
    initial_total_wealth: float | None = None


@dataclass(frozen=True)
class RentParams:
    net_rent: float = 2500  # Nettomiete pro Monat
    utilities: float = 250  # Nebenkosten pro Monat
    insurance: float = 30  # Hausrat/Haftpflicht pro Monat
    annual_increase: float = 1.0  # % p.a.


@dataclass(frozen=True)
class PurchaseParams:
    purchase_price: float = 1_000_000
    equity: float = 200_000
    notary_fees: float = 0.5  # % des Kaufpreises
    land_registry_fees: float = 0.3  # % des Kaufpreises
    broker_fees: float = 0.0  # % des Kaufpreises
    mortgage_processing_fee: float | None = None  # % der Hypothek
    property_valuation_fee: float | None = None  # Fixbetrag (Schätzung)


@dataclass(frozen=True)
class MortgageParams:
    first_mortgage: float = 650_000
    first_mortgage_rate: float = 1.5  # %
    second_mortgage: float = 150_000
    second_mortgage_rate: float = 1.5  # %
    amortization_years: int = 15  # nur 2. Hypothek wird amortisiert


@dataclass(frozen=True)
class RenovationCycle:
    """One-off renovation repeating every `interval` years from `first_year`."""

    amount: float
    first_year: int
    interval: int


@dataclass(frozen=True)
class RunningCostsParams:
    utilities: float = 300  # Nebenkosten pro Monat
    insurance: float = 100  # Gebäudeversicherung pro Monat
    maintenance_mode: MaintenanceMode = MaintenanceMode.SIMPLE
    maintenance_simple: float = 1.0  # % des Kaufpreises pro Jahr
    parking_cost: float = 0.0  # pro Monat
    condominium_fees: float = 0.0  # Verwaltung STWEG pro Monat
    renovation_reserve: float = 0.0  # Erneuerungsfonds pro Jahr
    # Detailed maintenance (only used when maintenance_mode is DETAILED)
    roof: RenovationCycle | None = None
    facade: RenovationCycle | None = None
    heating: RenovationCycle | None = None
    kitchen_bath: RenovationCycle | None = None

    def renovation_cycles(self) -> dict[str, RenovationCycle | None]:
        return {
            "roof": self.roof,
            "facade": self.facade,
            "heating": self.heating,
            "kitchen_bath": self.kitchen_bath,
        }


@dataclass(frozen=True)
class TaxParams:
    marginal_tax_rate: float = 25.0  # Grenzsteuersatz %
    interest_deduction: bool = True  # Schuldzinsenabzug
    rental_value_taxation: bool = True  # Eigenmietwert besteuert
    rental_value_rate: float = 3.5  # Eigenmietwert in % des Liegenschaftswerts


@dataclass(frozen=True)
class MacroParams:
    property_appreciation_rate: float = 2.0  # % p.a.
    etf_return_rate: float = 6.0  # Rendite Alternativanlage % p.a.
    inflation_rate: float = 1.5  # % p.a.
    invest_cash_in_rent: bool = True
    invest_cash_in_ownership: bool = True


@dataclass(frozen=True)
class ParameterSet:
    quick_start: QuickStartParams = field(default_factory=QuickStartParams)
    rent: RentParams = field(default_factory=RentParams)
    purchase: PurchaseParams = field(default_factory=PurchaseParams)
    mortgage: MortgageParams = field(default_factory=MortgageParams)
    running_costs: RunningCostsParams = field(default_factory=RunningCostsParams)
    tax: TaxParams = field(default_factory=TaxParams)
    macro: MacroParams = field(default_factory=MacroParams)

    @property
    def total_mortgage(self) -> float:
        return self.mortgage.first_mortgage + self.mortgage.second_mortgage

    @property
    def initial_total_wealth(self) -> float:
        """Household wealth before the decision (falls back to equity)."""
        wealth = self.quick_start.initial_total_wealth
        return wealth if wealth else self.purchase.equity

    def inflation_factor(self, year: int) -> float:
        """Cost scaling for simulated year `year` (year 1 → 1.0)."""
        return (1 + self.macro.inflation_rate / 100) ** (year - 1)

    def blended_mortgage_rate(self) -> float:
        """Principal-weighted average of both tranche rates (%)."""
        m = self.mortgage
        total = m.first_mortgage + m.second_mortgage
        if total == 0:
            return 0.0
        return (
            m.first_mortgage * m.first_mortgage_rate
            + m.second_mortgage * m.second_mortgage_rate
        ) / total

    def annual_amortization(self, year: int) -> float:
        """Linear amortization of the second tranche in `year` (0 after the horizon)."""
        m = self.mortgage
        if m.second_mortgage > 0 and year <= m.amortization_years:
            return m.second_mortgage / m.amortization_years
        return 0.0


def calc_closing_costs(params: ParameterSet) -> float:
    """Transaction costs: notary + land registry + broker fees on the purchase price."""
    p = params.purchase
    fee_pct = p.notary_fees + p.land_registry_fees + p.broker_fees
    return p.purchase_price * fee_pct / 100


def calc_initial_investment(params: ParameterSet) -> float:
    """Initial cash outlay for buying: equity + closing costs + optional fees.

    Shared by the KPI block, the year-0 baseline and the simulation start state.
    """
    p = params.purchase
    processing = params.total_mortgage * p.mortgage_processing_fee / 100 if p.mortgage_processing_fee else 0.0
    valuation = p.property_valuation_fee or 0.0
    return p.equity + calc_closing_costs(params) + processing + valuation
