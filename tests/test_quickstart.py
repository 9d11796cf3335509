"""Tests for quick-start derivation."""

import pytest
from housing_sim_ch import QuickStartParams, calculate_scenario, derive_from_quick_start
from housing_sim_ch.quickstart import base_rent_per_sqm, estimated_size


class TestBaseRent:
    @pytest.mark.parametrize(
        "location, property_type, expected",
        [
            ("prime", "apartment", 35),
            ("good", "apartment", 28),
            ("peripheral", "house", 20),
            ("average", "condo", 24),
        ],
    )
    def test_table(self, location, property_type, expected):
        assert base_rent_per_sqm(location, property_type) == expected

    def test_unknown_location(self):
        with pytest.raises(ValueError, match="Unknown property type/location"):
            base_rent_per_sqm("downtown", "apartment")


class TestEstimatedSize:
    def test_apartment(self):
        assert estimated_size("apartment", 1_000_000) == 100

    def test_house(self):
        assert estimated_size("house", 1_200_000) == 150


class TestDeriveFromQuickStart:
    def test_good_apartment(self):
        p = derive_from_quick_start(QuickStartParams(purchase_price=1_000_000, equity=200_000))
        assert p.rent.net_rent == 2_800
        assert p.rent.utilities == pytest.approx(420)
        assert p.rent.annual_increase == 2.0
        assert p.mortgage.first_mortgage == pytest.approx(650_000)
        assert p.mortgage.second_mortgage == pytest.approx(150_000)
        assert p.mortgage.amortization_years == 15
        assert p.purchase.broker_fees == 3.0
        assert p.running_costs.utilities == pytest.approx(420)

    def test_high_equity_skips_second_tranche(self):
        p = derive_from_quick_start(QuickStartParams(purchase_price=1_000_000, equity=400_000))
        assert p.mortgage.first_mortgage == pytest.approx(600_000)
        assert p.mortgage.second_mortgage == pytest.approx(0, abs=1e-6)

    def test_equity_above_price(self):
        p = derive_from_quick_start(QuickStartParams(purchase_price=500_000, equity=600_000))
        assert p.mortgage.first_mortgage == 0
        assert p.mortgage.second_mortgage == 0

    def test_house_rent(self):
        p = derive_from_quick_start(QuickStartParams(purchase_price=1_200_000, property_type="house"))
        assert p.rent.net_rent == 32 * 150

    def test_keeps_quick_start_facts(self):
        qs = QuickStartParams(household_income=180_000, annual_living_expenses=60_000)
        assert derive_from_quick_start(qs).quick_start == qs

    def test_result_is_simulatable(self):
        qs = QuickStartParams(purchase_price=1_000_000, equity=400_000)
        result = calculate_scenario(derive_from_quick_start(qs))
        assert len(result.yearly_data) == 51
