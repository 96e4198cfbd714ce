# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for emission factors and CO2 calculators."""

from __future__ import annotations

import pytest

from esg_assessment.emissions.calculator import (
    apply_renewable_reduction,
    calculate_electricity_emissions,
    calculate_energy_emissions,
    calculate_waste_emissions,
    compute_emission,
    format_emissions,
    renewable_percentage_from_answer,
    total_emissions,
)
from esg_assessment.emissions.factors import (
    EMISSION_FACTORS,
    RENEWABLE_SHARE_CHOICES,
    WASTE_MANAGEMENT_CHOICES,
)


class TestFactorTable:
    def test_known_keys(self):
        assert set(EMISSION_FACTORS) == {
            "electricity_italy", "natural_gas", "diesel", "gasoline", "paper",
            "water", "flight_domestic", "flight_international",
            "waste_mixed", "waste_recycled", "waste_organic",
        }

    def test_keys_match_entries(self):
        for key, factor in EMISSION_FACTORS.items():
            assert factor.key == key
            assert factor.co2_kg_per_unit > 0

    def test_electricity_factor(self):
        factor = EMISSION_FACTORS["electricity_italy"]
        assert factor.co2_kg_per_unit == pytest.approx(0.233)
        assert factor.unit == "kWh"


class TestComputeEmission:
    def test_negative_quantity(self):
        assert compute_emission(-1, "electricity_italy") is None

    def test_unknown_key(self):
        assert compute_emission(100, "unknown_key") is None

    @pytest.mark.parametrize("quantity", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_quantity(self, quantity):
        assert compute_emission(quantity, "electricity_italy") is None

    def test_non_finite_electricity(self):
        assert calculate_electricity_emissions(float("nan"), renewable_percentage=85) is None

    def test_electricity(self):
        result = compute_emission(100, "electricity_italy")
        assert result is not None
        assert result.co2_kg == pytest.approx(23.3)
        assert result.co2_tonnes == pytest.approx(0.0233)
        assert result.input_unit == "kWh"
        assert result.factor_used.key == "electricity_italy"

    def test_zero_quantity(self):
        result = compute_emission(0, "natural_gas")
        assert result is not None
        assert result.co2_kg == 0

    def test_natural_gas(self):
        result = compute_emission(500, "natural_gas")
        assert result.co2_kg == pytest.approx(989.0)

    def test_unknown_key_logs_warning(self, caplog):
        with caplog.at_level("WARNING"):
            compute_emission(1, "coal")
        assert "coal" in caplog.text


class TestRenewableShare:
    @pytest.mark.parametrize(
        "answer, expected",
        [
            ("Sì, oltre 80%", 85),
            ("Parzialmente (30-80%)", 55),
            ("Poco (10-30%)", 20),
            ("No, meno del 10%", 5),
            ("Non so", 5),
            (None, 5),
            ("Something else", 5),
            (42, 5),
        ],
    )
    def test_percentage_from_answer(self, answer, expected):
        assert renewable_percentage_from_answer(answer) == expected

    def test_choices_cover_mapping(self):
        assert len(RENEWABLE_SHARE_CHOICES) == 5

    def test_reduction_applied(self):
        result = calculate_electricity_emissions(1000, 85)
        assert result.co2_kg == pytest.approx(34.95)
        assert result.factor_used.co2_kg_per_unit == pytest.approx(0.233 * 0.15)
        assert "reduced by 85%" in result.factor_used.description

    def test_default_percentage_not_applied(self):
        result = calculate_electricity_emissions(1000, 5)
        assert result.co2_kg == pytest.approx(233.0)
        assert "reduced" not in result.factor_used.description

    def test_no_percentage(self):
        result = calculate_electricity_emissions(1000)
        assert result.co2_kg == pytest.approx(233.0)

    def test_reduction_leaves_table_untouched(self):
        calculate_electricity_emissions(1000, 55)
        assert EMISSION_FACTORS["electricity_italy"].co2_kg_per_unit == pytest.approx(0.233)

    def test_apply_reduction_to_existing_result(self):
        base = compute_emission(1000, "electricity_italy")
        reduced = apply_renewable_reduction(base, 20)
        assert reduced.co2_kg == pytest.approx(233.0 * 0.8)
        assert base.co2_kg == pytest.approx(233.0)

    def test_negative_kwh(self):
        assert calculate_electricity_emissions(-5, 85) is None


class TestWaste:
    def test_no_management_uses_mixed(self):
        result = calculate_waste_emissions(100, "No")
        assert result.co2_kg == pytest.approx(46.1)
        assert result.factor_used.key == "waste_mixed"

    def test_sorted_uses_recycled(self):
        result = calculate_waste_emissions(100, "Sì, raccolta differenziata")
        assert result.co2_kg == pytest.approx(5.8)
        assert result.factor_used.key == "waste_recycled"

    def test_best_practice_uses_organic(self):
        result = calculate_waste_emissions(100, WASTE_MANAGEMENT_CHOICES[0])
        assert result.co2_kg == pytest.approx(8.9)
        assert result.factor_used.key == "waste_organic"

    def test_partial_averages_mixed_and_recycled(self):
        result = calculate_waste_emissions(100, "Parzialmente")
        assert result.co2_kg == pytest.approx((46.1 + 5.8) / 2)
        assert result.factor_used.key == "waste_partial"
        assert result.factor_used.co2_kg_per_unit == pytest.approx((0.461 + 0.058) / 2)

    def test_unanswered_uses_mixed(self):
        assert calculate_waste_emissions(100).co2_kg == pytest.approx(46.1)

    def test_unrecognised_uses_mixed(self):
        assert calculate_waste_emissions(100, "Forse").co2_kg == pytest.approx(46.1)

    @pytest.mark.parametrize("kg", [0, -10, float("nan"), float("inf")])
    @pytest.mark.parametrize("management", ["No", "Parzialmente"])
    def test_unusable_quantity(self, kg, management):
        assert calculate_waste_emissions(kg, management) is None


class TestEnergyBatch:
    def test_all_sources(self):
        results = calculate_energy_emissions(
            electricity_kwh=1000, gas_m3=100, diesel_l=10, gasoline_l=10,
        )
        assert [r.factor_used.key for r in results] == [
            "electricity_italy", "natural_gas", "diesel", "gasoline",
        ]

    def test_skips_zero_quantities(self):
        results = calculate_energy_emissions(gas_m3=100)
        assert len(results) == 1
        assert results[0].factor_used.key == "natural_gas"

    def test_renewable_share_only_affects_electricity(self):
        results = calculate_energy_emissions(
            electricity_kwh=1000, gas_m3=100, renewable_percentage=85,
        )
        assert results[0].co2_kg == pytest.approx(34.95)
        assert results[1].co2_kg == pytest.approx(197.8)

    def test_total_in_tonnes(self):
        results = calculate_energy_emissions(electricity_kwh=1000, gas_m3=100)
        assert total_emissions(results) == pytest.approx((233.0 + 197.8) / 1000)

    def test_total_of_nothing(self):
        assert total_emissions([]) == 0


class TestFormatEmissions:
    def test_grams(self):
        assert format_emissions(0.0005) == "500 g CO₂eq"

    def test_kilograms(self):
        assert format_emissions(0.0233) == "23.3 kg CO₂eq"

    def test_tonnes(self):
        assert format_emissions(2.5) == "2.50 t CO₂eq"

    def test_boundaries(self):
        assert format_emissions(0.001).endswith("kg CO₂eq")
        assert format_emissions(1.0).endswith("t CO₂eq")
