# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""CO2 emission calculations for quantity answers.

All functions are pure: they look factors up in the static table, apply
the renewable-share or waste-management policy where relevant, and
return a fresh ``EmissionResult``.  Invalid input yields ``None`` rather
than an exception so callers can skip it silently.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from esg_assessment.emissions.factors import (
    DEFAULT_RENEWABLE_PERCENTAGE,
    DEFAULT_WASTE_FACTOR,
    ELECTRICITY_ITALY,
    EMISSION_FACTORS,
    RENEWABLE_SHARE_CHOICES,
    RENEWABLE_SHARE_PERCENTAGES,
    WASTE_FACTOR_BY_ANSWER,
    WASTE_MIXED,
    WASTE_PARTIAL,
    WASTE_RECYCLED,
)
from esg_assessment.emissions.models import EmissionFactor, EmissionResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Display thresholds (tonnes)
# ---------------------------------------------------------------------------
GRAMS_BELOW_TONNES = 0.001
KILOGRAMS_BELOW_TONNES = 1.0


def compute_emission(quantity: float, factor_key: str) -> Optional[EmissionResult]:
    """Apply the emission factor *factor_key* to *quantity*.

    Returns ``None`` when the key is unknown or the quantity is negative
    or not a finite number.
    """
    factor = EMISSION_FACTORS.get(factor_key)
    if factor is None:
        logger.warning("Unknown emission factor key %r", factor_key)
        return None
    if not math.isfinite(quantity) or quantity < 0:
        logger.warning("Invalid quantity %s rejected for %s", quantity, factor_key)
        return None
    return _apply(quantity, factor)


def _apply(quantity: float, factor: EmissionFactor) -> EmissionResult:
    co2_kg = quantity * factor.co2_kg_per_unit
    return EmissionResult(
        input_value=quantity,
        input_unit=factor.unit,
        co2_kg=co2_kg,
        co2_tonnes=co2_kg / 1000,
        factor_used=factor,
    )


def renewable_percentage_from_answer(answer: object) -> int:
    """Map a renewable-share choice to a representative percentage.

    Unanswered, "don't know" and unrecognised answers fall back to the
    conservative 5% floor.
    """
    if isinstance(answer, str) and answer in RENEWABLE_SHARE_CHOICES:
        return RENEWABLE_SHARE_PERCENTAGES[RENEWABLE_SHARE_CHOICES.index(answer)]
    return DEFAULT_RENEWABLE_PERCENTAGE


def apply_renewable_reduction(
    result: EmissionResult, renewable_percentage: float
) -> EmissionResult:
    """Scale an electricity result down by the renewable share.

    The reduction is skipped at or below the conservative default so an
    unknown share never lowers the estimate.
    """
    if renewable_percentage <= DEFAULT_RENEWABLE_PERCENTAGE:
        return result
    remaining = 1 - renewable_percentage / 100
    factor = result.factor_used.model_copy(update={
        "co2_kg_per_unit": result.factor_used.co2_kg_per_unit * remaining,
        "description": (
            f"{result.factor_used.description} "
            f"(reduced by {renewable_percentage:g}% for renewable sources)"
        ),
    })
    return _apply(result.input_value, factor)


def calculate_electricity_emissions(
    kwh: float,
    renewable_percentage: float | None = None,
    factor_key: str = ELECTRICITY_ITALY.key,
) -> Optional[EmissionResult]:
    """Electricity emissions, optionally reduced by the renewable share."""
    result = compute_emission(kwh, factor_key)
    if result is None or renewable_percentage is None:
        return result
    return apply_renewable_reduction(result, renewable_percentage)


def calculate_waste_emissions(
    waste_kg: float, management_level: str | None = None
) -> Optional[EmissionResult]:
    """Waste emissions with the factor chosen by waste-management practice.

    The partial answer averages the mixed and recycled factors; anything
    unrecognised, including no answer, uses the worst-case mixed factor.
    """
    if not math.isfinite(waste_kg) or waste_kg <= 0:
        return None

    if management_level == WASTE_PARTIAL:
        mixed = _apply(waste_kg, WASTE_MIXED)
        recycled = _apply(waste_kg, WASTE_RECYCLED)
        average_kg = (mixed.co2_kg + recycled.co2_kg) / 2
        factor = EmissionFactor(
            key="waste_partial",
            source="Mixed/Recycled Waste (Average)",
            unit=WASTE_MIXED.unit,
            co2_kg_per_unit=average_kg / waste_kg,
            description="Average factor for partially sorted waste",
        )
        return EmissionResult(
            input_value=waste_kg,
            input_unit=WASTE_MIXED.unit,
            co2_kg=average_kg,
            co2_tonnes=average_kg / 1000,
            factor_used=factor,
        )

    factor_key = WASTE_FACTOR_BY_ANSWER.get(management_level or "", DEFAULT_WASTE_FACTOR)
    return compute_emission(waste_kg, factor_key)


def calculate_energy_emissions(
    electricity_kwh: float = 0,
    gas_m3: float = 0,
    diesel_l: float = 0,
    gasoline_l: float = 0,
    renewable_percentage: float | None = None,
) -> list[EmissionResult]:
    """Emissions for each positive energy quantity, in input order."""
    results: list[EmissionResult] = []

    if electricity_kwh > 0:
        calc = calculate_electricity_emissions(electricity_kwh, renewable_percentage)
        if calc:
            results.append(calc)

    for quantity, key in (
        (gas_m3, "natural_gas"),
        (diesel_l, "diesel"),
        (gasoline_l, "gasoline"),
    ):
        if quantity > 0:
            calc = compute_emission(quantity, key)
            if calc:
                results.append(calc)

    return results


def total_emissions(results: Iterable[EmissionResult]) -> float:
    """Sum of the results in tonnes CO2eq."""
    return sum(r.co2_tonnes for r in results)


def format_emissions(tonnes: float) -> str:
    """Human-readable CO2 amount, picking g / kg / t by magnitude."""
    if tonnes < GRAMS_BELOW_TONNES:
        return f"{tonnes * 1_000_000:.0f} g CO₂eq"
    if tonnes < KILOGRAMS_BELOW_TONNES:
        return f"{tonnes * 1000:.1f} kg CO₂eq"
    return f"{tonnes:.2f} t CO₂eq"
