# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Emission factors and CO2 calculators."""

from esg_assessment.emissions.calculator import (
    calculate_electricity_emissions,
    calculate_energy_emissions,
    calculate_waste_emissions,
    compute_emission,
    format_emissions,
    renewable_percentage_from_answer,
    total_emissions,
)
from esg_assessment.emissions.factors import EMISSION_FACTORS
from esg_assessment.emissions.models import (
    Adjustment,
    EmissionDependency,
    EmissionFactor,
    EmissionResult,
)

__all__ = [
    "Adjustment",
    "EMISSION_FACTORS",
    "EmissionDependency",
    "EmissionFactor",
    "EmissionResult",
    "calculate_electricity_emissions",
    "calculate_energy_emissions",
    "calculate_waste_emissions",
    "compute_emission",
    "format_emissions",
    "renewable_percentage_from_answer",
    "total_emissions",
]
