# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Pydantic models for emission factors and CO2 calculations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Adjustment(str, Enum):
    """How a trigger answer modifies a dependent quantity's emissions."""

    RENEWABLE_SHARE = "renewable_share"
    WASTE_MANAGEMENT = "waste_management"


class EmissionFactor(BaseModel):
    """Conversion constant from a physical quantity to kg CO2-equivalent."""

    model_config = {"frozen": True}

    key: str = Field(..., description="Lookup key (e.g. 'electricity_italy')")
    source: str = Field(..., description="Human-readable source name")
    unit: str = Field(..., description="Unit of the input quantity (kWh, m³, L, kg, km)")
    co2_kg_per_unit: float = Field(..., ge=0, description="kg CO2eq per unit")
    description: str = Field(default="", description="What the factor covers")


class EmissionResult(BaseModel):
    """Outcome of applying an emission factor to a quantity."""

    input_value: float = Field(..., ge=0)
    input_unit: str
    co2_kg: float = Field(..., ge=0)
    co2_tonnes: float = Field(..., ge=0)
    factor_used: EmissionFactor


class EmissionDependency(BaseModel):
    """Declares that answering *trigger_id* re-prices *dependent_id*."""

    model_config = {"frozen": True}

    trigger_id: str = Field(..., description="Question whose answer adjusts the factor")
    dependent_id: str = Field(..., description="Quantity question that is recalculated")
    adjustment: Adjustment
