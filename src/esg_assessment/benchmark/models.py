# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Pydantic models for company metadata and benchmark comparisons."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SectorBucket(str, Enum):
    """Closed set of sectors with published reference scores."""

    MANUFACTURING = "Manufacturing"
    CONSTRUCTION = "Construction"
    ENERGY = "Energy"
    SERVICES = "Services"
    TECHNOLOGY = "Technology"
    COMMERCE = "Commerce"
    TOURISM = "Tourism"
    AGRICULTURE = "Agriculture"
    OTHER = "Other"


class SizeBand(str, Enum):
    """Company size by headcount."""

    MICRO = "Micro (1-9 employees)"
    SMALL = "Small (10-49 employees)"
    MEDIUM = "Medium (50-249 employees)"
    LARGE = "Large (250+ employees)"


class Region(str, Enum):
    """Macro-region of Italy."""

    NORTH = "North"
    CENTRE = "Centre"
    SOUTH = "South"


class CompetitiveTier(str, Enum):
    """Position of the overall score relative to the sector average."""

    LEADER = "Leader"
    STRONG_PERFORMER = "Strong performer"
    SECTOR_AVERAGE = "Sector average"
    DEVELOPING = "Developing"

    @property
    def color(self) -> str:
        return {
            CompetitiveTier.LEADER: "green",
            CompetitiveTier.STRONG_PERFORMER: "blue",
            CompetitiveTier.SECTOR_AVERAGE: "yellow",
            CompetitiveTier.DEVELOPING: "dark_orange",
        }[self]

    @property
    def description(self) -> str:
        return {
            CompetitiveTier.LEADER: "Among the best ESG performers in its sector",
            CompetitiveTier.STRONG_PERFORMER: "Above the sector average with room to grow",
            CompetitiveTier.SECTOR_AVERAGE: "Performance in line with the sector average",
            CompetitiveTier.DEVELOPING: "Significant opportunities for ESG improvement",
        }[self]


# ---------------------------------------------------------------------------
# Input / reference models
# ---------------------------------------------------------------------------

class CompanyInfo(BaseModel):
    """Company metadata used to pick reference tables."""

    name: Optional[str] = Field(default=None)
    sector: str = Field(default="", description="Free-text sector, classified best-effort")
    employees: Optional[int] = Field(default=None, ge=0, description="Headcount, if known")
    location: str = Field(default="", description="Free-text city or region")


class ReferenceScores(BaseModel):
    """Reference values for the three categories on a 0-100 scale."""

    model_config = {"frozen": True}

    environmental: int = Field(..., ge=0, le=100)
    social: int = Field(..., ge=0, le=100)
    governance: int = Field(..., ge=0, le=100)

    @property
    def average(self) -> float:
        return (self.environmental + self.social + self.governance) / 3


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class BenchmarkRow(BaseModel):
    """Company score next to every reference value for one category."""

    category: str = Field(..., description="Category display name")
    company: int = Field(..., ge=0, le=100)
    sector: int = Field(..., ge=0, le=100)
    national: int = Field(..., ge=0, le=100)
    size: int = Field(..., ge=0, le=100)
    region: int = Field(..., ge=0, le=100)
    full_mark: int = Field(default=100)

    @property
    def sector_delta(self) -> int:
        return self.company - self.sector

    @property
    def national_delta(self) -> int:
        return self.company - self.national


class BenchmarkResult(BaseModel):
    """Structured comparison of a company against the reference tables."""

    sector_bucket: SectorBucket
    size_band: SizeBand
    region: Region
    rows: list[BenchmarkRow]
    overall_score: float = Field(..., ge=0, le=100)
    sector_average: float
    national_average: float
    tier: CompetitiveTier
    insights: list[str] = Field(default_factory=list)


class BenchmarkSources(BaseModel):
    """Provenance of the static reference tables."""

    primary: list[str]
    methodology: list[str]
    coverage: str
    last_update: str
