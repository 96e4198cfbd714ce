# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""API request/response Pydantic models for the REST interface."""

from __future__ import annotations

from pydantic import BaseModel, Field

from esg_assessment.assessment.models import Response
from esg_assessment.benchmark.models import CompanyInfo


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class EmissionRequest(BaseModel):
    """Request body for the ``POST /api/v1/emissions`` endpoint."""

    quantity: float = Field(..., description="Physical quantity in the factor's unit.")
    factor_key: str = Field(..., description="Emission factor key, e.g. 'electricity_italy'.")


class ScoreRequest(BaseModel):
    """Request body for the ``POST /api/v1/score`` endpoint."""

    responses: list[Response] = Field(
        default_factory=list,
        description="Questionnaire responses; unknown question ids are ignored.",
    )


class BenchmarkRequest(BaseModel):
    """Request body for the ``POST /api/v1/benchmark`` endpoint."""

    environmental: float = Field(..., ge=0, le=100)
    social: float = Field(..., ge=0, le=100)
    governance: float = Field(..., ge=0, le=100)
    company: CompanyInfo = Field(default_factory=CompanyInfo)


class ReportRequest(BaseModel):
    """Request body for the ``POST /api/v1/report`` endpoint."""

    company: CompanyInfo = Field(default_factory=CompanyInfo)
    responses: list[Response] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    """Response body returned by the ``GET /api/v1/health`` endpoint."""

    status: str = Field(..., description="Service health status (e.g. 'ok').")
    version: str = Field(..., description="Application version string.")
    question_count: int = Field(..., ge=0, description="Questions in the catalog.")
