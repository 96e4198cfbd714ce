# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""FastAPI router with REST endpoints for the ESG assessment API."""

from __future__ import annotations

from typing import Optional

from esg_assessment.api import check_dependency

check_dependency("fastapi", "pip install -e '.[api]'")

from fastapi import APIRouter, Depends, HTTPException  # noqa: E402

from esg_assessment import __version__  # noqa: E402
from esg_assessment.api.models import (  # noqa: E402
    BenchmarkRequest,
    EmissionRequest,
    HealthResponse,
    ReportRequest,
    ScoreRequest,
)
from esg_assessment.assessment.engine import AssessmentEngine  # noqa: E402
from esg_assessment.assessment.models import (  # noqa: E402
    AssessmentReport,
    Category,
    Question,
    ScoreResult,
    ScoreSummary,
)
from esg_assessment.assessment.questions import (  # noqa: E402
    ALL_QUESTIONS,
    get_question,
    list_questions,
)
from esg_assessment.benchmark.comparator import BenchmarkComparator  # noqa: E402
from esg_assessment.benchmark.models import BenchmarkResult  # noqa: E402
from esg_assessment.emissions.calculator import compute_emission  # noqa: E402
from esg_assessment.emissions.factors import EMISSION_FACTORS  # noqa: E402
from esg_assessment.emissions.models import EmissionFactor, EmissionResult  # noqa: E402
from esg_assessment.errors import UnknownQuestionError  # noqa: E402
from esg_assessment.scoring.engine import ScoringEngine  # noqa: E402

router = APIRouter(prefix="/api/v1", tags=["esg-assessment"])


# ---------------------------------------------------------------------------
# Dependency injection
# ---------------------------------------------------------------------------

def get_scoring_engine() -> ScoringEngine:
    return ScoringEngine()


def get_comparator() -> BenchmarkComparator:
    return BenchmarkComparator()


def get_assessment_engine() -> AssessmentEngine:
    """Return the assessment engine used by ``/report``.

    Used as a FastAPI dependency so the engine can be overridden in tests
    or custom deployments.
    """
    return AssessmentEngine()


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return service health status and version information."""
    return HealthResponse(
        status="ok",
        version=__version__,
        question_count=len(ALL_QUESTIONS),
    )


@router.get("/questions", response_model=list[Question])
async def questions(category: Optional[Category] = None) -> list[Question]:
    """List the questionnaire, optionally restricted to one category."""
    return list(list_questions(category))


@router.get("/questions/{question_id}", response_model=Question)
async def question(question_id: str) -> Question:
    try:
        return get_question(question_id)
    except UnknownQuestionError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/emission-factors", response_model=dict[str, EmissionFactor])
async def emission_factors() -> dict[str, EmissionFactor]:
    return EMISSION_FACTORS


@router.post("/emissions", response_model=EmissionResult)
async def emissions(request: EmissionRequest) -> EmissionResult:
    """Convert a quantity into CO2eq with one emission factor.

    Unknown factor keys and negative quantities are rejected with 400.
    """
    result = compute_emission(request.quantity, request.factor_key)
    if result is None:
        raise HTTPException(
            status_code=400,
            detail=(
                f"Cannot compute emissions for quantity {request.quantity} "
                f"with factor '{request.factor_key}'"
            ),
        )
    return result


@router.post("/score", response_model=ScoreResult)
async def score(
    request: ScoreRequest,
    engine: ScoringEngine = Depends(get_scoring_engine),
) -> ScoreResult:
    """Score a response collection; unknown question ids are ignored."""
    return engine.score(request.responses)


@router.post("/benchmark", response_model=BenchmarkResult)
async def benchmark(
    request: BenchmarkRequest,
    comparator: BenchmarkComparator = Depends(get_comparator),
) -> BenchmarkResult:
    """Compare category scores against the reference tables."""
    scores = ScoreSummary(
        environmental=request.environmental,
        social=request.social,
        governance=request.governance,
    )
    return comparator.compare(scores, request.company)


@router.post("/report", response_model=AssessmentReport)
async def report(
    request: ReportRequest,
    engine: AssessmentEngine = Depends(get_assessment_engine),
) -> AssessmentReport:
    """Run the full assessment pipeline for one company."""
    return engine.evaluate(request.company, request.responses)
