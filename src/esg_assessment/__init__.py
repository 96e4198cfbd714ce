# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""ESG Assessment - VSME questionnaire scoring, CO2 estimates and benchmarks."""

__version__ = "0.1.0"

from esg_assessment.assessment.models import (
    AssessmentReport,
    Category,
    Question,
    Response,
    ScoreLevel,
    ScoreResult,
    ScoreSummary,
)
from esg_assessment.assessment.questions import (
    ALL_QUESTIONS,
    get_question,
    list_questions,
)
from esg_assessment.assessment.session import AssessmentSession
from esg_assessment.assessment.engine import AssessmentEngine
from esg_assessment.benchmark.comparator import BenchmarkComparator
from esg_assessment.benchmark.models import BenchmarkResult, CompanyInfo
from esg_assessment.emissions.calculator import compute_emission
from esg_assessment.emissions.models import EmissionResult
from esg_assessment.scoring.engine import ScoringEngine

__all__ = [
    "ALL_QUESTIONS",
    "AssessmentEngine",
    "AssessmentReport",
    "AssessmentSession",
    "BenchmarkComparator",
    "BenchmarkResult",
    "Category",
    "CompanyInfo",
    "EmissionResult",
    "Question",
    "Response",
    "ScoreLevel",
    "ScoreResult",
    "ScoreSummary",
    "ScoringEngine",
    "compute_emission",
    "get_question",
    "list_questions",
]
