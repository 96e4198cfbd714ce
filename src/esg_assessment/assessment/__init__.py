# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""VSME questionnaire: models, question bank, sessions and the assessment pipeline."""

from esg_assessment.assessment.models import (
    AnswerType,
    AssessmentReport,
    Category,
    CategoryScore,
    Question,
    Response,
    ScoreLevel,
    ScoreResult,
    ScoreSummary,
    SubcategoryScore,
)

__all__ = [
    "AnswerType",
    "AssessmentReport",
    "Category",
    "CategoryScore",
    "Question",
    "Response",
    "ScoreLevel",
    "ScoreResult",
    "ScoreSummary",
    "SubcategoryScore",
]
