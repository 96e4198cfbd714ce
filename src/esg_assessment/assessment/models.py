# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Pydantic models for the ESG questionnaire, responses and scores."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, computed_field, model_validator

from esg_assessment.benchmark.models import BenchmarkResult, CompanyInfo
from esg_assessment.emissions.models import EmissionResult
from esg_assessment.scoring.thresholds import (
    LEVEL_EXCELLENT_MIN,
    LEVEL_GOOD_MIN,
    LEVEL_SUFFICIENT_MIN,
    round_half_up,
)

AnswerValue = Union[bool, int, float, str, None]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Category(str, Enum):
    """The three ESG assessment categories, in questionnaire order."""

    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"

    @property
    def display_name(self) -> str:
        """Human-readable category name."""
        return self.value.capitalize()


class AnswerType(str, Enum):
    """How a question is answered and therefore how it is scored."""

    MULTIPLE_CHOICE = "multiple_choice"
    NUMBER = "number"
    CALCULATOR = "calculator"
    BOOLEAN = "boolean"
    TEXT = "text"

    @property
    def is_quantity(self) -> bool:
        return self in (AnswerType.NUMBER, AnswerType.CALCULATOR)


class ScoreLevel(str, Enum):
    """Qualitative interpretation of a 0-100 score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    SUFFICIENT = "Sufficient"
    INSUFFICIENT = "Insufficient"

    @classmethod
    def from_score(cls, score: float) -> ScoreLevel:
        """Return the level for a given 0-100 score."""
        if score >= LEVEL_EXCELLENT_MIN:
            return cls.EXCELLENT
        if score >= LEVEL_GOOD_MIN:
            return cls.GOOD
        if score >= LEVEL_SUFFICIENT_MIN:
            return cls.SUFFICIENT
        return cls.INSUFFICIENT

    @property
    def color(self) -> str:
        """Terminal color for this level."""
        return {
            ScoreLevel.EXCELLENT: "green",
            ScoreLevel.GOOD: "blue",
            ScoreLevel.SUFFICIENT: "yellow",
            ScoreLevel.INSUFFICIENT: "red",
        }[self]

    @property
    def description(self) -> str:
        """One-line description of what this level means."""
        return {
            ScoreLevel.EXCELLENT: "Outstanding sustainability practices; a model for peers",
            ScoreLevel.GOOD: "Good sustainability practices with room for improvement",
            ScoreLevel.SUFFICIENT: "Basic sustainability level; significant improvements needed",
            ScoreLevel.INSUFFICIENT: "Urgent action is required to improve sustainability",
        }[self]


# ---------------------------------------------------------------------------
# Question / Response models
# ---------------------------------------------------------------------------

class Question(BaseModel):
    """A single questionnaire item."""

    model_config = {"frozen": True}

    id: str = Field(..., description="Unique question identifier (e.g. 'E1_01')")
    category: Category
    subcategory: str = Field(..., description="Finer grouping label used for breakdowns")
    text: str = Field(..., description="Prompt presented to the user")
    type: AnswerType
    options: tuple[str, ...] = Field(
        default=(),
        description="Choice labels, most ESG-favourable first (multiple_choice only)",
    )
    weight: int = Field(..., ge=0, description="Points available for this question")
    required: bool = Field(default=True)
    description: Optional[str] = Field(default=None)
    emission_factor_key: Optional[str] = Field(
        default=None,
        description="Emission factor applied to a quantity answer, if any",
    )


class Response(BaseModel):
    """A user's answer to one question."""

    question_id: str
    answer: AnswerValue = None
    notes: Optional[str] = Field(default=None, description="Free-text note")


# ---------------------------------------------------------------------------
# Scoring models
# ---------------------------------------------------------------------------

class SubcategoryScore(BaseModel):
    """Achieved and available weight for one subcategory."""

    score: int = Field(default=0, ge=0)
    max_score: int = Field(default=0, ge=0)
    percentage: int = Field(default=0, ge=0, le=100)
    answered_questions: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)


class CategoryScore(BaseModel):
    """Achieved and available weight for one category."""

    category: Category
    score: int = Field(..., ge=0, description="Sum of achieved weight")
    max_score: int = Field(..., ge=0, description="Sum of every question's weight")
    percentage: int = Field(..., ge=0, le=100)
    subcategories: dict[str, SubcategoryScore] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display_name(self) -> str:
        return self.category.display_name


class ScoreSummary(BaseModel):
    """The three category percentages plus the overall score."""

    environmental: float = Field(..., ge=0, le=100)
    social: float = Field(..., ge=0, le=100)
    governance: float = Field(..., ge=0, le=100)
    overall: Optional[float] = Field(
        default=None, ge=0, le=100,
        description="Defaults to the rounded mean of the three categories",
    )

    @model_validator(mode="after")
    def _fill_overall(self) -> ScoreSummary:
        if self.overall is None:
            self.overall = round_half_up(
                (self.environmental + self.social + self.governance) / 3
            )
        return self

    def for_category(self, category: Category) -> float:
        return getattr(self, category.value)


class ScoreResult(BaseModel):
    """Per-category and overall percentage scores for one response set."""

    environmental_score: int = Field(..., ge=0, le=100)
    social_score: int = Field(..., ge=0, le=100)
    governance_score: int = Field(..., ge=0, le=100)
    overall_score: int = Field(..., ge=0, le=100)
    categories: dict[Category, CategoryScore] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall_level(self) -> ScoreLevel:
        return ScoreLevel.from_score(self.overall_score)

    def category_score(self, category: Category) -> int:
        """Percentage score for *category*."""
        return getattr(self, f"{category.value}_score")

    def summary(self) -> ScoreSummary:
        """Compact view used as benchmark input."""
        return ScoreSummary(
            environmental=self.environmental_score,
            social=self.social_score,
            governance=self.governance_score,
            overall=self.overall_score,
        )


# ---------------------------------------------------------------------------
# Assessment report (top-level)
# ---------------------------------------------------------------------------

class AssessmentReport(BaseModel):
    """Everything produced by evaluating one company's responses."""

    company: CompanyInfo
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the report was produced",
    )
    score: ScoreResult
    benchmark: BenchmarkResult
    emissions: dict[str, EmissionResult] = Field(
        default_factory=dict,
        description="Emission results keyed by quantity question id",
    )
    total_emissions_tonnes: float = Field(default=0.0, ge=0)
    formatted_emissions: str = Field(default="")
    progress: int = Field(default=0, ge=0, le=100, description="Answered share of the catalog")
    missing_required: list[str] = Field(
        default_factory=list,
        description="Ids of required questions left unanswered",
    )
    responses: list[Response] = Field(default_factory=list)
    summary: str = Field(default="")
