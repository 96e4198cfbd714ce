# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Mutable state for one questionnaire walkthrough.

An ``AssessmentSession`` owns the responses and the emission results
derived from them.  Answering a quantity question recomputes its
emission; answering a trigger question listed in
``EMISSION_DEPENDENCIES`` recomputes the dependent quantity's emission
with the new adjustment.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from esg_assessment.assessment.models import (
    AnswerValue,
    Category,
    Question,
    Response,
    ScoreResult,
)
from esg_assessment.assessment.questions import (
    ALL_QUESTIONS,
    EMISSION_DEPENDENCIES,
    get_question,
    list_questions,
)
from esg_assessment.emissions.calculator import (
    calculate_electricity_emissions,
    calculate_waste_emissions,
    compute_emission,
    format_emissions,
    renewable_percentage_from_answer,
    total_emissions,
)
from esg_assessment.emissions.models import Adjustment, EmissionDependency, EmissionResult
from esg_assessment.scoring.engine import ScoringEngine
from esg_assessment.scoring.thresholds import round_half_up

logger = logging.getLogger(__name__)


def _positive_quantity(value: AnswerValue) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if math.isfinite(value) and value > 0 else None


class AssessmentSession:
    """Responses and emission results for one company's assessment.

    Usage::

        session = AssessmentSession()
        session.answer("E1_01", "Sì, oltre 80%")
        session.answer("E1_02", 1000)
        session.emissions["E1_02"].co2_kg   # 34.95
    """

    def __init__(
        self,
        dependencies: Iterable[EmissionDependency] = EMISSION_DEPENDENCIES,
    ) -> None:
        self.responses: dict[str, Response] = {}
        self.emissions: dict[str, EmissionResult] = {}
        deps = tuple(dependencies)
        self._dependents = {d.trigger_id: d for d in deps}
        self._adjustments = {d.dependent_id: d for d in deps}
        self._engine = ScoringEngine()

    @classmethod
    def from_responses(cls, responses: Iterable[Response]) -> AssessmentSession:
        """Replay a stored response collection; unknown ids are skipped."""
        session = cls()
        for response in responses:
            try:
                session.answer(response.question_id, response.answer, response.notes)
            except KeyError:
                logger.debug("Skipping stored response to unknown question %r",
                             response.question_id)
        return session

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def answer(
        self, question_id: str, value: AnswerValue, notes: str | None = None
    ) -> Response:
        """Record (or overwrite) the answer to *question_id*."""
        question = get_question(question_id)
        response = Response(question_id=question_id, answer=value, notes=notes)
        self.responses[question_id] = response

        if question.emission_factor_key:
            self._recompute(question)

        dependency = self._dependents.get(question_id)
        if dependency is not None:
            self._recompute(get_question(dependency.dependent_id))

        return response

    def clear(self, question_id: str) -> None:
        """Remove the answer to *question_id* and anything derived from it."""
        question = get_question(question_id)
        self.responses.pop(question_id, None)
        self.emissions.pop(question_id, None)

        dependency = self._dependents.get(question.id)
        if dependency is not None:
            self._recompute(get_question(dependency.dependent_id))

    def reset(self) -> None:
        self.responses.clear()
        self.emissions.clear()

    # ------------------------------------------------------------------
    # Emissions
    # ------------------------------------------------------------------

    def _recompute(self, question: Question) -> None:
        response = self.responses.get(question.id)
        quantity = _positive_quantity(response.answer) if response else None
        if quantity is None:
            self.emissions.pop(question.id, None)
            return

        result = self._calculate(question, quantity)
        if result is None:
            self.emissions.pop(question.id, None)
            return

        logger.debug("Emission for %s: %.3f kg CO2eq", question.id, result.co2_kg)
        self.emissions[question.id] = result

    def _calculate(self, question: Question, quantity: float) -> Optional[EmissionResult]:
        dependency = self._adjustments.get(question.id)
        if dependency is None:
            return compute_emission(quantity, question.emission_factor_key)

        trigger = self.responses.get(dependency.trigger_id)
        trigger_answer = trigger.answer if trigger else None

        if dependency.adjustment == Adjustment.RENEWABLE_SHARE:
            return calculate_electricity_emissions(
                quantity,
                renewable_percentage_from_answer(trigger_answer),
                factor_key=question.emission_factor_key,
            )
        if dependency.adjustment == Adjustment.WASTE_MANAGEMENT:
            level = trigger_answer if isinstance(trigger_answer, str) else None
            return calculate_waste_emissions(quantity, level)
        return compute_emission(quantity, question.emission_factor_key)

    def total_emissions(self) -> float:
        """Total tonnes CO2eq over every computed emission."""
        return total_emissions(self.emissions.values())

    def formatted_emissions(self) -> str:
        return format_emissions(self.total_emissions())

    # ------------------------------------------------------------------
    # Progress and scoring
    # ------------------------------------------------------------------

    def progress(self) -> int:
        """Answered share of the whole catalog, 0-100."""
        return round_half_up(len(self.responses) / len(ALL_QUESTIONS) * 100)

    def category_progress(self, category: Category | str) -> tuple[int, int]:
        """``(answered, total)`` for one category."""
        questions = list_questions(category)
        answered = sum(1 for q in questions if q.id in self.responses)
        return answered, len(questions)

    def missing_required(self) -> list[str]:
        """Ids of required questions with no response, in catalog order."""
        return [q.id for q in ALL_QUESTIONS if q.required and q.id not in self.responses]

    def score(self) -> ScoreResult:
        return self._engine.score(self.responses)
