# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Questionnaire scoring: per-question points, category and overall percentages.

Every question in the catalog contributes its weight to the available
total of its category, answered or not.  Achieved points depend on the
answer type; see ``score_question``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Union

from esg_assessment.assessment.models import (
    AnswerType,
    AnswerValue,
    Category,
    CategoryScore,
    Question,
    Response,
    ScoreResult,
    SubcategoryScore,
)
from esg_assessment.assessment.questions import ALL_QUESTIONS
from esg_assessment.scoring.thresholds import round_half_up

logger = logging.getLogger(__name__)

Responses = Union[Iterable[Response], Mapping[str, Response]]


def score_question(question: Question, answer: AnswerValue) -> int:
    """Points achieved by *answer* on *question*.

    - boolean: full weight for ``True`` only
    - multiple choice: ``weight * (N - index) / N``, half-up rounded;
      0 for a label that is not among the options
    - number / calculator: full weight for any number above zero
    - text: full weight for non-blank text
    """
    if question.type == AnswerType.BOOLEAN:
        return question.weight if answer is True else 0

    if question.type == AnswerType.MULTIPLE_CHOICE:
        if not question.options or not isinstance(answer, str):
            return 0
        if answer not in question.options:
            return 0
        n = len(question.options)
        index = question.options.index(answer)
        return round_half_up((n - index) / n * question.weight)

    if question.type.is_quantity:
        if isinstance(answer, bool) or not isinstance(answer, (int, float)):
            return 0
        return question.weight if answer > 0 else 0

    if question.type == AnswerType.TEXT:
        return question.weight if isinstance(answer, str) and answer.strip() else 0

    return 0


def _percentage(score: int, max_score: int) -> int:
    return round_half_up(score / max_score * 100) if max_score > 0 else 0


class ScoringEngine:
    """Scores a response collection against a question catalog.

    Usage::

        engine = ScoringEngine()
        result = engine.score(responses)
        result.overall_score, result.categories[Category.SOCIAL].subcategories
    """

    def __init__(self, questions: Iterable[Question] = ALL_QUESTIONS) -> None:
        self.questions: tuple[Question, ...] = tuple(questions)
        self._known_ids = {q.id for q in self.questions}

    def score(self, responses: Responses) -> ScoreResult:
        """Run the scoring pipeline.

        Args:
            responses: ``Response`` objects, or a mapping of question id to
                ``Response``.  When an id repeats, the last one wins.
                Responses to unknown questions are ignored.

        Returns:
            A ``ScoreResult`` with integer percentages per category, the
            overall score and per-subcategory breakdowns.
        """
        response_map = self._index(responses)

        categories: dict[Category, CategoryScore] = {}
        for category in Category:
            categories[category] = self._score_category(category, response_map)

        env = categories[Category.ENVIRONMENTAL].percentage
        soc = categories[Category.SOCIAL].percentage
        gov = categories[Category.GOVERNANCE].percentage

        return ScoreResult(
            environmental_score=env,
            social_score=soc,
            governance_score=gov,
            overall_score=round_half_up((env + soc + gov) / 3),
            categories=categories,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index(self, responses: Responses) -> dict[str, Response]:
        items = responses.values() if isinstance(responses, Mapping) else responses
        response_map: dict[str, Response] = {}
        for response in items:
            if response.question_id not in self._known_ids:
                logger.debug("Ignoring response to unknown question %r", response.question_id)
                continue
            response_map[response.question_id] = response
        return response_map

    def _score_category(
        self, category: Category, response_map: dict[str, Response]
    ) -> CategoryScore:
        score = 0
        max_score = 0
        subcategories: dict[str, SubcategoryScore] = {}

        for q in self.questions:
            if q.category != category:
                continue
            response = response_map.get(q.id)
            points = score_question(q, response.answer) if response else 0

            score += points
            max_score += q.weight

            sub = subcategories.setdefault(q.subcategory, SubcategoryScore())
            sub.score += points
            sub.max_score += q.weight
            sub.total_questions += 1
            if response is not None:
                sub.answered_questions += 1

        for sub in subcategories.values():
            sub.percentage = _percentage(sub.score, sub.max_score)

        return CategoryScore(
            category=category,
            score=score,
            max_score=max_score,
            percentage=_percentage(score, max_score),
            subcategories=subcategories,
        )
