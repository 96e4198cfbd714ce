# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Non-interactive assessment pipeline.

Replays a response collection into an ``AssessmentSession``, scores it,
benchmarks the result and assembles an ``AssessmentReport``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from esg_assessment.assessment.models import AssessmentReport, Response
from esg_assessment.assessment.session import AssessmentSession
from esg_assessment.benchmark.comparator import BenchmarkComparator
from esg_assessment.benchmark.models import CompanyInfo
from esg_assessment.reporting.summary import generate_summary

logger = logging.getLogger(__name__)


class AssessmentEngine:
    """Runs scoring, emissions and benchmarking for one company.

    Usage::

        engine = AssessmentEngine()
        report = engine.evaluate(company, responses)
    """

    def __init__(self, comparator: BenchmarkComparator | None = None) -> None:
        self.comparator = comparator or BenchmarkComparator()

    def evaluate(
        self, company: CompanyInfo, responses: Iterable[Response]
    ) -> AssessmentReport:
        session = AssessmentSession.from_responses(responses)
        return self.evaluate_session(company, session)

    def evaluate_session(
        self, company: CompanyInfo, session: AssessmentSession
    ) -> AssessmentReport:
        """Build a report from an already populated session."""
        score = session.score()
        benchmark = self.comparator.compare(score.summary(), company)

        total = session.total_emissions()
        formatted = session.formatted_emissions() if session.emissions else ""
        missing = session.missing_required()

        logger.info(
            "Evaluated %s: overall %d, %d emission result(s), %d required missing",
            company.name or "<unnamed>", score.overall_score,
            len(session.emissions), len(missing),
        )

        return AssessmentReport(
            company=company,
            timestamp=datetime.now(timezone.utc),
            score=score,
            benchmark=benchmark,
            emissions=dict(session.emissions),
            total_emissions_tonnes=total,
            formatted_emissions=formatted,
            progress=session.progress(),
            missing_required=missing,
            responses=list(session.responses.values()),
            summary=generate_summary(
                company, score, benchmark,
                formatted_emissions=formatted,
                missing_required=missing,
            ),
        )
