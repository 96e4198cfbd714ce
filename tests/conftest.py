# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the ESG assessment test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from esg_assessment.assessment.engine import AssessmentEngine
from esg_assessment.assessment.models import AssessmentReport, Response
from esg_assessment.benchmark.models import CompanyInfo

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def company() -> CompanyInfo:
    """A small northern manufacturing company."""
    return CompanyInfo(
        name="Officine Rossi S.r.l.",
        sector="Manifattura meccanica",
        employees=35,
        location="Bergamo, Lombardia",
    )


@pytest.fixture()
def sample_responses() -> list[Response]:
    """Mirrors ``fixtures/assessment.yaml``.

    Environmental 8/25 -> 32, social 3/19 -> 16, governance 2/17 -> 12,
    overall 20.  Emissions: 34.95 kg (electricity at 85% renewable) plus
    5.8 kg (sorted waste).
    """
    return [
        Response(question_id="E1_01", answer="Sì, oltre 80%"),
        Response(question_id="E1_02", answer=1000, notes="Bollette 2024"),
        Response(question_id="E2_01", answer="Sì, raccolta differenziata"),
        Response(question_id="E2_02", answer=100),
        Response(question_id="S1_01", answer="Sì, tutti"),
        Response(question_id="G1_01", answer="Sì"),
        Response(question_id="X9_99", answer="ignored"),
    ]


@pytest.fixture()
def report(company: CompanyInfo, sample_responses: list[Response]) -> AssessmentReport:
    """A fully evaluated report for the sample company."""
    return AssessmentEngine().evaluate(company, sample_responses)
