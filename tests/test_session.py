# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the assessment session and the non-interactive engine."""

from __future__ import annotations

import json

import pytest

from esg_assessment.assessment.engine import AssessmentEngine
from esg_assessment.assessment.models import AssessmentReport, Category, Response
from esg_assessment.assessment.session import AssessmentSession
from esg_assessment.benchmark.models import CompanyInfo, CompetitiveTier, SectorBucket
from esg_assessment.errors import UnknownQuestionError


class TestAnswering:
    def test_answer_records_response(self):
        session = AssessmentSession()
        response = session.answer("G1_01", "Sì", notes="Approvato dal CdA")
        assert response == Response(question_id="G1_01", answer="Sì", notes="Approvato dal CdA")
        assert session.responses["G1_01"] is response

    def test_reanswer_overwrites(self):
        session = AssessmentSession()
        session.answer("G1_01", "Sì")
        session.answer("G1_01", "No")
        assert len(session.responses) == 1
        assert session.responses["G1_01"].answer == "No"

    def test_unknown_question_raises(self):
        session = AssessmentSession()
        with pytest.raises(UnknownQuestionError):
            session.answer("Q0_00", "x")

    def test_clear(self):
        session = AssessmentSession()
        session.answer("E1_02", 1000)
        session.clear("E1_02")
        assert "E1_02" not in session.responses
        assert "E1_02" not in session.emissions

    def test_reset(self):
        session = AssessmentSession()
        session.answer("E1_02", 1000)
        session.answer("S1_01", "Sì, tutti")
        session.reset()
        assert session.responses == {}
        assert session.emissions == {}


class TestEmissionTracking:
    def test_quantity_answer_computes_emission(self):
        session = AssessmentSession()
        session.answer("E1_03", 500)
        assert session.emissions["E1_03"].co2_kg == pytest.approx(989.0)

    def test_water(self):
        session = AssessmentSession()
        session.answer("E3_01", 100)
        assert session.emissions["E3_01"].co2_kg == pytest.approx(14.9)

    def test_electricity_without_renewable_answer(self):
        session = AssessmentSession()
        session.answer("E1_02", 1000)
        assert session.emissions["E1_02"].co2_kg == pytest.approx(233.0)

    def test_electricity_with_renewable_answer(self):
        session = AssessmentSession()
        session.answer("E1_01", "Sì, oltre 80%")
        session.answer("E1_02", 1000)
        assert session.emissions["E1_02"].co2_kg == pytest.approx(34.95)

    def test_renewable_change_recomputes_electricity(self):
        session = AssessmentSession()
        session.answer("E1_02", 1000)
        session.answer("E1_01", "Parzialmente (30-80%)")
        assert session.emissions["E1_02"].co2_kg == pytest.approx(233.0 * 0.45)

        session.answer("E1_01", "Non so")
        assert session.emissions["E1_02"].co2_kg == pytest.approx(233.0)

    def test_clearing_trigger_restores_default(self):
        session = AssessmentSession()
        session.answer("E1_01", "Sì, oltre 80%")
        session.answer("E1_02", 1000)
        session.clear("E1_01")
        assert session.emissions["E1_02"].co2_kg == pytest.approx(233.0)

    def test_waste_defaults_to_mixed(self):
        session = AssessmentSession()
        session.answer("E2_02", 100)
        assert session.emissions["E2_02"].co2_kg == pytest.approx(46.1)

    def test_waste_management_change_recomputes(self):
        session = AssessmentSession()
        session.answer("E2_02", 100)
        session.answer("E2_01", "Sì, raccolta differenziata")
        assert session.emissions["E2_02"].co2_kg == pytest.approx(5.8)

        session.answer("E2_01", "Parzialmente")
        assert session.emissions["E2_02"].factor_used.key == "waste_partial"

    def test_trigger_without_quantity_adds_nothing(self):
        session = AssessmentSession()
        session.answer("E1_01", "Sì, oltre 80%")
        assert session.emissions == {}

    @pytest.mark.parametrize("value", [0, None, -5, "mille", True, float("nan"), float("inf")])
    def test_unusable_quantity_clears_result(self, value):
        session = AssessmentSession()
        session.answer("E1_02", 1000)
        session.answer("E1_02", value)
        assert "E1_02" not in session.emissions

    def test_choice_answers_have_no_emissions(self):
        session = AssessmentSession()
        session.answer("S1_01", "Sì, tutti")
        assert session.emissions == {}

    def test_total_and_formatting(self, sample_responses):
        session = AssessmentSession.from_responses(sample_responses)
        assert session.total_emissions() == pytest.approx((34.95 + 5.8) / 1000)
        assert session.formatted_emissions().endswith("kg CO₂eq")

    def test_replay_order_does_not_matter(self, sample_responses):
        forward = AssessmentSession.from_responses(sample_responses)
        backward = AssessmentSession.from_responses(list(reversed(sample_responses)))
        assert forward.emissions == backward.emissions


class TestProgress:
    def test_empty(self):
        session = AssessmentSession()
        assert session.progress() == 0
        assert session.category_progress(Category.GOVERNANCE) == (0, 8)
        # 31 questions, five of them optional
        assert len(session.missing_required()) == 26

    def test_partial(self, sample_responses):
        session = AssessmentSession.from_responses(sample_responses)
        # Six known responses out of 31 questions
        assert session.progress() == 19
        assert session.category_progress("environmental") == (4, 13)
        assert session.category_progress(Category.SOCIAL) == (1, 10)

    def test_missing_required_in_catalog_order(self, sample_responses):
        session = AssessmentSession.from_responses(sample_responses)
        missing = session.missing_required()
        assert missing[0] == "E1_04"
        assert "E1_01" not in missing
        assert "E1_03" not in missing  # optional
        assert missing[-1] == "G1_08"

    def test_from_responses_skips_unknown(self, sample_responses):
        session = AssessmentSession.from_responses(sample_responses)
        assert "X9_99" not in session.responses
        assert len(session.responses) == 6

    def test_score(self, sample_responses):
        assert AssessmentSession.from_responses(sample_responses).score().overall_score == 20


class TestAssessmentEngine:
    def test_report_contents(self, report: AssessmentReport):
        assert report.company.name == "Officine Rossi S.r.l."
        assert report.score.overall_score == 20
        assert report.benchmark.sector_bucket == SectorBucket.MANUFACTURING
        assert report.benchmark.tier == CompetitiveTier.DEVELOPING
        assert set(report.emissions) == {"E1_02", "E2_02"}
        assert report.total_emissions_tonnes == pytest.approx(0.04075)
        assert report.progress == 19
        assert "E1_04" in report.missing_required
        assert len(report.responses) == 6

    def test_summary_text(self, report: AssessmentReport):
        assert report.summary.startswith("Officine Rossi S.r.l. scores 20/100 overall")
        assert "BENCHMARK: Developing in Manufacturing" in report.summary
        assert "ESTIMATED EMISSIONS" in report.summary
        assert "PRIORITY AREAS" in report.summary
        assert "INCOMPLETE" in report.summary

    def test_no_emissions_section_without_quantities(self):
        report = AssessmentEngine().evaluate(
            CompanyInfo(), [Response(question_id="G1_01", answer="Sì")]
        )
        assert report.emissions == {}
        assert report.formatted_emissions == ""
        assert "ESTIMATED EMISSIONS" not in report.summary
        assert report.summary.startswith("The company scores")

    def test_timestamp_is_utc(self, report: AssessmentReport):
        assert report.timestamp.tzinfo is not None

    def test_json_export(self, report: AssessmentReport):
        data = json.loads(report.model_dump_json())
        assert data["score"]["overall_score"] == 20
        assert data["score"]["overall_level"] == "Insufficient"
        assert "environmental" in data["score"]["categories"]
        assert data["benchmark"]["tier"] == "Developing"
        assert data["emissions"]["E1_02"]["co2_kg"] == pytest.approx(34.95)

    def test_report_round_trips(self, report: AssessmentReport):
        restored = AssessmentReport.model_validate_json(report.model_dump_json())
        assert restored.score.overall_score == report.score.overall_score
        assert restored.benchmark.rows == report.benchmark.rows

    def test_evaluate_session(self, company):
        session = AssessmentSession()
        session.answer("S1_01", "Sì, tutti")
        report = AssessmentEngine().evaluate_session(company, session)
        assert report.score.social_score == 16
