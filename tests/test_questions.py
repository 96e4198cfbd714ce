# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the VSME question bank."""

from __future__ import annotations

import pytest

from esg_assessment.assessment.models import AnswerType, Category, Question
from esg_assessment.assessment.questions import (
    ALL_QUESTIONS,
    DEPENDENCY_MAP,
    EMISSION_DEPENDENCIES,
    ENVIRONMENTAL_QUESTIONS,
    GOVERNANCE_QUESTIONS,
    QUESTION_MAP,
    SOCIAL_QUESTIONS,
    category_position,
    get_question,
    list_questions,
    question_position,
    validate_catalog,
)
from esg_assessment.emissions.factors import (
    EMISSION_FACTORS,
    RENEWABLE_SHARE_CHOICES,
    WASTE_MANAGEMENT_CHOICES,
)
from esg_assessment.emissions.models import Adjustment, EmissionDependency
from esg_assessment.errors import CatalogError, UnknownQuestionError


class TestCatalogShape:
    def test_category_sizes(self):
        assert len(ENVIRONMENTAL_QUESTIONS) == 13
        assert len(SOCIAL_QUESTIONS) == 10
        assert len(GOVERNANCE_QUESTIONS) == 8
        assert len(ALL_QUESTIONS) == 31

    def test_fixed_category_order(self):
        categories = [q.category for q in ALL_QUESTIONS]
        assert categories == sorted(
            categories, key=lambda c: list(Category).index(c)
        )
        assert ALL_QUESTIONS[0].id == "E1_01"
        assert ALL_QUESTIONS[-1].id == "G1_08"

    def test_unique_ids(self):
        assert len(QUESTION_MAP) == len(ALL_QUESTIONS)

    def test_choice_questions_have_options(self):
        for q in ALL_QUESTIONS:
            if q.type == AnswerType.MULTIPLE_CHOICE:
                assert len(q.options) >= 2, q.id
            else:
                assert q.options == (), q.id

    def test_questions_are_frozen(self):
        with pytest.raises(Exception):
            ALL_QUESTIONS[0].weight = 10

    def test_adjustment_questions_share_factor_labels(self):
        assert get_question("E1_01").options == RENEWABLE_SHARE_CHOICES
        assert get_question("E2_01").options == WASTE_MANAGEMENT_CHOICES

    def test_emission_factor_keys(self):
        keyed = {q.id: q.emission_factor_key for q in ALL_QUESTIONS if q.emission_factor_key}
        assert keyed == {
            "E1_02": "electricity_italy",
            "E1_03": "natural_gas",
            "E2_02": "waste_mixed",
            "E3_01": "water",
        }
        for key in keyed.values():
            assert key in EMISSION_FACTORS

    def test_quantity_questions(self):
        assert get_question("E1_02").type == AnswerType.CALCULATOR
        assert get_question("E2_02").type == AnswerType.NUMBER
        assert get_question("E2_02").required is False


class TestLookup:
    def test_list_all(self):
        assert list_questions() == ALL_QUESTIONS

    def test_list_is_stable(self):
        assert list_questions() == list_questions()

    def test_list_by_category(self):
        assert list_questions(Category.SOCIAL) == SOCIAL_QUESTIONS
        assert list_questions("governance") == GOVERNANCE_QUESTIONS

    def test_list_unknown_category(self):
        with pytest.raises(ValueError):
            list_questions("economic")

    def test_get_question(self):
        q = get_question("S4_02")
        assert isinstance(q, Question)
        assert q.options == ("Sì", "No")

    def test_get_unknown_question(self):
        with pytest.raises(UnknownQuestionError, match="Unknown question 'Z1_01'"):
            get_question("Z1_01")

    def test_unknown_question_is_key_error(self):
        with pytest.raises(KeyError):
            get_question("Z1_01")

    def test_question_position(self):
        assert question_position("E1_01") == (1, 31)
        assert question_position("S1_01") == (14, 31)
        assert question_position("G1_08") == (31, 31)

    def test_category_position(self):
        assert category_position("E5_02") == (13, 13)
        assert category_position("S1_01") == (1, 10)
        assert category_position("G1_03") == (3, 8)


class TestDependencies:
    def test_dependency_table(self):
        assert DEPENDENCY_MAP == {"E1_01": "E1_02", "E2_01": "E2_02"}

    def test_adjustment_kinds(self):
        kinds = {d.dependent_id: d.adjustment for d in EMISSION_DEPENDENCIES}
        assert kinds["E1_02"] == Adjustment.RENEWABLE_SHARE
        assert kinds["E2_02"] == Adjustment.WASTE_MANAGEMENT


class TestValidateCatalog:
    def test_available_weight_per_category(self):
        totals = validate_catalog()
        assert totals == {
            Category.ENVIRONMENTAL: 25,
            Category.SOCIAL: 19,
            Category.GOVERNANCE: 17,
        }

    def test_totals_match_weights(self):
        totals = validate_catalog()
        for category in Category:
            assert totals[category] == sum(q.weight for q in list_questions(category))

    def test_duplicate_id(self):
        q = ALL_QUESTIONS[0]
        with pytest.raises(CatalogError, match="Duplicate"):
            validate_catalog((q, q), ())

    def test_choice_without_options(self):
        q = Question(
            id="X1", category=Category.SOCIAL, subcategory="Test",
            text="?", type=AnswerType.MULTIPLE_CHOICE, weight=1,
        )
        with pytest.raises(CatalogError, match="no options"):
            validate_catalog((q,), ())

    def test_unknown_factor(self):
        q = Question(
            id="X1", category=Category.ENVIRONMENTAL, subcategory="Test",
            text="?", type=AnswerType.CALCULATOR, weight=1,
            emission_factor_key="coal",
        )
        with pytest.raises(CatalogError, match="coal"):
            validate_catalog((q,), ())

    def test_dangling_dependency(self):
        dep = EmissionDependency(
            trigger_id="E1_01", dependent_id="Q9_99",
            adjustment=Adjustment.RENEWABLE_SHARE,
        )
        with pytest.raises(CatalogError, match="Q9_99"):
            validate_catalog(ALL_QUESTIONS, (dep,))
