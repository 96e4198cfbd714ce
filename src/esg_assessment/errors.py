# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Exception hierarchy for the ESG assessment package.

The scoring, emission and benchmark computations are total over their
inputs and never raise for bad answers.  These exceptions cover the
boundaries: looking up questions by id, validating the static catalog,
and loading input files.
"""

from __future__ import annotations


class ESGAssessmentError(Exception):
    """Base class for all package errors."""


class UnknownQuestionError(ESGAssessmentError, KeyError):
    """Raised when a question id does not exist in the catalog."""

    def __init__(self, question_id: str) -> None:
        self.question_id = question_id
        super().__init__(question_id)

    def __str__(self) -> str:
        return f"Unknown question '{self.question_id}'"


class CatalogError(ESGAssessmentError, ValueError):
    """Raised when the static question catalog is inconsistent."""


class ConfigError(ESGAssessmentError, ValueError):
    """Raised when an input or settings file cannot be used."""
