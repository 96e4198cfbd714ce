# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Assessment input files and runtime settings."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from esg_assessment.assessment.models import Response
from esg_assessment.benchmark.models import CompanyInfo
from esg_assessment.errors import ConfigError

ENV_PREFIX = "ESG_ASSESSMENT_"

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


# ---------------------------------------------------------------------------
# Assessment input
# ---------------------------------------------------------------------------

class AssessmentInput(BaseModel):
    """A company plus its stored questionnaire responses."""

    company: CompanyInfo = Field(default_factory=CompanyInfo)
    responses: list[Response] = Field(default_factory=list)


def load_assessment_input(path: str | Path) -> AssessmentInput:
    """Load an ``AssessmentInput`` from a YAML or JSON file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ConfigError
        If the extension is unsupported or the content is invalid.
    """
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Assessment file not found: {input_path}")

    suffix = input_path.suffix.lower()
    with open(input_path, encoding="utf-8") as f:
        try:
            if suffix in YAML_SUFFIXES:
                raw = yaml.safe_load(f)
            elif suffix in JSON_SUFFIXES:
                raw = json.load(f)
            else:
                raise ConfigError(
                    f"Unsupported assessment file type '{suffix}' "
                    "(expected .yaml, .yml or .json)"
                )
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Could not parse {input_path}: {exc}") from exc

    return parse_assessment_input(raw, source=str(input_path))


def parse_assessment_input(raw: Any, source: str = "<input>") -> AssessmentInput:
    """Validate already-decoded data as an ``AssessmentInput``."""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{source}: expected a mapping at the top level")
    try:
        return AssessmentInput.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"{source}: invalid assessment input\n{exc}") from exc


# ---------------------------------------------------------------------------
# Runtime settings
# ---------------------------------------------------------------------------

class Settings(BaseModel):
    """Runtime settings, overridable through ``ESG_ASSESSMENT_*`` variables."""

    log_level: str = Field(default="WARNING")
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000, ge=1, le=65535)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in env:
                values[name] = env[key]
        try:
            settings = cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid {ENV_PREFIX}* environment settings\n{exc}") from exc
        settings.log_level = settings.log_level.upper()
        return settings
