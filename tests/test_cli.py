# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the CLI layer using Click's CliRunner."""

from __future__ import annotations

import json

from click.testing import CliRunner

from esg_assessment.cli.app import cli


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "esg-assessment" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_questions(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-color", "questions"])
        assert result.exit_code == 0
        assert "ENVIRONMENTAL" in result.output
        assert "G1_08" in result.output

    def test_questions_by_category(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-color", "questions", "-c", "social"])
        assert result.exit_code == 0
        assert "S1_01" in result.output
        assert "E1_01" not in result.output

    def test_questions_bad_category(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["questions", "-c", "economic"])
        assert result.exit_code != 0

    def test_factors(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-color", "factors"])
        assert result.exit_code == 0
        assert "electricity_italy" in result.output
        assert "0.233" in result.output

    def test_emission(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-color", "emission", "100", "electricity_italy"])
        assert result.exit_code == 0
        assert "23.30 kg" in result.output

    def test_emission_negative_quantity(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["emission", "--", "-5", "natural_gas"])
        assert result.exit_code == 1
        assert "Cannot compute" in result.output

    def test_emission_nan_quantity(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["emission", "nan", "electricity_italy"])
        assert result.exit_code == 1
        assert "Cannot compute" in result.output

    def test_emission_unknown_factor(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["emission", "100", "coal"])
        assert result.exit_code != 0

    def test_score(self, fixtures_dir):
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-color", "score", str(fixtures_dir / "assessment.yaml")])
        assert result.exit_code == 0
        assert "OVERALL SCORE" in result.output
        assert "20/100" in result.output
        assert "ESTIMATED EMISSIONS" in result.output
        assert "required question(s) unanswered" in result.output

    def test_score_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_score_invalid_file(self, fixtures_dir):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", str(fixtures_dir / "invalid.yaml")])
        assert result.exit_code == 1

    def test_benchmark(self):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "--no-color", "benchmark",
            "-e", "70", "-s", "75", "-g", "65",
            "--sector", "Manifattura", "--employees", "120", "--location", "Torino",
        ])
        assert result.exit_code == 0
        assert "Manufacturing" in result.output
        assert "Medium" in result.output
        assert "Sector average" in result.output

    def test_benchmark_defaults(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-color", "benchmark", "-e", "0", "-s", "0", "-g", "0"])
        assert result.exit_code == 0
        assert "Other" in result.output
        assert "Developing" in result.output

    def test_benchmark_out_of_range(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["benchmark", "-e", "120", "-s", "0", "-g", "0"])
        assert result.exit_code != 0

    def test_report(self, fixtures_dir):
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-color", "report", str(fixtures_dir / "assessment.json")])
        assert result.exit_code == 0
        assert "Studio Bianchi" in result.output
        assert "EXECUTIVE SUMMARY" in result.output
        assert "BENCHMARK" in result.output

    def test_report_export_json(self, fixtures_dir, tmp_path):
        out = tmp_path / "report.json"
        runner = CliRunner()
        result = runner.invoke(cli, [
            "--no-color", "report", str(fixtures_dir / "assessment.yaml"),
            "--export-json", str(out), "--no-details",
        ])
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["score"]["overall_score"] == 20
        assert data["benchmark"]["sector_bucket"] == "Manufacturing"

    def test_verbose_flag(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "--no-color", "factors"])
        assert result.exit_code == 0

    def test_serve_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "--port" in result.output
