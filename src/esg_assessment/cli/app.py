# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for esg-assessment."""

from __future__ import annotations

import logging

import click
from rich.console import Console

from esg_assessment import __version__
from esg_assessment.assessment.engine import AssessmentEngine
from esg_assessment.assessment.models import AssessmentReport, Category, ScoreSummary
from esg_assessment.assessment.questions import list_questions
from esg_assessment.assessment.session import AssessmentSession
from esg_assessment.benchmark.comparator import BenchmarkComparator
from esg_assessment.benchmark.models import CompanyInfo
from esg_assessment.config import AssessmentInput, Settings, load_assessment_input
from esg_assessment.emissions.calculator import compute_emission
from esg_assessment.emissions.factors import EMISSION_FACTORS
from esg_assessment.errors import ConfigError
from esg_assessment.reporting.terminal import TerminalRenderer

CATEGORY_CHOICES = [c.value for c in Category]
FACTOR_CHOICES = list(EMISSION_FACTORS.keys())

SCORE_RANGE = click.FloatRange(0, 100)


def _load_input(path: str, console: Console) -> AssessmentInput:
    """Load an assessment file or exit with a red error message."""
    try:
        return load_assessment_input(path)
    except (FileNotFoundError, ConfigError) as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """esg-assessment: VSME Sustainability Assessment Tool

    Score a company's ESG questionnaire across three categories:

    \b
      Environmental: energy, emissions, waste, water, biodiversity
      Social:        workforce, supply chain, communities, customers
      Governance:    ethics, compliance, transparency, risk
    """
    settings = Settings.from_env()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(no_color=no_color)
    ctx.obj["settings"] = settings


@cli.command()
@click.option(
    "--category", "-c",
    type=click.Choice(CATEGORY_CHOICES),
    default=None,
    help="Only list one category",
)
@click.pass_context
def questions(ctx: click.Context, category: str | None) -> None:
    """List the questionnaire."""
    console: Console = ctx.obj["console"]
    TerminalRenderer(console).render_questions(list_questions(category))


@cli.command()
@click.pass_context
def factors(ctx: click.Context) -> None:
    """List the emission factors."""
    console: Console = ctx.obj["console"]
    TerminalRenderer(console).render_factors(EMISSION_FACTORS)


@cli.command()
@click.argument("quantity", type=float)
@click.argument("factor_key", type=click.Choice(FACTOR_CHOICES))
@click.pass_context
def emission(ctx: click.Context, quantity: float, factor_key: str) -> None:
    """Convert QUANTITY into CO2eq using FACTOR_KEY."""
    console: Console = ctx.obj["console"]

    result = compute_emission(quantity, factor_key)
    if result is None:
        console.print(f"[red]Cannot compute emissions for {quantity} with '{factor_key}'[/]")
        raise SystemExit(1)

    TerminalRenderer(console).render_emission(result)


@cli.command()
@click.argument("file", type=click.Path())
@click.option("--show-details/--no-details", default=True, help="Show subcategory breakdown")
@click.pass_context
def score(ctx: click.Context, file: str, show_details: bool) -> None:
    """Score the responses stored in FILE (YAML or JSON)."""
    console: Console = ctx.obj["console"]
    data = _load_input(file, console)

    session = AssessmentSession.from_responses(data.responses)
    renderer = TerminalRenderer(console)
    renderer.render_score(session.score(), show_details=show_details)
    if session.emissions:
        renderer.render_emissions(session.emissions)

    missing = session.missing_required()
    if missing:
        console.print(
            f"\n  [yellow]{len(missing)} required question(s) unanswered:[/] "
            f"{', '.join(missing)}"
        )


@cli.command()
@click.option("--environmental", "-e", type=SCORE_RANGE, required=True)
@click.option("--social", "-s", type=SCORE_RANGE, required=True)
@click.option("--governance", "-g", type=SCORE_RANGE, required=True)
@click.option("--sector", default="", help="Free-text sector, e.g. 'Manifattura'")
@click.option("--employees", type=click.IntRange(min=0), default=None, help="Headcount")
@click.option("--location", default="", help="City or region, e.g. 'Milano'")
@click.pass_context
def benchmark(
    ctx: click.Context,
    environmental: float,
    social: float,
    governance: float,
    sector: str,
    employees: int | None,
    location: str,
) -> None:
    """Compare category scores against Italian SME references."""
    console: Console = ctx.obj["console"]

    scores = ScoreSummary(environmental=environmental, social=social, governance=governance)
    company = CompanyInfo(sector=sector, employees=employees, location=location)
    result = BenchmarkComparator().compare(scores, company)

    TerminalRenderer(console).render_benchmark(result)


@cli.command()
@click.argument("file", type=click.Path())
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export the full report as JSON at this path",
)
@click.option("--show-details/--no-details", default=True, help="Show subcategory breakdown")
@click.pass_context
def report(
    ctx: click.Context,
    file: str,
    export_json: str | None,
    show_details: bool,
) -> None:
    """Produce the full assessment report for FILE."""
    console: Console = ctx.obj["console"]
    data = _load_input(file, console)

    with console.status("[bold cyan]Evaluating assessment..."):
        result = AssessmentEngine().evaluate(data.company, data.responses)

    TerminalRenderer(console).render(result, show_details=show_details)

    if export_json:
        _export_json(result, export_json, console)


def _export_json(result: AssessmentReport, path: str, console: Console) -> None:
    """Export to JSON."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(result.model_dump_json(indent=2))
    console.print(f"  [green]JSON report exported to:[/green] {path}")


@cli.command()
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", type=int, default=None, help="Port (default from settings)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the REST API server."""
    from esg_assessment.api import check_dependency
    check_dependency("fastapi", "pip install -e '.[api]'")
    check_dependency("uvicorn", "pip install -e '.[api]'")

    console: Console = ctx.obj["console"]
    settings: Settings = ctx.obj["settings"]
    host = host or settings.api_host
    port = port or settings.api_port
    console.print(f"[bold cyan]Starting API server on {host}:{port}...[/]")

    from esg_assessment.api.server import create_app
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
