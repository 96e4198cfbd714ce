"""Rich terminal report renderer.

Composes Rich tables, panels, and ASCII charts into the primary
user-facing terminal output for the ESG assessment.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from esg_assessment import __version__
from esg_assessment.assessment.models import (
    AssessmentReport,
    Category,
    Question,
    ScoreLevel,
    ScoreResult,
)
from esg_assessment.benchmark.comparator import benchmarking_sources
from esg_assessment.benchmark.models import BenchmarkResult
from esg_assessment.emissions.calculator import format_emissions
from esg_assessment.emissions.models import EmissionFactor, EmissionResult
from esg_assessment.reporting.ascii_charts import (
    delta_marker,
    horizontal_bar,
    mini_gauge,
    score_gauge,
)
from esg_assessment.scoring.thresholds import FULL_MARK


class TerminalRenderer:
    """Renders questions, scores, emissions and benchmarks using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, report: AssessmentReport, show_details: bool = True) -> None:
        """Render the full assessment report to the terminal."""
        self._render_header(report)
        self.render_score(report.score, show_details=show_details)
        if report.emissions:
            self.render_emissions(report.emissions)
        self.render_benchmark(report.benchmark)
        self._render_executive_summary(report)
        self._render_footer(report)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def render_questions(self, questions: Iterable[Question]) -> None:
        """Render the questionnaire grouped by category."""
        by_category: dict[Category, list[Question]] = {}
        for q in questions:
            by_category.setdefault(q.category, []).append(q)

        for category, items in by_category.items():
            self.console.print()
            self.console.print(Rule(f"[bold]{category.display_name.upper()}[/bold]"))

            table = Table(show_header=True, header_style="bold", padding=(0, 1))
            table.add_column("ID", style="bold cyan", width=6)
            table.add_column("Subcategory", min_width=16)
            table.add_column("Question", min_width=40)
            table.add_column("Type", min_width=10)
            table.add_column("Weight", justify="right", width=6)
            table.add_column("Req.", justify="center", width=4)

            for q in items:
                table.add_row(
                    q.id,
                    q.subcategory,
                    q.text,
                    q.type.value,
                    str(q.weight),
                    "[green]✓[/]" if q.required else "[dim]-[/]",
                )
            self.console.print(table)

    def render_factors(self, factors: Mapping[str, EmissionFactor]) -> None:
        """Render the emission factor table."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Key", style="bold cyan", no_wrap=True)
        table.add_column("Source", min_width=20)
        table.add_column("kg CO₂eq / unit", justify="right")
        table.add_column("Unit", justify="center")
        table.add_column("Description", style="dim")

        for key, factor in factors.items():
            table.add_row(
                key,
                factor.source,
                f"{factor.co2_kg_per_unit:.3f}",
                factor.unit,
                factor.description,
            )

        self.console.print()
        self.console.print(Panel(table, title="[bold]EMISSION FACTORS[/bold]"))

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def render_emission(self, result: EmissionResult) -> None:
        """Render a single emission calculation."""
        body = Text()
        body.append(f"{result.input_value:,.2f} {result.input_unit}", style="bold")
        body.append(f" x {result.factor_used.co2_kg_per_unit:.4f} kg/{result.input_unit}\n")
        body.append(f"= {result.co2_kg:,.2f} kg CO₂eq", style="bold green")
        body.append(f" ({format_emissions(result.co2_tonnes)})\n", style="dim")
        body.append(result.factor_used.description, style="dim italic")

        self.console.print()
        self.console.print(Panel(body, title=f"[bold]{result.factor_used.source}[/bold]"))

    def render_emissions(self, emissions: Mapping[str, EmissionResult]) -> None:
        """Render emission results keyed by question id, with the total."""
        self.console.print()
        self.console.print(Rule("[bold]ESTIMATED EMISSIONS[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Question", style="bold cyan", width=8)
        table.add_column("Source", min_width=20)
        table.add_column("Quantity", justify="right")
        table.add_column("CO₂eq", justify="right")

        total = 0.0
        for qid, result in emissions.items():
            total += result.co2_tonnes
            table.add_row(
                qid,
                result.factor_used.source,
                f"{result.input_value:,.0f} {result.input_unit}",
                format_emissions(result.co2_tonnes),
            )

        self.console.print(table)
        self.console.print(f"\n  [bold]Total:[/bold] [green]{format_emissions(total)}[/green]")

    def render_score(self, score: ScoreResult, show_details: bool = True) -> None:
        """Render overall and per-category scores."""
        self.console.print()
        self.console.print(
            f"  [bold]OVERALL SCORE[/bold]: {score_gauge(score.overall_score, width=30)}"
        )
        self.console.print(f"  [dim]{score.overall_level.description}[/dim]")

        panels = []
        for category in Category:
            value = score.category_score(category)
            level = ScoreLevel.from_score(value)
            panels.append(
                Panel(
                    score_gauge(value, width=15),
                    title=f"[bold]{category.display_name.upper()}[/bold]",
                    border_style=level.color,
                    width=40,
                )
            )
        self.console.print()
        self.console.print(Columns(panels, padding=(0, 1)))

        if show_details:
            for category_score in score.categories.values():
                self._render_category_detail(category_score)

    def render_benchmark(self, benchmark: BenchmarkResult) -> None:
        """Render the benchmark comparison table, tier and insights."""
        self.console.print()
        self.console.print(Rule(
            f"[bold]BENCHMARK[/bold] - {benchmark.sector_bucket.value} | "
            f"{benchmark.size_band.value} | {benchmark.region.value}"
        ))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Category", style="bold", min_width=14)
        table.add_column("Company", justify="center", min_width=14)
        table.add_column("Sector", justify="right")
        table.add_column("vs Sector", justify="right")
        table.add_column("Italian SMEs", justify="right")
        table.add_column("Size band", justify="right")
        table.add_column("Region", justify="right")

        for row in benchmark.rows:
            table.add_row(
                row.category,
                mini_gauge(row.company),
                str(row.sector),
                delta_marker(row.sector_delta),
                str(row.national),
                str(row.size),
                str(row.region),
            )
        self.console.print(table)

        tier = benchmark.tier
        self.console.print()
        self.console.print(horizontal_bar(
            "Company overall", benchmark.overall_score, FULL_MARK, color=tier.color
        ))
        self.console.print(horizontal_bar(
            "Sector average", benchmark.sector_average, FULL_MARK
        ))
        self.console.print(horizontal_bar(
            "Italian SME average", benchmark.national_average, FULL_MARK
        ))
        self.console.print(
            f"\n  [bold]Position:[/bold] [{tier.color}]{tier.value}[/{tier.color}] "
            f"[dim]({tier.description})[/dim]"
        )
        if benchmark.insights:
            self.console.print()
            self.console.print("  [bold]Insights:[/bold]")
            for insight in benchmark.insights:
                self.console.print(f"    [dim]•[/dim] {insight}")

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, report: AssessmentReport) -> None:
        company = report.company
        header_text = Text()
        header_text.append("ESG ASSESSMENT", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(company.name or "Unnamed company", style="bold")
        if company.location:
            header_text.append(f" ({company.location})", style="dim")
        if company.sector:
            header_text.append(f" | {company.sector}")
        if company.employees:
            header_text.append(f" | {company.employees} employees")
        header_text.append(f" | {report.progress}% answered", style="dim")

        self.console.print()
        self.console.print(Panel(header_text, title="VSME Sustainability Assessment"))

    def _render_category_detail(self, category_score) -> None:
        level = ScoreLevel.from_score(category_score.percentage)

        self.console.print()
        self.console.print(Rule(
            f"[bold]{category_score.display_name.upper()}[/bold] - "
            f"{category_score.score}/{category_score.max_score} points",
            style=level.color,
        ))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Subcategory", style="bold", min_width=22)
        table.add_column("Score", justify="center", min_width=15)
        table.add_column("Points", justify="right", min_width=8)
        table.add_column("Answered", justify="right", min_width=8)

        for label, sub in category_score.subcategories.items():
            table.add_row(
                label,
                mini_gauge(sub.percentage),
                f"{sub.score}/{sub.max_score}",
                f"{sub.answered_questions}/{sub.total_questions}",
            )
        self.console.print(table)

    def _render_executive_summary(self, report: AssessmentReport) -> None:
        """Render the executive summary in a panel."""
        self.console.print()
        self.console.print(
            Panel(
                report.summary,
                title="[bold]EXECUTIVE SUMMARY[/bold]",
                border_style="cyan",
                padding=(1, 2),
            )
        )

    def _render_footer(self, report: AssessmentReport) -> None:
        sources = benchmarking_sources()
        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(
            f"  [dim]Benchmarks: {sources.coverage} (updated {sources.last_update})[/dim]"
        )
        self.console.print(
            f"  [dim]Generated: {report.timestamp.strftime('%Y-%m-%d %H:%M UTC')} | "
            f"esg-assessment v{__version__}[/dim]"
        )
        self.console.print()
