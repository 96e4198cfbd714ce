"""Generate a short executive summary for an ESG assessment."""

from __future__ import annotations

from esg_assessment.assessment.models import Category, ScoreLevel, ScoreResult
from esg_assessment.benchmark.models import BenchmarkResult, CompanyInfo
from esg_assessment.scoring.thresholds import LEVEL_SUFFICIENT_MIN


def generate_summary(
    company: CompanyInfo,
    score: ScoreResult,
    benchmark: BenchmarkResult,
    formatted_emissions: str = "",
    missing_required: list[str] | None = None,
) -> str:
    """Build the executive summary text.

    Structure:
    1. One-sentence verdict
    2. Category scores with their level
    3. Benchmark position and insights
    4. Estimated emissions (if any quantity was answered)
    5. Priority areas and incomplete required answers
    """
    parts: list[str] = []
    name = company.name or "The company"

    # --- 1. Verdict ---
    level = score.overall_level
    parts.append(
        f"{name} scores {score.overall_score}/100 overall "
        f"({level.value}): {level.description.lower()}."
    )

    # --- 2. Category scores ---
    parts.append("")
    parts.append("CATEGORY SCORES:")
    for category in Category:
        value = score.category_score(category)
        cat_level = ScoreLevel.from_score(value)
        parts.append(
            f"  [{cat_level.color}]{category.display_name}[/{cat_level.color}]: "
            f"{value}/100 ({cat_level.value})"
        )

    # --- 3. Benchmark ---
    parts.append("")
    parts.append(
        f"BENCHMARK: {benchmark.tier.value} in {benchmark.sector_bucket.value} "
        f"(sector average {benchmark.sector_average:.1f}, "
        f"national SME average {benchmark.national_average:.1f})."
    )
    for insight in benchmark.insights:
        parts.append(f"  - {insight}")

    # --- 4. Emissions ---
    if formatted_emissions:
        parts.append("")
        parts.append(f"ESTIMATED EMISSIONS: {formatted_emissions}")

    # --- 5. Priorities ---
    weak = [c for c in Category if score.category_score(c) < LEVEL_SUFFICIENT_MIN]
    if weak:
        parts.append("")
        parts.append("PRIORITY AREAS:")
        for category in weak:
            parts.append(
                f"  {category.display_name} scored {score.category_score(category)}/100. "
                "Immediate attention recommended."
            )

    if missing_required:
        parts.append("")
        parts.append(
            f"INCOMPLETE: {len(missing_required)} required question(s) unanswered "
            f"({', '.join(missing_required)})."
        )

    return "\n".join(parts)
