# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Compare category scores against static sector, size and regional references.

Every lookup is total: an empty or unrecognised sector falls into the
``Other`` bucket, a missing headcount into the small-company band and an
unknown location into the northern region.  The comparator therefore
never raises for company metadata.
"""

from __future__ import annotations

import logging
from typing import Optional

from esg_assessment.assessment.models import Category, ScoreSummary
from esg_assessment.benchmark.models import (
    BenchmarkResult,
    BenchmarkRow,
    BenchmarkSources,
    CompanyInfo,
    CompetitiveTier,
    Region,
    SectorBucket,
    SizeBand,
)
from esg_assessment.benchmark.tables import (
    DEFAULT_REGION,
    DEFAULT_SIZE_BAND,
    NATIONAL_BENCHMARK,
    REGION_KEYWORDS,
    REGIONAL_BENCHMARKS,
    SECTOR_BENCHMARKS,
    SECTOR_KEYWORDS,
    SIZE_BAND_LIMITS,
    SIZE_BENCHMARKS,
)
from esg_assessment.scoring.thresholds import (
    FULL_MARK,
    NATIONAL_INSIGHT_DELTA,
    SECTOR_INSIGHT_DELTA,
    TIER_AVERAGE_DELTA,
    TIER_LEADER_DELTA,
    TIER_STRONG_DELTA,
    round_half_up,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_sector(sector: Optional[str]) -> SectorBucket:
    """Best-effort mapping of a free-text sector onto a reference bucket."""
    lowered = (sector or "").lower()
    for bucket, keywords in SECTOR_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return bucket
    logger.debug("No sector keyword matched %r; using %s", sector, SectorBucket.OTHER.value)
    return SectorBucket.OTHER


def determine_size_band(employees: Optional[int]) -> SizeBand:
    """Size band for a headcount; unknown headcount maps to the small band."""
    if not employees:
        return DEFAULT_SIZE_BAND
    for limit, band in SIZE_BAND_LIMITS:
        if employees <= limit:
            return band
    return SizeBand.LARGE


def determine_region(location: Optional[str]) -> Region:
    """Macro-region for a free-text location; defaults to the north."""
    if not location:
        return DEFAULT_REGION
    lowered = location.lower()
    for region, keywords in REGION_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return region
    logger.debug("No region keyword matched %r; using %s", location, DEFAULT_REGION.value)
    return DEFAULT_REGION


# ---------------------------------------------------------------------------
# Derived judgements
# ---------------------------------------------------------------------------

def competitive_tier(overall_score: float, sector_bucket: SectorBucket) -> CompetitiveTier:
    """Tier of *overall_score* relative to the sector's mean reference."""
    diff = overall_score - SECTOR_BENCHMARKS[sector_bucket].average
    if diff > TIER_LEADER_DELTA:
        return CompetitiveTier.LEADER
    if diff > TIER_STRONG_DELTA:
        return CompetitiveTier.STRONG_PERFORMER
    if diff > TIER_AVERAGE_DELTA:
        return CompetitiveTier.SECTOR_AVERAGE
    return CompetitiveTier.DEVELOPING


def generate_insights(rows: list[BenchmarkRow], sector_label: str) -> list[str]:
    """One sector sentence per category, plus a national one for large gaps."""
    sector_label = sector_label or SectorBucket.OTHER.value
    insights: list[str] = []

    for row in rows:
        diff = row.sector_delta
        if diff > SECTOR_INSIGHT_DELTA:
            insights.append(
                f"{row.category}: above the {sector_label} sector average "
                f"(+{diff:.1f} points)"
            )
        elif diff < -SECTOR_INSIGHT_DELTA:
            insights.append(
                f"{row.category}: below the {sector_label} sector average "
                f"({diff:.1f} points)"
            )
        else:
            insights.append(f"{row.category}: in line with the {sector_label} sector average")

        national = row.national_delta
        if national > NATIONAL_INSIGHT_DELTA:
            insights.append(
                f"{row.category}: excellent against the national SME average "
                f"(+{national:.1f} points)"
            )
        elif national < -NATIONAL_INSIGHT_DELTA:
            insights.append(
                f"{row.category}: needs improvement against the national SME average "
                f"({national:.1f} points)"
            )

    return insights


def benchmarking_sources() -> BenchmarkSources:
    """Provenance of the reference tables, for report footers."""
    return BenchmarkSources(
        primary=[
            "Modefinance 2024 study: 4,586 Italian SMEs, 19 regions",
            "ESG Italia Report 2024: sector performance and trends",
            "Sustainalytics ESG Risk Ratings: global database of 15,000+ companies",
            "FTSE MIB ESG Index: Italian market benchmark",
        ],
        methodology=[
            "Normalisation by GICS sector",
            "Company size adjustment",
            "Italian geographic benchmarking",
            "Category weighting by sector and country",
        ],
        coverage="Italian SMEs 2024, focus on manufacturing and services",
        last_update="September 2024",
    )


# ---------------------------------------------------------------------------
# Comparator
# ---------------------------------------------------------------------------

class BenchmarkComparator:
    """Places a company's category scores against the reference tables.

    Usage::

        comparator = BenchmarkComparator()
        result = comparator.compare(score_result.summary(), company)
    """

    def compare(self, scores: ScoreSummary, company: CompanyInfo) -> BenchmarkResult:
        """Build per-category rows, the competitive tier and insight strings."""
        sector_bucket = classify_sector(company.sector)
        size_band = determine_size_band(company.employees)
        region = determine_region(company.location)

        sector_ref = SECTOR_BENCHMARKS[sector_bucket]
        size_ref = SIZE_BENCHMARKS[size_band]
        region_ref = REGIONAL_BENCHMARKS[region]

        rows = [
            BenchmarkRow(
                category=category.display_name,
                company=round_half_up(scores.for_category(category)),
                sector=getattr(sector_ref, category.value),
                national=getattr(NATIONAL_BENCHMARK, category.value),
                size=getattr(size_ref, category.value),
                region=getattr(region_ref, category.value),
                full_mark=FULL_MARK,
            )
            for category in Category
        ]

        overall = scores.overall if scores.overall is not None else 0.0
        tier = competitive_tier(overall, sector_bucket)
        logger.debug(
            "Benchmarked against %s / %s / %s: %s",
            sector_bucket.value, size_band.value, region.value, tier.value,
        )

        return BenchmarkResult(
            sector_bucket=sector_bucket,
            size_band=size_band,
            region=region,
            rows=rows,
            overall_score=overall,
            sector_average=round(sector_ref.average, 2),
            national_average=round(NATIONAL_BENCHMARK.average, 2),
            tier=tier,
            insights=generate_insights(rows, company.sector),
        )
