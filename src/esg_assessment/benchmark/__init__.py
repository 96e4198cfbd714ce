# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Benchmark comparison against Italian SME reference scores."""

from esg_assessment.benchmark.models import (
    BenchmarkResult,
    BenchmarkRow,
    CompanyInfo,
    CompetitiveTier,
    Region,
    SectorBucket,
    SizeBand,
)

__all__ = [
    "BenchmarkResult",
    "BenchmarkRow",
    "CompanyInfo",
    "CompetitiveTier",
    "Region",
    "SectorBucket",
    "SizeBand",
]
