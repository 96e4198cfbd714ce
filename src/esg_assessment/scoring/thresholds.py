# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Score-level thresholds, benchmark boundaries and rounding helpers.

Every cut-off used to label a score or a benchmark delta lives here so
that reports can trace each label back to a concrete number.
"""

from __future__ import annotations

import math

# ---------------------------------------------------------------------------
# Score level thresholds (0-100 percentage -> qualitative level)
# ---------------------------------------------------------------------------
LEVEL_EXCELLENT_MIN = 80
LEVEL_GOOD_MIN = 60
LEVEL_SUFFICIENT_MIN = 40
# Below 40 = Insufficient

# ---------------------------------------------------------------------------
# Competitive tier (overall score minus sector average)
# ---------------------------------------------------------------------------
TIER_LEADER_DELTA = 15
TIER_STRONG_DELTA = 5
TIER_AVERAGE_DELTA = -5
# At or below -5 = Developing

# ---------------------------------------------------------------------------
# Benchmark insight thresholds (points)
# ---------------------------------------------------------------------------
SECTOR_INSIGHT_DELTA = 5
NATIONAL_INSIGHT_DELTA = 8

FULL_MARK = 100


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up.

    Python's ``round`` uses banker's rounding (``round(0.5) == 0``); scores
    need ``0.5 -> 1`` so that a half-weight answer is not lost.
    """
    return math.floor(value + 0.5)

