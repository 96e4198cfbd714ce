# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly visualizations using Unicode characters.

These functions return Rich-markup strings that render as score gauges,
benchmark bars and delta markers in the terminal via the Rich library.
"""

from __future__ import annotations

from esg_assessment.assessment.models import ScoreLevel

FULL = "█"
EMPTY = "░"


def _bar(score: float, width: int) -> tuple[float, str]:
    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    return clamped, FULL * filled + EMPTY * (width - filled)


def score_gauge(score: float, width: int = 20) -> str:
    """Large visual gauge with the score level.

    Returns something like: [blue]████████████░░░░░░░░[/] 64/100 [blue]Good[/]
    """
    clamped, bar = _bar(score, width)
    level = ScoreLevel.from_score(clamped)
    return f"[{level.color}]{bar}[/] {clamped:.0f}/100 [{level.color}]{level.value}[/]"


def mini_gauge(score: float, width: int = 10) -> str:
    """Compact gauge for inline use in tables, colored by score level."""
    clamped, bar = _bar(score, width)
    color = ScoreLevel.from_score(clamped).color
    return f"[{color}]{bar}[/] {clamped:.0f}"


def horizontal_bar(
    label: str,
    value: float,
    max_value: float,
    width: int = 30,
    color: str = "cyan",
) -> str:
    """Labelled bar, e.g. for a company score against a reference value."""
    if max_value <= 0:
        return f"  {label:.<24} [dim]no data[/]"
    ratio = min(max(value, 0) / max_value, 1.0)
    filled = int(ratio * width)
    bar = FULL * filled + EMPTY * (width - filled)
    return f"  {label:.<24} [{color}]{bar}[/] {value:>5.0f}/{max_value:.0f}"


def delta_marker(delta: float) -> str:
    """Signed difference with an arrow, green above zero and red below."""
    if delta > 0:
        return f"[green]▲ +{delta:.0f}[/]"
    if delta < 0:
        return f"[red]▼ {delta:.0f}[/]"
    return "[dim]= 0[/]"
