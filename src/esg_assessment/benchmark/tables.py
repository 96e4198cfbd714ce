"""Static ESG reference tables for Italian SMEs.

Sources (summarised in ``comparator.benchmarking_sources``):
  - Modefinance 2024 study of 4,586 Italian SMEs across 19 regions
    (environmental mean ~60/100; Lombardy 24%, Emilia-Romagna 15%, Lazio 14%)
  - ESG Italia Report 2024 (sector performance and trends)
  - Sustainalytics ESG Risk Ratings (peer industry comparison)
  - FTSE MIB ESG Index (listed-company benchmark)

Keyword tables are matched as lowercase substrings, in declaration order;
the first bucket with a matching keyword wins.
"""

from __future__ import annotations

from esg_assessment.benchmark.models import (
    ReferenceScores,
    Region,
    SectorBucket,
    SizeBand,
)

# ---------------------------------------------------------------------------
# Sector reference scores
# ---------------------------------------------------------------------------
SECTOR_BENCHMARKS: dict[SectorBucket, ReferenceScores] = {
    # Industry
    SectorBucket.MANUFACTURING: ReferenceScores(environmental=62, social=71, governance=67),
    SectorBucket.CONSTRUCTION: ReferenceScores(environmental=58, social=69, governance=65),
    SectorBucket.ENERGY: ReferenceScores(environmental=68, social=70, governance=72),
    # Services
    SectorBucket.SERVICES: ReferenceScores(environmental=64, social=74, governance=69),
    SectorBucket.TECHNOLOGY: ReferenceScores(environmental=66, social=76, governance=74),
    SectorBucket.COMMERCE: ReferenceScores(environmental=61, social=72, governance=68),
    SectorBucket.TOURISM: ReferenceScores(environmental=59, social=73, governance=66),
    # Agriculture
    SectorBucket.AGRICULTURE: ReferenceScores(environmental=65, social=68, governance=63),
    SectorBucket.OTHER: ReferenceScores(environmental=63, social=71, governance=67),
}

# ---------------------------------------------------------------------------
# National reference (all Italian SMEs)
# ---------------------------------------------------------------------------
NATIONAL_BENCHMARK = ReferenceScores(environmental=60, social=70, governance=65)

# ---------------------------------------------------------------------------
# Size band reference scores
# ---------------------------------------------------------------------------
SIZE_BENCHMARKS: dict[SizeBand, ReferenceScores] = {
    SizeBand.MICRO: ReferenceScores(environmental=57, social=68, governance=62),
    SizeBand.SMALL: ReferenceScores(environmental=61, social=71, governance=66),
    SizeBand.MEDIUM: ReferenceScores(environmental=65, social=74, governance=70),
    SizeBand.LARGE: ReferenceScores(environmental=69, social=76, governance=73),
}

# Upper headcount bound of each band; anything larger is LARGE
SIZE_BAND_LIMITS: tuple[tuple[int, SizeBand], ...] = (
    (9, SizeBand.MICRO),
    (49, SizeBand.SMALL),
    (249, SizeBand.MEDIUM),
)
DEFAULT_SIZE_BAND = SizeBand.SMALL

# ---------------------------------------------------------------------------
# Regional reference scores
# ---------------------------------------------------------------------------
REGIONAL_BENCHMARKS: dict[Region, ReferenceScores] = {
    Region.NORTH: ReferenceScores(environmental=63, social=72, governance=68),
    Region.CENTRE: ReferenceScores(environmental=61, social=70, governance=66),
    Region.SOUTH: ReferenceScores(environmental=58, social=69, governance=64),
}
DEFAULT_REGION = Region.NORTH

# ---------------------------------------------------------------------------
# Keyword tables
# ---------------------------------------------------------------------------
SECTOR_KEYWORDS: tuple[tuple[SectorBucket, tuple[str, ...]], ...] = (
    (SectorBucket.MANUFACTURING, ("manifatt", "produz")),
    (SectorBucket.CONSTRUCTION, ("costruz", "edil")),
    (SectorBucket.ENERGY, ("energia", "electric")),
    (SectorBucket.SERVICES, ("serviz",)),
    # "it" is a bare substring match, so e.g. "Sanità" lands here too
    (SectorBucket.TECHNOLOGY, ("tecnolog", "software", "it")),
    (SectorBucket.COMMERCE, ("commerc", "retail")),
    (SectorBucket.TOURISM, ("turis", "hotel", "ristoraz")),
    (SectorBucket.AGRICULTURE, ("agricol", "agroalim")),
)

REGION_KEYWORDS: tuple[tuple[Region, tuple[str, ...]], ...] = (
    (Region.NORTH, (
        "milano", "torino", "genova", "bologna", "venezia",
        "lombardia", "piemonte", "veneto", "emilia",
    )),
    (Region.CENTRE, ("roma", "firenze", "lazio", "toscana", "marche", "umbria")),
    (Region.SOUTH, (
        "napoli", "bari", "palermo", "campania", "sicilia", "puglia", "calabria",
    )),
)
