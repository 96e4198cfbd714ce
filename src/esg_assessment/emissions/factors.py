"""Static emission factor table and the answer labels that adjust it.

Factors are kg CO2-equivalent per unit of input.  Values follow the
Italian grid mix and common national inventory figures for Italian
SMEs.  The choice labels below are shared with the
question catalog so that the renewable-share and waste-management
questions and the emission policies can never drift apart.
"""

from __future__ import annotations

from esg_assessment.emissions.models import EmissionFactor

# ---------------------------------------------------------------------------
# Emission factors (kg CO2eq per unit)
# ---------------------------------------------------------------------------
ELECTRICITY_ITALY = EmissionFactor(
    key="electricity_italy",
    source="Electricity (Italy)",
    unit="kWh",
    co2_kg_per_unit=0.233,
    description="Emission factor for grid electricity in Italy",
)
NATURAL_GAS = EmissionFactor(
    key="natural_gas",
    source="Natural Gas",
    unit="m³",
    co2_kg_per_unit=1.978,
    description="Emission factor for natural gas combustion",
)
DIESEL = EmissionFactor(
    key="diesel",
    source="Diesel",
    unit="L",
    co2_kg_per_unit=2.68,
    description="Emission factor for diesel fuel",
)
GASOLINE = EmissionFactor(
    key="gasoline",
    source="Gasoline",
    unit="L",
    co2_kg_per_unit=2.31,
    description="Emission factor for gasoline",
)
PAPER = EmissionFactor(
    key="paper",
    source="Paper",
    unit="kg",
    co2_kg_per_unit=0.91,
    description="Emission factor for paper consumption",
)
WATER = EmissionFactor(
    key="water",
    source="Water",
    unit="m³",
    co2_kg_per_unit=0.149,
    description="Emission factor for mains water supply and treatment",
)
FLIGHT_DOMESTIC = EmissionFactor(
    key="flight_domestic",
    source="Domestic Flight",
    unit="km",
    co2_kg_per_unit=0.255,
    description="Emission factor for domestic flights, per passenger",
)
FLIGHT_INTERNATIONAL = EmissionFactor(
    key="flight_international",
    source="International Flight",
    unit="km",
    co2_kg_per_unit=0.195,
    description="Emission factor for international flights, per passenger",
)
WASTE_MIXED = EmissionFactor(
    key="waste_mixed",
    source="Mixed Waste",
    unit="kg",
    co2_kg_per_unit=0.461,
    description="Emission factor for unsorted mixed waste",
)
WASTE_RECYCLED = EmissionFactor(
    key="waste_recycled",
    source="Recycled Waste",
    unit="kg",
    co2_kg_per_unit=0.058,
    description="Emission factor for sorted/recyclable waste",
)
WASTE_ORGANIC = EmissionFactor(
    key="waste_organic",
    source="Organic Waste",
    unit="kg",
    co2_kg_per_unit=0.089,
    description="Emission factor for organic waste",
)

EMISSION_FACTORS: dict[str, EmissionFactor] = {
    f.key: f
    for f in (
        ELECTRICITY_ITALY,
        NATURAL_GAS,
        DIESEL,
        GASOLINE,
        PAPER,
        WATER,
        FLIGHT_DOMESTIC,
        FLIGHT_INTERNATIONAL,
        WASTE_MIXED,
        WASTE_RECYCLED,
        WASTE_ORGANIC,
    )
}

# ---------------------------------------------------------------------------
# Renewable-share answer -> representative percentage
# ---------------------------------------------------------------------------
RENEWABLE_SHARE_CHOICES: tuple[str, ...] = (
    "Sì, oltre 80%",
    "Parzialmente (30-80%)",
    "Poco (10-30%)",
    "No, meno del 10%",
    "Non so",
)
# Midpoint of each band; the last two choices share the conservative floor
RENEWABLE_SHARE_PERCENTAGES: tuple[int, ...] = (85, 55, 20, 5, 5)
DEFAULT_RENEWABLE_PERCENTAGE = 5

# ---------------------------------------------------------------------------
# Waste-management answer -> factor selection
# ---------------------------------------------------------------------------
WASTE_MANAGEMENT_CHOICES: tuple[str, ...] = (
    "Sì, con obiettivi di riduzione",
    "Sì, raccolta differenziata",
    "Parzialmente",
    "No",
)
WASTE_BEST_PRACTICE, WASTE_SORTED, WASTE_PARTIAL, WASTE_NONE = WASTE_MANAGEMENT_CHOICES

WASTE_FACTOR_BY_ANSWER: dict[str, str] = {
    WASTE_BEST_PRACTICE: WASTE_ORGANIC.key,
    WASTE_SORTED: WASTE_RECYCLED.key,
}
DEFAULT_WASTE_FACTOR = WASTE_MIXED.key
