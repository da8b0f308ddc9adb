"""
Option catalogs and emission factors for the survey categories.

Every lookup in the engine goes through these module-level tables, so a
category's thresholds and factors can be read (and tuned) in one place.
Unknown option ids never raise; each table documents its fallback.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransportMode:
    """A selectable transport mode."""

    id: str
    name: str
    emission_factor: float  # kg CO2 per km


TRANSPORT_MODES = (
    TransportMode("train", "Local Train / Metro", 0.04),
    TransportMode("bus", "BEST Bus", 0.08),
    TransportMode("auto", "Shared Auto/Cab", 0.15),
    TransportMode("car", "Private Car - Solo", 0.25),
    TransportMode("bike", "Motorcycle", 0.12),
    TransportMode("walk", "Walk / Cycle", 0.0),
)

TRANSPORT_MODES_BY_ID = {mode.id: mode for mode in TRANSPORT_MODES}

# Selecting any of these scales the distance used for the transport tier
ZERO_EMISSION_MODES = frozenset({"walk", "cycle"})
ZERO_EMISSION_DISTANCE_FACTOR = 0.7

# Transport tier thresholds (km/day, inclusive upper bounds)
TRANSPORT_TIER_THRESHOLDS = (10.0, 35.0)

# Average transport emission factor used by the score (kg CO2 per km)
TRANSPORT_SCORE_FACTOR = 0.2


# Floor area by home type (sq ft)
HOME_AREAS = {
    "1rk": 200,
    "1bhk": 400,
    "2bhk": 800,
    "3bhk": 1200,
    "villa": 2000,
}
DEFAULT_HOME_AREA = 600

# Home tier thresholds (sq ft per occupant, inclusive upper bounds)
HOME_TIER_THRESHOLDS = (200.0, 500.0)

# Base daily home emissions, shared across occupants (kg CO2)
HOME_BASE_EMISSIONS = 5.0


# Solar tier is inverted: more coverage is better (inclusive lower bounds)
SOLAR_LOW_MIN_PERCENTAGE = 60.0
SOLAR_MEDIUM_MIN_PERCENTAGE = 25.0

# Starting percentage when solar is switched on
SOLAR_DEFAULT_ENABLED_PERCENTAGE = 25.0


COOLING_EMISSIONS = {
    "fan": 0.5,
    "cooler": 1.0,
    "ac-few": 2.0,
    "ac-most": 4.0,
}
DEFAULT_COOLING_EMISSIONS = 1.0


SHOPPING_EMISSIONS = {
    "local": 0.5,
    "quick-commerce": 1.5,
    "supermarket": 2.0,
}
DEFAULT_SHOPPING_EMISSIONS = 1.0
REUSABLE_BAGS_FACTOR = 0.8


# Score rating bands: (inclusive upper bound, rating, description)
SCORE_RATINGS = (
    (4.0, "Excellent", "You have a very low carbon footprint!"),
    (7.0, "Good", "Your carbon footprint is below average."),
    (10.0, "Average", "Your carbon footprint is around average."),
)
HIGH_SCORE_RATING = ("High", "There's room for improvement in your carbon footprint.")


# Shown on the results view for each category whose tier is HIGH
RECOMMENDATIONS = {
    "transport": "Consider using public transport or cycling more often",
    "home": "Optimize home energy usage or consider shared living",
    "solar": "Installing solar panels can significantly reduce your footprint",
    "cooling": "Use fans more and AC less, or upgrade to energy-efficient units",
    "shopping": "Shop locally and use reusable bags",
}
