"""
Tier classification for survey categories.

Each category maps its raw answer to a TierLabel (LOW/MEDIUM/HIGH). All
classifiers are total: unknown option ids fall back to a default instead of
raising.

Rules:
- transport: distance thresholds, scaled down when walking/cycling is selected
- home: floor area per occupant thresholds
- solar: inverted thresholds (more coverage = lower tier)
- cooling: direct table lookup
- shopping: table lookup, one step lower with reusable bags
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from src.footprint.answers import SurveyAnswers, TierLabel
from src.footprint.tables import (
    DEFAULT_HOME_AREA,
    HOME_AREAS,
    HOME_TIER_THRESHOLDS,
    SOLAR_LOW_MIN_PERCENTAGE,
    SOLAR_MEDIUM_MIN_PERCENTAGE,
    TRANSPORT_TIER_THRESHOLDS,
    ZERO_EMISSION_DISTANCE_FACTOR,
    ZERO_EMISSION_MODES,
)

logger = logging.getLogger(__name__)

COOLING_TIERS = {
    "fan": TierLabel.LOW,
    "cooler": TierLabel.MEDIUM,
    "ac-few": TierLabel.MEDIUM,
    "ac-most": TierLabel.HIGH,
}

SHOPPING_TIERS = {
    "local": TierLabel.LOW,
    "quick-commerce": TierLabel.MEDIUM,
    "supermarket": TierLabel.HIGH,
}

DEFAULT_TIER = TierLabel.MEDIUM


@dataclass(frozen=True)
class CategoryTiers:
    """Tier for every survey category."""

    transport: TierLabel
    home: TierLabel
    solar: TierLabel
    cooling: TierLabel
    shopping: TierLabel

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary."""
        return {
            "transport": self.transport.value,
            "home": self.home.value,
            "solar": self.solar.value,
            "cooling": self.cooling.value,
            "shopping": self.shopping.value,
        }


def tier_from_thresholds(value: float, low: float, high: float) -> TierLabel:
    """
    Classify a value where larger means more costly.

    Both thresholds are inclusive upper bounds.

    Example:
        >>> tier_from_thresholds(10.0, low=10, high=35)
        <TierLabel.LOW: 'LOW'>
        >>> tier_from_thresholds(10.01, low=10, high=35)
        <TierLabel.MEDIUM: 'MEDIUM'>
    """
    if value <= low:
        return TierLabel.LOW
    if value <= high:
        return TierLabel.MEDIUM
    return TierLabel.HIGH


def classify_transport(daily_km: float, selected_modes: Iterable[str]) -> TierLabel:
    """
    Classify daily travel distance.

    Selecting a zero-emission mode (walk or cycle) scales the distance by 0.7
    before classification.

    Args:
        daily_km: Total daily distance in km
        selected_modes: Selected transport mode ids

    Returns:
        LOW for <= 10 km, MEDIUM for <= 35 km, HIGH otherwise
    """
    distance = daily_km
    if ZERO_EMISSION_MODES.intersection(selected_modes):
        distance = daily_km * ZERO_EMISSION_DISTANCE_FACTOR

    low, high = TRANSPORT_TIER_THRESHOLDS
    return tier_from_thresholds(distance, low, high)


def classify_home(home_type: str, occupants: int) -> TierLabel:
    """
    Classify home floor area per occupant.

    Unknown home types use a 600 sq ft area; fewer than one occupant is
    treated as one.
    """
    area = HOME_AREAS.get(home_type)
    if area is None:
        logger.debug(f"Unknown home type '{home_type}', using {DEFAULT_HOME_AREA} sq ft")
        area = DEFAULT_HOME_AREA

    area_per_person = area / max(occupants, 1)

    low, high = HOME_TIER_THRESHOLDS
    return tier_from_thresholds(area_per_person, low, high)


def classify_solar(percentage: float) -> TierLabel:
    """Classify solar coverage. Inverted: >= 60% is LOW, >= 25% is MEDIUM."""
    if percentage >= SOLAR_LOW_MIN_PERCENTAGE:
        return TierLabel.LOW
    if percentage >= SOLAR_MEDIUM_MIN_PERCENTAGE:
        return TierLabel.MEDIUM
    return TierLabel.HIGH


def classify_cooling(cooling_type: str) -> TierLabel:
    if cooling_type not in COOLING_TIERS:
        logger.debug(f"Unknown cooling type '{cooling_type}', using {DEFAULT_TIER.value}")
    return COOLING_TIERS.get(cooling_type, DEFAULT_TIER)


def classify_shopping(source: str, reusable_bags: bool) -> TierLabel:
    """
    Classify the usual shopping source.

    Reusable bags lower the tier by exactly one step (HIGH -> MEDIUM,
    MEDIUM -> LOW); LOW is unchanged.
    """
    if source not in SHOPPING_TIERS:
        logger.debug(f"Unknown shopping source '{source}', using {DEFAULT_TIER.value}")
    tier = SHOPPING_TIERS.get(source, DEFAULT_TIER)

    if reusable_bags:
        tier = tier.step_down()
    return tier


def classify_all(answers: SurveyAnswers) -> CategoryTiers:
    """
    Classify every category of a survey.

    The solar tier follows the solar percentage alone, so a disabled solar
    record (0%) classifies as HIGH.
    """
    return CategoryTiers(
        transport=classify_transport(
            answers.transport.daily_km, answers.transport.selected_modes
        ),
        home=classify_home(answers.home.type, answers.home.occupants),
        solar=classify_solar(answers.solar.percentage),
        cooling=classify_cooling(answers.cooling.type),
        shopping=classify_shopping(answers.shopping.source, answers.shopping.reusable_bags),
    )
