"""
Carbon score aggregation.

Combines survey answers into a single daily estimate (kg CO2e per day):

    score = (transport + home) * (1 - solar_percentage / 100) + cooling + shopping

The solar discount only applies to the transport and home terms accumulated
before it; cooling and shopping are added afterward at full weight. The
result is rounded to one decimal, ties away from zero.
"""

import logging
from dataclasses import dataclass

import numpy as np

from src.config import NATIONAL_AVERAGE_KG_PER_DAY
from src.footprint.answers import SurveyAnswers
from src.footprint.tables import (
    COOLING_EMISSIONS,
    DEFAULT_COOLING_EMISSIONS,
    DEFAULT_SHOPPING_EMISSIONS,
    HIGH_SCORE_RATING,
    HOME_BASE_EMISSIONS,
    REUSABLE_BAGS_FACTOR,
    SCORE_RATINGS,
    SHOPPING_EMISSIONS,
    TRANSPORT_SCORE_FACTOR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreRating:
    """Qualitative band for a carbon score."""

    rating: str
    description: str


@dataclass(frozen=True)
class AverageComparison:
    """Score relative to the reference average footprint."""

    average: float
    difference: float
    above_average: bool


def round_one_decimal(value: float) -> float:
    """
    Round to one decimal place, ties away from zero.

    Python's round() uses banker's rounding, so it is not used here.

    Example:
        >>> round_one_decimal(0.25)
        0.3
        >>> round_one_decimal(-0.25)
        -0.3
    """
    return float(np.sign(value) * np.floor(abs(value) * 10 + 0.5) / 10)


def score_breakdown(answers: SurveyAnswers) -> dict[str, float]:
    """
    Get the individual, unrounded terms of the carbon score.

    Useful for debugging and for showing where the score comes from.

    Args:
        answers: Survey answers to score

    Returns:
        Dictionary with keys "transport", "home", "solar_discount" (amount
        removed from transport + home, 0 when solar is disabled), "cooling",
        "shopping" and "total".
    """
    daily_km = max(answers.transport.daily_km, 0.0)
    transport = daily_km * TRANSPORT_SCORE_FACTOR

    occupants = answers.home.occupants
    if occupants < 1:
        logger.debug(f"Occupants {occupants} < 1, treating as 1")
        occupants = 1
    home = HOME_BASE_EMISSIONS / occupants

    # Solar reduces only the running total so far
    subtotal = transport + home
    discounted = subtotal
    if answers.solar.enabled:
        coverage = float(np.clip(answers.solar.percentage, 0.0, 100.0))
        discounted = subtotal * (1 - coverage / 100)
    solar_discount = subtotal - discounted

    cooling = COOLING_EMISSIONS.get(answers.cooling.type)
    if cooling is None:
        logger.debug(f"Unknown cooling type '{answers.cooling.type}', using {DEFAULT_COOLING_EMISSIONS}")
        cooling = DEFAULT_COOLING_EMISSIONS

    shopping = SHOPPING_EMISSIONS.get(answers.shopping.source)
    if shopping is None:
        logger.debug(f"Unknown shopping source '{answers.shopping.source}', using {DEFAULT_SHOPPING_EMISSIONS}")
        shopping = DEFAULT_SHOPPING_EMISSIONS
    if answers.shopping.reusable_bags:
        shopping *= REUSABLE_BAGS_FACTOR

    total = discounted + cooling + shopping

    return {
        "transport": transport,
        "home": home,
        "solar_discount": solar_discount,
        "cooling": cooling,
        "shopping": shopping,
        "total": total,
    }


def compute_score(answers: SurveyAnswers) -> float:
    """
    Compute the carbon score for a set of answers.

    Args:
        answers: Survey answers to score

    Returns:
        Non-negative score in kg CO2e per day, rounded to one decimal

    Example:
        >>> from src.footprint.answers import CoolingAnswers, HomeAnswers, ShoppingAnswers, TransportAnswers
        >>> compute_score(SurveyAnswers(
        ...     transport=TransportAnswers(daily_km=0),
        ...     home=HomeAnswers(occupants=1),
        ...     cooling=CoolingAnswers(type="fan"),
        ...     shopping=ShoppingAnswers(source="local"),
        ... ))
        6.0
    """
    total = score_breakdown(answers)["total"]
    return max(round_one_decimal(total), 0.0)


def rate_score(score: float) -> ScoreRating:
    """Return the qualitative band for a score (Excellent, Good, Average or High)."""
    for upper, rating, description in SCORE_RATINGS:
        if score <= upper:
            return ScoreRating(rating=rating, description=description)
    rating, description = HIGH_SCORE_RATING
    return ScoreRating(rating=rating, description=description)


def compare_to_average(
    score: float,
    average: float = NATIONAL_AVERAGE_KG_PER_DAY,
) -> AverageComparison:
    """Compare a score against the reference average footprint."""
    return AverageComparison(
        average=average,
        difference=round_one_decimal(score - average),
        above_average=score > average,
    )
