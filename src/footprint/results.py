"""
Results summary for a completed survey.

Bundles everything the results view shows: per-category tiers, the carbon
score with its rating and comparison to the average footprint, and a tip for
each category classified HIGH.
"""

from dataclasses import dataclass, field
from typing import Any

from src.footprint.answers import SurveyAnswers, TierLabel
from src.footprint.score import (
    AverageComparison,
    ScoreRating,
    compare_to_average,
    compute_score,
    rate_score,
)
from src.footprint.tables import RECOMMENDATIONS
from src.footprint.tiers import CategoryTiers, classify_all

# Order in which categories are listed on the results view
CATEGORY_ORDER = ("transport", "home", "solar", "cooling", "shopping")


@dataclass(frozen=True)
class SurveyResult:
    """
    Derived outputs for one set of answers.

    Attributes:
        tiers: Tier per category
        score: Carbon score (kg CO2e per day)
        rating: Qualitative band for the score
        comparison: Score relative to the average footprint
        recommendations: One tip per HIGH category, in CATEGORY_ORDER
    """

    tiers: CategoryTiers
    score: float
    rating: ScoreRating
    comparison: AverageComparison
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "tiers": self.tiers.to_dict(),
            "score": self.score,
            "rating": self.rating.rating,
            "rating_description": self.rating.description,
            "average": self.comparison.average,
            "difference_from_average": self.comparison.difference,
            "above_average": self.comparison.above_average,
            "recommendations": list(self.recommendations),
        }


def recommendations_for(tiers: CategoryTiers) -> list[str]:
    """Return a tip for every category whose tier is HIGH."""
    return [
        RECOMMENDATIONS[category]
        for category in CATEGORY_ORDER
        if getattr(tiers, category) is TierLabel.HIGH
    ]


def summarize(answers: SurveyAnswers) -> SurveyResult:
    """Compute the full results summary for a set of answers."""
    tiers = classify_all(answers)
    score = compute_score(answers)
    return SurveyResult(
        tiers=tiers,
        score=score,
        rating=rate_score(score),
        comparison=compare_to_average(score),
        recommendations=recommendations_for(tiers),
    )
