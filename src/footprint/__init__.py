"""
Carbon footprint survey engine.

Derives outputs from lifestyle survey answers:
- tiers: LOW/MEDIUM/HIGH impact per category
- score: single daily carbon estimate (kg CO2e)
- distribution: percentage split across selected transport modes

All functions are pure; the caller owns the SurveyAnswers state and replaces
it on every edit.
"""

from src.footprint.answers import (
    CoolingAnswers,
    HomeAnswers,
    ShoppingAnswers,
    SolarAnswers,
    SurveyAnswers,
    TierLabel,
    TransportAnswers,
    default_answers,
    set_solar,
)
from src.footprint.tiers import (
    CategoryTiers,
    classify_all,
    classify_cooling,
    classify_home,
    classify_shopping,
    classify_solar,
    classify_transport,
)
from src.footprint.score import (
    compare_to_average,
    compute_score,
    rate_score,
    score_breakdown,
)
from src.footprint.distribution import (
    adjust_distribution,
    even_split,
    is_balanced,
    toggle_mode,
)
from src.footprint.results import SurveyResult, summarize

__all__ = [
    # Answers
    "SurveyAnswers",
    "TransportAnswers",
    "HomeAnswers",
    "SolarAnswers",
    "CoolingAnswers",
    "ShoppingAnswers",
    "TierLabel",
    "default_answers",
    "set_solar",
    # Tiers
    "CategoryTiers",
    "classify_transport",
    "classify_home",
    "classify_solar",
    "classify_cooling",
    "classify_shopping",
    "classify_all",
    # Score
    "compute_score",
    "score_breakdown",
    "rate_score",
    "compare_to_average",
    # Distribution
    "even_split",
    "toggle_mode",
    "adjust_distribution",
    "is_balanced",
    # Results
    "SurveyResult",
    "summarize",
]
