"""Pytest configuration and fixtures for carbon footprint survey tests."""
import sys
from pathlib import Path

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from src.footprint.answers import (
    CoolingAnswers,
    HomeAnswers,
    ShoppingAnswers,
    SolarAnswers,
    SurveyAnswers,
    TransportAnswers,
)


@pytest.fixture
def baseline_answers():
    """Answers whose score is exactly 0 + 5 + 0.5 + 0.5 = 6.0."""
    return SurveyAnswers(
        transport=TransportAnswers(selected_modes=(), daily_km=0.0),
        home=HomeAnswers(type="2bhk", occupants=1),
        solar=SolarAnswers(enabled=False, percentage=0.0),
        cooling=CoolingAnswers(type="fan"),
        shopping=ShoppingAnswers(source="local", reusable_bags=False),
    )


@pytest.fixture
def heavy_answers():
    """Answers that classify HIGH in every category."""
    return SurveyAnswers(
        transport=TransportAnswers(
            selected_modes=("car",), daily_km=60.0, mode_distribution={"car": 100}
        ),
        home=HomeAnswers(type="villa", occupants=1),
        solar=SolarAnswers(enabled=False, percentage=0.0),
        cooling=CoolingAnswers(type="ac-most"),
        shopping=ShoppingAnswers(source="supermarket", reusable_bags=False),
    )


@pytest.fixture
def project_root():
    """Get the project root directory."""
    return Path(__file__).parent.parent
