"""
Survey answer records and tier labels.

SurveyAnswers is created with defaults at session start and replaced field by
field as the caller collects answers. Records are frozen: an edit produces a
new record via ``dataclasses.replace`` so every engine call sees a consistent
snapshot.
"""

import logging
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Optional

import numpy as np

from src.footprint.tables import SOLAR_DEFAULT_ENABLED_PERCENTAGE

logger = logging.getLogger(__name__)


class TierLabel(str, Enum):
    """Ordinal impact classification; LOW is the least environmentally costly."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)

    def step_down(self) -> "TierLabel":
        """Return the tier one step toward LOW (LOW stays LOW)."""
        return _TIER_ORDER[max(self.rank - 1, 0)]


_TIER_ORDER = (TierLabel.LOW, TierLabel.MEDIUM, TierLabel.HIGH)


@dataclass(frozen=True)
class TransportAnswers:
    """
    Transport answers.

    Attributes:
        selected_modes: Selected mode ids in the order they were picked
        daily_km: Total daily distance across all modes
        mode_distribution: Percentage of daily distance per selected mode

    mode_distribution is a plain dict, so this record (and SurveyAnswers)
    is not hashable. Replace the distribution wholesale with the dict
    returned by toggle_mode/adjust_distribution; never edit it in place.
    """

    selected_modes: tuple[str, ...] = ()
    daily_km: float = 10.0
    mode_distribution: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class HomeAnswers:
    type: str = "2bhk"
    occupants: int = 3


@dataclass(frozen=True)
class SolarAnswers:
    enabled: bool = False
    percentage: float = 0.0


@dataclass(frozen=True)
class CoolingAnswers:
    type: str = "ac-few"


@dataclass(frozen=True)
class ShoppingAnswers:
    source: str = "quick-commerce"
    reusable_bags: bool = False


@dataclass(frozen=True)
class SurveyAnswers:
    """All answers collected by the survey, one sub-record per category."""

    transport: TransportAnswers = field(default_factory=TransportAnswers)
    home: HomeAnswers = field(default_factory=HomeAnswers)
    solar: SolarAnswers = field(default_factory=SolarAnswers)
    cooling: CoolingAnswers = field(default_factory=CoolingAnswers)
    shopping: ShoppingAnswers = field(default_factory=ShoppingAnswers)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        data = asdict(self)
        data["transport"]["selected_modes"] = list(self.transport.selected_modes)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SurveyAnswers":
        """
        Deserialize from a dictionary.

        Missing sections and keys fall back to the session defaults.

        Raises:
            ValueError: If a section is not a mapping, selected_modes is not a
                list, or a value cannot be coerced to its field's type.
        """
        defaults = cls()

        data = _mapping(data, "answers")
        transport = _mapping(data.get("transport", {}), "transport")
        home = _mapping(data.get("home", {}), "home")
        solar = _mapping(data.get("solar", {}), "solar")
        cooling = _mapping(data.get("cooling", {}), "cooling")
        shopping = _mapping(data.get("shopping", {}), "shopping")

        selected_modes = transport.get("selected_modes", defaults.transport.selected_modes)
        if not isinstance(selected_modes, (list, tuple)):
            raise ValueError(
                f"Invalid value for 'transport.selected_modes': {selected_modes!r} "
                "(expected a list of mode ids)"
            )
        mode_distribution = _mapping(
            transport.get("mode_distribution", {}), "transport.mode_distribution"
        )

        return cls(
            transport=TransportAnswers(
                selected_modes=tuple(
                    _coerce(str, m, "transport.selected_modes") for m in selected_modes
                ),
                daily_km=_coerce(
                    float, transport.get("daily_km", defaults.transport.daily_km), "transport.daily_km"
                ),
                mode_distribution={
                    _coerce(str, k, "transport.mode_distribution"): _coerce(
                        float, v, "transport.mode_distribution"
                    )
                    for k, v in mode_distribution.items()
                },
            ),
            home=HomeAnswers(
                type=_coerce(str, home.get("type", defaults.home.type), "home.type"),
                occupants=_coerce(
                    int, home.get("occupants", defaults.home.occupants), "home.occupants"
                ),
            ),
            solar=SolarAnswers(
                enabled=bool(solar.get("enabled", defaults.solar.enabled)),
                percentage=_coerce(
                    float, solar.get("percentage", defaults.solar.percentage), "solar.percentage"
                ),
            ),
            cooling=CoolingAnswers(
                type=_coerce(str, cooling.get("type", defaults.cooling.type), "cooling.type"),
            ),
            shopping=ShoppingAnswers(
                source=_coerce(
                    str, shopping.get("source", defaults.shopping.source), "shopping.source"
                ),
                reusable_bags=bool(
                    shopping.get("reusable_bags", defaults.shopping.reusable_bags)
                ),
            ),
        )


def _mapping(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Invalid value for '{name}': {value!r} (expected a mapping)")
    return value


def _coerce(kind: type, value: Any, name: str) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for '{name}': {value!r} ({e})") from e


def default_answers() -> SurveyAnswers:
    """Answers a new session starts from."""
    return SurveyAnswers()


def set_solar(
    answers: SurveyAnswers,
    enabled: bool,
    percentage: Optional[float] = None,
) -> SurveyAnswers:
    """
    Return answers with the solar record switched on or off.

    Switching on without an explicit percentage starts at 25%; switching off
    resets the percentage to 0. Percentages are clamped to [0, 100].

    Example:
        >>> set_solar(default_answers(), True).solar
        SolarAnswers(enabled=True, percentage=25.0)
    """
    if not enabled:
        value = 0.0
    elif percentage is None:
        value = SOLAR_DEFAULT_ENABLED_PERCENTAGE
    else:
        value = float(np.clip(percentage, 0.0, 100.0))
        if value != percentage:
            logger.debug(f"Clamped solar percentage {percentage} -> {value}")

    return replace(answers, solar=SolarAnswers(enabled=enabled, percentage=value))
