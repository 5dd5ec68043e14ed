"""Road and weather categories with their cost adjustments."""

from __future__ import annotations

from enum import Enum


class RoadCondition(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    VERY_POOR = "very-poor"

    @classmethod
    def parse(cls, value: str | None) -> "RoadCondition | None":
        """Case-insensitive lookup; unknown strings yield ``None``."""
        if value is None:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


class Weather(str, Enum):
    EXCELLENT = "excellent"
    NORMAL = "normal"
    RAINY = "rainy"
    STORMY = "stormy"

    @classmethod
    def parse(cls, value: str | None) -> "Weather | None":
        if value is None:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


def road_adjustment(
    condition: str,
    fuel_efficiency_good_road: float,
    fuel_efficiency_poor_road: float,
) -> tuple[float, float]:
    """Return ``(fuel_efficiency, road_multiplier)`` for a road condition.

    Unrecognized conditions keep the good-road efficiency and a neutral
    multiplier.
    """
    match RoadCondition.parse(condition):
        case RoadCondition.EXCELLENT:
            return fuel_efficiency_good_road * 1.1, 0.9
        case RoadCondition.GOOD:
            return fuel_efficiency_good_road, 1.0
        case RoadCondition.FAIR:
            return fuel_efficiency_good_road * 0.9, 1.2
        case RoadCondition.POOR:
            return fuel_efficiency_poor_road, 1.5
        case RoadCondition.VERY_POOR:
            return fuel_efficiency_poor_road * 0.8, 2.0
        case _:
            return fuel_efficiency_good_road, 1.0


def weather_adjustment(weather: str) -> tuple[float, float]:
    """Return ``(fuel_efficiency_factor, road_multiplier_factor)`` for the weather."""
    match Weather.parse(weather):
        case Weather.RAINY:
            return 0.9, 1.2
        case Weather.STORMY:
            return 0.8, 1.5
        case _:
            return 1.0, 1.0


def is_poor(condition: str) -> bool:
    """Coarse two-tier rule: any condition mentioning "poor"."""
    return "poor" in condition.lower()


def reduces_capacity(condition: str) -> bool:
    return RoadCondition.parse(condition) in (RoadCondition.POOR, RoadCondition.VERY_POOR)
