"""Common types and helpers shared across models."""

import math
from datetime import UTC, datetime
from enum import StrEnum


class Season(StrEnum):
    WINTER = "Winter"
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"


class Hemisphere(StrEnum):
    NORTHERN = "Northern"
    SOUTHERN = "Southern"


class ClimateZone(StrEnum):
    SUBTROPICAL = "Subtropical"
    MEDITERRANEAN = "Mediterranean"
    TEMPERATE = "Temperate"
    POLAR = "Polar"


def utc_now() -> datetime:
    return datetime.now(UTC)


def round1(value: float) -> float:
    """Round to one decimal place with halves rounded up."""
    if not math.isfinite(value):
        return float(value)
    return math.floor(float(value) * 10 + 0.5) / 10
