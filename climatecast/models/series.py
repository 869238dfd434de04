"""Daily observation series for one location."""

from dataclasses import dataclass, field

# Upstream parameter code -> DailySeries field
PARAMETER_FIELDS: dict[str, str] = {
    "T2M_MIN": "temperature_min",
    "T2M_MAX": "temperature_max",
    "PRECTOTCORR": "precipitation",
    "WS10M": "wind_speed",
    "RH2M": "humidity",
    "PS": "pressure",
}


@dataclass
class DailySeries:
    """Six parallel daily sequences; each may have its own length."""

    temperature_min: list[float] = field(default_factory=list)
    temperature_max: list[float] = field(default_factory=list)
    precipitation: list[float] = field(default_factory=list)
    wind_speed: list[float] = field(default_factory=list)
    humidity: list[float] = field(default_factory=list)
    pressure: list[float] = field(default_factory=list)
    synthetic: bool = False
    years_fetched: int = 0

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in PARAMETER_FIELDS.values())

    def extend(self, other: "DailySeries") -> None:
        for name in PARAMETER_FIELDS.values():
            getattr(self, name).extend(getattr(other, name))

    def lengths(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in PARAMETER_FIELDS.values()}
