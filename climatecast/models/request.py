"""Inbound forecast request."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ForecastRequest:
    """A single-point, single-day forecast request.

    Fields are optional so that malformed requests can be represented and
    rejected with a full list of violations. Dates may be given as
    ``datetime.date`` or ISO ``YYYY-MM-DD`` strings.
    """

    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    address: str | None = None
    timezone: str | None = None
    elevation: int | None = None
    target_date: date | str | None = None
    end_date: date | str | None = None

    def target_date_resolved(self) -> date | None:
        return resolve_date(self.target_date)

    def end_date_resolved(self) -> date | None:
        return resolve_date(self.end_date)


def resolve_date(value: date | str | None) -> date | None:
    """Resolve a date or ISO date string. Raises ValueError on malformed input."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Unsupported date value: {value!r}")
    return date.fromisoformat(value.strip())
