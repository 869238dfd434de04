"""Request validation: runs every check and accumulates all violations."""

import logging
from datetime import date

from climatecast.models.request import ForecastRequest, resolve_date
from climatecast.models.validation import ValidationResult

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255
MIN_ELEVATION_M = -500
MAX_ELEVATION_M = 9000

TARGET_DATE_REQUIRED = "Target date is required"


class InvalidRequestError(ValueError):
    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid request: " + ", ".join(self.errors))


def validate_request(
    request: ForecastRequest,
    today: date | None = None,
    max_lead_years: int = 2,
) -> ValidationResult:
    """Validate an inbound request. Never short-circuits."""
    if today is None:
        today = date.today()

    errors: list[str] = []
    _check_name(request.name, errors)
    _check_coordinate(request.latitude, "Latitude", 90.0, errors)
    _check_coordinate(request.longitude, "Longitude", 180.0, errors)
    target = _check_target_date(request.target_date, today, max_lead_years, errors)
    _check_end_date(request.end_date, target, errors)
    _check_elevation(request.elevation, errors)

    logger.info("Request validation completed. Found %d errors", len(errors))
    return ValidationResult.from_errors(errors)


def _check_name(name: str | None, errors: list[str]) -> None:
    if name is not None and not isinstance(name, str):
        errors.append("Location name must be a string")
    elif name is None or not name.strip():
        errors.append("Location name is required")
    elif len(name) > MAX_NAME_LENGTH:
        errors.append(f"Location name cannot exceed {MAX_NAME_LENGTH} characters")


def _check_coordinate(
    value: float | None, label: str, limit: float, errors: list[str]
) -> None:
    if value is None:
        errors.append(f"{label} is required")
    elif not _is_number(value):
        errors.append(f"{label} must be a number")
    elif not -limit <= value <= limit:
        errors.append(f"{label} must be between {-limit:g} and {limit:g} degrees")


def _check_target_date(
    value: date | str | None, today: date, max_lead_years: int, errors: list[str]
) -> date | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        errors.append(TARGET_DATE_REQUIRED)
        return None
    try:
        target = resolve_date(value)
    except (TypeError, ValueError) as e:
        errors.append(f"Invalid target date: {e}")
        return None

    if target <= today:
        errors.append("Target date must be in the future for weather prediction")
    if target > add_years(today, max_lead_years):
        errors.append(
            f"Target date cannot be more than {max_lead_years} years in the future"
        )
    return target


def _check_end_date(
    value: date | str | None, target: date | None, errors: list[str]
) -> None:
    if value is None:
        return
    try:
        end = resolve_date(value)
    except (TypeError, ValueError) as e:
        errors.append(f"Invalid end date: {e}")
        return
    if target is not None and end < target:
        errors.append("End date must not be before target date")


def _check_elevation(elevation: int | None, errors: list[str]) -> None:
    if elevation is None:
        return
    if not _is_number(elevation):
        errors.append("Elevation must be a number")
    elif not MIN_ELEVATION_M <= elevation <= MAX_ELEVATION_M:
        errors.append(
            f"Elevation must be between {MIN_ELEVATION_M}m and {MAX_ELEVATION_M}m"
        )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def add_years(day: date, years: int) -> date:
    """Same calendar day ``years`` later; Feb 29 maps to Feb 28."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)
