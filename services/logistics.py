from datetime import date, datetime

from models.bed_slot import LOGISTICS_FIELDS
from services.errors import ValidationError

_DATE_FIELDS = ("arrival_date", "departure_date")
_TIME_FIELDS = ("arrival_time", "departure_time", "train_time")
_TEXT_LIMITS = {
    "transport": 20,
    "departure_city": 100,
    "train_station": 100,
    "train_number": 20,
}

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off", ""}


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(field: str, value):
    if _blank(value):
        return None
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be a date like 2026-05-13")


def _parse_time(field: str, value):
    if _blank(value):
        return None
    try:
        return datetime.strptime(str(value).strip(), "%H:%M").strftime("%H:%M")
    except ValueError:
        raise ValidationError(f"{field} must be a time like 16:30")


def _parse_bool(field: str, value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValidationError(f"{field} must be true or false")


def _parse_count(field: str, value) -> int:
    if _blank(value):
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a whole number")
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a whole number")
    if count < 0:
        raise ValidationError(f"{field} must not be negative")
    return count


def _parse_text(field: str, value):
    if _blank(value):
        return None
    text = str(value).strip()
    limit = _TEXT_LIMITS[field]
    if len(text) > limit:
        raise ValidationError(f"{field} must be at most {limit} characters")
    return text


def parse_logistics(data) -> dict:
    """
    Build the complete set of logistics column values from a request payload.

    Every field is always present in the result: fields the payload omits get
    their reset value (None, False or 0), since a booking write replaces the
    previous logistics rather than patching them.
    """
    data = data or {}
    values = {}
    for field in LOGISTICS_FIELDS:
        raw = data.get(field)
        if field in _DATE_FIELDS:
            values[field] = _parse_date(field, raw)
        elif field in _TIME_FIELDS:
            values[field] = _parse_time(field, raw)
        elif field == "needs_pickup":
            values[field] = _parse_bool(field, raw)
        elif field == "offers_ride_seats":
            values[field] = _parse_count(field, raw)
        else:
            values[field] = _parse_text(field, raw)
    return values
