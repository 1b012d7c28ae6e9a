"""Date coercion helpers shared by listings and orders."""

from datetime import UTC, date, datetime

from protean.exceptions import ValidationError


def utc_today() -> date:
    """Calendar date on the same UTC clock as every recorded timestamp."""
    return datetime.now(UTC).date()


def to_date(value, field_name: str = "date") -> date | None:
    """Reduce a date, datetime or ISO-8601 string to a calendar date.

    Time of day is dropped. ``None`` and empty strings pass through as ``None``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise ValidationError({field_name: [f"'{value}' is not a valid date"]})


def month_bounds(month: str) -> tuple[datetime, datetime]:
    """Return UTC ``[start, end)`` datetimes for a ``YYYY-MM`` month string."""
    try:
        start = datetime.strptime(month, "%Y-%m").replace(tzinfo=UTC)
    except (TypeError, ValueError):
        raise ValidationError({"month": [f"'{month}' is not a valid month, expected YYYY-MM"]}) from None

    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end
