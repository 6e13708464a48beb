import math
from datetime import datetime, date
from typing import Optional, Union


DateLike = Union[datetime, date]


class DateHelpers:
    @staticmethod
    def _as_datetime(value: DateLike) -> datetime:
        if isinstance(value, datetime):
            return value.replace(tzinfo=None)
        return datetime(value.year, value.month, value.day)

    @staticmethod
    def format_standard(value: Optional[DateLike]) -> Optional[str]:
        """Format like "Saturday, Jun 20, 2026" """
        if not value:
            return None
        value = DateHelpers._as_datetime(value)
        return f"{value.strftime('%A')}, {value.strftime('%b')} {value.day}, {value.year}"

    @staticmethod
    def format_number(value: Optional[DateLike]) -> Optional[str]:
        """Format as MM.DD.YYYY"""
        if not value:
            return None
        return DateHelpers._as_datetime(value).strftime("%m.%d.%Y")

    @staticmethod
    def days_remaining(
        value: Optional[DateLike], now: Optional[datetime] = None
    ) -> int:
        """Whole days until the given date, rounded up. -1 when there is no date."""
        if not value:
            return -1
        now = now or datetime.now()
        delta = DateHelpers._as_datetime(value) - now
        return math.ceil(delta.total_seconds() / 86400)

    @staticmethod
    def is_past_day(value: DateLike, today: Optional[date] = None) -> bool:
        """True if the date falls before today (same day is allowed)"""
        today = today or date.today()
        return DateHelpers._as_datetime(value).date() < today

    @staticmethod
    def wedding_date_info(value: Optional[DateLike]) -> dict:
        return {
            "date": {
                "standard_format": DateHelpers.format_standard(value),
                "number_format": DateHelpers.format_number(value),
            },
            "days_remaining": DateHelpers.days_remaining(value),
        }
