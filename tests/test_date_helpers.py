from datetime import date, datetime

from wedplan.utils.date_helpers import DateHelpers


def test_formats():
    wedding = datetime(2026, 6, 20, 16, 30)
    assert DateHelpers.format_standard(wedding) == "Saturday, Jun 20, 2026"
    assert DateHelpers.format_number(wedding) == "06.20.2026"
    assert DateHelpers.format_number(date(2027, 1, 5)) == "01.05.2027"
    assert DateHelpers.format_standard(None) is None


def test_days_remaining_rounds_up():
    now = datetime(2026, 6, 1, 12, 0)
    assert DateHelpers.days_remaining(datetime(2026, 6, 20), now=now) == 19
    assert DateHelpers.days_remaining(datetime(2026, 6, 1, 13, 0), now=now) == 1
    assert DateHelpers.days_remaining(None, now=now) == -1


def test_is_past_day():
    today = date(2026, 6, 1)
    assert DateHelpers.is_past_day(datetime(2026, 5, 31, 23, 59), today=today)
    assert not DateHelpers.is_past_day(datetime(2026, 6, 1, 0, 0), today=today)


def test_wedding_date_info_without_date():
    assert DateHelpers.wedding_date_info(None) == {
        "date": {"standard_format": None, "number_format": None},
        "days_remaining": -1,
    }
