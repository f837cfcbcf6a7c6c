from datetime import date, datetime, timedelta, timezone

import pytest

from rsa_id.dob import SAST, birth_datetime, resolve_date_of_birth, today_in_sast
from rsa_id.errors import ErrorKind, InvalidCalendarDate

TODAY = date(2020, 6, 20)

@pytest.mark.parametrize("raw, want", [
    ("9506245120081", date(1995, 6, 24)),      # между 16 и 100 годами
    ("2201014800082", date(1922, 1, 1)),       # 2022 > 2004 → прошлый век
    ("0406205120081", date(2004, 6, 20)),      # ровно 16 сегодня → текущий век
    ("0406215120089", date(1904, 6, 21)),      # 16 исполнится завтра → прошлый век
    ("0002295120089", date(2000, 2, 29)),      # високосный год
])
def test_resolve(raw, want):
    assert resolve_date_of_birth(raw, TODAY) == want

def test_invalid_calendar_date():
    with pytest.raises(InvalidCalendarDate) as exc:
        resolve_date_of_birth("9502305120004", TODAY)
    e = exc.value
    assert e.kind is ErrorKind.INVALID_CALENDAR_DATE
    assert (e.year, e.month, e.day) == (1995, 2, 30)

def test_no_normalisation_of_non_leap_day():
    with pytest.raises(InvalidCalendarDate) as exc:
        resolve_date_of_birth("0102295120087", TODAY)
    assert exc.value.detail() == {"year": 2001, "month": 2, "day": 29}

@pytest.mark.parametrize("raw", ["9513015120081", "9500015120081", "9506005120081"])
def test_impossible_month_or_day(raw):
    with pytest.raises(InvalidCalendarDate):
        resolve_date_of_birth(raw, TODAY)

def test_century_choice_depends_only_on_today():
    a = resolve_date_of_birth("1001015120081", date(2030, 1, 1))
    b = resolve_date_of_birth("1001015120081", date(2030, 1, 1))
    assert a == b == date(2010, 1, 1)
    # годом раньше тому же человеку ещё нет 16
    assert resolve_date_of_birth("1001015120081", date(2025, 1, 1)) == date(1910, 1, 1)

def test_eligibility_age_override():
    # при пороге 0 лет 2020-01-01 остаётся в текущем веке
    assert resolve_date_of_birth("2001015120081", TODAY, eligibility_age=0) == date(2020, 1, 1)
    assert resolve_date_of_birth("2001015120081", TODAY) == date(1920, 1, 1)

def test_today_too_early_to_roll_back():
    # год 50: 2095 → 1995 невозможно, откат даёт отрицательный год
    with pytest.raises(ValueError) as exc:
        resolve_date_of_birth("9506245120081", date(50, 6, 20))
    assert not isinstance(exc.value, InvalidCalendarDate)
    # без отката ранний today работает
    assert resolve_date_of_birth("0101015120081", date(50, 6, 20)) == date(1, 1, 1)

def test_birth_datetime_fixed_offset():
    dt = birth_datetime(date(1922, 1, 1))
    assert dt.utcoffset() == timedelta(hours=2)
    assert dt.tzname() == "SAST"
    assert dt.isoformat() == "1922-01-01T00:00:00+02:00"

def test_today_in_sast_crosses_midnight():
    # 23:30 UTC, в SAST уже следующий день
    now = datetime(2020, 6, 19, 23, 30, tzinfo=timezone.utc)
    assert today_in_sast(now) == date(2020, 6, 20)
    assert SAST.utcoffset(None) == timedelta(hours=2)
