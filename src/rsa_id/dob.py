"""Дата рождения из первых 6 цифр номера (YYMMDD).

Век неоднозначен, поэтому привязываемся к переданной дате «сегодня»:
- кандидат: текущий век + YY;
- ID выдаётся с 16 лет: если по кандидату человеку ещё нет 16, значит прошлый век.

Дата строится строго: 30 февраля считается ошибкой, а не 2 марта.
Если откат века даёт год < 1 (today раньше 100 г.), это ValueError, а не
InvalidCalendarDate: номер тут ни при чём.

Часы не читаются нигде, кроме ``today_in_sast`` (для CLI). Время рождения
отдаётся в фиксированном смещении UTC+02:00 (SAST, без перехода на летнее время).

Примеры (doctest):
>>> from datetime import date
>>> resolve_date_of_birth("9506245120081", date(2020, 6, 20))
datetime.date(1995, 6, 24)
>>> resolve_date_of_birth("2201014800082", date(2020, 6, 20))
datetime.date(1922, 1, 1)
>>> birth_datetime(date(1995, 6, 24)).isoformat()
'1995-06-24T00:00:00+02:00'
"""
from __future__ import annotations

import logging
from datetime import MINYEAR, date, datetime, time, timedelta, timezone
from typing import Optional, Tuple

from rsa_id.config import ELIGIBILITY_AGE
from rsa_id.errors import InvalidCalendarDate

logger = logging.getLogger(__name__)

SAST = timezone(timedelta(hours=2), "SAST")


def _fields(raw: str) -> Tuple[int, int, int]:
    # validate() уже гарантировал 13 цифр
    return int(raw[0:2]), int(raw[2:4]), int(raw[4:6])


def resolve_date_of_birth(raw: str, today: date, *, eligibility_age: int = ELIGIBILITY_AGE) -> date:
    yy, month, day = _fields(raw)

    century = (today.year // 100) * 100
    year = century + yy

    min_year = today.year - eligibility_age
    if year > min_year or (year == min_year and (month, day) > (today.month, today.day)):
        year -= 100
    if year < MINYEAR:
        # откатывать век некуда: ограничение today, а не ошибка в номере
        raise ValueError(f"today={today.isoformat()} is too early to resolve the century of {yy:02d}")

    try:
        return date(year, month, day)
    except ValueError:
        logger.debug(f"resolve_date_of_birth rejected {year:04d}-{month:02d}-{day:02d}")
        raise InvalidCalendarDate(year, month, day) from None


def birth_datetime(dob: date) -> datetime:
    """Полночь дня рождения в SAST."""
    return datetime.combine(dob, time(0, 0), tzinfo=SAST)


def today_in_sast(now: Optional[datetime] = None) -> date:
    """Текущая дата по SAST. Только для границы приложения (CLI)."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(SAST).date()
