"""Ошибки разбора номера: закрытый набор видов + исключения со структурными полями.

Вызывающий код различает ошибки по классу или по ``kind``, а не по тексту.

Примеры (doctest):
>>> err = InvalidCalendarDate(1995, 2, 30)
>>> err.kind.value, err.detail()
('invalid_calendar_date', {'year': 1995, 'month': 2, 'day': 30})
>>> isinstance(WrongLength(6), ValueError)
True
"""
from __future__ import annotations

from enum import Enum
from typing import Dict


class ErrorKind(str, Enum):
    WRONG_LENGTH = "wrong_length"
    NOT_NUMERIC = "not_numeric"
    DECOMMISSIONED_FIELD = "decommissioned_field"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"


class IdNumberError(ValueError):
    """Базовый класс: номер не удалось разобрать."""

    kind: ErrorKind

    def detail(self) -> Dict[str, int]:
        return {}


class ValidationError(IdNumberError):
    """Нарушена структура номера или контрольная сумма."""


class WrongLength(ValidationError):
    kind = ErrorKind.WRONG_LENGTH

    def __init__(self, length: int) -> None:
        super().__init__(f"id number must be 13 characters, got {length}")
        self.length = length

    def detail(self) -> Dict[str, int]:
        return {"length": self.length}


class NotNumeric(ValidationError):
    kind = ErrorKind.NOT_NUMERIC

    def __init__(self, position: int) -> None:
        super().__init__(f"id number is not numeric (position {position})")
        self.position = position

    def detail(self) -> Dict[str, int]:
        return {"position": self.position}


class DecommissionedField(ValidationError):
    """12-я цифра (бывший код расы) обязана быть 8."""

    kind = ErrorKind.DECOMMISSIONED_FIELD

    def __init__(self, digit: int) -> None:
        super().__init__(f"id number has an invalid decommissioned digit: {digit}")
        self.digit = digit

    def detail(self) -> Dict[str, int]:
        return {"digit": self.digit}


class ChecksumMismatch(ValidationError):
    kind = ErrorKind.CHECKSUM_MISMATCH

    def __init__(self, total: int) -> None:
        super().__init__("id number checksum does not match")
        self.total = total

    def detail(self) -> Dict[str, int]:
        return {"total": self.total}


class DateError(IdNumberError):
    """Дата рождения из номера не является реальной датой."""


class InvalidCalendarDate(DateError):
    kind = ErrorKind.INVALID_CALENDAR_DATE

    def __init__(self, year: int, month: int, day: int) -> None:
        super().__init__(f"cannot parse date of birth: {year:04d}-{month:02d}-{day:02d}")
        self.year = year
        self.month = month
        self.day = day

    def detail(self) -> Dict[str, int]:
        return {"year": self.year, "month": self.month, "day": self.day}
