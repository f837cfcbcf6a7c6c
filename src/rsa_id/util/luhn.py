"""ID number structure and checksum (Luhn).

Алгоритм контрольной суммы:
- Идём справа налево (с 13-й цифры к 1-й), флаг «удвоить» начинается с False.
- Если флаг поднят, цифра удваивается; результат > 9 уменьшаем на 9.
- Флаг переключается на каждом шаге.
- Номер валиден, если сумма делится на 10.

Порядок проверок фиксирован: длина → только цифры ASCII → (опц.) 12-я цифра
равна 8 → контрольная сумма.

Примеры (doctest):
>>> is_valid_id("9506245120081")
True
>>> is_valid_id("9506245120082")
False
>>> is_valid_id("9506245120008"), is_valid_id("9506245120008", enforce_decommissioned=True)
(True, False)
>>> check_digit("950624512008")
'1'
"""
from __future__ import annotations

import logging
import re

from rsa_id.errors import (
    ChecksumMismatch,
    DecommissionedField,
    NotNumeric,
    ValidationError,
    WrongLength,
)

logger = logging.getLogger(__name__)

ID_LENGTH = 13
DECOMMISSIONED_POS = 11
DECOMMISSIONED_DIGIT = 8

# \d матчит и не-ASCII цифры, поэтому явный класс
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def luhn_sum(digits: str) -> int:
    """Взвешенная сумма по Luhn: самая правая цифра не удваивается."""
    total = 0
    double = False
    for ch in reversed(digits):
        d = int(ch)
        if double:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        double = not double
    return total


def validate(raw: str, *, enforce_decommissioned: bool = False) -> None:
    """Проверить структуру и контрольную сумму. Бросает ValidationError-наследника."""
    if not isinstance(raw, str):
        raise TypeError(f"Expected str, got {type(raw).__name__}")

    if len(raw) != ID_LENGTH:
        logger.debug(f"validate rejected wrong length: {len(raw)} chars")
        raise WrongLength(len(raw))

    m = _NON_DIGIT_RE.search(raw)
    if m:
        logger.debug(f"validate rejected non-digit at position {m.start()}")
        raise NotNumeric(m.start())

    if enforce_decommissioned:
        digit = int(raw[DECOMMISSIONED_POS])
        if digit != DECOMMISSIONED_DIGIT:
            logger.debug(f"validate rejected decommissioned digit: {digit}")
            raise DecommissionedField(digit)

    total = luhn_sum(raw)
    if total % 10 != 0:
        logger.debug(f"validate checksum mismatch: sum={total}")
        raise ChecksumMismatch(total)


def is_valid_id(raw: str, *, enforce_decommissioned: bool = False) -> bool:
    try:
        validate(raw, enforce_decommissioned=enforce_decommissioned)
    except (TypeError, ValidationError):
        return False
    return True


def check_digit(stem: str) -> str:
    """Контрольная цифра для первых 12 цифр номера.

    Удобно для генерации тестовых номеров.
    """
    if len(stem) != ID_LENGTH - 1 or _NON_DIGIT_RE.search(stem):
        raise ValueError("Must provide exactly 12 digits")
    # дописываем 0 на место контрольной цифры, чтобы чётность удвоения совпала
    total = luhn_sum(stem + "0")
    return str((10 - total % 10) % 10)
