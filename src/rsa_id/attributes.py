"""Пол и гражданство: табличные значения по отдельным цифрам номера.

- 7-я цифра (индекс 6): 0..4 женский, 5..9 мужской.
- 11-я цифра (индекс 10): 0 гражданин, 1 постоянный резидент, 2 беженец.

>>> decode_sex("9506245120081"), decode_citizenship("9901019999283")
(<Sex.MALE: 'male'>, <Citizenship.REFUGEE: 'refugee'>)
"""
from __future__ import annotations

from enum import Enum
from typing import Dict

SEX_POS = 6
CITIZENSHIP_POS = 10


class Sex(str, Enum):
    UNKNOWN = "unknown"
    MALE = "male"
    FEMALE = "female"


class Citizenship(str, Enum):
    UNKNOWN = "unknown"
    CITIZEN = "citizen"
    PERMANENT_RESIDENT = "permanent_resident"
    REFUGEE = "refugee"


_CITIZENSHIP_CODES: Dict[str, Citizenship] = {
    "0": Citizenship.CITIZEN,
    "1": Citizenship.PERMANENT_RESIDENT,
    "2": Citizenship.REFUGEE,
}


def decode_sex(raw: str) -> Sex:
    d = int(raw[SEX_POS])
    if d <= 4:
        return Sex.FEMALE
    if d <= 9:
        return Sex.MALE
    return Sex.UNKNOWN


def decode_citizenship(raw: str) -> Citizenship:
    return _CITIZENSHIP_CODES.get(raw[CITIZENSHIP_POS], Citizenship.UNKNOWN)
