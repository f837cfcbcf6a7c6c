"""Разбор номера целиком: проверка → дата рождения → пол/гражданство.

Первая же ошибка пробрасывается как есть, частичного результата не бывает.

Примеры (doctest):
>>> from datetime import date
>>> ident = parse("9506245120081", date(2020, 6, 20))
>>> ident.date_of_birth, ident.sex.value, ident.citizenship.value, ident.is_citizen
(datetime.date(1995, 6, 24), 'male', 'citizen', True)
>>> str(ident)
'9506245120081'
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional

from rsa_id.attributes import Citizenship, Sex, decode_citizenship, decode_sex
from rsa_id.config import DEFAULT_OPTIONS, ParseOptions
from rsa_id.dob import birth_datetime, resolve_date_of_birth
from rsa_id.util.luhn import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentityNumber:
    raw: str
    date_of_birth: date
    sex: Sex
    citizenship: Citizenship

    def __post_init__(self) -> None:
        # экземпляр с датой рождения бывает только у структурно валидного номера
        validate(self.raw)

    @property
    def is_citizen(self) -> bool:
        return self.citizenship is Citizenship.CITIZEN

    @property
    def born_at(self) -> datetime:
        return birth_datetime(self.date_of_birth)

    def to_dict(self) -> Dict[str, object]:
        return {
            "raw": self.raw,
            "date_of_birth": self.date_of_birth.isoformat(),
            "sex": self.sex.value,
            "citizenship": self.citizenship.value,
            "is_citizen": self.is_citizen,
        }

    def __str__(self) -> str:
        return self.raw


def parse(raw: str, today: date, options: Optional[ParseOptions] = None) -> IdentityNumber:
    """Разобрать номер относительно даты ``today``.

    Бросает ValidationError (структура/контрольная сумма) или DateError (дата).
    """
    opts = options or DEFAULT_OPTIONS
    validate(raw, enforce_decommissioned=opts.enforce_decommissioned)
    dob = resolve_date_of_birth(raw, today, eligibility_age=opts.eligibility_age)
    ident = IdentityNumber(
        raw=raw,
        date_of_birth=dob,
        sex=decode_sex(raw),
        citizenship=decode_citizenship(raw),
    )
    logger.debug(f"parsed id: dob={dob.isoformat()} sex={ident.sex.value} citizenship={ident.citizenship.value}")
    return ident
