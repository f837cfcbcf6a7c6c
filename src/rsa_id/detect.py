"""Поиск номеров ID в произвольном тексте.

Поддерживаем:
- компактную запись из 13 цифр: 9506245120081
- группировку YYMMDD SSSS CAZ через пробел или дефис: 950624 5120 081, 950624-5120-081

Совпадение не должно примыкать к другим цифрам. Каждое вхождение разбирается
через ``parse``; невалидные тоже отдаются, с видом ошибки.

Примеры (doctest):
>>> from datetime import date
>>> spans = list(iter_id_spans("ID: 950624 5120 081, старый 9506245120082.", date(2020, 6, 20)))
>>> [(s.digits, s.is_valid) for s in spans]
[('9506245120081', True), ('9506245120082', False)]
>>> spans[1].error.value
'checksum_mismatch'
>>> normalize_id("номер 950624-5120-081")
'9506245120081'
"""
from __future__ import annotations

import logging
import re
from datetime import date
from typing import Iterator, NamedTuple, Optional

from rsa_id.config import ParseOptions
from rsa_id.errors import ErrorKind, IdNumberError
from rsa_id.identity import IdentityNumber, parse

logger = logging.getLogger(__name__)

ID_RE = re.compile(r"(?<![0-9])([0-9]{6})[ -]?([0-9]{4})[ -]?([0-9]{3})(?![0-9])")


class IdSpan(NamedTuple):
    start: int
    end: int
    raw: str
    digits: str
    is_valid: bool
    error: Optional[ErrorKind]
    identity: Optional[IdentityNumber]


def normalize_id(text: str) -> str | None:
    """Вернуть 13 цифр первого вхождения или None."""
    m = ID_RE.search(text)
    if not m:
        return None
    return "".join(m.groups())


def iter_id_spans(
    text: str,
    today: date,
    options: Optional[ParseOptions] = None,
) -> Iterator[IdSpan]:
    """Итератор по всем вхождениям номеров в тексте."""
    for m in ID_RE.finditer(text):
        digits = "".join(m.groups())
        try:
            ident = parse(digits, today, options)
        except IdNumberError as e:
            logger.debug(f"iter_id_spans: {m.start()}-{m.end()} rejected ({e.kind.value})")
            ident, error = None, e.kind
        else:
            error = None
        yield IdSpan(
            start=m.start(),
            end=m.end(),
            raw=text[m.start() : m.end()],
            digits=digits,
            is_valid=ident is not None,
            error=error,
            identity=ident,
        )
