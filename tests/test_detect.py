from datetime import date

from rsa_id.config import ParseOptions
from rsa_id.detect import iter_id_spans, normalize_id
from rsa_id.errors import ErrorKind

TODAY = date(2020, 6, 20)

def test_compact_and_grouped():
    txt = "Заявитель: 9506245120081; супруга: 950624 4120 082."
    spans = list(iter_id_spans(txt, TODAY))
    assert [s.digits for s in spans] == ["9506245120081", "9506244120082"]
    assert all(s.is_valid for s in spans)
    a, b = spans
    assert txt[a.start:a.end] == a.raw == "9506245120081"
    assert b.raw == "950624 4120 082"
    assert b.identity.date_of_birth == date(1995, 6, 24)
    assert b.error is None

def test_invalid_spans_are_reported():
    txt = "ID 9502305120004 и 9506245120009"
    spans = list(iter_id_spans(txt, TODAY))
    assert [s.error for s in spans] == [ErrorKind.INVALID_CALENDAR_DATE, ErrorKind.CHECKSUM_MISMATCH]
    assert all(s.identity is None and not s.is_valid for s in spans)

def test_not_glued_to_other_digits():
    assert list(iter_id_spans("счёт 95062451200812 и 19506245120081", TODAY)) == []

def test_options_are_passed_through():
    txt = "9506245120008"
    assert next(iter_id_spans(txt, TODAY)).is_valid
    s = next(iter_id_spans(txt, TODAY, ParseOptions.strict()))
    assert s.error is ErrorKind.DECOMMISSIONED_FIELD

def test_normalize():
    assert normalize_id("номер 950624-5120-081") == "9506245120081"
    assert normalize_id("без номера") is None
