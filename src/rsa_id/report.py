"""Сводный JSON-отчёт по разобранным номерам, проверяемый по схеме.

Документ:
{"version": "1", "today": "YYYY-MM-DD",
 "counts": {"total", "valid", "invalid"},
 "items": [{input, [start, end], valid, error, error_detail, identity}]}

Для невалидного номера identity = null, error: вид ошибки, error_detail:
её структурные поля (например, {year, month, day} для несуществующей даты).
"""
from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from jsonschema import validate as js_validate

from rsa_id.config import ParseOptions
from rsa_id.detect import iter_id_spans
from rsa_id.errors import IdNumberError
from rsa_id.identity import parse

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schemas" / "report.schema.json"
REPORT_VERSION = "1"


def _read_schema() -> Dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def describe(value: str, today: date, options: Optional[ParseOptions] = None) -> Dict[str, Any]:
    """Один элемент отчёта для строки ``value``."""
    try:
        ident = parse(value, today, options)
    except IdNumberError as e:
        return {
            "input": value,
            "valid": False,
            "error": e.kind.value,
            "error_detail": e.detail() or None,
            "identity": None,
        }
    return {
        "input": value,
        "valid": True,
        "error": None,
        "error_detail": None,
        "identity": ident.to_dict(),
    }


def build_report(items: Iterable[Dict[str, Any]], today: date) -> Dict[str, Any]:
    """Собрать документ из готовых элементов и проверить его по схеме."""
    rows: List[Dict[str, Any]] = list(items)
    valid = sum(1 for r in rows if r["valid"])
    doc = {
        "version": REPORT_VERSION,
        "today": today.isoformat(),
        "counts": {"total": len(rows), "valid": valid, "invalid": len(rows) - valid},
        "items": rows,
    }
    js_validate(instance=doc, schema=_read_schema())
    return doc


def report_for_numbers(
    numbers: Iterable[str],
    today: date,
    options: Optional[ParseOptions] = None,
) -> Dict[str, Any]:
    return build_report((describe(n, today, options) for n in numbers), today)


def report_for_text(text: str, today: date, options: Optional[ParseOptions] = None) -> Dict[str, Any]:
    """Отчёт по всем номерам, найденным в тексте (элементы с координатами)."""
    items: List[Dict[str, Any]] = []
    for s in iter_id_spans(text, today, options):
        item = describe(s.digits, today, options)
        item["input"] = s.raw
        item["start"] = s.start
        item["end"] = s.end
        items.append(item)
    return build_report(items, today)


def scan_file(
    input_path: str | Path,
    out_path: str | Path,
    today: date,
    options: Optional[ParseOptions] = None,
    encoding: str = "utf-8",
) -> Dict[str, Any]:
    """Прочитать текстовый файл, построить отчёт и сохранить его в out_path."""
    in_p = Path(input_path)
    if not in_p.exists():
        raise FileNotFoundError(in_p)
    doc = report_for_text(in_p.read_text(encoding=encoding), today, options)
    out_p = Path(out_path)
    out_p.parent.mkdir(parents=True, exist_ok=True)
    out_p.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info(f"scan_file: {doc['counts']['total']} ids found in {in_p}, report written to {out_p}")
    return doc
