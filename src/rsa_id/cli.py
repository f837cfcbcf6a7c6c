from __future__ import annotations
import csv, json
import logging
from datetime import date
from pathlib import Path
from typing import List
import typer

from rsa_id.config import ParseOptions
from rsa_id.dob import today_in_sast
from rsa_id.report import report_for_numbers, scan_file
from rsa_id.util.luhn import check_digit

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _today(value: str | None) -> date:
    if not value:
        return today_in_sast()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Подробный лог (DEBUG)"),
):
    """Разбор и проверка южноафриканских номеров ID."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command("parse")
def cmd_parse(
    numbers: List[str] = typer.Argument(..., help="Один или несколько 13-значных номеров"),
    today: str | None = typer.Option(None, "--today", help="Дата отсчёта YYYY-MM-DD (по умолчанию сегодня по SAST)"),
    strict: bool = typer.Option(False, "--strict", help="Требовать 8 в 12-й позиции"),
    as_json: bool = typer.Option(False, "--json", help="Вывести JSON-отчёт"),
):
    """Разобрать номера: дата рождения, пол, гражданство. Код возврата 1, если есть невалидные."""
    doc = report_for_numbers(numbers, _today(today), ParseOptions().with_enforcement(strict))
    if as_json:
        typer.echo(json.dumps(doc, ensure_ascii=False, indent=2))
    else:
        for it in doc["items"]:
            ident = it["identity"]
            if ident:
                typer.echo(f"{it['input']}: valid dob={ident['date_of_birth']} sex={ident['sex']} citizenship={ident['citizenship']}")
            else:
                detail = ", ".join(f"{k}={v}" for k, v in (it["error_detail"] or {}).items())
                typer.echo(f"{it['input']}: invalid ({it['error']}{': ' + detail if detail else ''})")
    if doc["counts"]["invalid"]:
        raise typer.Exit(code=1)


@app.command("scan")
def cmd_scan(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    out: Path = typer.Option(Path("report.json"), "--out", "-o"),
    preview: Path | None = typer.Option(None, "--preview", "-p"),
    encoding: str = typer.Option("utf-8", "--encoding"),
    today: str | None = typer.Option(None, "--today"),
    strict: bool = typer.Option(False, "--strict"),
):
    """Найти номера в текстовом файле и сохранить отчёт (JSON). CSV-превью опционально."""
    doc = scan_file(input_path, out, _today(today), ParseOptions().with_enforcement(strict), encoding=encoding)
    if preview:
        preview.parent.mkdir(parents=True, exist_ok=True)
        with preview.open("w", encoding="utf-8", newline="") as f:
            w = csv.writer(f, delimiter=";")
            w.writerow(["start","end","text","valid","error","date_of_birth","sex","citizenship"])
            for it in doc["items"]:
                ident = it["identity"] or {}
                w.writerow([
                    it["start"], it["end"], it["input"],
                    "true" if it["valid"] else "false",
                    it["error"] or "",
                    ident.get("date_of_birth", ""), ident.get("sex", ""), ident.get("citizenship", ""),
                ])
    typer.echo(f"written: {out}")
    typer.echo(f"found: {doc['counts']['total']} (valid {doc['counts']['valid']}, invalid {doc['counts']['invalid']})")
    if preview:
        typer.echo(f"preview: {preview}")


@app.command("check-digit")
def cmd_check_digit(
    stem: str = typer.Argument(..., help="Первые 12 цифр номера"),
):
    """Дописать контрольную цифру к 12-значной основе."""
    try:
        digit = check_digit(stem)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="STEM")
    typer.echo(stem + digit)


if __name__ == "__main__":
    app()
