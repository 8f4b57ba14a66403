#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
CSV export of the in-memory record set
"""
# ========================================================
# IMPORTS
# ========================================================
import csv
import io
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.entities import TireRecord, RECORD_FIELDS, format_number


# ========================================================
# GLOBALS
# ========================================================
EXPORT_COLUMNS = list(RECORD_FIELDS)
EXPORT_PREFIX = "king-tire-inventory"
CSV_MIMETYPE = "text/csv; charset=utf-8"


# ========================================================
# FUNCTIONS
# ========================================================
def cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float, Decimal)) and \
            not isinstance(value, bool):
        return format_number(value)
    return str(value)


def export_rows(records: Iterable[TireRecord]) -> list[list[str]]:
    """Header plus one row per record, in the given order."""
    rows = [list(EXPORT_COLUMNS)]
    for r in records:
        rows.append([cell(getattr(r, c)) for c in EXPORT_COLUMNS])
    return rows


def to_csv(records: Iterable[TireRecord]) -> str:
    """
    Every field quoted, quotes doubled, rows joined by "\\n" without a
    trailing line break.
    """
    buf = io.StringIO()
    w = csv.writer(buf, quoting=csv.QUOTE_ALL, doublequote=True,
                   lineterminator="\n")
    w.writerows(export_rows(records))
    return buf.getvalue().removesuffix("\n")


def export_filename(ext: str = "csv", now: datetime | None = None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    ts = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    ts = ts.replace("+00:00", "Z")
    return f"{EXPORT_PREFIX}-{ts}.{ext}"
