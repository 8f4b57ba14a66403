#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Excel export of the in-memory record set
"""
# ========================================================
# IMPORTS
# ========================================================
import io
from typing import List
import pandas as pd
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.csv_export import EXPORT_COLUMNS
from kti.entities import TireRecord


# ========================================================
# GLOBALS
# ========================================================
XLSX_MIMETYPE = ("application/"
                 "vnd.openxmlformats-officedocument.spreadsheetml.sheet")


# ========================================================
# FUNCTIONS
# ========================================================
def records_frame(records: List[TireRecord]) -> pd.DataFrame:
    """Export columns as a DataFrame; price as float, quantity as int."""
    return pd.DataFrame([{
        "sku": r.sku,
        "brand": r.brand,
        "model": r.model,
        "size": r.size,
        "ply": r.ply,
        "price": float(r.price),
        "condition": r.condition,
        "quantity": int(r.quantity),
        "notes": r.notes,
        "image_path": r.image_path or "",
    } for r in records], columns=EXPORT_COLUMNS)


def export_excel(records: List[TireRecord]) -> bytes:
    """Write the records to an .xlsx workbook and return its bytes."""
    buf = io.BytesIO()
    records_frame(records).to_excel(buf, index=False, sheet_name="tires")
    return buf.getvalue()
