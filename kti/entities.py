#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Entities: the tire record and its value coercion
"""
# ========================================================
# IMPORTS
# ========================================================
from dataclasses import dataclass, fields as dc_fields
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional


# ========================================================
# GLOBALS
# ========================================================
# Writable columns, in export order
RECORD_FIELDS = ("sku", "brand", "model", "size", "ply", "price",
                 "condition", "quantity", "notes", "image_path")
TEXT_FIELDS = ("sku", "brand", "model", "size", "ply", "condition", "notes")
# INTEGER column range and Numeric(10, 2) bound
MAX_QUANTITY = 2**31 - 1
MAX_PRICE = Decimal("99999999.99")


# ========================================================
# CLASSES
# ========================================================
class Condition(str, Enum):
    """Tire conditions offered by the form."""
    NEW = "New"
    USED = "Used"
    REFURBISHED = "Refurbished"


@dataclass
class TireRecord:
    """A stocked tire line as returned by the record store."""
    id: Optional[str]                # Store generated key (None before insert)
    sku: str = ""
    brand: str = ""
    model: str = ""
    size: str = ""                   # e.g. 225/45R17
    ply: str = ""
    price: Decimal = Decimal(0)
    condition: str = Condition.NEW.value
    quantity: int = 1
    notes: str = ""
    image_path: Optional[str] = None  # Blob name in the image bucket
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TireRecord":
        """
        Build a record from a store row. Missing text becomes "", numbers
        may arrive as strings and timestamps as ISO text.
        """
        known = {f.name for f in dc_fields(cls)}
        data = {k: v for k, v in row.items() if k in known}
        for name in TEXT_FIELDS:
            data[name] = "" if row.get(name) is None else str(row[name])
        rid = data.get("id")
        data["id"] = None if rid is None else str(rid)
        data["price"] = coerce_price(row.get("price"))
        data["quantity"] = coerce_quantity(row.get("quantity"))
        data["image_path"] = row.get("image_path") or None
        data["created_at"] = parse_timestamp(row.get("created_at"))
        data["updated_at"] = parse_timestamp(row.get("updated_at"))
        return cls(**data)


# ========================================================
# FUNCTIONS
# ========================================================
def _to_decimal(value) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        d = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            d = Decimal(text)
        except InvalidOperation:
            return None
    if not d.is_finite():
        return None
    return d


def coerce_price(value) -> Decimal:
    """Blank or unparseable prices become 0."""
    d = _to_decimal(value)
    return Decimal(0) if d is None else d


def coerce_quantity(value) -> int:
    """
    Blank or unparseable quantities become 0, fractions are truncated.
    Values past MAX_QUANTITY are clamped to one beyond it (keeping the
    sign) so validation can reject them without building huge ints.
    """
    d = _to_decimal(value)
    if d is None:
        return 0
    if abs(d) > MAX_QUANTITY:
        return MAX_QUANTITY + 1 if d > 0 else -(MAX_QUANTITY + 1)
    return int(d)


def parse_timestamp(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_number(value) -> str:
    """
    Render a number without trailing zeros or exponent, e.g. 49.99, 50.
    """
    d = _to_decimal(value)
    if d is None:
        return "" if value is None else str(value)
    if d == d.to_integral_value():
        return str(int(d))
    return format(d.normalize(), "f")
