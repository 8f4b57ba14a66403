#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Data access interface shared by all inventory backends
"""
# ========================================================
# IMPORTS
# ========================================================
import secrets
import string
import time
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import List, Mapping, Optional
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.entities import (TireRecord, RECORD_FIELDS, TEXT_FIELDS,
                          MAX_PRICE, MAX_QUANTITY,
                          coerce_price, coerce_quantity)
from kti.errors import SaveError


# ========================================================
# GLOBALS
# ========================================================
_BASE36 = string.digits + string.ascii_lowercase


# ========================================================
# CLASSES
# ========================================================
class InventoryStore(ABC):
    """
    Record store plus blob store. Every method either succeeds or raises
    the matching InventoryError subclass.
    """

    @abstractmethod
    def list_all(self) -> List[TireRecord]:
        """All records, newest first. Raises FetchError."""

    @abstractmethod
    def create(self, fields: Mapping) -> None:
        """Insert a record. Raises SaveError."""

    @abstractmethod
    def update(self, record_id: str, fields: Mapping) -> None:
        """Overwrite a record by id. Raises SaveError."""

    @abstractmethod
    def remove(self, record_id: str) -> None:
        """Delete a record by id. Raises DeleteError."""

    @abstractmethod
    def upload_image(self, filename: str, data: bytes,
                     content_type: Optional[str] = None) -> str:
        """Store an image under a fresh unique name and return the name.
        Raises UploadError."""

    @abstractmethod
    def remove_image(self, name: str) -> None:
        """Delete a stored image. Raises UploadError."""

    @abstractmethod
    def image_url(self, name: str) -> str:
        """Public read URL of a stored image."""


# ========================================================
# FUNCTIONS
# ========================================================
def _base36(n: int) -> str:
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(_BASE36[r])
    return "".join(reversed(out)) or "0"


def make_blob_name(filename: str, now_ms: int | None = None,
                   suffix: str | None = None) -> str:
    """
    <epoch-ms>-<random base36>.<ext>, ext being the last dot-suffix of
    the original file name.
    """
    base = PurePosixPath(filename.replace("\\", "/")).name or "upload"
    ext = base.rsplit(".", 1)[-1]
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    if suffix is None:
        suffix = _base36(secrets.randbits(52))
    return f"{now_ms}-{suffix}.{ext}"


def prepare_fields(fields: Mapping) -> dict:
    """
    Normalize a payload for writing: unknown keys dropped, text as str,
    price and quantity coerced. Negative numbers and numbers beyond the
    column range are rejected.
    """
    out = {}
    for name in RECORD_FIELDS:
        if name not in fields:
            continue
        value = fields[name]
        if name in TEXT_FIELDS:
            value = "" if value is None else str(value)
        elif name == "price":
            value = coerce_price(value)
            if value < 0:
                raise SaveError("Save failed: price must not be negative")
            if value > MAX_PRICE:
                raise SaveError("Save failed: price is too large")
        elif name == "quantity":
            value = coerce_quantity(value)
            if value < 0:
                raise SaveError("Save failed: quantity must not be negative")
            if value > MAX_QUANTITY:
                raise SaveError("Save failed: quantity is too large")
        elif name == "image_path":
            value = value or None
        out[name] = value
    return out
