#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Form / edit state: the draft of one tire plus an optional pending image
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
from dataclasses import dataclass, replace
from typing import Mapping, Optional
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.entities import (TireRecord, Condition, TEXT_FIELDS,
                          coerce_price, coerce_quantity, format_number)
from kti.errors import InventoryError, UploadError
from kti.store import InventoryStore


# ========================================================
# GLOBALS
# ========================================================
logger = logging.getLogger(__name__)
DRAFT_FIELDS = ("sku", "brand", "model", "size", "ply", "price",
                "condition", "quantity", "notes")


# ========================================================
# CLASSES
# ========================================================
@dataclass
class TireDraft:
    """Raw form values, kept as entered until submit."""
    sku: str = ""
    brand: str = ""
    model: str = ""
    size: str = ""
    ply: str = ""
    price: str = ""
    condition: str = Condition.NEW.value
    quantity: str = "1"
    notes: str = ""

    @classmethod
    def from_record(cls, record: TireRecord) -> "TireDraft":
        return cls(
            sku=record.sku or "",
            brand=record.brand or "",
            model=record.model or "",
            size=record.size or "",
            ply=record.ply or "",
            price=format_number(record.price),
            condition=record.condition or Condition.NEW.value,
            quantity=str(record.quantity),
            notes=record.notes or "",
        )


@dataclass(frozen=True)
class PendingImage:
    """An image picked in the form but not uploaded yet."""
    filename: str
    data: bytes
    content_type: Optional[str] = None


class TireForm:
    """
    Create/edit form. submit() uploads the pending image first, then writes
    the record; a failed write removes the freshly uploaded image again.
    """

    def __init__(self, max_image_bytes: int | None = None):
        self.max_image_bytes = max_image_bytes
        self.is_open = False
        self.editing: TireRecord | None = None
        self.draft = TireDraft()
        self.pending_image: PendingImage | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    @property
    def image_path(self) -> str | None:
        """Image reference the record keeps unless a new one is attached."""
        return self.editing.image_path if self.editing else None

    def open_for_create(self) -> None:
        self.reset()
        self.is_open = True

    def open_for_edit(self, record: TireRecord) -> None:
        self.editing = record
        self.draft = TireDraft.from_record(record)
        self.pending_image = None
        self.is_open = True

    def close(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.is_open = False
        self.editing = None
        self.draft = TireDraft()
        self.pending_image = None

    def update_fields(self, values: Mapping) -> None:
        changes = {}
        for name in DRAFT_FIELDS:
            if name in values:
                value = values[name]
                changes[name] = "" if value is None else str(value)
        self.draft = replace(self.draft, **changes)

    def attach_image(self, image: PendingImage | None) -> None:
        if image is not None and not image.data:
            image = None
        self.pending_image = image

    def build_payload(self, image_path: str | None) -> dict:
        d = self.draft
        payload = {name: getattr(d, name) for name in TEXT_FIELDS}
        payload["price"] = coerce_price(d.price)
        payload["quantity"] = coerce_quantity(d.quantity)
        payload["image_path"] = image_path
        return payload

    def submit(self, store: InventoryStore) -> None:
        """
        Run the save. Raises UploadError or SaveError and leaves the form
        open and populated; closes and clears it on success.
        """
        image_path = self.image_path
        uploaded = None
        if self.pending_image is not None:
            img = self.pending_image
            if self.max_image_bytes is not None and \
                    len(img.data) > self.max_image_bytes:
                raise UploadError("Image upload failed: file is too large")
            uploaded = store.upload_image(img.filename, img.data,
                                          img.content_type)
            image_path = uploaded

        payload = self.build_payload(image_path)
        try:
            if self.is_editing:
                store.update(self.editing.id, payload)
            else:
                store.create(payload)
        except InventoryError:
            if uploaded is not None:
                self._discard_upload(store, uploaded)
            raise
        self.close()

    @staticmethod
    def _discard_upload(store: InventoryStore, name: str) -> None:
        logger.warning("Record write failed, removing orphaned image %s",
                       name)
        try:
            store.remove_image(name)
        except UploadError:
            logger.error("Could not remove orphaned image %s", name)
