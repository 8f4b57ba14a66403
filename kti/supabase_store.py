#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Managed inventory store: Supabase table "tires" and bucket "tire-images"
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
from typing import List, Mapping, Optional
from supabase import create_client
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.entities import TireRecord, format_number
from kti.errors import FetchError, SaveError, DeleteError, UploadError
from kti.models import utcnow
from kti.store import InventoryStore, make_blob_name, prepare_fields


# ========================================================
# GLOBALS
# ========================================================
logger = logging.getLogger(__name__)
CACHE_CONTROL_SECONDS = "3600"


# ========================================================
# CLASSES
# ========================================================
class SupabaseInventoryStore(InventoryStore):
    """
    Talks to the backend through a supabase client. The client is passed
    in so tests (or callers with their own auth) can provide one.
    """

    def __init__(self, client, base_url: str, table: str = "tires",
                 bucket: str = "tire-images"):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.table = table
        self.bucket = bucket

    @classmethod
    def connect(cls, url: str, key: str, **kwargs):
        return cls(create_client(url, key), url, **kwargs)

    # --------------------------------------------------------
    # Records
    # --------------------------------------------------------
    def list_all(self) -> List[TireRecord]:
        try:
            res = (self.client.table(self.table)
                   .select("*")
                   .order("created_at", desc=True)
                   .execute())
            return [TireRecord.from_row(row) for row in (res.data or [])]
        except Exception as e:
            logger.error("Loading tires from %s failed", self.table,
                         exc_info=True)
            raise FetchError.wrap(e) from e

    def create(self, fields: Mapping) -> None:
        payload = self._payload(fields)
        try:
            self.client.table(self.table).insert(payload).execute()
        except Exception as e:
            logger.error("Inserting tire failed", exc_info=True)
            raise SaveError.wrap(e) from e
        logger.info("Created tire (sku=%r)", payload.get("sku"))

    def update(self, record_id: str, fields: Mapping) -> None:
        payload = self._payload(fields)
        try:
            res = (self.client.table(self.table)
                   .update(payload)
                   .eq("id", record_id)
                   .execute())
        except Exception as e:
            logger.error("Updating tire %s failed", record_id, exc_info=True)
            raise SaveError.wrap(e) from e
        if not res.data:
            raise SaveError(f"Save failed: tire {record_id} not found")
        logger.info("Updated tire %s", record_id)

    def remove(self, record_id: str) -> None:
        try:
            res = (self.client.table(self.table)
                   .delete()
                   .eq("id", record_id)
                   .execute())
        except Exception as e:
            logger.error("Deleting tire %s failed", record_id, exc_info=True)
            raise DeleteError.wrap(e) from e
        if not res.data:
            raise DeleteError(f"Delete failed: tire {record_id} not found")
        logger.info("Deleted tire %s", record_id)

    # --------------------------------------------------------
    # Images
    # --------------------------------------------------------
    def upload_image(self, filename: str, data: bytes,
                     content_type: Optional[str] = None) -> str:
        name = make_blob_name(filename)
        options = {"cache-control": CACHE_CONTROL_SECONDS, "upsert": "false"}
        if content_type:
            options["content-type"] = content_type
        try:
            self.client.storage.from_(self.bucket).upload(
                path=name, file=data, file_options=options)
        except Exception as e:
            logger.error("Uploading image %s failed", name, exc_info=True)
            raise UploadError.wrap(e) from e
        logger.info("Uploaded image %s (%d bytes)", name, len(data))
        return name

    def remove_image(self, name: str) -> None:
        try:
            self.client.storage.from_(self.bucket).remove([name])
        except Exception as e:
            logger.error("Removing image %s failed", name, exc_info=True)
            raise UploadError.wrap(e) from e

    def image_url(self, name: str) -> str:
        return (f"{self.base_url}/storage/v1/object/public/"
                f"{self.bucket}/{name}")

    # --------------------------------------------------------
    # Helpers
    # --------------------------------------------------------
    @staticmethod
    def _payload(fields: Mapping) -> dict:
        payload = prepare_fields(fields)
        if "price" in payload:
            # numeric column, sent as text to keep the exact decimal
            payload["price"] = format_number(payload["price"])
        payload["updated_at"] = utcnow().isoformat()
        return payload
