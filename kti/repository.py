#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Self-hosted inventory store: SQLAlchemy table plus a local upload directory
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
import os
from datetime import timedelta, timezone
from pathlib import Path
from typing import List, Mapping, Optional
from sqlalchemy import func, select
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.entities import TireRecord
from kti.errors import (InventoryError, FetchError, SaveError,
                        DeleteError, UploadError)
from kti.locking import WriteLock
from kti.models import Tire, utcnow
from kti.store import InventoryStore, make_blob_name, prepare_fields


# ========================================================
# GLOBALS
# ========================================================
logger = logging.getLogger(__name__)
_TICK = timedelta(microseconds=1)


# ========================================================
# CLASSES
# ========================================================
class SqlInventoryStore(InventoryStore):
    """Repository for CRUD operations on the tires table."""

    def __init__(self, session_factory, upload_dir: str, lock_path: str,
                 url_prefix: str = "/images"):
        self._session_factory = session_factory
        self.upload_dir = Path(upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self._lock = WriteLock(lock_path)
        self.url_prefix = url_prefix.rstrip("/")

    # --------------------------------------------------------
    # Records
    # --------------------------------------------------------
    def list_all(self) -> List[TireRecord]:
        db = self._session_factory()
        try:
            rows = db.execute(
                select(Tire).order_by(Tire.created_at.desc())
            ).scalars().all()
            return [TireRecord.from_row(r.as_row()) for r in rows]
        except Exception as e:
            logger.error("Listing tires failed", exc_info=True)
            raise FetchError.wrap(e) from e
        finally:
            db.close()

    def create(self, fields: Mapping) -> None:
        payload = prepare_fields(fields)
        with self._lock:
            db = self._session_factory()
            try:
                latest = db.execute(select(func.max(Tire.created_at))).scalar()
                now = _after(latest)
                tire = Tire(**payload, created_at=now, updated_at=now)
                db.add(tire)
                db.commit()
                logger.info("Created tire %s (sku=%r)", tire.id, tire.sku)
            except InventoryError:
                raise
            except Exception as e:
                # driver errors (e.g. OverflowError) bypass SQLAlchemyError
                db.rollback()
                logger.error("Creating tire failed", exc_info=True)
                raise SaveError.wrap(e) from e
            finally:
                db.close()

    def update(self, record_id: str, fields: Mapping) -> None:
        payload = prepare_fields(fields)
        with self._lock:
            db = self._session_factory()
            try:
                tire = db.get(Tire, record_id)
                if tire is None:
                    raise SaveError(f"Save failed: tire {record_id} not found")
                for key, value in payload.items():
                    setattr(tire, key, value)
                tire.updated_at = _after(tire.updated_at)
                db.commit()
                logger.info("Updated tire %s", record_id)
            except InventoryError:
                raise
            except Exception as e:
                # driver errors (e.g. OverflowError) bypass SQLAlchemyError
                db.rollback()
                logger.error("Updating tire %s failed", record_id,
                             exc_info=True)
                raise SaveError.wrap(e) from e
            finally:
                db.close()

    def remove(self, record_id: str) -> None:
        with self._lock:
            db = self._session_factory()
            try:
                tire = db.get(Tire, record_id)
                if tire is None:
                    raise DeleteError(
                        f"Delete failed: tire {record_id} not found")
                db.delete(tire)
                db.commit()
                logger.info("Deleted tire %s", record_id)
            except InventoryError:
                raise
            except Exception as e:
                # driver errors (e.g. OverflowError) bypass SQLAlchemyError
                db.rollback()
                logger.error("Deleting tire %s failed", record_id,
                             exc_info=True)
                raise DeleteError.wrap(e) from e
            finally:
                db.close()

    # --------------------------------------------------------
    # Images
    # --------------------------------------------------------
    def upload_image(self, filename: str, data: bytes,
                     content_type: Optional[str] = None) -> str:
        name = make_blob_name(filename)
        target = self.upload_dir / name
        with self._lock:
            try:
                # "x": never overwrite an existing blob
                with open(target, "xb") as f:
                    f.write(data)
            except OSError as e:
                logger.error("Storing image %s failed", name, exc_info=True)
                raise UploadError.wrap(e) from e
        logger.info("Stored image %s (%d bytes)", name, len(data))
        return name

    def remove_image(self, name: str) -> None:
        with self._lock:
            try:
                os.remove(self.image_file(name))
            except OSError as e:
                logger.error("Removing image %s failed", name, exc_info=True)
                raise UploadError.wrap(e) from e

    def image_url(self, name: str) -> str:
        return f"{self.url_prefix}/{name}"

    def image_file(self, name: str) -> Path:
        """Path of a stored blob; names never leave the upload dir."""
        return self.upload_dir / Path(name).name


# ========================================================
# FUNCTIONS
# ========================================================
def _after(previous):
    """Current UTC time, strictly later than previous."""
    now = utcnow()
    if previous is None:
        return now
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    return now if now > previous else previous + _TICK
