#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Inventory Manager
=================

Controller between the web views and the inventory store.

Responsibilities:
-----------------
- Keep the fetched record set in memory and refresh it after every write.
- Filter the cached set for the search box and compute the header totals.
- Run saves, deletes and exports as tracked actions and report the
  outcome through the injected notifier.
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
from typing import Callable, List, Optional, Tuple
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.actions import ActionBoard
from kti.csv_export import to_csv, export_filename
from kti.entities import TireRecord
from kti.errors import ActionBusyError, InventoryError
from kti.excel_io import export_excel
from kti.form import TireForm
from kti.notify import Notifier
from kti.store import InventoryStore


# ========================================================
# GLOBALS
# ========================================================
logger = logging.getLogger(__name__)
ConfirmFn = Callable[[TireRecord], bool]
SEARCH_FIELDS = ("brand", "model", "size", "sku")


# ========================================================
# FUNCTIONS
# ========================================================
def filter_records(records: List[TireRecord], query: str) -> List[TireRecord]:
    """
    Case-insensitive substring match on brand, model, size or sku.
    A blank query returns the records unchanged. Order is preserved.
    """
    q = (query or "").strip().lower()
    if not q:
        return list(records)
    return [r for r in records
            if any(q in (getattr(r, f) or "").lower() for f in SEARCH_FIELDS)]


def total_items(records: List[TireRecord]) -> int:
    return sum(int(r.quantity or 0) for r in records)


# ========================================================
# CLASSES
# ========================================================
class InventoryManager:
    """
    Controller layer that manages the inventory screen.

    One instance serves every browser session, so the action trackers are
    shared: while one clerk's save is pending, a second clerk's save gets
    "Action already in progress" and can simply retry. Multi-user
    coordination beyond that is left to the backend.
    """

    def __init__(self, store: InventoryStore,
                 notifier: Optional[Notifier] = None,
                 confirm: Optional[ConfirmFn] = None,
                 max_image_bytes: Optional[int] = None):
        self.store = store
        self.max_image_bytes = max_image_bytes
        self.notifier = notifier or Notifier()
        self.confirm = confirm
        self.records: List[TireRecord] = []
        self.actions = ActionBoard()

    # --------------------------------------------------------
    # List & search
    # --------------------------------------------------------
    def refresh(self) -> bool:
        """
        Reload all records from the store, newest first.

        Returns
        -------
        bool
            False if loading failed; the previous records are kept.
        """
        try:
            with self.actions["fetch"].run():
                self.records = self.store.list_all()
        except ActionBusyError:
            # a load is already running and will update the records
            logger.debug("Skipping refresh, fetch already pending")
            return False
        except InventoryError as e:
            self.notifier.error(e.message)
            return False
        return True

    def search(self, query: str = "") -> List[TireRecord]:
        return filter_records(self.records, query)

    @property
    def total_items(self) -> int:
        """Sum of quantities over all records, not just the filtered ones."""
        return total_items(self.records)

    @property
    def sku_count(self) -> int:
        return len(self.records)

    def find(self, record_id: str) -> Optional[TireRecord]:
        for r in self.records:
            if r.id == record_id:
                return r
        return None

    def image_url(self, record: TireRecord) -> Optional[str]:
        if not record.image_path:
            return None
        return self.store.image_url(record.image_path)

    # --------------------------------------------------------
    # Create / edit
    # --------------------------------------------------------
    def open_form(self, record_id: Optional[str] = None) -> Optional[TireForm]:
        """
        An empty form, or one seeded from the cached record.

        Returns
        -------
        TireForm or None
            None if record_id is not in the cached set.
        """
        form = TireForm(max_image_bytes=self.max_image_bytes)
        if record_id is None:
            form.open_for_create()
            return form
        record = self.find(record_id)
        if record is None:
            return None
        form.open_for_edit(record)
        return form

    def save(self, form: TireForm) -> bool:
        """
        Submit a form. On success the form is closed and the list reloaded;
        on failure the error is shown and the form stays open as it was.
        """
        editing = form.is_editing
        try:
            with self.actions["save"].run():
                form.submit(self.store)
        except InventoryError as e:
            self.notifier.error(e.message)
            return False
        self.notifier.success("Tire updated" if editing else "Tire added")
        self.refresh()
        return True

    # --------------------------------------------------------
    # Delete
    # --------------------------------------------------------
    def delete(self, record_id: str,
               confirm: Optional[ConfirmFn] = None) -> bool:
        """
        Delete a record after the user confirmed it.

        Parameters
        ----------
        record_id : str
            Id of a cached record.
        confirm : callable, optional
            Asked with the record, overrides the injected confirmation.
            Without any confirmation the delete is not issued.
        """
        record = self.find(record_id)
        if record is None:
            self.notifier.error(f"Delete failed: tire {record_id} not found")
            return False
        ask = confirm or self.confirm
        if ask is None or not ask(record):
            return False
        try:
            with self.actions["delete"].run():
                self.store.remove(record_id)
        except InventoryError as e:
            self.notifier.error(e.message)
            return False
        self.notifier.success("Deleted")
        self.refresh()
        return True

    # --------------------------------------------------------
    # Export
    # --------------------------------------------------------
    def export_csv(self) -> Tuple[str, str]:
        """Filename and CSV text of the full cached set, unfiltered."""
        with self.actions["export"].run():
            return export_filename("csv"), to_csv(self.records)

    def export_excel(self) -> Tuple[str, bytes]:
        with self.actions["export"].run():
            return export_filename("xlsx"), export_excel(self.records)
