#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Error taxonomy for inventory actions
"""


# ========================================================
# CLASSES
# ========================================================
class InventoryError(Exception):
    """
    Base class for all non-fatal inventory errors. The message is shown
    to the user as-is.
    """
    prefix = "Inventory action failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.prefix
        super().__init__(self.message)

    @classmethod
    def wrap(cls, exc: BaseException) -> "InventoryError":
        """Build an error from a backend exception, keeping its text."""
        detail = getattr(exc, "message", None) or str(exc)
        if not detail:
            detail = exc.__class__.__name__
        return cls(f"{cls.prefix}: {detail}")


class FetchError(InventoryError):
    prefix = "Failed to load tires"


class SaveError(InventoryError):
    prefix = "Save failed"


class DeleteError(InventoryError):
    prefix = "Delete failed"


class UploadError(InventoryError):
    prefix = "Image upload failed"


class ActionBusyError(InventoryError):
    prefix = "Action already in progress"
