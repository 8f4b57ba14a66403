#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Transient user notifications
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
from flask import flash


# ========================================================
# GLOBALS
# ========================================================
logger = logging.getLogger(__name__)


# ========================================================
# CLASSES
# ========================================================
class Notifier:
    """Default notifier: only logs."""

    def success(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.warning(message)


class FlashNotifier(Notifier):
    """Shows messages as Flask flashes (needs a request context)."""

    def success(self, message: str) -> None:
        super().success(message)
        flash(message, "success")

    def error(self, message: str) -> None:
        super().error(message)
        flash(message, "error")
