#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Logging configuration
"""
# ========================================================
# IMPORTS
# ========================================================
import logging


# ========================================================
# GLOBALS
# ========================================================
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ========================================================
# FUNCTIONS
# ========================================================
def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # werkzeug logs every request at INFO
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
