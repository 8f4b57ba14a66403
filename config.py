#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
App Configurations
"""
# ========================================================
# IMPORTS
# ========================================================
import os
from pathlib import Path

# ========================================================
# GLOBALS
# ========================================================
VERSION = "1.0.0"
APP_NAME = "King Tire Shop & Auto Services - Inventory"

BASE_DIR = Path(__file__).resolve().parent

# Managed backend (Supabase). Both must be set to use it.
SUPABASE_URL = os.environ.get("SUPABASE_URL", "").rstrip("/")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")
TIRES_TABLE = "tires"
IMAGE_BUCKET = "tire-images"

# Self-hosted fallback (SQLAlchemy + local upload dir)
DB_PATH = str(BASE_DIR / "db/king_tire.db")
DATABASE_URL = os.environ.get("KTI_DATABASE_URL", f"sqlite:///{DB_PATH}")
UPLOAD_DIR = os.environ.get("KTI_UPLOAD_DIR", str(BASE_DIR / "uploads"))

# 10 MB per image
MAX_IMAGE_BYTES = 10 * 1024 * 1024

# Set Production via ENV!
SECRET_KEY = os.environ.get("KTI_SECRET_KEY", "change-me-please")
HOST = "0.0.0.0"
PORT = int(os.environ.get("KTI_PORT", "5000"))
LOG_LEVEL = os.environ.get("KTI_LOG_LEVEL", "INFO")
