#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Flask App Factory
"""
# ========================================================
# IMPORTS
# ========================================================
import logging
from datetime import datetime, timezone
from pathlib import Path
from flask import Flask
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
import config
from kti.db import make_engine, make_session_factory
from kti.inventory import InventoryManager
from kti.locking import lock_path_for
from kti.notify import FlashNotifier
from kti.repository import SqlInventoryStore
from kti.store import InventoryStore
from kti.supabase_store import SupabaseInventoryStore
from kti.utils import get_csrf_token


# --------------------------------------------------------
# GLOBALS
# --------------------------------------------------------
ROOT_DIR = Path(__file__).resolve().parents[1]   # repo root (one level up from kti/)
TEMPLATES_DIR = ROOT_DIR / "templates"
STATIC_DIR = ROOT_DIR / "static"
logger = logging.getLogger(__name__)


# ========================================================
# FUNCTIONS
# ========================================================
def build_store() -> InventoryStore:
    """Supabase when URL and key are configured, local SQL otherwise."""
    if config.SUPABASE_URL and config.SUPABASE_ANON_KEY:
        logger.info("Using Supabase backend at %s", config.SUPABASE_URL)
        return SupabaseInventoryStore.connect(
            config.SUPABASE_URL, config.SUPABASE_ANON_KEY,
            table=config.TIRES_TABLE, bucket=config.IMAGE_BUCKET)

    logger.info("Using local backend %s", config.DATABASE_URL)
    engine = make_engine(config.DATABASE_URL)
    return SqlInventoryStore(
        make_session_factory(engine),
        upload_dir=config.UPLOAD_DIR,
        lock_path=lock_path_for(config.DATABASE_URL, config.UPLOAD_DIR),
    )


def create_app(store: InventoryStore | None = None):
    app = Flask(__name__,
                template_folder=str(TEMPLATES_DIR),
                static_folder=str(STATIC_DIR),
                static_url_path="/static",
                )
    app.secret_key = config.SECRET_KEY
    # transport cap only; the form rejects oversized images itself
    app.config["MAX_CONTENT_LENGTH"] = 2 * config.MAX_IMAGE_BYTES

    if store is None:
        store = build_store()
    manager = InventoryManager(store, notifier=FlashNotifier(),
                               max_image_bytes=config.MAX_IMAGE_BYTES)
    app.extensions["kti.manager"] = manager

    # Jinja globals
    app.jinja_env.globals["csrf_token"] = get_csrf_token
    app.jinja_env.globals["APP_VERSION"] = config.VERSION
    app.jinja_env.globals["APP_NAME"] = config.APP_NAME
    app.jinja_env.globals["now"] = lambda: datetime.now(timezone.utc)

    # Register routes
    from kti.routes import register_routes
    register_routes(app)

    return app
