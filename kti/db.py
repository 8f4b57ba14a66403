#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
DB: engine and session factory for the self-hosted store
"""
# ========================================================
# IMPORTS
# ========================================================
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.models import Base


# ========================================================
# FUNCTIONS
# ========================================================
def is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and \
        url.database in (None, "", ":memory:")


def make_engine(database_url: str):
    """
    Create the engine and the tables. SQLite files get WAL and
    secure_delete, in-memory SQLite shares a single connection.
    """
    url = make_url(database_url)
    kwargs = {"echo": False, "future": True}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(database_url, **kwargs)

    if url.get_backend_name() == "sqlite":
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            try:
                if not is_memory_sqlite(database_url):
                    cursor.execute("PRAGMA journal_mode=WAL;")
                cursor.execute("PRAGMA foreign_keys=ON;")
                cursor.execute("PRAGMA secure_delete=ON;")
            finally:
                cursor.close()

    Base.metadata.create_all(bind=engine)
    return engine


def make_session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False,
                        expire_on_commit=False)
