#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Cross-process write lock for the self-hosted store
"""
# ========================================================
# IMPORTS
# ========================================================
import os
from filelock import FileLock
from sqlalchemy.engine import make_url


# ========================================================
# CLASSES
# ========================================================
class WriteLock:
    """
    Cross-process file lock to serialize write operations.
    Ensures only one process writes to the database or upload dir at a time.
    """

    def __init__(self, path: str, timeout: float = 10):
        self.path = path
        self._lock = FileLock(path, timeout=timeout)

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._lock.release()


# ========================================================
# FUNCTIONS
# ========================================================
def lock_path_for(database_url: str, upload_dir: str) -> str:
    """Next to the SQLite file when there is one, else in the upload dir."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and \
            url.database not in (None, "", ":memory:"):
        return url.database + ".lock"
    return os.path.join(upload_dir, ".write.lock")
