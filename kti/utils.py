#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Utils: light CSRF protection and upload helpers
"""
# ========================================================
# IMPORTS
# ========================================================
import secrets
from flask import session, request, abort
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.form import PendingImage


# ========================================================
# FUNCTIONS
# ========================================================
def get_csrf_token():
    token = session.get("_csrf_token")
    if not token:
        token = secrets.token_urlsafe(16)
        session["_csrf_token"] = token
    return token


def validate_csrf():
    token = session.get("_csrf_token")
    form_token = request.form.get("_csrf_token")
    if not token or not form_token or token != form_token:
        abort(400, description="Invalid CSRF token.")


def pending_image_from_request(field: str = "image") -> PendingImage | None:
    """The uploaded file of the form, or None when nothing was picked."""
    f = request.files.get(field)
    if f is None or not f.filename:
        return None
    data = f.read()
    if not data:
        return None
    return PendingImage(filename=f.filename, data=data,
                        content_type=f.mimetype or None)
