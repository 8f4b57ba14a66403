#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
All routes attached to app
"""
# ========================================================
# IMPORTS
# ========================================================
from flask import (
    request, redirect, url_for, flash, render_template, abort, Response,
    send_from_directory, current_app
)
from werkzeug.exceptions import RequestEntityTooLarge

# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from kti.csv_export import CSV_MIMETYPE
from kti.entities import Condition
from kti.errors import InventoryError
from kti.excel_io import XLSX_MIMETYPE
from kti.inventory import InventoryManager
from kti.repository import SqlInventoryStore
from kti.utils import validate_csrf, pending_image_from_request


# ========================================================
# FUNCTIONS
# ========================================================
def get_manager() -> InventoryManager:
    return current_app.extensions["kti.manager"]


def render_form(form, status=200):
    return render_template("tire_form.html", form=form,
                           conditions=[c.value for c in Condition],
                           image_url=(get_manager().image_url(form.editing)
                                      if form.editing else None),
                           active="form"), status


def download(body, mimetype, filename):
    return Response(body, mimetype=mimetype, headers={
        "Content-Disposition": f'attachment; filename="{filename}"'})


def find_or_404(manager, rid):
    record = manager.find(rid)
    if record is None:
        # not cached yet (direct link), reload once
        manager.refresh()
        record = manager.find(rid)
    if record is None:
        abort(404, description="Tire not found.")
    return record


# --------------------------------------------------------
# Routes
# --------------------------------------------------------
def register_routes(app):
    @app.route("/")
    def index():
        manager = get_manager()
        manager.refresh()
        q = request.args.get("q", "")
        return render_template("index.html", items=manager.search(q), q=q,
                               manager=manager, active="home")

    @app.route("/tires/grid")
    def tire_grid():
        # live search: filters the cached records, no backend call
        manager = get_manager()
        q = request.args.get("q", "")
        return render_template("_grid.html", items=manager.search(q),
                               manager=manager)

    @app.route("/tires/new", methods=["GET", "POST"])
    def create_tire():
        manager = get_manager()
        form = manager.open_form()
        if request.method == "POST":
            validate_csrf()
            form.update_fields(request.form)
            form.attach_image(pending_image_from_request())
            if manager.save(form):
                return redirect(url_for("index"))
            return render_form(form, status=422)
        return render_form(form)

    @app.route("/tires/<rid>/edit", methods=["GET", "POST"])
    def edit_tire(rid):
        manager = get_manager()
        find_or_404(manager, rid)
        form = manager.open_form(rid)
        if request.method == "POST":
            validate_csrf()
            form.update_fields(request.form)
            form.attach_image(pending_image_from_request())
            if manager.save(form):
                return redirect(url_for("index"))
            return render_form(form, status=422)
        return render_form(form)

    @app.route("/tires/<rid>/delete", methods=["GET"])
    def delete_tire_confirm(rid):
        manager = get_manager()
        t = find_or_404(manager, rid)
        return render_template("delete_confirm.html", t=t,
                               image_url=manager.image_url(t),
                               active="home")

    @app.route("/tires/<rid>/delete", methods=["POST"])
    def delete_tire(rid):
        validate_csrf()
        manager = get_manager()
        find_or_404(manager, rid)
        answer = request.form.get("confirm", "")
        manager.delete(rid, confirm=lambda _t: answer == "yes")
        return redirect(url_for("index"))

    @app.route("/export.csv")
    def export_csv():
        try:
            filename, text = get_manager().export_csv()
        except InventoryError as e:
            flash(e.message, "error")
            return redirect(url_for("index"))
        return download(text, CSV_MIMETYPE, filename)

    @app.route("/export.xlsx")
    def export_xlsx():
        try:
            filename, data = get_manager().export_excel()
        except InventoryError as e:
            flash(e.message, "error")
            return redirect(url_for("index"))
        return download(data, XLSX_MIMETYPE, filename)

    @app.route("/images/<path:name>")
    def image(name):
        store = get_manager().store
        if not isinstance(store, SqlInventoryStore):
            abort(404)
        return send_from_directory(store.upload_dir, name)

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e):
        flash("Image upload failed: file too large", "error")
        return redirect(request.referrer or url_for("index"))

    @app.route("/favicon.ico")
    def favicon():
        return Response(status=204)
