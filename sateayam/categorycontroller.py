"""Pages for listing, adding, editing and deleting categories."""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, redirect, render_template, request
from pymongo.errors import PyMongoError

from sateayam.categorymodel import CategoryStore, parse_object_id
from sateayam.entities import Category

log = logging.getLogger(__name__)


def _error(message: str, status: int) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def _form_value(name: str) -> str:
    if name in request.form:
        return request.form[name]
    return request.args.get(name, "")


def _detail(categories: CategoryStore, category_id) -> Category | None:
    try:
        return categories.detail(category_id)
    except PyMongoError as exc:
        log.warning("Failed to read category %s: %s", category_id, exc)
        return None


def create_blueprint(categories: CategoryStore) -> Blueprint:
    """Build the category routes on top of a category store."""
    blueprint = Blueprint("categories", __name__)

    @blueprint.route("/categories")
    def index():
        try:
            items = categories.all()
        except PyMongoError:
            return _error("Gagal mengambil data kategori", 500)
        deleted = request.args.get("deleted", "")
        try:
            template = current_app.jinja_env.get_template("category/index.html")
        except Exception:
            return _error("Template error", 500)
        return render_template(template, categories=items, deleted=deleted)

    @blueprint.route("/categories/about")
    def about_us():
        return Response("Ini adalah halaman About Us", mimetype="text/plain")

    @blueprint.route("/categories/add", methods=["GET", "POST"])
    def add():
        if request.method == "GET":
            try:
                template = current_app.jinja_env.get_template("category/create.html")
            except Exception as exc:
                return _error(f"Template error: {exc}", 500)
            return render_template(template)

        category = Category(name=_form_value("name"))
        try:
            categories.create(category)
        except PyMongoError as exc:
            log.warning("Failed to create category: %s", exc)
            return render_template(
                "category/create.html", Error="Gagal menyimpan data kategori"
            )
        return redirect("/categories", code=303)

    @blueprint.route("/categories/edit", methods=["GET", "POST"])
    def edit():
        if request.method == "GET":
            try:
                template = current_app.jinja_env.get_template("category/edit.html")
            except Exception as exc:
                return _error(f"Template error: {exc}", 500)
            try:
                category_id = parse_object_id(request.args.get("id", ""))
            except ValueError as exc:
                return _error(f"ID tidak valid: {exc}", 400)
            category = _detail(categories, category_id)
            if category is None:
                return _error("Data tidak ditemukan", 404)
            return render_template(template, category=category)

        try:
            category_id = parse_object_id(_form_value("id"))
        except ValueError as exc:
            return _error(f"ID tidak valid: {exc}", 400)
        category = _detail(categories, category_id)
        if category is None:
            return _error("Data tidak ditemukan", 404)
        category.name = _form_value("name")
        try:
            categories.update(category_id, category)
        except PyMongoError as exc:
            log.warning("Failed to update category %s: %s", category_id, exc)
            return _error("Gagal menyimpan perubahan", 500)
        return redirect("/categories", code=303)

    @blueprint.route("/categories/delete", methods=["GET", "POST"])
    def delete():
        try:
            category_id = parse_object_id(request.args.get("id", ""))
        except ValueError as exc:
            return _error(f"ID tidak valid: {exc}", 400)
        try:
            categories.delete(category_id)
        except PyMongoError as exc:
            log.warning("Failed to delete category %s: %s", category_id, exc)
            return _error("Gagal menghapus data kategori", 500)
        return redirect("/categories?deleted=success", code=303)

    return blueprint