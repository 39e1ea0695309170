"""The shop's home page."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, render_template
from pymongo.errors import PyMongoError

from sateayam.productmodel import ProductStore

log = logging.getLogger(__name__)


def create_blueprint(products: ProductStore) -> Blueprint:
    """Build the home page route, which also answers every otherwise unrouted path."""
    blueprint = Blueprint("home", __name__)

    @blueprint.route("/", defaults={"path": ""})
    @blueprint.route("/<path:path>")
    def welcome(path: str):
        template = current_app.jinja_env.get_template("home/index.html")
        try:
            items = products.all()
        except PyMongoError as exc:
            log.warning("Failed to read products: %s", exc)
            items = []
        return render_template(template, Products=items)

    return blueprint