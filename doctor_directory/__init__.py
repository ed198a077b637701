from __future__ import annotations

import re
from typing import Any

from flask import Flask

from .records import RecordStore, get_record_store
from .views import directory_bp


def create_app(record_store: RecordStore | None = None, config: dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__)

    app.config.from_object("doctor_directory.config.Config")
    if config:
        app.config.update(config)

    if record_store is None:
        record_store = get_record_store(app.config["DATA_SOURCE_URL"], app.config["FETCH_TIMEOUT"])
        if app.config["LOAD_ON_STARTUP"]:
            record_store.load()
    app.extensions["doctor_directory.records"] = record_store

    app.register_blueprint(directory_bp, url_prefix="/directory")

    @app.template_filter("currency")
    def _currency(value):
        # Fee as stored: 500 -> ₹500, 1500.5 -> ₹1500.5, 500.0 -> ₹500
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return f"₹{value}"

    @app.template_filter("join_specialties")
    def _join_specialties(values):
        if not values:
            return ""
        return ", ".join(str(v) for v in values)

    @app.template_filter("testid")
    def _testid(value):
        # "Dietitian/Nutritionist" -> "Dietitian-Nutritionist"
        return re.sub(r"\s", "-", str(value).replace("/", "-"))

    return app
