"""HTTP API for job openings."""

from __future__ import annotations

import argparse
import sqlite3
from typing import Any

from flask import Blueprint, Flask, jsonify, request

from estudos.opportunities.database import (
    DEFAULT_DB_PATH,
    OpeningNotFound,
    OpeningStore,
    initialize_sqlite,
)
from estudos.opportunities.logger import get_logger
from estudos.opportunities.requests import (
    CreateOpeningRequest,
    UpdateOpeningRequest,
    ValidationError,
    param_is_required,
)


def _send_error(code: int, message: str):
    return jsonify({"message": message, "errorCode": code}), code


def _send_success(operation: str, data: Any):
    return jsonify({
        "message": f"operation from handler: {operation} sucessfull",
        "data": data,
    }), 200


def _missing_id():
    return _send_error(400, str(param_is_required("id", "queryParameter")))


def create_app(store: OpeningStore) -> Flask:
    """Build the application serving openings from ``store``."""
    app = Flask(__name__)
    logger = get_logger("handler")
    api = Blueprint("openings", __name__, url_prefix="/api/v1")

    @api.get("/opening")
    def show_opening():
        opening_id = request.args.get("id", "")
        if not opening_id:
            return _missing_id()
        try:
            opening = store.first(opening_id)
        except (OpeningNotFound, sqlite3.Error):
            return _send_error(404, "opening not found")
        return _send_success("show-opening", opening.to_dict())

    @api.post("/opening")
    def create_opening():
        try:
            opening = CreateOpeningRequest.from_json(request.get_json(silent=True)).to_opening()
        except ValidationError as err:
            logger.errorf("validation error: %v", str(err))
            return _send_error(400, str(err))
        try:
            store.create(opening)
        except sqlite3.Error as err:
            logger.errorf("error creating opening: %v", str(err))
            return _send_error(500, "error creating opening on database")
        return _send_success("createOpening", opening.to_dict())

    @api.delete("/opening")
    def delete_opening():
        opening_id = request.args.get("id", "")
        if not opening_id:
            return _missing_id()
        try:
            opening = store.first(opening_id)
        except (OpeningNotFound, sqlite3.Error):
            return _send_error(404, f"opening with id: {opening_id} not found")
        try:
            store.delete(opening)
        except sqlite3.Error:
            return _send_error(500, f"error deleting opening with id: {opening_id}")
        return _send_success("delete-opening", opening.to_dict())

    @api.put("/opening")
    def update_opening():
        try:
            update = UpdateOpeningRequest.from_json(request.get_json(silent=True))
            update.validate()
        except ValidationError as err:
            logger.errorf("validation error: %v", str(err))
            return _send_error(400, str(err))
        opening_id = request.args.get("id", "")
        if not opening_id:
            return _missing_id()
        try:
            opening = store.first(opening_id)
        except (OpeningNotFound, sqlite3.Error):
            return _send_error(404, "opening not found")
        update.apply(opening)
        try:
            store.save(opening)
        except sqlite3.Error as err:
            logger.errorf("error updating opening: %v", str(err))
            return _send_error(500, "error updating opening")
        return _send_success("update-opening", opening.to_dict())

    @api.get("/openings")
    def list_openings():
        try:
            openings = store.find_all()
        except sqlite3.Error:
            return _send_error(500, "error listing openings")
        return _send_success("list-openings", [o.to_dict() for o in openings])

    app.register_blueprint(api)
    return app


def main(argv: list[str] | None = None) -> int:
    """Open the database and serve the openings API."""
    parser = argparse.ArgumentParser(description="Serve the job openings API.")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    logger = get_logger("main")
    try:
        store = initialize_sqlite(args.db)
    except (OSError, sqlite3.Error) as err:
        logger.errorf("config initialization error: %v", f"Error initializing sqlite: {err}")
        return 1
    try:
        create_app(store).run(host=args.host, port=args.port)
    finally:
        store.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())