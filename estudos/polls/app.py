"""HTTP API for creating polls and voting on them."""

from __future__ import annotations

import argparse
import sqlite3
from datetime import datetime, timezone
from typing import Any

from flask import Blueprint, Flask, jsonify, request

from estudos.polls.models import Poll, poll_status
from estudos.polls.storage import DEFAULT_DB_PATH, OptionNotFound, PollNotFound, PollStore

_MIN_OPTIONS = 3
_MAX_OPTIONS = 5


def _error(code: int, message: str):
    return jsonify({"error": message}), code


def _json_body() -> Any:
    data = request.get_json(force=True, silent=True)
    if data is None:
        raise ValueError("request body must be a JSON object")
    return data


def create_app(store: PollStore) -> Flask:
    """Build the application serving polls from ``store``."""
    app = Flask(__name__)
    api = Blueprint("polls", __name__, url_prefix="/api/v1")

    @api.post("/polls")
    def create_poll():
        try:
            poll = Poll.from_dict(_json_body())
        except ValueError as err:
            return _error(400, str(err))
        if not _MIN_OPTIONS <= len(poll.options) <= _MAX_OPTIONS:
            return _error(400, "A poll must have between 3 and 5 options")
        try:
            store.create(poll)
        except sqlite3.Error as err:
            return _error(500, str(err))
        return jsonify(poll.to_dict()), 200

    @api.get("/polls")
    def get_polls():
        polls = store.list_all()
        now = datetime.now(timezone.utc)
        for poll in polls:
            poll.status = poll_status(poll, now).value
        return jsonify([poll.to_dict() for poll in polls]), 200

    @api.get("/polls/<poll_id>")
    def get_poll(poll_id: str):
        try:
            poll = store.get(poll_id)
        except PollNotFound:
            return _error(404, "Poll not found")
        return jsonify(poll.to_dict()), 200

    @api.put("/polls/<poll_id>")
    def update_poll(poll_id: str):
        try:
            poll = store.get(poll_id)
        except PollNotFound:
            return _error(404, "Poll not found")
        # The poll is loaded without its options: only options sent are written back.
        poll.options = []
        try:
            poll.update_from_dict(_json_body())
        except ValueError as err:
            return _error(400, str(err))
        try:
            store.save(poll)
        except sqlite3.Error as err:
            return _error(500, str(err))
        return jsonify(poll.to_dict()), 200

    @api.delete("/polls/<poll_id>")
    def delete_poll(poll_id: str):
        try:
            store.delete(poll_id)
        except PollNotFound:
            return _error(404, "Poll not found")
        return jsonify({"message": "Poll deleted"}), 200

    @api.post("/polls/<poll_id>/options/<option_id>/vote")
    def vote_poll_option(poll_id: str, option_id: str):
        try:
            option = store.vote(poll_id, option_id)
        except OptionNotFound:
            return _error(404, "Option not found")
        return jsonify(option.to_dict()), 200

    app.register_blueprint(api)
    return app


def main(argv: list[str] | None = None) -> int:
    """Open the poll database and serve the polls API."""
    parser = argparse.ArgumentParser(description="Serve the polls API.")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    with PollStore(args.db) as store:
        create_app(store).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())