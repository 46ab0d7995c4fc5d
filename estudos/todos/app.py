"""A small in-memory to-do list served over HTTP."""

from __future__ import annotations

import argparse
import json
import threading
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

from flask import Flask, Response, request


@dataclass
class Todo:
    """One to-do item."""

    id: str = ""
    item: str = ""
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class TodoNotFound(LookupError):
    """No to-do has the requested id."""

    def __init__(self, todo_id: str) -> None:
        super().__init__("todo not found")
        self.todo_id = todo_id


def default_todos() -> list[Todo]:
    """The items the list starts with."""
    return [Todo("1", "Clean room"), Todo("2", "Read book"), Todo("3", "Record video")]


class TodoList:
    """An ordered collection of to-dos."""

    def __init__(self, todos: Iterable[Todo] | None = None) -> None:
        self._todos = list(todos) if todos is not None else default_todos()
        self._lock = threading.Lock()

    def all(self) -> list[Todo]:
        with self._lock:
            return list(self._todos)

    def add(self, todo: Todo) -> Todo:
        with self._lock:
            self._todos.append(todo)
        return todo

    def get(self, todo_id: str) -> Todo:
        with self._lock:
            found = next((t for t in self._todos if t.id == todo_id), None)
        if found is None:
            raise TodoNotFound(todo_id)
        return found

    def toggle(self, todo_id: str) -> Todo:
        """Flip the completed flag of a to-do and return it."""
        todo = self.get(todo_id)
        with self._lock:
            todo.completed = not todo.completed
        return todo


def _parse_todo(data: Any) -> Todo:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    todo = Todo()
    for name, kind in (("id", str), ("item", str), ("completed", bool)):
        value = data.get(name)
        if value is not None:
            if not isinstance(value, kind):
                raise ValueError(f"{name}: wrong type")
            setattr(todo, name, value)
    return todo


def _indented(payload: Any, status: int) -> Response:
    return Response(json.dumps(payload, indent=4, ensure_ascii=False), status=status,
                    content_type="application/json; charset=utf-8")


def create_app(todos: TodoList | None = None) -> Flask:
    """Build the application serving ``todos`` (a fresh default list if None)."""
    items = todos if todos is not None else TodoList()
    app = Flask(__name__)

    @app.errorhandler(TodoNotFound)
    def not_found(_err):
        return _indented({"message": "todo not found"}, 404)

    @app.get("/todos")
    def get_todos():
        return _indented([t.to_dict() for t in items.all()], 200)

    @app.post("/todos")
    def add_todo():
        try:
            todo = _parse_todo(request.get_json(force=True, silent=True))
        except ValueError:
            return Response(status=400)
        return _indented(items.add(todo).to_dict(), 201)

    @app.get("/todos/<todo_id>")
    def get_todo(todo_id: str):
        return _indented(items.get(todo_id).to_dict(), 200)

    @app.patch("/todos/<todo_id>")
    def toggle_todo_status(todo_id: str):
        return _indented(items.toggle(todo_id).to_dict(), 200)

    return app


def main(argv: list[str] | None = None) -> int:
    """Serve the to-do API."""
    parser = argparse.ArgumentParser(description="Serve the to-do list API.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=9090)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())