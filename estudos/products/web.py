"""HTTP handlers for creating and listing products."""

from __future__ import annotations

import argparse
import json
import math
import sqlite3
from dataclasses import dataclass
from typing import Any

from flask import Flask, Response, request

from estudos.products.repository import SqlProductRepository
from estudos.products.usecase import (
    CreateProductInput,
    CreateProductUseCase,
    ListProductsUseCase,
)


def _parse_input(raw: bytes) -> CreateProductInput:
    """Decode a request body; field names match case-insensitively."""
    try:
        data = json.loads(raw)
    except ValueError as err:
        raise ValueError(f"invalid JSON body: {err}") from None
    dto = CreateProductInput()
    if data is None:
        return dto
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    for key, value in data.items():
        name = key.lower()
        if value is None:
            continue
        if name == "name":
            if not isinstance(value, str):
                raise ValueError("Name: expected a string")
            dto.name = value
        elif name == "price":
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError("Price: expected a number")
            dto.price = float(value)
    return dto


def _number(value: float) -> float | int:
    if math.isfinite(value) and value == int(value) and abs(value) < 1e21:
        return int(value)
    return value


def _to_json(output: Any) -> dict[str, Any]:
    return {"ID": output.id, "Name": output.name, "Price": _number(output.price)}


def _encode(payload: Any, status: int) -> Response:
    body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False) + "\n"
    return Response(body, status=status, content_type="application/json")


@dataclass
class _Handlers:
    create_use_case: CreateProductUseCase
    list_use_case: ListProductsUseCase

    def create_product(self) -> Response:
        try:
            dto = _parse_input(request.get_data())
        except ValueError:
            return Response(status=400)
        try:
            output = self.create_use_case.execute(dto)
        except Exception:
            return Response(status=500)
        return _encode(_to_json(output), 201)

    def list_products(self) -> Response:
        try:
            outputs = self.list_use_case.execute()
        except Exception:
            return Response(status=500)
        # An empty listing is encoded as null.
        payload = [_to_json(o) for o in outputs] or None
        return _encode(payload, 200)


def create_app(create_use_case: CreateProductUseCase,
               list_use_case: ListProductsUseCase) -> Flask:
    """Build the application serving the product use cases."""
    handlers = _Handlers(create_use_case, list_use_case)
    app = Flask(__name__)
    app.add_url_rule("/products", "create_product", handlers.create_product, methods=["POST"])
    app.add_url_rule("/products", "list_products", handlers.list_products, methods=["GET"])
    return app


def main(argv: list[str] | None = None) -> int:
    """Open the product database and serve the products API."""
    parser = argparse.ArgumentParser(description="Serve the products API.")
    parser.add_argument("--db", default="products.db", help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    connection = sqlite3.connect(args.db, check_same_thread=False)
    try:
        connection.execute(
            "CREATE TABLE IF NOT EXISTS products (id TEXT PRIMARY KEY, name TEXT, price REAL)"
        )
        repository = SqlProductRepository(connection)
        app = create_app(CreateProductUseCase(repository), ListProductsUseCase(repository))
        app.run(host=args.host, port=args.port)
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())