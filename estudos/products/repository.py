"""Product repository backed by a DB-API connection with qmark parameters."""

from __future__ import annotations

from typing import Any

from estudos.products.entity import Product, ProductRepository


class SqlProductRepository(ProductRepository):
    """Stores products in a ``products`` table with id, name and price columns."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def create(self, product: Product) -> None:
        self.connection.execute(
            "INSERT INTO products (id, name, price) VALUES (?,?,?)",
            (product.id, product.name, product.price),
        )
        self.connection.commit()

    def find_all(self) -> list[Product]:
        cursor = self.connection.execute("SELECT id, name, price FROM products")
        try:
            return [Product(id=row[0], name=row[1], price=float(row[2])) for row in cursor]
        finally:
            cursor.close()