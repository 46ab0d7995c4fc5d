"""The product entity and the repository interface that stores it."""

from __future__ import annotations

import abc
import uuid
from dataclasses import dataclass


@dataclass
class Product:
    id: str
    name: str
    price: float

    @classmethod
    def new(cls, name: str, price: float) -> "Product":
        """A product with a fresh random identifier."""
        return cls(str(uuid.uuid4()), name, price)


class ProductRepository(abc.ABC):
    @abc.abstractmethod
    def create(self, product: Product) -> None:
        """Store ``product``."""

    @abc.abstractmethod
    def find_all(self) -> list[Product]:
        """Every stored product."""