"""Use cases for creating and listing products."""

from __future__ import annotations

from dataclasses import dataclass

from estudos.products.entity import Product, ProductRepository


@dataclass
class CreateProductInput:
    """Data needed to create a product."""

    name: str = ""
    price: float = 0.0


@dataclass
class CreateProductOutput:
    """The product that was created."""

    id: str
    name: str
    price: float


@dataclass
class ListProductsOutput:
    """One product in a listing."""

    id: str
    name: str
    price: float


class CreateProductUseCase:
    """Creates a product and stores it in the repository."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    def execute(self, input_dto: CreateProductInput) -> CreateProductOutput:
        """Store a new product; repository errors propagate."""
        product = Product.new(input_dto.name, input_dto.price)
        self.product_repository.create(product)
        return CreateProductOutput(id=product.id, name=product.name, price=product.price)


class ListProductsUseCase:
    """Lists every product in the repository."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    def execute(self) -> list[ListProductsOutput]:
        return [
            ListProductsOutput(id=p.id, name=p.name, price=p.price)
            for p in self.product_repository.find_all()
        ]