import uuid

import pytest

from estudos.products.entity import Product, ProductRepository


def test_new_keeps_name_and_price():
    product = Product.new("Notebook", 1999.9)
    assert product.name == "Notebook"
    assert product.price == 1999.9


def test_new_generates_a_valid_uuid():
    product = Product.new("Mouse", 10.0)
    assert str(uuid.UUID(product.id)) == product.id


def test_new_generates_distinct_ids():
    ids = {Product.new("Item", 1.0).id for _ in range(50)}
    assert len(ids) == 50


def test_repository_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ProductRepository()


def test_repository_subclass_serves_products():
    class MemoryRepository(ProductRepository):
        def __init__(self):
            self.items = []

        def create(self, product):
            self.items.append(product)

        def find_all(self):
            return list(self.items)

    repo = MemoryRepository()
    product = Product.new("Desk", 250.0)
    repo.create(product)
    assert repo.find_all() == [product]