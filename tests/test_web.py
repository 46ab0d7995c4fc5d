import sqlite3
import uuid
from http import HTTPStatus

import pytest

from estudos.products.repository import SqlProductRepository
from estudos.products.usecase import CreateProductUseCase, ListProductsUseCase
from estudos.products.web import create_app


def _client(conn):
    repo = SqlProductRepository(conn)
    app = create_app(CreateProductUseCase(repo), ListProductsUseCase(repo))
    return app.test_client()


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.execute("CREATE TABLE products (id TEXT PRIMARY KEY, name TEXT, price REAL)")
    yield conn
    conn.close()


@pytest.fixture
def client(connection):
    return _client(connection)


def test_create_returns_created_product(client):
    response = client.post("/products", json={"name": "Pen", "price": 2.5})
    assert response.status_code == HTTPStatus.CREATED
    body = response.get_json()
    assert body["Name"] == "Pen"
    assert body["Price"] == 2.5
    assert str(uuid.UUID(body["ID"])) == body["ID"]


def test_create_then_list(client):
    created = client.post("/products", json={"Name": "Lamp", "Price": 30}).get_json()
    response = client.get("/products")
    assert response.status_code == HTTPStatus.OK
    assert response.get_json() == [created]


def test_field_names_match_case_insensitively(client):
    body = client.post("/products", json={"NAME": "Cup", "pRiCe": 4.25}).get_json()
    assert (body["Name"], body["Price"]) == ("Cup", 4.25)


def test_empty_listing_is_null(client):
    response = client.get("/products")
    assert response.status_code == HTTPStatus.OK
    assert response.get_data(as_text=True).strip() == "null"


@pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b'{"name": 5}',
                                  b'{"price": "cheap"}'])
def test_bad_body_is_rejected(client, body):
    response = client.post("/products", data=body, content_type="application/json")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_data() == b""


def test_storage_failure_gives_server_error():
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    try:
        client = _client(conn)
        assert client.post("/products", json={"name": "X", "price": 1}).status_code \
            == HTTPStatus.INTERNAL_SERVER_ERROR
        assert client.get("/products").status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    finally:
        conn.close()


def test_response_is_json(client):
    response = client.post("/products", json={"name": "Pen", "price": 1.5})
    assert response.headers["Content-Type"].startswith("application/json")
    assert response.get_data(as_text=True).endswith("\n")