from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from repositories.factory import SqlDataAccessFactory


@pytest.fixture
def cursor() -> MagicMock:
    """A psycopg2 cursor stand-in; tests set fetchone/fetchall/rowcount."""
    cur = MagicMock(name="cursor")
    cur.rowcount = 0
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    return cur


@pytest.fixture
def connection(cursor: MagicMock) -> MagicMock:
    """A psycopg2 connection whose ``cursor()`` context yields `cursor`."""
    conn = MagicMock(name="connection")
    conn.cursor.return_value.__enter__.return_value = cursor
    return conn


@pytest.fixture
def factory(connection: MagicMock) -> SqlDataAccessFactory:
    return SqlDataAccessFactory(connection)


@pytest.fixture
def employee_row() -> dict:
    return {
        "employee_id": 1,
        "last_name": "Davolio",
        "first_name": "Nancy",
        "title": "Sales Representative",
        "title_of_courtesy": "Ms.",
        "birth_date": date(1948, 12, 8),
        "hire_date": date(1992, 5, 1),
        "address": "507 - 20th Ave. E.",
        "city": "Seattle",
        "region": "WA",
        "postal_code": "98122",
        "country": "USA",
        "home_phone": "(206) 555-9857",
        "extension": "5467",
        "photo": memoryview(b"\x89PNG"),
        "notes": "Education includes a BA in psychology.",
        "reports_to": 2,
        "photo_path": "http://accweb/emmployees/davolio.bmp",
    }


@pytest.fixture
def product_row() -> dict:
    return {
        "product_id": 1,
        "product_name": "Chai",
        "supplier_id": 1,
        "category_id": 1,
        "quantity_per_unit": "10 boxes x 20 bags",
        "unit_price": Decimal("18.0000"),
        "units_in_stock": 39,
        "units_on_order": 0,
        "reorder_level": 10,
        "discontinued": False,
    }


@pytest.fixture
def category_row() -> dict:
    return {"category_id": 1, "category_name": "Beverages", "description": "Soft drinks, coffees, teas"}


@pytest.fixture
def article_row() -> dict:
    return {
        "blog_article_id": 1,
        "title": "New teas this spring",
        "body": "We are adding three green teas to the catalogue.",
        "publication_date": date(2021, 8, 26),
        "employee_id": 1,
    }


@pytest.fixture
def comment_row() -> dict:
    return {"blog_comment_id": 1, "article_id": 1, "customer_id": 7, "text": "Looking forward to it!"}
