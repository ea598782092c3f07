"""Conversions between domain models and transfer objects."""

from datetime import date
from decimal import Decimal

import pytest

from models.blogging import BlogArticle, BlogComment
from models.employee import Employee
from models.product import Category, Product
from repositories.transfer_objects import (
    BlogArticleTransferObject,
    BlogCommentTransferObject,
    CategoryTransferObject,
    EmployeeTransferObject,
    ProductTransferObject,
)


def test_employee_copies_every_field() -> None:
    employee = Employee(
        employee_id=3,
        last_name="Leverling",
        first_name="Janet",
        title="Sales Representative",
        birth_date=date(1963, 8, 30),
        photo=b"\x00",
        reports_to=2,
    )

    transfer = EmployeeTransferObject.from_model(employee)

    assert transfer.id == 3
    assert transfer.reports_to == 2
    assert transfer.to_model() == employee


def test_employee_row_with_memoryview_photo(employee_row) -> None:
    transfer = EmployeeTransferObject.from_row(employee_row)
    assert isinstance(transfer.photo, bytes)


def test_product_name_maps_to_product_name_column() -> None:
    product = Product(product_id=1, name="Chai", unit_price=Decimal("18"), discontinued=True)

    transfer = ProductTransferObject.from_model(product)

    assert transfer.product_name == "Chai"
    assert transfer.to_model() == product


def test_category() -> None:
    category = Category(category_id=2, name="Condiments", description="Sweet and savory sauces")
    assert CategoryTransferObject.from_model(category).to_model() == category


def test_blog_records() -> None:
    article = BlogArticle(title="t", body="b", employee_id=1, publication_date=date(2021, 8, 26), blog_article_id=4)
    comment = BlogComment(article_id=4, customer_id=9, text="hi", blog_comment_id=2)

    assert BlogArticleTransferObject.from_model(article).to_model() == article
    assert BlogCommentTransferObject.from_model(comment).to_model() == comment


@pytest.mark.parametrize("transfer_class", [
    EmployeeTransferObject,
    ProductTransferObject,
    CategoryTransferObject,
    BlogArticleTransferObject,
    BlogCommentTransferObject,
])
def test_none_model_is_rejected(transfer_class) -> None:
    with pytest.raises(ValueError, match="is required"):
        transfer_class.from_model(None)
