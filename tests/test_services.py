"""Unit tests for the management services.

The services are driven through a real SqlDataAccessFactory over the mocked
connection, so each test checks the whole call chain down to the cursor.
"""

from datetime import date
from decimal import Decimal

import pytest

from models.blogging import BlogArticle, BlogComment
from models.employee import Employee
from models.product import Category, Product
from services.blogging_service import BloggingService
from services.employee_service import EmployeeManagementService
from services.product_service import ProductCategoryManagementService, ProductManagementService


@pytest.mark.parametrize("service_class", [
    EmployeeManagementService,
    ProductManagementService,
    ProductCategoryManagementService,
    BloggingService,
])
def test_services_require_a_factory(service_class) -> None:
    with pytest.raises(ValueError, match="'factory' is required"):
        service_class(None)


class TestEmployeeManagementService:
    @pytest.fixture
    def service(self, factory) -> EmployeeManagementService:
        return EmployeeManagementService(factory)

    def test_try_show_found(self, service, cursor, employee_row) -> None:
        cursor.fetchone.return_value = employee_row

        found, employee = service.try_show_employee(1)

        assert found is True
        assert isinstance(employee, Employee)
        assert employee.full_name == "Nancy Davolio"

    def test_try_show_missing_returns_false_and_none(self, service, cursor) -> None:
        assert service.try_show_employee(99) == (False, None)

    def test_try_show_rejects_non_positive_id(self, service, cursor) -> None:
        with pytest.raises(ValueError):
            service.try_show_employee(0)
        cursor.execute.assert_not_called()

    def test_show_employees_converts_to_models(self, service, cursor, employee_row) -> None:
        cursor.fetchall.return_value = [employee_row]

        employees = service.show_employees(0, 10)

        assert [e.employee_id for e in employees] == [1]

    def test_create_employee(self, service, cursor) -> None:
        cursor.fetchone.return_value = {"employee_id": 11}
        employee = Employee(last_name="Leverling", first_name="Janet", hire_date=date(1992, 4, 1))

        assert service.create_employee(employee) == 11
        assert cursor.execute.call_args.args[1]["last_name"] == "Leverling"

    def test_update_with_mismatched_id_touches_nothing(self, service, cursor) -> None:
        employee = Employee(last_name="Peacock", first_name="Margaret", employee_id=4)

        assert service.update_employee(5, employee) is False
        cursor.execute.assert_not_called()

    def test_update_matching_id(self, service, cursor) -> None:
        cursor.rowcount = 1
        employee = Employee(last_name="Peacock", first_name="Margaret", employee_id=4)

        assert service.update_employee(4, employee) is True

    def test_update_requires_employee(self, service) -> None:
        with pytest.raises(ValueError, match="'employee' is required"):
            service.update_employee(4, None)

    def test_destroy(self, service, cursor) -> None:
        cursor.rowcount = 0
        assert service.destroy_employee(4) is False
        with pytest.raises(ValueError):
            service.destroy_employee(-4)


class TestProductManagementService:
    @pytest.fixture
    def service(self, factory) -> ProductManagementService:
        return ProductManagementService(factory)

    def test_try_show(self, service, cursor, product_row) -> None:
        cursor.fetchone.return_value = product_row
        found, product = service.try_show_product(1)
        assert found is True
        assert product.name == "Chai"

    def test_try_show_missing(self, service) -> None:
        assert service.try_show_product(1) == (False, None)

    def test_lookup_by_name(self, service, cursor, product_row) -> None:
        cursor.fetchall.return_value = [product_row]
        assert [p.name for p in service.lookup_products_by_name(["Chai"])] == ["Chai"]

    def test_show_for_category(self, service, cursor, product_row) -> None:
        cursor.fetchall.return_value = [product_row, dict(product_row, product_id=2, product_name="Chang")]
        assert [p.product_id for p in service.show_products_for_category(1)] == [1, 2]

    def test_create_and_update(self, service, cursor) -> None:
        cursor.fetchone.return_value = {"product_id": 78}
        cursor.rowcount = 1
        product = Product(name="Lakkalikööri", unit_price=Decimal("18"), category_id=1)

        product.product_id = service.create_product(product)

        assert product.product_id == 78
        assert service.update_product(78, product) is True
        assert service.update_product(77, product) is False

    def test_destroy(self, service, cursor) -> None:
        cursor.rowcount = 1
        assert service.destroy_product(78) is True


class TestProductCategoryManagementService:
    @pytest.fixture
    def service(self, factory) -> ProductCategoryManagementService:
        return ProductCategoryManagementService(factory)

    def test_show_and_lookup(self, service, cursor, category_row) -> None:
        cursor.fetchall.return_value = [category_row]
        assert service.show_categories(0, 10)[0].name == "Beverages"
        assert service.lookup_categories_by_name(["Beverages"])[0].category_id == 1

    def test_try_show_missing(self, service) -> None:
        assert service.try_show_category(3) == (False, None)

    def test_create_update_destroy(self, service, cursor) -> None:
        cursor.fetchone.return_value = {"category_id": 9}
        cursor.rowcount = 1
        category = Category(name="Snacks")

        category.category_id = service.create_category(category)

        assert service.update_category(9, category) is True
        assert service.update_category(8, category) is False
        assert service.destroy_category(9) is True


class TestBloggingService:
    @pytest.fixture
    def service(self, factory) -> BloggingService:
        return BloggingService(factory)

    def test_try_show_article(self, service, cursor, article_row) -> None:
        cursor.fetchone.return_value = article_row
        found, article = service.try_show_article(1)
        assert found is True
        assert isinstance(article, BlogArticle)

    def test_try_show_missing_article(self, service) -> None:
        assert service.try_show_article(1) == (False, None)

    def test_update_article_id_mismatch(self, service, cursor) -> None:
        article = BlogArticle(title="t", body="b", employee_id=1, blog_article_id=2)
        assert service.update_article(3, article) is False
        cursor.execute.assert_not_called()

    def test_show_article_products_skips_missing_products(self, service, cursor, product_row) -> None:
        cursor.fetchall.return_value = [{"product_id": 1}, {"product_id": 2}]
        cursor.fetchone.side_effect = [product_row, None]

        products = service.show_article_products(1)

        assert [p.product_id for p in products] == [1]

    def test_links(self, service, cursor) -> None:
        cursor.fetchone.return_value = {"blog_article_product_id": 5}
        cursor.rowcount = 1
        assert service.create_link_to_product(1, 3) == 5
        assert service.remove_link_to_product(1, 3) is True

    def test_create_comment_uses_path_article(self, service, cursor) -> None:
        cursor.fetchone.return_value = {"blog_comment_id": 6}
        comment = BlogComment(article_id=0, customer_id=7, text="Great read")

        assert service.create_comment(2, comment) == 6
        assert cursor.execute.call_args.args[1]["article_id"] == 2

    def test_comments(self, service, cursor, comment_row) -> None:
        cursor.fetchall.return_value = [comment_row]
        cursor.fetchone.return_value = comment_row
        cursor.rowcount = 1

        assert service.show_comments(1, 0, 10)[0].customer_id == 7
        found, comment = service.try_show_comment(1)
        assert found is True
        comment.text = "Edited"
        assert service.update_comment(1, comment) is True
        assert service.update_comment(2, comment) is False
        assert service.destroy_comment(1) is True

    def test_try_show_missing_comment(self, service) -> None:
        assert service.try_show_comment(4) == (False, None)

    def test_destroy_article(self, service, cursor) -> None:
        cursor.rowcount = 0
        assert service.destroy_article(4) is False
