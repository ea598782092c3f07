"""
repositories/transfer_objects.py
--------------------------------
Persistence-shaped records exchanged with the data-access objects.

Attribute names match column names so a transfer object can be bound
straight into a statement. `from_model` / `to_model` are the explicit
field-for-field conversions to and from the domain models.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from models.blogging import BlogArticle, BlogComment
from models.employee import Employee
from models.product import Category, Product


def _to_bytes(value) -> Optional[bytes]:
    """bytea columns come back as memoryview."""
    return bytes(value) if value is not None else None


@dataclass
class EmployeeTransferObject:
    id: int = 0
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    title: Optional[str] = None
    title_of_courtesy: Optional[str] = None
    birth_date: Optional[date] = None
    hire_date: Optional[date] = None
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    home_phone: Optional[str] = None
    extension: Optional[str] = None
    photo: Optional[bytes] = None
    notes: Optional[str] = None
    reports_to: Optional[int] = None
    photo_path: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "EmployeeTransferObject":
        return cls(
            id=row["employee_id"],
            last_name=row["last_name"],
            first_name=row["first_name"],
            title=row["title"],
            title_of_courtesy=row["title_of_courtesy"],
            birth_date=row["birth_date"],
            hire_date=row["hire_date"],
            address=row["address"],
            city=row["city"],
            region=row["region"],
            postal_code=row["postal_code"],
            country=row["country"],
            home_phone=row["home_phone"],
            extension=row["extension"],
            photo=_to_bytes(row["photo"]),
            notes=row["notes"],
            reports_to=row["reports_to"],
            photo_path=row["photo_path"],
        )

    @classmethod
    def from_model(cls, employee: Employee) -> "EmployeeTransferObject":
        if employee is None:
            raise ValueError("'employee' is required.")
        return cls(
            id=employee.employee_id,
            last_name=employee.last_name,
            first_name=employee.first_name,
            title=employee.title,
            title_of_courtesy=employee.title_of_courtesy,
            birth_date=employee.birth_date,
            hire_date=employee.hire_date,
            address=employee.address,
            city=employee.city,
            region=employee.region,
            postal_code=employee.postal_code,
            country=employee.country,
            home_phone=employee.home_phone,
            extension=employee.extension,
            photo=employee.photo,
            notes=employee.notes,
            reports_to=employee.reports_to,
            photo_path=employee.photo_path,
        )

    def to_model(self) -> Employee:
        return Employee(
            employee_id=self.id,
            last_name=self.last_name,
            first_name=self.first_name,
            title=self.title,
            title_of_courtesy=self.title_of_courtesy,
            birth_date=self.birth_date,
            hire_date=self.hire_date,
            address=self.address,
            city=self.city,
            region=self.region,
            postal_code=self.postal_code,
            country=self.country,
            home_phone=self.home_phone,
            extension=self.extension,
            photo=self.photo,
            notes=self.notes,
            reports_to=self.reports_to,
            photo_path=self.photo_path,
        )


@dataclass
class ProductTransferObject:
    id: int = 0
    product_name: Optional[str] = None
    supplier_id: Optional[int] = None
    category_id: Optional[int] = None
    quantity_per_unit: Optional[str] = None
    unit_price: Optional[Decimal] = None
    units_in_stock: Optional[int] = None
    units_on_order: Optional[int] = None
    reorder_level: Optional[int] = None
    discontinued: bool = False

    @classmethod
    def from_row(cls, row: dict) -> "ProductTransferObject":
        return cls(
            id=row["product_id"],
            product_name=row["product_name"],
            supplier_id=row["supplier_id"],
            category_id=row["category_id"],
            quantity_per_unit=row["quantity_per_unit"],
            unit_price=row["unit_price"],
            units_in_stock=row["units_in_stock"],
            units_on_order=row["units_on_order"],
            reorder_level=row["reorder_level"],
            discontinued=row["discontinued"],
        )

    @classmethod
    def from_model(cls, product: Product) -> "ProductTransferObject":
        if product is None:
            raise ValueError("'product' is required.")
        return cls(
            id=product.product_id,
            product_name=product.name,
            supplier_id=product.supplier_id,
            category_id=product.category_id,
            quantity_per_unit=product.quantity_per_unit,
            unit_price=product.unit_price,
            units_in_stock=product.units_in_stock,
            units_on_order=product.units_on_order,
            reorder_level=product.reorder_level,
            discontinued=product.discontinued,
        )

    def to_model(self) -> Product:
        return Product(
            product_id=self.id,
            name=self.product_name,
            supplier_id=self.supplier_id,
            category_id=self.category_id,
            quantity_per_unit=self.quantity_per_unit,
            unit_price=self.unit_price,
            units_in_stock=self.units_in_stock,
            units_on_order=self.units_on_order,
            reorder_level=self.reorder_level,
            discontinued=self.discontinued,
        )


@dataclass
class CategoryTransferObject:
    id: int = 0
    category_name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "CategoryTransferObject":
        return cls(
            id=row["category_id"],
            category_name=row["category_name"],
            description=row["description"],
        )

    @classmethod
    def from_model(cls, category: Category) -> "CategoryTransferObject":
        if category is None:
            raise ValueError("'category' is required.")
        return cls(id=category.category_id, category_name=category.name, description=category.description)

    def to_model(self) -> Category:
        return Category(category_id=self.id, name=self.category_name, description=self.description)


@dataclass
class BlogArticleTransferObject:
    id: int = 0
    title: Optional[str] = None
    body: Optional[str] = None
    publication_date: Optional[date] = None
    employee_id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "BlogArticleTransferObject":
        return cls(
            id=row["blog_article_id"],
            title=row["title"],
            body=row["body"],
            publication_date=row["publication_date"],
            employee_id=row["employee_id"],
        )

    @classmethod
    def from_model(cls, article: BlogArticle) -> "BlogArticleTransferObject":
        if article is None:
            raise ValueError("'article' is required.")
        return cls(
            id=article.blog_article_id,
            title=article.title,
            body=article.body,
            publication_date=article.publication_date,
            employee_id=article.employee_id,
        )

    def to_model(self) -> BlogArticle:
        return BlogArticle(
            blog_article_id=self.id,
            title=self.title,
            body=self.body,
            publication_date=self.publication_date,
            employee_id=self.employee_id,
        )


@dataclass
class BlogCommentTransferObject:
    id: int = 0
    article_id: Optional[int] = None
    customer_id: Optional[int] = None
    text: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "BlogCommentTransferObject":
        return cls(
            id=row["blog_comment_id"],
            article_id=row["article_id"],
            customer_id=row["customer_id"],
            text=row["text"],
        )

    @classmethod
    def from_model(cls, comment: BlogComment) -> "BlogCommentTransferObject":
        if comment is None:
            raise ValueError("'comment' is required.")
        return cls(
            id=comment.blog_comment_id,
            article_id=comment.article_id,
            customer_id=comment.customer_id,
            text=comment.text,
        )

    def to_model(self) -> BlogComment:
        return BlogComment(
            blog_comment_id=self.id,
            article_id=self.article_id,
            customer_id=self.customer_id,
            text=self.text,
        )
