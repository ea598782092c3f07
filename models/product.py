"""
models/product.py
-----------------
Domain models for products and product categories.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Category:
    """
    Represents a product category.

    Attributes:
        category_id: Database primary key (0 for new records).
        name: Category name (required, up to 15 characters).
        description: Optional description.
    """
    name: str
    category_id: int = 0
    description: Optional[str] = None

    def __str__(self) -> str:
        return f"#{self.category_id} {self.name}"


@dataclass
class Product:
    """
    Represents a product sold by Northwind.

    Attributes:
        product_id: Database primary key (0 for new records).
        name: Product name (required, up to 40 characters).
        supplier_id: Supplier identifier.
        category_id: Category identifier.
        quantity_per_unit: Packaging description, e.g. '24 - 12 oz bottles'.
        unit_price: Price per unit.
        units_in_stock: Units currently in stock.
        units_on_order: Units ordered from the supplier.
        reorder_level: Stock level that triggers a reorder.
        discontinued: Whether the product is no longer sold.
    """
    name: str
    product_id: int = 0
    supplier_id: Optional[int] = None
    category_id: Optional[int] = None
    quantity_per_unit: Optional[str] = None
    unit_price: Optional[Decimal] = None
    units_in_stock: Optional[int] = None
    units_on_order: Optional[int] = None
    reorder_level: Optional[int] = None
    discontinued: bool = False

    def __str__(self) -> str:
        status = " (discontinued)" if self.discontinued else ""
        return f"#{self.product_id} {self.name}{status}"
