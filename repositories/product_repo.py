"""
repositories/product_repo.py
----------------------------
Data access object for Northwind products.
All SQL statements related to the `products` table live here.
"""

from typing import Iterable

from db.parameters import (
    Column,
    SqlType,
    bind_parameters,
    insert_statement,
    select_list,
    update_statement,
)
from repositories.base import (
    SqlDataAccessObject,
    require_names,
    require_page,
    require_positive,
    require_present,
)
from repositories.errors import ProductNotFoundError
from repositories.transfer_objects import ProductTransferObject
from utils.logger import get_logger

logger = get_logger(__name__)

PRODUCT_ID = Column("product_id", SqlType.INTEGER, nullable=False)

PRODUCT_COLUMNS = (
    Column("product_name", SqlType.VARCHAR, 40, nullable=False),
    Column("supplier_id", SqlType.INTEGER),
    Column("category_id", SqlType.INTEGER),
    Column("quantity_per_unit", SqlType.VARCHAR, 20),
    Column("unit_price", SqlType.NUMERIC, (19, 4)),
    Column("units_in_stock", SqlType.SMALLINT),
    Column("units_on_order", SqlType.SMALLINT),
    Column("reorder_level", SqlType.SMALLINT),
    Column("discontinued", SqlType.BOOLEAN, nullable=False),
)

_SELECT = f"SELECT {select_list((PRODUCT_ID,) + PRODUCT_COLUMNS, 'p')} FROM products AS p"


class ProductDataAccessObject(SqlDataAccessObject):
    """Issues parameterized statements against the products table."""

    # ── CREATE ────────────────────────────────────────────

    def insert_product(self, product: ProductTransferObject) -> int:
        """
        Insert a new product.

        Returns:
            The identifier assigned by the database.
        """
        require_present(product, "product")
        sql = insert_statement("products", PRODUCT_COLUMNS, PRODUCT_ID.name)
        product_id = self._execute_scalar(sql, bind_parameters(PRODUCT_COLUMNS, product), PRODUCT_ID.name)
        logger.info(f"Inserted product #{product_id} '{product.product_name}'")
        return product_id

    # ── READ ──────────────────────────────────────────────

    def find_product(self, product_id: int) -> ProductTransferObject:
        """
        Fetch a single product.

        Raises:
            ValueError: If `product_id` is not positive.
            ProductNotFoundError: If no product has that identifier.
        """
        require_positive(product_id, "product_id")
        sql = f"{_SELECT} WHERE p.product_id = {PRODUCT_ID.placeholder};"
        row = self._fetch_one(sql, {"product_id": product_id})
        if row is None:
            raise ProductNotFoundError(product_id)
        return ProductTransferObject.from_row(row)

    def select_products(self, offset: int, limit: int) -> list[ProductTransferObject]:
        """Fetch one page of products in ascending identifier order."""
        require_page(offset, limit)
        sql = f"{_SELECT} ORDER BY p.product_id OFFSET %(offset)s LIMIT %(limit)s;"
        rows = self._fetch_all(sql, {"offset": offset, "limit": limit})
        return [ProductTransferObject.from_row(r) for r in rows]

    def select_products_by_name(self, names: Iterable[str]) -> list[ProductTransferObject]:
        """
        Fetch every product whose name is one of `names`.

        Args:
            names: Exact product names to match.

        Returns:
            Matching products in ascending identifier order; empty if `names` is empty.
        """
        names = require_names(names)
        if not names:
            return []
        sql = f"{_SELECT} WHERE p.product_name = ANY(%(names)s) ORDER BY p.product_id;"
        return [ProductTransferObject.from_row(r) for r in self._fetch_all(sql, {"names": names})]

    def select_products_by_category(self, category_id: int) -> list[ProductTransferObject]:
        """Fetch every product of a category in ascending identifier order."""
        require_positive(category_id, "category_id")
        sql = f"{_SELECT} WHERE p.category_id = %(category_id)s::integer ORDER BY p.product_id;"
        rows = self._fetch_all(sql, {"category_id": category_id})
        return [ProductTransferObject.from_row(r) for r in rows]

    # ── UPDATE ────────────────────────────────────────────

    def update_product(self, product: ProductTransferObject) -> bool:
        """
        Overwrite every column of an existing product.

        Returns:
            True if a row was updated, False otherwise.
        """
        require_present(product, "product")
        require_positive(product.id, "product.id")
        params = bind_parameters(PRODUCT_COLUMNS, product)
        params[PRODUCT_ID.name] = PRODUCT_ID.bind(product.id)
        return self._execute_non_query(update_statement("products", PRODUCT_COLUMNS, PRODUCT_ID), params)

    # ── DELETE ────────────────────────────────────────────

    def delete_product(self, product_id: int) -> bool:
        """Delete a product by identifier; True if a row was deleted."""
        require_positive(product_id, "product_id")
        sql = f"DELETE FROM products WHERE product_id = {PRODUCT_ID.placeholder};"
        deleted = self._execute_non_query(sql, {"product_id": product_id})
        if deleted:
            logger.info(f"Deleted product #{product_id}")
        return deleted
