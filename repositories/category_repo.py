"""
repositories/category_repo.py
-----------------------------
Data access object for product categories.
The `picture` column is never read or written here.
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
from repositories.errors import CategoryNotFoundError
from repositories.transfer_objects import CategoryTransferObject
from utils.logger import get_logger

logger = get_logger(__name__)

CATEGORY_ID = Column("category_id", SqlType.INTEGER, nullable=False)

CATEGORY_COLUMNS = (
    Column("category_name", SqlType.VARCHAR, 15, nullable=False),
    Column("description", SqlType.TEXT),
)

_SELECT = f"SELECT {select_list((CATEGORY_ID,) + CATEGORY_COLUMNS, 'c')} FROM categories AS c"


class ProductCategoryDataAccessObject(SqlDataAccessObject):
    """Issues parameterized statements against the categories table."""

    def insert_category(self, category: CategoryTransferObject) -> int:
        """Insert a new category and return its identifier."""
        require_present(category, "category")
        sql = insert_statement("categories", CATEGORY_COLUMNS, CATEGORY_ID.name)
        category_id = self._execute_scalar(sql, bind_parameters(CATEGORY_COLUMNS, category), CATEGORY_ID.name)
        logger.info(f"Inserted category #{category_id} '{category.category_name}'")
        return category_id

    def find_category(self, category_id: int) -> CategoryTransferObject:
        """
        Fetch a single category.

        Raises:
            ValueError: If `category_id` is not positive.
            CategoryNotFoundError: If no category has that identifier.
        """
        require_positive(category_id, "category_id")
        sql = f"{_SELECT} WHERE c.category_id = {CATEGORY_ID.placeholder};"
        row = self._fetch_one(sql, {"category_id": category_id})
        if row is None:
            raise CategoryNotFoundError(category_id)
        return CategoryTransferObject.from_row(row)

    def select_categories(self, offset: int, limit: int) -> list[CategoryTransferObject]:
        require_page(offset, limit)
        sql = f"{_SELECT} ORDER BY c.category_id OFFSET %(offset)s LIMIT %(limit)s;"
        rows = self._fetch_all(sql, {"offset": offset, "limit": limit})
        return [CategoryTransferObject.from_row(r) for r in rows]

    def select_categories_by_name(self, names: Iterable[str]) -> list[CategoryTransferObject]:
        names = require_names(names)
        if not names:
            return []
        sql = f"{_SELECT} WHERE c.category_name = ANY(%(names)s) ORDER BY c.category_id;"
        return [CategoryTransferObject.from_row(r) for r in self._fetch_all(sql, {"names": names})]

    def update_category(self, category: CategoryTransferObject) -> bool:
        """Overwrite name and description; True if a row was updated."""
        require_present(category, "category")
        require_positive(category.id, "category.id")
        params = bind_parameters(CATEGORY_COLUMNS, category)
        params[CATEGORY_ID.name] = CATEGORY_ID.bind(category.id)
        return self._execute_non_query(update_statement("categories", CATEGORY_COLUMNS, CATEGORY_ID), params)

    def delete_category(self, category_id: int) -> bool:
        require_positive(category_id, "category_id")
        sql = f"DELETE FROM categories WHERE category_id = {CATEGORY_ID.placeholder};"
        deleted = self._execute_non_query(sql, {"category_id": category_id})
        if deleted:
            logger.info(f"Deleted category #{category_id}")
        return deleted
