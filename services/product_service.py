"""
services/product_service.py
---------------------------
Management services for products and product categories.
"""

from typing import Iterable, Optional

from models.product import Category, Product
from repositories.base import require_positive, require_present
from repositories.errors import CategoryNotFoundError, ProductNotFoundError
from repositories.factory import NorthwindDataAccessFactory
from repositories.transfer_objects import CategoryTransferObject, ProductTransferObject
from utils.logger import get_logger

logger = get_logger(__name__)


class ProductManagementService:
    """CRUD surface for products, forwarded to the product data-access object."""

    def __init__(self, factory: NorthwindDataAccessFactory):
        require_present(factory, "factory")
        self.factory = factory

    @property
    def dao(self):
        return self.factory.get_product_data_access_object()

    def show_products(self, offset: int, limit: int) -> list[Product]:
        return [to.to_model() for to in self.dao.select_products(offset, limit)]

    def try_show_product(self, product_id: int) -> tuple[bool, Optional[Product]]:
        """
        Look up a product.

        Returns:
            ``(True, product)`` if found, ``(False, None)`` otherwise.
        """
        require_positive(product_id, "product_id")
        try:
            product = self.dao.find_product(product_id).to_model()
        except ProductNotFoundError:
            logger.debug(f"Product #{product_id} not found")
            return False, None
        return True, product

    def lookup_products_by_name(self, names: Iterable[str]) -> list[Product]:
        """Return every product whose name is in `names`."""
        return [to.to_model() for to in self.dao.select_products_by_name(names)]

    def show_products_for_category(self, category_id: int) -> list[Product]:
        require_positive(category_id, "category_id")
        return [to.to_model() for to in self.dao.select_products_by_category(category_id)]

    def create_product(self, product: Product) -> int:
        require_present(product, "product")
        return self.dao.insert_product(ProductTransferObject.from_model(product))

    def destroy_product(self, product_id: int) -> bool:
        require_positive(product_id, "product_id")
        return self.dao.delete_product(product_id)

    def update_product(self, product_id: int, product: Product) -> bool:
        """False if the identifiers differ or nothing was updated."""
        require_positive(product_id, "product_id")
        require_present(product, "product")
        if product_id != product.product_id:
            return False
        return self.dao.update_product(ProductTransferObject.from_model(product))


class ProductCategoryManagementService:
    """CRUD surface for product categories."""

    def __init__(self, factory: NorthwindDataAccessFactory):
        require_present(factory, "factory")
        self.factory = factory

    @property
    def dao(self):
        return self.factory.get_product_category_data_access_object()

    def show_categories(self, offset: int, limit: int) -> list[Category]:
        return [to.to_model() for to in self.dao.select_categories(offset, limit)]

    def try_show_category(self, category_id: int) -> tuple[bool, Optional[Category]]:
        require_positive(category_id, "category_id")
        try:
            category = self.dao.find_category(category_id).to_model()
        except CategoryNotFoundError:
            logger.debug(f"Category #{category_id} not found")
            return False, None
        return True, category

    def lookup_categories_by_name(self, names: Iterable[str]) -> list[Category]:
        return [to.to_model() for to in self.dao.select_categories_by_name(names)]

    def create_category(self, category: Category) -> int:
        require_present(category, "category")
        return self.dao.insert_category(CategoryTransferObject.from_model(category))

    def destroy_category(self, category_id: int) -> bool:
        require_positive(category_id, "category_id")
        return self.dao.delete_category(category_id)

    def update_category(self, category_id: int, category: Category) -> bool:
        require_positive(category_id, "category_id")
        require_present(category, "category")
        if category_id != category.category_id:
            return False
        return self.dao.update_category(CategoryTransferObject.from_model(category))
