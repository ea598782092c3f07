"""
repositories/errors.py
----------------------
Exceptions raised by the data-access objects.
Invalid arguments are reported with the built-in ValueError;
the classes below cover rows that do not exist.
"""


class EntityNotFoundError(LookupError):
    """Raised by a strict lookup when no row has the requested identifier."""

    entity = "Entity"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} with id {entity_id} not found.")


class EmployeeNotFoundError(EntityNotFoundError):
    entity = "Employee"


class ProductNotFoundError(EntityNotFoundError):
    entity = "Product"


class CategoryNotFoundError(EntityNotFoundError):
    entity = "Product category"


class BlogArticleNotFoundError(EntityNotFoundError):
    entity = "Blog article"


class BlogCommentNotFoundError(EntityNotFoundError):
    entity = "Blog comment"
