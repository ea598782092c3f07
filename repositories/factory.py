"""
repositories/factory.py
-----------------------
Hands out the data-access object for each Northwind entity.
Services depend on the abstract factory; `SqlDataAccessFactory`
binds every object it creates to one open connection.
"""

from abc import ABC, abstractmethod

from repositories.blog_repo import BlogArticleDataAccessObject, BlogCommentDataAccessObject
from repositories.category_repo import ProductCategoryDataAccessObject
from repositories.employee_repo import EmployeeDataAccessObject
from repositories.product_repo import ProductDataAccessObject


class NorthwindDataAccessFactory(ABC):
    """Abstract source of data-access objects."""

    @abstractmethod
    def get_employee_data_access_object(self) -> EmployeeDataAccessObject:
        ...

    @abstractmethod
    def get_product_data_access_object(self) -> ProductDataAccessObject:
        ...

    @abstractmethod
    def get_product_category_data_access_object(self) -> ProductCategoryDataAccessObject:
        ...

    @abstractmethod
    def get_blog_article_data_access_object(self) -> BlogArticleDataAccessObject:
        ...

    @abstractmethod
    def get_blog_comment_data_access_object(self) -> BlogCommentDataAccessObject:
        ...


class SqlDataAccessFactory(NorthwindDataAccessFactory):
    """Creates SQL data-access objects sharing a single connection."""

    def __init__(self, connection):
        if connection is None:
            raise ValueError("'connection' is required.")
        self.connection = connection

    def get_employee_data_access_object(self) -> EmployeeDataAccessObject:
        return EmployeeDataAccessObject(self.connection)

    def get_product_data_access_object(self) -> ProductDataAccessObject:
        return ProductDataAccessObject(self.connection)

    def get_product_category_data_access_object(self) -> ProductCategoryDataAccessObject:
        return ProductCategoryDataAccessObject(self.connection)

    def get_blog_article_data_access_object(self) -> BlogArticleDataAccessObject:
        return BlogArticleDataAccessObject(self.connection)

    def get_blog_comment_data_access_object(self) -> BlogCommentDataAccessObject:
        return BlogCommentDataAccessObject(self.connection)
