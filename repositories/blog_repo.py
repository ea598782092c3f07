"""
repositories/blog_repo.py
-------------------------
Data access objects for the employee blog.
All SQL statements related to the `blog_articles`, `blog_article_products`
and `blog_comments` tables live here.
"""

from db.parameters import (
    Column,
    SqlType,
    bind_parameters,
    insert_statement,
    select_list,
    update_statement,
)
from models.blogging import BlogArticleProduct
from repositories.base import SqlDataAccessObject, require_page, require_positive, require_present
from repositories.errors import BlogArticleNotFoundError, BlogCommentNotFoundError
from repositories.transfer_objects import BlogArticleTransferObject, BlogCommentTransferObject
from utils.logger import get_logger

logger = get_logger(__name__)

ARTICLE_ID = Column("blog_article_id", SqlType.INTEGER, nullable=False)

ARTICLE_COLUMNS = (
    Column("title", SqlType.VARCHAR, 50, nullable=False),
    Column("body", SqlType.VARCHAR, 4000, nullable=False),
    Column("publication_date", SqlType.DATE, nullable=False),
    Column("employee_id", SqlType.INTEGER, nullable=False),
)

LINK_ID = Column("blog_article_product_id", SqlType.INTEGER, nullable=False)

LINK_COLUMNS = (
    Column("article_id", SqlType.INTEGER, nullable=False),
    Column("product_id", SqlType.INTEGER, nullable=False),
)

COMMENT_ID = Column("blog_comment_id", SqlType.INTEGER, nullable=False)

COMMENT_COLUMNS = (
    Column("article_id", SqlType.INTEGER, nullable=False),
    Column("customer_id", SqlType.INTEGER, nullable=False),
    Column("text", SqlType.VARCHAR, 500, nullable=False),
)

_SELECT_ARTICLE = f"SELECT {select_list((ARTICLE_ID,) + ARTICLE_COLUMNS, 'a')} FROM blog_articles AS a"
_SELECT_COMMENT = f"SELECT {select_list((COMMENT_ID,) + COMMENT_COLUMNS, 'c')} FROM blog_comments AS c"


class BlogArticleDataAccessObject(SqlDataAccessObject):
    """Issues parameterized statements against blog articles and their product links."""

    # ── CREATE ────────────────────────────────────────────

    def insert_article(self, article: BlogArticleTransferObject) -> int:
        """Insert a new article and return its identifier."""
        require_present(article, "article")
        sql = insert_statement("blog_articles", ARTICLE_COLUMNS, ARTICLE_ID.name)
        article_id = self._execute_scalar(sql, bind_parameters(ARTICLE_COLUMNS, article), ARTICLE_ID.name)
        logger.info(f"Inserted blog article #{article_id} by employee {article.employee_id}")
        return article_id

    # ── READ ──────────────────────────────────────────────

    def find_article(self, article_id: int) -> BlogArticleTransferObject:
        """
        Fetch a single article.

        Raises:
            ValueError: If `article_id` is not positive.
            BlogArticleNotFoundError: If no article has that identifier.
        """
        require_positive(article_id, "article_id")
        sql = f"{_SELECT_ARTICLE} WHERE a.blog_article_id = {ARTICLE_ID.placeholder};"
        row = self._fetch_one(sql, {"blog_article_id": article_id})
        if row is None:
            raise BlogArticleNotFoundError(article_id)
        return BlogArticleTransferObject.from_row(row)

    def select_articles(self, offset: int, limit: int) -> list[BlogArticleTransferObject]:
        require_page(offset, limit)
        sql = f"{_SELECT_ARTICLE} ORDER BY a.blog_article_id OFFSET %(offset)s LIMIT %(limit)s;"
        rows = self._fetch_all(sql, {"offset": offset, "limit": limit})
        return [BlogArticleTransferObject.from_row(r) for r in rows]

    # ── UPDATE ────────────────────────────────────────────

    def update_article(self, article: BlogArticleTransferObject) -> bool:
        """Overwrite every column of an existing article; True if a row was updated."""
        require_present(article, "article")
        require_positive(article.id, "article.id")
        params = bind_parameters(ARTICLE_COLUMNS, article)
        params[ARTICLE_ID.name] = ARTICLE_ID.bind(article.id)
        return self._execute_non_query(update_statement("blog_articles", ARTICLE_COLUMNS, ARTICLE_ID), params)

    # ── DELETE ────────────────────────────────────────────

    def delete_article(self, article_id: int) -> bool:
        require_positive(article_id, "article_id")
        sql = f"DELETE FROM blog_articles WHERE blog_article_id = {ARTICLE_ID.placeholder};"
        deleted = self._execute_non_query(sql, {"blog_article_id": article_id})
        if deleted:
            logger.info(f"Deleted blog article #{article_id}")
        return deleted

    # ── PRODUCT LINKS ─────────────────────────────────────

    def select_article_products(self, article_id: int) -> list[int]:
        """
        List the products an article mentions.

        Returns:
            Product identifiers in the order the links were created.
        """
        require_positive(article_id, "article_id")
        sql = """
            SELECT l.product_id FROM blog_article_products AS l
            WHERE l.article_id = %(article_id)s::integer
            ORDER BY l.blog_article_product_id;
        """
        return [r["product_id"] for r in self._fetch_all(sql, {"article_id": article_id})]

    def insert_article_product(self, article_id: int, product_id: int) -> int:
        """Link a product to an article and return the link identifier."""
        require_positive(article_id, "article_id")
        require_positive(product_id, "product_id")
        link = BlogArticleProduct(article_id=article_id, product_id=product_id)
        sql = insert_statement("blog_article_products", LINK_COLUMNS, LINK_ID.name)
        link_id = self._execute_scalar(sql, bind_parameters(LINK_COLUMNS, link), LINK_ID.name)
        logger.info(f"Linked product {product_id} to blog article #{article_id}")
        return link_id

    def delete_article_product(self, article_id: int, product_id: int) -> bool:
        """Remove every link between an article and a product; True if any existed."""
        require_positive(article_id, "article_id")
        require_positive(product_id, "product_id")
        sql = """
            DELETE FROM blog_article_products
            WHERE article_id = %(article_id)s::integer AND product_id = %(product_id)s::integer;
        """
        return self._execute_non_query(sql, {"article_id": article_id, "product_id": product_id})


class BlogCommentDataAccessObject(SqlDataAccessObject):
    """Issues parameterized statements against blog comments."""

    def insert_comment(self, comment: BlogCommentTransferObject) -> int:
        require_present(comment, "comment")
        require_positive(comment.article_id, "comment.article_id")
        sql = insert_statement("blog_comments", COMMENT_COLUMNS, COMMENT_ID.name)
        comment_id = self._execute_scalar(sql, bind_parameters(COMMENT_COLUMNS, comment), COMMENT_ID.name)
        logger.info(f"Inserted comment #{comment_id} on blog article #{comment.article_id}")
        return comment_id

    def find_comment(self, comment_id: int) -> BlogCommentTransferObject:
        """
        Fetch a single comment.

        Raises:
            BlogCommentNotFoundError: If no comment has that identifier.
        """
        require_positive(comment_id, "comment_id")
        sql = f"{_SELECT_COMMENT} WHERE c.blog_comment_id = {COMMENT_ID.placeholder};"
        row = self._fetch_one(sql, {"blog_comment_id": comment_id})
        if row is None:
            raise BlogCommentNotFoundError(comment_id)
        return BlogCommentTransferObject.from_row(row)

    def select_comments(self, article_id: int, offset: int, limit: int) -> list[BlogCommentTransferObject]:
        """Fetch one page of an article's comments in ascending identifier order."""
        require_positive(article_id, "article_id")
        require_page(offset, limit)
        sql = f"""
            {_SELECT_COMMENT}
            WHERE c.article_id = %(article_id)s::integer
            ORDER BY c.blog_comment_id OFFSET %(offset)s LIMIT %(limit)s;
        """
        rows = self._fetch_all(sql, {"article_id": article_id, "offset": offset, "limit": limit})
        return [BlogCommentTransferObject.from_row(r) for r in rows]

    def update_comment(self, comment: BlogCommentTransferObject) -> bool:
        require_present(comment, "comment")
        require_positive(comment.id, "comment.id")
        params = bind_parameters(COMMENT_COLUMNS, comment)
        params[COMMENT_ID.name] = COMMENT_ID.bind(comment.id)
        return self._execute_non_query(update_statement("blog_comments", COMMENT_COLUMNS, COMMENT_ID), params)

    def delete_comment(self, comment_id: int) -> bool:
        require_positive(comment_id, "comment_id")
        sql = f"DELETE FROM blog_comments WHERE blog_comment_id = {COMMENT_ID.placeholder};"
        deleted = self._execute_non_query(sql, {"blog_comment_id": comment_id})
        if deleted:
            logger.info(f"Deleted comment #{comment_id}")
        return deleted
