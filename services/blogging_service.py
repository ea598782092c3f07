"""
services/blogging_service.py
----------------------------
Management service for the employee blog: articles, the products
an article mentions, and customer comments.
"""

from typing import Optional

from models.blogging import BlogArticle, BlogComment
from models.product import Product
from repositories.base import require_positive, require_present
from repositories.errors import BlogArticleNotFoundError, BlogCommentNotFoundError, ProductNotFoundError
from repositories.factory import NorthwindDataAccessFactory
from repositories.transfer_objects import BlogArticleTransferObject, BlogCommentTransferObject
from utils.logger import get_logger

logger = get_logger(__name__)


class BloggingService:
    """
    Forwards blog operations to the article and comment data-access objects.

    Workflow for product links:
        1. `create_link_to_product` stores an (article, product) pair.
        2. `show_article_products` resolves the linked identifiers to products,
           skipping identifiers whose product no longer exists.
        3. `remove_link_to_product` drops the pair.
    """

    def __init__(self, factory: NorthwindDataAccessFactory):
        require_present(factory, "factory")
        self.factory = factory

    @property
    def articles(self):
        return self.factory.get_blog_article_data_access_object()

    @property
    def comments(self):
        return self.factory.get_blog_comment_data_access_object()

    # ── ARTICLES ──────────────────────────────────────────

    def show_articles(self, offset: int, limit: int) -> list[BlogArticle]:
        return [to.to_model() for to in self.articles.select_articles(offset, limit)]

    def try_show_article(self, article_id: int) -> tuple[bool, Optional[BlogArticle]]:
        require_positive(article_id, "article_id")
        try:
            article = self.articles.find_article(article_id).to_model()
        except BlogArticleNotFoundError:
            logger.debug(f"Blog article #{article_id} not found")
            return False, None
        return True, article

    def create_article(self, article: BlogArticle) -> int:
        require_present(article, "article")
        return self.articles.insert_article(BlogArticleTransferObject.from_model(article))

    def destroy_article(self, article_id: int) -> bool:
        require_positive(article_id, "article_id")
        return self.articles.delete_article(article_id)

    def update_article(self, article_id: int, article: BlogArticle) -> bool:
        require_positive(article_id, "article_id")
        require_present(article, "article")
        if article_id != article.blog_article_id:
            return False
        return self.articles.update_article(BlogArticleTransferObject.from_model(article))

    # ── PRODUCT LINKS ─────────────────────────────────────

    def show_article_products(self, article_id: int) -> list[Product]:
        require_positive(article_id, "article_id")
        products = self.factory.get_product_data_access_object()
        result = []
        for product_id in self.articles.select_article_products(article_id):
            try:
                result.append(products.find_product(product_id).to_model())
            except ProductNotFoundError:
                logger.warning(f"Blog article #{article_id} links missing product #{product_id}")
        return result

    def create_link_to_product(self, article_id: int, product_id: int) -> int:
        return self.articles.insert_article_product(article_id, product_id)

    def remove_link_to_product(self, article_id: int, product_id: int) -> bool:
        return self.articles.delete_article_product(article_id, product_id)

    # ── COMMENTS ──────────────────────────────────────────

    def show_comments(self, article_id: int, offset: int, limit: int) -> list[BlogComment]:
        return [to.to_model() for to in self.comments.select_comments(article_id, offset, limit)]

    def try_show_comment(self, comment_id: int) -> tuple[bool, Optional[BlogComment]]:
        require_positive(comment_id, "comment_id")
        try:
            comment = self.comments.find_comment(comment_id).to_model()
        except BlogCommentNotFoundError:
            return False, None
        return True, comment

    def create_comment(self, article_id: int, comment: BlogComment) -> int:
        """Attach `comment` to `article_id` and return the new comment identifier."""
        require_positive(article_id, "article_id")
        require_present(comment, "comment")
        transfer = BlogCommentTransferObject.from_model(comment)
        transfer.article_id = article_id
        return self.comments.insert_comment(transfer)

    def update_comment(self, comment_id: int, comment: BlogComment) -> bool:
        require_positive(comment_id, "comment_id")
        require_present(comment, "comment")
        if comment_id != comment.blog_comment_id:
            return False
        return self.comments.update_comment(BlogCommentTransferObject.from_model(comment))

    def destroy_comment(self, comment_id: int) -> bool:
        require_positive(comment_id, "comment_id")
        return self.comments.delete_comment(comment_id)
