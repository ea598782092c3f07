"""
models/blogging.py
------------------
Domain models for the employee blog: articles, the products an
article mentions, and customer comments.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class BlogArticle:
    """
    Represents an article published by an employee.

    Attributes:
        blog_article_id: Database primary key (0 for new records).
        title: Headline, up to 50 characters.
        body: Article text, up to 4000 characters.
        publication_date: Date the article was published.
        employee_id: Author's employee identifier.
    """
    title: str
    body: str
    employee_id: int
    publication_date: date = field(default_factory=date.today)
    blog_article_id: int = 0


@dataclass
class BlogArticleProduct:
    """A link between an article and a product it mentions."""
    article_id: int
    product_id: int
    blog_article_product_id: int = 0


@dataclass
class BlogComment:
    """
    Represents a customer comment on an article.

    Attributes:
        blog_comment_id: Database primary key (0 for new records).
        article_id: Commented article.
        customer_id: Commenting customer.
        text: Comment text, up to 500 characters.
    """
    article_id: int
    customer_id: int
    text: str
    blog_comment_id: int = 0

    def __str__(self) -> str:
        preview = self.text if len(self.text) <= 40 else self.text[:37] + "..."
        return f"#{self.blog_comment_id} on article {self.article_id}: {preview}"
