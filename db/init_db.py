"""
db/init_db.py
-------------
Creates the Northwind schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Employees: staff records, reports_to points at another employee
CREATE TABLE IF NOT EXISTS employees (
    employee_id         SERIAL PRIMARY KEY,
    last_name           VARCHAR(20) NOT NULL,
    first_name          VARCHAR(10) NOT NULL,
    title               VARCHAR(30),
    title_of_courtesy   VARCHAR(25),
    birth_date          DATE,
    hire_date           DATE,
    address             VARCHAR(60),
    city                VARCHAR(15),
    region              VARCHAR(15),
    postal_code         VARCHAR(10),
    country             VARCHAR(15),
    home_phone          VARCHAR(24),
    extension           VARCHAR(4),
    photo               BYTEA,
    notes               TEXT,
    reports_to          INT,
    photo_path          VARCHAR(255)
);

-- Categories: product categories (picture is never touched by this code)
CREATE TABLE IF NOT EXISTS categories (
    category_id         SERIAL PRIMARY KEY,
    category_name       VARCHAR(15) NOT NULL,
    description         TEXT,
    picture             BYTEA
);

-- Products
CREATE TABLE IF NOT EXISTS products (
    product_id          SERIAL PRIMARY KEY,
    product_name        VARCHAR(40) NOT NULL,
    supplier_id         INT,
    category_id         INT,
    quantity_per_unit   VARCHAR(20),
    unit_price          NUMERIC(19,4) DEFAULT 0,
    units_in_stock      SMALLINT DEFAULT 0,
    units_on_order      SMALLINT DEFAULT 0,
    reorder_level       SMALLINT DEFAULT 0,
    discontinued        BOOLEAN NOT NULL DEFAULT FALSE
);

-- Blog articles written by employees
CREATE TABLE IF NOT EXISTS blog_articles (
    blog_article_id     SERIAL PRIMARY KEY,
    title               VARCHAR(50) NOT NULL,
    body                VARCHAR(4000) NOT NULL,
    publication_date    DATE NOT NULL,
    employee_id         INT NOT NULL
);

-- Products mentioned by a blog article
CREATE TABLE IF NOT EXISTS blog_article_products (
    blog_article_product_id SERIAL PRIMARY KEY,
    article_id          INT NOT NULL,
    product_id          INT NOT NULL
);

-- Customer comments on a blog article
CREATE TABLE IF NOT EXISTS blog_comments (
    blog_comment_id     SERIAL PRIMARY KEY,
    article_id          INT NOT NULL,
    customer_id         INT NOT NULL,
    text                VARCHAR(500) NOT NULL
);

-- Indexes for the lookups the data-access objects issue
CREATE INDEX IF NOT EXISTS idx_products_category ON products(category_id);
CREATE INDEX IF NOT EXISTS idx_products_name ON products(product_name);
CREATE INDEX IF NOT EXISTS idx_categories_name ON categories(category_name);
CREATE INDEX IF NOT EXISTS idx_article_products_article ON blog_article_products(article_id);
CREATE INDEX IF NOT EXISTS idx_comments_article ON blog_comments(article_id);
"""


def create_tables(conn=None) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        conn: Optional open connection; when omitted one is borrowed
            from the pool and released afterwards.
    """
    owned = conn is None
    if owned:
        conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        if owned:
            release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    create_tables()
    close_pool()
    print("Northwind schema created successfully.")
