"""
Service layer for products.

``ProductService`` is the resource store: plain CRUD against the
``products`` table.  It knows nothing about tokens or HTTP.  A missing
id is reported by raising ``ProductNotFound``.

All queries use parameterized statements.  Each call opens and closes
its own connection, so consistency between concurrent requests is left
to SQLite.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from ..core.db import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER, get_connection
from ..core.errors import ProductNotFound
from ..schemas.product import ProductData, ProductRead

logger = logging.getLogger(__name__)


class ProductService:
    """SQLite-backed product store."""

    @classmethod
    async def list_products(cls, limit: int = 100, offset: int = 0) -> List[ProductRead]:
        """Return products ordered by id."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, name, maker, price FROM products ORDER BY id ASC LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
            return [cls._row_to_product(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_product(cls, product_id: int) -> ProductRead:
        cls._check_id(product_id)
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, maker, price FROM products WHERE id = ?",
                (product_id,),
            ).fetchone()
            if not row:
                raise ProductNotFound(product_id)
            return cls._row_to_product(row)
        finally:
            conn.close()

    @classmethod
    async def create_product(cls, data: ProductData) -> ProductRead:
        """Insert a new product and return it with its assigned id."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO products (name, maker, price) VALUES (?, ?, ?)",
                (data.name, data.maker, data.price),
            )
            product_id = cursor.lastrowid
            conn.commit()
            logger.info("Created product %s", product_id)
            return ProductRead(id=product_id, **data.model_dump())
        finally:
            conn.close()

    @classmethod
    async def update_product(cls, product_id: int, data: ProductData) -> ProductRead:
        """Replace name, maker and price of an existing product."""
        cls._check_id(product_id)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE products
                SET name = ?, maker = ?, price = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (data.name, data.maker, data.price, product_id),
            )
            if cursor.rowcount == 0:
                raise ProductNotFound(product_id)
            conn.commit()
            logger.info("Updated product %s", product_id)
            return ProductRead(id=product_id, **data.model_dump())
        finally:
            conn.close()

    @classmethod
    async def delete_product(cls, product_id: int) -> None:
        cls._check_id(product_id)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM products WHERE id = ?", (product_id,))
            if cursor.rowcount == 0:
                raise ProductNotFound(product_id)
            conn.commit()
            logger.info("Deleted product %s", product_id)
        finally:
            conn.close()

    @staticmethod
    def _check_id(product_id: int) -> None:
        """Ids SQLite cannot represent can never exist."""
        if not SQLITE_MIN_INTEGER <= product_id <= SQLITE_MAX_INTEGER:
            raise ProductNotFound(product_id)

    @staticmethod
    def _row_to_product(row: sqlite3.Row) -> ProductRead:
        return ProductRead(
            id=row["id"],
            name=row["name"],
            maker=row["maker"],
            price=row["price"],
        )
