"""
db/connection.py
----------------
PostgreSQL storage driver.
Wraps a psycopg2 SimpleConnectionPool behind three operations
(execute / query / query_scalar_int) and a row cursor.
"""

from typing import Any, Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX_CONN, DB_POOL_MIN_CONN
from utils.logger import get_logger

logger = get_logger(__name__)


class PostgresqlRow:
    """
    Cursor over the result of a query.

    Holds a pooled connection until closed. Use it as a context manager
    so the connection goes back to the pool on every exit path::

        with handler.query("SELECT ...", arg) as row:
            if row.next():
                value, = row.scan()
    """

    def __init__(self, handler: "PostgresqlHandler", conn, cursor) -> None:
        self._handler = handler
        self._conn = conn
        self._cursor = cursor
        self._current: Optional[tuple] = None

    def next(self) -> bool:
        """Advance to the next row. Returns False once rows are exhausted."""
        if self._cursor is None:
            return False
        self._current = self._cursor.fetchone()
        return self._current is not None

    def scan(self) -> tuple:
        """
        Return the values of the current row.

        Raises:
            RuntimeError: If next() has not produced a row.
        """
        if self._current is None:
            raise RuntimeError("scan called without a current row")
        return tuple(self._current)

    def close(self) -> None:
        """Close the cursor and release the connection. Safe to call twice."""
        if self._cursor is None:
            return
        try:
            self._cursor.close()
        finally:
            self._cursor = None
            self._current = None
            self._handler.release_connection(self._conn)
            self._conn = None

    def __enter__(self) -> "PostgresqlRow":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class PostgresqlHandler:
    """
    Storage driver bound to one PostgreSQL database.

    Every statement takes positional ``%s`` placeholders; values are always
    passed as bound parameters. Engine errors are rolled back and re-raised
    unchanged.
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN_CONN,
        max_conn: int = DB_POOL_MAX_CONN,
    ) -> None:
        """
        Open the connection pool.

        Args:
            dsn: libpq connection string or URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        try:
            self._pool: Optional[pool.SimpleConnectionPool] = pool.SimpleConnectionPool(
                min_conn, max_conn, dsn
            )
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def get_connection(self):
        """
        Get a connection from the pool.

        Raises:
            RuntimeError: If the pool has been closed.
        """
        if self._pool is None:
            raise RuntimeError("Database pool is closed.")
        return self._pool.getconn()

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        if self._pool is not None and conn is not None:
            self._pool.putconn(conn)

    def execute(self, statement: str, *args: Any) -> int:
        """
        Run a write statement and commit it.

        Returns:
            Number of rows affected.
        """
        conn = self.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(statement, args or None)
                affected = cur.rowcount
            conn.commit()
            return affected
        except Exception as e:
            conn.rollback()
            logger.error(f"Statement failed: {e}")
            raise
        finally:
            self.release_connection(conn)

    def query(self, statement: str, *args: Any) -> PostgresqlRow:
        """
        Run a read statement.

        Returns:
            A PostgresqlRow the caller must close.
        """
        conn = self.get_connection()
        cur = None
        try:
            cur = conn.cursor()
            cur.execute(statement, args or None)
            return PostgresqlRow(self, conn, cur)
        except Exception as e:
            if cur is not None:
                cur.close()
            conn.rollback()
            self.release_connection(conn)
            logger.error(f"Query failed: {e}")
            raise

    def query_scalar_int(self, statement: str, *args: Any) -> int:
        """
        Run a statement returning a single integer, e.g. ``INSERT ... RETURNING id``.

        Raises:
            LookupError: If the statement produced no row.
        """
        conn = self.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(statement, args or None)
                row = cur.fetchone()
            if row is None:
                raise LookupError("statement returned no row")
            conn.commit()
            return int(row[0])
        except Exception as e:
            conn.rollback()
            logger.error(f"Scalar query failed: {e}")
            raise
        finally:
            self.release_connection(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")
