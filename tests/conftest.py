import os

# Captured before anything imports config, whose load_dotenv() fills
# os.environ from .env. Only an explicit TEST_DATABASE_URL selects Postgres;
# the fixture truncates every table in it.
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")

import sqlite3  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402

from repositories import build_repositories_for  # noqa: E402

SQLITE_SCHEMA = """
CREATE TABLE players (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    player_name     VARCHAR(100) UNIQUE NOT NULL
);
CREATE TABLE users (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    user_name       VARCHAR(100) NOT NULL,
    player_id       INT NOT NULL REFERENCES players(id),
    personal_info   TEXT DEFAULT ''
);
CREATE TABLE libraries (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id         INT NOT NULL REFERENCES users(id)
);
CREATE TABLE games (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    library_id      INT NOT NULL,
    game_name       VARCHAR(255) NOT NULL,
    producer        VARCHAR(255),
    value           BLOB
);
"""


class SqliteRow:
    """Row cursor with the same contract as db.connection.PostgresqlRow."""

    def __init__(self, handler, cursor):
        self._handler = handler
        self._cursor = cursor
        self._current = None

    def next(self) -> bool:
        if self._cursor is None:
            return False
        self._current = self._cursor.fetchone()
        return self._current is not None

    def scan(self) -> tuple:
        if self._current is None:
            raise RuntimeError("scan called without a current row")
        return tuple(self._current)

    def close(self) -> None:
        if self._cursor is not None:
            self._cursor.close()
            self._cursor = None
            self._handler.open_rows -= 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class SqliteHandler:
    """In-memory SQLite driver translating ``%s`` placeholders to ``?``."""

    def __init__(self):
        self.conn = sqlite3.connect(":memory:")
        self.conn.execute("PRAGMA foreign_keys = ON")
        self.conn.executescript(SQLITE_SCHEMA)
        self.open_rows = 0

    @staticmethod
    def _translate(statement: str) -> str:
        return statement.replace("%s", "?")

    def execute(self, statement: str, *args: Any) -> int:
        try:
            cur = self.conn.execute(self._translate(statement), args)
            affected = cur.rowcount
            self.conn.commit()
            return affected
        except sqlite3.Error:
            self.conn.rollback()
            raise

    def query(self, statement: str, *args: Any) -> SqliteRow:
        cur = self.conn.execute(self._translate(statement), args)
        self.open_rows += 1
        return SqliteRow(self, cur)

    def query_scalar_int(self, statement: str, *args: Any) -> int:
        try:
            cur = self.conn.execute(self._translate(statement), args)
            row = cur.fetchone()
            cur.close()
            if row is None:
                raise LookupError("statement returned no row")
            self.conn.commit()
            return int(row[0])
        except sqlite3.Error:
            self.conn.rollback()
            raise

    def count(self, table: str) -> int:
        return self.conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

    def close(self) -> None:
        self.conn.close()


def _postgres_handler(url: str):
    from db.connection import PostgresqlHandler
    from db.init_db import create_tables

    class PostgresTestHandler(PostgresqlHandler):
        def count(self, table: str) -> int:
            with self.query(f"SELECT COUNT(*) FROM {table}") as row:
                row.next()
                return row.scan()[0]

    pg = PostgresTestHandler(url)
    create_tables(pg)
    pg.execute("TRUNCATE games, libraries, users, players RESTART IDENTITY CASCADE;")
    return pg


@pytest.fixture()
def handler():
    # Use a dedicated Postgres DB when one is configured:
    # TEST_DATABASE_URL=postgresql://... pytest
    url = TEST_DATABASE_URL
    h = _postgres_handler(url) if url else SqliteHandler()
    try:
        yield h
    finally:
        assert getattr(h, "open_rows", 0) == 0, "a row cursor was left open"
        h.close()


@pytest.fixture()
def repos(handler):
    return build_repositories_for(handler)
