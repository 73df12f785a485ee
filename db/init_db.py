"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import PostgresqlHandler
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Players table: unique player identities
CREATE TABLE IF NOT EXISTS players (
    id              SERIAL PRIMARY KEY,
    player_name     VARCHAR(100) UNIQUE NOT NULL
);

-- Users table: application users, each bound to a player
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    user_name       VARCHAR(100) NOT NULL,
    player_id       INT NOT NULL REFERENCES players(id),
    personal_info   TEXT DEFAULT ''
);

-- Libraries table: one row per game library, owned by a user
CREATE TABLE IF NOT EXISTS libraries (
    id              SERIAL PRIMARY KEY,
    user_id         INT NOT NULL REFERENCES users(id)
);

-- Games table: library_id has no foreign key, removing a library
-- leaves its games in place
CREATE TABLE IF NOT EXISTS games (
    id              SERIAL PRIMARY KEY,
    library_id      INT NOT NULL,
    game_name       VARCHAR(255) NOT NULL,
    producer        VARCHAR(255),
    value           BYTEA
);

CREATE INDEX IF NOT EXISTS idx_games_library ON games(library_id);
CREATE INDEX IF NOT EXISTS idx_users_name ON users(user_name);
"""


def create_tables(handler: PostgresqlHandler) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    handler.execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    db_handler = PostgresqlHandler()
    try:
        create_tables(db_handler)
    finally:
        db_handler.close()
    print("Database schema created successfully.")
