"""
repositories/game_repo.py
--------------------------
Data access layer for games.
"""

from models.game import Game
from repositories.base import DbHandler
from repositories.errors import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class GameRepository:
    """Repository for CRUD operations on the games table."""

    def __init__(self, handler: DbHandler) -> None:
        self.handler = handler

    def store(self, game: Game) -> int:
        """
        Insert a game under ``game.library_id``.

        Returns:
            The generated game id.
        """
        sql = """
            INSERT INTO games (library_id, game_name, producer, value)
            VALUES (%s, %s, %s, %s)
            RETURNING id;
        """
        game_id = self.handler.query_scalar_int(
            sql, game.library_id, game.name, game.producer, bytes(game.value)
        )
        logger.info(f"Added game #{game_id} ({game.name!r}) to library #{game.library_id}")
        return game_id

    def find_by_id(self, game_id: int) -> Game:
        """
        Fetch a game by primary key.

        Raises:
            NotFoundError: If no game has this id.
        """
        sql = """
            SELECT library_id, game_name, producer, value FROM games
            WHERE id = %s LIMIT 1;
        """
        with self.handler.query(sql, game_id) as row:
            if not row.next():
                raise NotFoundError("game", game_id)
            library_id, name, producer, value = row.scan()

        return Game(
            id=game_id,
            library_id=library_id,
            name=name,
            producer=producer or "",
            # psycopg2 hands BYTEA back as a memoryview
            value=bytes(value) if value is not None else b"",
        )

    def remove(self, game: Game) -> None:
        """Delete a game by id. Deleting a missing game is not an error."""
        deleted = self.handler.execute("DELETE FROM games WHERE id = %s;", game.id)
        if deleted:
            logger.info(f"Removed game #{game.id}")
        else:
            logger.debug(f"Game #{game.id} not found, nothing removed")
