"""
repositories/player_repo.py
----------------------------
Data access layer for player records.
"""

from models.player import Player
from repositories.base import DbHandler
from repositories.errors import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class PlayerRepository:
    """Repository for the players table. Players are never updated or removed here."""

    def __init__(self, handler: DbHandler) -> None:
        self.handler = handler

    def store(self, player: Player) -> None:
        """
        Insert a player unless one with the same name already exists.

        An existing player is left untouched, so storing the same
        player twice is a no-op.
        """
        if self._player_existed(player.name):
            logger.debug(f"Player {player.name!r} already stored")
            return
        self.handler.execute(
            "INSERT INTO players (player_name) VALUES (%s);", player.name
        )
        logger.info(f"Added player {player.name!r}")

    def find_by_id(self, player_id: int) -> Player:
        """
        Fetch a player by primary key.

        Raises:
            NotFoundError: If no player has this id.
        """
        sql = "SELECT player_name FROM players WHERE id = %s LIMIT 1;"
        with self.handler.query(sql, player_id) as row:
            if not row.next():
                raise NotFoundError("player", player_id)
            (name,) = row.scan()
        return Player(id=player_id, name=name)

    def name_matches_id(self, player_name: str, player_id: int) -> bool:
        """Return True if a stored player has exactly this id and name."""
        sql = "SELECT id FROM players WHERE id = %s AND player_name = %s LIMIT 1;"
        with self.handler.query(sql, player_id, player_name) as row:
            return row.next()

    def _player_existed(self, player_name: str) -> bool:
        sql = "SELECT player_name FROM players WHERE player_name = %s LIMIT 1;"
        with self.handler.query(sql, player_name) as row:
            return row.next()
