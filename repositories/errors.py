"""
repositories/errors.py
----------------------
Errors raised by the data access layer itself.
Driver errors (psycopg2.OperationalError, IntegrityError, ...) are not
wrapped and reach the caller unchanged.
"""

from typing import Any


class RepositoryError(RuntimeError):
    """Base class for errors raised by repositories."""


class NotFoundError(RepositoryError):
    """A single-row lookup matched nothing."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"no such {entity}: {entity_id}")


class PlayerMismatchError(RepositoryError, ValueError):
    """A user's player reference does not match a stored player."""

    def __init__(self, player_name: str, player_id: Any) -> None:
        self.player_name = player_name
        self.player_id = player_id
        super().__init__(
            f"player name does not match id (name={player_name!r}, id={player_id})"
        )
