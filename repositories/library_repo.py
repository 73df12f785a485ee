"""
repositories/library_repo.py
-----------------------------
Data access layer for game libraries.
A library is rebuilt from three reads: its row, its owning user, and
each of its games. The reads are not wrapped in a transaction.
"""

from models.game import Game
from models.library import Library
from models.user import User
from repositories.base import DbHandler, Repository
from repositories.errors import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class LibraryRepository:
    """Repository for the libraries table and the games each library holds."""

    def __init__(
        self,
        handler: DbHandler,
        user_repo: Repository[User],
        game_repo: Repository[Game],
    ) -> None:
        self.handler = handler
        self.user_repo = user_repo
        self.game_repo = game_repo

    def store(self, library: Library) -> int:
        """
        Insert a library owned by ``library.user``.

        The user is not looked up first; a missing user surfaces as the
        driver's foreign key error. ``library.games`` is not written.

        Returns:
            The generated library id.
        """
        library_id = self.handler.query_scalar_int(
            "INSERT INTO libraries (user_id) VALUES (%s) RETURNING id;",
            library.user.id,
        )
        logger.info(f"Added library #{library_id} for user #{library.user.id}")
        return library_id

    def remove(self, library: Library) -> None:
        """
        Delete a library by id. Its games are kept.
        Deleting a missing library is not an error.
        """
        deleted = self.handler.execute(
            "DELETE FROM libraries WHERE id = %s;", library.id
        )
        if deleted:
            logger.info(f"Removed library #{library.id}")
        else:
            logger.debug(f"Library #{library.id} not found, nothing removed")

    def find_by_id(self, library_id: int) -> Library:
        """
        Fetch a library with its owner and games.

        Games come back in insertion order. A library without games
        has an empty ``games`` list.

        Raises:
            NotFoundError: If the library, its user, or one of its games
                disappears while being read.
        """
        sql = "SELECT user_id FROM libraries WHERE id = %s LIMIT 1;"
        with self.handler.query(sql, library_id) as row:
            if not row.next():
                raise NotFoundError("library", library_id)
            (user_id,) = row.scan()

        user = self.user_repo.find_by_id(user_id)
        library = Library(id=library_id, user=user)

        game_ids = []
        sql = "SELECT id FROM games WHERE library_id = %s ORDER BY id;"
        with self.handler.query(sql, library_id) as row:
            while row.next():
                (game_id,) = row.scan()
                game_ids.append(game_id)

        for game_id in game_ids:
            library.games.append(self.game_repo.find_by_id(game_id))
        return library

    def library_existed(self, library_id: int) -> bool:
        """Return True if a library with this id is stored."""
        sql = "SELECT id FROM libraries WHERE id = %s LIMIT 1;"
        with self.handler.query(sql, library_id) as row:
            return row.next()
