"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
A user is stored only once its player reference is proven valid.
"""

from models.user import User
from repositories.base import DbHandler, PlayerLookup
from repositories.errors import NotFoundError, PlayerMismatchError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, handler: DbHandler, player_repo: PlayerLookup) -> None:
        """
        Args:
            handler: Storage driver for the users table.
            player_repo: Repository used to validate and hydrate players.
        """
        self.handler = handler
        self.player_repo = player_repo

    # ── CREATE ────────────────────────────────────────────

    def store(self, user: User) -> int:
        """
        Insert a new user.

        The user's player must already be stored with the same id and
        name. The trailing player store is a confirmation and inserts
        nothing for a validated player.

        Args:
            user: The User to persist. Its ``id`` is ignored.

        Returns:
            The generated user id.

        Raises:
            PlayerMismatchError: If ``user.player`` does not match a stored player.
        """
        player = user.player
        if not self.player_repo.name_matches_id(player.name, player.id):
            logger.error(
                f"Refusing to store user {user.name!r}: player {player.name!r} "
                f"does not match id {player.id}"
            )
            raise PlayerMismatchError(player.name, player.id)

        sql = """
            INSERT INTO users (user_name, player_id, personal_info)
            VALUES (%s, %s, %s)
            RETURNING id;
        """
        user_id = self.handler.query_scalar_int(
            sql, user.name, player.id, user.personal_info
        )
        self.player_repo.store(player)
        logger.info(f"Added user #{user_id} ({user.name!r}) for player #{player.id}")
        return user_id

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, user_id: int) -> User:
        """
        Fetch a user and its player.

        Raises:
            NotFoundError: If the user, or the player it references, is missing.
        """
        sql = """
            SELECT user_name, player_id, personal_info FROM users
            WHERE id = %s LIMIT 1;
        """
        with self.handler.query(sql, user_id) as row:
            if not row.next():
                raise NotFoundError("user", user_id)
            user_name, player_id, personal_info = row.scan()

        player = self.player_repo.find_by_id(player_id)
        return User(
            id=user_id,
            name=user_name,
            player=player,
            personal_info=personal_info or "",
        )

    def user_existed(self, user_name: str) -> bool:
        """Return True if at least one user has this name."""
        sql = "SELECT user_name FROM users WHERE user_name = %s LIMIT 1;"
        with self.handler.query(sql, user_name) as row:
            return row.next()

    def load_info(self, user: User) -> str:
        """
        Read the personal info of a stored user.

        Raises:
            NotFoundError: If no user has ``user.id``.
        """
        sql = "SELECT personal_info FROM users WHERE id = %s;"
        with self.handler.query(sql, user.id) as row:
            if not row.next():
                raise NotFoundError("user", user.id)
            (info,) = row.scan()
        return info or ""

    # ── UPDATE ────────────────────────────────────────────

    def store_info(self, user: User, info: str) -> None:
        """Overwrite the personal info of the user with ``user.id``."""
        self.handler.execute(
            "UPDATE users SET personal_info = %s WHERE id = %s;", info, user.id
        )
        logger.info(f"Updated personal info for user #{user.id}")

    # ── DELETE ────────────────────────────────────────────

    def remove(self, user: User) -> None:
        """Delete a user by id. Deleting a missing user is not an error."""
        deleted = self.handler.execute("DELETE FROM users WHERE id = %s;", user.id)
        if deleted:
            logger.info(f"Removed user #{user.id}")
        else:
            logger.debug(f"User #{user.id} not found, nothing removed")
