"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from a storage driver and return domain model objects,
calling each other to hydrate nested entities (a user's player, a library's games).
"""

from repositories.errors import NotFoundError, PlayerMismatchError, RepositoryError
from repositories.factory import Repositories, build_repositories, build_repositories_for
from repositories.game_repo import GameRepository
from repositories.library_repo import LibraryRepository
from repositories.logger_repo import LoggerRepository
from repositories.player_repo import PlayerRepository
from repositories.user_repo import UserRepository

__all__ = [
    "GameRepository",
    "LibraryRepository",
    "LoggerRepository",
    "NotFoundError",
    "PlayerMismatchError",
    "PlayerRepository",
    "Repositories",
    "RepositoryError",
    "UserRepository",
    "build_repositories",
    "build_repositories_for",
]
