"""
repositories/factory.py
-----------------------
Wires every repository to its storage driver.
"""

from dataclasses import dataclass
from typing import Mapping

from repositories.base import DbHandler
from repositories.game_repo import GameRepository
from repositories.library_repo import LibraryRepository
from repositories.logger_repo import LoggerRepository
from repositories.player_repo import PlayerRepository
from repositories.user_repo import UserRepository

REPOSITORY_NAMES = ("players", "users", "libraries", "games")


@dataclass(frozen=True)
class Repositories:
    """The full set of repositories, already wired to each other."""

    players: PlayerRepository
    users: UserRepository
    libraries: LibraryRepository
    games: GameRepository
    logger: LoggerRepository


def build_repositories(handlers: Mapping[str, DbHandler]) -> Repositories:
    """
    Build all repositories from a mapping of repository name to driver.

    Each entity table may live behind its own driver; usually every name
    maps to the same one.

    Args:
        handlers: Drivers keyed by ``players``, ``users``, ``libraries``
            and ``games``.

    Raises:
        KeyError: If a repository name has no driver.
    """
    missing = [name for name in REPOSITORY_NAMES if name not in handlers]
    if missing:
        raise KeyError(f"no storage driver for: {', '.join(missing)}")

    players = PlayerRepository(handlers["players"])
    users = UserRepository(handlers["users"], players)
    games = GameRepository(handlers["games"])
    libraries = LibraryRepository(handlers["libraries"], users, games)
    return Repositories(
        players=players,
        users=users,
        libraries=libraries,
        games=games,
        logger=LoggerRepository(),
    )


def build_repositories_for(handler: DbHandler) -> Repositories:
    """Build all repositories on a single shared driver."""
    return build_repositories({name: handler for name in REPOSITORY_NAMES})
