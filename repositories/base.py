"""
repositories/base.py
--------------------
Structural contracts shared by the data access layer.
Repositories depend on these protocols rather than on a concrete driver,
so any handler with the same shape (PostgreSQL, an in-memory test double)
can back them.
"""

from typing import Any, Protocol, TypeVar

from models.player import Player

T = TypeVar("T")


class Row(Protocol):
    """Cursor returned by DbHandler.query. Must be closed by the caller."""

    def next(self) -> bool:
        ...

    def scan(self) -> tuple:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> "Row":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...


class DbHandler(Protocol):
    """Storage driver taking positional ``%s`` parameters."""

    def execute(self, statement: str, *args: Any) -> int:
        """Run a write statement, return the affected row count."""
        ...

    def query(self, statement: str, *args: Any) -> Row:
        """Run a read statement, return a row cursor."""
        ...

    def query_scalar_int(self, statement: str, *args: Any) -> int:
        """Run a statement yielding one integer, e.g. INSERT ... RETURNING id."""
        ...


class Repository(Protocol[T]):
    """Store / remove / find-by-id capability shared by entity repositories."""

    def store(self, entity: T) -> Any:
        ...

    def remove(self, entity: T) -> None:
        ...

    def find_by_id(self, entity_id: int) -> T:
        ...


class PlayerLookup(Protocol):
    """What a user repository needs from its player collaborator."""

    def store(self, player: Player) -> None:
        ...

    def find_by_id(self, player_id: int) -> Player:
        ...

    def name_matches_id(self, player_name: str, player_id: int) -> bool:
        ...
