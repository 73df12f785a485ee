"""
models/player.py
----------------
Domain model for players.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Player:
    """
    A player identity, shared by any number of users.

    Attributes:
        name: Unique player name.
        id: Database primary key (None for new records).
    """
    name: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
