"""
models/game.py
--------------
Domain model for games held in a library.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Game:
    """
    A single game entry.

    Attributes:
        library_id: The library this game belongs to.
        name: Game title.
        producer: Studio or publisher name.
        value: Raw value payload, stored byte-for-byte (e.g. b"9.99").
        id: Database primary key (None for new records).
    """
    library_id: int
    name: str
    producer: str = ""
    value: bytes = b""
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} by {self.producer}"
