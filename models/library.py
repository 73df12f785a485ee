"""
models/library.py
-----------------
Domain model for a user's game library.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.game import Game
from models.user import User


@dataclass
class Library:
    """
    A collection of games owned by one user.

    Attributes:
        user: Owning user.
        games: Games in insertion order.
        id: Database primary key (None for new records).
    """
    user: User
    games: list[Game] = field(default_factory=list)
    id: Optional[int] = None
