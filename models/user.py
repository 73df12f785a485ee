"""
models/user.py
--------------
Domain model for application users.
"""

from dataclasses import dataclass
from typing import Optional

from models.player import Player


@dataclass
class User:
    """
    An application user bound to an existing player.

    Attributes:
        name: User name.
        player: The player this user plays as. Its id and name must match
            a stored player before the user can be stored.
        personal_info: Free-form text owned by the user.
        id: Database primary key (None for new records).
    """
    name: str
    player: Player
    personal_info: str = ""
    id: Optional[int] = None
