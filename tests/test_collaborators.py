"""Repositories built over hand-written collaborators instead of the real ones."""

import pytest

from models.game import Game
from models.library import Library
from models.player import Player
from models.user import User
from repositories import LibraryRepository, PlayerMismatchError, UserRepository


class StubPlayers:
    def __init__(self, known):
        self.known = known
        self.stored = []

    def store(self, player):
        self.stored.append(player)

    def find_by_id(self, player_id):
        return self.known[player_id]

    def name_matches_id(self, player_name, player_id):
        player = self.known.get(player_id)
        return player is not None and player.name == player_name


class StubById:
    def __init__(self, entities):
        self.entities = entities
        self.requested = []

    def store(self, entity):
        raise AssertionError("store should not be called")

    def remove(self, entity):
        raise AssertionError("remove should not be called")

    def find_by_id(self, entity_id):
        self.requested.append(entity_id)
        return self.entities[entity_id]


def test_user_store_consults_player_collaborator(handler):
    players = StubPlayers({1: Player(id=1, name="alice")})
    # users.player_id is a foreign key, so the player row must exist
    handler.execute("INSERT INTO players (player_name) VALUES (%s);", "alice")
    users = UserRepository(handler, players)

    user_id = users.store(User(name="alice_u", player=Player(id=1, name="alice")))

    assert user_id == 1
    assert players.stored == [Player(id=1, name="alice")]


def test_user_store_mismatch_from_collaborator_writes_nothing(handler):
    players = StubPlayers({})
    users = UserRepository(handler, players)

    with pytest.raises(PlayerMismatchError):
        users.store(User(name="bob_u", player=Player(id=1, name="bob")))

    assert handler.count("users") == 0
    assert players.stored == []


def test_user_find_by_id_hydrates_from_collaborator(handler):
    handler.execute("INSERT INTO players (player_name) VALUES (%s);", "alice")
    handler.execute(
        "INSERT INTO users (user_name, player_id, personal_info) VALUES (%s, %s, %s);",
        "alice_u", 1, "hi",
    )
    stub_player = Player(id=1, name="stubbed alice")
    users = UserRepository(handler, StubPlayers({1: stub_player}))

    assert users.find_by_id(1).player is stub_player


def test_library_find_by_id_hydrates_from_collaborators(handler):
    handler.execute("INSERT INTO players (player_name) VALUES (%s);", "alice")
    handler.execute(
        "INSERT INTO users (user_name, player_id) VALUES (%s, %s);", "alice_u", 1
    )
    handler.execute("INSERT INTO libraries (user_id) VALUES (%s);", 1)
    for name in ("Chess", "Go"):
        handler.execute(
            "INSERT INTO games (library_id, game_name) VALUES (%s, %s);", 1, name
        )
    owner = User(id=1, name="alice_u", player=Player(id=1, name="alice"))
    games = StubById({
        1: Game(id=1, library_id=1, name="Chess"),
        2: Game(id=2, library_id=1, name="Go"),
    })
    libraries = LibraryRepository(handler, StubById({1: owner}), games)

    library = libraries.find_by_id(1)

    assert library == Library(id=1, user=owner, games=[games.entities[1], games.entities[2]])
    assert games.requested == [1, 2]
