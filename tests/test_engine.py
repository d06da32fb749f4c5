"""
Tests for the GameEngine service and its stores.
"""

import pytest

from monopoly_engine import GameConfig, GameEngine, GameNotFoundError, GameStatus
from monopoly_engine.agents import Agent
from monopoly_engine.cards import CHANCE_CARDS, COMMUNITY_CHEST_CARDS
from monopoly_engine.config import PLAYER_COLORS
from monopoly_engine.data import SqlGameStore, create_db_engine, create_session_factory


class BrokenAgent(Agent):
    name = "broken"

    def take_turn(self, game):
        raise RuntimeError("agent crashed")


def test_create_game_seats_humans_then_cpus(engine):
    game = engine.create_game("room1", ["Ann", ""], cpu_count=2)

    assert [p.player_id for p in game.players] == ["room1-0", "room1-1", "room1-cpu-0", "room1-cpu-1"]
    assert [p.name for p in game.players] == ["Ann", "Player 2", "CPU 1", "CPU 2"]
    assert [p.is_cpu for p in game.players] == [False, False, True, True]
    assert [p.color for p in game.players] == PLAYER_COLORS[:4]
    assert all(p.money == 1500 and p.position == 0 for p in game.players)
    assert game.game_status == GameStatus.PLAYING
    assert game.current_player_index == 0
    assert game.dice == (0, 0)
    assert len(game.chance_deck) == len(CHANCE_CARDS)
    assert len(game.community_chest_deck) == len(COMMUNITY_CHEST_CARDS)
    assert game.game_log.entries == ["Game started with 4 players!"]


def test_get_game_state(engine):
    created = engine.create_game("room1", ["Ann", "Ben"])

    loaded = engine.get_game_state("room1")

    assert loaded is not created
    assert loaded.game_log.entries == created.game_log.entries
    assert loaded.last_update == created.last_update


def test_get_unknown_game(engine):
    assert engine.get_game_state("nope") is None


def test_execute_on_unknown_game_raises(engine):
    with pytest.raises(GameNotFoundError) as exc_info:
        engine.execute_action("nope", "rollDice")
    assert exc_info.value.game_id == "nope"


def test_execute_action_persists(engine):
    engine.create_game("room1", ["Ann", "Ben"])

    game = engine.execute_action("room1", "endTurn")

    assert game.current_player.name == "Ben"
    assert engine.get_game_state("room1").current_player.name == "Ben"


def test_last_update_strictly_increases(engine):
    updates = [engine.create_game("room1", ["Ann", "Ben"]).last_update]
    for _ in range(5):
        updates.append(engine.execute_action("room1", "endTurn").last_update)

    assert all(later > earlier for earlier, later in zip(updates, updates[1:]))


def test_finished_game_is_not_touched(engine):
    engine.create_game("room1", ["Ann", "Ben"])
    snapshot = engine.store.load("room1")
    snapshot["players"][1]["money"] = -5
    engine.store.save("room1", snapshot)

    ended = engine.execute_action("room1", "endTurn")
    assert ended.game_status == GameStatus.ENDED
    assert ended.winner_id == "room1-0"
    stored = engine.store.load("room1")

    again = engine.execute_action("room1", "rollDice")

    assert again.last_update == ended.last_update
    assert engine.store.load("room1") == stored


def test_failed_action_leaves_store_untouched(game_config):
    engine = GameEngine(config=game_config, agent=BrokenAgent())
    engine.create_game("room1", ["Ann"], cpu_count=1)
    before = engine.store.load("room1")

    with pytest.raises(RuntimeError):
        engine.execute_action("room1", "endTurn")

    assert engine.store.load("room1") == before


def test_stored_snapshot_is_a_copy(engine):
    game = engine.create_game("room1", ["Ann", "Ben"])
    game.players[0].money = 0

    assert engine.get_game_state("room1").players[0].money == 1500


def test_seeded_engines_replay_identically():
    first = GameEngine(config=GameConfig(seed=7))
    second = GameEngine(config=GameConfig(seed=7))

    for engine in (first, second):
        engine.create_game("room1", ["Ann", "Ben"])
        engine.execute_action("room1", "rollDice")

    assert first.store.load("room1")["game_log"] == second.store.load("room1")["game_log"]
    assert first.store.load("room1")["chance_deck"] == second.store.load("room1")["chance_deck"]


def test_games_are_independent(engine):
    engine.create_game("a", ["Ann", "Ben"])
    engine.create_game("b", ["Cat", "Dan"])

    engine.execute_action("a", "endTurn")

    assert engine.get_game_state("a").current_player_index == 1
    assert engine.get_game_state("b").current_player_index == 0


def test_sql_store(game_config):
    store = SqlGameStore(create_session_factory(create_db_engine("sqlite://")))
    engine = GameEngine(store=store, config=game_config)

    engine.create_game("room1", ["Ann", "Ben"])
    engine.execute_action("room1", "endTurn")

    loaded = engine.get_game_state("room1")
    assert loaded.current_player.name == "Ben"
    assert loaded.game_log.entries[-1] == "It's now Ben's turn."
    assert store.load("missing") is None


def test_one_lock_per_game(engine):
    assert engine._lock_for("a") is engine._lock_for("a")
    assert engine._lock_for("a") is not engine._lock_for("b")
