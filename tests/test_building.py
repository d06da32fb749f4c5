"""
Tests for building and selling houses and hotels.
"""

import random

from monopoly_engine.economy import build_house, can_build_house, mortgage_property, sell_house


def test_cannot_build_without_monopoly(basic_game, give):
    give(basic_game, "g1-0", 1)

    assert not can_build_house(basic_game, basic_game.current_player, 1)
    assert not build_house(basic_game, 1)
    assert basic_game.board[1].houses == 0


def test_even_build_rule(basic_game, give):
    give(basic_game, "g1-0", 1, 3)
    alice = basic_game.current_player

    assert build_house(basic_game, 1)
    assert basic_game.board[1].houses == 1
    assert alice.money == 1450

    assert not build_house(basic_game, 1)
    assert basic_game.board[1].houses == 1
    assert alice.money == 1450
    assert basic_game.game_log.entries[-1] == "Cannot build on Mediterranean Avenue. Must build evenly."

    assert build_house(basic_game, 3)
    assert build_house(basic_game, 1)
    assert basic_game.board[1].houses == 2


def test_mortgaged_sibling_does_not_block_building(basic_game, give):
    give(basic_game, "g1-0", 6, 8, 9)
    assert mortgage_property(basic_game, 9)

    assert build_house(basic_game, 6)
    assert basic_game.board[6].houses == 1


def test_cannot_build_on_mortgaged_street(basic_game, give):
    give(basic_game, "g1-0", 6, 8, 9)
    mortgage_property(basic_game, 9)

    assert not build_house(basic_game, 9)
    assert basic_game.board[9].houses == 0
    assert basic_game.game_log.entries[-1] == "Cannot build on Connecticut Avenue while it is mortgaged."


def test_cannot_build_without_cash(basic_game, give):
    give(basic_game, "g1-0", 1, 3)
    basic_game.current_player.money = 49

    assert not build_house(basic_game, 1)
    assert basic_game.current_player.money == 49


def test_hotel_is_the_limit(basic_game, give):
    give(basic_game, "g1-0", 1, 3)
    basic_game.board[1].houses = 5
    basic_game.board[3].houses = 5

    assert not build_house(basic_game, 1)
    assert basic_game.board[1].houses == 5
    assert basic_game.game_log.entries[-1] == "Mediterranean Avenue already has a hotel."


def test_cannot_build_on_station(basic_game, give):
    give(basic_game, "g1-0", 5)

    assert not build_house(basic_game, 5)


def test_sell_evenly_for_half_cost(basic_game, give):
    give(basic_game, "g1-0", 1, 3)
    basic_game.board[1].houses = 2
    basic_game.board[3].houses = 1
    alice = basic_game.current_player

    assert not sell_house(basic_game, 3)
    assert basic_game.board[3].houses == 1

    assert sell_house(basic_game, 1)
    assert basic_game.board[1].houses == 1
    assert alice.money == 1525


def test_cannot_sell_without_houses(basic_game, give):
    give(basic_game, "g1-0", 1, 3)

    assert not sell_house(basic_game, 1)
    assert basic_game.current_player.money == 1500


def test_random_build_and_sell_keeps_group_even(basic_game, give):
    give(basic_game, "g1-0", 6, 8, 9)
    basic_game.current_player.money = 100_000
    rng = random.Random(7)

    for _ in range(300):
        index = rng.choice([6, 8, 9])
        if rng.random() < 0.6:
            build_house(basic_game, index)
        else:
            sell_house(basic_game, index)

        houses = [basic_game.board[i].houses for i in (6, 8, 9)]
        assert max(houses) - min(houses) <= 1
        assert all(0 <= h <= 5 for h in houses)
