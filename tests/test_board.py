"""
Tests for the board layout and tile lookups.
"""

from monopoly_engine.board import Board
from monopoly_engine.spaces import (
    CardTile,
    DeckKind,
    PropertyTile,
    SpecialKind,
    StationTile,
    TaxTile,
    TileKind,
    UtilityTile,
)


def test_standard_board_layout():
    board = Board()

    assert len(board) == 40
    assert board[0].special is SpecialKind.GO
    assert board[10].special is SpecialKind.JAIL
    assert board[20].special is SpecialKind.FREE_PARKING
    assert board[30].special is SpecialKind.GO_TO_JAIL
    assert board[39].name == "Boardwalk"


def test_card_and_tax_tiles():
    board = Board()

    chance = [i for i, t in enumerate(board) if isinstance(t, CardTile) and t.deck is DeckKind.CHANCE]
    chest = [i for i, t in enumerate(board) if isinstance(t, CardTile) and t.deck is DeckKind.COMMUNITY_CHEST]
    assert chance == [7, 22, 36]
    assert chest == [2, 17, 33]

    assert isinstance(board[4], TaxTile) and board[4].amount == 200
    assert isinstance(board[38], TaxTile) and board[38].amount == 100


def test_ownable_tiles():
    board = Board()

    streets = [t for t in board if isinstance(t, PropertyTile)]
    stations = [i for i, t in enumerate(board) if isinstance(t, StationTile)]
    utilities = [i for i, t in enumerate(board) if isinstance(t, UtilityTile)]

    assert len(streets) == 22
    assert stations == [5, 15, 25, 35]
    assert utilities == [12, 28]
    assert all(t.kind is TileKind.PROPERTY for t in streets)
    assert all(len(t.rent) == 6 for t in streets)


def test_color_groups():
    board = Board()

    assert board.color_groups["brown"] == [1, 3]
    assert board.color_groups["light_blue"] == [6, 8, 9]
    assert board.color_groups["dark_blue"] == [37, 39]
    assert len(board.color_groups) == 8


def test_get_ownable_rejects_other_tiles():
    board = Board()

    assert board.get_ownable(4) is None
    assert board.get_ownable(0) is None
    assert board.get_ownable(40) is None
    assert board.get_ownable(-1) is None
    assert board.get_ownable(5).name == "Reading Railroad"


def test_has_monopoly():
    board = Board()
    board[1].owner_id = "p"
    assert not board.has_monopoly("p", "brown")

    board[3].owner_id = "p"
    assert board.has_monopoly("p", "brown")
    assert not board.has_monopoly("q", "brown")


def test_mortgage_value_is_half_price():
    board = Board()

    assert board[1].mortgage_value == 30
    assert board[39].mortgage_value == 200
    assert board[5].mortgage_value == 100


def test_owned_by_and_house_range():
    board = Board()
    board[6].owner_id = "p"
    board[9].owner_id = "p"
    board[5].owner_id = "p"
    board[8].houses = 2
    board[9].houses = 1

    assert board.owned_by("p") == [5, 6, 9]
    assert board.house_range("light_blue") == (0, 2)
