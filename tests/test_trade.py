"""
Tests for proposing and answering trades.
"""

from monopoly_engine import apply_action
from monopoly_engine.trade import TradeOffer, propose_trade, respond_to_trade, validate_trade_offer


def _offer(**kwargs):
    return TradeOffer(from_player_id="g1-0", to_player_id="g1-1", **kwargs)


def test_accepted_trade_moves_cash_and_tiles(basic_game, give):
    give(basic_game, "g1-0", 1)
    offer = _offer(properties_offered=[1], money_offered=100, money_requested=50)

    assert propose_trade(basic_game, offer)
    assert basic_game.active_trade == offer
    assert basic_game.game_log.entries[-1] == "Alice proposed a trade to Bob."

    assert respond_to_trade(basic_game, True)

    assert basic_game.get_player("g1-0").money == 1450
    assert basic_game.get_player("g1-1").money == 1550
    assert basic_game.board[1].owner_id == "g1-1"
    assert basic_game.active_trade is None
    assert basic_game.game_log.entries[-1] == "Trade between Alice and Bob was accepted."


def test_requested_tiles_change_hands(basic_game, give):
    give(basic_game, "g1-1", 5, 15)

    propose_trade(basic_game, _offer(properties_requested=[5, 15], money_offered=300))
    respond_to_trade(basic_game, True)

    assert basic_game.board[5].owner_id == "g1-0"
    assert basic_game.board[15].owner_id == "g1-0"
    assert basic_game.get_player("g1-0").money == 1200


def test_rejected_trade_changes_nothing(basic_game, give):
    give(basic_game, "g1-0", 1)
    propose_trade(basic_game, _offer(properties_offered=[1], money_requested=50))

    assert not respond_to_trade(basic_game, False)

    assert basic_game.active_trade is None
    assert basic_game.board[1].owner_id == "g1-0"
    assert basic_game.get_player("g1-0").money == 1500
    assert basic_game.game_log.entries[-1] == "Trade was rejected."


def test_new_proposal_replaces_pending_one(basic_game):
    propose_trade(basic_game, _offer(money_offered=10))
    second = _offer(money_offered=20)

    propose_trade(basic_game, second)

    assert basic_game.active_trade == second
    assert "The previous trade offer was withdrawn." in basic_game.game_log.entries


def test_respond_without_pending_trade(basic_game):
    assert not respond_to_trade(basic_game, True)
    assert basic_game.game_log.entries[-1] == "There is no trade to respond to."


def test_stale_tiles_are_skipped(basic_game, give):
    give(basic_game, "g1-0", 1)
    propose_trade(basic_game, _offer(properties_offered=[1, 3], money_requested=40))
    # Alice loses the tile before Bob answers
    basic_game.board[1].owner_id = None

    respond_to_trade(basic_game, True)

    assert basic_game.board[1].owner_id is None
    assert basic_game.board[3].owner_id is None
    assert basic_game.get_player("g1-0").money == 1540
    assert basic_game.get_player("g1-1").money == 1460


def test_validation_failures(basic_game):
    cases = [
        (TradeOffer("g1-0", "nobody"), "Unknown player"),
        (TradeOffer("g1-0", "g1-0"), "cannot trade with themselves"),
        (_offer(money_offered=-5), "cannot be negative"),
        (_offer(money_offered=1501), "Insufficient cash"),
    ]
    for offer, reason in cases:
        valid, error = validate_trade_offer(basic_game, offer)
        assert not valid
        assert reason in error


def test_developed_street_changes_hands_with_its_houses(basic_game, give):
    give(basic_game, "g1-1", 1, 3)
    propose_trade(basic_game, _offer(properties_requested=[1], money_offered=200))
    basic_game.board[1].houses = 1

    assert respond_to_trade(basic_game, True)

    assert basic_game.board[1].owner_id == "g1-0"
    assert basic_game.board[1].houses == 1
    assert basic_game.get_player("g1-0").money == 1300
    assert basic_game.get_player("g1-1").money == 1700


def test_invalid_offer_is_not_stored(basic_game):
    assert not propose_trade(basic_game, TradeOffer("g1-0", "nobody"))

    assert basic_game.active_trade is None
    assert basic_game.game_log.entries[-1] == "Trade rejected: Unknown player nobody."


def test_bankrupt_player_cannot_trade(basic_game):
    basic_game.get_player("g1-1").money = -1

    valid, _ = validate_trade_offer(basic_game, _offer(money_offered=10))
    assert not valid


def test_trade_actions_accept_camel_case_payload(basic_game, give):
    give(basic_game, "g1-0", 1)
    payload = {
        "fromPlayerId": "g1-0",
        "toPlayerId": "g1-1",
        "propertiesOffered": [1],
        "propertiesRequested": [],
        "moneyOffered": 100,
        "moneyRequested": 50,
    }

    assert apply_action(basic_game, "proposeTrade", payload)
    assert apply_action(basic_game, "respondToTrade", {"accepted": True})

    assert basic_game.board[1].owner_id == "g1-1"
    assert basic_game.get_player("g1-0").money == 1450


def test_trade_payload_missing_player(basic_game):
    assert not apply_action(basic_game, "proposeTrade", {"moneyOffered": 10})

    assert basic_game.active_trade is None
    assert basic_game.game_log.entries[-1].startswith("Invalid proposeTrade request")
