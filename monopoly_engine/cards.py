"""
Chance and Community Chest card system.

Decks are cyclic: a drawn card goes straight back to the bottom, so a deck
never changes size and every card eventually comes round again.
"""

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional

from monopoly_engine.spaces import DeckKind


class CardKind(Enum):
    """Types of card effects."""

    MOVE = "move"
    MONEY = "money"
    GOTO = "goto"
    JAIL = "jail"
    GET_OUT_OF_JAIL = "get_out_of_jail"


@dataclass
class Card:
    """Represents a Chance or Community Chest card."""

    text: str
    kind: CardKind
    amount: int = 0
    position: Optional[int] = None
    deck: Optional[DeckKind] = None

    def tagged(self, deck: DeckKind) -> "Card":
        """Copy of this card labelled with the deck it was drawn from."""
        return replace(self, deck=deck)

    def __repr__(self) -> str:
        return f"Card('{self.text}')"


class Deck:
    """A fixed-size cyclic deck."""

    def __init__(self, kind: DeckKind, cards: Iterable[Card]):
        self.kind = kind
        self.cards: List[Card] = list(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self.cards)

    def draw(self) -> Optional[Card]:
        """
        Take the top card and put it back at the bottom.

        Returns the drawn card tagged with this deck, or None for an empty deck.
        """
        if not self.cards:
            return None
        card = self.cards.pop(0)
        self.cards.append(card)
        return card.tagged(self.kind)


CHANCE_CARDS: List[Card] = [
    Card("Advance to Go.", CardKind.GOTO, position=0),
    Card("Advance to Illinois Avenue.", CardKind.GOTO, position=24),
    Card("Advance to St. Charles Place.", CardKind.GOTO, position=11),
    Card("Take a trip to Reading Railroad.", CardKind.GOTO, position=5),
    Card("Take a walk on the Boardwalk.", CardKind.GOTO, position=39),
    Card("Bank pays you dividend of $50.", CardKind.MONEY, amount=50),
    Card("Get Out of Jail Free.", CardKind.GET_OUT_OF_JAIL),
    Card("Go back 3 spaces.", CardKind.MOVE, amount=-3),
    Card("Go to Jail. Do not pass Go.", CardKind.JAIL),
    Card("Pay poor tax of $15.", CardKind.MONEY, amount=-15),
    Card("Speeding fine. Pay $20.", CardKind.MONEY, amount=-20),
    Card("Your building loan matures. Collect $150.", CardKind.MONEY, amount=150),
    Card("You have won a crossword competition. Collect $100.", CardKind.MONEY, amount=100),
    Card("Advance 5 spaces.", CardKind.MOVE, amount=5),
]

COMMUNITY_CHEST_CARDS: List[Card] = [
    Card("Advance to Go.", CardKind.GOTO, position=0),
    Card("Bank error in your favor. Collect $200.", CardKind.MONEY, amount=200),
    Card("Doctor's fees. Pay $50.", CardKind.MONEY, amount=-50),
    Card("From sale of stock you get $50.", CardKind.MONEY, amount=50),
    Card("Get Out of Jail Free.", CardKind.GET_OUT_OF_JAIL),
    Card("Go to Jail. Do not pass Go.", CardKind.JAIL),
    Card("Holiday fund matures. Receive $100.", CardKind.MONEY, amount=100),
    Card("Income tax refund. Collect $20.", CardKind.MONEY, amount=20),
    Card("Life insurance matures. Collect $100.", CardKind.MONEY, amount=100),
    Card("Hospital fees. Pay $100.", CardKind.MONEY, amount=-100),
    Card("School fees. Pay $50.", CardKind.MONEY, amount=-50),
    Card("Receive $25 consultancy fee.", CardKind.MONEY, amount=25),
    Card("You have won second prize in a beauty contest. Collect $10.", CardKind.MONEY, amount=10),
    Card("You inherit $100.", CardKind.MONEY, amount=100),
]


def create_chance_deck(rng: random.Random) -> Deck:
    """Create a shuffled Chance deck."""
    deck = Deck(DeckKind.CHANCE, CHANCE_CARDS)
    deck.shuffle(rng)
    return deck


def create_community_chest_deck(rng: random.Random) -> Deck:
    """Create a shuffled Community Chest deck."""
    deck = Deck(DeckKind.COMMUNITY_CHEST, COMMUNITY_CHEST_CARDS)
    deck.shuffle(rng)
    return deck
