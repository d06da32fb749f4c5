"""
Board tile definitions.

Every tile is one of a closed set of dataclass variants tagged by ``TileKind``.
Resolvers dispatch on ``tile.kind`` rather than probing for fields.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TileKind(Enum):
    """Types of tiles on the board."""

    PROPERTY = "property"
    STATION = "station"
    UTILITY = "utility"
    TAX = "tax"
    SPECIAL = "special"
    CARD = "card"


class SpecialKind(Enum):
    """The four corner tiles."""

    GO = "Go"
    JAIL = "Jail"
    FREE_PARKING = "Free Parking"
    GO_TO_JAIL = "Go To Jail"


class DeckKind(Enum):
    """The two event decks."""

    CHANCE = "chance"
    COMMUNITY_CHEST = "community-chest"

    @property
    def title(self) -> str:
        return "Chance" if self is DeckKind.CHANCE else "Community Chest"


@dataclass
class Tile:
    """Base class for a board tile."""

    name: str
    kind: TileKind = field(init=False)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


@dataclass
class OwnableTile(Tile):
    """A tile that can be bought, mortgaged and traded."""

    price: int = 0
    owner_id: Optional[str] = None
    mortgaged: bool = False

    @property
    def mortgage_value(self) -> int:
        return self.price // 2

    def is_owned(self) -> bool:
        """Check if tile is owned by any player."""
        return self.owner_id is not None

    def release(self) -> None:
        """Return the tile to the bank."""
        self.owner_id = None
        self.mortgaged = False


@dataclass
class PropertyTile(OwnableTile):
    """A street that can be built upon."""

    color_group: str = ""
    rent: List[int] = field(default_factory=list)
    house_cost: int = 0
    houses: int = 0

    def __post_init__(self) -> None:
        self.kind = TileKind.PROPERTY

    def get_rent(self) -> int:
        """Rent for the current development level (index 5 is the hotel)."""
        return self.rent[self.houses]

    def has_hotel(self) -> bool:
        return self.houses == 5

    def release(self) -> None:
        super().release()
        self.houses = 0


@dataclass
class StationTile(OwnableTile):
    """A station; rent depends on how many stations the owner holds."""

    rent: List[int] = field(default_factory=lambda: [25, 50, 100, 200])

    def __post_init__(self) -> None:
        self.kind = TileKind.STATION

    def get_rent(self, stations_owned: int) -> int:
        return self.rent[stations_owned - 1]


@dataclass
class UtilityTile(OwnableTile):
    """A utility; rent is a multiple of the dice total."""

    def __post_init__(self) -> None:
        self.kind = TileKind.UTILITY

    def get_rent(self, dice_total: int, utilities_owned: int) -> int:
        multiplier = 4 if utilities_owned == 1 else 10
        return dice_total * multiplier


@dataclass
class TaxTile(Tile):
    """Income Tax or Luxury Tax."""

    amount: int = 0

    def __post_init__(self) -> None:
        self.kind = TileKind.TAX


@dataclass
class SpecialTile(Tile):
    """Go, Jail, Free Parking or Go To Jail."""

    special: SpecialKind = SpecialKind.GO

    def __post_init__(self) -> None:
        self.kind = TileKind.SPECIAL


@dataclass
class CardTile(Tile):
    """Chance or Community Chest."""

    deck: DeckKind = DeckKind.CHANCE

    def __post_init__(self) -> None:
        self.kind = TileKind.CARD
