from typing import Dict, Iterator, List, Optional, Tuple

from monopoly_engine.spaces import (
    CardTile,
    DeckKind,
    OwnableTile,
    PropertyTile,
    SpecialKind,
    SpecialTile,
    StationTile,
    TaxTile,
    Tile,
    UtilityTile,
)


def _street(name: str, price: int, color: str, rent: List[int], house_cost: int) -> PropertyTile:
    return PropertyTile(name, price=price, color_group=color, rent=rent, house_cost=house_cost)


def create_default_tiles() -> List[Tile]:
    """Create the standard 40-tile board with every tile unowned and undeveloped."""
    return [
        # Bottom row (0-10)
        SpecialTile("Go", special=SpecialKind.GO),
        _street("Mediterranean Avenue", 60, "brown", [2, 10, 30, 90, 160, 250], 50),
        CardTile("Community Chest", deck=DeckKind.COMMUNITY_CHEST),
        _street("Baltic Avenue", 60, "brown", [4, 20, 60, 180, 320, 450], 50),
        TaxTile("Income Tax", amount=200),
        StationTile("Reading Railroad", price=200),
        _street("Oriental Avenue", 100, "light_blue", [6, 30, 90, 270, 400, 550], 50),
        CardTile("Chance", deck=DeckKind.CHANCE),
        _street("Vermont Avenue", 100, "light_blue", [6, 30, 90, 270, 400, 550], 50),
        _street("Connecticut Avenue", 120, "light_blue", [8, 40, 100, 300, 450, 600], 50),
        SpecialTile("Jail", special=SpecialKind.JAIL),
        # Left side (11-20)
        _street("St. Charles Place", 140, "pink", [10, 50, 150, 450, 625, 750], 100),
        UtilityTile("Electric Company", price=150),
        _street("States Avenue", 140, "pink", [10, 50, 150, 450, 625, 750], 100),
        _street("Virginia Avenue", 160, "pink", [12, 60, 180, 500, 700, 900], 100),
        StationTile("Pennsylvania Railroad", price=200),
        _street("St. James Place", 180, "orange", [14, 70, 200, 550, 750, 950], 100),
        CardTile("Community Chest", deck=DeckKind.COMMUNITY_CHEST),
        _street("Tennessee Avenue", 180, "orange", [14, 70, 200, 550, 750, 950], 100),
        _street("New York Avenue", 200, "orange", [16, 80, 220, 600, 800, 1000], 100),
        SpecialTile("Free Parking", special=SpecialKind.FREE_PARKING),
        # Top row (21-30)
        _street("Kentucky Avenue", 220, "red", [18, 90, 250, 700, 875, 1050], 150),
        CardTile("Chance", deck=DeckKind.CHANCE),
        _street("Indiana Avenue", 220, "red", [18, 90, 250, 700, 875, 1050], 150),
        _street("Illinois Avenue", 240, "red", [20, 100, 300, 750, 925, 1100], 150),
        StationTile("B. & O. Railroad", price=200),
        _street("Atlantic Avenue", 260, "yellow", [22, 110, 330, 800, 975, 1150], 150),
        _street("Ventnor Avenue", 260, "yellow", [22, 110, 330, 800, 975, 1150], 150),
        UtilityTile("Water Works", price=150),
        _street("Marvin Gardens", 280, "yellow", [24, 120, 360, 850, 1025, 1200], 150),
        SpecialTile("Go To Jail", special=SpecialKind.GO_TO_JAIL),
        # Right side (31-39)
        _street("Pacific Avenue", 300, "green", [26, 130, 390, 900, 1100, 1275], 200),
        _street("North Carolina Avenue", 300, "green", [26, 130, 390, 900, 1100, 1275], 200),
        CardTile("Community Chest", deck=DeckKind.COMMUNITY_CHEST),
        _street("Pennsylvania Avenue", 320, "green", [28, 150, 450, 1000, 1200, 1400], 200),
        StationTile("Short Line", price=200),
        CardTile("Chance", deck=DeckKind.CHANCE),
        _street("Park Place", 350, "dark_blue", [35, 175, 500, 1100, 1300, 1500], 200),
        TaxTile("Luxury Tax", amount=100),
        _street("Boardwalk", 400, "dark_blue", [50, 200, 600, 1400, 1700, 2000], 200),
    ]


class Board:
    """The Monopoly board: fixed topology, mutable ownership and development."""

    def __init__(self, tiles: Optional[List[Tile]] = None):
        self.tiles: List[Tile] = tiles if tiles is not None else create_default_tiles()
        self.color_groups: Dict[str, List[int]] = self._build_color_groups()

    def _build_color_groups(self) -> Dict[str, List[int]]:
        """Build a mapping of color groups to property indices."""
        groups: Dict[str, List[int]] = {}
        for index, tile in enumerate(self.tiles):
            if isinstance(tile, PropertyTile):
                groups.setdefault(tile.color_group, []).append(index)
        return groups

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]

    def get_ownable(self, index: int) -> Optional[OwnableTile]:
        """Get an ownable tile, or None if the index is out of range or not ownable."""
        if not 0 <= index < len(self.tiles):
            return None
        tile = self.tiles[index]
        return tile if isinstance(tile, OwnableTile) else None

    def get_property(self, index: int) -> Optional[PropertyTile]:
        tile = self.get_ownable(index)
        return tile if isinstance(tile, PropertyTile) else None

    def get_color_group(self, color: str) -> List[PropertyTile]:
        """Get all property tiles in a color group."""
        return [self.tiles[i] for i in self.color_groups.get(color, [])]

    def owned_by(self, player_id: str) -> List[int]:
        """Indices of every tile owned by the player."""
        return [
            index
            for index, tile in enumerate(self.tiles)
            if isinstance(tile, OwnableTile) and tile.owner_id == player_id
        ]

    def count_owned(self, player_id: str, tile_type: type) -> int:
        """How many tiles of ``tile_type`` the player owns."""
        return sum(
            1 for tile in self.tiles if isinstance(tile, tile_type) and tile.owner_id == player_id
        )

    def has_monopoly(self, player_id: str, color: str) -> bool:
        """Check whether the player owns every property of a color group."""
        group = self.get_color_group(color)
        return bool(group) and all(tile.owner_id == player_id for tile in group)

    def house_range(self, color: str) -> Tuple[int, int]:
        """(minimum, maximum) house count across a color group."""
        houses = [tile.houses for tile in self.get_color_group(color)]
        return min(houses), max(houses)
