"""Data model shared by the generator and its consumers."""

from .config import GeneratorConfig, load_config, save_config
from .layout import DungeonLayout, PlacedRoom, load_layout, save_layout
from .rooms import ORIGIN, Coordinate, Corridor, RoomKind, corridor_key

__all__ = [
    "Coordinate",
    "Corridor",
    "DungeonLayout",
    "GeneratorConfig",
    "ORIGIN",
    "PlacedRoom",
    "RoomKind",
    "corridor_key",
    "load_config",
    "load_layout",
    "save_config",
    "save_layout",
]
