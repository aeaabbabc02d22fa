"""Service layer for board state and configuration."""

from .board_store import BoardStore
from .seed_service import SeedService

__all__ = [
    "BoardStore",
    "SeedService",
]
