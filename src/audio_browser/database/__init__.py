"""Database package for persisted favorites."""

from .models import Base, Favorite
from .service import FavoritesService

__all__ = [
    "Base",
    "Favorite",
    "FavoritesService",
]
