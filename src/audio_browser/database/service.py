"""Database service for persisted favorites."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, sessionmaker

from ..exceptions import FavoritesError
from ..models import Entry
from .models import Base, Favorite

logger = logging.getLogger(__name__)


class FavoritesService:
    """SQLite-backed favorites store keyed by path."""

    def __init__(self, db_path: Optional[Path] = None) -> None:
        """Initialize favorites service.

        Args:
            db_path: Path to SQLite database file.
                    If None, uses default ~/.audio-browser/favorites.db
        """
        if db_path is None:
            db_path = Path.home() / ".audio-browser" / "favorites.db"

        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        db_url = f"sqlite:///{self.db_path}"
        # Navigator reads pins from worker threads
        self.engine = create_engine(
            db_url, echo=False, connect_args={"check_same_thread": False}
        )
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

        logger.debug("Favorites database at: %s", self.db_path)
        self.init_db()

    def init_db(self) -> None:
        """Create the schema if it does not exist."""
        Base.metadata.create_all(bind=self.engine)

    def get_session(self) -> Session:
        """Get a new database session.

        Note:
            Caller is responsible for closing the session
        """
        return self.SessionLocal()

    # =========================================================================
    # Favorite Operations
    # =========================================================================

    def get_favorite(self, path: str) -> Optional[Favorite]:
        """Get favorite by path.

        Args:
            path: Absolute path of the pinned entry

        Returns:
            Favorite object or None if not pinned
        """
        with self.get_session() as session:
            return session.get(Favorite, path)

    def add_favorite(self, path: str, name: str, is_directory: bool) -> Favorite:
        """Pin a path, updating name and type if it is already pinned.

        Args:
            path: Absolute path
            name: Display name
            is_directory: Whether the path is a directory

        Returns:
            Stored Favorite object
        """
        with self.get_session() as session:
            favorite = session.get(Favorite, path)
            if favorite is None:
                favorite = Favorite(path=path, name=name, is_directory=is_directory)
                session.add(favorite)
                logger.info("Added favorite: %s", path)
            else:
                favorite.name = name
                favorite.is_directory = is_directory
                logger.debug("Updated favorite: %s", path)
            session.commit()
            session.refresh(favorite)
            return favorite

    def remove_favorite(self, path: str) -> None:
        """Unpin a path.

        Args:
            path: Absolute path

        Raises:
            FavoritesError: If the path is not pinned
        """
        with self.get_session() as session:
            favorite = session.get(Favorite, path)
            if not favorite:
                raise FavoritesError(f"Favorite not found: {path}")
            session.delete(favorite)
            session.commit()
            logger.info("Removed favorite: %s", path)

    def get_all_favorites(self) -> List[Favorite]:
        """Get all favorites, oldest first."""
        with self.get_session() as session:
            stmt = select(Favorite).order_by(Favorite.created_at, Favorite.path)
            return list(session.scalars(stmt).all())

    # =========================================================================
    # FavoritesStore interface
    # =========================================================================

    def is_pinned(self, path: str) -> bool:
        """Return whether ``path`` is pinned."""
        return self.get_favorite(path) is not None

    def set_pinned(self, entry: Entry, pinned: bool) -> None:
        """Pin or unpin ``entry``."""
        if pinned:
            self.add_favorite(entry.path, entry.name, entry.is_directory)
        elif self.is_pinned(entry.path):
            self.remove_favorite(entry.path)

    def list_pinned(self) -> List[Entry]:
        """Return the pinned entries, oldest first."""
        return [favorite.to_entry() for favorite in self.get_all_favorites()]

    def get_statistics(self) -> Dict[str, Any]:
        """Get favorites statistics."""
        with self.get_session() as session:
            total = session.scalar(select(func.count()).select_from(Favorite)) or 0
            directories = (
                session.scalar(
                    select(func.count())
                    .select_from(Favorite)
                    .where(Favorite.is_directory.is_(True))
                )
                or 0
            )
            return {
                "favorites": total,
                "directories": directories,
                "files": total - directories,
                "database_path": str(self.db_path),
            }

    def close(self) -> None:
        """Close database connection."""
        if hasattr(self, "engine"):
            self.engine.dispose()
            logger.debug("Favorites database closed")
