"""Service factory for dependency injection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..constants import DB_PATH
from ..data.store import HistoryStore
from ..services.history import HistoryService


class ServiceFactory:
    """Factory for creating the store and service sharing one connection."""

    def __init__(
        self,
        db_path: Path = DB_PATH,
        ignore: Iterable[str] = (),
        logger: Optional[logging.Logger] = None,
    ):
        self.db_path = db_path
        self.ignore = tuple(ignore)
        self.logger = logger or logging.getLogger("usha")
        self._store: Optional[HistoryStore] = None

    def get_store(self) -> HistoryStore:
        """Get or create HistoryStore instance."""
        if self._store is None:
            self._store = HistoryStore(self.db_path, logger=self.logger.getChild("store"))
        return self._store

    def get_history_service(self) -> HistoryService:
        """Create HistoryService bound to the shared store."""
        return HistoryService(
            store=self.get_store(),
            ignore=self.ignore,
            logger=self.logger.getChild("history"),
        )

    def close(self):
        """Close all resources."""
        if self._store:
            self._store.close()
            self._store = None

    def __enter__(self) -> ServiceFactory:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
