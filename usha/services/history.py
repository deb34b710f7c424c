"""Recording, searching and pruning shell history."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..constants import STOP_WORDS
from ..core.models import OrderBy, SearchParams, SearchResult
from ..data.store import HistoryStore
from ..utils import canonical_directory


class HistoryService:
    """
    Applies the caller-level rules around the history store.

    Responsibilities:
    - Skip commands that should never be recorded (empty, stop words)
    - Canonicalize search directories and pick the default ordering
    - Forward init / clean to the store
    """

    def __init__(
        self,
        store: HistoryStore,
        ignore: Iterable[str] = (),
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.stop_words = frozenset(STOP_WORDS).union(ignore)
        self.log = logger or logging.getLogger(__name__)

    def initialize(self):
        self.store.initialize()

    def should_record(self, cmd: str) -> bool:
        """False for blank commands and commands whose first word is a stop word."""
        words = cmd.split()
        if not words:
            return False
        return words[0] not in self.stop_words

    def record(self, cwd: str, cmd: str, checksum: Optional[str] = None) -> bool:
        """
        Record `cmd` as run in `cwd`.

        Returns:
           True if the store was updated, False if the command was filtered
           or skipped as a checksum duplicate.
        """
        if not self.should_record(cmd):
            self.log.debug("Not recording filtered command: %r", cmd)
            return False
        return self.store.insert(cwd, cmd, checksum)

    def search(
        self,
        directory: Optional[str] = None,
        limit: int = 5,
        contains: Optional[str] = None,
        most_recent: bool = False,
        recurse: bool = False,
        command_only: bool = False,
    ) -> List[SearchResult]:
        """
        Search history globally (`directory` None) or within a directory.

        Time ordering when `most_recent`; otherwise summed counts for a global
        search and the per-directory count for a scoped one.

        Raises:
           PathError: If `directory` does not resolve
           InvalidArgument: If `limit` is out of range
        """
        if directory is not None:
            directory = canonical_directory(directory)

        params = SearchParams(
            directory=directory,
            limit=limit,
            contains=contains,
            order_by=OrderBy.MOST_RECENT if most_recent else None,
            recurse=recurse,
            command_only=command_only,
        )
        return self.store.search(params)

    def clean(self, retention_days: int) -> int:
        return self.store.clean(retention_days)
