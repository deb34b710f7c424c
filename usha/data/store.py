"""SQLite repository for shell history returning domain models."""

from __future__ import annotations

import contextlib
import logging
import os
import sqlite3
from pathlib import Path
from typing import Iterator, List, Optional

from ..constants import DB_PATH, MAX_RETENTION_DAYS
from ..core.errors import InvalidArgument, NotInitialized, StorageError
from ..core.models import HistoryEntry, SearchParams, SearchResult
from .query import CHECKSUM_TABLE, HISTORY_TABLE, build_search_query

_MISSING_TABLE_MESSAGES = {f"no such table: {table}": table for table in (HISTORY_TABLE, CHECKSUM_TABLE)}

_UPSERT = f"""
   INSERT INTO {HISTORY_TABLE} (cwd, cmd, count) VALUES (?, ?, 1)
   ON CONFLICT (cwd, cmd) DO UPDATE SET
      count = count + 1,
      entered_on = CURRENT_TIMESTAMP
"""


class HistoryStore:
   """
   Repository layer for history entries and the checksum marker.

   Opening a store only connects; tables are created by `initialize()`.
   Any other operation against a file that was never initialized raises
   NotInitialized instead of a generic StorageError.
   """

   def __init__(self, db_path: Path = DB_PATH, logger: Optional[logging.Logger] = None):
      self.db_path = db_path
      self.log = logger or logging.getLogger(__name__)
      self.conn: Optional[sqlite3.Connection] = None
      self._init_connection()

   def _init_connection(self):
      """Open the database file, creating its directory if needed."""
      try:
         self.db_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
         self.conn = sqlite3.connect(str(self.db_path), timeout=5)
      except (OSError, sqlite3.Error) as exc:
         self.log.debug("Could not open %s: %s", self.db_path, exc)
         raise StorageError("open", str(exc)) from exc
      self.conn.row_factory = sqlite3.Row

      try:
         os.chmod(self.db_path, 0o600)
      except OSError:
         pass

   @contextlib.contextmanager
   def _translate_errors(self, operation: str) -> Iterator[None]:
      """Map sqlite3 failures onto NotInitialized / StorageError."""
      try:
         yield
      except sqlite3.Error as exc:
         table = _MISSING_TABLE_MESSAGES.get(str(exc))
         if table is not None and operation != "initialize":
            raise NotInitialized(table) from exc
         self.log.debug("Database error during %s: %s", operation, exc)
         raise StorageError(operation, str(exc)) from exc

   # Schema
   def initialize(self):
      """Ensure tables, indexes and the checksum row exist (idempotent)."""
      self.log.debug("Initializing history database at %s.", self.db_path)

      with self._translate_errors("initialize"), self.conn:
         cursor = self.conn.cursor()

         self._log_table_presence(HISTORY_TABLE)
         cursor.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {HISTORY_TABLE} (
               id          INTEGER PRIMARY KEY,
               cwd         VARCHAR(256) NOT NULL,
               cmd         VARCHAR(4096) NOT NULL,
               count       INTEGER NOT NULL DEFAULT 1,
               entered_on  DATETIME DEFAULT CURRENT_TIMESTAMP
            )
            """
         )
         cursor.execute(f"CREATE UNIQUE INDEX IF NOT EXISTS command_idx ON {HISTORY_TABLE} (cwd, cmd)")
         cursor.execute(f"CREATE INDEX IF NOT EXISTS count_order_idx ON {HISTORY_TABLE} (count)")
         cursor.execute(f"CREATE INDEX IF NOT EXISTS entered_order_idx ON {HISTORY_TABLE} (entered_on)")

         self._log_table_presence(CHECKSUM_TABLE)
         cursor.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {CHECKSUM_TABLE} (
               hash        VARCHAR(256)
            )
            """
         )
         cursor.execute(
            f"""
            INSERT INTO {CHECKSUM_TABLE} (hash)
            SELECT '' WHERE NOT EXISTS (SELECT 1 FROM {CHECKSUM_TABLE})
            """
         )
         if cursor.rowcount:
            self.log.debug("Checksum not present. Inserted empty value.")

   def _log_table_presence(self, table: str):
      if not self.log.isEnabledFor(logging.DEBUG):
         return
      row = self.conn.execute(
         "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
         (table,),
      ).fetchone()
      if row:
         self.log.debug("Table %s found.", table)
      else:
         self.log.debug("Table %s not found. Creating...", table)

   # Queries
   def search(self, params: SearchParams) -> List[SearchResult]:
      """Run a history search; an empty list is a valid answer."""
      query, args = build_search_query(params)
      self.log.debug(
         "Executing query:\n%s\nwith %d argument(s): %s",
         query,
         len(args),
         ", ".join(str(arg) for arg in args),
      )

      with self._translate_errors("search"):
         rows = self.conn.execute(query, args).fetchall()
      return [SearchResult.from_row(row) for row in rows]

   def get_entry(self, cwd: str, cmd: str) -> Optional[HistoryEntry]:
      with self._translate_errors("search"):
         row = self.conn.execute(
            f"SELECT * FROM {HISTORY_TABLE} WHERE cwd = ? AND cmd = ?",
            (cwd, cmd),
         ).fetchone()
      return HistoryEntry.from_row(row) if row else None

   # Checksum marker
   def stored_checksum(self) -> Optional[str]:
      with self._translate_errors("insert"):
         row = self.conn.execute(f"SELECT hash FROM {CHECKSUM_TABLE} LIMIT 1").fetchone()
      return row["hash"] if row else None

   def checksum_matches(self, checksum: str) -> bool:
      """True when `checksum` equals the last recorded marker."""
      current = self.stored_checksum()
      self.log.debug("Checking checksum %r against stored value %r", checksum, current)
      return current == checksum

   # Writes
   def insert(self, cwd: str, cmd: str, checksum: Optional[str] = None) -> bool:
      """
      Record one use of `cmd` in `cwd`.

      Returns:
         False when skipped because `checksum` matches the stored marker,
         True otherwise.
      """
      if checksum is not None and self.checksum_matches(checksum):
         self.log.debug("Checksum unchanged; skipping duplicate insert.")
         return False

      with self._translate_errors("insert"), self.conn:
         self.conn.execute(_UPSERT, (cwd, cmd))
         if checksum is not None:
            self.log.debug("Updating checksum with value: %s", checksum)
            cursor = self.conn.execute(f"UPDATE {CHECKSUM_TABLE} SET hash = ?", (checksum,))
            if cursor.rowcount == 0:
               self.conn.execute(f"INSERT INTO {CHECKSUM_TABLE} (hash) VALUES (?)", (checksum,))
      return True

   def clean(self, retention_days: int) -> int:
      """Delete entries last used at or before now - `retention_days`."""
      if (
         isinstance(retention_days, bool)
         or not isinstance(retention_days, int)
         or not 0 <= retention_days <= MAX_RETENTION_DAYS
      ):
         raise InvalidArgument(
            "retention_days",
            "Argument provided to 'clean' must be a non-negative number.",
         )

      with self._translate_errors("clean"), self.conn:
         cursor = self.conn.execute(
            f"DELETE FROM {HISTORY_TABLE} WHERE entered_on <= datetime('now', ?)",
            (f"-{retention_days} days",),
         )
      self.log.debug("Removed %d entries older than %d day(s).", cursor.rowcount, retention_days)
      return cursor.rowcount

   def close(self):
      if self.conn:
         self.conn.close()
         self.conn = None

   def __enter__(self) -> HistoryStore:
      return self

   def __exit__(self, exc_type, exc_val, exc_tb):
      self.close()
      return False
