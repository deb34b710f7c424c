"""Core domain models for usha."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence

from .errors import InvalidArgument

# Largest value SQLite accepts as an INTEGER bind parameter.
MAX_LIMIT = 2 ** 63 - 1


class OrderBy(Enum):
   """Result ordering for a history search."""

   COUNT = "count"
   SUM_COUNT = "sum"
   MOST_RECENT = "recent"


@dataclass
class HistoryEntry:
   """One (cwd, cmd) pair with its use count and last-used time."""

   id: int
   cwd: str
   cmd: str
   count: int
   entered_on: str

   @classmethod
   def from_row(cls, row: sqlite3.Row) -> HistoryEntry:
      """Convert SQLite row to HistoryEntry model."""
      return cls(
         id=row["id"],
         cwd=row["cwd"],
         cmd=row["cmd"],
         count=row["count"],
         entered_on=row["entered_on"],
      )


@dataclass
class SearchParams:
   """
   Input parameters for a history search.

   `directory` of None means a global search across every directory; an
   empty string is a (scoped) directory like any other. When `order_by` is
   omitted it follows the scope: summed counts for a global search, the
   per-directory count otherwise.
   """

   directory: Optional[str] = None
   limit: int = 5
   contains: Optional[str] = None
   order_by: Optional[OrderBy] = None
   recurse: bool = False
   command_only: bool = False

   def __post_init__(self):
      if isinstance(self.limit, bool) or not isinstance(self.limit, int):
         raise InvalidArgument("limit", "Value supplied for -n must be a number.")
      if self.limit < 1 or self.limit > MAX_LIMIT:
         raise InvalidArgument("limit", "Value supplied for -n out of bounds.")

      if self.order_by is None:
         self.order_by = OrderBy.SUM_COUNT if self.is_global else OrderBy.COUNT
      elif self.order_by is OrderBy.SUM_COUNT and not self.is_global:
         raise InvalidArgument("order_by", "Ordering by summed count requires a global search.")

   @property
   def is_global(self) -> bool:
      return self.directory is None

   @property
   def includes_count(self) -> bool:
      return not self.command_only

   @property
   def includes_timestamp(self) -> bool:
      return not self.command_only and self.order_by is OrderBy.MOST_RECENT


@dataclass
class SearchResult:
   """One row returned by a history search."""

   cmd: str
   count: Optional[int] = None
   timestamp: Optional[str] = None

   @classmethod
   def from_row(cls, row: Sequence[Any]) -> SearchResult:
      """Shape a result row selected as (cmd[, count[, timestamp]])."""
      result = cls(cmd=row[0])
      if len(row) > 1:
         result.count = int(row[1])
      if len(row) > 2:
         result.timestamp = row[2]
      return result

   def to_dict(self) -> Dict[str, Any]:
      data: Dict[str, Any] = {"cmd": self.cmd}
      if self.count is not None:
         data["count"] = self.count
      if self.timestamp is not None:
         data["timestamp"] = self.timestamp
      return data
