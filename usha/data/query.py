"""SQL construction for history searches.

Kept free of any connection so the generated text and bound parameters can
be inspected directly.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from ..core.models import OrderBy, SearchParams

HISTORY_TABLE = "history"
CHECKSUM_TABLE = "checksum"

LIKE_ESCAPE = "\\"

_TIMESTAMP = "datetime(entered_on, 'localtime')"
# A global search groups by cmd, so report the newest use across directories.
_LATEST_TIMESTAMP = "datetime(MAX(entered_on), 'localtime')"


def escape_like(value: str) -> str:
   """Escape LIKE wildcards so `value` only matches itself."""
   return (
      value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
      .replace("%", LIKE_ESCAPE + "%")
      .replace("_", LIKE_ESCAPE + "_")
   )


def subdirectory_pattern(directory: str) -> str:
   """LIKE pattern matching any path nested under `directory`."""
   return escape_like(directory.rstrip("/")) + "/%"


def order_column(params: SearchParams) -> str:
   if params.order_by is OrderBy.MOST_RECENT:
      return "MAX(entered_on)" if params.is_global else "entered_on"
   if params.is_global:
      return "SUM(count)"
   return "count"


def build_search_query(params: SearchParams) -> Tuple[str, List[Any]]:
   """
   Build the SELECT for a history search.

   Returns:
      (query text, bound parameters in placeholder order)
   """
   columns = ["cmd"]
   if params.includes_count:
      columns.append("SUM(count)" if params.is_global else "count")
   if params.includes_timestamp:
      columns.append(_LATEST_TIMESTAMP if params.is_global else _TIMESTAMP)

   query = [f"SELECT {', '.join(columns)} FROM {HISTORY_TABLE}"]
   args: List[Any] = []
   predicates: List[str] = []

   if not params.is_global:
      if params.recurse:
         predicates.append(f"(cwd = ? OR cwd LIKE ? ESCAPE '{LIKE_ESCAPE}')")
         args.extend([params.directory, subdirectory_pattern(params.directory)])
      else:
         predicates.append("cwd = ?")
         args.append(params.directory)

   if params.contains is not None:
      predicates.append(f"cmd LIKE ? ESCAPE '{LIKE_ESCAPE}'")
      args.append(f"%{escape_like(params.contains)}%")

   for position, predicate in enumerate(predicates):
      query.append(("WHERE " if position == 0 else "AND ") + predicate)

   if params.is_global:
      query.append("GROUP BY cmd")

   query.append(f"ORDER BY {order_column(params)} DESC")
   query.append("LIMIT ?")
   args.append(params.limit)

   return " ".join(query), args
