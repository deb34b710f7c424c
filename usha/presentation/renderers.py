"""Formatting helpers for usha search results."""

from __future__ import annotations

from typing import Any, Dict, List

from rich import box
from rich.table import Table
from rich.text import Text

from ..core.models import SearchResult


def _line_width(result: SearchResult) -> int:
   width = len(result.cmd)
   if result.count is not None:
      width += len(str(result.count)) + 2
   return width


def format_results(results: List[SearchResult]) -> str:
   """
   Render results one per line with counts right-aligned to a shared column.

   Timestamps, when present, follow the count after two spaces.
   """
   if not results:
      return ""

   width = max(_line_width(result) for result in results)
   lines = []
   for result in results:
      line = result.cmd
      if result.count is not None:
         line += str(result.count).rjust(width - len(result.cmd))
      if result.timestamp is not None:
         line += "  " + result.timestamp
      lines.append(line)
   return "\n".join(lines)


def results_to_json(results: List[SearchResult]) -> List[Dict[str, Any]]:
   return [result.to_dict() for result in results]


def render_results_table(results: List[SearchResult], title: str = "Command History") -> Table:
   """Render results as Rich table; count/time columns only when populated."""
   show_count = any(result.count is not None for result in results)
   show_time = any(result.timestamp is not None for result in results)

   table = Table(title=title, box=box.ROUNDED)
   table.add_column("Command", style="cyan", overflow="fold")
   if show_count:
      table.add_column("Count", style="green", justify="right")
   if show_time:
      table.add_column("Last Used", style="magenta")

   for result in results:
      row = [Text(result.cmd)]
      if show_count:
         row.append(str(result.count) if result.count is not None else "[dim]--[/dim]")
      if show_time:
         row.append(result.timestamp or "[dim]--[/dim]")
      table.add_row(*row)

   return table
