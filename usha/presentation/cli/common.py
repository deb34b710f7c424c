"""State and error reporting shared by usha commands."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, NoReturn

from rich.markup import escape

from ...constants import PROGRAM_NAME, console
from ...core.errors import NotInitialized, PathError, StorageError, UshaError
from ...infrastructure.factory import ServiceFactory

STORAGE_MESSAGES = {
   "open": f"Could not access {PROGRAM_NAME} database file.",
   "initialize": f"Could not initialize {PROGRAM_NAME} database.",
   "insert": f"Could not insert command into {PROGRAM_NAME} database.",
   "search": f"Could not search {PROGRAM_NAME} database.",
   "clean": f"Could not clean {PROGRAM_NAME} database.",
}


@dataclass
class CliState:
   """Per-invocation settings resolved once by the `usha` group."""

   db_path: Path
   logger: logging.Logger
   config: Dict[str, Any] = field(default_factory=dict)
   ignore: List[str] = field(default_factory=list)

   def factory(self) -> ServiceFactory:
      return ServiceFactory(self.db_path, ignore=self.ignore, logger=self.logger)


def error_message(exc: UshaError) -> str:
   """Short user-facing message for a domain error."""
   if isinstance(exc, NotInitialized):
      return f"History database not initialized. Did you run '{PROGRAM_NAME} init'?"
   if isinstance(exc, StorageError):
      return STORAGE_MESSAGES.get(exc.operation, STORAGE_MESSAGES["open"])
   if isinstance(exc, PathError):
      return "No such directory."
   return str(exc)


def fail(exc: UshaError) -> NoReturn:
   console.print(f"[red]{escape(error_message(exc))}[/red]")
   sys.exit(1)
