"""Domain-specific exceptions for usha."""

from __future__ import annotations


class UshaError(Exception):
   """Base exception for all usha domain errors."""
   pass


class NotInitialized(UshaError):
   """History database tables are missing; `usha init` has not been run."""

   def __init__(self, table: str):
      super().__init__(f"no such table: {table}")
      self.table = table


class StorageError(UshaError):
   """SQLite failure other than a missing table."""

   def __init__(self, operation: str, message: str):
      super().__init__(message)
      self.operation = operation


class InvalidArgument(UshaError):
   """Caller supplied a non-numeric or out-of-range value."""

   def __init__(self, argument: str, message: str):
      super().__init__(message)
      self.argument = argument


class PathError(UshaError):
   """Supplied directory does not resolve to an existing directory."""
   pass
