"""Shared constants for the usha package."""

from pathlib import Path

from .presentation.console import console

PROGRAM_NAME = "usha"

# Paths
USHA_DIR = Path.home() / ".usha"
DB_PATH = USHA_DIR / "history.db"
CONFIG_PATH = USHA_DIR / "config.json"
IGNORE_PATH = USHA_DIR / "ignore"

# Defaults
DEFAULT_LIMIT = 5  # results per search
DEFAULT_RETENTION_DAYS = 60  # history kept by `usha clean`
MAX_RETENTION_DAYS = 1_000_000  # keeps datetime('now', '-N days') in range

# Commands never recorded (matched against the first word)
STOP_WORDS = (PROGRAM_NAME, "exit")
