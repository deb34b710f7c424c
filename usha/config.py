"""Configuration helpers for search and retention defaults."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .constants import CONFIG_PATH, DEFAULT_LIMIT, DEFAULT_RETENTION_DAYS
from .utils import atomic_write_json

logger = logging.getLogger(__name__)


def default_config() -> Dict[str, Any]:
    return {
        "limit": DEFAULT_LIMIT,
        "retention_days": DEFAULT_RETENTION_DAYS,
        "ignore": [],
    }


def load_config(path: Path = CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration, creating defaults if missing."""
    defaults = default_config()

    if not path.exists():
        try:
            atomic_write_json(path, defaults, preserve_permissions=False)
        except OSError as exc:
            logger.debug("Could not write default config to %s: %s", path, exc)
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as handle:
            config = json.load(handle)
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable config %s: %s", path, exc)
        return defaults

    if not isinstance(config, dict):
        logger.debug("Ignoring config %s: expected a JSON object", path)
        return defaults

    merged = defaults.copy()
    merged.update(config)
    return merged


def load_ignore_list(path: Path) -> List[str]:
    """Read extra stop words, one per line; blank lines and # comments are skipped."""
    try:
        with open(path, "r", encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Ignoring unreadable ignore list %s: %s", path, exc)
        return []

    words = []
    for line in lines:
        word = line.strip()
        if word and not word.startswith("#"):
            words.append(word)
    return words
