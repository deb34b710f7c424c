"""Shared utility functions."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .core.errors import InvalidArgument, PathError


def atomic_write_json(path: Path, data: Dict[str, Any], preserve_permissions: bool = True):
    """Atomically write JSON to disk with optional permission preservation."""
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    mode = 0o600
    if preserve_permissions and path.exists():
        try:
            mode = path.stat().st_mode & 0o777
        except OSError:
            pass

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
            handle.flush()
            os.fsync(handle.fileno())

        os.replace(tmp_path, path)
        os.chmod(path, mode)
    except Exception:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


def canonical_directory(directory: str) -> str:
    """Expand, absolutize and resolve symlinks; the result must be an existing directory."""
    try:
        resolved = Path(directory).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise PathError(f"No such directory: {directory}") from exc
    if not resolved.is_dir():
        raise PathError(f"No such directory: {directory}")
    return str(resolved)


def parse_int(
    value: Any,
    argument: str,
    minimum: int,
    maximum: Optional[int] = None,
    not_a_number: Optional[str] = None,
    out_of_range: Optional[str] = None,
) -> int:
    """Parse a user-supplied integer, raising InvalidArgument naming `argument`."""
    if isinstance(value, bool):
        raise InvalidArgument(argument, not_a_number or f"Value supplied for {argument} must be a number.")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidArgument(argument, not_a_number or f"Value supplied for {argument} must be a number.")

    if number < minimum or (maximum is not None and number > maximum):
        raise InvalidArgument(argument, out_of_range or f"Value supplied for {argument} out of bounds.")
    return number
