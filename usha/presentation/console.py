"""Shared console instance for usha output.

Diagnostics and log records go to stderr so search results on stdout can be
piped or captured by shell integrations.
"""

from rich.console import Console

console = Console(stderr=True)
