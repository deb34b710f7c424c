"""Database setup and retention commands."""

from __future__ import annotations

from typing import Optional

import click

from ...constants import DEFAULT_RETENTION_DAYS, MAX_RETENTION_DAYS
from ...core.errors import UshaError
from ...utils import parse_int
from .common import CliState, fail


@click.command(name="init")
@click.pass_obj
def init_cmd(state: CliState):
   """Create the history database tables (safe to re-run)."""
   factory = state.factory()

   try:
      factory.get_history_service().initialize()
   except UshaError as exc:
      fail(exc)
   finally:
      factory.close()


@click.command(name="clean")
@click.argument("days", required=False)
@click.pass_obj
def clean(state: CliState, days: Optional[str]):
   """Forget commands not used in the last DAYS days [default: 60]."""
   factory = state.factory()

   try:
      retention_days = parse_int(
         days if days is not None else state.config.get("retention_days", DEFAULT_RETENTION_DAYS),
         "DAYS",
         minimum=0,
         maximum=MAX_RETENTION_DAYS,
         not_a_number="Argument provided to 'clean' must be a number.",
         out_of_range="Argument provided to 'clean' must be a non-negative number.",
      )
      factory.get_history_service().clean(retention_days)
   except UshaError as exc:
      fail(exc)
   finally:
      factory.close()
