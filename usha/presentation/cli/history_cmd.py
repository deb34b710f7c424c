"""Recording and searching commands."""

from __future__ import annotations

import json
import os
from typing import Optional

import click

from ...constants import console
from ...core.errors import UshaError
from ...core.models import MAX_LIMIT
from ...utils import canonical_directory, parse_int
from ..renderers import format_results, render_results_table, results_to_json
from .common import CliState, fail


@click.command(name="update")
@click.argument("cmd")
@click.option("--checksum", help="Skip the insert if equal to the checksum of the previous update")
@click.option("--cwd", help="Directory the command ran in [default: current directory]")
@click.pass_obj
def update(state: CliState, cmd: str, checksum: Optional[str], cwd: Optional[str]):
   """Record CMD as run in the current directory."""
   factory = state.factory()

   try:
      directory = canonical_directory(cwd if cwd is not None else os.getcwd())
      factory.get_history_service().record(directory, cmd, checksum)
   except UshaError as exc:
      fail(exc)
   finally:
      factory.close()


@click.command(name="search")
@click.argument("directory", required=False)
@click.option("-n", "limit", metavar="N", help="Retrieve the N most common commands [default: 5]")
@click.option("-s", "contains", metavar="SEARCHSTRING", help="Search for commands containing a string")
@click.option("-t", "most_recent", is_flag=True, help="Order by most recently entered")
@click.option("-r", "--recurse", is_flag=True, help="Include subdirectories of DIRECTORY")
@click.option("-c", "--command-only", is_flag=True, help="Print commands without counts or times")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--table", "output_table", is_flag=True, help="Render results as a table")
@click.pass_obj
def search(
   state: CliState,
   directory: Optional[str],
   limit: Optional[str],
   contains: Optional[str],
   most_recent: bool,
   recurse: bool,
   command_only: bool,
   output_json: bool,
   output_table: bool,
):
   """Show frequent or recent commands, globally or within DIRECTORY."""
   factory = state.factory()

   try:
      count = parse_int(
         limit if limit is not None else state.config.get("limit"),
         "-n",
         minimum=1,
         maximum=MAX_LIMIT,
         not_a_number="Value supplied for -n must be a number.",
         out_of_range="Value supplied for -n out of bounds.",
      )
      results = factory.get_history_service().search(
         directory=directory,
         limit=count,
         contains=contains,
         most_recent=most_recent,
         recurse=recurse,
         command_only=command_only,
      )
   except UshaError as exc:
      fail(exc)
   finally:
      factory.close()

   if output_json:
      print(json.dumps(results_to_json(results), indent=2))
      return

   if not results:
      return

   if output_table:
      console.print(render_results_table(results))
   else:
      print(format_results(results))
