"""Command-line interface for usha."""

from pathlib import Path

import click

from ...config import load_config, load_ignore_list
from ...constants import CONFIG_PATH, DB_PATH, IGNORE_PATH
from ...infrastructure.logs import make_logger
from .common import CliState
from .history_cmd import search, update
from .maintenance import clean, init_cmd


class SearchByDefaultGroup(click.Group):
    """Treat `usha [DIR] [-n N] [-s S] [-t] ...` as `usha search ...`."""

    def resolve_command(self, ctx, args):
        if args and args[0] not in self.commands:
            return "search", self.commands["search"], args
        return super().resolve_command(ctx, args)


@click.group(
    cls=SearchByDefaultGroup,
    invoke_without_command=True,
    context_settings={"ignore_unknown_options": True},
)
@click.option("-v", "--verbose", is_flag=True, help="Log queries and checksum checks to stderr")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DB_PATH,
    envvar="USHA_DB",
    show_default=True,
    help="History database file",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_PATH,
    envvar="USHA_CONFIG",
    show_default=True,
    help="JSON config file",
)
@click.option(
    "--ignore-file",
    "ignore_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=IGNORE_PATH,
    envvar="USHA_IGNORE",
    show_default=True,
    help="Commands whose first word is listed here are never recorded",
)
@click.pass_context
def cli(ctx, verbose: bool, db_path: Path, config_path: Path, ignore_path: Path):
    """usha - search your command-line history.

    Without a command, shows the most common commands across all directories.
    """
    logger = make_logger(verbose)
    config = load_config(config_path)
    configured = config.get("ignore")
    ignore = [word for word in configured if isinstance(word, str)] if isinstance(configured, list) else []
    ignore.extend(load_ignore_list(ignore_path))

    ctx.obj = CliState(db_path=db_path, logger=logger, config=config, ignore=ignore)

    if ctx.invoked_subcommand is None:
        ctx.invoke(search)


# Register commands
cli.add_command(init_cmd)
cli.add_command(update)
cli.add_command(search)
cli.add_command(clean)


def main():
    cli()


__all__ = ['cli', 'main']
