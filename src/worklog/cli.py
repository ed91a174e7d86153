"""worklog CLI - personal day log."""

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime

import click

from .adapters.file_day_store import FileDayStore
from .config import Config, load_config
from .core.dates import canonicalize
from .core.day import Section
from .errors import NotFound, WorklogError
from .operations import (
    append,
    complete,
    get_store,
    new_day,
    procrastinate as procrastinate_todo,
    remove,
    show_day,
    show_week,
)

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """State shared by all commands of one invocation."""

    config: Config
    store: FileDayStore
    key: str


@contextmanager
def _reporting_errors():
    """NotFound is a notice; every other worklog error ends the process."""
    try:
        yield
    except NotFound as e:
        click.echo(f">>> {e}")
    except WorklogError as e:
        logger.debug("Command failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _echo_day(session: Session, key: str) -> None:
    click.echo()
    click.echo(show_day(session.store, key, as_of=datetime.now()))


class LogWordsGroup(click.Group):
    """Command group where unknown leading words are logged through ``add``.

    ``worklog made a treasure`` runs ``worklog add made a treasure``.
    """

    def resolve_command(self, ctx, args):
        if args and self.get_command(ctx, args[0]) is None:
            return "add", self.get_command(ctx, "add"), args
        return super().resolve_command(ctx, args)


@click.group(cls=LogWordsGroup, invoke_without_command=True)
@click.version_option(package_name="worklog")
@click.option("--date", "-d", "date_str", default=None,
              help="Day to act on (YYYY-MM-DD, today, yesterday, tomorrow, +N, -N)")
@click.option("--today", "relative", flag_value="today", help="Act on today")
@click.option("--yesterday", "-y", "relative", flag_value="yesterday", help="Act on yesterday")
@click.option("--tomorrow", "relative", flag_value="tomorrow", help="Act on tomorrow")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, date_str: str | None, relative: str | None, debug: bool):
    """worklog - log what you did and what is left to do, one file per day.

    \b
    Examples:
      worklog made a treasure
      worklog todo find a nice cave
      worklog done 0
    """
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    with _reporting_errors():
        key = canonicalize(date_str or relative or "today", as_of=datetime.now())
        store = get_store(config)

    ctx.obj = Session(config=config, store=store, key=key)

    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.option("--todo", "-t", "as_todo", is_flag=True, help="Add as a todo entry")
@click.pass_obj
def add(session: Session, words: tuple[str, ...], as_todo: bool):
    """Log something you did (or, with 'todo ...', something to do)."""
    message = " ".join(words)
    section = Section.TODO if as_todo else Section.ACTIONS

    if not as_todo and message.lower().startswith("todo "):
        section = Section.TODO
        message = message[5:]

    with _reporting_errors():
        append(session.store, session.key, section, message)
        _echo_day(session, session.key)


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def todo(session: Session, words: tuple[str, ...]):
    """Add a todo entry."""
    with _reporting_errors():
        append(session.store, session.key, Section.TODO, " ".join(words))
        _echo_day(session, session.key)


@main.command("rm")
@click.argument("index", type=int)
@click.option("--todo", "-t", "from_todo", is_flag=True, help="Remove a todo entry instead of a done one")
@click.pass_obj
def rm(session: Session, index: int, from_todo: bool):
    """Remove an entry by the index shown."""
    section = Section.TODO if from_todo else Section.ACTIONS
    with _reporting_errors():
        remove(session.store, session.key, section, index)
        _echo_day(session, session.key)


@main.command()
@click.argument("index", type=int)
@click.pass_obj
def done(session: Session, index: int):
    """Mark a todo entry as done."""
    with _reporting_errors():
        complete(session.store, session.key, index)
        _echo_day(session, session.key)


@main.command()
@click.pass_obj
def show(session: Session):
    """Show the day."""
    with _reporting_errors():
        _echo_day(session, session.key)


@main.command()
@click.pass_obj
def week(session: Session):
    """Show the week ending on the day."""
    with _reporting_errors():
        click.echo()
        click.echo(show_week(session.store, session.key, as_of=datetime.now()))


@main.command()
@click.pass_obj
def new(session: Session):
    """Create the day's file if it does not exist yet."""
    with _reporting_errors():
        new_day(session.store, session.key)
        _echo_day(session, session.key)


@main.command()
@click.pass_obj
def edit(session: Session):
    """Open the day's file in your editor."""
    with _reporting_errors():
        new_day(session.store, session.key)
        path = session.store.path_for(session.key)
        click.edit(filename=str(path), editor=session.config.editor or None)


@main.command()
@click.option("--to", "target", default=None, help="Day to move todo entries to")
@click.pass_obj
def procrastinate(session: Session, target: str | None):
    """Move the day's todo entries to the next working day."""
    with _reporting_errors():
        if target is not None:
            target = canonicalize(target, as_of=datetime.now())
        target = procrastinate_todo(session.store, session.key, target)
        _echo_day(session, session.key)
        _echo_day(session, target)


if __name__ == "__main__":
    main()
