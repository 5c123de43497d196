"""Bubbles CLI - notes, reminders and events in a bubble."""

import json
import logging
import shlex
import sys
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import NoReturn

import click

from .config import Config, load_config
from .core.calendar import format_month_grid
from .core.entities import as_timestamp, local_day
from .core.stats import format_stats_sections
from .core.tasks import TaskRef, format_task_line
from .seed import build_store
from .store import TaskStore

SHORT_DATE_FORMAT = "%d/%m/%y"
LONG_DATE_FORMAT = "%B %d, %Y"


@dataclass
class Session:
    """Everything a command needs: the store and the reference clock."""

    store: TaskStore
    config: Config
    now: datetime | None = None

    def as_of(self) -> datetime:
        return self.now or datetime.now()


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _parse_when(value: str, as_of: datetime) -> datetime:
    """ISO date/datetime, or 'today' / 'tomorrow' / 'yesterday'."""
    relative = {"today": 0, "tomorrow": 1, "yesterday": -1}
    lowered = value.strip().lower()
    if lowered in relative:
        return datetime.combine(local_day(as_of) + timedelta(days=relative[lowered]), datetime.min.time())
    try:
        return as_timestamp(datetime.fromisoformat(value))
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a date (YYYY-MM-DD)")


def _resolve(ids: list[str], given: str) -> str:
    """Expand a unique id prefix to the full id; unknown ids pass through."""
    if not given or given in ids:
        return given
    matches = [i for i in ids if i.startswith(given)]
    if len(matches) > 1:
        _fail(f"id {given!r} is ambiguous")
    return matches[0] if matches else given


def _task_json(task: TaskRef) -> dict:
    return {
        "kind": task.kind.value,
        "id": task.id,
        "title": task.title,
        "detail": task.detail,
        "completed": task.is_completed,
        "when": task.when.isoformat() if task.when else None,
    }


@click.group()
@click.version_option(package_name="bubbles")
@click.option("--now", "now_str", default=None,
              help="Reference time (YYYY-MM-DD[THH:MM]), defaults to the current time")
@click.option("--no-seed", is_flag=True, help="Start with an empty store")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, now_str: str | None, no_seed: bool, debug: bool):
    """Bubbles - notes, reminders and events."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    # The shell re-enters this group with its session already in place.
    if isinstance(ctx.obj, Session):
        if now_str or no_seed:
            click.echo("Note: --now and --no-seed only apply when starting a session.", err=True)
        return

    config = load_config()
    now = _parse_when(now_str, datetime.now()) if now_str else None
    store = build_store(
        now or datetime.now(),
        seed=config.seed_data and not no_seed,
        profile=config.profile(),
    )
    ctx.obj = Session(store=store, config=config, now=now)


@main.command()
@click.option("--completed", is_flag=True, help="Also list what is already done")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def today(session: Session, completed: bool, as_json: bool):
    """Show today's tasks."""
    as_of = session.as_of()
    store = session.store
    open_tasks = store.todays_tasks(as_of)
    done = store.completed_todays_tasks(as_of)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "date": local_day(as_of).isoformat(),
                    "tasks": [_task_json(t) for t in open_tasks],
                    "completed": [_task_json(t) for t in done],
                    "completion_rate": store.completion_rate(),
                },
                indent=2,
            )
        )
        return

    summary = store.home_summary(as_of)
    click.echo(summary["title"])
    click.echo(f"{summary['subtitle']}\n")

    if not open_tasks:
        click.echo("Nothing left for today.")
    for task in open_tasks:
        click.echo(format_task_line(task))

    click.echo(f"\n{summary['progress']}")

    if completed and done:
        click.echo("\nDone:")
        for task in done:
            click.echo(format_task_line(task, completed_view=True))


# ---- notes ----


@main.command("notes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_notes(session: Session, as_json: bool):
    """List all notes."""
    notes = session.store.notes

    if as_json:
        click.echo(
            json.dumps(
                [
                    {"id": n.id, "title": n.title, "content": n.content, "completed": n.is_completed}
                    for n in notes
                ],
                indent=2,
            )
        )
        return

    if not notes:
        click.echo("You don't have any notes yet - use 'note add' to add your first bubble.")
        return

    for note in notes:
        mark = "x" if note.is_completed else " "
        click.echo(f"[{mark}] {note.title}  #{note.id[:8]}")


@main.group()
def note():
    """Create and change notes."""


def _note_id(session: Session, given: str) -> str:
    return _resolve([n.id for n in session.store.notes], given)


@note.command("add")
@click.argument("title")
@click.argument("content", default="")
@click.pass_obj
def note_add(session: Session, title: str, content: str):
    """Create a note."""
    note_id = session.store.add_note(title, content)
    click.echo(f"Created note #{note_id[:8]}")


@note.command("show")
@click.argument("note_id")
@click.pass_obj
def note_show(session: Session, note_id: str):
    """Show a note's content."""
    found = session.store.get_note(_note_id(session, note_id))
    if found is None:
        _fail(f"no note {note_id!r}")
    status = "done" if found.is_completed else "open"
    click.echo(f"{found.title} ({status})\n")
    click.echo(found.content or "(empty)")


@note.command("edit")
@click.argument("note_id")
@click.option("--title", default=None, help="New title")
@click.option("--content", default=None, help="New content")
@click.pass_obj
def note_edit(session: Session, note_id: str, title: str | None, content: str | None):
    """Change a note's title and/or content."""
    store = session.store
    full_id = _note_id(session, note_id)
    current = store.get_note(full_id)
    if current is None:
        _fail(f"no note {note_id!r}")

    store.edit_note(
        full_id,
        title if title is not None else current.title,
        content if content is not None else current.content,
    )
    click.echo(f"Saved note #{full_id[:8]}")


@note.command("delete")
@click.argument("note_id")
@click.pass_obj
def note_delete(session: Session, note_id: str):
    """Delete a note."""
    full_id = _note_id(session, note_id)
    if not session.store.delete_note(full_id):
        _fail(f"no note {note_id!r}")
    click.echo(f"Deleted note #{full_id[:8]}")


@note.command("toggle")
@click.argument("note_id")
@click.pass_obj
def note_toggle(session: Session, note_id: str):
    """Mark a note done, or open again."""
    full_id = _note_id(session, note_id)
    result = session.store.toggle_note_completed(full_id)
    if result is None:
        _fail(f"no note {note_id!r}")
    click.echo(f"Note #{full_id[:8]} {'done' if result else 'reopened'}")


# ---- reminders ----


@main.command("reminders")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_reminders(session: Session, as_json: bool):
    """List active and completed reminders."""
    store = session.store

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": r.id,
                        "title": r.title,
                        "due": r.due.isoformat(),
                        "completed": r.is_completed,
                    }
                    for r in store.reminders
                ],
                indent=2,
            )
        )
        return

    if not store.reminders:
        click.echo("No reminders yet - use 'reminder add' to create one.")
        return

    for heading, reminders in (
        ("Active", store.active_reminders()),
        ("Completed", store.completed_reminders()),
    ):
        click.echo(f"### {heading}")
        for r in reminders:
            mark = "x" if r.is_completed else " "
            click.echo(f"  [{mark}] {r.title} (Due: {local_day(r.due).strftime(SHORT_DATE_FORMAT)})  #{r.id[:8]}")


@main.group()
def reminder():
    """Create and tick off reminders."""


@reminder.command("add")
@click.argument("title")
@click.argument("due")
@click.pass_obj
def reminder_add(session: Session, title: str, due: str):
    """Create a reminder due on DUE (YYYY-MM-DD, today, tomorrow)."""
    when = _parse_when(due, session.as_of())
    reminder_id = session.store.add_reminder(title, when)
    click.echo(f"Created reminder #{reminder_id[:8]} due {when.strftime(SHORT_DATE_FORMAT)}")


@reminder.command("toggle")
@click.argument("reminder_id")
@click.pass_obj
def reminder_toggle(session: Session, reminder_id: str):
    """Mark a reminder done, or open again."""
    store = session.store
    full_id = _resolve([r.id for r in store.reminders], reminder_id)
    result = store.toggle_reminder_completed(full_id)
    if result is None:
        _fail(f"no reminder {reminder_id!r}")
    click.echo(f"Reminder #{full_id[:8]} {'done' if result else 'reopened'}")


# ---- calendar ----


@main.command("calendar")
@click.option("--month", "month_str", default=None, help="Month to show (YYYY-MM)")
@click.pass_obj
def calendar_month(session: Session, month_str: str | None):
    """Show the month grid. '*' marks days with events."""
    as_of = session.as_of()
    month_of = None
    if month_str:
        try:
            month_of = date.fromisoformat(f"{month_str}-01")
        except ValueError:
            raise click.BadParameter(f"{month_str!r} is not a month (YYYY-MM)")

    grid = session.store.month(as_of, month_of, session.config.first_weekday_index)
    click.echo(format_month_grid(grid))

    if not session.store.events:
        click.echo("\nNo events yet - use 'event add' to add your first bubble event.")


@main.command("events")
@click.argument("day", default="today")
@click.pass_obj
def list_events(session: Session, day: str):
    """List events on DAY."""
    when = _parse_when(day, session.as_of())
    events = session.store.events_on(when)

    click.echo(when.strftime(LONG_DATE_FORMAT))
    if not events:
        click.echo("No events on this day")
        return
    for event in events:
        click.echo(f"  {event.title}  #{event.id[:8]}")


@main.group()
def event():
    """Create events."""


@event.command("add")
@click.argument("title")
@click.argument("day", default="today")
@click.pass_obj
def event_add(session: Session, title: str, day: str):
    """Create an event on DAY (defaults to today)."""
    when = _parse_when(day, session.as_of())
    event_id = session.store.add_event(title, when)
    click.echo(f"Created event #{event_id[:8]} on {when.strftime(LONG_DATE_FORMAT)}")


# ---- statistics ----


@main.command()
@click.pass_obj
def stats(session: Session):
    """Show bubble statistics."""
    data = session.store.stats(session.as_of())
    sections = format_stats_sections(data)

    click.echo("Bubble Statistics\n")
    click.echo(f"{sections['totals']}\n")
    click.echo(f"Weekly Progress:\n{sections['weekly']}\n")
    click.echo(f"Achievements:\n{sections['achievements']}\n")
    click.echo(sections["banner"])


@main.command()
@click.pass_obj
def profile(session: Session):
    """Show the profile card."""
    store = session.store
    p = store.profile

    click.echo(p.display_name)
    click.echo(p.tagline)
    click.echo(f"Member since {p.member_since}\n")
    click.echo(f"Total Notes: {store.total_notes()}")
    click.echo(f"Completed Tasks: {store.completed_reminders_count()}")
    click.echo(f"Days Active: {p.days_active}")
    click.echo(f"Current Streak: {p.current_streak} days\n")

    click.echo("Achievements:")
    for ach in store.achievements:
        marker = "*" if ach.is_unlocked else " "
        click.echo(f"  [{marker}] {ach.title} - {ach.description}")


# ---- interactive ----


@main.command()
@click.pass_context
def shell(ctx):
    """
    Interactive session; changes last until you quit.

    The store and reference time are fixed when the shell starts, so pass
    --now or --no-seed before "shell", not to commands typed inside it.
    """
    session: Session = ctx.obj
    click.echo("Bubbles shell. Type 'help' for commands, 'quit' to leave.")

    while True:
        try:
            line = click.prompt("bubbles", prompt_suffix="> ", default="", show_default=False)
        except (EOFError, click.exceptions.Abort):
            click.echo()
            break

        try:
            args = shlex.split(line)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            continue

        if not args:
            continue
        if args[0] in ("quit", "exit"):
            break
        if args[0] == "help":
            args = ["--help"]
        if args[0] == "shell":
            click.echo("Already in the shell.")
            continue

        try:
            main.main(args=args, prog_name="bubbles", obj=session, standalone_mode=False)
        except click.ClickException as e:
            e.show()
        except SystemExit:
            # Commands exit non-zero on not-found; keep the session alive.
            pass


if __name__ == "__main__":
    main()
