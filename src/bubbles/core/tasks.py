"""Pure "today's tasks" domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .entities import Event, Note, Reminder, local_day

DETAIL_DATE_FORMAT = "%d.%m.%Y"


class TaskKind(Enum):
    """Discriminant for the kind of entity a TaskRef points at."""

    NOTE = "note"
    REMINDER = "reminder"
    EVENT = "event"


@dataclass(frozen=True)
class TaskRef:
    """
    A denormalized reference to a note, reminder or event.

    Carries everything needed to render a task row without looking the
    entity up again. Dispatch on ``kind``.
    """

    kind: TaskKind
    id: str
    title: str
    detail: str = ""
    is_completed: bool = False
    when: datetime | None = None

    @classmethod
    def from_note(cls, note: Note) -> "TaskRef":
        return cls(
            kind=TaskKind.NOTE,
            id=note.id,
            title=note.title,
            is_completed=note.is_completed,
        )

    @classmethod
    def from_reminder(cls, reminder: Reminder) -> "TaskRef":
        return cls(
            kind=TaskKind.REMINDER,
            id=reminder.id,
            title=reminder.title,
            detail=local_day(reminder.due).strftime(DETAIL_DATE_FORMAT),
            is_completed=reminder.is_completed,
            when=reminder.due,
        )

    @classmethod
    def from_event(cls, event: Event) -> "TaskRef":
        return cls(
            kind=TaskKind.EVENT,
            id=event.id,
            title=event.title,
            detail=local_day(event.date).strftime(DETAIL_DATE_FORMAT),
            when=event.date,
        )

    @property
    def is_actionable(self) -> bool:
        """Whether the row can be ticked off (events cannot)."""
        return self.kind is not TaskKind.EVENT and not self.is_completed


def is_same_day(a: date | datetime, b: date | datetime) -> bool:
    """
    Same local calendar day, irrespective of time of day.

    23:59 and 00:01 the next morning are different days.
    """
    return local_day(a) == local_day(b)


def reminders_due_on(reminders: list[Reminder], as_of: date | datetime) -> list[Reminder]:
    """Filter to reminders due on as_of's calendar day."""
    day = local_day(as_of)
    return [r for r in reminders if r.due_day == day]


def events_on(events: list[Event], as_of: date | datetime) -> list[Event]:
    """Filter to events falling on as_of's calendar day."""
    day = local_day(as_of)
    return [e for e in events if e.day == day]


def todays_tasks(
    notes: list[Note],
    reminders: list[Reminder],
    events: list[Event],
    as_of: date | datetime,
) -> list[TaskRef]:
    """
    Today's tasks: open notes, then reminders due today, then today's events.

    Notes have no date, so every incomplete note counts. Reminders due
    today are included whether or not they are completed. Each group keeps
    insertion order.

    Pure function - no I/O.
    """
    return (
        [TaskRef.from_note(n) for n in notes if not n.is_completed]
        + [TaskRef.from_reminder(r) for r in reminders_due_on(reminders, as_of)]
        + [TaskRef.from_event(e) for e in events_on(events, as_of)]
    )


def completed_todays_tasks(
    notes: list[Note],
    reminders: list[Reminder],
    as_of: date | datetime,
) -> list[TaskRef]:
    """
    Completed notes (any day), then completed reminders due today.

    Pure function - no I/O.
    """
    return [TaskRef.from_note(n) for n in notes if n.is_completed] + [
        TaskRef.from_reminder(r) for r in reminders_due_on(reminders, as_of) if r.is_completed
    ]


def format_task_line(task: TaskRef, completed_view: bool = False) -> str:
    """
    Format a single task row for display.

    Pure function - no I/O.
    """
    match task.kind:
        case TaskKind.NOTE:
            icon = "note"
        case TaskKind.REMINDER:
            icon = "remind"
        case TaskKind.EVENT:
            icon = "event"

    mark = "x" if task.is_completed else " "
    if task.kind is TaskKind.EVENT:
        mark = "-"

    detail = task.detail
    if detail and completed_view and task.kind is TaskKind.REMINDER:
        detail = f"Was due: {detail}"
    suffix = f" ({detail})" if detail else ""
    return f"[{mark}] {icon:6} {task.title}{suffix}  #{task.id[:8]}"
