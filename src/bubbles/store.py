"""In-memory task store - single source of truth for notes, reminders and events."""

import calendar
import logging
from datetime import date, datetime

from .core import calendar as cal
from .core import stats as st
from .core import tasks as tk
from .core.entities import Achievement, Event, Note, Profile, Reminder, as_timestamp

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Owns the entity collections and answers queries over them.

    Mutations that look an entity up by id report not-found through their
    return value (False or None) instead of raising. Queries are computed
    from current state on every call.

    Not thread-safe: keep a store on the thread that built it.
    """

    def __init__(
        self,
        achievements: list[Achievement] | None = None,
        profile: Profile | None = None,
    ) -> None:
        self._notes: list[Note] = []
        self._reminders: list[Reminder] = []
        self._events: list[Event] = []
        self._achievements: tuple[Achievement, ...] = tuple(achievements or ())
        self.profile = profile or Profile()

    # ---- snapshots ----

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def reminders(self) -> tuple[Reminder, ...]:
        return tuple(self._reminders)

    @property
    def events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def achievements(self) -> tuple[Achievement, ...]:
        return self._achievements

    def _find_note(self, note_id: str) -> int | None:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        logger.debug(f"Note not found: {note_id}")
        return None

    def _find_reminder(self, reminder_id: str) -> int | None:
        for i, reminder in enumerate(self._reminders):
            if reminder.id == reminder_id:
                return i
        logger.debug(f"Reminder not found: {reminder_id}")
        return None

    # ---- notes ----

    def add_note(self, title: str, content: str = "") -> str:
        note = Note(title=title, content=content)
        self._notes.append(note)
        logger.debug(f"Added note {note.id}: {title!r}")
        return note.id

    def get_note(self, note_id: str) -> Note | None:
        idx = self._find_note(note_id)
        return self._notes[idx] if idx is not None else None

    def edit_note(self, note_id: str, title: str, content: str) -> bool:
        """Replace a note's title and content. False if no such note."""
        idx = self._find_note(note_id)
        if idx is None:
            return False
        note = self._notes[idx]
        note.title = title
        note.content = content
        logger.debug(f"Edited note {note_id}")
        return True

    def delete_note(self, note_id: str) -> bool:
        """Remove a note. False if no such note."""
        idx = self._find_note(note_id)
        if idx is None:
            return False
        del self._notes[idx]
        logger.debug(f"Deleted note {note_id}")
        return True

    def toggle_note_completed(self, note_id: str) -> bool | None:
        """Flip a note's completion. Returns the new value, or None if not found."""
        idx = self._find_note(note_id)
        if idx is None:
            return None
        note = self._notes[idx]
        note.is_completed = not note.is_completed
        logger.debug(f"Note {note_id} completed={note.is_completed}")
        return note.is_completed

    # ---- reminders ----

    def add_reminder(self, title: str, due: date | datetime) -> str:
        reminder = Reminder(title=title, due=as_timestamp(due))
        self._reminders.append(reminder)
        logger.debug(f"Added reminder {reminder.id}: {title!r} due {reminder.due}")
        return reminder.id

    def toggle_reminder_completed(self, reminder_id: str) -> bool | None:
        """Flip a reminder's completion. Returns the new value, or None if not found."""
        idx = self._find_reminder(reminder_id)
        if idx is None:
            return None
        reminder = self._reminders[idx]
        reminder.is_completed = not reminder.is_completed
        logger.debug(f"Reminder {reminder_id} completed={reminder.is_completed}")
        return reminder.is_completed

    def active_reminders(self) -> list[Reminder]:
        return [r for r in self._reminders if not r.is_completed]

    def completed_reminders(self) -> list[Reminder]:
        return [r for r in self._reminders if r.is_completed]

    # ---- events ----

    def add_event(self, title: str, when: date | datetime) -> str:
        event = Event(title=title, date=as_timestamp(when))
        self._events.append(event)
        logger.debug(f"Added event {event.id}: {title!r} on {event.date}")
        return event.id

    def events_on(self, day: date | datetime) -> list[Event]:
        return cal.events_for_day(self._events, day)

    # ---- queries ----

    def todays_tasks(self, as_of: date | datetime) -> list[tk.TaskRef]:
        return tk.todays_tasks(self._notes, self._reminders, self._events, as_of)

    def completed_todays_tasks(self, as_of: date | datetime) -> list[tk.TaskRef]:
        return tk.completed_todays_tasks(self._notes, self._reminders, as_of)

    def completion_rate(self) -> int:
        """Truncated integer percent of all reminders completed; 0 if none."""
        return st.completion_rate(self._reminders)

    def total_notes(self) -> int:
        return len(self._notes)

    def completed_reminders_count(self) -> int:
        return sum(1 for r in self._reminders if r.is_completed)

    def home_summary(self, as_of: date | datetime) -> dict[str, str]:
        return st.home_summary(self._notes, self._reminders, self._events, as_of)

    def month(
        self,
        as_of: date | datetime,
        month_of: date | datetime | None = None,
        first_weekday: int = calendar.SUNDAY,
    ) -> cal.MonthGrid:
        return cal.build_month_grid(self._events, as_of, month_of, first_weekday)

    def stats(self, as_of: date | datetime) -> st.StatsData:
        return st.assemble_stats(
            self._notes,
            self._reminders,
            list(self._achievements),
            self.profile,
            as_of,
        )
