"""Illustrative starting content for a fresh store."""

from datetime import datetime, timedelta

from .core.entities import Achievement, Profile
from .store import TaskStore

SEED_NOTES = [
    ("Welcome to Bubble Life", "Start your bubbly journey!"),
    ("Buy groceries", "Milk, eggs, bread"),
    ("Work tasks", "Finish report"),
]

# (title, days from now, completed)
SEED_REMINDERS = [
    ("Call doctor", 2, False),
    ("Buy groceries", 2, False),
    ("Call mom", -1, True),
]

SEED_ACHIEVEMENTS = [
    Achievement("First Note", "Created your first bubble note", is_unlocked=True),
    Achievement("Task Master", "Completed 10 reminders", is_unlocked=False),
    Achievement("Consistent", "7-day activity streak", is_unlocked=True),
    Achievement("Organizer", "Created 5 different types of bubbles", is_unlocked=True),
]


def seed_store(store: TaskStore, now: datetime) -> TaskStore:
    """Append the sample notes and reminders, dated relative to now."""
    for title, content in SEED_NOTES:
        store.add_note(title, content)

    for title, days, completed in SEED_REMINDERS:
        reminder_id = store.add_reminder(title, now + timedelta(days=days))
        if completed:
            store.toggle_reminder_completed(reminder_id)

    return store


def build_store(now: datetime, seed: bool = True, profile: Profile | None = None) -> TaskStore:
    """Create the process-wide store, optionally filled with sample content."""
    if not seed:
        return TaskStore(profile=profile)
    store = TaskStore(achievements=SEED_ACHIEVEMENTS, profile=profile)
    return seed_store(store, now)
