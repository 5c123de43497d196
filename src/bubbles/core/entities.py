"""Entity records - no I/O dependencies."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time


def new_id() -> str:
    """Opaque unique id for a freshly created entity."""
    return uuid.uuid4().hex


def as_timestamp(value: date | datetime) -> datetime:
    """Normalize a plain date to local midnight and aware datetimes to local time."""
    if isinstance(value, datetime):
        return value.astimezone() if value.tzinfo is not None else value
    return datetime.combine(value, time(0, 0))


def local_day(value: date | datetime) -> date:
    """
    Calendar day of a timestamp in the local zone.

    Naive datetimes are taken as local time already; aware ones are
    converted first.
    """
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


@dataclass
class Note:
    """A free-form bubble note. Notes carry no date."""

    title: str
    content: str
    is_completed: bool = False
    id: str = field(default_factory=new_id)


@dataclass
class Reminder:
    """A reminder due at a point in time."""

    title: str
    due: datetime
    is_completed: bool = False
    id: str = field(default_factory=new_id)

    @property
    def due_day(self) -> date:
        return local_day(self.due)


@dataclass
class Event:
    """A calendar event. Events have no completion state."""

    title: str
    date: datetime
    id: str = field(default_factory=new_id)

    @property
    def day(self) -> date:
        return local_day(self.date)


@dataclass(frozen=True)
class Achievement:
    """A gamification badge. Seed data only; never unlocked at runtime."""

    title: str
    description: str
    is_unlocked: bool
    id: str = field(default_factory=new_id)


@dataclass(frozen=True)
class Profile:
    """Static profile shown alongside the statistics."""

    display_name: str = "Bubble Explorer"
    tagline: str = "Living life one bubble at a time"
    member_since: str = "January 2024"
    days_active: int = 635
    current_streak: int = 12
