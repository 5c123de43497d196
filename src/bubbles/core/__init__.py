"""Functional core - pure business logic with no I/O."""

from .entities import Note, Reminder, Event, Achievement, Profile
from .tasks import TaskKind, TaskRef, todays_tasks, completed_todays_tasks, is_same_day
from .calendar import CalendarDay, MonthGrid, build_month_grid, events_for_day, month_days
from .stats import StatsData, assemble_stats, completion_rate, weekly_completion

__all__ = [
    # Entities
    "Note",
    "Reminder",
    "Event",
    "Achievement",
    "Profile",
    # Tasks
    "TaskKind",
    "TaskRef",
    "todays_tasks",
    "completed_todays_tasks",
    "is_same_day",
    # Calendar
    "CalendarDay",
    "MonthGrid",
    "build_month_grid",
    "events_for_day",
    "month_days",
    # Stats
    "StatsData",
    "assemble_stats",
    "completion_rate",
    "weekly_completion",
]
