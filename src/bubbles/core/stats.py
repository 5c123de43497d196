"""Pure statistics logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .entities import Achievement, Event, Note, Profile, Reminder, local_day
from .tasks import completed_todays_tasks, events_on, reminders_due_on, todays_tasks

WEEK_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


@dataclass
class StatsData:
    """Assembled statistics ready for formatting."""

    date: date
    total_notes: int
    completed_reminders: int
    completion_rate: int
    weekly_completion: list[int]
    popped_this_week: int
    achievements: list[Achievement]
    profile: Profile

    @property
    def unlocked_achievements(self) -> int:
        return sum(1 for a in self.achievements if a.is_unlocked)

    @property
    def best_weekday(self) -> str | None:
        """Label of the strongest day this week, or None if nothing was done."""
        best = max(self.weekly_completion, default=0)
        if best == 0:
            return None
        return WEEK_LABELS[self.weekly_completion.index(best)]


def completion_rate(reminders: list[Reminder]) -> int:
    """
    Percentage of all reminders marked completed, as a truncated integer.

    Returns 0 when there are no reminders.
    """
    total = len(reminders)
    if total == 0:
        return 0
    done = sum(1 for r in reminders if r.is_completed)
    return done * 100 // total


def week_of(as_of: date | datetime) -> list[date]:
    """Monday through Sunday of the week containing as_of."""
    day = local_day(as_of)
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=i) for i in range(7)]


def weekly_completion(reminders: list[Reminder], as_of: date | datetime) -> list[int]:
    """
    Completion rate per day for the week containing as_of.

    Each entry covers the reminders due that day; a day with none is 0.
    Pure function - no I/O.
    """
    return [completion_rate(reminders_due_on(reminders, d)) for d in week_of(as_of)]


def popped_this_week(reminders: list[Reminder], as_of: date | datetime) -> int:
    """Completed reminders due in the week containing as_of."""
    days = set(week_of(as_of))
    return sum(1 for r in reminders if r.is_completed and r.due_day in days)


def assemble_stats(
    notes: list[Note],
    reminders: list[Reminder],
    achievements: list[Achievement],
    profile: Profile,
    as_of: date | datetime,
) -> StatsData:
    """
    Assemble statistics from raw collections.

    Pure function - no I/O.
    """
    return StatsData(
        date=local_day(as_of),
        total_notes=len(notes),
        completed_reminders=sum(1 for r in reminders if r.is_completed),
        completion_rate=completion_rate(reminders),
        weekly_completion=weekly_completion(reminders, as_of),
        popped_this_week=popped_this_week(reminders, as_of),
        achievements=list(achievements),
        profile=profile,
    )


def home_summary(
    notes: list[Note],
    reminders: list[Reminder],
    events: list[Event],
    as_of: date | datetime,
) -> dict[str, str]:
    """
    Header lines for the home screen.

    Pure function - no I/O.
    Returns dict with keys: title, subtitle, progress
    """
    open_tasks = todays_tasks(notes, reminders, events, as_of)
    done = completed_todays_tasks(notes, reminders, as_of)
    n_events = len(events_on(events, as_of))
    n_reminders = len(reminders_due_on(reminders, as_of))

    return {
        "title": f"Today, {local_day(as_of).strftime('%A, %B %d')}",
        "subtitle": f"You have {n_events} events and {n_reminders} reminders today",
        "progress": (
            f"{len(done)}/{len(open_tasks) + len(done)} tasks done today"
            f" - {completion_rate(reminders)}%"
        ),
    }


def format_stats_sections(data: StatsData) -> dict[str, str]:
    """
    Format statistics into text sections.

    Pure function - no I/O.
    Returns dict with keys: totals, weekly, achievements, banner
    """
    totals = (
        f"Total Notes: {data.total_notes}\n"
        f"Reminders Done: {data.completed_reminders}\n"
        f"Completion: {data.completion_rate}%"
    )

    weekly = "  ".join(
        f"{label} {pct}%" for label, pct in zip(WEEK_LABELS, data.weekly_completion)
    )
    if data.best_weekday:
        weekly += f"\nBest day: {data.best_weekday}"

    achievement_lines = []
    for ach in data.achievements:
        marker = "*" if ach.is_unlocked else " "
        achievement_lines.append(f"[{marker}] {ach.title} - {ach.description}")
    achievements_md = "\n".join(achievement_lines) or "No achievements yet."
    achievements_md += f"\n{data.unlocked_achievements}/{len(data.achievements)} unlocked"

    return {
        "totals": totals,
        "weekly": weekly,
        "achievements": achievements_md,
        "banner": f"You popped {data.popped_this_week} bubbles this week!",
    }
