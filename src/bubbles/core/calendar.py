"""Pure calendar domain logic - no I/O dependencies."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime

from .entities import Event, local_day

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@dataclass
class CalendarDay:
    """One cell of the month grid."""

    date: date
    is_today: bool
    is_past: bool
    event_count: int

    @property
    def label(self) -> str:
        return str(self.date.day)


@dataclass
class MonthGrid:
    """A month laid out for display, weeks starting on first_weekday."""

    title: str
    weekday_labels: list[str]
    leading_blanks: int
    days: list[CalendarDay]

    def weeks(self) -> list[list[CalendarDay | None]]:
        """Rows of seven cells; None pads before the 1st and after the last day."""
        cells: list[CalendarDay | None] = [None] * self.leading_blanks + list(self.days)
        while len(cells) % 7:
            cells.append(None)
        return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def weekday_index(name: str) -> int:
    """Monday=0 ... Sunday=6. Raises ValueError for an unknown name."""
    return WEEKDAY_NAMES.index(name.strip().capitalize())


def month_days(month_of: date | datetime) -> list[date]:
    """Every day of the month containing month_of, in order."""
    d = local_day(month_of)
    _, last = calendar.monthrange(d.year, d.month)
    return [date(d.year, d.month, day) for day in range(1, last + 1)]


def events_for_day(events: list[Event], day: date | datetime) -> list[Event]:
    """Events on the given calendar day, in insertion order."""
    target = local_day(day)
    return [e for e in events if e.day == target]


def format_month_year(month_of: date | datetime) -> str:
    """'September 2025' style title."""
    return local_day(month_of).strftime("%B %Y")


def build_month_grid(
    events: list[Event],
    as_of: date | datetime,
    month_of: date | datetime | None = None,
    first_weekday: int = calendar.SUNDAY,
) -> MonthGrid:
    """
    Lay out a month for display.

    Pure function - no I/O.

    Args:
        events: All known events
        as_of: Reference "now"; decides today and past days
        month_of: Any date in the month to show (defaults to as_of's month)
        first_weekday: Column the week starts on (calendar.MONDAY=0 ... SUNDAY=6)

    Returns:
        MonthGrid with one CalendarDay per day of the month
    """
    today = local_day(as_of)
    month_of = month_of or today
    days = month_days(month_of)

    counts: dict[date, int] = {}
    for event in events:
        counts[event.day] = counts.get(event.day, 0) + 1

    labels = [WEEKDAY_NAMES[(first_weekday + i) % 7][:3] for i in range(7)]
    leading = (days[0].weekday() - first_weekday) % 7

    return MonthGrid(
        title=format_month_year(month_of),
        weekday_labels=labels,
        leading_blanks=leading,
        days=[
            CalendarDay(
                date=d,
                is_today=d == today,
                is_past=d < today,
                event_count=counts.get(d, 0),
            )
            for d in days
        ],
    )


def format_month_grid(grid: MonthGrid) -> str:
    """
    Render the grid as text. Today is bracketed, days with events get a '*'.

    Pure function - no I/O.
    """
    lines = [grid.title, " ".join(f"{label:>5}" for label in grid.weekday_labels)]
    for week in grid.weeks():
        cells = []
        for day in week:
            if day is None:
                cells.append("     ")
                continue
            text = f"[{day.label}]" if day.is_today else day.label
            if day.event_count:
                text += "*"
            cells.append(f"{text:>5}")
        lines.append(" ".join(cells).rstrip())
    return "\n".join(lines)
