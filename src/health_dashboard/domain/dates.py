"""Day window and day-boundary helpers."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
_MONTH_NUMBERS = {name: index + 1 for index, name in enumerate(MONTH_NAMES)}


@dataclass(frozen=True)
class DayCell:
    """One selectable day in the dashboard's day picker."""

    day: str
    month: str
    is_today: bool

    def label(self, selected: bool) -> str:
        """Return the picker text for this cell."""
        if not selected:
            return self.day
        if self.is_today:
            return f"Today, {self.day} {self.month}"
        return f"{self.day} {self.month}"


def build_window(days_before: int, days_after: int, now: datetime) -> list[DayCell]:
    """Return consecutive day cells around the date of ``now``."""
    today = now.date()
    cells = []
    for offset in range(-days_before, days_after + 1):
        current = today + timedelta(days=offset)
        cells.append(
            DayCell(
                day=f"{current.day:02d}",
                month=MONTH_NAMES[current.month - 1],
                is_today=offset == 0,
            )
        )
    return cells


def day_bounds(
    cell: DayCell, reference_year: int, tz: tzinfo
) -> tuple[datetime, datetime]:
    """Return the half-open ``[start, end)`` interval of a cell's local day.

    The cell only carries day and month, so the calendar date is rebuilt with
    ``reference_year``. A window that crosses New Year therefore resolves the
    days on the other side of the boundary to the wrong year.
    """
    day = date(reference_year, _MONTH_NUMBERS[cell.month], int(cell.day))
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start, end
