"""Dashboard recomputation for a selected user and day."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from zoneinfo import ZoneInfo

from health_dashboard.domain.dates import DayCell, build_window, day_bounds
from health_dashboard.domain.records import UserNotFoundError
from health_dashboard.domain.summary import DaySummary
from health_dashboard.services.aggregator import aggregate
from health_dashboard.services.fetcher import DayRecordFetcher

_logger = logging.getLogger(__name__)


@dataclass
class DashboardService:
    """Load aggregated day summaries from the record store."""

    fetcher: DayRecordFetcher
    timezone_name: str = "UTC"
    days_before: int = 2
    days_after: int = 2
    clock: Callable[[], datetime] | None = None

    @property
    def today_index(self) -> int:
        return self.days_before

    def now(self) -> datetime:
        tz = ZoneInfo(self.timezone_name)
        if self.clock is not None:
            return self.clock().astimezone(tz)
        return datetime.now(tz=tz)

    def build_window(self, now: datetime | None = None) -> list[DayCell]:
        """Return the selectable day window around ``now``."""
        return build_window(self.days_before, self.days_after, now or self.now())

    def bounds_for(
        self, cell: DayCell, now: datetime | None = None
    ) -> tuple[datetime, datetime]:
        """Return the local-day interval of ``cell`` in the current year."""
        reference = now or self.now()
        return day_bounds(cell, reference.year, ZoneInfo(self.timezone_name))

    async def load_day(
        self, user_id: str, cell: DayCell, now: datetime | None = None
    ) -> DaySummary:
        """Fetch and aggregate one day for ``user_id``."""
        start, end = self.bounds_for(cell, now)
        records = await self.fetcher.fetch_day(user_id, start, end)
        if records.failed_categories:
            _logger.warning(
                "Day summary built with missing categories: %s",
                ", ".join(sorted(records.failed_categories)),
                extra={"user_id": user_id},
            )
        return aggregate(records)


@dataclass(frozen=True)
class DashboardSnapshot:
    """The published result of one recompute."""

    user_id: str
    day_index: int
    summary: DaySummary | None
    error: str | None = None

    @property
    def user_not_found(self) -> bool:
        return self.summary is None


@dataclass
class DashboardState:
    """Current dashboard snapshot for a single viewer.

    A result is published only while its ``(user_id, day_index)`` is still the
    latest selection. Recomputes for the same selection share the newest
    published snapshot; an older one never replaces a newer one.
    """

    service: DashboardService
    window: list[DayCell] = field(default_factory=list)
    current: DashboardSnapshot | None = None
    _sequence: int = field(default=0, init=False, repr=False)
    _published_sequence: int = field(default=0, init=False, repr=False)
    _latest_key: tuple[str, int] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.window:
            self.window = self.service.build_window()

    def refresh_window(self, now: datetime | None = None) -> list[DayCell]:
        """Rebuild the day window, e.g. after midnight."""
        self.window = self.service.build_window(now)
        return self.window

    async def recompute(
        self, user_id: str, day_index: int
    ) -> DashboardSnapshot | None:
        """Recompute the dashboard and publish it unless superseded.

        Returns the snapshot now current for this selection, or ``None`` when
        a different selection overtook this one and the result was discarded.
        A failed load of the latest selection clears ``current`` and re-raises.
        """
        if not 0 <= day_index < len(self.window):
            raise IndexError(f"Day index {day_index} is outside the day window")
        self._sequence += 1
        sequence = self._sequence
        key = (user_id, day_index)
        self._latest_key = key
        cell = self.window[day_index]

        try:
            summary = await self.service.load_day(user_id, cell)
            snapshot = DashboardSnapshot(
                user_id=user_id, day_index=day_index, summary=summary
            )
        except UserNotFoundError as exc:
            _logger.info("No profile for user", extra={"user_id": exc.user_id})
            snapshot = DashboardSnapshot(
                user_id=user_id, day_index=day_index, summary=None, error=str(exc)
            )
        except Exception:
            if key == self._latest_key and sequence > self._published_sequence:
                self._published_sequence = sequence
                self.current = None
            raise

        if key != self._latest_key:
            _logger.debug(
                "Discarding stale dashboard result",
                extra={"user_id": user_id, "day_index": day_index},
            )
            return None
        if sequence < self._published_sequence:
            return self.current
        self._published_sequence = sequence
        self.current = snapshot
        return snapshot
