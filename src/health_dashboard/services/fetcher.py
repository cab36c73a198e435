"""Concurrent per-day record retrieval."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from health_dashboard.domain.records import DayRecordSet, Row, UserNotFoundError

_logger = logging.getLogger(__name__)

DAY_CATEGORIES = ("meals", "workouts", "hydration", "sleep", "steps")


class RecordRepository(Protocol):
    """Read interface for the health record store."""

    def get_profile(self, user_id: str) -> Row | None:
        """Return the user's profile row, if present."""

    def get_latest_weight(self, user_id: str) -> Row | None:
        """Return the most recent weight sample, if any."""

    def list_meals(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        """Return meals created within ``[start, end)``."""

    def list_workouts(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[Row]:
        """Return workouts created within ``[start, end)``."""

    def list_hydration(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[Row]:
        """Return hydration entries created within ``[start, end)``."""

    def list_sleep(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        """Return sleep entries created within ``[start, end)``."""

    def list_steps(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        """Return step entries created within ``[start, end)``."""


@dataclass
class DayRecordFetcher:
    """Fan out the reads for one day and collect them into a record set."""

    repository: RecordRepository

    async def fetch_day(
        self, user_id: str, start: datetime, end: datetime
    ) -> DayRecordSet:
        """Read all categories for ``user_id`` within ``[start, end)``.

        Raises ``UserNotFoundError`` when the user has no profile. Any other
        category that fails to load is logged and treated as empty.
        """
        readers: dict[str, Callable[..., list[Row]]] = {
            "meals": self.repository.list_meals,
            "workouts": self.repository.list_workouts,
            "hydration": self.repository.list_hydration,
            "sleep": self.repository.list_sleep,
            "steps": self.repository.list_steps,
        }
        profile, weight, *collections = await asyncio.gather(
            asyncio.to_thread(self.repository.get_profile, user_id),
            self._read("weight", self.repository.get_latest_weight, user_id),
            *(
                self._read(category, readers[category], user_id, start, end)
                for category in DAY_CATEGORIES
            ),
        )
        if not profile:
            raise UserNotFoundError(user_id)

        failed = set()
        results: dict[str, list[Row]] = {}
        for category, (ok, rows) in zip(DAY_CATEGORIES, collections, strict=True):
            if not ok:
                failed.add(category)
            results[category] = rows or []
        weight_ok, weight_row = weight
        if not weight_ok:
            failed.add("weight")

        return DayRecordSet(
            profile=profile,
            latest_weight=weight_row,
            failed_categories=frozenset(failed),
            **results,
        )

    async def _read(
        self, category: str, reader: Callable[..., object], *args: object
    ) -> tuple[bool, object]:
        try:
            return True, await asyncio.to_thread(reader, *args)
        except Exception:
            _logger.exception(
                "Failed to fetch %s records",
                category,
                extra={"category": category, "user_id": args[0]},
            )
            return False, None
