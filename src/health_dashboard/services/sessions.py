"""Per-viewer dashboard sessions with expiry."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from health_dashboard.services.dashboard import DashboardService, DashboardState


@dataclass
class _SessionEntry:
    state: DashboardState
    expires_at: datetime


@dataclass
class DashboardSessionRegistry:
    """Keep one dashboard state per user identifier."""

    service: DashboardService
    ttl_seconds: int = 3600
    _entries: dict[str, _SessionEntry] = field(default_factory=dict, repr=False)

    def get(self, user_id: str) -> DashboardState:
        """Return the live session for ``user_id``, creating one if needed."""
        now = datetime.now(tz=UTC)
        self._evict_expired(now)
        entry = self._entries.get(user_id)
        if entry is None:
            entry = _SessionEntry(
                state=DashboardState(self.service),
                expires_at=now,
            )
            self._entries[user_id] = entry
        elif entry.state.window != self.service.build_window():
            entry.state.refresh_window()
        entry.expires_at = now + timedelta(seconds=self.ttl_seconds)
        return entry.state

    def __len__(self) -> int:
        return len(self._entries)

    def _evict_expired(self, now: datetime) -> None:
        expired = [
            key for key, entry in self._entries.items() if now >= entry.expires_at
        ]
        for key in expired:
            self._entries.pop(key, None)
