"""Raw per-day records as read from the store."""

from dataclasses import dataclass, field

Row = dict[str, object]


class UserNotFoundError(LookupError):
    """Raised when no profile exists for a user identifier."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No profile found for user {user_id!r}")
        self.user_id = user_id


@dataclass(frozen=True)
class DayRecordSet:
    """Everything read from the store for one user and one day."""

    profile: Row
    latest_weight: Row | None = None
    meals: list[Row] = field(default_factory=list)
    workouts: list[Row] = field(default_factory=list)
    hydration: list[Row] = field(default_factory=list)
    sleep: list[Row] = field(default_factory=list)
    steps: list[Row] = field(default_factory=list)
    failed_categories: frozenset[str] = frozenset()
