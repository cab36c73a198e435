"""Display-ready daily summary models."""

from dataclasses import dataclass, field

from health_dashboard.domain.fields import round_half_up


@dataclass(frozen=True)
class MacroShares:
    """Percentage share of each macro in a meal's macro total."""

    protein_pct: float
    carbs_pct: float
    fat_pct: float


@dataclass(frozen=True)
class MacroProgress:
    """Consumed amount of a macro against its daily goal, in grams."""

    consumed: float
    goal: float

    @property
    def display_consumed(self) -> int:
        return round_half_up(self.consumed)

    @property
    def display_goal(self) -> int:
        return round_half_up(self.goal)

    @property
    def label(self) -> str:
        return f"{self.display_consumed} / {self.display_goal} g"


@dataclass(frozen=True)
class MealItem:
    """A single meal in the day's timeline."""

    id: object
    time_label: str
    title: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    shares: MacroShares
    calorie_bar_pct: float


@dataclass(frozen=True)
class WorkoutItem:
    """A single workout entry."""

    id: object
    calories_burned: float
    workout_type: str | None
    duration: str | None


@dataclass(frozen=True)
class DaySummary:
    """Aggregated dashboard values for one user and one day."""

    name: str
    height: float
    weight: float
    calorie_goal: float
    calories_eaten: float
    calorie_ratio: float
    protein: MacroProgress
    carbs: MacroProgress
    fat: MacroProgress
    hydration_total: float
    workout_calories: float
    sleep_total: str
    steps_total: int
    meals: list[MealItem] = field(default_factory=list)
    workouts: list[WorkoutItem] = field(default_factory=list)
