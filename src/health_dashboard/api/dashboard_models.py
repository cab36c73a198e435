"""Pydantic response models for the dashboard API."""

from pydantic import BaseModel

from health_dashboard.domain.dates import DayCell
from health_dashboard.domain.summary import (
    DaySummary,
    MacroProgress,
    MealItem,
    WorkoutItem,
)


class DayCellResponse(BaseModel):
    """A day picker cell."""

    index: int
    day: str
    month: str
    is_today: bool
    label: str

    @classmethod
    def from_cell(
        cls, index: int, cell: DayCell, selected: bool
    ) -> "DayCellResponse":
        return cls(
            index=index,
            day=cell.day,
            month=cell.month,
            is_today=cell.is_today,
            label=cell.label(selected),
        )


class DatesResponse(BaseModel):
    """The selectable day window."""

    selected: int
    dates: list[DayCellResponse]


class MacroProgressResponse(BaseModel):
    """Consumed versus goal grams for one macro."""

    consumed: float
    goal: float
    display_consumed: int
    display_goal: int
    label: str

    @classmethod
    def from_progress(cls, progress: MacroProgress) -> "MacroProgressResponse":
        return cls(
            consumed=progress.consumed,
            goal=progress.goal,
            display_consumed=progress.display_consumed,
            display_goal=progress.display_goal,
            label=progress.label,
        )


class MacroSharesResponse(BaseModel):
    """Macro percentages of a meal."""

    protein_pct: float
    carbs_pct: float
    fat_pct: float


class MealItemResponse(BaseModel):
    """A meal in the day's timeline."""

    id: int | str | None
    time_label: str
    title: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    shares: MacroSharesResponse
    calorie_bar_pct: float

    @classmethod
    def from_item(cls, item: MealItem) -> "MealItemResponse":
        return cls(
            id=_identifier(item.id),
            time_label=item.time_label,
            title=item.title,
            calories=item.calories,
            protein_g=item.protein_g,
            carbs_g=item.carbs_g,
            fat_g=item.fat_g,
            shares=MacroSharesResponse(
                protein_pct=item.shares.protein_pct,
                carbs_pct=item.shares.carbs_pct,
                fat_pct=item.shares.fat_pct,
            ),
            calorie_bar_pct=item.calorie_bar_pct,
        )


class WorkoutItemResponse(BaseModel):
    """A logged workout."""

    id: int | str | None
    calories_burned: float
    workout_type: str | None
    duration: str | None

    @classmethod
    def from_item(cls, item: WorkoutItem) -> "WorkoutItemResponse":
        return cls(
            id=_identifier(item.id),
            calories_burned=item.calories_burned,
            workout_type=item.workout_type,
            duration=item.duration,
        )


class DaySummaryResponse(BaseModel):
    """Dashboard payload for one user and one day."""

    phone: str
    day_index: int
    date_label: str
    name: str
    height: float
    weight: float
    calorie_goal: float
    calories_eaten: float
    calorie_ratio: float
    protein: MacroProgressResponse
    carbs: MacroProgressResponse
    fat: MacroProgressResponse
    hydration_total: float
    workout_calories: float
    sleep_total: str
    steps_total: int
    meals: list[MealItemResponse]
    workouts: list[WorkoutItemResponse]

    @classmethod
    def from_summary(
        cls, phone: str, day_index: int, cell: DayCell, summary: DaySummary
    ) -> "DaySummaryResponse":
        return cls(
            phone=phone,
            day_index=day_index,
            date_label=cell.label(selected=True),
            name=summary.name,
            height=summary.height,
            weight=summary.weight,
            calorie_goal=summary.calorie_goal,
            calories_eaten=summary.calories_eaten,
            calorie_ratio=summary.calorie_ratio,
            protein=MacroProgressResponse.from_progress(summary.protein),
            carbs=MacroProgressResponse.from_progress(summary.carbs),
            fat=MacroProgressResponse.from_progress(summary.fat),
            hydration_total=summary.hydration_total,
            workout_calories=summary.workout_calories,
            sleep_total=summary.sleep_total,
            steps_total=summary.steps_total,
            meals=[MealItemResponse.from_item(meal) for meal in summary.meals],
            workouts=[
                WorkoutItemResponse.from_item(workout) for workout in summary.workouts
            ],
        )


def _identifier(value: object) -> int | str | None:
    if value is None or isinstance(value, int | str):
        return value
    return str(value)
