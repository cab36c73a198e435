"""Reduce a day's raw records into a dashboard summary."""

from math import fsum

from health_dashboard.domain.fields import numeric, whole_number
from health_dashboard.domain.records import DayRecordSet, Row
from health_dashboard.domain.summary import (
    DaySummary,
    MacroProgress,
    MacroShares,
    MealItem,
    WorkoutItem,
)

CALORIE_BAR_SCALE = 1000.0


def aggregate(records: DayRecordSet) -> DaySummary:
    """Build the day's summary from raw store rows."""
    profile = records.profile
    meals = [_meal_item(row) for row in records.meals]
    workouts = [_workout_item(row) for row in records.workouts]

    calories_eaten = fsum(meal.calories for meal in meals)
    calorie_goal = numeric(profile.get("calorie_goal"))
    sleep_total = fsum(numeric(row.get("duration")) for row in records.sleep)
    weight_row = records.latest_weight or {}

    return DaySummary(
        name=str(profile.get("name") or ""),
        height=numeric(profile.get("height")),
        weight=numeric(weight_row.get("weight")),
        calorie_goal=calorie_goal,
        calories_eaten=calories_eaten,
        calorie_ratio=calories_eaten / (calorie_goal or 1),
        protein=MacroProgress(
            consumed=fsum(meal.protein_g for meal in meals),
            goal=numeric(profile.get("protein_goal")),
        ),
        carbs=MacroProgress(
            consumed=fsum(meal.carbs_g for meal in meals),
            goal=numeric(profile.get("carbs_goal")),
        ),
        fat=MacroProgress(
            consumed=fsum(meal.fat_g for meal in meals),
            goal=numeric(profile.get("fat_goal")),
        ),
        hydration_total=fsum(
            numeric(row.get("amount")) for row in records.hydration
        ),
        workout_calories=fsum(workout.calories_burned for workout in workouts),
        sleep_total=f"{sleep_total:.2f}",
        steps_total=whole_number(
            fsum(numeric(row.get("count")) for row in records.steps)
        ),
        meals=meals,
        workouts=workouts,
    )


def macro_shares(protein_g: float, carbs_g: float, fat_g: float) -> MacroShares:
    """Return each macro's percentage of the macro total, or zeros."""
    total = protein_g + carbs_g + fat_g
    if total == 0:
        return MacroShares(protein_pct=0.0, carbs_pct=0.0, fat_pct=0.0)
    return MacroShares(
        protein_pct=protein_g / total * 100,
        carbs_pct=carbs_g / total * 100,
        fat_pct=fat_g / total * 100,
    )


def _meal_item(row: Row) -> MealItem:
    calories = numeric(row.get("calories"))
    protein = numeric(row.get("protein"))
    carbs = numeric(row.get("carbs"))
    fat = numeric(row.get("fat"))
    return MealItem(
        id=row.get("id"),
        time_label=_text(row.get("time_label")) or "",
        title=_text(row.get("title")) or "",
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        shares=macro_shares(protein, carbs, fat),
        calorie_bar_pct=calories / CALORIE_BAR_SCALE * 100,
    )


def _workout_item(row: Row) -> WorkoutItem:
    return WorkoutItem(
        id=row.get("id"),
        calories_burned=numeric(row.get("calories_burned")),
        workout_type=_text(row.get("workout_type")),
        duration=_text(row.get("duration")),
    )


def _text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
