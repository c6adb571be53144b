"""Derived views computed on demand; none of these are persisted."""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import List


@dataclass(frozen=True)
class FoodLogEntry:
    """A food log joined with its food item, nutrition scaled to the logged quantity."""

    id: int
    user_id: int
    food_item_id: int
    food_name: str
    quantity_g: float
    meal_type: str
    date: datetime
    calories: float
    protein: float
    carbs: float
    fats: float

    def to_dict(self) -> dict:
        data = asdict(self)
        data['date'] = self.date.isoformat()
        return data


@dataclass(frozen=True)
class DailySummary:
    """Rollup of one calendar day for one user."""

    date: date
    steps: int = 0
    calories_consumed: float = 0
    calories_burned: float = 0
    calories_goal: int = 0
    workouts_count: int = 0
    active_minutes: int = 0
    protein_consumed: float = 0
    carbs_consumed: float = 0
    fats_consumed: float = 0

    @property
    def net_calories(self) -> float:
        return self.calories_consumed - self.calories_burned

    def to_dict(self) -> dict:
        data = asdict(self)
        data['date'] = self.date.isoformat()
        data['net_calories'] = self.net_calories
        return data


@dataclass(frozen=True)
class ProgressPoint:
    day: date
    steps: int
    workouts: int


@dataclass(frozen=True)
class ProgressReport:
    """Per-day series over a trailing window plus window totals."""

    window_days: int
    start_date: date
    end_date: date
    points: List[ProgressPoint] = field(default_factory=list)
    total_workouts: int = 0
    total_steps: int = 0
    avg_steps: int = 0
    total_active_minutes: int = 0

    @property
    def steps_series(self) -> List[int]:
        return [point.steps for point in self.points]

    @property
    def workouts_series(self) -> List[int]:
        return [point.workouts for point in self.points]

    def to_dict(self) -> dict:
        return {
            'window_days': self.window_days,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'labels': [point.day.isoformat() for point in self.points],
            'steps': self.steps_series,
            'workouts': self.workouts_series,
            'total_workouts': self.total_workouts,
            'total_steps': self.total_steps,
            'avg_steps': self.avg_steps,
            'total_active_minutes': self.total_active_minutes,
        }
