"""HTTP API models."""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from habit_tracker.habits.models import Habit, TodayStatus, TrackerStatistics


class HabitCreate(BaseModel):
    """Request body for POST /api/habits."""

    name: str
    category: str
    frequency: str = "daily"
    target: int = 1


class HabitResponse(BaseModel):
    """A habit with its derived metrics."""

    number: int
    name: str
    category: str
    frequency: str
    target: int
    streak: int
    total_completed: int
    completed_days: int
    success_rate: float
    on_track: bool

    @classmethod
    def from_habit(cls, number: int, habit: Habit) -> "HabitResponse":
        return cls(
            number=number,
            name=habit.name,
            category=habit.category,
            frequency=habit.frequency,
            target=habit.target,
            streak=habit.streak,
            total_completed=habit.total_completed,
            completed_days=habit.completed_days,
            success_rate=habit.success_rate(),
            on_track=habit.is_on_track(),
        )


class HabitListResponse(BaseModel):
    """Response for GET /api/habits."""

    total: int
    habits: list[HabitResponse]


class HabitDayResponse(BaseModel):
    number: int
    name: str
    completed: bool


class TodayResponse(BaseModel):
    """Response for GET /api/today."""

    day: date
    completed: int
    total: int
    percentage: float
    bar_filled: int
    bar_width: int
    habits: list[HabitDayResponse]

    @classmethod
    def from_status(cls, status: TodayStatus) -> "TodayResponse":
        return cls(
            day=status.day,
            completed=status.completed,
            total=status.total,
            percentage=status.percentage,
            bar_filled=status.bar_filled,
            bar_width=status.bar_width,
            habits=[
                HabitDayResponse(number=row.number, name=row.name, completed=row.completed)
                for row in status.habits
            ],
        )


class RankingResponse(BaseModel):
    name: str
    value: float


class BucketResponse(BaseModel):
    label: str
    low: int
    high: int
    count: int


class StatisticsResponse(BaseModel):
    """Response for GET /api/statistics."""

    total_habits: int
    average_streak: int
    average_success_rate: float
    total_completed: int
    on_track: int
    categories: dict[str, int]
    longest_streak: RankingResponse
    highest_success: RankingResponse
    distribution: list[BucketResponse]

    @classmethod
    def from_statistics(cls, stats: TrackerStatistics) -> "StatisticsResponse":
        return cls(
            total_habits=stats.total_habits,
            average_streak=stats.average_streak,
            average_success_rate=stats.average_success_rate,
            total_completed=stats.total_completed,
            on_track=stats.on_track,
            categories=stats.categories,
            longest_streak=RankingResponse(
                name=stats.longest_streak.name, value=stats.longest_streak.value
            ),
            highest_success=RankingResponse(
                name=stats.highest_success.name, value=stats.highest_success.value
            ),
            distribution=[
                BucketResponse(label=b.label, low=b.low, high=b.high, count=b.count)
                for b in stats.distribution
            ],
        )


class MotivationResponse(BaseModel):
    """Response for GET /api/motivation."""

    message: Optional[str] = None
