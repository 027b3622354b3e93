"""Data models for habits and tracker views."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

FREQUENCIES = ("daily", "weekly", "monthly")


@dataclass
class Habit:
    """A recurring habit with a sparse day -> completion log."""
    name: str
    category: str
    frequency: str  # "daily", "weekly", "monthly" (stored only)
    target: int

    streak: int = 0
    total_completed: int = 0
    start_date: datetime = field(default_factory=datetime.now)
    completion_log: dict[date, bool] = field(default_factory=dict)

    def mark_complete(self, day: date):
        """
        Record a completion for a day and update the streak.

        The streak only extends when the previous calendar day is logged
        complete. total_completed counts every call, so marking the same
        day twice counts twice.

        Args:
            day: Calendar day being completed
        """
        self.completion_log[day] = True
        self.total_completed += 1

        # date.min has no previous day
        if day > date.min and self.completion_log.get(day - timedelta(days=1)):
            self.streak += 1
        else:
            self.streak = 1

    def mark_incomplete(self, day: date):
        """Record a missed day. Resets the streak, keeps total_completed."""
        self.completion_log[day] = False
        self.streak = 0

    def success_rate(self) -> float:
        """
        Percentage of logged days that are complete.

        Returns:
            Value in [0, 100], 0.0 for an empty log
        """
        if not self.completion_log:
            return 0.0

        return self.completed_days / len(self.completion_log) * 100

    def is_on_track(self) -> bool:
        """Streak has reached the target."""
        return self.streak >= self.target

    def is_completed_on(self, day: date) -> bool:
        return self.completion_log.get(day, False)

    @property
    def completed_days(self) -> int:
        """Days logged complete (unlike total_completed, never double counts)."""
        return sum(1 for done in self.completion_log.values() if done)


@dataclass
class HabitDayStatus:
    """One habit's completion state for a single day."""
    number: int  # 1-based position in the tracker
    name: str
    completed: bool


@dataclass
class TodayStatus:
    """Completion summary for one day across all habits."""
    day: date
    habits: list[HabitDayStatus]
    completed: int
    total: int
    percentage: float = 0.0
    bar_filled: int = 0
    bar_width: int = 50


@dataclass
class HabitRanking:
    """A habit singled out by a statistic."""
    name: str
    value: float


@dataclass
class SuccessBucket:
    """Inclusive success-rate range and how many habits fall in it."""
    label: str
    low: int
    high: int
    count: int = 0


@dataclass
class TrackerStatistics:
    """Aggregate statistics over every habit in the tracker."""
    total_habits: int
    average_streak: int
    average_success_rate: float
    categories: dict[str, int]
    longest_streak: HabitRanking
    highest_success: HabitRanking
    distribution: list[SuccessBucket]
    total_completed: int = 0
    on_track: int = 0
