"""Habit collection and aggregate views."""

import logging
import random
from datetime import date
from typing import Optional

from .errors import EmptyTrackerError, HabitIndexError
from .models import (
    Habit,
    HabitDayStatus,
    HabitRanking,
    SuccessBucket,
    TodayStatus,
    TrackerStatistics,
)

logger = logging.getLogger(__name__)

MOTIVATIONS = [
    "🌟 Small habits make a big difference!",
    "💪 Consistency is key to success!",
    "🎯 You're closer than you think!",
    "🔥 Keep the streak alive!",
    "🚀 Progress, not perfection!",
    "🌈 Every day is a new opportunity!",
]

# Inclusive bounds; rates strictly between 49 and 50 (etc.) land in no bucket
SUCCESS_BUCKETS = [
    ("90-100%", 90, 100),
    ("70-89%", 70, 89),
    ("50-69%", 50, 69),
    ("Below 50%", 0, 49),
]

SAMPLE_HABITS = [
    ("Morning Meditation", "Wellness", "daily", 1),
    ("Exercise", "Fitness", "daily", 1),
    ("Read 20 Pages", "Learning", "daily", 1),
    ("Drink 8 Glasses Water", "Health", "daily", 1),
    ("Journal", "Mental Health", "daily", 1),
]


class HabitTracker:
    """Ordered collection of habits with today/statistics views."""

    def __init__(self, rng: Optional[random.Random] = None, bar_width: int = 50):
        """
        Initialize an empty tracker.

        Args:
            rng: Random source for motivation messages
            bar_width: Cells in the today's-progress bar
        """
        self.habits: list[Habit] = []
        self.rng = rng or random.Random()
        self.bar_width = bar_width

    def __len__(self) -> int:
        return len(self.habits)

    def add_habit(self, habit: Habit) -> Habit:
        """Append a habit. Names are not deduplicated."""
        self.habits.append(habit)
        logger.info(f"Added habit #{len(self.habits)}: {habit.name} ({habit.category})")
        return habit

    def load_samples(self):
        """Seed the tracker with the default sample habits."""
        for name, category, frequency, target in SAMPLE_HABITS:
            self.add_habit(Habit(name, category, frequency, target))

    def get_habit(self, index: int) -> Habit:
        """
        Look up a habit by 0-based index.

        Raises:
            HabitIndexError: index is negative or past the end
        """
        if not 0 <= index < len(self.habits):
            raise HabitIndexError(index, len(self.habits))
        return self.habits[index]

    def mark_habit_complete(self, index: int, day: Optional[date] = None) -> Habit:
        """
        Mark the habit at a 0-based index complete.

        Args:
            index: Position in the tracker
            day: Day to mark, defaults to today

        Returns:
            The updated habit

        Raises:
            HabitIndexError: index out of range (nothing is modified)
        """
        try:
            habit = self.get_habit(index)
        except HabitIndexError:
            logger.warning(f"Rejected mark-complete for index {index} ({len(self.habits)} habits)")
            raise

        habit.mark_complete(day or date.today())
        logger.info(
            f"Marked {habit.name} complete (streak: {habit.streak}, total: {habit.total_completed})"
        )
        return habit

    def today_status(self, today: Optional[date] = None) -> TodayStatus:
        """
        Summarize which habits are completed on a day.

        Args:
            today: Day to inspect, defaults to today

        Returns:
            TodayStatus with per-habit flags and progress bar fill
        """
        today = today or date.today()

        rows = [
            HabitDayStatus(number=i + 1, name=habit.name, completed=habit.is_completed_on(today))
            for i, habit in enumerate(self.habits)
        ]
        completed = sum(1 for row in rows if row.completed)
        status = TodayStatus(
            day=today,
            habits=rows,
            completed=completed,
            total=len(rows),
            bar_width=self.bar_width,
        )

        if rows:
            status.percentage = completed / len(rows) * 100
            status.bar_filled = int(self.bar_width * status.percentage / 100)

        logger.debug(f"Today ({today}): {completed}/{len(rows)} habits completed")
        return status

    def category_counts(self) -> dict[str, int]:
        """Habits per category, ordered by category name."""
        counts: dict[str, int] = {}
        for habit in self.habits:
            counts[habit.category] = counts.get(habit.category, 0) + 1
        return dict(sorted(counts.items()))

    def count_by_success_range(self, low: int, high: int) -> int:
        """Habits whose success rate lies in [low, high]."""
        return sum(1 for habit in self.habits if low <= habit.success_rate() <= high)

    def statistics(self) -> TrackerStatistics:
        """
        Aggregate statistics over all habits.

        Ties for longest streak and highest success rate go to the habit
        added first.

        Raises:
            EmptyTrackerError: tracker has no habits
        """
        if not self.habits:
            raise EmptyTrackerError()

        total_streak = 0
        total_success = 0.0
        longest = self.habits[0]
        highest = self.habits[0]

        for habit in self.habits:
            rate = habit.success_rate()
            total_streak += habit.streak
            total_success += rate

            if habit.streak > longest.streak:
                longest = habit
            if rate > highest.success_rate():
                highest = habit

        count = len(self.habits)
        distribution = [
            SuccessBucket(label, low, high, self.count_by_success_range(low, high))
            for label, low, high in SUCCESS_BUCKETS
        ]

        return TrackerStatistics(
            total_habits=count,
            average_streak=total_streak // count,
            average_success_rate=total_success / count,
            categories=self.category_counts(),
            longest_streak=HabitRanking(longest.name, longest.streak),
            highest_success=HabitRanking(highest.name, highest.success_rate()),
            distribution=distribution,
            total_completed=sum(h.total_completed for h in self.habits),
            on_track=sum(1 for h in self.habits if h.is_on_track()),
        )

    def motivation(self) -> Optional[str]:
        """Pick a motivational message, or None when there are no habits."""
        if not self.habits:
            return None
        return self.rng.choice(MOTIVATIONS)


def build_tracker(load_samples: bool = True, seed: Optional[int] = None, bar_width: int = 50) -> HabitTracker:
    """Create a tracker, optionally seeded with the sample habits."""
    tracker = HabitTracker(rng=random.Random(seed), bar_width=bar_width)
    if load_samples:
        tracker.load_samples()
    logger.info(f"Tracker ready with {len(tracker)} habits")
    return tracker
