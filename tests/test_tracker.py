import random
from datetime import date, timedelta

import pytest

from habit_tracker.habits.errors import EmptyTrackerError, HabitIndexError
from habit_tracker.habits.models import Habit
from habit_tracker.habits.tracker import (
    MOTIVATIONS,
    SAMPLE_HABITS,
    HabitTracker,
    build_tracker,
)

DAY = date(2024, 3, 1)


@pytest.fixture()
def tracker():
    return HabitTracker(rng=random.Random(7))


def _habit_with_rate(name: str, completed: int, total: int) -> Habit:
    habit = Habit(name, "Misc", "daily", 1)
    for i in range(total):
        day = DAY + timedelta(days=i)
        if i < completed:
            habit.mark_complete(day)
        else:
            habit.mark_incomplete(day)
    return habit


def test_add_habit__keeps_insertion_order_and_duplicates(tracker):
    tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))
    tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))
    tracker.add_habit(Habit("Read", "Learning", "daily", 1))

    assert [h.name for h in tracker.habits] == ["Walk", "Walk", "Read"]
    assert len(tracker) == 3


def test_build_tracker__loads_sample_habits():
    tracker = build_tracker(load_samples=True, seed=1)

    assert [h.name for h in tracker.habits] == [name for name, *_ in SAMPLE_HABITS]
    assert all(h.target == 1 and h.frequency == "daily" for h in tracker.habits)


def test_build_tracker__empty_when_samples_disabled():
    assert len(build_tracker(load_samples=False)) == 0


def test_mark_habit_complete__updates_selected_habit(tracker):
    tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))
    tracker.add_habit(Habit("Read", "Learning", "daily", 1))

    habit = tracker.mark_habit_complete(1, DAY)

    assert habit is tracker.habits[1]
    assert habit.streak == 1
    assert tracker.habits[0].completion_log == {}


def test_mark_habit_complete__defaults_to_today(tracker):
    tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))

    tracker.mark_habit_complete(0)

    assert tracker.habits[0].completion_log == {date.today(): True}


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_mark_habit_complete__out_of_range_raises_without_mutation(tracker, index):
    tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))
    tracker.add_habit(Habit("Read", "Learning", "daily", 1))

    with pytest.raises(HabitIndexError) as exc_info:
        tracker.mark_habit_complete(index, DAY)

    assert exc_info.value.index == index
    assert exc_info.value.size == 2
    for habit in tracker.habits:
        assert habit.streak == 0
        assert habit.total_completed == 0
        assert habit.completion_log == {}


def test_today_status__counts_completed_and_fills_bar(tracker):
    for name in ["A", "B", "C", "D", "E"]:
        tracker.add_habit(Habit(name, "Misc", "daily", 1))
    tracker.mark_habit_complete(0, DAY)
    tracker.mark_habit_complete(3, DAY)
    tracker.mark_habit_complete(1, DAY - timedelta(days=1))
    tracker.habits[2].mark_incomplete(DAY)

    status = tracker.today_status(DAY)

    assert [row.completed for row in status.habits] == [True, False, False, True, False]
    assert [row.number for row in status.habits] == [1, 2, 3, 4, 5]
    assert status.completed == 2
    assert status.total == 5
    assert status.percentage == 40.0
    assert status.bar_filled == 20
    assert status.bar_width == 50


def test_today_status__bar_fill_is_truncated(tracker):
    for name in ["A", "B", "C"]:
        tracker.add_habit(Habit(name, "Misc", "daily", 1))
    tracker.mark_habit_complete(0, DAY)

    status = tracker.today_status(DAY)

    # 33.33% of 50 cells
    assert status.bar_filled == 16


def test_today_status__empty_tracker(tracker):
    status = tracker.today_status(DAY)

    assert status.total == 0
    assert status.percentage == 0.0
    assert status.bar_filled == 0


def test_statistics__category_breakdown(tracker):
    tracker.add_habit(Habit("Exercise", "Fitness", "daily", 1))
    tracker.add_habit(Habit("Meditate", "Wellness", "daily", 1))

    assert tracker.statistics().categories == {"Fitness": 1, "Wellness": 1}


def test_statistics__categories_match_exact_strings(tracker):
    tracker.add_habit(Habit("Run", "Fitness", "daily", 1))
    tracker.add_habit(Habit("Lift", "fitness", "daily", 1))
    tracker.add_habit(Habit("Swim", "Fitness", "daily", 1))

    assert tracker.statistics().categories == {"Fitness": 2, "fitness": 1}


def test_statistics__averages_and_leaders(tracker):
    walk = tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))
    read = tracker.add_habit(Habit("Read", "Learning", "daily", 1))
    tracker.add_habit(Habit("Journal", "Mental Health", "daily", 1))

    for i in range(3):
        walk.mark_complete(DAY + timedelta(days=i))
    read.mark_complete(DAY)
    read.mark_incomplete(DAY + timedelta(days=1))

    stats = tracker.statistics()

    assert stats.total_habits == 3
    assert stats.average_streak == 1  # 3 // 3
    assert stats.average_success_rate == pytest.approx(50.0)  # (100 + 50 + 0) / 3
    assert stats.longest_streak.name == "Walk"
    assert stats.longest_streak.value == 3
    assert stats.highest_success.name == "Walk"
    assert stats.highest_success.value == 100.0
    assert stats.total_completed == 4
    assert stats.on_track == 1


def test_statistics__average_streak_truncates(tracker):
    first = tracker.add_habit(Habit("A", "Misc", "daily", 1))
    tracker.add_habit(Habit("B", "Misc", "daily", 1))
    first.mark_complete(DAY)

    assert tracker.statistics().average_streak == 0


def test_statistics__ties_go_to_first_habit(tracker):
    for name in ["First", "Second"]:
        habit = tracker.add_habit(Habit(name, "Misc", "daily", 1))
        habit.mark_complete(DAY)

    stats = tracker.statistics()

    assert stats.longest_streak.name == "First"
    assert stats.highest_success.name == "First"


def test_statistics__success_distribution_uses_inclusive_buckets(tracker):
    tracker.add_habit(_habit_with_rate("Perfect", 1, 1))  # 100
    tracker.add_habit(_habit_with_rate("Good", 4, 5))  # 80
    tracker.add_habit(_habit_with_rate("Half", 1, 2))  # 50
    tracker.add_habit(_habit_with_rate("Never", 0, 0))  # 0
    tracker.add_habit(_habit_with_rate("Gap", 99, 200))  # 49.5, in no bucket

    stats = tracker.statistics()

    assert [(b.label, b.count) for b in stats.distribution] == [
        ("90-100%", 1),
        ("70-89%", 1),
        ("50-69%", 1),
        ("Below 50%", 1),
    ]


def test_statistics__empty_tracker_raises(tracker):
    with pytest.raises(EmptyTrackerError):
        tracker.statistics()


def test_motivation__none_without_habits(tracker):
    assert tracker.motivation() is None


def test_motivation__uses_injected_random_source():
    seeded = [HabitTracker(rng=random.Random(42)) for _ in range(2)]
    for tracker in seeded:
        tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))

    picks = [[t.motivation() for _ in range(5)] for t in seeded]

    assert picks[0] == picks[1]
    assert all(message in MOTIVATIONS for message in picks[0])


def test_motivation__does_not_change_habits(tracker):
    habit = tracker.add_habit(Habit("Walk", "Fitness", "daily", 1))
    habit.mark_complete(DAY)

    tracker.motivation()

    assert habit.streak == 1
    assert habit.total_completed == 1
