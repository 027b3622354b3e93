"""Plain-text rendering of habits, today's status and statistics."""

from habit_tracker.habits.models import Habit, TodayStatus, TrackerStatistics

RULE = "-" * 40


def format_habit(habit: Habit) -> str:
    status = "✅ On Track" if habit.is_on_track() else "⚠️ Needs Attention"
    return "\n".join(
        [
            "",
            RULE,
            f"Habit: {habit.name} ({habit.category})",
            f"Frequency: {habit.frequency} (Target: {habit.target})",
            f"Current Streak: {habit.streak} days",
            f"Total Completed: {habit.total_completed} times",
            f"Success Rate: {habit.success_rate():.1f}%",
            f"Status: {status}",
            RULE,
        ]
    )


def format_all_habits(habits: list[Habit]) -> str:
    lines = ["", "=== HABIT TRACKER ===", f"Total Habits: {len(habits)}", ""]
    for i, habit in enumerate(habits):
        lines.append(f"{i + 1}. {format_habit(habit)}")
    return "\n".join(lines)


def progress_bar(filled: int, width: int, percentage: float) -> str:
    """
    Text progress bar, e.g. "[=====>    ] 50%".

    Args:
        filled: Number of filled cells
        width: Total cells
        percentage: Value printed after the bar (truncated)
    """
    cells = []
    for i in range(width):
        if i < filled:
            cells.append("=")
        elif i == filled:
            cells.append(">")
        else:
            cells.append(" ")
    return f"[{''.join(cells)}] {int(percentage)}%"


def format_today_status(status: TodayStatus) -> str:
    lines = ["", f"=== TODAY'S HABITS ({status.day.isoformat()}) ==="]
    for row in status.habits:
        mark = "✅" if row.completed else "❌"
        lines.append(f"{row.number}. {row.name} {mark}")

    lines.append("")
    lines.append(f"Progress: {status.completed}/{status.total} habits completed today")

    if status.total > 0:
        lines.append(f"Completion: {status.percentage:.1f}%")
        lines.append(progress_bar(status.bar_filled, status.bar_width, status.percentage))

    return "\n".join(lines)


def format_statistics(stats: TrackerStatistics) -> str:
    lines = [
        "",
        "=== HABIT STATISTICS ===",
        f"Total Habits: {stats.total_habits}",
        f"Average Streak: {stats.average_streak} days",
        f"Average Success Rate: {stats.average_success_rate:.1f}%",
        f"Habits On Track: {stats.on_track}/{stats.total_habits}",
        "",
        "By Category:",
    ]
    lines.extend(f"- {category}: {count} habits" for category, count in stats.categories.items())

    lines.append("")
    lines.append(
        f"🏆 Longest Streak: {stats.longest_streak.name} ({int(stats.longest_streak.value)} days)"
    )
    lines.append(
        f"⭐ Highest Success Rate: {stats.highest_success.name} ({stats.highest_success.value:.1f}%)"
    )

    lines.append("")
    lines.append("Success Rate Distribution:")
    lines.extend(f"{bucket.label}: {bucket.count} habits" for bucket in stats.distribution)

    return "\n".join(lines)


def format_motivation(message: str) -> str:
    return f"\n💬 Motivation: {message}"
