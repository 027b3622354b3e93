"""Interactive console menu."""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from habit_tracker.config import settings
from habit_tracker.habits.errors import (
    HabitTrackerError,
    InvalidInputError,
    InvalidMenuChoiceError,
)
from habit_tracker.habits.models import FREQUENCIES, Habit
from habit_tracker.habits.tracker import HabitTracker, build_tracker

from .formatting import (
    format_all_habits,
    format_motivation,
    format_statistics,
    format_today_status,
)

logger = logging.getLogger(__name__)


class MenuChoice(Enum):
    VIEW_ALL = 1
    TODAY = 2
    MARK_COMPLETE = 3
    STATISTICS = 4
    MOTIVATION = 5
    ADD_HABIT = 6
    EXIT = 7


MENU_TEXT = "\n".join(
    [
        "",
        "=== HABIT TRACKER ===",
        "1. View All Habits",
        "2. Today's Status",
        "3. Mark Habit Complete",
        "4. View Statistics",
        "5. Get Motivation",
        "6. Add New Habit",
        "7. Exit",
    ]
)


def parse_int(raw: str) -> int:
    """
    Parse a whole number typed at the console.

    Raises:
        InvalidInputError: not an integer
    """
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidInputError(raw.strip()) from None


def parse_choice(raw: str) -> MenuChoice:
    """
    Map console input to a menu action.

    Raises:
        InvalidMenuChoiceError: not one of the numbered actions
    """
    try:
        return MenuChoice(int(raw.strip()))
    except ValueError:
        raise InvalidMenuChoiceError(raw.strip()) from None


class HabitMenu:
    """Reads menu selections from a stream and prints tracker views."""

    def __init__(
        self,
        tracker: HabitTracker,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.tracker = tracker
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def run(self) -> int:
        """Run the menu loop until Exit (or end of input). Always returns 0."""
        while True:
            self._print(MENU_TEXT)
            raw = self._prompt("Choice: ")
            if raw is None:
                logger.info("Input closed, leaving menu")
                break

            try:
                choice = parse_choice(raw)
                if choice is MenuChoice.EXIT:
                    break
                self.handle(choice)
            except HabitTrackerError as e:
                logger.warning(f"Menu action failed: {e}")
                self._print(f"❌ {e}")

        return 0

    def handle(self, choice: MenuChoice):
        """Execute a single menu action."""
        if choice is MenuChoice.VIEW_ALL:
            self._print(format_all_habits(self.tracker.habits))
        elif choice is MenuChoice.TODAY:
            self._print(format_today_status(self.tracker.today_status()))
        elif choice is MenuChoice.MARK_COMPLETE:
            self._mark_complete()
        elif choice is MenuChoice.STATISTICS:
            self._print(format_statistics(self.tracker.statistics()))
        elif choice is MenuChoice.MOTIVATION:
            message = self.tracker.motivation()
            if message:
                self._print(format_motivation(message))
        elif choice is MenuChoice.ADD_HABIT:
            self._add_habit()

    def _mark_complete(self):
        self._print(format_all_habits(self.tracker.habits))
        raw = self._prompt("\nEnter habit number to mark complete: ")
        if raw is None:
            return

        number = parse_int(raw)
        self.tracker.mark_habit_complete(number - 1)
        self._print("✅ Habit marked as complete!")

    def _add_habit(self):
        name = self._prompt("Enter habit name: ") or ""
        category = self._prompt("Enter category: ") or ""
        frequency = self._prompt(f"Enter frequency ({'/'.join(FREQUENCIES)}): ") or ""
        target = parse_int(self._prompt("Enter target times per period: ") or "")

        self.tracker.add_habit(Habit(name.strip(), category.strip(), frequency.strip(), target))
        self._print("Habit added successfully!")

    def _prompt(self, text: str) -> Optional[str]:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _print(self, text: str):
        self.stdout.write(text + "\n")


def main() -> int:
    """Console entry point."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    tracker = build_tracker(
        load_samples=settings.load_sample_habits,
        seed=settings.motivation_seed,
        bar_width=settings.progress_bar_width,
    )
    return HabitMenu(tracker).run()


if __name__ == "__main__":
    sys.exit(main())
