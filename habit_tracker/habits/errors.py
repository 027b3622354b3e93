"""Errors raised by the habit tracker."""


class HabitTrackerError(Exception):
    """Base class for tracker errors surfaced to the presentation layer."""


class HabitIndexError(HabitTrackerError, IndexError):
    """Habit index outside the tracker's range."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"No habit at position {index + 1} (tracker has {size} habits)")


class EmptyTrackerError(HabitTrackerError):
    """Operation needs at least one habit."""

    def __init__(self, message: str = "No habits to display statistics."):
        super().__init__(message)


class InvalidMenuChoiceError(HabitTrackerError, ValueError):
    """Menu selection outside the known actions."""

    def __init__(self, choice: str):
        self.choice = choice
        super().__init__(f"Invalid menu choice: {choice!r}")


class InvalidInputError(HabitTrackerError, ValueError):
    """Console input that could not be parsed."""

    def __init__(self, raw: str, expected: str = "a whole number"):
        self.raw = raw
        super().__init__(f"Expected {expected}, got {raw!r}")
