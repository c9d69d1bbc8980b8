"""Exceptions raised by greek-syllabizer."""

__all__ = [
    "SyllabizerError",
    "MissingArgumentError",
    "UnsupportedModeError",
    "InvalidCostError",
]


class SyllabizerError(Exception):
    """Base class for all greek-syllabizer errors."""


class MissingArgumentError(SyllabizerError, ValueError):
    """A required argument was None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class UnsupportedModeError(SyllabizerError, ValueError):
    """The syllabizer was configured with an unknown boundary policy."""

    def __init__(self, mode: object) -> None:
        self.mode = mode
        super().__init__(f"Unsupported syllabizer mode '{mode}'")


class InvalidCostError(SyllabizerError, ValueError):
    """An edit command cost fell outside [0, 1]."""

    def __init__(self, cost: float) -> None:
        self.cost = cost
        super().__init__(f"Edit cost must be within [0, 1], got {cost!r}")
