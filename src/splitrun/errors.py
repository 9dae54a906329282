"""Exceptions raised by the splitrun engine and its collaborators."""


class SplitrunError(Exception):
    """Base class for all splitrun errors."""


class InvalidComponentError(SplitrunError, ValueError):
    """A time component is negative or outside its natural range."""

    def __init__(self, component: str, value: int, limit: int | None = None):
        self.component = component
        self.value = value
        self.limit = limit
        if limit is None:
            message = f"{component} must not be negative (got {value})"
        else:
            message = f"{component} must be in 0..{limit - 1} (got {value})"
        super().__init__(message)


class TimeParseError(SplitrunError, ValueError):
    """A time string could not be parsed."""


class DuplicateShortError(SplitrunError, ValueError):
    """A short id or index is already present in a short map."""


class ActionParseError(SplitrunError, ValueError):
    """A textual action could not be parsed."""


class HistoryStoreError(SplitrunError):
    """A history store could not be read or written."""
