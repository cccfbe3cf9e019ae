"""Exceptions and warnings raised by the fars package."""

from __future__ import annotations


class FarsError(Exception):
    """Base class for all fars errors."""


class TypeConversionError(FarsError, ValueError):
    """A year or state identifier could not be read as an integer."""

    def __init__(self, value, kind: str = "value") -> None:
        self.value = value
        super().__init__(f"invalid {kind}: {value!r} is not an integer")


class InvalidYearError(TypeConversionError):
    def __init__(self, value) -> None:
        super().__init__(value, kind="year")


class StateConversionError(TypeConversionError):
    """A state code is not a positive integer."""

    def __init__(self, value) -> None:
        super().__init__(value, kind="state")


class InvalidStateError(FarsError):
    """A state code does not occur in the loaded year's data."""

    def __init__(self, state) -> None:
        self.state = state
        super().__init__(f"invalid STATE number: {state}")


class CorruptFileError(FarsError):
    """A data file exists but could not be decompressed."""

    def __init__(self, filename, reason: Exception) -> None:
        super().__init__(f"file '{filename}' could not be decompressed: {reason}")
        self.filename = str(filename)
        self.reason = reason


class NoValidDataError(FarsError):
    """None of the requested years could be loaded."""

    def __init__(self, years) -> None:
        self.years = list(years)
        if self.years:
            message = "no valid data for years: " + ", ".join(str(y) for y in self.years)
        else:
            message = "no years requested"
        super().__init__(message)


class InvalidYearWarning(UserWarning):
    """Issued when one year of a batch load fails and is skipped."""
