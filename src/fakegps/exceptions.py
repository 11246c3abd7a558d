"""Custom exception hierarchy for fakegps."""

from __future__ import annotations

from collections.abc import Sequence


class FakeGpsError(Exception):
    """Base exception for all fakegps errors."""


class FakeGpsConfigError(FakeGpsError):
    """Invalid or missing configuration."""


class CoordinateError(FakeGpsError):
    """A coordinate string could not be turned into a :class:`LatLong`."""

    def __init__(self, message: str, *, value: str | None = None) -> None:
        self.value = value
        super().__init__(message)


class InvalidFormatError(CoordinateError):
    """Input is empty or does not look like ``latitude,longitude``."""


class NumericParseError(CoordinateError):
    """One of the two parts is not a number in invariant notation."""


class NumericOverflowError(CoordinateError):
    """A parsed value does not fit in a float."""


class LocationUnavailableError(FakeGpsError):
    """The platform location service did not produce a usable fix.

    Raised when the service has no position at all, the position carries
    no location, or the location is flagged as unknown.  Usually means
    location services are disabled or no sensor is installed.
    """


class InvalidArgumentError(FakeGpsError):
    """A required argument was ``None``."""


class StoreError(FakeGpsError):
    """Registry-level failure while locating or writing the driver entry."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class StoreEntryNotFoundError(StoreError):
    """None of the candidate registry keys exist.

    ``searched`` holds every key that was probed, in probe order.
    """

    def __init__(self, message: str, *, searched: Sequence[str] = ()) -> None:
        self.searched = tuple(searched)
        super().__init__(message)


class StoreOpenError(StoreError):
    """The discovered key could not be opened for writing.

    Typically a missing Administrator token, or the key was removed
    between discovery and open.
    """


class StoreWriteError(StoreError):
    """Setting the latitude/longitude values failed after the key was opened."""
