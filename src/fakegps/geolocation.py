"""Coordinate parsing and live location lookup.

Coordinates are accepted as ``"latitude,longitude"`` strings in invariant
notation (``.`` as decimal separator, optional leading sign, optional
whitespace after the comma).  The check is purely syntactic: up to two
integer digits for the latitude and three for the longitude, so
``"99,200"`` passes even though it is not a real place.
"""

from __future__ import annotations

import logging
import math
import re
import time
from collections.abc import Callable
from typing import Protocol

from fakegps._constants import EXPECTED_FORMAT, LOCATION_SETTLE_DELAY, LOCATION_START_TIMEOUT
from fakegps.exceptions import (
    InvalidFormatError,
    LocationUnavailableError,
    NumericOverflowError,
    NumericParseError,
)
from fakegps.models.coordinate import LatLong

_logger = logging.getLogger(__name__)

_LAT_LONG_RE = re.compile(r"([-+]?\d{1,2}([.]\d+)?),\s*([-+]?\d{1,3}([.]\d+)?)", re.ASCII)


class GeoLocation(Protocol):
    """Location reported by the platform service."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...

    @property
    def is_unknown(self) -> bool: ...


class Position(Protocol):
    @property
    def location(self) -> GeoLocation | None: ...


class LocationProvider(Protocol):
    """Structural interface of the platform location service.

    ``start`` blocks for at most *timeout* seconds and returns whether the
    service reported itself ready.  ``position`` is ``None`` until a fix
    has been received.
    """

    def start(self, timeout: float) -> bool: ...

    @property
    def position(self) -> Position | None: ...


def is_valid(lat_long: str | None) -> bool:
    """Return ``True`` when *lat_long* looks like ``latitude,longitude``.

    ``None``, empty and whitespace-only strings are simply invalid.
    """
    if lat_long is None or not lat_long.strip():
        return False
    return _LAT_LONG_RE.fullmatch(lat_long) is not None


def _to_float(part: str, lat_long: str) -> float:
    try:
        value = float(part.strip())
    except ValueError as exc:
        raise NumericParseError(
            f"Could not parse LatLong values from: '{lat_long}'. "
            "Ensure both latitude and longitude are valid numbers.",
            value=lat_long,
        ) from exc
    if not math.isfinite(value):
        raise NumericOverflowError(
            f"LatLong values are too large: '{lat_long}'. Values must be within valid float range.",
            value=lat_long,
        )
    return value


def parse(lat_long: str | None) -> LatLong:
    """Convert a ``"latitude,longitude"`` string to a :class:`LatLong`.

    Raises
    ------
    InvalidFormatError
        Input is empty or does not match the expected format.
    NumericParseError
        A part is not a number in invariant notation.
    NumericOverflowError
        A part is outside the float range.
    """
    if lat_long is None or not lat_long.strip():
        raise InvalidFormatError("LatLong string cannot be None or empty.", value=lat_long)

    if not is_valid(lat_long):
        raise InvalidFormatError(
            f"Invalid LatLong format: '{lat_long}'. Expected format: {EXPECTED_FORMAT}",
            value=lat_long,
        )

    parts = lat_long.split(",")
    if len(parts) != 2:
        raise InvalidFormatError(
            f"Invalid LatLong format: '{lat_long}'. Expected exactly one comma separator.",
            value=lat_long,
        )

    return LatLong(
        latitude=_to_float(parts[0], lat_long),
        longitude=_to_float(parts[1], lat_long),
    )


def _default_provider() -> LocationProvider:
    from fakegps._location.windows import WindowsLocationProvider

    return WindowsLocationProvider()


def query_live_location(
    provider: LocationProvider | None = None,
    *,
    start_timeout: float = LOCATION_START_TIMEOUT,
    settle_delay: float = LOCATION_SETTLE_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> LatLong:
    """Read the current position from the platform location service.

    The service may report ready before its first fix is available, so
    after ``start`` returns the call blocks for another *settle_delay*
    seconds before reading the position.

    Parameters
    ----------
    provider : LocationProvider or None
        Location service.  Defaults to the Windows Geolocator adapter.
    start_timeout : float
        Seconds the service may take to start.
    settle_delay : float
        Seconds to wait after start before reading.
    sleep : callable
        Blocking wait, replaceable with a fake clock.

    Raises
    ------
    LocationUnavailableError
        No position, no location, or an unknown location.
    """
    if provider is None:
        provider = _default_provider()

    ready = provider.start(start_timeout)
    _logger.debug("Location service started: ready=%s timeout=%.2fs", ready, start_timeout)

    if settle_delay > 0:
        sleep(settle_delay)

    position = provider.position
    if position is None:
        raise LocationUnavailableError(
            "Could not get position from the location service. The position is None. "
            "This may indicate that location services are disabled or no GPS device is available."
        )

    location = position.location
    if location is None:
        raise LocationUnavailableError(
            "Could not get location from the location service. The location is None. "
            "This may indicate that location services are disabled or no GPS device is available."
        )

    if location.is_unknown:
        raise LocationUnavailableError(
            "Location is unknown. This may indicate that location services are disabled, "
            "no GPS device is available, or the location could not be determined."
        )

    _logger.debug("Live location: lat=%s lon=%s", location.latitude, location.longitude)
    return LatLong(latitude=location.latitude, longitude=location.longitude)
