"""Windows location service adapter.

Wraps ``Windows.Devices.Geolocation.Geolocator`` (through the ``winsdk``
projection) behind the blocking ``start``/``position`` interface used by
:func:`fakegps.geolocation.query_live_location`.
"""

from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Any

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WindowsGeoLocation:
    latitude: float
    longitude: float
    is_unknown: bool = False


@dataclass(frozen=True, slots=True)
class WindowsPosition:
    location: WindowsGeoLocation | None


class WindowsLocationProvider:
    """Blocking view over the WinRT Geolocator.

    ``start`` requests a single fix and keeps it; ``position`` stays
    ``None`` when no fix arrived within the timeout.
    """

    def __init__(self, geolocator: Any | None = None) -> None:
        self._geolocator = geolocator
        self._position: WindowsPosition | None = None

    def _locator(self) -> Any:
        if self._geolocator is None:
            from winsdk.windows.devices.geolocation import Geolocator

            self._geolocator = Geolocator()
        return self._geolocator

    async def _fetch(self, timeout: float) -> WindowsPosition | None:
        locator = self._locator()
        try:
            geoposition = await asyncio.wait_for(locator.get_geoposition_async(), timeout)
        except TimeoutError:
            _logger.debug("Geolocator produced no fix within %.2fs", timeout)
            return None

        coordinate = geoposition.coordinate
        if coordinate is None:
            return WindowsPosition(location=None)

        point = coordinate.point.position
        latitude = float(point.latitude)
        longitude = float(point.longitude)
        unknown = math.isnan(latitude) or math.isnan(longitude)
        return WindowsPosition(
            location=WindowsGeoLocation(latitude=latitude, longitude=longitude, is_unknown=unknown),
        )

    def start(self, timeout: float) -> bool:
        """Request a fix, blocking for at most *timeout* seconds."""
        try:
            self._position = asyncio.run(self._fetch(timeout))
        except OSError:
            # WinRT failures surface as OSError carrying an HRESULT.
            _logger.debug("Geolocator request failed", exc_info=True)
            self._position = None
        return self._position is not None

    @property
    def position(self) -> WindowsPosition | None:
        return self._position
