"""Latitude/longitude value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LatLong(BaseModel):
    """A latitude/longitude pair in decimal degrees.

    No range check is applied: ``LatLong(latitude=99, longitude=200)`` is
    accepted, matching what :func:`fakegps.geolocation.is_valid` lets
    through.

    Parameters
    ----------
    latitude : float
        Latitude in degrees.
    longitude : float
        Longitude in degrees.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude!r},{self.longitude!r}"
