"""Data models for fakegps."""

from fakegps.models.coordinate import LatLong
from fakegps.models.store_path import CandidatePath

__all__ = [
    "CandidatePath",
    "LatLong",
]
