"""fakegps - set the location reported by the FakeGPS sensor driver."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fakegps")
except PackageNotFoundError:
    __version__ = "0+local"
from fakegps.config import FakeGpsConfig
from fakegps.exceptions import (
    CoordinateError,
    FakeGpsConfigError,
    FakeGpsError,
    InvalidArgumentError,
    InvalidFormatError,
    LocationUnavailableError,
    NumericOverflowError,
    NumericParseError,
    StoreEntryNotFoundError,
    StoreError,
    StoreOpenError,
    StoreWriteError,
)
from fakegps.geolocation import LocationProvider, is_valid, parse, query_live_location
from fakegps.models import CandidatePath, LatLong
from fakegps.registry import RegistryStore, candidate_paths, discover, read_lat_long, set_lat_long

__all__ = [
    "__version__",
    "CandidatePath",
    "CoordinateError",
    "FakeGpsConfig",
    "FakeGpsConfigError",
    "FakeGpsError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "LatLong",
    "LocationProvider",
    "LocationUnavailableError",
    "NumericOverflowError",
    "NumericParseError",
    "RegistryStore",
    "StoreEntryNotFoundError",
    "StoreError",
    "StoreOpenError",
    "StoreWriteError",
    "candidate_paths",
    "discover",
    "is_valid",
    "parse",
    "query_live_location",
    "read_lat_long",
    "set_lat_long",
]
