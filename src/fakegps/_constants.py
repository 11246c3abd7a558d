"""Internal constants shared across the library."""

# Root-enumerated device node created by the FakeGPS driver INF.
KEY_TEMPLATE = r"SYSTEM\CurrentControlSet\Enum\ROOT\{device_class}\{instance_id}\Device Parameters\FakeGPS"
KEY_ROOT_LABEL = "HKLM"

# Probe order matters: device classes first, then instance ids.
DEVICE_CLASSES: tuple[str, ...] = ("SENSOR", "UNKNOWN")
INSTANCE_IDS: tuple[str, ...] = ("0000", "0001", "0002", "0003")

LATITUDE_VALUE = "SENSOR_PROPERTY_LATITUDE"
LONGITUDE_VALUE = "SENSOR_PROPERTY_LONGITUDE"

# The location service can report ready before its first fix arrives.
LOCATION_START_TIMEOUT: float = 1.0
LOCATION_SETTLE_DELAY: float = 1.0

EXPECTED_FORMAT = "'latitude,longitude' (e.g., '51.5074,-0.1278')"
