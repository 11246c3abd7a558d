"""Runtime configuration for fakegps."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from fakegps._constants import (
    DEVICE_CLASSES,
    INSTANCE_IDS,
    KEY_TEMPLATE,
    LATITUDE_VALUE,
    LOCATION_SETTLE_DELAY,
    LOCATION_START_TIMEOUT,
    LONGITUDE_VALUE,
)
from fakegps.exceptions import FakeGpsConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_list(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise FakeGpsConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class FakeGpsConfig:
    """Where and how coordinates are written.

    Parameters
    ----------
    key_template : str
        Registry sub-key under ``HKEY_LOCAL_MACHINE`` with ``{device_class}``
        and ``{instance_id}`` placeholders.
    device_classes : tuple of str
        Device classes to probe, in order (outer loop).
    instance_ids : tuple of str
        Instance ids to probe, in order (inner loop).
    latitude_value : str
        Registry value name receiving the latitude.
    longitude_value : str
        Registry value name receiving the longitude.
    start_timeout : float
        Seconds the location service may take to start.
    settle_delay : float
        Seconds to wait after start before reading the position.
    break_on_failure : bool
        Break into an attached debugger before raising a store error.
        Coverage tools and profilers are not treated as debuggers.
    """

    key_template: str = KEY_TEMPLATE
    device_classes: tuple[str, ...] = DEVICE_CLASSES
    instance_ids: tuple[str, ...] = INSTANCE_IDS
    latitude_value: str = LATITUDE_VALUE
    longitude_value: str = LONGITUDE_VALUE
    start_timeout: float = LOCATION_START_TIMEOUT
    settle_delay: float = LOCATION_SETTLE_DELAY
    break_on_failure: bool = False

    def __post_init__(self) -> None:
        if "{device_class}" not in self.key_template or "{instance_id}" not in self.key_template:
            raise FakeGpsConfigError(
                f"key_template must contain '{{device_class}}' and '{{instance_id}}', got {self.key_template!r}"
            )
        if not self.device_classes:
            raise FakeGpsConfigError("device_classes must not be empty")
        if not self.instance_ids:
            raise FakeGpsConfigError("instance_ids must not be empty")
        if self.start_timeout < 0 or self.settle_delay < 0:
            raise FakeGpsConfigError("start_timeout and settle_delay must be >= 0")

    @classmethod
    def from_env(cls, **overrides: Any) -> FakeGpsConfig:
        """Create configuration from ``FAKEGPS_*`` environment variables.

        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        FakeGpsConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_STR_MAP = {
            "FAKEGPS_KEY_TEMPLATE": "key_template",
            "FAKEGPS_LATITUDE_VALUE": "latitude_value",
            "FAKEGPS_LONGITUDE_VALUE": "longitude_value",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        for env_key, field_name in (
            ("FAKEGPS_DEVICE_CLASSES", "device_classes"),
            ("FAKEGPS_INSTANCE_IDS", "instance_ids"),
        ):
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = _env_list(val)

        for env_key, field_name in (
            ("FAKEGPS_START_TIMEOUT", "start_timeout"),
            ("FAKEGPS_SETTLE_DELAY", "settle_delay"),
        ):
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_float(env_key, val)

        if "break_on_failure" not in overrides:
            config_kwargs["break_on_failure"] = _env_bool(env.get("FAKEGPS_BREAK_ON_FAILURE"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
