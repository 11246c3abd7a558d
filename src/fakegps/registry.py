"""Locate the FakeGPS registry key and write coordinates into it.

The driver's device node can be enumerated under several device classes
and instance ids depending on how it was installed.  Candidates are
probed in a fixed order (device classes first, then instance ids) and
the first key that opens wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol

from fakegps._debug import break_into_debugger
from fakegps.config import FakeGpsConfig
from fakegps.exceptions import (
    InvalidArgumentError,
    StoreEntryNotFoundError,
    StoreError,
    StoreOpenError,
    StoreWriteError,
)
from fakegps.models.coordinate import LatLong
from fakegps.models.store_path import CandidatePath

_logger = logging.getLogger(__name__)

FailureHook = Callable[[BaseException], None]


class RegistryHandle(Protocol):
    """An open registry key, released on context exit."""

    def __enter__(self) -> RegistryHandle: ...

    def __exit__(self, *exc: Any) -> Any: ...

    def set_value(self, name: str, value: float) -> None: ...

    def get_value(self, name: str) -> float: ...


class RegistryStore(Protocol):
    """Structural store interface used by discovery and writes.

    Both opens raise :class:`OSError` (typically ``FileNotFoundError`` or
    ``PermissionError``) when the key cannot be opened.
    """

    def open_read(self, key: str) -> RegistryHandle: ...

    def open_write(self, key: str) -> RegistryHandle: ...


def _default_store() -> RegistryStore:
    from fakegps._store.winreg_store import WinregStore

    return WinregStore()


def candidate_paths(config: FakeGpsConfig | None = None) -> list[CandidatePath]:
    """All keys to probe, device classes in the outer loop."""
    config = config or FakeGpsConfig()
    return [
        CandidatePath(
            device_class=device_class,
            instance_id=instance_id,
            key=config.key_template.format(device_class=device_class, instance_id=instance_id),
        )
        for device_class in config.device_classes
        for instance_id in config.instance_ids
    ]


def discover(store: RegistryStore, candidates: Iterable[CandidatePath]) -> CandidatePath | None:
    """Return the first candidate whose key can be opened for reading.

    A candidate that fails to open for any reason (missing, access denied,
    backend error) is skipped.  Returns ``None`` when every candidate was skipped.
    """
    for candidate in candidates:
        try:
            with store.open_read(candidate.key):
                pass
        except Exception as exc:
            _logger.debug("Probe %s: %s", candidate.display, exc)
            continue
        _logger.debug("Found FakeGPS key at %s", candidate.display)
        return candidate
    return None


def _not_found(candidates: Sequence[CandidatePath]) -> StoreEntryNotFoundError:
    searched = [c.display for c in candidates]
    listing = "\n".join(f"  - {key}" for key in searched)
    return StoreEntryNotFoundError(
        "Could not find the FakeGPS registry key. Is the FakeGPS driver installed? "
        f"Searched:\n{listing}",
        searched=searched,
    )


def _resolve_hook(config: FakeGpsConfig, on_failure: FailureHook | None) -> FailureHook | None:
    if on_failure is not None:
        return on_failure
    if config.break_on_failure:
        return break_into_debugger
    return None


def _fail(exc: StoreError, hook: FailureHook | None) -> StoreError:
    if hook is not None:
        hook(exc)
    return exc


def set_lat_long(
    lat_long: LatLong | None,
    *,
    store: RegistryStore | None = None,
    config: FakeGpsConfig | None = None,
    on_failure: FailureHook | None = None,
) -> CandidatePath:
    """Write *lat_long* into the FakeGPS driver's registry key.

    Single attempt, no retry.

    Parameters
    ----------
    lat_long : LatLong
        Coordinate to write.
    store : RegistryStore or None
        Registry backend.  Defaults to ``HKEY_LOCAL_MACHINE``.
    config : FakeGpsConfig or None
        Candidate keys and value names.
    on_failure : callable or None
        Called with the store error before it is raised.  Defaults to
        breaking into an attached debugger when ``config.break_on_failure``
        is set.

    Returns
    -------
    CandidatePath
        The key that was written.

    Raises
    ------
    InvalidArgumentError
        *lat_long* is ``None``.
    StoreEntryNotFoundError
        No candidate key exists.
    StoreOpenError
        The key could not be opened for writing.
    StoreWriteError
        Setting a value failed.
    """
    if lat_long is None:
        raise InvalidArgumentError("lat_long must not be None")

    config = config or FakeGpsConfig()
    store = store if store is not None else _default_store()
    hook = _resolve_hook(config, on_failure)

    candidates = candidate_paths(config)
    found = discover(store, candidates)
    if found is None:
        raise _fail(_not_found(candidates), hook)

    try:
        handle = store.open_write(found.key)
    except Exception as exc:
        raise _fail(
            StoreOpenError(
                f"Could not open registry key: {found.display}. The registry key may not exist, "
                "or you may not have sufficient permissions to access it. Try running as Administrator.",
                path=found.display,
            ),
            hook,
        ) from exc

    try:
        with handle:
            handle.set_value(config.latitude_value, lat_long.latitude)
            handle.set_value(config.longitude_value, lat_long.longitude)
    except Exception as exc:
        raise _fail(
            StoreWriteError(
                f"Failed to set GPS coordinates in registry. Path: {found.display}",
                path=found.display,
            ),
            hook,
        ) from exc

    _logger.debug("Wrote %s to %s", lat_long, found.display)
    return found


def read_lat_long(
    *,
    store: RegistryStore | None = None,
    config: FakeGpsConfig | None = None,
) -> LatLong:
    """Read the coordinate currently stored in the driver's registry key.

    Raises
    ------
    StoreEntryNotFoundError
        No candidate key exists.
    StoreOpenError
        The key or one of its values could not be read.
    """
    config = config or FakeGpsConfig()
    store = store if store is not None else _default_store()

    candidates = candidate_paths(config)
    found = discover(store, candidates)
    if found is None:
        raise _not_found(candidates)

    try:
        with store.open_read(found.key) as handle:
            latitude = handle.get_value(config.latitude_value)
            longitude = handle.get_value(config.longitude_value)
    except (OSError, TypeError, ValueError) as exc:
        raise StoreOpenError(
            f"Could not read coordinates from registry key: {found.display}",
            path=found.display,
        ) from exc

    return LatLong(latitude=latitude, longitude=longitude)
