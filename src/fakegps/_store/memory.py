"""In-process registry backend used for dry runs and tests."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any


class MemoryKey:
    def __init__(self, values: dict[str, float], key: str, *, writable: bool) -> None:
        self._values = values
        self.key = key
        self.writable = writable
        self.closed = False

    def __enter__(self) -> MemoryKey:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self.closed = True

    def set_value(self, name: str, value: float) -> None:
        if self.closed:
            raise OSError(f"key {self.key!r} is closed")
        if not self.writable:
            raise PermissionError(f"key {self.key!r} was opened read-only")
        self._values[name] = float(value)

    def get_value(self, name: str) -> float:
        if name not in self._values:
            raise FileNotFoundError(f"value {name!r} not found under {self.key!r}")
        return self._values[name]


class MemoryStore:
    """Dict-backed registry with the same error surface as the real one.

    Parameters
    ----------
    keys : mapping or iterable of str
        Keys that exist, optionally with initial values.
    denied : iterable of str
        Keys for which every open raises :class:`PermissionError`.
    """

    def __init__(
        self,
        keys: Mapping[str, Mapping[str, float]] | Iterable[str] = (),
        *,
        denied: Iterable[str] = (),
    ) -> None:
        if isinstance(keys, Mapping):
            self._keys: dict[str, dict[str, float]] = {k: dict(v) for k, v in keys.items()}
        else:
            self._keys = {k: {} for k in keys}
        self._denied = set(denied)
        self.opened: list[tuple[str, str]] = []

    def _open(self, key: str, mode: str) -> MemoryKey:
        self.opened.append((mode, key))
        if key in self._denied:
            raise PermissionError(f"access denied: {key!r}")
        if key not in self._keys:
            raise FileNotFoundError(f"key not found: {key!r}")
        return MemoryKey(self._keys[key], key, writable=mode == "write")

    def open_read(self, key: str) -> MemoryKey:
        return self._open(key, "read")

    def open_write(self, key: str) -> MemoryKey:
        return self._open(key, "write")

    def values(self, key: str) -> dict[str, float]:
        """Copy of the values stored under *key*."""
        return copy.deepcopy(self._keys.get(key, {}))
