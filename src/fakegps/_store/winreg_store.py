"""Windows registry backend (``HKEY_LOCAL_MACHINE``)."""

from __future__ import annotations

import logging
import winreg
from typing import Any

_logger = logging.getLogger(__name__)


class WinregKey:
    """Open registry key; closes the underlying handle on exit."""

    def __init__(self, hkey: winreg.HKEYType, key: str) -> None:
        self._hkey = hkey
        self.key = key

    def __enter__(self) -> WinregKey:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self._hkey.Close()

    def set_value(self, name: str, value: float) -> None:
        # The driver reads these as strings in invariant notation.
        winreg.SetValueEx(self._hkey, name, 0, winreg.REG_SZ, repr(float(value)))
        _logger.debug("Set %s\\%s = %r", self.key, name, value)

    def get_value(self, name: str) -> float:
        value, _kind = winreg.QueryValueEx(self._hkey, name)
        return float(value)


class WinregStore:
    """Registry store rooted at ``HKEY_LOCAL_MACHINE``.

    ``open_read``/``open_write`` raise :class:`FileNotFoundError` for a
    missing key and :class:`PermissionError` when access is denied.
    """

    def __init__(self, root: Any = winreg.HKEY_LOCAL_MACHINE) -> None:
        self._root = root

    def open_read(self, key: str) -> WinregKey:
        return WinregKey(winreg.OpenKey(self._root, key, 0, winreg.KEY_READ), key)

    def open_write(self, key: str) -> WinregKey:
        access = winreg.KEY_READ | winreg.KEY_SET_VALUE
        return WinregKey(winreg.OpenKey(self._root, key, 0, access), key)
