"""Candidate registry location model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fakegps._constants import KEY_ROOT_LABEL


class CandidatePath(BaseModel):
    """One registry key that may hold the FakeGPS device parameters."""

    model_config = ConfigDict(frozen=True)

    device_class: str
    """Device class segment under ``Enum\\ROOT`` (e.g. ``SENSOR``)."""

    instance_id: str
    """Device instance segment (e.g. ``0000``)."""

    key: str
    """Full sub-key relative to ``HKEY_LOCAL_MACHINE``."""

    @property
    def display(self) -> str:
        """Key prefixed with the hive label, for messages and logs."""
        return f"{KEY_ROOT_LABEL}\\{self.key}"

    def __str__(self) -> str:
        return self.display
