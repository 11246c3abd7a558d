"""Developer aid: stop in an attached debugger when a store write fails."""

from __future__ import annotations

import logging
import sys
from typing import Any

_logger = logging.getLogger(__name__)

# Trace functions installed by these packages are not debuggers.
_NON_DEBUGGER_TRACERS: frozenset[str] = frozenset({"coverage", "pytest_cov", "cProfile", "profile", "yappi"})


def _monitoring_debugger() -> bool:
    """Whether a debugger registered through ``sys.monitoring`` (3.12+)."""
    monitoring = getattr(sys, "monitoring", None)
    if monitoring is None:
        return False
    return monitoring.get_tool(monitoring.DEBUGGER_ID) is not None


def _tracer_package(tracer: Any) -> str:
    module = getattr(tracer, "__module__", None) or type(tracer).__module__ or ""
    return module.split(".")[0]


def debugger_attached() -> bool:
    """Whether a debugger is attached to this process.

    Trace functions owned by coverage tools and profilers are ignored.
    """
    if _monitoring_debugger():
        return True
    tracer = sys.gettrace()
    if tracer is None:
        return False
    return _tracer_package(tracer) not in _NON_DEBUGGER_TRACERS


def break_into_debugger(exc: BaseException) -> None:
    """Failure hook for :func:`fakegps.registry.set_lat_long`.

    Does nothing unless a debugger is attached.
    """
    if not debugger_attached():
        return
    _logger.debug("Breaking into debugger on %s", type(exc).__name__)
    breakpoint()  # noqa: T100
