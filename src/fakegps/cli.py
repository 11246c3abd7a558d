"""``fakegps`` command: set the location reported by the FakeGPS driver.

Examples::

    fakegps "51.5074,-0.1278"
    fakegps --live
    fakegps --show --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from fakegps.config import FakeGpsConfig
from fakegps.exceptions import CoordinateError, FakeGpsError
from fakegps.geolocation import parse, query_live_location
from fakegps.models.coordinate import LatLong
from fakegps.registry import RegistryStore, candidate_paths, read_lat_long, set_lat_long

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fakegps",
        description="Write a latitude/longitude into the FakeGPS driver's registry key.",
        epilog="Use -- before a location that starts with a minus sign: fakegps -- '-33.86,151.21'",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("lat_long", nargs="?", help="Location as 'latitude,longitude', e.g. '51.5074,-0.1278'")
    source.add_argument("--live", action="store_true", help="Use the current location from the location service")
    source.add_argument("--show", action="store_true", help="Print the location currently stored for the driver")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Print the location as JSON")
    parser.add_argument("--dry-run", action="store_true", help="Write to an in-memory registry instead of HKLM")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _dry_run_store(config: FakeGpsConfig) -> RegistryStore:
    from fakegps._store.memory import MemoryStore

    return MemoryStore([candidate_paths(config)[0].key])


def _emit(lat_long: LatLong, json_mode: bool) -> None:
    print(lat_long.model_dump_json() if json_mode else str(lat_long))


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.show and args.dry_run:
        parser.error("--show reads the real registry and cannot be combined with --dry-run")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = FakeGpsConfig.from_env()
        store = _dry_run_store(config) if args.dry_run else None

        if args.show:
            _emit(read_lat_long(store=store, config=config), args.json_mode)
            return 0

        if args.live:
            lat_long = query_live_location(start_timeout=config.start_timeout, settle_delay=config.settle_delay)
        else:
            lat_long = parse(args.lat_long)

        path = set_lat_long(lat_long, store=store, config=config)
        _logger.info("Location set at %s", path.display)
        _emit(lat_long, args.json_mode)
    except CoordinateError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except FakeGpsError as exc:
        _logger.debug("fakegps failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
