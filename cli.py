"""Lightweight CLI for MotoRecs build store operations.

Usage:
    motorecs init-db          # create the build store if missing
    motorecs builds           # list saved builds, newest first
    motorecs delete 12        # delete saved build 12
    motorecs catalog          # list manufacturers from the catalog document
    motorecs log-level DEBUG  # set log level in settings.toml
"""

import argparse
import asyncio
import logging
import re
import sys

from settings_service import SETTINGS_PATH, _clear_settings_cache, _load_settings

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _quiet(args: argparse.Namespace) -> None:
    if not args.verbose:
        # Suppress library logs before config imports set up handlers
        logging.disable(logging.INFO)


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create and verify the local build store."""
    _quiet(args)
    from config import DatabaseConfig
    from init_db import init_db

    db = DatabaseConfig()
    ok = init_db(db)
    print(f"{db.path}: {'ok' if ok else 'failed'}")
    return 0 if ok else 1


def cmd_builds(args: argparse.Namespace) -> int:
    """Print saved builds, most recent first."""
    _quiet(args)
    from domain.errors import StorageUnavailable
    from services.build_service import BuildService
    from services.configuration_service import format_currency

    service = BuildService.create_default()
    try:
        builds = asyncio.run(service.list_builds())
    except StorageUnavailable as e:
        print(f"error: {e}")
        return 1

    if not builds:
        print("no saved builds")
        return 0

    for build in builds:
        price = format_currency(service.estimate_price(build))
        express = " express" if build.express_delivery else ""
        print(
            f"#{build.id:<4} {build.year} {build.manufacturer} {build.engine_size} "
            f"[{build.use_type}] {price}{express}"
        )
        if build.add_ons:
            print(f"       add-ons: {build.add_ons}")
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    """Delete a saved build by id."""
    _quiet(args)
    from domain.errors import StorageUnavailable
    from services.build_service import BuildService

    service = BuildService.create_default()
    try:
        remaining = asyncio.run(service.delete_build(args.build_id))
    except StorageUnavailable as e:
        print(f"error: {e}")
        return 1
    print(f"deleted #{args.build_id} ({len(remaining)} builds remaining)")
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """Load the manufacturer catalog and print its entries."""
    _quiet(args)
    from services.catalog_service import CatalogService

    service = CatalogService.create_default()
    store = service.load()
    if service.last_error is not None:
        print(f"error: {service.last_error}")
        return 1
    for entry in store:
        print(f"{entry.key:<18} {entry.image_ref:<18} {entry.description}")
    return 0


def cmd_log_level(args: argparse.Namespace) -> int:
    """Get or set the log level in settings.toml."""
    settings = _load_settings(SETTINGS_PATH)
    current = settings["env"]["log_level"]

    if args.level is None:
        print(current)
        return 0

    level = args.level.upper()
    if level not in VALID_LOG_LEVELS:
        print(f"invalid level: {args.level} (expected one of {', '.join(VALID_LOG_LEVELS)})")
        return 1

    if level == current:
        print(f"already {level}")
        return 0

    content = SETTINGS_PATH.read_text()
    updated = re.sub(
        r'(log_level\s*=\s*)"[^"]*"',
        rf'\1"{level}"',
        content,
    )
    SETTINGS_PATH.write_text(updated)
    _clear_settings_cache()
    print(f"{current} → {level}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="motorecs", description="MotoRecs CLI tools")
    sub = parser.add_subparsers(dest="command")

    init_parser = sub.add_parser("init-db", help="Create the local build store")
    builds_parser = sub.add_parser("builds", help="List saved builds, newest first")
    delete_parser = sub.add_parser("delete", help="Delete a saved build")
    delete_parser.add_argument("build_id", type=int, help="Id of the build to delete")
    catalog_parser = sub.add_parser("catalog", help="List manufacturers in the catalog")
    for p in (init_parser, builds_parser, delete_parser, catalog_parser):
        p.add_argument("-v", "--verbose", action="store_true", help="Show detailed logs")

    ll_parser = sub.add_parser("log-level", help="Get or set the log level in settings.toml")
    ll_parser.add_argument("level", nargs="?", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    args = parser.parse_args(argv)

    commands = {
        "init-db": cmd_init_db,
        "builds": cmd_builds,
        "delete": cmd_delete,
        "catalog": cmd_catalog,
        "log-level": cmd_log_level,
    }
    if args.command in commands:
        return commands[args.command](args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
