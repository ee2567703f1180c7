"""
Localis - Command line entry point.

This module handles:
- Argument parsing
- Settings and logging initialization
- Listing, showing and selecting the persisted locale
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from localis import __version__
from localis.core.settings import LocalisSettings, find_settings_file, load_settings
from localis.i18n.exceptions import LocalisationError
from localis.i18n.locale import ROOT_LOCALE, Locale
from localis.i18n.store import LocaleConfigStore

logger = logging.getLogger(__name__)

# Tag naming the root locale on the command line
DEFAULT_TAG = "default"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="localis",
        description="Localis - Select the display language of an application",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Localis {__version__}",
    )

    parser.add_argument(
        "-s",
        "--settings",
        type=Path,
        default=None,
        help="Path to settings file (default: auto-detect)",
    )

    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        default=None,
        help="Path to the language config file (overrides settings)",
    )

    parser.add_argument(
        "-l",
        "--languages-dir",
        type=Path,
        default=None,
        help="Directory with the language*.properties files (overrides settings)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser("list", help="List available locales")
    subparsers.add_parser("current", help="Show the selected locale")

    get_parser = subparsers.add_parser("get", help="Print localized strings")
    get_parser.add_argument("keys", nargs="+", metavar="KEY", help="String key")

    select_parser = subparsers.add_parser("select", help="Select the locale used on next start")
    select_parser.add_argument(
        "tag",
        metavar="TAG",
        help=f"Locale such as 'fr' or 'fr_CA', or '{DEFAULT_TAG}'",
    )

    return parser.parse_args(argv)


def format_locale(locale: Locale) -> str:
    """Display name of a locale."""
    return str(locale) or f"({DEFAULT_TAG})"


def open_store(settings: LocalisSettings, args: argparse.Namespace) -> LocaleConfigStore:
    """Create the store from settings and command line overrides."""
    config_file = args.config_file or settings.config_file
    languages_dir = args.languages_dir or settings.resolved_languages_directory()

    logger.debug(f"Config file: {config_file}, languages directory: {languages_dir}")
    return LocaleConfigStore(config_file, languages_dir, bundle_name=settings.bundle_name)


def cmd_list(store: LocaleConfigStore) -> int:
    """Print available locales, marking the selected one."""
    locales = store.list_available_locales()
    if locales is None:
        print(f"No language files found in {store.languages_directory}", file=sys.stderr)
        return 1

    for locale in locales:
        marker = "*" if locale == store.locale else " "
        print(f"{marker} {format_locale(locale)}")
    return 0


def cmd_current(store: LocaleConfigStore) -> int:
    """Print the selected locale."""
    print(format_locale(store.locale))
    return 0


def cmd_get(store: LocaleConfigStore, keys: list[str]) -> int:
    """Print one localized string per key."""
    for key in keys:
        print(store.get_string(key))
    return 0


def cmd_select(store: LocaleConfigStore, tag: str) -> int:
    """Persist a new locale."""
    requirement = store.language_requirement()
    if requirement is None:
        print(f"No language files found in {store.languages_directory}", file=sys.stderr)
        return 1

    try:
        chosen = ROOT_LOCALE if tag == DEFAULT_TAG else Locale.parse(tag)
        requirement.fulfil(chosen)
    except ValueError as e:
        available = ", ".join(format_locale(o) for o in requirement.options)
        print(f"Error: {e}. Available: {available}", file=sys.stderr)
        return 1

    store.config_file.parent.mkdir(parents=True, exist_ok=True)
    if store.update_language(requirement):
        print(f"Language set to {format_locale(chosen)}. Restart the application to apply it.")
    else:
        print(f"Language unchanged ({format_locale(store.locale)})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 = success)
    """
    args = parse_args(argv)

    try:
        settings = load_settings(find_settings_file(args.settings))
    except LocalisationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.logging_level(),
        format="%(asctime)s %(levelname)s [%(name)s]: %(message)s",
    )

    try:
        store = open_store(settings, args)

        if args.command == "list":
            return cmd_list(store)
        if args.command == "current":
            return cmd_current(store)
        if args.command == "get":
            return cmd_get(store, args.keys)
        return cmd_select(store, args.tag)

    except LocalisationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: could not save language selection: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
