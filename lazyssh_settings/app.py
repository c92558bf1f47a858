from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from lazyssh_settings.application import SortPreference
from lazyssh_settings.domain import SortMode
from lazyssh_settings.infrastructure import create_settings_store


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazyssh-settings", description="Show or change lazyssh UI preferences.")
    parser.add_argument("--home", type=Path, default=None, help="Use this directory instead of the user's home.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="Print the saved sort mode.")
    set_parser = sub.add_parser("set", help="Save a sort mode.")
    set_parser.add_argument("mode", help=", ".join(mode.value for mode in SortMode))
    sub.add_parser("toggle", help="Switch between alias and last-seen ordering.")
    sub.add_parser("reverse", help="Flip the sort direction.")
    return parser


def _print_mode(mode: SortMode) -> None:
    print(f"{mode.value}\t{mode.label}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.home is not None:
        home = args.home
        store = create_settings_store(home_resolver=lambda: home)
    else:
        store = create_settings_store()
    preference = SortPreference(store)
    load_error = preference.load()

    if args.command == "show":
        _print_mode(preference.current)
        return 0 if load_error is None else 1

    if args.command == "set":
        mode = SortMode.parse(args.mode)
        if mode is None:
            print(f"unknown sort mode: {args.mode}", file=sys.stderr)
            return 2
        error = preference.set(mode)
    elif args.command == "toggle":
        error = preference.toggle_field()
    else:
        error = preference.reverse()

    _print_mode(preference.current)
    return 0 if error is None else 1


if __name__ == "__main__":
    raise SystemExit(main())
