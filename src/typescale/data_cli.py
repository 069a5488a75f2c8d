#!/usr/bin/env python3
"""
typescale-data CLI
List and edit the named ratios and element presets used by scale configs
"""

import argparse
import sys
from typing import Dict, List

from .config import DATA_FILES, PRESETS_FILE, RATIOS_FILE, get_scale_data
from .core.validation import ScaleConfigError


def parse_ratio_value(text: str) -> float:
    try:
        return float(text)
    except ValueError as e:
        raise ScaleConfigError(f"Ratio value must be a number, got {text!r}") from e


def parse_assignment(pairs: List[str]) -> Dict[str, int]:
    """ELEMENT=STEP arguments as an ordered mapping"""
    assignment = {}
    for pair in pairs:
        element, separator, step = pair.rpartition("=")
        if not separator or not element:
            raise ScaleConfigError(f"Expected ELEMENT=STEP, got {pair!r}")
        try:
            assignment[element] = int(step)
        except ValueError as e:
            raise ScaleConfigError(f"Step for '{element}' must be an integer, got {step!r}") from e
    return assignment


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typescale-data", description="List and edit typescale ratios and element presets"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("ratios", help="List named ratios")

    add_ratio = subparsers.add_parser("add-ratio", help="Add or replace a named ratio")
    add_ratio.add_argument("name")
    add_ratio.add_argument("value", help="Multiplier between steps, e.g. 1.414")

    remove_ratio = subparsers.add_parser("remove-ratio", help="Remove a named ratio")
    remove_ratio.add_argument("name")

    default_ratio = subparsers.add_parser("default-ratio", help="Set the ratio used when a config has none")
    default_ratio.add_argument("name")

    presets = subparsers.add_parser("presets", help="List element presets")
    presets.add_argument("name", nargs="?", help="Show one preset")

    add_preset = subparsers.add_parser("add-preset", help="Add or replace an element preset")
    add_preset.add_argument("name")
    add_preset.add_argument("assignments", nargs="+", metavar="ELEMENT=STEP")

    remove_preset = subparsers.add_parser("remove-preset", help="Remove an element preset")
    remove_preset.add_argument("name")

    reset = subparsers.add_parser("reset", help="Drop user edits and use the packaged data again")
    reset.add_argument("file", nargs="?", choices=DATA_FILES, help="Only reset this file")

    subparsers.add_parser("path", help="Show the user data directory")
    return parser


def _print_ratios(data) -> None:
    default = data.default_ratio()
    origin = "user" if data.is_overridden(RATIOS_FILE) else "package"
    print(f"Ratios ({origin}):")
    for name, value in data.ratios().items():
        marker = " (default)" if name == default else ""
        print(f"   • {name}: {value}{marker}")


def _print_presets(data, name=None) -> None:
    presets = data.presets()
    if name is not None:
        if name not in presets:
            raise ScaleConfigError(f"Unknown element preset '{name}'")
        presets = {name: presets[name]}

    origin = "user" if data.is_overridden(PRESETS_FILE) else "package"
    print(f"Element presets ({origin}):")
    for preset_name, assignment in presets.items():
        steps = ", ".join(f"{element}={step}" for element, step in assignment.items())
        print(f"   • {preset_name}: {steps}")


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    data = get_scale_data()

    try:
        if args.command == "ratios":
            _print_ratios(data)

        elif args.command == "add-ratio":
            path = data.add_ratio(args.name, parse_ratio_value(args.value))
            print(f"✓ Saved ratio '{args.name}' to {path}")

        elif args.command == "remove-ratio":
            path = data.remove_ratio(args.name)
            print(f"✓ Removed ratio '{args.name}' from {path}")

        elif args.command == "default-ratio":
            path = data.set_default_ratio(args.name)
            print(f"✓ Default ratio is now '{data.default_ratio()}' ({path})")

        elif args.command == "presets":
            _print_presets(data, args.name)

        elif args.command == "add-preset":
            path = data.add_preset(args.name, parse_assignment(args.assignments))
            print(f"✓ Saved preset '{args.name}' to {path}")

        elif args.command == "remove-preset":
            path = data.remove_preset(args.name)
            print(f"✓ Removed preset '{args.name}' from {path}")

        elif args.command == "reset":
            removed = data.reset(args.file)
            print(f"✓ Reset {removed} file(s) to the packaged defaults")

        elif args.command == "path":
            print(data.user_data_dir)

    except (ScaleConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
