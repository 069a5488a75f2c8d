#!/usr/bin/env python3
"""
typescale CLI
Command-line interface for generating type scale stylesheets
"""

import argparse
import dataclasses
import sys
from pathlib import Path

from . import (
    ElementPresets,
    PreviewWriter,
    RatioTable,
    ScaleConfig,
    ScaleConfigError,
    ScaleConfigParser,
    ScaleGenerator,
    StylesheetWriter,
)
from .utils.font_info import read_family_name
from .utils.logging import TypeScaleLogger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typescale",
        description="Generate a modular type scale as CSS custom properties\n"
        "from a YAML/JSON scale config and/or command-line options.",
    )
    parser.add_argument("config", nargs="?", help="Scale config (.yaml, .yml or .json)")
    parser.add_argument(
        "-o", "--output", help="Output stylesheet (defaults to the config path with .css, else stdout)"
    )
    parser.add_argument("--preview", metavar="HTML", help="Also write an HTML preview page")
    parser.add_argument("--font-file", help="Read the preview font family from a font file")
    parser.add_argument(
        "--no-strict", action="store_true", help="Warn about unknown config keys instead of failing"
    )
    parser.add_argument(
        "--list-ratios", action="store_true", help="List named ratios and element presets, then exit"
    )

    overrides = parser.add_argument_group("overrides")
    overrides.add_argument("--base-size", type=float, help="Base size in px")
    overrides.add_argument("--ratio", help="Ratio value or name (e.g. 1.25, 'Perfect Fourth')")
    overrides.add_argument("--positive-steps", type=int, help="Steps above the base")
    overrides.add_argument("--negative-steps", type=int, help="Steps below the base")
    overrides.add_argument("--advanced", action="store_true", help="Use root-normalised step spacing")
    overrides.add_argument("--fluid", action="store_true", help="Interpolate sizes across the viewport")
    overrides.add_argument("--css-locks", action="store_true", help="Use unclamped linear formulas")
    overrides.add_argument("--px", action="store_true", help="Render preferred values in px instead of rem")
    overrides.add_argument("--prefix", help="Custom property prefix (default: step)")
    overrides.add_argument("--sass", action="store_true", help="Append Sass variables")
    overrides.add_argument("--preset", help="Element preset group")
    return parser


def _apply_overrides(config: ScaleConfig, args) -> ScaleConfig:
    changes = {}
    if args.base_size is not None:
        changes["base_size"] = args.base_size
    if args.ratio is not None:
        try:
            changes["ratio"] = RatioTable.resolve(args.ratio)
        except KeyError as e:
            raise ScaleConfigError(str(e.args[0])) from e
    if args.positive_steps is not None:
        changes["positive_steps"] = args.positive_steps
    if args.negative_steps is not None:
        changes["negative_steps"] = args.negative_steps
    if args.advanced:
        changes["advanced_mode"] = True
    if args.fluid:
        changes["fluid"] = True
    if args.css_locks:
        changes["use_css_locks"] = True
    if args.px:
        changes["use_rem"] = False
    if args.prefix is not None:
        changes["variable_prefix"] = args.prefix
    if args.sass:
        changes["emit_sass_variables"] = True
    if args.preset is not None:
        try:
            changes["element_step_assignment"] = ElementPresets.get(args.preset)
        except KeyError as e:
            raise ScaleConfigError(str(e.args[0])) from e
    if args.font_file:
        family = read_family_name(args.font_file)
        if family:
            changes["font_family"] = family
    return dataclasses.replace(config, **changes) if changes else config


def _list_ratios() -> int:
    try:
        ratios = {name: RatioTable.get(name) for name in RatioTable.names()}
        default = RatioTable.default_name()
        presets = {name: ElementPresets.get(name) for name in ElementPresets.names()}
    except ScaleConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Ratios:")
    for name, value in ratios.items():
        marker = " (default)" if name == default else ""
        print(f"   • {name}: {value}{marker}")
    print("\nElement presets:")
    for name, preset in presets.items():
        steps = ", ".join(f"{el}={step}" for el, step in preset.items())
        print(f"   • {name}: {steps}")
    return 0


def main(argv=None):
    """Generate a stylesheet from a scale config"""
    args = _build_parser().parse_args(argv)

    if args.list_ratios:
        return _list_ratios()

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        print(f"Input file {config_path} does not exist", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    elif config_path is not None:
        output_path = config_path.with_suffix(".css")
    else:
        output_path = None

    log_anchor = config_path or output_path
    if log_anchor is not None:
        TypeScaleLogger.setup_logger(str(log_anchor))

    try:
        if config_path is not None:
            config = ScaleConfigParser(strict_mode=not args.no_strict).parse_file(str(config_path))
        else:
            # Default ratio and preset from the data files
            config = ScaleConfigParser().parse_mapping({})
        config = _apply_overrides(config, args)

        scale = ScaleGenerator().generate(config)
        stylesheet = StylesheetWriter(config).write(scale)

        if output_path is None:
            sys.stdout.write(stylesheet)
        else:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(stylesheet)
            TypeScaleLogger.success(f"Wrote {len(scale)} steps -> {output_path.name}")
            print(f"✓ Stylesheet written: {output_path}")

        if args.preview:
            preview_path = Path(args.preview)
            with open(preview_path, "w", encoding="utf-8") as f:
                f.write(PreviewWriter(config).write(scale))
            TypeScaleLogger.success(f"Wrote preview -> {preview_path.name}")
            print(f"✓ Preview written: {preview_path}")

    except (ScaleConfigError, OSError) as e:
        error_msg = str(e)
        if TypeScaleLogger.get_logger() is None:
            print(f"Error: {error_msg}", file=sys.stderr)
        elif "\n" in error_msg:
            TypeScaleLogger.error("Error during generation:")
            for line in error_msg.split("\n"):
                if line.strip():
                    TypeScaleLogger.error(f"  {line}")
        else:
            TypeScaleLogger.error(f"Error during generation: {error_msg}")
        return 1
    finally:
        log_path = TypeScaleLogger.get_log_file_path()
        if log_path:
            print(f"\nLog file: {log_path}")
        TypeScaleLogger.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
