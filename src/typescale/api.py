"""
typescale Public API

High-level functions for generating scales and writing stylesheets from
configs or config files.
"""

from pathlib import Path
from typing import Optional, Union

from .core.generator import ScaleGenerator
from .core.models import ScaleConfig
from .parsers.config_parser import ScaleConfigParser
from .utils.logging import TypeScaleLogger
from .writers.css_writer import StylesheetWriter
from .writers.preview_writer import PreviewWriter


def build_stylesheet(config: ScaleConfig) -> str:
    """
    Generate the scale for a config and render it as stylesheet text.

    Example:
        import typescale

        config = typescale.ScaleConfig(base_size=16, ratio=1.25, emit_sass_variables=True)
        css = typescale.build_stylesheet(config)
    """
    scale = ScaleGenerator().generate(config)
    return StylesheetWriter(config).write(scale)


def build_preview(config: ScaleConfig) -> str:
    """Generate the scale for a config and render the HTML preview page"""
    scale = ScaleGenerator().generate(config)
    return PreviewWriter(config).write(scale)


def load_config(config_path: Union[str, Path], strict: bool = True) -> ScaleConfig:
    """Parse a YAML or JSON scale config file"""
    return ScaleConfigParser(strict_mode=strict).parse_file(str(config_path))


def convert_config_file(
    config_path: Union[str, Path],
    css_path: Optional[Union[str, Path]] = None,
    preview_path: Optional[Union[str, Path]] = None,
) -> str:
    """
    Read a scale config file and write its stylesheet next to it.

    Args:
        config_path: Path to the .yaml/.yml/.json scale config
        css_path: Output stylesheet path (defaults to the config path with .css)
        preview_path: Optional path for an HTML preview page

    Returns:
        Path to the written stylesheet

    Example:
        import typescale

        typescale.convert_config_file("scale.yaml")              # writes scale.css
        typescale.convert_config_file("scale.yaml", "dist/type.css", "dist/type.html")
    """
    config_file = Path(config_path)
    config = load_config(config_file)

    css_file = Path(css_path) if css_path else config_file.with_suffix(".css")
    write_stylesheet(config, css_file)

    if preview_path:
        write_preview(config, preview_path)

    return str(css_file)


def write_stylesheet(config: ScaleConfig, css_path: Union[str, Path]) -> str:
    """Write the stylesheet for a config to a file and return its path"""
    css_file = Path(css_path)
    with open(css_file, "w", encoding="utf-8") as f:
        f.write(build_stylesheet(config))
    TypeScaleLogger.info(f"Wrote stylesheet {css_file}")
    return str(css_file)


def write_preview(config: ScaleConfig, preview_path: Union[str, Path]) -> str:
    """Write the HTML preview for a config to a file and return its path"""
    preview_file = Path(preview_path)
    with open(preview_file, "w", encoding="utf-8") as f:
        f.write(build_preview(config))
    TypeScaleLogger.info(f"Wrote preview {preview_file}")
    return str(preview_file)
