"""
typescale - Modular typography scale calculator

Computes a sequence of font sizes from a base size, a modular ratio and step
counts (fixed or fluid across the viewport) and renders them as CSS custom
properties, element rules, Sass variables and an HTML preview.
"""

__version__ = "1.0.0"

from .api import (
    build_preview,
    build_stylesheet,
    convert_config_file,
    load_config,
    write_preview,
    write_stylesheet,
)
from .core.generator import ScaleGenerator
from .core.models import GeneratedScale, ScaleConfig, StepEntry
from .core.ratios import ElementPresets, RatioTable
from .core.validation import ConfigValidator, ScaleConfigError, ValidationReport
from .parsers.config_parser import ScaleConfigParser
from .writers.css_writer import StylesheetWriter
from .writers.preview_writer import PreviewWriter

# Public API
__all__ = [
    # Version
    "__version__",
    # Core models
    "ScaleConfig",
    "StepEntry",
    "GeneratedScale",
    # Named ratios and presets
    "RatioTable",
    "ElementPresets",
    # Validation
    "ConfigValidator",
    "ScaleConfigError",
    "ValidationReport",
    # Generator, parser and writers
    "ScaleGenerator",
    "ScaleConfigParser",
    "StylesheetWriter",
    "PreviewWriter",
    # Core operations
    "generate_scale",
    "serialize",
    # High-level API functions
    "build_stylesheet",
    "build_preview",
    "load_config",
    "convert_config_file",
    "write_stylesheet",
    "write_preview",
]


def generate_scale(config: ScaleConfig) -> GeneratedScale:
    """Compute the ordered step sequence for a config

    Args:
        config: Scale parameters

    Returns:
        GeneratedScale with one entry per step from -negative_steps to
        +positive_steps
    """
    return ScaleGenerator().generate(config)


def serialize(scale: GeneratedScale, config: ScaleConfig) -> str:
    """Render a scale and the config's element assignments as stylesheet text"""
    return StylesheetWriter(config).write(scale)
