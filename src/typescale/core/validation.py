"""
Configuration validation for typescale

Structural problems raise ScaleConfigError. Numeric values that only make the
output degenerate (zero or negative sizes and ratios) are reported as
warnings and generation still runs.
"""

import math
import re
from dataclasses import dataclass, field
from typing import List

from ..utils.logging import TypeScaleLogger
from .models import ScaleConfig

PREFIX_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")

NUMERIC_FIELDS = (
    "base_size",
    "ratio",
    "min_base_size",
    "max_base_size",
    "min_ratio",
    "max_ratio",
    "min_screen_width",
    "max_screen_width",
    "rem_base",
    "min_line_height",
    "max_line_height",
    "mobile_base_size",
    "mobile_ratio",
    "breakpoint",
)


class ScaleConfigError(ValueError):
    """Raised for configurations that cannot produce a stylesheet"""


@dataclass
class ValidationReport:
    """Report of scale configuration validation"""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


def _is_step_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class ConfigValidator:
    """Validate a ScaleConfig before generation or serialization"""

    @staticmethod
    def validate(config: ScaleConfig) -> ValidationReport:
        report = ValidationReport()

        for name in ("positive_steps", "negative_steps"):
            value = getattr(config, name)
            if not _is_step_count(value):
                report.errors.append(f"{name} must be a non-negative integer, got {value!r}")

        numbers_ok = True
        for name in NUMERIC_FIELDS:
            value = getattr(config, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                report.errors.append(f"{name} must be a number, got {value!r}")
                numbers_ok = False
            elif not math.isfinite(value):
                report.errors.append(f"{name} must be finite, got {value!r}")
                numbers_ok = False

        # Remaining checks compare numbers
        if not numbers_ok:
            return report

        if config.rem_base <= 0:
            report.errors.append(f"rem_base must be positive, got {config.rem_base}")

        if (config.fluid or config.line_heights_enabled) and (
            config.max_screen_width <= config.min_screen_width
        ):
            report.errors.append(
                "max_screen_width must be greater than min_screen_width "
                f"({config.max_screen_width} <= {config.min_screen_width})"
            )

        if not isinstance(config.variable_prefix, str) or not PREFIX_PATTERN.match(
            config.variable_prefix
        ):
            report.errors.append(
                f"variable_prefix {config.variable_prefix!r} is not a valid identifier"
            )

        for element, step in config.element_step_assignment.items():
            if isinstance(step, bool) or not isinstance(step, int):
                report.errors.append(f"Step for element '{element}' must be an integer, got {step!r}")

        if config.fluid:
            sizes = {
                "min_base_size": config.min_base_size,
                "max_base_size": config.max_base_size,
                "min_ratio": config.min_ratio,
                "max_ratio": config.max_ratio,
            }
            if config.advanced_mode:
                report.warnings.append("advanced_mode is not applied to fluid scales")
            if config.mobile_base_size is not None:
                report.warnings.append("Mobile scale is ignored in fluid mode")
        else:
            sizes = {"base_size": config.base_size, "ratio": config.ratio}
            if config.mobile_base_size is not None:
                sizes["mobile_base_size"] = config.mobile_base_size
                if config.mobile_ratio is not None:
                    sizes["mobile_ratio"] = config.mobile_ratio
            if 0 < config.ratio <= 1:
                report.warnings.append(f"ratio {config.ratio} does not grow the scale")

        for name, value in sizes.items():
            if value <= 0:
                report.warnings.append(f"{name} is not positive ({value}); output will be degenerate")

        # Step ranges are only walked once the counts are known to be valid
        positive = all(value > 0 for value in sizes.values())
        if config.fluid and not config.use_css_locks and positive and not report.has_errors:
            inverted = ConfigValidator.inverted_fluid_steps(config)
            if inverted:
                report.warnings.append(
                    f"Fluid min size exceeds max size at step(s) {', '.join(map(str, inverted))}; "
                    "clamp() keeps those steps at the min size"
                )

        return report

    @staticmethod
    def inverted_fluid_steps(config: ScaleConfig) -> List[int]:
        """Steps whose min-scale size is larger than their max-scale size

        Compared in log space so large step counts cannot overflow.
        Expects positive sizes and ratios.
        """
        low_base, low_ratio = math.log(config.min_base_size), math.log(config.min_ratio)
        high_base, high_ratio = math.log(config.max_base_size), math.log(config.max_ratio)
        return [
            step
            for step in range(-config.negative_steps, config.positive_steps + 1)
            if low_base + step * low_ratio > high_base + step * high_ratio
        ]

    @staticmethod
    def ensure_valid(config: ScaleConfig) -> ValidationReport:
        """Validate, log warnings and raise ScaleConfigError on any error"""
        report = ConfigValidator.validate(config)

        for warning in report.warnings:
            TypeScaleLogger.warning(warning)

        if report.has_errors:
            raise ScaleConfigError(
                "Invalid scale configuration:\n" + "\n".join(f"- {e}" for e in report.errors)
            )

        return report
