"""
Scale generation for typescale

Turns a ScaleConfig into a GeneratedScale: one StepEntry per step from
-negative_steps to +positive_steps, each carrying a CSS size expression and,
when enabled, a line-height expression.

Single-base scales render through a fixed clamp heuristic (0.75x / 1.25x of
the target). Fluid scales interpolate between a min and a max scale across
the viewport, either clamped or as an unclamped linear "lock".
"""

import math
from typing import List, Tuple

from ..utils.logging import TypeScaleLogger
from .models import GeneratedScale, ScaleConfig, StepEntry
from .validation import ConfigValidator

CLAMP_LOWER = 0.75
CLAMP_UPPER = 1.25


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError, ZeroDivisionError):
        return math.nan


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        return math.nan


def format_number(value: float) -> str:
    """Render a number as given: integral values without a decimal point"""
    value = float(value)
    return str(int(value) if value.is_integer() else value)


def format_px(value: float) -> str:
    return f"{value:.2f}px"


def format_rem(value: float, rem_base: float) -> str:
    return f"{value / rem_base:.4f}rem"


def format_length(value: float, config: ScaleConfig) -> str:
    """Render a px value in the configured unit"""
    if config.use_rem:
        return format_rem(value, config.rem_base)
    return format_px(value)


class ScaleGenerator:
    """Compute the step sequence for a scale configuration"""

    def generate(self, config: ScaleConfig) -> GeneratedScale:
        ConfigValidator.ensure_valid(config)

        if config.fluid:
            TypeScaleLogger.debug(
                f"Generating fluid scale {config.min_base_size}px@{config.min_ratio} -> "
                f"{config.max_base_size}px@{config.max_ratio} "
                f"({'locks' if config.use_css_locks else 'clamp'})"
            )
            entries = self._fluid_entries(config)
            mobile_entries = []
        else:
            TypeScaleLogger.debug(
                f"Generating scale {config.base_size}px@{config.ratio} "
                f"(+{config.positive_steps}/-{config.negative_steps}, "
                f"advanced={config.advanced_mode})"
            )
            entries = self._single_base_entries(config.base_size, config.ratio, config)
            mobile_entries = []
            if config.mobile_enabled:
                mobile_ratio = config.mobile_ratio if config.mobile_ratio is not None else config.ratio
                mobile_entries = self._single_base_entries(
                    config.mobile_base_size, mobile_ratio, config
                )

        if config.line_heights_enabled:
            line_height = self.line_height_expression(config)
            for entry in entries + mobile_entries:
                entry.line_height_expression = line_height

        TypeScaleLogger.debug(f"Generated {len(entries)} steps")
        return GeneratedScale(entries=entries, mobile_entries=mobile_entries)

    # Target sizes

    @staticmethod
    def direct_sizes(base_size: float, ratio: float, config: ScaleConfig) -> List[Tuple[int, float]]:
        """base_size * ratio**step for every step, ascending"""
        return [
            (step, base_size * _power(ratio, step))
            for step in range(-config.negative_steps, config.positive_steps + 1)
        ]

    @staticmethod
    def advanced_sizes(base_size: float, ratio: float, config: ScaleConfig) -> List[Tuple[int, float]]:
        """Sizes spaced by the total-step root of the ratio, ascending

        Starting from base_size at step 0, each step away from 0 multiplies
        (positive) or divides (negative) the previous value by
        ratio ** (1 / total_steps).
        """
        root = _power(ratio, 1 / config.total_steps)

        sizes = {0: float(base_size)}
        value = float(base_size)
        for step in range(1, config.positive_steps + 1):
            value = value * root
            sizes[step] = value

        value = float(base_size)
        for step in range(1, config.negative_steps + 1):
            value = _divide(value, root)
            sizes[-step] = value

        return sorted(sizes.items())

    # Entries

    def _single_base_entries(self, base_size: float, ratio: float, config: ScaleConfig) -> List[StepEntry]:
        if config.advanced_mode:
            sizes = self.advanced_sizes(base_size, ratio, config)
        else:
            sizes = self.direct_sizes(base_size, ratio, config)

        entries = []
        for step, size in sizes:
            if step == 0 and not config.advanced_mode:
                expression = f"{format_number(base_size)}px"
                size = float(base_size)
            else:
                expression = self.clamp_expression(size, config)
            entries.append(StepEntry(step=step, size_expression=expression, size=size))
        return entries

    def _fluid_entries(self, config: ScaleConfig) -> List[StepEntry]:
        min_sizes = self.direct_sizes(config.min_base_size, config.min_ratio, config)
        max_sizes = dict(self.direct_sizes(config.max_base_size, config.max_ratio, config))

        entries = []
        for step, min_size in min_sizes:
            max_size = max_sizes[step]
            if config.use_css_locks:
                expression = self.lock_expression(min_size, max_size, config)
            else:
                expression = self.fluid_clamp_expression(min_size, max_size, config)
            entries.append(
                StepEntry(
                    step=step,
                    size_expression=expression,
                    min_size=min_size,
                    max_size=max_size,
                )
            )
        return entries

    # Expressions

    @staticmethod
    def clamp_expression(size: float, config: ScaleConfig) -> str:
        return (
            f"clamp({format_px(size * CLAMP_LOWER)}, "
            f"{format_length(size, config)}, "
            f"{format_px(size * CLAMP_UPPER)})"
        )

    @staticmethod
    def fluid_clamp_expression(min_size: float, max_size: float, config: ScaleConfig) -> str:
        low = format_length(min_size, config)
        high = format_length(max_size, config)
        min_width = format_number(config.min_screen_width)
        max_width = format_number(config.max_screen_width)
        # The delta stays in px so the product with the px ratio is a length
        delta = f"{max_size - min_size:.2f}"
        return (
            f"clamp({low}, calc({low} + {delta} * ((100vw - {min_width}px) / "
            f"({max_width} - {min_width}))), {high})"
        )

    @staticmethod
    def lock_coefficients(min_value: float, max_value: float, config: ScaleConfig) -> Tuple[float, float]:
        """(slope, intercept) of the line through both viewport bounds"""
        slope = (max_value - min_value) / (config.max_screen_width - config.min_screen_width)
        intercept = min_value - slope * config.min_screen_width
        return slope, intercept

    @classmethod
    def lock_expression(cls, min_value: float, max_value: float, config: ScaleConfig) -> str:
        slope, intercept = cls.lock_coefficients(min_value, max_value, config)
        slope_vw = slope * 100
        sign = "-" if slope_vw < 0 else "+"
        return f"calc({format_length(intercept, config)} {sign} {abs(slope_vw):.4f}vw)"

    @classmethod
    def line_height_expression(cls, config: ScaleConfig) -> str:
        """Unclamped linear interpolation, independent of use_css_locks"""
        return cls.lock_expression(config.min_line_height, config.max_line_height, config)

