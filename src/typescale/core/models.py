"""
Data models for typescale

This module contains the dataclasses describing a scale configuration and the
generated scale.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

DEFAULT_PREVIEW_TEXT = "The quick brown fox jumps over the lazy dog"


@dataclass(frozen=True)
class ScaleConfig:
    """Input parameters for one scale computation"""

    base_size: float = 16.0
    ratio: float = 1.333
    positive_steps: int = 9
    negative_steps: int = 3
    advanced_mode: bool = False

    # Fluid (viewport-interpolated) mode
    fluid: bool = False
    min_base_size: float = 14.0
    max_base_size: float = 18.0
    min_ratio: float = 1.2
    max_ratio: float = 1.333
    min_screen_width: float = 320.0
    max_screen_width: float = 1920.0
    use_css_locks: bool = False

    rem_base: float = 16.0
    use_rem: bool = True

    # Both must be set to enable line heights (px lengths)
    min_line_height: Optional[float] = None
    max_line_height: Optional[float] = None

    variable_prefix: str = "step"
    emit_sass_variables: bool = False
    # Left out of the hash so configs stay hashable; equality still compares it
    element_step_assignment: Dict[str, int] = field(default_factory=dict, hash=False)

    # Mobile scale behind a max-width media query (single-base only)
    mobile_base_size: Optional[float] = None
    mobile_ratio: Optional[float] = None
    breakpoint: float = 768.0

    font_family: Optional[str] = None  # display only
    preview_text: str = DEFAULT_PREVIEW_TEXT

    @property
    def total_steps(self) -> int:
        return self.positive_steps + self.negative_steps + 1

    @property
    def line_heights_enabled(self) -> bool:
        return self.min_line_height is not None and self.max_line_height is not None

    @property
    def mobile_enabled(self) -> bool:
        return self.mobile_base_size is not None and not self.fluid


@dataclass
class StepEntry:
    """One step of a generated scale"""
    step: int
    size_expression: str
    line_height_expression: Optional[str] = None
    size: Optional[float] = None      # single-base target in px
    min_size: Optional[float] = None  # fluid lower bound in px
    max_size: Optional[float] = None  # fluid upper bound in px


@dataclass
class GeneratedScale:
    """Ordered step entries, ascending by step"""
    entries: List[StepEntry] = field(default_factory=list)
    mobile_entries: List[StepEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[StepEntry]:
        return iter(self.entries)

    @property
    def steps(self) -> List[int]:
        return [entry.step for entry in self.entries]

    def get(self, step: int) -> Optional[StepEntry]:
        """Return the entry for a step, or None when outside the range"""
        for entry in self.entries:
            if entry.step == step:
                return entry
        return None

    def get_mobile(self, step: int) -> Optional[StepEntry]:
        for entry in self.mobile_entries:
            if entry.step == step:
                return entry
        return None
