"""
Stylesheet writer for typescale

Renders a GeneratedScale and its element assignments as CSS custom
properties, element rules and (optionally) Sass variables. The text is
rebuilt in full on every call.
"""

from typing import List

from ..core.generator import format_number
from ..core.models import GeneratedScale, ScaleConfig, StepEntry
from ..core.validation import ConfigValidator
from ..utils.logging import TypeScaleLogger

CLASS_ELEMENTS = {"display", "title", "micro"}


def selector_for(element: str) -> str:
    """Preset names without an HTML tag become classes, anything else is used as given"""
    if element in CLASS_ELEMENTS:
        return f".{element}"
    return element


class StylesheetWriter:
    """Write a generated scale to stylesheet text"""

    def __init__(self, config: ScaleConfig):
        self.config = config
        self.prefix = config.variable_prefix

    def size_property(self, step: int) -> str:
        return f"--{self.prefix}-{step}"

    def line_height_property(self, step: int) -> str:
        return f"--{self.prefix}-lh-{step}"

    def write(self, scale: GeneratedScale) -> str:
        """Generate stylesheet text from a scale"""
        ConfigValidator.ensure_valid(self.config)
        lines = []

        lines.append(":root {")
        lines.extend(self._format_properties(scale.entries, indent="  "))
        lines.append("}")
        lines.append("")

        if scale.mobile_entries:
            lines.append(f"@media (max-width: {format_number(self.config.breakpoint)}px) {{")
            lines.append("  :root {")
            lines.extend(self._format_properties(scale.mobile_entries, indent="    "))
            lines.append("  }")
            lines.append("}")
            lines.append("")

        for element, step in self.config.element_step_assignment.items():
            entry = scale.get(step)
            if entry is None:
                TypeScaleLogger.debug(f"Skipping '{element}': step {step} is outside the scale")
                continue
            lines.extend(self._format_rule(element, entry))
            lines.append("")

        if self.config.emit_sass_variables:
            lines.append("/* Sass variables */")
            lines.extend(self._format_sass(scale.entries))
            lines.append("")

        return "\n".join(lines).rstrip("\n") + "\n"

    def _format_properties(self, entries: List[StepEntry], indent: str) -> List[str]:
        lines = [
            f"{indent}{self.size_property(entry.step)}: {entry.size_expression};"
            for entry in entries
        ]
        lines.extend(
            f"{indent}{self.line_height_property(entry.step)}: {entry.line_height_expression};"
            for entry in entries
            if entry.line_height_expression is not None
        )
        return lines

    def _format_rule(self, element: str, entry: StepEntry) -> List[str]:
        lines = [f"{selector_for(element)} {{"]
        lines.append(f"  font-size: var({self.size_property(entry.step)});")
        if entry.line_height_expression is not None:
            lines.append(f"  line-height: var({self.line_height_property(entry.step)});")
        lines.append("}")
        return lines

    def _format_sass(self, entries: List[StepEntry]) -> List[str]:
        lines = [f"${self.prefix}-{entry.step}: {entry.size_expression};" for entry in entries]
        lines.extend(
            f"${self.prefix}-lh-{entry.step}: {entry.line_height_expression};"
            for entry in entries
            if entry.line_height_expression is not None
        )
        return lines

