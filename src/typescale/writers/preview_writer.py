"""
HTML preview for typescale

A standalone page showing every assigned element at its scale size, with a
second column for the mobile scale when one is configured.
"""

import re
from html import escape
from typing import List, Tuple

from ..core.models import GeneratedScale, ScaleConfig
from .css_writer import CLASS_ELEMENTS, StylesheetWriter

TAG_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def sample_tag(element: str) -> Tuple[str, str]:
    """Tag and attribute text for one sample line

    Plain tag names render as that tag. Class and id selectors, the class-only
    preset names and compound selectors render as a div.
    """
    if element in CLASS_ELEMENTS:
        return "div", f' class="{escape(element, quote=True)}"'
    if element[:1] in ".#" and NAME_PATTERN.match(element[1:]):
        attribute = "class" if element[0] == "." else "id"
        return "div", f' {attribute}="{element[1:]}"'
    if TAG_PATTERN.match(element):
        return element, ""
    return "div", ""


class PreviewWriter:
    """Write an HTML preview page for a generated scale"""

    def __init__(self, config: ScaleConfig):
        self.config = config

    def write(self, scale: GeneratedScale) -> str:
        stylesheet = StylesheetWriter(self.config).write(scale)
        font = self.config.font_family
        title = f"Font Preview: {font}" if font else "Type Scale Preview"

        lines = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{escape(title)}</title>",
            "<style>",
            stylesheet.rstrip("\n"),
            "</style>",
            "</head>",
        ]

        body_style = f' style="font-family: {escape(font, quote=True)}"' if font else ""
        lines.append(f"<body{body_style}>")
        lines.append(f"<h2>{escape(title)}</h2>")

        lines.append('<section class="preview-desktop">')
        lines.append("<h3>Desktop</h3>")
        lines.extend(self._samples(scale, mobile=False))
        lines.append("</section>")

        if scale.mobile_entries:
            lines.append('<section class="preview-mobile">')
            lines.append("<h3>Mobile</h3>")
            lines.extend(self._samples(scale, mobile=True))
            lines.append("</section>")

        lines.append("</body>")
        lines.append("</html>")
        return "\n".join(lines) + "\n"

    def _samples(self, scale: GeneratedScale, mobile: bool) -> List[str]:
        text = escape(self.config.preview_text)
        lines = []
        for element, step in self.config.element_step_assignment.items():
            entry = scale.get_mobile(step) if mobile else scale.get(step)
            size = entry.size_expression if entry else "inherit"
            tag, attrs = sample_tag(element)
            style = escape(f"font-size: {size}", quote=True)
            lines.append(f'<{tag}{attrs} style="{style}">{escape(element)}: {text}</{tag}>')
        return lines
