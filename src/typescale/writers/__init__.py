"""
Writer modules for typescale

Stylesheet and HTML preview output for generated scales.
"""

from .css_writer import StylesheetWriter
from .preview_writer import PreviewWriter

__all__ = ['StylesheetWriter', 'PreviewWriter']
