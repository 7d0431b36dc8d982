"""Renderers: glyph sets and the text renderer."""

from dag_ascii.renderers.base import Renderer
from dag_ascii.renderers.charset import BranchChars, CharSet
from dag_ascii.renderers.text import TextRenderer, render

__all__ = [
    "BranchChars",
    "CharSet",
    "Renderer",
    "TextRenderer",
    "render",
]
