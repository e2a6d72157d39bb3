"""Output module for rendering Dock preferences."""

from .render import render_human, render_json

__all__ = ["render_human", "render_json"]
