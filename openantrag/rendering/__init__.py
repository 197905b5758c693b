"""Rendering of OpenAntrag data for display."""

from .html import render_proposals_html

__all__ = ["render_proposals_html"]
