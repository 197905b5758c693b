"""HTML fragment renderer for proposal lists using Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

from jinja2 import Environment, FileSystemLoader

from ..models.openantrag import Proposal

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _background_style(color: Optional[str]) -> str:
    return f"background-color:{color}" if color else ""


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


def _create_env(templates_dir: Path | None = None) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["background_style"] = _background_style
    env.filters["blank_if_none"] = _blank_if_none
    return env


def render_proposals_html(
    display_name: str,
    proposals: Iterable[Proposal],
    color: Optional[str] = None,
    *,
    templates_dir: Path | None = None,
) -> str:
    """Render a parliament's proposals as an HTML fragment."""
    env = _create_env(templates_dir)
    template = env.get_template("proposals.html")
    return template.render(display_name=display_name, proposals=list(proposals), color=color)
