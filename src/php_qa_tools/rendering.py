"""Template rendering for generated configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def bool_filter(value: Any) -> str:
    """Render a setting as the literal text ``true`` or ``false``."""

    return "true" if value else "false"


def create_environment(template_dir: Path | None = None) -> Environment:
    loader = FileSystemLoader(str(template_dir or TEMPLATES_DIR))
    env = Environment(
        loader=loader,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["bool"] = bool_filter
    return env


def render_template(env: Environment, name: str, settings: Mapping[str, Any]) -> str:
    template = env.get_template(name)
    return template.render(dict(settings))


__all__ = ["TEMPLATES_DIR", "bool_filter", "create_environment", "render_template"]
