"""Jinja2 rendering for notification emails."""

from pathlib import Path
from typing import Any, Dict, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATE_DIR = Path(__file__).parent / "templates"

jinja_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_email(template_name: str, context: Dict[str, Any]) -> Tuple[str, str]:
    """Render ``<template_name>.txt`` and ``<template_name>.html``.

    Returns:
        (text_body, html_body)
    """
    text_body = jinja_env.get_template(f"{template_name}.txt").render(**context)
    html_body = jinja_env.get_template(f"{template_name}.html").render(**context)
    return text_body, html_body
