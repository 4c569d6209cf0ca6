"""Text rendering using Jinja2 templates."""

import os
from decimal import Decimal
from typing import Any

import jinja2

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")


def money(value: Decimal) -> str:
    """Format an amount in dollars with two decimals."""
    return f"{value:.2f}"


_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_ENV.filters["money"] = money


def render(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template with the given keyword arguments."""
    template = _ENV.get_template(template_name)
    return template.render(**kwargs)
