"""Jinja2 environment for field markup."""

from jinja2 import Environment, PackageLoader, StrictUndefined
from markupsafe import Markup

templates = Environment(
    loader=PackageLoader("metabox", "templates"),
    autoescape=True,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, /, **context) -> Markup:
    """Render a template; the result is safe to embed in other templates."""
    return Markup(templates.get_template(template_name).render(**context))
