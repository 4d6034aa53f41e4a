"""Anchor element rendering (UNO: single function)."""

from jinja2 import BaseLoader, Environment, StrictUndefined
from markupsafe import Markup

from ._constants import ATTR_TITLE
from .AnchorAttributes import AnchorAttributes

_ENV = Environment(loader=BaseLoader(), autoescape=True, undefined=StrictUndefined)
_ANCHOR = _ENV.from_string('<a{% for name, value in attrs.items() %} {{ name }}="{{ value }}"{% endfor %}>{{ text }}</a>')


def render_anchor(attributes: AnchorAttributes, text: str) -> str:
    """Render an anchor element from resolved attributes.

    The title attribute is already escaped and is emitted as is.
    """
    attrs = {
        name: Markup(value) if name == ATTR_TITLE else value
        for name, value in attributes.to_dict().items()
    }
    return _ANCHOR.render(attrs=attrs, text=text)
