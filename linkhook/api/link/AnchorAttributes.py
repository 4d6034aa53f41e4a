"""AnchorAttributes model (UNO: single model)."""

from dataclasses import dataclass

from ._constants import ATTR_CLASS, ATTR_HREF, ATTR_REL, ATTR_TITLE


@dataclass(frozen=True)
class AnchorAttributes:
    """Final attribute set of a rendered anchor.

    ``title`` holds the already HTML-escaped title.
    """

    href: str
    rel: str = ""
    css_class: str = ""
    title: str = ""

    def to_dict(self) -> dict[str, str]:
        """Attribute mapping with empty values omitted; href is always present."""
        attrs = {
            ATTR_HREF: self.href,
            ATTR_REL: self.rel,
            ATTR_CLASS: self.css_class,
            ATTR_TITLE: self.title,
        }
        return {name: value for name, value in attrs.items() if value or name == ATTR_HREF}
