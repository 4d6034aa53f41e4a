"""Target kind enum."""

from enum import Enum


class TargetKind(str, Enum):
    """Kind of destination a link resolved to."""

    EXTERNAL = "external"
    PAGE = "page"
    PAGE_RESOURCE = "page_resource"
    SECTION_RESOURCE = "section_resource"
    GLOBAL_RESOURCE = "global_resource"
    SAME_PAGE_FRAGMENT = "same_page_fragment"
    UNRESOLVED = "unresolved"
