"""Constants for link resolution (private)."""

HOOK_NAME = "render-link"

# Attribute names and values emitted on anchors
ATTR_HREF = "href"
ATTR_REL = "rel"
ATTR_CLASS = "class"
ATTR_TITLE = "title"
REL_EXTERNAL = "external"
CLASS_BROKEN = "broken"

# Bundle classification that hides section resources from a page
BUNDLE_LEAF = "leaf"

# Error levels
LEVEL_IGNORE = "ignore"
LEVEL_WARNING = "warning"
LEVEL_ERROR = "error"
