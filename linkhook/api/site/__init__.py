"""Site module - in-memory page and resource stores."""

from .Document import Document
from .Resource import Resource
from .ResourceStore import ResourceStore
from .Site import Site

__all__ = ["Document", "Resource", "ResourceStore", "Site"]
