"""Resource store for one scope (page, section or site)."""

from collections.abc import Iterable, Iterator

from .Resource import Resource


def _key(path: str) -> str:
    key = path.strip()
    while key.startswith("./"):
        key = key[2:]
    return key.lstrip("/")


class ResourceStore:
    """Read-only lookup of resources by path.

    A leading "./" or "/" is not significant, so "img/a.png", "./img/a.png"
    and "/img/a.png" name the same resource.
    """

    def __init__(self, resources: Iterable[Resource] = ()):
        self._by_path: dict[str, Resource] = {}
        for resource in resources:
            key = _key(resource.path)
            if key in self._by_path:
                raise ValueError(f"Duplicate resource path: {resource.path}")
            self._by_path[key] = resource

    def get_resource_by_path(self, path: str) -> Resource | None:
        if not path:
            return None
        return self._by_path.get(_key(path))

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._by_path.values())

    def __len__(self) -> int:
        return len(self._by_path)
