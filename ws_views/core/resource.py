from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Resource:
    """
    One item from the host's live pool (an open buffer, document, file...).

    Fields:

    - name: display name, e.g. "foo.py"
    - category: host-defined kind/tag, e.g. "python-mode" or "terminal"
    - location: file path or directory the resource is associated with

    Hosts adapt their native objects into Resources; the core never holds on to them
    beyond a single lookup.
    """
    name: str
    category: Optional[str] = None
    location: Optional[str] = None


def is_resource(obj: Any) -> bool:
    return isinstance(obj, Resource)


def resource_name(resource: Any) -> Optional[str]:
    """Name of the resource, or None if `resource` is not a Resource."""
    return resource.name if is_resource(resource) else None


def resource_category(resource: Any) -> Optional[str]:
    return resource.category if is_resource(resource) else None


def resource_location(resource: Any) -> Optional[str]:
    return resource.location if is_resource(resource) else None
