from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, MutableMapping, Optional, Sequence

from .resource import Resource


class HostEnvironment(ABC):
    """
    Abstract interface to the host application (editor, IDE, notebook...).

    The core only reaches the outside world through this: the live resource pool and
    the host's visual layout. Layout handles are opaque, the core stores and hands
    them back untouched.
    """

    @abstractmethod
    def enumerate_resources(self) -> List[Resource]:
        """The live resource pool, enumerated fresh on each call."""
        pass

    @abstractmethod
    def capture_layout(self) -> Any:
        pass

    @abstractmethod
    def restore_layout(self, handle: Any) -> None:
        pass

    @abstractmethod
    def show_blank(self) -> None:
        """Put the host into its neutral state (a single blank/scratch resource)."""
        pass

    @contextmanager
    def neutral_context(self) -> Iterator[None]:
        """
        Temporarily switch the host to the blank state, restoring the caller's layout on exit.
        Used when capturing a fresh view's layout so it doesn't inherit the current one.
        """
        saved = self.capture_layout()
        self.show_blank()
        try:
            yield
        finally:
            self.restore_layout(saved)


@dataclass(frozen=True)
class TrackedVariable:
    """
    A host value that is saved/restored per view ("view-local" variable).

    - name: key under which the value is stored in View.opaque_state
    - capture: returns the current value from the host
    - apply: writes a value back into the host
    """
    name: str
    capture: Callable[[], Any]
    apply: Callable[[Any], None]

    @classmethod
    def in_mapping(cls, mapping: MutableMapping[str, Any], key: str, default: Any = None) -> TrackedVariable:
        """Track one key of a dict-like namespace (e.g. a settings dict)."""

        def _capture():
            return mapping.get(key, default)

        def _apply(value):
            mapping[key] = value

        return cls(name=key, capture=_capture, apply=_apply)


class InMemoryHost(HostEnvironment):
    """
    Host implementation that keeps everything in memory.

    The "layout" is any value assigned to `layout`; the blank layout is `blank_layout`.
    Useful for embedding the core in scripts and for tests.
    """

    def __init__(self, resources: Optional[Sequence[Resource]] = None, blank_layout: Any = "blank"):
        self.resources: List[Resource] = list(resources or [])
        self.blank_layout = blank_layout
        self.layout: Any = None

    def enumerate_resources(self) -> List[Resource]:
        return list(self.resources)

    def capture_layout(self) -> Any:
        return self.layout

    def restore_layout(self, handle: Any) -> None:
        self.layout = handle

    def show_blank(self) -> None:
        self.layout = self.blank_layout

    def add(self, resource: Resource) -> Resource:
        self.resources.append(resource)
        return resource
