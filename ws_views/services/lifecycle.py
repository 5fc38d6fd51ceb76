from __future__ import annotations

import logging
from typing import Any, List, Optional

from ws_views.core.exceptions import UnknownView
from ws_views.core.host import HostEnvironment
from ws_views.core.registry import ViewRegistry
from ws_views.core.resource import Resource
from ws_views.core.scoring import best_view, members
from ws_views.core.view import View

logger = logging.getLogger(__name__)


class ViewController:
    """
    Drives view registration and switching.

    Owns the registry for its lifetime; the scoring functions only read it. Switching is
    the only place (besides registration) where per-view state crosses into the host:
    the outgoing view's tracked variables and layout are saved, then the incoming view's
    are applied.
    """

    def __init__(self, registry: Optional[ViewRegistry] = None, host: Optional[HostEnvironment] = None):
        if registry is None:
            registry = ViewRegistry(host=host)
        elif host is not None:
            registry.host = host
        self.registry = registry

    @property
    def host(self) -> Optional[HostEnvironment]:
        return self.registry.host

    # ------------------------------------------------------------------
    # Registration (thin pass-through)
    # ------------------------------------------------------------------
    def register(self, view: Any) -> None:
        self.registry.register(view)

    def unregister(self, name: Any) -> Optional[View]:
        return self.registry.unregister(name)

    def current(self) -> Optional[View]:
        return self.registry.current()

    def reset(self) -> None:
        self.registry.reset()

    # ------------------------------------------------------------------
    # Switching
    # ------------------------------------------------------------------
    def _save(self, view: View) -> None:
        view.opaque_state = self.registry.capture_variables()
        if self.host is not None:
            view.layout_snapshot = self.host.capture_layout()

    def _load(self, view: View) -> None:
        self.registry.apply_variables(view.opaque_state)
        if self.host is not None and view.layout_snapshot is not None:
            self.host.restore_layout(view.layout_snapshot)

    def switch(self, name: str) -> View:
        """
        Make `name` the current view.

        :return: the now-current View
        :raises UnknownView: if `name` is not registered (history is left untouched)
        """
        target = self.registry.get(name)

        outgoing = self.registry.current()
        if outgoing is not None:
            self._save(outgoing)

        history = [name] + self.registry.history
        self.registry.history = list(dict.fromkeys(history))

        self._load(target)

        logger.info(
            "Switched view",
            extra={
                "view": name,
                "previous": outgoing.name if outgoing is not None else None,
            },
        )
        return target

    def switch_resource(self, resource: Any) -> Optional[View]:
        """
        Switch to the view that should own `resource`, if it isn't current already.

        :return: the current view afterwards (None if nothing was ever activated)
        """
        target = best_view(resource, self.registry)
        current = self.registry.current()

        if target is None:
            return current
        if current is not None and target.name == current.name:
            logger.debug("Resource already in current view", extra={"view": current.name})
            return current

        logger.debug(
            "Resource activation selects view",
            extra={"view": target.name, "resource": getattr(resource, "name", None)},
        )
        return self.switch(target.name)

    def switch_previous(self) -> View:
        """
        Switch back to the view active before the current one.

        :raises UnknownView: if there is no previous view
        """
        if len(self.registry.history) < 2:
            raise UnknownView("<previous>")
        return self.switch(self.registry.history[1])

    # ------------------------------------------------------------------
    # Membership against the host pool
    # ------------------------------------------------------------------
    def members(self, name: Optional[str] = None) -> List[Resource]:
        """
        Resources from the host's live pool owned by view `name` (default: the current view).

        :raises UnknownView: if `name` is given but not registered
        """
        view = self.registry.get(name) if name is not None else self.registry.current()
        if view is None or self.host is None:
            return []
        return members(view, self.host.enumerate_resources())


_default: Optional[ViewController] = None


def default_controller() -> ViewController:
    """Process-wide controller for hosts that want a single shared instance."""
    global _default
    if _default is None:
        _default = ViewController()
    return _default


def reset_default_controller() -> None:
    global _default
    _default = None
