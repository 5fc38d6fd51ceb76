from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Iterator, List, Optional

from .exceptions import UnknownView
from .host import HostEnvironment, TrackedVariable
from .view import View, is_view

logger = logging.getLogger(__name__)

# history_rank for views that are not in the history
NOT_IN_HISTORY = sys.maxsize


class ViewRegistry:
    """
    Registry of views plus the activation history.

    Purpose:
    - Maps view name -> View (names unique)
    - Keeps `history`, the view names most-recently-active first. history[0] is the current
      view; an empty history means no view has been activated yet
    - Holds the tracked ("view-local") variables whose values each view snapshots

    Design Notes:
    - Every name in `history` is present in `views`. unregister() removes from both
    - Re-registering an existing name replaces the previous View in place (same history index)
    - Query helpers never raise on bad input; only get() raises UnknownView
    """

    def __init__(self, host: Optional[HostEnvironment] = None):
        self.host = host
        self.views: Dict[str, View] = {}
        self.history: List[str] = []
        self.tracked: Dict[str, TrackedVariable] = {}

    # ------------------------------------------------------------------
    # Tracked variables
    # ------------------------------------------------------------------
    def mark_variable_local(self, variable: TrackedVariable) -> None:
        """Track `variable` for every view. Idempotent by variable name."""
        if not isinstance(variable, TrackedVariable):
            return
        if variable.name not in self.tracked:
            self.tracked[variable.name] = variable

    def capture_variables(self) -> Dict[str, Any]:
        return {name: var.capture() for name, var in self.tracked.items()}

    def apply_variables(self, values: Dict[str, Any]) -> None:
        """Write saved values back; variables with no saved value are left alone."""
        for name, var in self.tracked.items():
            if name in values:
                var.apply(values[name])

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, view: Any) -> None:
        """
        Add `view` to the registry and append it to the history.

        Re-registering a name replaces the View stored under it; the name keeps its place
        in the history, so which name is current never changes here.

        Captures the tracked variables' present values into view.opaque_state and a fresh
        layout snapshot taken from the host's blank state. No-op for anything that is not
        a valid View.
        """
        if not is_view(view):
            logger.debug("Ignoring register() of non-view", extra={"obj": repr(view)})
            return

        # an overwritten name keeps its history index and registration slot
        if view.name not in self.history:
            self.history.append(view.name)

        view.opaque_state = self.capture_variables()

        if self.host is not None:
            with self.host.neutral_context():
                view.layout_snapshot = self.host.capture_layout()
        else:
            view.layout_snapshot = None

        self.views[view.name] = view
        logger.info("View registered", extra={"view": view.name, "n_rules": len(view.rules)})

    def unregister(self, name: Any) -> Optional[View]:
        """
        Remove the view called `name` from both the registry and the history.

        :return: the removed View, or None if `name` is not a registered view name
        """
        if not isinstance(name, str) or name not in self.views:
            logger.debug("Ignoring unregister() of unknown view", extra={"view": repr(name)})
            return None

        self.history = [n for n in self.history if n != name]
        view = self.views.pop(name)
        logger.info("View unregistered", extra={"view": name})
        return view

    def reset(self) -> None:
        """Forget every view and the history. Tracked variables stay tracked."""
        self.views = {}
        self.history = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def current(self) -> Optional[View]:
        if not self.history:
            return None
        return self.views[self.history[0]]

    def history_rank(self, view: Any) -> int:
        """Index of the view in the history; NOT_IN_HISTORY if absent or not a View."""
        if not is_view(view):
            return NOT_IN_HISTORY
        try:
            return self.history.index(view.name)
        except ValueError:
            return NOT_IN_HISTORY

    def get(self, name: str) -> View:
        """
        :raises UnknownView: if no view called `name` is registered
        """
        try:
            return self.views[name]
        except (KeyError, TypeError):
            raise UnknownView(name) from None

    def names(self) -> List[str]:
        """Registered view names, in registration order."""
        return list(self.views)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self.views

    def __len__(self) -> int:
        return len(self.views)

    def __iter__(self) -> Iterator[View]:
        return iter(list(self.views.values()))
