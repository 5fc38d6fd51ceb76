"""
Ownership scoring.

A view's score for a resource is the sum of the scores of its rules that match the
resource. The view *owns* the resource when that sum is positive. Ownership is not
exclusive, any number of views can own the same resource; `best_view` picks one:

1. highest score wins
2. on equal scores, the view activated most recently wins (lowest history index)
3. views never activated rank last; remaining ties go to registration order

If nothing owns the resource, the current view is kept.

Everything here is read-only and total: malformed arguments give 0 / False / [] rather
than raising, except the weight comparisons which are only reached from explicit calls.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from .exceptions import InvalidArgument
from .registry import ViewRegistry
from .resource import Resource, is_resource
from .rules import Rule
from .view import View, is_view


def score(view: Any, resource: Any) -> int:
    if not is_view(view) or not is_resource(resource):
        return 0
    return sum(rule.score for rule in view.rules if rule.matches(resource))


def owns(view: Any, resource: Any) -> bool:
    return score(view, resource) > 0


def fired_rules(view: Any, resource: Any) -> List[Rule]:
    """The rules of `view` matching `resource`, in rule order."""
    if not is_view(view) or not is_resource(resource):
        return []
    return [rule for rule in view.rules if rule.matches(resource)]


def members(view: Any, resource_pool: Iterable[Any]) -> List[Resource]:
    """Resources of `resource_pool` owned by `view`, in pool order."""
    try:
        pool = list(resource_pool)
    except TypeError:
        return []
    return [r for r in pool if owns(view, r)]


def rank_views(resource: Any, registry: ViewRegistry) -> List[Tuple[View, int]]:
    """
    Every registered view owning `resource`, paired with its score, best first.
    """
    if not is_resource(resource) or not isinstance(registry, ViewRegistry):
        return []

    registration_order = {name: i for i, name in enumerate(registry.names())}
    scored = [(view, score(view, resource)) for view in registry]
    owners = [pair for pair in scored if pair[1] > 0]
    owners.sort(
        key=lambda pair: (
            -pair[1],
            registry.history_rank(pair[0]),
            registration_order[pair[0].name],
        )
    )
    return owners


def best_view(resource: Any, registry: ViewRegistry) -> Optional[View]:
    """
    The view `resource` should be shown in.

    Falls back to the current view when no view owns the resource, and returns None
    when there is no current view either.
    """
    ranked = rank_views(resource, registry)
    if ranked:
        return ranked[0][0]
    if isinstance(registry, ViewRegistry):
        return registry.current()
    return None


# ----------------------------------------------------------------------
# Static weight comparisons (for generic sorting utilities)
# ----------------------------------------------------------------------
def _require_views(*views: Any) -> None:
    for v in views:
        if not isinstance(v, View):
            raise InvalidArgument(f"Expected a View, got {type(v).__name__}")


def score_lt(v1: Any, v2: Any) -> bool:
    """
    :raises InvalidArgument: if either operand is not a View
    """
    _require_views(v1, v2)
    return v1.weight < v2.weight


def score_gt(v1: Any, v2: Any) -> bool:
    """
    :raises InvalidArgument: if either operand is not a View
    """
    _require_views(v1, v2)
    return v1.weight > v2.weight


def sort_by_weight(views: Iterable[View], *, descending: bool = True) -> List[View]:
    """Stable sort of views by static weight."""
    views = list(views)
    _require_views(*views)
    return sorted(views, key=lambda v: v.weight, reverse=descending)
