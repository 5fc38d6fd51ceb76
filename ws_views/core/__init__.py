"""
Core domain layer: resources, ownership rules, views, scoring,
and the view registry
"""

from .exceptions import ConfigError, InvalidArgument, UnknownView, WsViewsError
from .host import HostEnvironment, InMemoryHost, TrackedVariable
from .registry import ViewRegistry
from .resource import Resource
from .rules import Rule, RuleKind, category_rule, name_rule, path_rule
from .scoring import best_view, members, owns, rank_views, score, score_gt, score_lt
from .view import View

__all__ = [
    "Resource",
    "Rule",
    "RuleKind",
    "name_rule",
    "path_rule",
    "category_rule",
    "View",
    "ViewRegistry",
    "HostEnvironment",
    "InMemoryHost",
    "TrackedVariable",
    "score",
    "owns",
    "members",
    "rank_views",
    "best_view",
    "score_lt",
    "score_gt",
    "WsViewsError",
    "UnknownView",
    "InvalidArgument",
    "ConfigError",
]
