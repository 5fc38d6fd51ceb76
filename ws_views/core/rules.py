"""
Ownership rules: scored predicates over a Resource.

A rule is one of a closed set of variants (see `RuleKind`), each holding its own
validated configuration:

- NAME      glob / regex against `Resource.name`
- PATH      glob / regex against `Resource.location`
- CATEGORY  exact match against `Resource.category`
- NEVER     always false; substituted whenever the supplied pattern is unusable

Construction never raises. Bad scores become 0 and bad patterns become NEVER rules, so
rules built from user config can't interrupt automatic view selection.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from fnmatch import fnmatchcase
from typing import Any, Optional

from .resource import is_resource, resource_category, resource_location, resource_name


class RuleKind(Enum):
    NAME = auto()
    PATH = auto()
    CATEGORY = auto()
    NEVER = auto()


def coerce_score(value: Any) -> int:
    """
    Validate a score / weight. Anything that is not a plain int (bools included) is 0.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


@dataclass(frozen=True)
class Rule:
    """
    One scored predicate.

    :param kind: which variant this rule is
    :param pattern: glob string or compiled regex (NAME/PATH), category string (CATEGORY)
    :param score: contribution to the view's ownership score when the rule matches
    :param id: human-readable description, for diagnostics only
    """
    kind: RuleKind
    pattern: Any = None
    score: int = 0
    id: str = ""

    def __post_init__(self):
        object.__setattr__(self, "score", coerce_score(self.score))
        if not isinstance(self.kind, RuleKind):
            object.__setattr__(self, "kind", RuleKind.NEVER)

    def matches(self, resource: Any) -> bool:
        """Evaluate the predicate. Total: non-Resources and missing attributes are False."""
        if not is_resource(resource):
            return False

        if self.kind is RuleKind.NAME:
            return _match_pattern(self.pattern, resource_name(resource))
        if self.kind is RuleKind.PATH:
            return _match_pattern(self.pattern, resource_location(resource))
        if self.kind is RuleKind.CATEGORY:
            category = resource_category(resource)
            return category is not None and category == self.pattern
        return False


def _match_pattern(pattern: Any, value: Optional[str]) -> bool:
    if not isinstance(value, str):
        return False
    if isinstance(pattern, re.Pattern):
        return pattern.search(value) is not None
    if isinstance(pattern, str):
        return fnmatchcase(value, pattern)
    return False


def _compile_pattern(pattern: Any, regex: bool):
    """
    Return a usable pattern (glob str or compiled regex), or None if it is unusable.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str) or not pattern:
        return None
    if not regex:
        return pattern
    try:
        return re.compile(pattern)
    except re.error:
        return None


def _describe(pattern: Any) -> str:
    if isinstance(pattern, re.Pattern):
        return f"/{pattern.pattern}/"
    return repr(pattern)


def never_rule(description: str = "never") -> Rule:
    return Rule(kind=RuleKind.NEVER, pattern=None, score=0, id=description)


def name_rule(pattern: Any, score: Any = 1, *, regex: bool = False) -> Rule:
    """
    Match resources whose name fits `pattern`.

    `pattern` is a glob ("*.py") unless `regex=True` or it is already a compiled regex,
    in which case it is searched for anywhere in the name.
    """
    compiled = _compile_pattern(pattern, regex)
    if compiled is None:
        return never_rule(f"name matches {pattern!r} (invalid pattern)")
    return Rule(RuleKind.NAME, compiled, score, f"name matches {_describe(compiled)}")


def path_rule(pattern: Any, score: Any = 1, *, regex: bool = False) -> Rule:
    """Match resources whose location fits `pattern` (same pattern rules as `name_rule`)."""
    compiled = _compile_pattern(pattern, regex)
    if compiled is None:
        return never_rule(f"path matches {pattern!r} (invalid pattern)")
    return Rule(RuleKind.PATH, compiled, score, f"path matches {_describe(compiled)}")


def category_rule(category: Any, score: Any = 1) -> Rule:
    """Match resources whose category equals `category` exactly."""
    if not isinstance(category, str) or not category:
        return never_rule(f"category is {category!r} (invalid category)")
    return Rule(RuleKind.CATEGORY, category, score, f"category is {category!r}")
