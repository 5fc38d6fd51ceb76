from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

from .rules import Rule, category_rule, coerce_score, name_rule, path_rule


@dataclass(eq=False)
class View:
    """
    A named workspace defined by weighted ownership rules.

    Fields:

    - name: unique key inside a ViewRegistry
    - rules: the rules whose scores are summed to decide ownership (order kept for diagnostics)
    - weight: static score used by the generic weight comparisons, independent of any resource
    - opaque_state: tracked-variable values saved for this view; never interpreted by the core
    - layout_snapshot: host layout handle saved for this view; never interpreted by the core

    Membership is never stored here: it is computed from the rules on every lookup.
    A View can exist without being registered.
    """
    name: str
    rules: Tuple[Rule, ...] = ()
    weight: int = 0
    opaque_state: Dict[str, Any] = field(default_factory=dict)
    layout_snapshot: Any = None

    def __post_init__(self):
        try:
            rules = tuple(self.rules or ())
        except TypeError:
            rules = ()
        self.rules = tuple(r for r in rules if isinstance(r, Rule))
        self.weight = coerce_score(self.weight)

    def __repr__(self) -> str:
        return f"View(name={self.name!r}, rules={len(self.rules)}, weight={self.weight})"

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    @classmethod
    def by_name(cls, name: str, pattern: Any, score: Any = 1, *, weight: Any = 0, regex: bool = False) -> View:
        """View owning every resource whose name matches `pattern`."""
        return cls(name=name, rules=(name_rule(pattern, score, regex=regex),), weight=weight)

    @classmethod
    def by_path(cls, name: str, pattern: Any, score: Any = 1, *, weight: Any = 0, regex: bool = False) -> View:
        """View owning every resource located under `pattern`."""
        return cls(name=name, rules=(path_rule(pattern, score, regex=regex),), weight=weight)

    @classmethod
    def by_category(cls, name: str, category: Any, score: Any = 1, *, weight: Any = 0) -> View:
        return cls(name=name, rules=(category_rule(category, score),), weight=weight)

    @classmethod
    def from_rules(cls, name: str, rules: Iterable[Rule], *, weight: Any = 0) -> View:
        return cls(name=name, rules=rules, weight=weight)


def is_view(obj: Any) -> bool:
    """True for a View with a usable (non-empty string) name."""
    return isinstance(obj, View) and isinstance(obj.name, str) and bool(obj.name)
