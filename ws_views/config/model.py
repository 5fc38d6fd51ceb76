from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from ws_views.core.rules import Rule, category_rule, name_rule, never_rule, path_rule
from ws_views.core.view import View


@dataclass(frozen=True)
class RuleConfig:
    """
    One rule entry of a view file: {"kind": "name", "pattern": "*.py", "score": 1, "regex": false}
    """

    kind: str
    pattern: str
    score: int = 1
    regex: bool = False

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> RuleConfig:
        return cls(
            kind=raw.get("kind", ""),
            pattern=raw.get("pattern", ""),
            score=raw.get("score", 1),
            regex=raw.get("regex", False),
        )

    def build(self) -> Rule:
        if self.kind == "name":
            return name_rule(self.pattern, self.score, regex=self.regex)
        if self.kind == "path":
            return path_rule(self.pattern, self.score, regex=self.regex)
        if self.kind == "category":
            return category_rule(self.pattern, self.score)
        return never_rule(f"unknown rule kind {self.kind!r}")


@dataclass
class ViewConfig:
    """
    Parsed config entry for a single view.
    """

    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"view-{self.index}")

    @property
    def weight(self) -> int:
        return self.raw.get("weight", 0)

    @property
    def rules(self) -> List[RuleConfig]:
        return [RuleConfig.from_raw(r) for r in self.raw.get("rules") or []]

    def build(self) -> View:
        return View(name=self.name, rules=tuple(r.build() for r in self.rules), weight=self.weight)

    @classmethod
    def from_raw(
        cls, raw: Dict[str, Any], source_path: Path, index: int
    ) -> ViewConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class GlobalConfig:
    default_view: Optional[str]
    views: List[ViewConfig]
    log_format: Optional[str] = None
