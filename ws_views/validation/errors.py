from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ws_views.core.exceptions import ConfigError


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a view definition. `where` points at the offending field."""
    code: str
    message: str
    where: Optional[str] = None


class ValidationError(ConfigError):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))

    @property
    def codes(self) -> list[str]:
        return [i.code for i in self.issues]
