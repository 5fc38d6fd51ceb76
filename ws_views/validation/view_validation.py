from __future__ import annotations

import re
from typing import Any

from ws_views.validation.errors import ValidationIssue, ValidationError

RULE_KINDS = ("name", "path", "category")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_rule(i: int, rule: Any, issues: list[ValidationIssue]) -> None:
    where = f"rules[{i}]"
    if not isinstance(rule, dict):
        issues.append(ValidationIssue("RULE_TYPE", f"{where} must be an object.", where))
        return

    kind = rule.get("kind")
    if kind not in RULE_KINDS:
        issues.append(ValidationIssue("RULE_KIND", f"{where}.kind must be one of {list(RULE_KINDS)}, got {kind!r}.", where))

    pattern = rule.get("pattern")
    if not isinstance(pattern, str) or not pattern:
        issues.append(ValidationIssue("RULE_PATTERN", f"{where}.pattern must be a non-empty string.", where))

    if "score" in rule and not _is_int(rule["score"]):
        issues.append(ValidationIssue("RULE_SCORE", f"{where}.score must be an integer.", where))

    regex = rule.get("regex", False)
    if not isinstance(regex, bool):
        issues.append(ValidationIssue("RULE_REGEX", f"{where}.regex must be true or false.", where))
    elif regex and kind == "category":
        issues.append(ValidationIssue("RULE_REGEX", f"{where}: category rules match exactly, regex is not allowed.", where))
    elif regex and isinstance(pattern, str) and pattern:
        try:
            re.compile(pattern)
        except re.error as e:
            issues.append(ValidationIssue("RULE_REGEX_INVALID", f"{where}.pattern is not a valid regex: {e}", where))


def validate_view_dict(obj: Any) -> None:
    """
    Validate a raw view definition (as loaded from JSON) BEFORE building a View.

    Rule construction itself never fails (bad patterns silently become never-matching
    rules), so config mistakes are caught here where they can still be reported.

    :raises ValidationError: listing every issue found
    """
    issues: list[ValidationIssue] = []

    if not isinstance(obj, dict):
        raise ValidationError([ValidationIssue("VIEW_TYPE", "View definition must be a JSON object.")])

    name = obj.get("name")
    if not isinstance(name, str) or not name.strip():
        issues.append(ValidationIssue("VIEW_NAME", "name must be a non-empty string.", "name"))

    if "weight" in obj and not _is_int(obj["weight"]):
        issues.append(ValidationIssue("VIEW_WEIGHT", "weight must be an integer.", "weight"))

    rules = obj.get("rules", [])
    if rules is None:
        rules = []

    if not isinstance(rules, list):
        issues.append(ValidationIssue("VIEW_RULES_TYPE", "rules must be a list.", "rules"))
    else:
        for i, rule in enumerate(rules):
            _validate_rule(i, rule, issues)

    if issues:
        raise ValidationError(issues)
