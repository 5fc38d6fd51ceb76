import json
import logging
from pathlib import Path

import pytest

from ws_views.config.loader import build_controller, load_global_config, load_views
from ws_views.config.model import RuleConfig, ViewConfig
from ws_views.core.exceptions import ConfigError
from ws_views.core.host import InMemoryHost
from ws_views.core.resource import Resource
from ws_views.core.rules import RuleKind


def _write_config(root: Path, global_json: dict, views: dict) -> Path:
    """
    root/
      global.json
      views/
        <filename>.json
    """
    views_dir = root / "views"
    views_dir.mkdir(parents=True)
    (root / "global.json").write_text(json.dumps(global_json))
    for filename, entry in views.items():
        payload = entry if isinstance(entry, str) else json.dumps(entry)
        (views_dir / filename).write_text(payload)
    return root


def _python_view() -> dict:
    return {
        "name": "python",
        "weight": 3,
        "rules": [
            {"kind": "name", "pattern": "*.py", "score": 1},
            {"kind": "path", "pattern": "^/usr/", "regex": True, "score": 2},
        ],
    }


def test_load_global_config_reads_views_in_filename_order(tmp_path):
    root = _write_config(
        tmp_path / "config",
        {"default_view": "python", "log_format": "plain"},
        {
            "20_docs.json": {"name": "docs", "rules": [{"kind": "name", "pattern": "*.md"}]},
            "10_python.json": _python_view(),
        },
    )

    global_config = load_global_config(root)

    assert global_config.default_view == "python"
    assert global_config.log_format == "plain"
    assert [v.name for v in global_config.views] == ["python", "docs"]
    assert global_config.views[0].source_path == root / "views" / "10_python.json"


def test_load_global_config_missing_global_json(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


def test_load_global_config_rejects_non_object(tmp_path):
    (tmp_path / "global.json").write_text("[]")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_load_global_config_without_views_dir(tmp_path):
    (tmp_path / "global.json").write_text("{}")
    global_config = load_global_config(tmp_path)
    assert global_config.views == []
    assert global_config.default_view is None


def test_load_views_builds_views(tmp_path):
    root = _write_config(tmp_path / "config", {}, {"python.json": _python_view()})

    _, views = load_views(root)

    assert len(views) == 1
    view = views[0]
    assert view.name == "python"
    assert view.weight == 3
    assert [r.kind for r in view.rules] == [RuleKind.NAME, RuleKind.PATH]
    assert [r.score for r in view.rules] == [1, 2]


def test_load_views_skips_invalid_entries(tmp_path, caplog):
    root = _write_config(
        tmp_path / "config",
        {},
        {
            "a_good.json": _python_view(),
            "b_bad_kind.json": {"name": "bad", "rules": [{"kind": "mode", "pattern": "x"}]},
            "c_broken.json": "{not json",
        },
    )

    with caplog.at_level(logging.ERROR, logger="ws_views.config.loader"):
        _, views = load_views(root)

    assert [v.name for v in views] == ["python"]
    messages = [r.getMessage() for r in caplog.records]
    assert "Skipping view due to config error" in messages
    assert "Skipping view file with invalid JSON" in messages


def test_load_views_with_nothing_valid_raises(tmp_path):
    root = _write_config(tmp_path / "config", {}, {"bad.json": {"rules": []}})
    with pytest.raises(ConfigError, match="No valid views"):
        load_views(root)


def test_build_controller_registers_and_switches_to_default(tmp_path):
    root = _write_config(
        tmp_path / "config",
        {"default_view": "docs"},
        {
            "10_python.json": _python_view(),
            "20_docs.json": {"name": "docs", "rules": [{"kind": "name", "pattern": "*.md"}]},
        },
    )
    host = InMemoryHost([Resource("a.py"), Resource("README.md")])

    controller = build_controller(root, host=host)

    assert controller.registry.names() == ["python", "docs"]
    assert controller.current().name == "docs"
    assert controller.registry.history == ["docs", "python"]
    assert [r.name for r in controller.members()] == ["README.md"]


def test_build_controller_ignores_unknown_default(tmp_path):
    root = _write_config(tmp_path / "config", {"default_view": "ghost"}, {"python.json": _python_view()})
    controller = build_controller(root)
    assert controller.current().name == "python"


def test_rule_config_defaults_and_build():
    cfg = RuleConfig.from_raw({"kind": "category", "pattern": "terminal"})
    assert cfg.score == 1
    assert cfg.regex is False
    rule = cfg.build()
    assert rule.kind is RuleKind.CATEGORY
    assert rule.matches(Resource("shell", category="terminal"))


def test_view_config_name_defaults_to_index():
    cfg = ViewConfig.from_raw({"rules": None}, source_path=Path("x.json"), index=4)
    assert cfg.name == "view-4"
    assert cfg.rules == []
    assert cfg.build().rules == ()


def test_rule_config_unknown_kind_builds_never_rule():
    rule = RuleConfig(kind="mode", pattern="terminal", score=5).build()
    assert rule.kind is RuleKind.NEVER
    assert rule.score == 0
    assert not rule.matches(Resource("shell", category="terminal"))
    assert rule.id == "unknown rule kind 'mode'"
