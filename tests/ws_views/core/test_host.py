from __future__ import annotations

import pytest

from ws_views.core.host import InMemoryHost, TrackedVariable
from ws_views.core.resource import (
    Resource,
    resource_category,
    resource_location,
    resource_name,
)


def test_enumerate_resources_returns_a_fresh_list():
    host = InMemoryHost([Resource("a.py")])
    pool = host.enumerate_resources()
    pool.append(Resource("b.py"))
    assert [r.name for r in host.enumerate_resources()] == ["a.py"]


def test_neutral_context_shows_blank_then_restores():
    host = InMemoryHost(blank_layout="scratch")
    host.layout = "two-windows"

    with host.neutral_context():
        assert host.layout == "scratch"

    assert host.layout == "two-windows"


def test_neutral_context_restores_on_error():
    host = InMemoryHost()
    host.layout = "two-windows"

    with pytest.raises(RuntimeError):
        with host.neutral_context():
            raise RuntimeError("boom")

    assert host.layout == "two-windows"


def test_tracked_variable_in_mapping():
    settings = {"indent": 4}
    var = TrackedVariable.in_mapping(settings, "indent")
    missing = TrackedVariable.in_mapping(settings, "theme", default="light")

    assert var.name == "indent"
    assert var.capture() == 4
    assert missing.capture() == "light"

    var.apply(2)
    missing.apply("dark")
    assert settings == {"indent": 2, "theme": "dark"}


def test_resource_accessors():
    r = Resource(name="foo.py", category="python-mode", location="/usr/local")
    assert resource_name(r) == "foo.py"
    assert resource_category(r) == "python-mode"
    assert resource_location(r) == "/usr/local"


def test_resource_accessors_on_non_resources():
    assert resource_name("foo.py") is None
    assert resource_category(None) is None
    assert resource_location({"location": "/tmp"}) is None
