"""
Top-level package for ws_views: rule-based assignment of host resources
(buffers, documents) to named workspace views.

Most code should import from submodules such as:
    ws_views.core       rules, views, scoring, registry
    ws_views.services   the view lifecycle controller
    ws_views.config     loading view definitions from a config directory
"""

__all__: list[str] = []
