"""
Config package for ws_views.

Responsible for:
- config models (GlobalConfig, ViewConfig, RuleConfig)
- loading view definitions from a config directory (load_global_config / load_views / build_controller)
"""

from .model import GlobalConfig, RuleConfig, ViewConfig
from .loader import build_controller, load_global_config, load_views

__all__ = ["GlobalConfig", "RuleConfig", "ViewConfig", "build_controller", "load_global_config", "load_views"]
