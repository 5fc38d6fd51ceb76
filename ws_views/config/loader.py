from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ws_views.config.model import GlobalConfig, ViewConfig
from ws_views.core.exceptions import ConfigError
from ws_views.core.host import HostEnvironment
from ws_views.core.view import View
from ws_views.services.lifecycle import ViewController
from ws_views.validation.errors import ValidationError
from ws_views.validation.view_validation import validate_view_dict

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            views/
                python.json
                docs.json
                ...

    global.json keys:

    - default_view: view to switch to once everything is registered (optional)
    - log_format: "json" or "plain", for hosts that configure logging from config (optional)

    Each file in 'views/' is parsed into a ViewConfig, in sorted filename order. That order
    is the registration order, which is the last tie-break between equally scored views.

    :param root: Directory containing 'global.json' and optionally 'views/'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        raw_global = json.load(f)

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    views_dir = root / "views"
    views: List[ViewConfig] = []

    if views_dir.is_dir():
        for idx, config_file in enumerate(sorted(views_dir.glob("*.json"))):
            with config_file.open() as f:
                try:
                    raw = json.load(f)
                except json.JSONDecodeError as e:
                    logger.error(
                        "Skipping view file with invalid JSON",
                        extra={"source": str(config_file), "error": str(e)},
                    )
                    continue
            views.append(ViewConfig.from_raw(raw, source_path=config_file, index=idx))

    return GlobalConfig(
        default_view=raw_global.get("default_view"),
        views=views,
        log_format=raw_global.get("log_format"),
    )


def load_views(root: Path) -> Tuple[GlobalConfig, List[View]]:
    """
    Load the global configuration and build every valid View.

    Invalid view files are logged and skipped.

    :raises ConfigError: if no valid view could be built.
    """
    global_config = load_global_config(root)

    views: List[View] = []
    failed = 0

    for view_cfg in global_config.views:
        try:
            validate_view_dict(view_cfg.raw)
        except ValidationError as e:
            failed += 1
            logger.error(
                "Skipping view due to config error",
                extra={
                    "source": str(view_cfg.source_path),
                    "issues": e.codes,
                    "error": str(e),
                },
            )
            continue

        views.append(view_cfg.build())

    logger.info(
        "Views loaded from config root",
        extra={
            "config_root": str(root),
            "n_views": len(views),
            "n_failed": failed,
            "view_names": [v.name for v in views],
        },
    )

    if not views:
        raise ConfigError(f"No valid views could be loaded from config root: {root}")

    return global_config, views


def build_controller(root: Path, host: Optional[HostEnvironment] = None) -> ViewController:
    """
    Main entrypoint for hosts: load the config directory, register every view and
    activate `default_view` when it names one of them.
    """
    global_config, views = load_views(root)

    controller = ViewController(host=host)
    for view in views:
        controller.register(view)

    default = global_config.default_view
    if default is not None:
        if default in controller.registry:
            controller.switch(default)
        else:
            logger.warning("default_view is not a loaded view", extra={"view": default})

    return controller
