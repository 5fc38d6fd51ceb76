"""
Print which view owns each of the given files, and why.

    python scripts/explain_ownership.py path/to/a.py /usr/local/bin/tool

The config directory is read from WS_VIEWS_CONFIG_ROOT (default: ./config).
"""

import os
import sys
from pathlib import Path

import pandas as pd

from ws_views.analysis.ownership import best_assignments, ownership_frame
from ws_views.config.loader import build_controller, load_global_config
from ws_views.core.host import InMemoryHost
from ws_views.core.resource import Resource
from ws_views.logging_config import configure_logging

BASE_DIR = Path(__file__).parent.parent
CONFIG_ROOT = Path(os.getenv("WS_VIEWS_CONFIG_ROOT", BASE_DIR / "config"))


def resource_for_path(path: str) -> Resource:
    p = Path(path).expanduser().resolve()
    return Resource(name=p.name, category=p.suffix.lstrip(".") or None, location=str(p.parent))


def main(argv):
    configure_logging(config=load_global_config(CONFIG_ROOT))

    resources = [resource_for_path(a) for a in argv]
    host = InMemoryHost(resources)
    controller = build_controller(CONFIG_ROOT, host=host)

    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(ownership_frame(controller.registry, resources).to_string(index=False))
        print()
        print(best_assignments(controller.registry, resources).to_string())


if __name__ == "__main__":
    main(sys.argv[1:])
