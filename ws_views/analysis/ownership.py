from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from ws_views.core.registry import ViewRegistry
from ws_views.core.resource import Resource, is_resource
from ws_views.core.scoring import best_view, fired_rules, score

OWNERSHIP_COLUMNS = [
    "resource",
    "location",
    "category",
    "view",
    "score",
    "owns",
    "fired_rules",
    "best",
]


def _resources(resources: Iterable[Resource]) -> List[Resource]:
    return [r for r in resources if is_resource(r)]


def ownership_frame(registry: ViewRegistry, resources: Iterable[Resource]) -> pd.DataFrame:
    """
    Explain view ownership for a pool of resources.

    One row per (resource, registered view) pair, in pool order then registration order:

    - score / owns: the view's summed rule score and whether it is positive
    - fired_rules: ids of the matching rules, comma separated
    - best: True on the row of the view `best_view` picks for the resource

    Non-Resource entries in the pool are ignored.
    """
    rows = []
    for resource in _resources(resources):
        best = best_view(resource, registry)
        for view in registry:
            s = score(view, resource)
            rows.append(
                {
                    "resource": resource.name,
                    "location": resource.location,
                    "category": resource.category,
                    "view": view.name,
                    "score": s,
                    "owns": s > 0,
                    "fired_rules": ", ".join(rule.id for rule in fired_rules(view, resource)),
                    "best": best is not None and best.name == view.name,
                }
            )

    df = pd.DataFrame(rows, columns=OWNERSHIP_COLUMNS)
    if df.empty:
        return df
    return df.astype({"score": "int64", "owns": "bool", "best": "bool"})


def best_assignments(registry: ViewRegistry, resources: Iterable[Resource]) -> pd.Series:
    """
    Map each resource name to the name of its best view (None when there is none).
    """
    pool = _resources(resources)
    names = []
    for resource in pool:
        view = best_view(resource, registry)
        names.append(view.name if view is not None else None)
    return pd.Series(names, index=[r.name for r in pool], name="view", dtype="object")


def ownership_summary(registry: ViewRegistry, resources: Iterable[Resource]) -> pd.DataFrame:
    """
    Per-view counts: how many resources each view owns and how many it is best for.
    """
    df = ownership_frame(registry, resources)
    views = registry.names()
    if df.empty:
        return pd.DataFrame({"owned": 0, "best_for": 0}, index=pd.Index(views, name="view"), dtype="int64")

    summary = df.groupby("view").agg(owned=("owns", "sum"), best_for=("best", "sum"))
    summary = summary.reindex(views, fill_value=0).astype("int64")
    summary.index.name = "view"
    return summary
