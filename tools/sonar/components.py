"""tools/sonar/components.py

Index of the report's ``components`` array.

Sonar lists every analysed file as a component. Files analysed as part of a
multi-module build carry a ``moduleKey`` naming their module component, and
their ``path`` is relative to that module. Project / module aggregation
entries without a ``path`` have no file identity and are left out.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from .types import Component


def build_component_index(records: Iterable[Mapping[str, Any]]) -> Dict[str, Component]:
    """Map component key -> Component for every record that has a path.

    ``moduleKey`` references are not checked here; an unknown module key only
    fails when an issue needs it.
    """
    index: Dict[str, Component] = {}
    for record in records:
        component = Component.from_dict(record)
        if component is not None:
            index[component.key] = component
    return index
