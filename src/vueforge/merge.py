"""
vueforge.merge - Object Merging and Dependency Sorting
======================================================

Helpers for combining JSON documents supplied by several fragments.

Merge Rules
-----------
``deep_merge(target, source)`` walks the keys of ``source``:

    both lists  -> concatenated (target's items, then source's)
    both dicts  -> merged recursively
    otherwise   -> source's value wins

Lists accumulate on purpose: two fragments that each add an ESLint
``extends`` entry end up with both entries.

Example
-------
>>> deep_merge({"a": [1], "b": {"x": 1}}, {"a": [2], "b": {"y": 2}, "c": 3})
{'a': [1, 2], 'b': {'x': 1, 'y': 2}, 'c': 3}
"""

from __future__ import annotations

from typing import Any


# Manifest fields whose keys are sorted after every merge
DEPENDENCY_FIELDS = ("dependencies", "devDependencies")


def deep_merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """
    Recursively merge ``source`` into ``target``.

    Parameters
    ----------
    target : dict
        Mapping to merge into. It is mutated in place.

    source : dict
        Mapping whose values are merged into ``target``.

    Returns
    -------
    dict
        ``target``, for chaining.
    """
    for key, new_value in source.items():
        old_value = target.get(key)
        if isinstance(old_value, list) and isinstance(new_value, list):
            target[key] = old_value + new_value
        elif isinstance(old_value, dict) and isinstance(new_value, dict):
            target[key] = deep_merge(old_value, new_value)
        else:
            target[key] = new_value
    return target


def sort_dependencies(dependencies: dict[str, str]) -> dict[str, str]:
    """
    Return ``dependencies`` with its keys in ascending lexical order.

    Sorting keeps generated manifests byte-stable no matter which order
    fragments were applied in.
    """
    return {name: dependencies[name] for name in sorted(dependencies)}


def sort_manifest_dependencies(pkg: dict[str, Any]) -> dict[str, Any]:
    """
    Sort the dependency fields of a package manifest.

    The manifest's own key order is left as it is; only the mappings under
    ``dependencies`` and ``devDependencies`` are reordered.
    """
    for field_name in DEPENDENCY_FIELDS:
        if isinstance(pkg.get(field_name), dict):
            pkg[field_name] = sort_dependencies(pkg[field_name])
    return pkg
