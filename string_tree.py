from __future__ import annotations

"""
Nested translation tables.

A table is a mapping whose values are either a string (a leaf) or another
mapping (a branch). Nested entries are addressed with flat keys joined by
SEPARATOR, e.g. 'category\\category2\\foo'.
"""

from collections.abc import Mapping
from typing import Any, Union

SEPARATOR = "\\"

StringTree = Union[str, dict[str, "StringTree"]]


def parse_tree(obj: Any, prefix: str | None = None) -> dict[str, StringTree]:
    """Validate decoded JSON as a string table, returning a fresh copy."""
    if not isinstance(obj, dict):
        where = f"'{prefix}'" if prefix is not None else "strings"
        raise ValueError(f"{where}: expected an object, got {type(obj).__name__}")

    out: dict[str, StringTree] = {}
    for k, v in obj.items():
        path = _join(prefix, k)
        if isinstance(v, str):
            out[k] = v
        elif isinstance(v, dict):
            out[k] = parse_tree(v, path)
        else:
            raise ValueError(f"'{path}': expected a string or an object, got {type(v).__name__}")
    return out


def _join(prefix: str | None, key: str) -> str:
    return key if prefix is None else f"{prefix}{SEPARATOR}{key}"


def flatten(node: StringTree, own_key: str) -> dict[str, str]:
    """Flat-key projection of one node stored under own_key."""
    if isinstance(node, str):
        return {own_key: node}
    return flatten_all(node, own_key)


def flatten_all(mapping: Mapping[str, StringTree], root_key: str | None = None) -> dict[str, str]:
    out: dict[str, str] = {}
    for k, v in mapping.items():
        out.update(flatten(v, _join(root_key, k)))
    return out


def get(mapping: Mapping[str, StringTree], key: str) -> str | None:
    """Resolve a flat key to its leaf string, or None.

    A path that names a branch misses, and so does a path that runs into a
    leaf before all of its segments are used.
    """
    if not key:
        return None

    parts = key.split(SEPARATOR)
    cur: StringTree | None = mapping.get(parts[0])
    for part in parts[1:]:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(part)

    if isinstance(cur, str):
        return cur
    return None


def walk_shapes(
    mapping: Mapping[str, StringTree],
    prefix: str | None = None,
    out: dict[str, str] | None = None,
) -> dict[str, str]:
    """Map every flat key (leaves and branches) to 'leaf' or 'branch'."""
    if out is None:
        out = {}
    for k, v in mapping.items():
        path = _join(prefix, k)
        if isinstance(v, dict):
            out[path] = "branch"
            walk_shapes(v, path, out)
        else:
            out[path] = "leaf"
    return out
