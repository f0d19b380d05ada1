"""Kind StrEnum, runtime kind detection, and the named-class registry.

``Kind`` names the runtime kinds the validator understands.  ``kind_of``
maps a Python value to its kind, and ``resolve_class`` resolves a string
naming an existing class (a builtin such as ``"dict"`` or a dotted path
such as ``"collections.OrderedDict"``) back to the class object.

Successful class resolutions are memoised in an LRU cache; failed lookups
are not cached, so a class defined after a miss is still found later.
"""

from __future__ import annotations

import builtins
import importlib
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

from cachetools import LRUCache

__all__ = ["Kind", "kind_of", "resolve_class"]


class Kind(StrEnum):
    """Runtime kinds recognised by the type validator.

    StrEnum values are the lowercased member names:
    - MAPPING        -> "mapping"        : any collections.abc.Mapping
    - ARRAY          -> "array"          : list or tuple
    - BOOL           -> "bool"
    - FLOAT          -> "float"
    - INTEGER        -> "integer"
    - NULL           -> "null"           : None
    - OBJECT         -> "object"         : anything else
    - STRING         -> "string"
    - EXISTING_CLASS -> "existing_class" : a string naming a resolvable class
    """

    MAPPING = auto()
    ARRAY = auto()
    BOOL = auto()
    FLOAT = auto()
    INTEGER = auto()
    NULL = auto()
    OBJECT = auto()
    STRING = auto()
    EXISTING_CLASS = auto()


def kind_of(value: Any) -> Kind:
    """Return the runtime kind of ``value``.

    ``Kind.EXISTING_CLASS`` is never returned: it is an artificial kind that
    only the validator understands.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if value is None:
        return Kind.NULL
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    return Kind.OBJECT


_class_cache: LRUCache[str, type] = LRUCache(maxsize=256)


def resolve_class(name: Any) -> type | None:
    """Resolve ``name`` to an existing class, or return None.

    Args:
        name: A builtin class name (``"int"``) or a dotted path of the form
            ``"package.module.Outer.Inner"``.  Non-strings resolve to None.

    Returns:
        The class object, or None when ``name`` does not name a class.
    """
    if not isinstance(name, str):
        return None
    cached = _class_cache.get(name)
    if cached is not None:
        return cached

    resolved = _lookup(name)
    if resolved is not None:
        _class_cache[name] = resolved
    return resolved


def _lookup(name: str) -> type | None:
    parts = name.split(".")
    if not all(part.isidentifier() for part in parts):
        return None

    if len(parts) == 1:
        candidate = getattr(builtins, name, None)
        return candidate if isinstance(candidate, type) else None

    # Longest importable module prefix wins; the rest is attribute access.
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        for attr in parts[split:]:
            target = getattr(target, attr, None)
            if target is None:
                return None
        return target if isinstance(target, type) else None
    return None
