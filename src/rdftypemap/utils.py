"""
Common utility functions.

Helpers for naming Python classes and shortening datatype IRIs for display.
"""

from __future__ import annotations

import importlib
from typing import Any, Dict


def qualified_name(cls: type) -> str:
    """Return the dotted name of *cls*.

    Builtins are returned without the ``builtins.`` module prefix::

        >>> qualified_name(int)
        'int'
        >>> qualified_name(Decimal)
        'decimal.Decimal'
    """
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", repr(cls))
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


def import_object(dotted_path: str) -> Any:
    """
    Import an object from a dotted path.

    Args:
        dotted_path: Path such as ``numpy.int8`` or ``decimal.Decimal``.
            Names without a dot are looked up in :mod:`builtins`.

    Returns:
        The imported object

    Raises:
        ImportError: If the module or attribute does not exist
    """
    dotted_path = dotted_path.strip()
    if "." not in dotted_path:
        module_name, attr = "builtins", dotted_path
    else:
        module_name, attr = dotted_path.rsplit(".", 1)

    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ImportError(f"{module_name!r} has no attribute {attr!r}") from exc


def compact_uri(uri: str, prefixes: Dict[str, str]) -> str:
    """Compact a URI using the given prefix map.

    Returns ``prefix:localName`` if a match is found, otherwise the
    original URI.
    """
    for pfx, ns in prefixes.items():
        if uri.startswith(ns):
            return f"{pfx}:{uri[len(ns):]}"
    return uri


def expand_curie(curie: str, prefixes: Dict[str, str]) -> str:
    """Expand a CURIE (prefix:local) to a full URI."""
    if ":" not in curie or curie.startswith("http"):
        return curie
    pfx, local = curie.split(":", 1)
    ns = prefixes.get(pfx)
    return f"{ns}{local}" if ns else curie
