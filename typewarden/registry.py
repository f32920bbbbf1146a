"""Read-only lookups against the live class registry.

Names are resolved without importing anything: a dotted path is followed
through modules already present in :data:`sys.modules` (or through
:mod:`builtins`), and anything else is searched for in the tree of loaded
subclasses of :class:`object`.
"""
from __future__ import annotations
import builtins
import inspect
import io
import mmap
import socket
import sys
from typing import Any, Iterator

_MISSING = object()


def class_identity(cls: type) -> str:
    """Return ``module.qualname`` for ``cls``, or just the qualname for builtins."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _follow(root: Any, attrs: list[str]) -> Any:
    # getattr_static never runs module __getattr__ hooks or descriptors
    target = root
    for attr in attrs:
        target = inspect.getattr_static(target, attr, _MISSING)
        if target is _MISSING:
            return _MISSING
    return target


def lookup_name(name: str) -> Any:
    """Resolve a dotted name to the object it refers to, or ``None``."""
    if not name:
        return None
    parts = name.split(".")
    if not all(parts):
        return None

    # longest module prefix wins: "os.path.join" -> sys.modules["os.path"].join
    for split in range(len(parts) - 1, 0, -1):
        module = sys.modules.get(".".join(parts[:split]))
        if module is not None:
            found = _follow(module, parts[split:])
            if found is not _MISSING:
                return found

    found = _follow(builtins, parts)
    return None if found is _MISSING else found


def names_routine(text: str) -> bool:
    """True when ``text`` names a function or method, e.g. ``"len"``."""
    return inspect.isroutine(lookup_name(text))


def _walk_classes() -> Iterator[type]:
    seen: set[int] = set()
    stack: list[type] = [object]
    while stack:
        cls = stack.pop()
        if id(cls) in seen:
            continue
        seen.add(id(cls))
        yield cls
        stack.extend(type.__subclasses__(cls))


def _search_loaded_classes(name: str) -> type | None:
    by_qualname: list[type] = []
    for cls in _walk_classes():
        if class_identity(cls) == name:
            return cls
        if cls.__qualname__ == name:
            by_qualname.append(cls)
    # a bare qualname only resolves when it is unambiguous
    if len(by_qualname) == 1:
        return by_qualname[0]
    return None


def resolve_class(spec: Any) -> type | None:
    """Return the class named by ``spec`` (a name or a class), or ``None``."""
    if isinstance(spec, type):
        return spec
    if not isinstance(spec, str) or not spec:
        return None
    found = lookup_name(spec)
    if isinstance(found, type):
        return found
    return _search_loaded_classes(spec)


def is_interface_type(cls: type) -> bool:
    """Protocols and abstract classes play the part of interfaces."""
    return bool(getattr(cls, "_is_protocol", False)) or inspect.isabstract(cls)


def is_open_resource(value: Any) -> bool:
    # detached wrappers and broken handles raise instead of reporting closed
    try:
        if isinstance(value, (io.IOBase, mmap.mmap)):
            return not value.closed
        if isinstance(value, socket.socket):
            return value.fileno() != -1
    except (ValueError, OSError):
        return False
    return False
