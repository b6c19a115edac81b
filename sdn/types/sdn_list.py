from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional


class SdnList:
    """
    A parsed list: positional ``args`` plus named ``kwargs``.

    Both are fixed at construction. ``args`` is a tuple and ``kwargs`` a
    read-only view over a private dict, so a parsed tree can be shared freely.
    """
    __slots__ = ("args", "kwargs")

    def __init__(self, args: Iterable[Any] = (), kwargs: Optional[Mapping[str, Any]] = None):
        object.__setattr__(self, "args", tuple(args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(kwargs or {})))

    def __setattr__(self, key, value):
        raise AttributeError("SdnList is immutable")

    def __eq__(self, other) -> bool:
        return same_value(self, other)

    def __ne__(self, other) -> bool:
        return not same_value(self, other)

    def __hash__(self) -> int:
        parts = []
        stack: list = [self]
        while stack:
            value = stack.pop()
            if isinstance(value, SdnList):
                keys = sorted(value.kwargs)
                parts.append((SdnList, len(value.args), tuple(keys)))
                stack.extend(value.args)
                stack.extend(value.kwargs[k] for k in keys)
            else:
                parts.append(value)
        return hash(tuple(parts))

    def __reduce__(self):
        return (SdnList, (self.args, dict(self.kwargs)))

    def __repr__(self):
        return f"SdnList(args={self.args!r}, kwargs={dict(self.kwargs)!r})"

    def __str__(self):
        from sdn.printer import dumps
        return dumps(self)


def same_value(a: Any, b: Any) -> bool:
    """Variant-wise equality: ``1`` and ``1.0`` differ, nested lists compared structurally."""
    # explicit work list; nesting depth is bounded only by the input
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if type(x) is not type(y):
            return False
        if isinstance(x, SdnList):
            if len(x.args) != len(y.args) or x.kwargs.keys() != y.kwargs.keys():
                return False
            pending.extend(zip(x.args, y.args))
            pending.extend((v, y.kwargs[k]) for k, v in x.kwargs.items())
        elif x != y:
            return False
    return True
