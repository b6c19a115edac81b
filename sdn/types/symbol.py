from __future__ import annotations
import sys


class _Name:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and self.name == other.name

    def __ne__(self, other) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __reduce__(self):
        return (type(self), (self.name,))

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class Symbol(_Name):
    __slots__ = ()

    def __str__(self):
        return self.name


class Keyword(_Name):
    """A ``:name`` token; ``name`` is stored without the leading colon.

    Never equal to a Symbol of the same name.
    """
    __slots__ = ()

    def __str__(self):
        return f":{self.name}"
