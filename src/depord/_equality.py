"""Key equality strategies used to deduplicate nodes."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyEquality[K](Protocol):
    """Equality and hashing over keys of type K.

    Two keys considered equal by ``equals`` must produce the same ``hash``.
    """

    def equals(self, a: K, b: K) -> bool: ...

    def hash(self, key: K) -> int: ...


class DefaultEquality:
    """Natural equality: ``==`` and ``hash()``."""

    def equals(self, a: object, b: object) -> bool:
        return a == b

    def hash(self, key: object) -> int:
        return hash(key)


class IdentityEquality:
    """Object identity. Allows unhashable nodes to be ordered."""

    def equals(self, a: object, b: object) -> bool:
        return a is b

    def hash(self, key: object) -> int:
        return id(key)


class CaseInsensitiveEquality:
    """Case-insensitive comparison of string keys."""

    def equals(self, a: str, b: str) -> bool:
        return a.casefold() == b.casefold()

    def hash(self, key: str) -> int:
        return hash(key.casefold())


@dataclass(frozen=True, slots=True, eq=False)
class _EquatedKey:
    """Wraps a key so that dict lookups go through a custom equality."""

    key: Any
    equality: KeyEquality[Any]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _EquatedKey):
            return NotImplemented
        return self.equality.equals(self.key, other.key)

    def __hash__(self) -> int:
        return self.equality.hash(self.key)

    def __repr__(self) -> str:
        return repr(self.key)


def equate(key: Any, equality: KeyEquality[Any] | None) -> Any:
    """Return the value used as the tracking key for ``key``.

    Without a custom equality the key itself is used.
    """
    if equality is None:
        return key
    return _EquatedKey(key, equality)
