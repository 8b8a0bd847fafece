"""Type identity that compares by type and prints by name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class TypeKey:
    """A type identity: compared and hashed by ``id``, shown by ``name``."""

    id: object
    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeKey):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return self.name


def type_key(kind: type) -> TypeKey:
    """Return the :class:`TypeKey` of ``kind``."""
    return TypeKey(kind, f"{kind.__module__}.{kind.__qualname__}")