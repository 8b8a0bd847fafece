"""Ordered rule registry with dependency resolution."""

from __future__ import annotations

import enum
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass
from typing import Any


class CyclicDependencyError(ValueError):
    """Raised when rule constraints form a cycle."""


class MissingDependencyError(ValueError):
    """Raised when a rule requires a mark that no rule provides."""


class _Priority(enum.Enum):
    NORMAL = "normal"
    BEFORE_ALL = "before_all"
    AFTER_ALL = "after_all"


class _ConstraintKind(enum.Enum):
    BEFORE = "before"
    AFTER = "after"
    REQUIRE = "require"


@dataclass(frozen=True)
class _Constraint:
    kind: _ConstraintKind
    mark: Hashable


def _format_mark(mark: Any) -> str:
    if isinstance(mark, str):
        escaped = mark.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return repr(mark)


class RuleItem:
    """A rule added to a :class:`Ruler`; its methods adjust where it is placed."""

    __slots__ = ("marks", "value", "_priority", "_constraints", "_on_change")

    def __init__(self, mark: Hashable, value: Any, on_change: Callable[[], None]) -> None:
        self.marks: list[Hashable] = [mark]
        self.value = value
        self._priority = _Priority.NORMAL
        self._constraints: list[_Constraint] = []
        self._on_change = on_change

    def _constrain(self, kind: _ConstraintKind, mark: Hashable) -> RuleItem:
        self._constraints.append(_Constraint(kind, mark))
        self._on_change()
        return self

    def before(self, mark: Hashable) -> RuleItem:
        """Place this rule before any rule identified by ``mark`` (if one exists)."""
        return self._constrain(_ConstraintKind.BEFORE, mark)

    def after(self, mark: Hashable) -> RuleItem:
        """Place this rule after any rule identified by ``mark`` (if one exists)."""
        return self._constrain(_ConstraintKind.AFTER, mark)

    def before_all(self) -> RuleItem:
        """Place this rule as early as its dependencies allow."""
        self._priority = _Priority.BEFORE_ALL
        self._on_change()
        return self

    def after_all(self) -> RuleItem:
        """Place this rule as late as its dependencies allow."""
        self._priority = _Priority.AFTER_ALL
        self._on_change()
        return self

    def alias(self, mark: Hashable) -> RuleItem:
        """Add another identifier to this rule."""
        self.marks.append(mark)
        self._on_change()
        return self

    def require(self, mark: Hashable) -> RuleItem:
        """Demand that a rule identified by ``mark`` exists."""
        return self._constrain(_ConstraintKind.REQUIRE, mark)

    def __repr__(self) -> str:
        constraints = ", ".join(
            f"{c.kind.value}({_format_mark(c.mark)})" for c in self._constraints
        )
        marks = ", ".join(_format_mark(m) for m in self.marks)
        return (
            f"RuleItem(marks=[{marks}], priority={self._priority.value}, "
            f"constraints=[{constraints}])"
        )


class Ruler:
    """A collection of values identified by marks, iterated in dependency order."""

    def __init__(self) -> None:
        self._items: list[RuleItem] = []
        self._compiled: tuple[list[int], list[Any]] | None = None

    def _invalidate(self) -> None:
        self._compiled = None

    def add(self, mark: Hashable, value: Any) -> RuleItem:
        """Add a rule identified by ``mark`` carrying ``value``."""
        item = RuleItem(mark, value, self._invalidate)
        self._items.append(item)
        self._invalidate()
        return item

    def remove(self, mark: Hashable) -> None:
        """Remove every rule identified by ``mark``."""
        self._items = [item for item in self._items if mark not in item.marks]
        self._invalidate()

    def contains(self, mark: Hashable) -> bool:
        """Tell whether any rule is identified by ``mark``."""
        return any(mark in item.marks for item in self._items)

    def __contains__(self, mark: Hashable) -> bool:
        return self.contains(mark)

    def compile(self) -> list[Any]:
        """Resolve the ordering and return the values in order."""
        return list(self._ensure_compiled()[1])

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ensure_compiled()[1])

    def __repr__(self) -> str:
        indices, _ = self._ensure_compiled()
        compiled = ", ".join(
            f"({idx}, {_format_mark(self._items[idx].marks[0])})" for idx in indices
        )
        return f"Ruler(deps={self._items!r}, compiled=[{compiled}])"

    def _ensure_compiled(self) -> tuple[list[int], list[Any]]:
        if self._compiled is None:
            self._compiled = self._resolve()
        return self._compiled

    def _resolve(self) -> tuple[list[int], list[Any]]:
        items = self._items
        by_mark: dict[Hashable, list[int]] = {}
        graph: list[set[int]] = [set() for _ in items]
        order: list[int] = []
        before_all_count = 0
        after_all_count = 0

        for idx, item in enumerate(items):
            if item._priority is _Priority.NORMAL:
                order.insert(len(order) - after_all_count, idx)
            elif item._priority is _Priority.BEFORE_ALL:
                order.insert(before_all_count, idx)
                before_all_count += 1
            else:
                order.append(idx)
                after_all_count += 1
            for mark in item.marks:
                by_mark.setdefault(mark, []).append(idx)

        # B.after(A) becomes A.before(B): graph[i] holds what must precede i
        for idx in order:
            item = items[idx]
            for constraint in item._constraints:
                if constraint.kind is _ConstraintKind.BEFORE:
                    for other in by_mark.setdefault(constraint.mark, []):
                        graph[other].add(idx)
                elif constraint.kind is _ConstraintKind.AFTER:
                    graph[idx].update(by_mark.setdefault(constraint.mark, []))
                elif constraint.mark not in by_mark:
                    raise MissingDependencyError(
                        f"missing dependency: {_format_mark(item.marks[0])} "
                        f"requires {_format_mark(constraint.mark)}"
                    )

        inserted = [False] * len(items)
        result_idx: list[int] = []
        result: list[Any] = []

        while len(result_idx) < len(items):
            ready = next(
                (idx for idx in order if not inserted[idx] and not graph[idx]), None
            )
            if ready is None:
                raise CyclicDependencyError(self._describe_cycle(order, graph))
            inserted[ready] = True
            result_idx.append(ready)
            result.append(items[ready].value)
            for deps in graph:
                deps.discard(ready)

        return result_idx, result

    def _describe_cycle(self, order: list[int], graph: list[set[int]]) -> str:
        for start in order:
            seen: dict[int, int] = {}
            stack = [start]
            while stack:
                current = stack.pop()
                for nxt in graph[current]:
                    if nxt in seen:
                        continue
                    stack.append(nxt)
                    seen[nxt] = current
                    if nxt == start:
                        trail: list[int] = []
                        node = start
                        while node not in trail:
                            trail.append(node)
                            node = seen[node]
                        trail.append(node)
                        path = " < ".join(
                            _format_mark(self._items[i].marks[0]) for i in reversed(trail)
                        )
                        return f"cyclic dependency: {path}"
        return "cyclic dependency"