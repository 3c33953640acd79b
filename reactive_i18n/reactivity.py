"""Minimal pull-based dependency graph.

Roots are :class:`Writable` nodes; :class:`Computed` nodes derive from other
nodes through a ``get`` function passed to their compute callback. Writing a
root marks every transitive dependent dirty without recomputing anything. A
dirty node recomputes on its next read, and only if one of its sources now
returns a different object than the one it saw last time.
"""

import operator
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Getter = Callable[["Readable[Any]"], Any]
Listener = Callable[[Any], None]

_UNSET: Any = object()


class Readable(ABC, Generic[T]):
    def __init__(self) -> None:
        self._dependents: set["Computed[Any]"] = set()
        self._listeners: list[Listener] = []
        self._last_notified: Any = _UNSET

    @abstractmethod
    def get(self) -> T:
        ...

    def subscribe(self, listener: Callable[[T], None]) -> Callable[[], None]:
        """Call ``listener`` with the new value whenever it changes identity.

        Returns an unsubscribe callable. The listener is not invoked for the
        current value.
        """
        if not self._listeners:
            self._last_notified = self.get()
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        value = self.get()
        if value is self._last_notified:
            return
        self._last_notified = value
        for listener in list(self._listeners):
            listener(value)

    def _invalidate_dependents(self, affected: list["Readable[Any]"]) -> None:
        for dependent in self._dependents:
            if not dependent._dirty:
                dependent._dirty = True
                affected.append(dependent)
                dependent._invalidate_dependents(affected)

    def dispose(self) -> None:
        self._dependents.clear()
        self._listeners.clear()
        self._last_notified = _UNSET


class Writable(Readable[T]):
    """A root value set from outside the graph.

    ``equal`` decides whether a new value counts as a change; identity by
    default.
    """

    def __init__(self, value: T, equal: Callable[[T, T], bool] = operator.is_) -> None:
        super().__init__()
        self._value = value
        self._equal = equal

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if self._equal(self._value, value):
            return
        self._value = value
        affected: list[Readable[Any]] = [self]
        self._invalidate_dependents(affected)
        for node in affected:
            if node._listeners:
                node._notify()


class Computed(Readable[T]):
    """A value derived from other nodes, recomputed lazily."""

    def __init__(self, compute: Callable[[Getter], T]) -> None:
        super().__init__()
        self._compute = compute
        self._value: T = _UNSET
        self._dirty = True
        # source node -> value seen during the last computation
        self._sources: dict[Readable[Any], Any] = {}

    @property
    def dirty(self) -> bool:
        return self._dirty

    def get(self) -> T:
        if self._dirty:
            self._refresh()
        return self._value

    def _sources_unchanged(self) -> bool:
        return self._value is not _UNSET and all(
            source.get() is seen for source, seen in self._sources.items()
        )

    def _refresh(self) -> None:
        if self._sources_unchanged():
            self._dirty = False
            return

        for source in self._sources:
            source._dependents.discard(self)
        sources: dict[Readable[Any], Any] = {}

        def track(source: Readable[Any]) -> Any:
            value = source.get()
            sources[source] = value
            source._dependents.add(self)
            return value

        try:
            value = self._compute(track)
        except Exception:
            self._value = _UNSET
            raise
        finally:
            self._sources = sources
        self._value = value
        self._dirty = False

    def dispose(self) -> None:
        for source in self._sources:
            source._dependents.discard(self)
        self._sources.clear()
        self._value = _UNSET
        self._dirty = True
        super().dispose()
