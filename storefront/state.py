"""Reactive state containers.

`Atom` holds one value and notifies listeners when it is replaced.
`Computed` derives a value from an atom and has no storage of its own.
Listeners are plain callables run synchronously on the caller's loop.
"""
from typing import Callable, Generic, TypeVar

from storefront.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Unsubscribe = Callable[[], None]


class Atom(Generic[T]):
    """Single mutable slot with change notifications."""

    def __init__(self, initial: T):
        self._value = initial
        self._listeners: list[Callable[[T], None]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value; listeners run only if the new value is a different object."""
        if value is self._value:
            return
        self._value = value
        self._notify(value)

    def listen(self, listener: Callable[[T], None]) -> Unsubscribe:
        """Call `listener` on every future change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def subscribe(self, listener: Callable[[T], None]) -> Unsubscribe:
        """Like `listen`, but also calls `listener` once with the current value."""
        unsubscribe = self.listen(listener)
        listener(self._value)
        return unsubscribe

    def _notify(self, value: T) -> None:
        # Copy: a listener may unsubscribe itself
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("State listener failed")


class Computed(Generic[T, R]):
    """Read-only value derived from an atom, recomputed on every read."""

    def __init__(self, source: Atom[T], fn: Callable[[T], R]):
        self._source = source
        self._fn = fn

    def get(self) -> R:
        return self._fn(self._source.get())

    def listen(self, listener: Callable[[R], None]) -> Unsubscribe:
        return self._source.listen(lambda value: listener(self._fn(value)))

    def subscribe(self, listener: Callable[[R], None]) -> Unsubscribe:
        return self._source.subscribe(lambda value: listener(self._fn(value)))
