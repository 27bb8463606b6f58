"""
Late-bound references to quotes and curves.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from .observable import Observable, Observer

T = TypeVar("T")


class EmptyHandleError(ValueError):
    """Raised when an empty handle is dereferenced."""


class Handle(Observable, Observer, Generic[T]):
    """Reference to an observable object that may be empty.

    When linked with ``register_as_observer`` the handle forwards every
    notification of its target to its own observers.
    """

    def __init__(self, target: Optional[T] = None, register_as_observer: bool = True):
        super().__init__()
        self._target: Optional[T] = None
        self._is_observer = False
        self._link(target, register_as_observer)

    def _link(self, target: Optional[T], register_as_observer: bool) -> None:
        if self._is_observer:
            self.unregister_with(self._target)
        self._target = target
        self._is_observer = register_as_observer and target is not None
        if self._is_observer:
            self.register_with(target)

    def empty(self) -> bool:
        return self._target is None

    def current_link(self) -> T:
        if self._target is None:
            raise EmptyHandleError("empty handle cannot be dereferenced")
        return self._target

    def links_to(self, other) -> bool:
        """True when this handle and ``other`` (handle or object) share a target."""
        if isinstance(other, Handle):
            other = other._target
        return self._target is not None and self._target is other

    def update(self) -> None:
        self.notify_observers()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._target!r})"


class RelinkableHandle(Handle[T]):
    """Handle whose target can be swapped; every relink notifies observers."""

    def link_to(self, target: Optional[T], register_as_observer: bool = True) -> None:
        if target is self._target and self._is_observer == (
            register_as_observer and target is not None
        ):
            return
        self._link(target, register_as_observer)
        self.notify_observers()
