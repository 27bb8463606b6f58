"""
Observer/observable substrate used to propagate market changes.

Quotes, curves, handles and the evaluation context are observables; rate
helpers and handles observe them.  Notification is synchronous and carries
no payload: observers re-read whatever they need lazily.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)


class Observable:
    """Something that can announce that it has changed."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._observers: List["Observer"] = []

    @property
    def observers(self) -> List["Observer"]:
        return list(self._observers)

    def register_observer(self, observer: "Observer") -> None:
        if not any(o is observer for o in self._observers):
            self._observers.append(observer)

    def unregister_observer(self, observer: "Observer") -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        """Call ``update`` on every registered observer.

        Failures inside an observer are logged and never reach the caller.
        """
        for observer in list(self._observers):
            try:
                observer.update()
            except Exception:
                logger.exception(
                    "Observer %r failed while handling a notification from %r",
                    observer,
                    self,
                )


class Observer(ABC):
    """Something that reacts to changes of the observables it registered with."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._observables: List[Observable] = []

    def register_with(self, observable: Optional[Observable]) -> None:
        if observable is None:
            return
        observable.register_observer(self)
        if not any(o is observable for o in self._observables):
            self._observables.append(observable)

    def unregister_with(self, observable: Optional[Observable]) -> None:
        if observable is None:
            return
        observable.unregister_observer(self)
        self._observables = [o for o in self._observables if o is not observable]

    def unregister_with_all(self) -> None:
        for observable in list(self._observables):
            observable.unregister_observer(self)
        self._observables = []

    @abstractmethod
    def update(self) -> None:
        """Called by an observable after it changed."""
