from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar

from ..core.exceptions import BroadcastClosedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Subscription(Generic[T]):
    def __init__(self, broadcaster: "Broadcaster[T]", listener: Listener):
        self._broadcaster = broadcaster
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._broadcaster._remove(self._listener)


class Broadcaster(Generic[T]):
    """Fan out each emitted value to every current listener.

    Listeners only receive values emitted after they subscribed. A listener that
    raises is logged and does not stop delivery to the others.
    """

    def __init__(self, name: str):
        self._name = name
        self._listeners: List[Listener] = []
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Subscription[T]:
        if self._closed:
            raise BroadcastClosedError(f"{self._name} stream is closed")
        self._listeners.append(listener)
        return Subscription(self, listener)

    def emit(self, value: T) -> None:
        if self._closed:
            return
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("%s listener failed", self._name)

    def close(self) -> None:
        self._closed = True
        self._listeners.clear()

    def _remove(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass
