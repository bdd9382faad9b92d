"""Isolated in-process event emitter for mutually distrusting listeners.

Similar to a plain event bus, with a few deliberate differences:

1. No special event names (such as ``error`` or ``new_listener``) that would let
   one listener observe another's registrations or failures.
2. Listeners are called as plain callables with no emitter or context object
   passed in, so a listener cannot reach its siblings.
3. At most three positional arguments are delivered per event.

Listener exceptions propagate out of ``emit`` and stop the remaining listeners
for that call. ``emit`` iterates over a snapshot of the listener list, so a
listener registered while an event is being emitted only sees later emits.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

Listener = Callable[..., Any]

logger = logging.getLogger("se.emitter")


class Emitter(ABC):
    """Register/emit/list contract shared by emitter implementations."""

    __slots__ = ()

    @abstractmethod
    def on(self, event_name: str, listener: Listener) -> None:
        """Add a listener for an event name."""

    @abstractmethod
    def emit(self, event_name: str, a: Any = None, b: Any = None, c: Any = None) -> None:
        """Call every listener registered for ``event_name`` with ``(a, b, c)``."""

    @abstractmethod
    def event_names(self) -> list[str]:
        """Return the event names that have registered listeners."""


class SafeEmitter(Emitter):
    """Emitter whose listener registry is never exposed to callers."""

    __slots__ = ("__listeners",)

    def __init__(self) -> None:
        self.__listeners: dict[str, list[Listener]] = {}

    def on(self, event_name: str, listener: Listener) -> None:
        self.__listeners.setdefault(event_name, []).append(listener)
        logger.debug("Registered listener for '%s'", event_name)

    def emit(self, event_name: str, a: Any = None, b: Any = None, c: Any = None) -> None:
        listeners = self.__listeners.get(event_name)
        if not listeners:
            return
        for listener in tuple(listeners):
            listener(a, b, c)

    def event_names(self) -> list[str]:
        return list(self.__listeners)

    def __repr__(self) -> str:
        return f"<SafeEmitter events={len(self.__listeners)}>"


class ListenerRegistrar:
    """Register-only view of an emitter."""

    __slots__ = ("__on",)

    def __init__(self, emitter: Emitter) -> None:
        self.__on = emitter.on

    def on(self, event_name: str, listener: Listener) -> None:
        self.__on(event_name, listener)


class EventDispatcher:
    """Emit-only view of an emitter."""

    __slots__ = ("__emit", "__event_names")

    def __init__(self, emitter: Emitter) -> None:
        self.__emit = emitter.emit
        self.__event_names = emitter.event_names

    def emit(self, event_name: str, a: Any = None, b: Any = None, c: Any = None) -> None:
        self.__emit(event_name, a, b, c)

    def event_names(self) -> list[str]:
        return self.__event_names()


def create_safe_emitter() -> SafeEmitter:
    """Create a fresh emitter with an empty registry."""
    return SafeEmitter()


def registrar(emitter: Emitter) -> ListenerRegistrar:
    """Return a view of ``emitter`` that can only register listeners."""
    return ListenerRegistrar(emitter)


def dispatcher(emitter: Emitter) -> EventDispatcher:
    """Return a view of ``emitter`` that can only emit and list event names."""
    return EventDispatcher(emitter)
