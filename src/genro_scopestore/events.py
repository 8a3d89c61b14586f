# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Event names and the synchronous event broker owned by every Store.

Event payloads:
    - item-set: ``{'name': key, 'value': value}``
    - item-removed: ``{'name': key}``
    - store-cleared: ``None``
    - store-added: ``{'name': segment, 'child': Store}``

Events are scoped to the store where the mutation happened. They are never
bubbled to ancestors nor forwarded to children.

Example:
    >>> broker = EventBroker()
    >>> seen = []
    >>> broker.on(StoreEvents.SET, seen.append)
    >>> broker.emit(StoreEvents.SET, {'name': 'key', 'value': 1})
    >>> seen
    [{'name': 'key', 'value': 1}]
"""

from __future__ import annotations

from typing import Any, Callable

EventHandler = Callable[[Any], Any]


class StoreEvents:
    """Names of the events emitted by a Store.

    The string values are part of the public contract and must not change.
    """

    SET = 'item-set'
    REMOVED = 'item-removed'
    CLEARED = 'store-cleared'
    CREATED = 'store-added'


class EventBroker:
    """In-process publish/subscribe registry keyed by event name."""

    __slots__ = ('_handlers',)

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def on(self, event: str, handler: EventHandler) -> EventHandler:
        """Register handler for event.

        Args:
            event: Event name (see StoreEvents).
            handler: Callable receiving the event payload.

        Returns:
            The handler itself.

        Raises:
            TypeError: If handler is not callable.
        """
        if not callable(handler):
            raise TypeError(f"handler must be callable, not {type(handler).__name__}")
        self._handlers.setdefault(event, []).append(handler)
        return handler

    def off(self, event: str, handler: EventHandler) -> None:
        """Remove one registration of handler for event. Unknown handlers are ignored."""
        handlers = self._handlers.get(event)
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del self._handlers[event]

    def emit(self, event: str, payload: Any = None) -> None:
        """Call every handler registered for event, in registration order.

        The handler list is snapshotted first: handlers added or removed by a
        handler take effect from the next emit.
        """
        for handler in list(self._handlers.get(event, ())):
            handler(payload)

    def listeners(self, event: str) -> list[EventHandler]:
        """Return a copy of the handlers currently registered for event."""
        return list(self._handlers.get(event, ()))
