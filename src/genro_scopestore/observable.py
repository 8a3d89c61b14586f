# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Minimal cold observable used for reactive reads.

An Observable wraps a *producer*: a function called once per subscriber with
an ``emit`` callable and the subscriber's Subscription. The producer wires
whatever listeners it needs and registers their teardown on the Subscription.
Nothing is shared between subscribers.

Example:
    >>> def producer(emit, subscription):
    ...     broker.on('tick', emit)
    ...     subscription.add(lambda: broker.off('tick', emit))
    >>> stream = Observable(producer)
    >>> with stream.subscribe(print):
    ...     broker.emit('tick', 1)
    1
"""

from __future__ import annotations

from typing import Any, Callable

Emit = Callable[[Any], None]
Teardown = Callable[[], Any]


class Subscription:
    """Handle returned by Observable.subscribe.

    Collects teardown callbacks and runs them once, in reverse registration
    order, on unsubscribe. Usable as a context manager.
    """

    __slots__ = ('_teardowns', '_closed')

    def __init__(self) -> None:
        self._teardowns: list[Teardown] = []
        self._closed = False

    def __repr__(self) -> str:
        state = 'closed' if self._closed else 'active'
        return f"Subscription({state})"

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unsubscribe()

    @property
    def closed(self) -> bool:
        """True once unsubscribe() has been called."""
        return self._closed

    def add(self, teardown: Teardown) -> None:
        """Register a teardown callback.

        If the subscription is already closed the callback runs immediately.
        """
        if self._closed:
            teardown()
            return
        self._teardowns.append(teardown)

    def unsubscribe(self) -> None:
        """Stop delivery and run all teardowns. Calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        teardowns, self._teardowns = self._teardowns, []
        for teardown in reversed(teardowns):
            teardown()


class Observable:
    """A cold stream of values; each subscription runs the producer anew."""

    __slots__ = ('_producer',)

    def __init__(self, producer: Callable[[Emit, Subscription], Any]) -> None:
        self._producer = producer

    def __repr__(self) -> str:
        name = getattr(self._producer, '__qualname__', repr(self._producer))
        return f"Observable({name})"

    @classmethod
    def empty(cls) -> Observable:
        """Return a stream that never emits and never completes."""
        return cls(lambda emit, subscription: None)

    def subscribe(self, on_next: Callable[[Any], Any]) -> Subscription:
        """Start observing the stream.

        Args:
            on_next: Called with every value produced for this subscription.

        Returns:
            The Subscription; call ``unsubscribe()`` to stop receiving values.

        Raises:
            TypeError: If on_next is not callable.
        """
        if not callable(on_next):
            raise TypeError(f"on_next must be callable, not {type(on_next).__name__}")
        subscription = Subscription()

        def emit(value: Any) -> None:
            # a teardown may race with an event dispatch already in progress
            if not subscription.closed:
                on_next(value)

        try:
            self._producer(emit, subscription)
        except Exception:
            subscription.unsubscribe()
            raise
        return subscription
