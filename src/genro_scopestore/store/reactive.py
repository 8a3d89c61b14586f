# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Reactive item reads with ancestor fallback.

``item_stream(store, key)`` builds the Observable returned by ``Store.get``.
For each subscription it combines two sources:

- local: the current local value of ``key`` (if any) followed by every
  ``item-set`` event for ``key`` on ``store``;
- inherited: ``item_stream(store.parent, key)``, i.e. the same rules applied
  one level up, recursively to the root.

Inherited values flow only until the first local value is seen. From then on
the inherited subscription is torn down for good, even if the local item is
later removed.

Example:
    >>> root = Store()
    >>> child = root.for_('child')
    >>> sub = child.get('key').subscribe(print)
    >>> root.set('key', 'a')
    a
    >>> child.set('key', 'b')
    b
    >>> root.set('key', 'c')  # ignored, child has its own value now
"""

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from ..events import StoreEvents
from ..observable import Emit, Observable, Subscription

if TYPE_CHECKING:
    from .core import Store

logger = logging.getLogger(__name__)


def item_stream(store: Store, key: str) -> Observable:
    """Return the cold stream of values visible for key at store."""
    parent = store._parent
    inherited = item_stream(parent, key) if parent is not None else Observable.empty()

    def produce(emit: Emit, subscription: Subscription) -> None:
        local_active = False
        inherited_sub: Subscription | None = None

        def activate_local() -> None:
            nonlocal local_active
            local_active = True
            if inherited_sub is not None:
                inherited_sub.unsubscribe()

        def on_local_set(event: Any) -> None:
            if not isinstance(event, dict) or event.get('name') != key:
                return
            if not local_active:
                activate_local()
            emit(event.get('value'))

        def on_inherited(value: Any) -> None:
            if not local_active:
                emit(value)

        store.on(StoreEvents.SET, on_local_set)

        def teardown() -> None:
            store.off(StoreEvents.SET, on_local_set)
            logger.debug("Unsubscribed from %r on %r", key, store)

        subscription.add(teardown)
        logger.debug("Subscribed to %r on %r", key, store)

        if key in store._items:
            activate_local()
            emit(store._items[key])
        if local_active:
            return

        inherited_sub = inherited.subscribe(on_inherited)
        subscription.add(inherited_sub.unsubscribe)
        # a local set may have happened while the parent replayed its value
        if local_active:
            inherited_sub.unsubscribe()

    return Observable(produce)
