# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store - A hierarchical, observable key/value container.

This module provides the Store class, the core container of the
genro-scopestore library. Each Store holds its own local items, owns a set
of named child stores created on demand by path, and keeps a back reference
to the store that created it.

Key Features:
    - **Path navigation**: Slash-separated paths ('a/b/key') create and walk
      child stores lazily
    - **Scoped items**: ``has``/``set``/``delete`` only ever touch the items of
      the store the path resolves to
    - **Inherited reads**: ``get`` returns a live stream that falls back to
      ancestor values until a local value is set
    - **Events**: Every mutation emits exactly one event on the store where it
      happened (see StoreEvents)
    - **Read-only ancestors**: ``parent()`` and ``root()`` return ReadonlyStore
      views that reject mutations

Example:
    Basic usage::

        root = Store()
        root.set('theme', 'light').set('editor/theme', 'dark')

        editor = root.for_('editor')
        editor.has('theme')         # True
        editor.for_('panel').has('theme')  # False, has() never inherits

        values = []
        editor.for_('panel').get('theme').subscribe(values.append)
        values                      # ['dark'], inherited from editor
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from ..events import EventBroker, EventHandler, StoreEvents
from ..exceptions import InvalidAncestorError
from ..observable import Observable
from .paths import check_name, resolve, traverse
from .reactive import item_stream
from .readonly import ReadonlyStore

logger = logging.getLogger(__name__)


class Store:
    """A node of a hierarchical key/value tree with reactive reads.

    Store provides:
    - for_(path): Get or create a child store
    - parent() / root(): Read-only views over ancestors
    - has(name): Local key check, no inheritance
    - get(name): Live stream of values, with ancestor fallback
    - set(name, value) / delete(name) / clear(nested): Mutations with events

    Attributes:
        separator: Path separator, class-level so subclasses can change it.
        Events: Alias of StoreEvents.

    Example:
        >>> root = Store()
        >>> root.set('a/b/key', 1)
        >>> root.for_('a/b').has('key')
        True
        >>> root.for_('a').for_('b') is root.for_('a/b')
        True
    """

    __slots__ = ('_items', '_children', '_parent', '_broker', '__weakref__')

    separator = '/'
    Events = StoreEvents

    def __init__(self, ancestor: Store | None = None) -> None:
        """Initialize a Store.

        Args:
            ancestor: Optional store this one inherits reads from. The new store
                is not registered among the ancestor's children; use
                ``ancestor.for_(name)`` for that.

        Raises:
            InvalidAncestorError: If ancestor is given and is not a Store.
        """
        if ancestor is not None and not isinstance(ancestor, Store):
            raise InvalidAncestorError()
        self._items: dict[str, Any] = {}
        self._children: dict[str, Store] = {}
        self._parent = ancestor
        self._broker = EventBroker()

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing local keys."""
        return f"{type(self).__name__}({list(self._items)})"

    def __len__(self) -> int:
        """Return the number of local items."""
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate over local keys in insertion order."""
        return iter(list(self._items))

    def __contains__(self, name: str) -> bool:
        """Same as has(name)."""
        return self.has(name)

    # ==================== Events ====================

    def on(self, event: str, handler: EventHandler) -> EventHandler:
        """Subscribe handler to an event emitted by this store."""
        return self._broker.on(event, handler)

    def off(self, event: str, handler: EventHandler) -> None:
        """Unsubscribe handler from an event emitted by this store."""
        self._broker.off(event, handler)

    def emit(self, event: str, payload: Any = None) -> None:
        """Emit event on this store only."""
        self._broker.emit(event, payload)

    def _add_child(self, name: str) -> Store:
        """Create, register and announce a child store."""
        child = type(self)(self)
        self._children[name] = child
        logger.debug("Created child store %r under %r", name, self)
        self.emit(StoreEvents.CREATED, {'name': name, 'child': child})
        return child

    # ==================== Navigation ====================

    def for_(self, name: str) -> Store:
        """Get (creating as needed) the child store at path name.

        Args:
            name: Child name, or slash-separated path of nested children.

        Returns:
            The child Store. The same path always returns the same instance.

        Raises:
            InvalidNameError: If name is not a non-empty string.
            PathResolutionError: If a segment names a local item.

        Example:
            >>> root.for_('child/grandchild') is root.for_('child').for_('grandchild')
            True
        """
        check_name(name)
        return traverse(self, name.split(self.separator))

    def parent(self) -> ReadonlyStore | None:
        """Return a read-only view of the parent, or None for a root store."""
        if self._parent is None:
            return None
        return ReadonlyStore(self._parent)

    def root(self) -> ReadonlyStore:
        """Return a read-only view of the topmost ancestor (self if root)."""
        current = self
        while current._parent is not None:
            current = current._parent
        return ReadonlyStore(current)

    def keys(self) -> list[str]:
        """Return local keys in insertion order."""
        return list(self._items)

    def children(self) -> list[str]:
        """Return names of child stores in creation order."""
        return list(self._children)

    # ==================== Core API ====================

    def has(self, name: str) -> bool:
        """Return True if this store holds name locally.

        Ancestors and children are never consulted and no path is walked:
        ``has('a/b')`` looks for the literal key ``'a/b'``.

        Raises:
            InvalidNameError: If name is not a non-empty string.
        """
        check_name(name)
        return name in self._items

    def get(self, name: str) -> Observable:
        """Return a live stream of the values of name.

        Missing child stores along the path are created immediately. Each
        subscriber then receives:

        1. the local value, if the target store already has one;
        2. every later local set of that key;
        3. meanwhile, values inherited from the ancestors (same rules,
           recursively), until the first local value shows up. After that,
           ancestor changes are ignored for the rest of the subscription.

        Args:
            name: Key, optionally prefixed by a child store path.

        Returns:
            Observable; call ``subscribe(callback)`` to start receiving values.

        Raises:
            InvalidNameError: If name is not a non-empty string.
            PathResolutionError: If a path segment names a local item.

        Example:
            >>> root.set('key', 'inherited')
            >>> sub = root.get('child/key').subscribe(print)
            inherited
            >>> root.set('child/key', 'local')
            local
            >>> root.set('key', 'ignored')
        """
        check_name(name)
        store, key = resolve(self, name)
        return item_stream(store, key)

    def set(self, name: str, value: Any) -> Store:
        """Set a local item, creating child stores along the path.

        Emits ``item-set`` with ``{'name': key, 'value': value}`` on the
        store the path resolves to.

        Returns:
            This store (not the resolved one) for fluent chaining.

        Raises:
            InvalidNameError: If name is not a non-empty string.
            PathResolutionError: If a path segment names a local item.

        Example:
            >>> root.set('key', 'base').set('child/key', 'override')
        """
        check_name(name)
        store, key = resolve(self, name)
        store._items[key] = value
        store.emit(StoreEvents.SET, {'name': key, 'value': value})
        return self

    def delete(self, name: str) -> None:
        """Remove a local item if present.

        Emits ``item-removed`` with ``{'name': key}`` on the resolved store.
        Deleting a missing key does nothing and emits nothing.

        Raises:
            InvalidNameError: If name is not a non-empty string.
            PathResolutionError: If a path segment names a local item.
        """
        check_name(name)
        store, key = resolve(self, name)
        if key in store._items:
            del store._items[key]
            store.emit(StoreEvents.REMOVED, {'name': key})

    remove = delete

    def clear(self, nested: bool = False) -> None:
        """Remove all local items.

        Emits one ``item-removed`` per item, in insertion order, then a single
        ``store-cleared``. With nested, every child store is then cleared the
        same way, recursively.

        Args:
            nested: Also clear all descendant stores.
        """
        logger.debug("Clearing %r (nested=%s)", self, bool(nested))
        # handlers may add or remove items while the store is being drained
        while self._items:
            key = next(iter(self._items))
            del self._items[key]
            self.emit(StoreEvents.REMOVED, {'name': key})
        self.emit(StoreEvents.CLEARED)
        if nested:
            for child in list(self._children.values()):
                child.clear(True)
