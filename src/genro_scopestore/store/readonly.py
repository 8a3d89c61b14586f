# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read-only view over a Store, returned by ``parent()`` and ``root()``."""

from __future__ import annotations

from typing import Any, Iterator, NoReturn, TYPE_CHECKING

from ..exceptions import ReadonlyViolationError

if TYPE_CHECKING:
    from ..events import EventHandler
    from ..observable import Observable
    from .core import Store


class ReadonlyStore:
    """Wrap a Store exposing only its non-mutating operations.

    ``set``, ``delete``/``remove`` and ``clear`` always raise
    ReadonlyViolationError, whatever the arguments. Navigation through the
    view (``for_``, ``parent``, ``root``) returns further views, so a writable
    store is never reachable from one.

    A view compares equal to the store it wraps and to any other view on it.

    Example:
        >>> child = root.for_('child')
        >>> child.parent() == root
        True
        >>> child.parent().set('key', 1)
        Traceback (most recent call last):
        ReadonlyViolationError: Ancestor Stores are read-only.
    """

    __slots__ = ('_store',)

    def __init__(self, store: Store) -> None:
        self._store = store

    def __repr__(self) -> str:
        return f"ReadonlyStore({self._store!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadonlyStore):
            return other._store is self._store
        return other is self._store

    def __hash__(self) -> int:
        return hash(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __contains__(self, name: str) -> bool:
        return self._store.has(name)

    # ==================== Delegated reads ====================

    def for_(self, name: str) -> ReadonlyStore:
        """Read-only view of the child store at name (created if missing)."""
        return ReadonlyStore(self._store.for_(name))

    def parent(self) -> ReadonlyStore | None:
        return self._store.parent()

    def root(self) -> ReadonlyStore:
        return self._store.root()

    def has(self, name: str) -> bool:
        return self._store.has(name)

    def get(self, name: str) -> Observable:
        return self._store.get(name)

    def keys(self) -> list[str]:
        return self._store.keys()

    def children(self) -> list[str]:
        return self._store.children()

    def on(self, event: str, handler: EventHandler) -> EventHandler:
        return self._store.on(event, handler)

    def off(self, event: str, handler: EventHandler) -> None:
        self._store.off(event, handler)

    # ==================== Rejected mutations ====================

    def set(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise ReadonlyViolationError()

    def delete(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise ReadonlyViolationError()

    remove = delete

    def clear(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise ReadonlyViolationError()
