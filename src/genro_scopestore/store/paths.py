# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Name validation and path resolution for Store trees."""

from __future__ import annotations

from typing import Any, Iterable, TYPE_CHECKING

from ..exceptions import InvalidNameError, PathResolutionError

if TYPE_CHECKING:
    from .core import Store


def check_name(name: Any) -> str:
    """Return name if it is a non-empty, non-blank string.

    Raises:
        InvalidNameError: For any other value.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError()
    return name


def traverse(base: Store, segments: Iterable[str]) -> Store:
    """Walk segments as child stores starting at base, creating missing ones.

    Every created child is registered on the store it descends from, which
    then emits ``store-added`` with ``{'name': segment, 'child': child}``.

    Args:
        base: Store where the walk starts.
        segments: Child names, outermost first. Empty means ``base``.

    Returns:
        The store reached by the last segment.

    Raises:
        PathResolutionError: If a segment names a local item of the
            current store.
    """
    current = base
    for segment in segments:
        child = current._children.get(segment)
        if child is None:
            if segment in current._items:
                raise PathResolutionError()
            child = current._add_child(segment)
        current = child
    return current


def resolve(base: Store, name: str) -> tuple[Store, str]:
    """Split name into its store path and final key, and resolve the path.

    Example:
        >>> store, key = resolve(root, 'a/b/key')
        >>> store is root.for_('a/b'), key
        (True, 'key')
    """
    *segments, key = name.split(base.separator)
    return traverse(base, segments), key
