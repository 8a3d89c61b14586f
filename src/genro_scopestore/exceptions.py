# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ScopeStore exceptions.

All errors signal programmer mistakes and are raised synchronously to the
caller. None of them is ever delivered through events or streams.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for ScopeStore errors."""

    pass


class InvalidNameError(StoreError, ValueError):
    """Raised when a name or path argument is not a non-empty string."""

    def __init__(self, message: str = "Parameter `name` must be a non-empty string") -> None:
        super().__init__(message)


class InvalidAncestorError(StoreError, TypeError):
    """Raised when a Store is constructed with a non-Store ancestor."""

    def __init__(self, message: str = "The argument provided must be a Store instance.") -> None:
        super().__init__(message)


class PathResolutionError(StoreError, LookupError):
    """Raised when a path segment names a local item instead of a child store."""

    def __init__(self, message: str = "Path does not resolve to a Store.") -> None:
        super().__init__(message)


class ReadonlyViolationError(StoreError):
    """Raised when set/delete/clear is called on a read-only ancestor view."""

    def __init__(self, message: str = "Ancestor Stores are read-only.") -> None:
        super().__init__(message)
