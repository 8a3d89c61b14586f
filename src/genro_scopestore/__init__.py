# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ScopeStore - Hierarchical observable key/value stores.

A lightweight, zero-dependency library providing a tree of scoped stores
where reads fall back to ancestor values until a local value is set
(Genro Kyō ecosystem).
"""

__version__ = "0.1.0"

from .events import EventBroker, StoreEvents
from .exceptions import (
    InvalidAncestorError,
    InvalidNameError,
    PathResolutionError,
    ReadonlyViolationError,
    StoreError,
)
from .observable import Observable, Subscription
from .store import ReadonlyStore, Store

__all__ = [
    # Core classes
    "Store",
    "ReadonlyStore",
    # Events and streams
    "StoreEvents",
    "EventBroker",
    "Observable",
    "Subscription",
    # Exceptions
    "StoreError",
    "InvalidNameError",
    "InvalidAncestorError",
    "PathResolutionError",
    "ReadonlyViolationError",
]
