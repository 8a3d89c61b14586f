# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - Hierarchical observable key/value container.

This package provides the Store class and its read-only view.

The package is organized into:
- core: Main Store class with navigation, items and events
- paths: Name validation and slash-path resolution
- reactive: Inheriting value streams behind Store.get
- readonly: ReadonlyStore view returned for ancestors

Example:
    >>> from genro_scopestore import Store
    >>> root = Store()
    >>> root.set('config/name', 'MyApp')
    >>> root.for_('config').has('name')
    True
"""

from .core import Store
from .readonly import ReadonlyStore

__all__ = ["Store", "ReadonlyStore"]
