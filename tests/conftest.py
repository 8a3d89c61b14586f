# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for genro-scopestore tests."""

import pytest

from genro_scopestore import Store, StoreEvents

ALL_EVENTS = (StoreEvents.SET, StoreEvents.REMOVED, StoreEvents.CLEARED, StoreEvents.CREATED)


class EventRecorder:
    """Collect (label, event, payload) tuples emitted by one or more stores."""

    def __init__(self):
        self.events = []

    def attach(self, store, *events, label=None):
        for event in events or ALL_EVENTS:
            store.on(event, lambda payload, _event=event: self.events.append(
                (label, _event, payload)
            ))
        return self

    def of(self, event):
        """Return (label, payload) pairs recorded for event."""
        return [(label, payload) for label, evt, payload in self.events if evt == event]

    def names(self, event):
        """Return payload names recorded for event."""
        return [payload['name'] for _, payload in self.of(event)]

    def sequence(self):
        """Return (label, event) pairs in emission order."""
        return [(label, evt) for label, evt, _ in self.events]


@pytest.fixture
def store():
    """A fresh root Store."""
    return Store()


@pytest.fixture
def recorder():
    """An empty EventRecorder."""
    return EventRecorder()
