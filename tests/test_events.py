# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for EventBroker, Observable and Subscription."""

import pytest

from genro_scopestore import EventBroker, Observable, StoreEvents, Subscription


class TestEventBroker:
    """Tests for the synchronous event broker."""

    def test_emit_calls_handlers_in_order(self):
        """Test handlers run in registration order with the payload."""
        broker = EventBroker()
        calls = []
        broker.on('evt', lambda p: calls.append(('first', p)))
        broker.on('evt', lambda p: calls.append(('second', p)))
        broker.emit('evt', 42)
        assert calls == [('first', 42), ('second', 42)]

    def test_emit_without_payload(self):
        """Test payload defaults to None."""
        broker = EventBroker()
        calls = []
        broker.on(StoreEvents.CLEARED, calls.append)
        broker.emit(StoreEvents.CLEARED)
        assert calls == [None]

    def test_emit_unknown_event(self):
        """Test emitting with no handlers is a no-op."""
        EventBroker().emit('nobody-listens', 1)

    def test_on_returns_handler(self):
        """Test on returns the registered handler."""
        broker = EventBroker()
        handler = lambda p: None  # noqa: E731
        assert broker.on('evt', handler) is handler
        assert broker.listeners('evt') == [handler]

    def test_on_rejects_non_callable(self):
        """Test non-callable handlers raise TypeError."""
        with pytest.raises(TypeError, match="must be callable"):
            EventBroker().on('evt', 'not callable')

    def test_off_removes_one_registration(self):
        """Test off removes a single registration."""
        broker = EventBroker()
        calls = []
        broker.on('evt', calls.append)
        broker.on('evt', calls.append)
        broker.off('evt', calls.append)
        broker.emit('evt', 1)
        assert calls == [1]

    def test_off_unknown_is_silent(self):
        """Test off with unknown event or handler does nothing."""
        broker = EventBroker()
        broker.off('evt', print)
        broker.on('evt', len)
        broker.off('evt', print)
        assert broker.listeners('evt') == [len]

    def test_handlers_changed_during_emit(self):
        """Test changes to handlers apply from the next emit."""
        broker = EventBroker()
        calls = []

        def late(payload):
            calls.append(('late', payload))

        def first(payload):
            calls.append(('first', payload))
            broker.off('evt', first)
            broker.on('evt', late)

        broker.on('evt', first)
        broker.emit('evt', 1)
        broker.emit('evt', 2)
        assert calls == [('first', 1), ('late', 2)]

    def test_listeners_is_a_copy(self):
        """Test mutating listeners() does not affect the broker."""
        broker = EventBroker()
        broker.on('evt', print)
        broker.listeners('evt').clear()
        assert broker.listeners('evt') == [print]


class TestSubscription:
    """Tests for Subscription teardown."""

    def test_teardowns_run_once_in_reverse(self):
        """Test unsubscribe runs teardowns once, last added first."""
        calls = []
        subscription = Subscription()
        subscription.add(lambda: calls.append(1))
        subscription.add(lambda: calls.append(2))
        subscription.unsubscribe()
        subscription.unsubscribe()
        assert calls == [2, 1]
        assert subscription.closed

    def test_add_after_close_runs_immediately(self):
        """Test teardowns added to a closed subscription run at once."""
        calls = []
        subscription = Subscription()
        subscription.unsubscribe()
        subscription.add(lambda: calls.append('now'))
        assert calls == ['now']

    def test_repr(self):
        """Test repr shows the state."""
        subscription = Subscription()
        assert repr(subscription) == 'Subscription(active)'
        subscription.unsubscribe()
        assert repr(subscription) == 'Subscription(closed)'


class TestObservable:
    """Tests for the cold Observable."""

    def test_producer_runs_per_subscription(self):
        """Test each subscribe runs the producer anew."""
        runs = []

        def producer(emit, subscription):
            runs.append(subscription)
            emit(len(runs))

        stream = Observable(producer)
        first, second = [], []
        stream.subscribe(first.append)
        stream.subscribe(second.append)
        assert first == [1]
        assert second == [2]
        assert runs[0] is not runs[1]

    def test_no_values_after_unsubscribe(self):
        """Test emit is ignored once the subscription is closed."""
        emitters = []
        values = []
        stream = Observable(lambda emit, subscription: emitters.append(emit))
        subscription = stream.subscribe(values.append)
        emitters[0]('a')
        subscription.unsubscribe()
        emitters[0]('b')
        assert values == ['a']

    def test_subscribe_rejects_non_callable(self):
        """Test on_next must be callable."""
        with pytest.raises(TypeError, match="must be callable"):
            Observable.empty().subscribe(None)

    def test_empty_never_emits(self):
        """Test Observable.empty produces nothing."""
        values = []
        subscription = Observable.empty().subscribe(values.append)
        assert values == []
        assert not subscription.closed

    def test_producer_error_closes_subscription(self):
        """Test a failing producer propagates and tears down."""
        calls = []

        def producer(emit, subscription):
            subscription.add(lambda: calls.append('teardown'))
            raise RuntimeError('producer failed')

        with pytest.raises(RuntimeError, match='producer failed'):
            Observable(producer).subscribe(print)
        assert calls == ['teardown']
