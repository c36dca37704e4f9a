import io

import pytest

from labsim.kitchen import WAITERS, Order, RestaurantState
from labsim.service import Waiter


def _state():
    return RestaurantState(minute_scale=0, output=io.StringIO())


def _arrive(state, waiter, customer, count):
    with state.lock:
        state.waiter_queues[waiter].append((customer, count))
        state.pending_orders[waiter] += 1
    state.waiter_signals[waiter].release()


def _dismiss(state, waiter):
    with state.lock:
        state.leave[waiter] = True
    state.waiter_signals[waiter].release()


def test_invalid_index_rejected():
    with pytest.raises(ValueError):
        Waiter(WAITERS, _state())
    with pytest.raises(ValueError):
        Waiter(-1, _state())


def test_ready_and_leaving_messages():
    state = _state()
    waiter = Waiter(0, state)
    waiter.start()
    _dismiss(state, 0)
    waiter.join(timeout=5)
    assert not waiter.is_alive()
    lines = state.output.getvalue().splitlines()
    assert lines[0] == "[11:00 am] Waiter U is ready"
    assert lines[-1] == "[11:00 am] Waiter U leaving (no more customer to serve)"


def test_indentation_follows_waiter_index():
    state = _state()
    waiter = Waiter(2, state)
    waiter.start()
    _dismiss(state, 2)
    waiter.join(timeout=5)
    first = state.output.getvalue().splitlines()[0]
    assert first == "[11:00 am] " + " " * 4 + "Waiter W is ready"


def test_places_order_with_kitchen():
    state = _state()
    waiter = Waiter(0, state)
    waiter.start()
    _arrive(state, 0, 5, 2)
    assert state.customer_signals[5].acquire(timeout=5)
    assert state.cook_signal.acquire(timeout=5)
    with state.lock:
        assert list(state.cook_queue) == [Order(0, 5, 2)]
        assert state.time == 1
        assert not state.waiter_queues[0]
    assert "Waiter U: Placing order for Customer 5 (Count = 2)" in state.output.getvalue()
    with state.lock:
        state.pending_orders[0] = 0
    _dismiss(state, 0)
    waiter.join(timeout=5)
    assert not waiter.is_alive()


def test_order_time_advances_from_current_clock():
    state = _state()
    state.time = 100
    waiter = Waiter(1, state)
    waiter.start()
    _arrive(state, 1, 9, 3)
    assert state.customer_signals[9].acquire(timeout=5)
    with state.lock:
        assert state.time == 101
        assert state.cook_queue[-1] == Order(1, 9, 3)
    with state.lock:
        state.pending_orders[1] = 0
    _dismiss(state, 1)
    waiter.join(timeout=5)
    assert not waiter.is_alive()


def test_serves_ready_food_then_leaves():
    state = _state()
    waiter = Waiter(0, state)
    waiter.start()
    _arrive(state, 0, 7, 1)
    assert state.customer_signals[7].acquire(timeout=5)

    with state.lock:
        state.ready[0].append(7)
    state.waiter_signals[0].release()
    assert state.customer_signals[7].acquire(timeout=5)
    with state.lock:
        assert state.pending_orders[0] == 0
        assert not state.ready[0]

    _dismiss(state, 0)
    waiter.join(timeout=5)
    assert not waiter.is_alive()
    text = state.output.getvalue()
    assert "Waiter U: Serving food to Customer 7" in text
    assert text.index("Placing order") < text.index("Serving food") < text.index("leaving")


def test_does_not_leave_while_orders_pending():
    state = _state()
    with state.lock:
        state.pending_orders[3] = 1
    waiter = Waiter(3, state)
    waiter.start()
    _dismiss(state, 3)
    waiter.join(timeout=0.3)
    assert waiter.is_alive()

    with state.lock:
        state.ready[3].append(12)
    state.waiter_signals[3].release()
    assert state.customer_signals[12].acquire(timeout=5)
    state.waiter_signals[3].release()
    waiter.join(timeout=5)
    assert not waiter.is_alive()
    assert state.output.getvalue().splitlines()[-1].endswith(
        "Waiter X leaving (no more customer to serve)"
    )