"""Waiters who take orders from customers to the kitchen and serve the food."""

from __future__ import annotations

import threading
import time

from labsim.kitchen import WAITERS, Order, RestaurantState, format_clock

ORDER_TAKING_MINUTES = 1


class Waiter(threading.Thread):
    """A waiter who alternates between taking orders and serving ready food."""

    def __init__(self, index, state: RestaurantState):
        if not 0 <= index < WAITERS:
            raise ValueError(f"waiter index must be between 0 and {WAITERS - 1}")
        super().__init__(name=f"waiter-{index}", daemon=True)
        self.index = index
        self.state = state
        self.letter = chr(ord("U") + index)

    def _say(self, minutes: int, text: str) -> None:
        indent = " " * (2 * self.index)
        print(f"{format_clock(minutes)} {indent}Waiter {self.letter}{text}",
              file=self.state.output, flush=True)

    def _take_order(self) -> None:
        """Carry the next customer's order to the kitchen; caller holds no lock."""
        state = self.state
        me = self.index
        with state.lock:
            if not state.waiter_queues[me]:
                return
            customer, count = state.waiter_queues[me].popleft()
            now = state.time

        time.sleep(state.minute_scale * ORDER_TAKING_MINUTES)

        with state.lock:
            state.time = max(state.time, now + ORDER_TAKING_MINUTES)
            self._say(state.time,
                      f": Placing order for Customer {customer} (Count = {count})")
            state.cook_queue.append(Order(me, customer, count))
            state.customer_signals[customer].release()
            state.cook_signal.release()

    def run(self):
        state = self.state
        me = self.index
        with state.lock:
            self._say(state.time, " is ready")

        while True:
            state.waiter_signals[me].acquire()
            with state.lock:
                if state.pending_orders[me] == 0 and state.leave[me]:
                    self._say(state.time, " leaving (no more customer to serve)")
                    return
                if state.ready[me]:
                    customer = state.ready[me].popleft()
                    self._say(state.time, f": Serving food to Customer {customer}")
                    state.pending_orders[me] -= 1
                    state.customer_signals[customer].release()
                    continue
            self._take_order()