"""Shared restaurant state and the cooks who prepare orders."""

from __future__ import annotations

import sys
import threading
import time
from collections import deque
from dataclasses import dataclass

MINUTE_SCALE = 0.1  # seconds of real time per simulated minute
COOKS = 2
WAITERS = 5
CUSTOMERS = 200
TABLES = 10
TIMECLOSE = 240  # minutes after 11 am: 3 pm
COOKING_MINUTES_PER_PERSON = 5


def format_clock(minutes: int) -> str:
    """Render minutes since 11:00 am as ``[hh:mm am]``."""
    hours = minutes // 60 + 11
    hour = hours % 12 or 12
    suffix = "am" if hours < 12 else "pm"
    return f"[{hour:02d}:{minutes % 60:02d} {suffix}]"


@dataclass(frozen=True)
class Order:
    """An order handed by a waiter to the kitchen."""

    waiter: int
    customer: int
    count: int


class RestaurantState:
    """Everything the cooks, waiters and customers share, guarded by ``lock``."""

    def __init__(self, minute_scale=MINUTE_SCALE, output=None):
        self.minute_scale = minute_scale
        self.output = output if output is not None else sys.stdout
        self.lock = threading.Lock()

        self.time = 0
        self.empty_tables = TABLES
        self.next_waiter = 0

        self.cook_queue: deque[Order] = deque()
        self.working_cooks = COOKS
        self.cook_signal = threading.Semaphore(0)

        # Per waiter: customers waiting to order, food ready to serve, and counters.
        self.waiter_queues: list[deque[tuple[int, int]]] = [deque() for _ in range(WAITERS)]
        self.ready: list[deque[int]] = [deque() for _ in range(WAITERS)]
        self.pending_orders = [0] * WAITERS
        self.leave = [False] * WAITERS
        self.waiter_signals = [threading.Semaphore(0) for _ in range(WAITERS)]

        self.customer_signals = [threading.Semaphore(0) for _ in range(CUSTOMERS + 1)]


class Cook(threading.Thread):
    """A cook who prepares queued orders until closing time with no work left."""

    def __init__(self, index, state):
        if not 0 <= index < COOKS:
            raise ValueError(f"cook index must be between 0 and {COOKS - 1}")
        super().__init__(name=f"cook-{index}", daemon=True)
        self.index = index
        self.state = state
        self.letter = chr(ord("C") + index)

    def _say(self, minutes: int, text: str) -> None:
        indent = "" if self.index == 0 else "\t"
        print(f"{format_clock(minutes)} {indent}Cook {self.letter}: {text}",
              file=self.state.output, flush=True)

    def _describe(self, order: Order) -> str:
        waiter = chr(ord("U") + order.waiter)
        return f"(Waiter {waiter}, Customer {order.customer}, Count {order.count})"

    def _leave(self, minutes: int, wake_other_cook: bool) -> None:
        """Leave the kitchen; caller holds the lock."""
        state = self.state
        self._say(minutes, "Leaving")
        state.working_cooks -= 1
        if state.working_cooks == 0:
            for waiter, signal in enumerate(state.waiter_signals):
                state.leave[waiter] = True
                signal.release()
        elif wake_other_cook:
            state.cook_signal.release()

    def run(self):
        state = self.state
        with state.lock:
            self._say(state.time, "is ready")

        while True:
            state.cook_signal.acquire()
            with state.lock:
                now = state.time
                if now > TIMECLOSE and not state.cook_queue:
                    self._leave(now, wake_other_cook=False)
                    return
                if not state.cook_queue:
                    continue
                order = state.cook_queue.popleft()

            self._say(now, f"Preparing order {self._describe(order)}")
            cooking = COOKING_MINUTES_PER_PERSON * order.count
            time.sleep(state.minute_scale * cooking)

            with state.lock:
                state.time = max(state.time, now + cooking)
                self._say(state.time, f"Prepared order {self._describe(order)}")
                state.ready[order.waiter].append(order.customer)
                state.waiter_signals[order.waiter].release()
                if state.time > TIMECLOSE and not state.cook_queue:
                    self._leave(state.time, wake_other_cook=True)
                    return