"""Customers arriving at the restaurant, and the whole restaurant run end to end."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from dataclasses import dataclass
from pathlib import Path

from labsim.kitchen import (
    COOKS,
    CUSTOMERS,
    MINUTE_SCALE,
    TIMECLOSE,
    WAITERS,
    Cook,
    RestaurantState,
    format_clock,
)
from labsim.service import Waiter

EATING_MINUTES = 30
SERVED = "served"
LATE = "late"
NO_TABLE = "no table"


@dataclass(frozen=True)
class Customer:
    """A party arriving at ``arrival`` minutes after opening."""

    id: int
    arrival: int
    count: int


def read_customers(path) -> list[Customer]:
    """Read ``id arrival count`` triples until ``-1`` or the end of the file."""
    tokens = Path(path).read_text().split()
    try:
        numbers = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise ValueError(f"malformed customer file: {exc}") from None
    customers = []
    stream = iter(numbers)
    for cid in stream:
        if cid == -1:
            break
        try:
            arrival, count = next(stream), next(stream)
        except StopIteration:
            raise ValueError(f"customer {cid} lacks arrival time or count") from None
        customers.append(Customer(cid, arrival, count))
    return customers


class Restaurant:
    """Runs cooks, waiters and arriving customers against one shared state."""

    def __init__(self, customers, minute_scale=MINUTE_SCALE, output=None):
        self.customers = [c if isinstance(c, Customer) else Customer(*c) for c in customers]
        for customer in self.customers:
            if not 1 <= customer.id <= CUSTOMERS:
                raise ValueError(f"customer id must be between 1 and {CUSTOMERS}")
        self.minute_scale = minute_scale
        self.output = output if output is not None else sys.stdout
        self.wait_times: dict[int, int] = {}

    def _say(self, minutes: int, text: str) -> None:
        print(f"{format_clock(minutes)} {text}", file=self.state.output, flush=True)

    def _visit(self, customer: Customer, outcomes: dict[int, str]) -> None:
        state = self.state
        cid = customer.id
        with state.lock:
            arrival = state.time
            self._say(arrival, f"Customer {cid} arrives (count = {customer.count})")
            if arrival > TIMECLOSE:
                self._say(arrival, f"\t\t\t\tCustomer {cid} leaves (late arrival)")
                outcomes[cid] = LATE
                return
            if state.empty_tables == 0:
                self._say(arrival, f"\t\t\t\tCustomer {cid} leaves (no empty table)")
                outcomes[cid] = NO_TABLE
                return
            state.empty_tables -= 1
            waiter = state.next_waiter
            state.next_waiter = (waiter + 1) % WAITERS
            state.waiter_queues[waiter].append((cid, customer.count))
            state.pending_orders[waiter] += 1
            state.waiter_signals[waiter].release()

        state.customer_signals[cid].acquire()
        with state.lock:
            self._say(state.time, f"\tCustomer {cid}: Order placed to Waiter {chr(ord('U') + waiter)}")

        state.customer_signals[cid].acquire()
        with state.lock:
            served = state.time
            self._say(served, f"\t\t\tCustomer {cid} gets food [Waiting time = {served - arrival}]")
            self.wait_times[cid] = served - arrival

        time.sleep(state.minute_scale * EATING_MINUTES)

        with state.lock:
            state.empty_tables += 1
            state.time = served + EATING_MINUTES
            self._say(state.time, f"\t\t\tCustomer {cid} finishes eating and leaves")
            outcomes[cid] = SERVED

    def run(self) -> dict[int, str]:
        """Serve every customer; return each customer's outcome by id."""
        self.state = state = RestaurantState(self.minute_scale, self.output)
        self.wait_times = {}
        outcomes: dict[int, str] = {}

        staff = [Cook(i, state) for i in range(COOKS)] + [Waiter(i, state) for i in range(WAITERS)]
        for member in staff:
            member.start()

        visitors = []
        clock = 0
        for customer in self.customers:
            if customer.arrival > clock:
                time.sleep(self.minute_scale * (customer.arrival - clock))
                clock = customer.arrival
            with state.lock:
                state.time = max(clock, state.time)
            thread = threading.Thread(target=self._visit, args=(customer, outcomes), daemon=True)
            thread.start()
            visitors.append(thread)

        for thread in visitors:
            thread.join()

        # Let the cooks look at the clock once more so they can close the kitchen.
        for _ in range(COOKS):
            state.cook_signal.release()
        deadline = time.monotonic() + max(0.2, 20 * self.minute_scale)
        for member in staff:
            member.join(max(0.0, deadline - time.monotonic()))
        return outcomes


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a restaurant with cooks and waiters.")
    parser.add_argument("path", nargs="?", default="customers.txt")
    parser.add_argument("--minute-scale", type=float, default=MINUTE_SCALE,
                        help="seconds of real time per simulated minute")
    args = parser.parse_args(argv)
    try:
        customers = read_customers(args.path)
    except OSError as exc:
        print(f"customer : fopen failed: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        restaurant = Restaurant(customers, args.minute_scale)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    restaurant.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())