"""Boat rides for visitors, coordinated by semaphores and per-boat barriers."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time

MIN_BOATS, MAX_BOATS = 5, 10
MIN_VISITORS, MAX_VISITORS = 20, 100
SIGHTSEEING_RANGE = (30, 120)
RIDE_RANGE = (15, 60)


def validate_counts(boats: int, visitors: int) -> tuple[int, int]:
    """Check the boat and visitor counts and return them unchanged."""
    if not (MIN_BOATS <= boats <= MAX_BOATS and MIN_VISITORS <= visitors <= MAX_VISITORS):
        raise ValueError("Invalid input 5 <= m <= 10  20 <= n <= 100")
    return boats, visitors


class BoatingSimulation:
    """Visitors go sightseeing, then each takes one ride on the first free boat."""

    def __init__(self, boats, visitors, time_scale=0.1, seed=None, output=None):
        self.boats, self.visitors = validate_counts(boats, visitors)
        self.time_scale = time_scale
        self.output = output if output is not None else sys.stdout
        rng = random.Random(seed)
        # (sightseeing minutes, ride minutes) for visitors 1..n
        self.plans = [
            (rng.randint(*SIGHTSEEING_RANGE), rng.randint(*RIDE_RANGE)) for _ in range(visitors)
        ]

    def _emit(self, text: str) -> None:
        with self._print_lock:
            print(text, file=self.output, flush=True)

    def _boat(self, boat_id: int) -> None:
        self._emit(f"Boat\t{boat_id}\tReady")
        while True:
            self._boat_sem.acquire()
            if self._stop:
                return
            with self._lock:
                self._available[boat_id] = True
                self._carrying[boat_id] = -1
            self._rider_sem.release()

            self._barriers[boat_id].wait()

            with self._lock:
                rider_id = self._carrying[boat_id]
                ride_time = self._ride_time[boat_id]
                self._available[boat_id] = False
                self._rides.append((rider_id, boat_id, ride_time))

            self._emit(f"Boat\t{boat_id}\tStart of ride for visitor {rider_id}")
            time.sleep(ride_time * self.time_scale)
            self._emit(
                f"Boat\t{boat_id}\tEnd of ride for visitor {rider_id} (ride time = {ride_time})"
            )
            self._emit(f"Visitor\t{rider_id}\tLeaving")

            with self._lock:
                self._remaining -= 1
                if self._remaining == 0:
                    self._done.set()

    def _visitor(self, visitor_id: int) -> None:
        sightseeing, ride_time = self.plans[visitor_id - 1]
        self._emit(f"Visitor\t{visitor_id}\tStarts sightseeing for {sightseeing} minutes")
        time.sleep(sightseeing * self.time_scale)
        self._boat_sem.release()
        self._rider_sem.acquire()
        self._emit(f"Visitor\t{visitor_id}\tReady to ride a boat (ride time = {ride_time})")

        boat_index = -1
        with self._lock:
            for boat_id in range(1, self.boats + 1):
                if self._available[boat_id] and self._carrying[boat_id] == -1:
                    boat_index = boat_id
                    self._carrying[boat_id] = visitor_id
                    self._ride_time[boat_id] = ride_time
                    break
        self._emit(f"Visitor\t{visitor_id}\tFinds boat {boat_index}")
        if boat_index == -1:
            raise RuntimeError(f"visitor {visitor_id} found no free boat")
        self._barriers[boat_index].wait()
        time.sleep(ride_time * self.time_scale)

    def run(self) -> list[tuple[int, int, int]]:
        """Serve every visitor; return ``(visitor, boat, ride_time)`` in ride order."""
        m, n = self.boats, self.visitors
        self._print_lock = threading.Lock()
        self._lock = threading.Lock()
        self._boat_sem = threading.Semaphore(0)
        self._rider_sem = threading.Semaphore(0)
        self._barriers = [threading.Barrier(2) for _ in range(m + 1)]
        self._available = [False] * (m + 1)
        self._carrying = [-1] * (m + 1)
        self._ride_time = [0] * (m + 1)
        self._remaining = n
        self._rides: list[tuple[int, int, int]] = []
        self._done = threading.Event()
        self._stop = False

        boats = [
            threading.Thread(target=self._boat, args=(i,), daemon=True) for i in range(1, m + 1)
        ]
        riders = [
            threading.Thread(target=self._visitor, args=(i,), daemon=True)
            for i in range(1, n + 1)
        ]
        for thread in boats + riders:
            thread.start()

        self._done.wait()
        self._stop = True
        for _ in boats:
            self._boat_sem.release()
        for thread in boats + riders:
            thread.join()

        self._emit("All visitors served")
        return list(self._rides)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate visitors riding boats.")
    parser.add_argument("boats", type=int, help="number of boats")
    parser.add_argument("visitors", type=int, help="number of visitors")
    parser.add_argument("--time-scale", type=float, default=0.1, help="seconds per minute")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        simulation = BoatingSimulation(args.boats, args.visitors, args.time_scale, args.seed)
    except ValueError as exc:
        print(exc)
        return 1
    simulation.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())