"""Demand-paging simulation of many processes running binary searches."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

PAGE_TABLE_SIZE = 2048
ELEMS_PER_PAGE = 1024
ESSENTIAL_PAGES = 10
TOTAL_FRAMES_USEABLE = 12288
INITIAL_DEGREE = 127
MAX_ELEMENTS = (PAGE_TABLE_SIZE - ESSENTIAL_PAGES) * ELEMS_PER_PAGE


@dataclass
class Process:
    """A process with its array size, pending searches and resident pages."""

    id: int
    size: int
    searches: list[int]
    next_search: int = 0
    page_table: dict[int, int] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.next_search >= len(self.searches)


@dataclass
class PagingStats:
    """Counters gathered over one simulation run."""

    accesses: int = 0
    faults: int = 0
    swaps: int = 0
    degree: int = INITIAL_DEGREE

    def summary(self) -> str:
        return (
            "+++ Page access summary\n"
            f"\tTotal number of page access = {self.accesses}\n"
            f"\tTotal number of page faults = {self.faults}\n"
            f"\tTotal number of swaps = {self.swaps}\n"
            f"\tDegree of multiprogramming = {self.degree}\n"
        )


class PagingSimulator:
    """Round-robin scheduler with demand paging and whole-process swapping."""

    def __init__(self, workloads, frames=TOTAL_FRAMES_USEABLE, verbose=False, output=None):
        workloads = list(workloads)
        if frames < ESSENTIAL_PAGES * len(workloads):
            raise ValueError("not enough frames for the essential pages of every process")
        self.verbose = verbose
        self.output = output if output is not None else sys.stdout
        self.free_frames: deque[int] = deque(range(frames))
        self.ready: deque[Process] = deque()
        self.swapped: deque[Process] = deque()
        self.stats = PagingStats()
        self.active = 0

        for pid, (size, searches) in enumerate(workloads):
            searches = list(searches)
            if not searches:
                raise ValueError(f"process {pid} has no searches")
            if not 1 <= size <= MAX_ELEMENTS:
                raise ValueError(f"process {pid} has array size {size} out of range")
            process = Process(pid, size, searches)
            for page in range(ESSENTIAL_PAGES):
                process.page_table[page] = self.free_frames.popleft()
            self.ready.append(process)
            self.active += 1

    def _emit(self, text: str) -> None:
        print(text, file=self.output, flush=True)

    def _release(self, process: Process) -> None:
        for page in sorted(process.page_table):
            self.free_frames.append(process.page_table[page])
        process.page_table.clear()

    def binary_search(self, process: Process, target: int) -> bool:
        """Run one search; return False if the process had to be swapped out."""
        if self.verbose:
            self._emit(f"\tSearch {process.next_search + 1} by Process {process.id}")
        low, high = 0, process.size - 1
        while low < high:
            mid = (low + high) >> 1
            page = ESSENTIAL_PAGES + (mid >> 10)
            self.stats.accesses += 1
            if page not in process.page_table:
                self.stats.faults += 1
                if not self.free_frames:
                    self.active -= 1
                    self._emit(
                        f"+++ Swapping out process {process.id:3d} "
                        f"[{self.active} active processes]"
                    )
                    self._release(process)
                    self.swapped.append(process)
                    self.stats.swaps += 1
                    self.stats.degree = min(self.stats.degree, self.active)
                    return False
                process.page_table[page] = self.free_frames.popleft()
            if target <= mid:
                high = mid
            else:
                low = mid + 1
        return True

    def run(self) -> PagingStats:
        """Run every process to completion and return the gathered counters."""
        while self.ready or self.swapped:
            terminated = False
            if self.ready:
                process = self.ready.popleft()
                if self.binary_search(process, process.searches[process.next_search]):
                    process.next_search += 1
                    if process.finished:
                        self._release(process)
                        self.active -= 1
                        terminated = True
                    else:
                        self.ready.append(process)
            if terminated and self.swapped:
                process = self.swapped.popleft()
                self.ready.append(process)
                self.active += 1
                self._emit(
                    f"+++ Swapping in process {process.id:3d} [{self.active} active processes]"
                )
            elif not self.ready and self.swapped:
                raise RuntimeError("too few frames: swapped-out processes can never resume")
        return self.stats


def read_search_file(path) -> list[tuple[int, list[int]]]:
    """Read ``n m`` followed by, for each process, its array size and ``m`` indices."""
    tokens = Path(path).read_text().split()
    try:
        numbers = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise ValueError(f"malformed search file: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("search file lacks the process and search counts")
    n, m = numbers[0], numbers[1]
    body = numbers[2:]
    if len(body) < n * (m + 1):
        raise ValueError("search file is truncated")
    workloads = []
    for i in range(n):
        chunk = body[i * (m + 1) : (i + 1) * (m + 1)]
        workloads.append((chunk[0], chunk[1:]))
    return workloads


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate demand paging with binary searches.")
    parser.add_argument("path", nargs="?", default="search.txt")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    try:
        workloads = read_search_file(args.path)
    except FileNotFoundError:
        print("File not found")
        return 1

    simulator = PagingSimulator(workloads, verbose=args.verbose)
    print("+++ Simulation data read from file", flush=True)
    print("+++ Kernel data initialized", flush=True)
    stats = simulator.run()
    sys.stdout.write(stats.summary())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())