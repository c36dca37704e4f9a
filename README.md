# labsim

Small, self-contained simulations of classic operating-system exercises,
written with threads, locks and semaphores from the standard library. Each
simulation prints a trace of what happens as it runs, so that you can watch
the threads interact.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Restaurant (`labsim-restaurant`)

A restaurant with ten tables, five waiters (U to Y) and two cooks (C and D)
opens at 11 am. Customers arrive at the minutes given in the input file,
take a table if one is free, order through their waiter, wait while a cook
prepares the food (five minutes per person), eat for thirty minutes and
leave. Anyone arriving after 3 pm leaves at once, as does anyone who finds
no empty table. Once closing time has passed and no orders are left, the
cooks leave, followed by the waiters.

Each entry of the input file is a customer id (1 to 200), an arrival minute
and a group size, separated by whitespace; a `-1` in place of an id ends the
list.

```
labsim-restaurant                 # reads customers.txt
labsim-restaurant my_customers.txt --minute-scale 0.01
```

`--minute-scale` sets the seconds of real time per simulated minute
(default 0.1).

From Python, `labsim.restaurant.read_customers(path)` returns a list of
`Customer(id, arrival, count)` records, and
`Restaurant(customers, minute_scale, output).run()` serves them and returns
each customer's outcome by id (`"served"`, `"late"` or `"no table"`); wait
times of served customers are left in `Restaurant.wait_times`. The shared
state and the staff are in `labsim.kitchen` (`RestaurantState`, `Cook`,
`Order`, `format_clock`) and `labsim.service` (`Waiter`).

## Boating (`labsim-boating`)

Visitors go sightseeing in a park for 30 to 120 minutes, then queue for a
boat ride of 15 to 60 minutes. Each boat carries one visitor at a time; the
simulation ends once every visitor has had a ride.

```
labsim-boating 5 20
labsim-boating 10 100 --time-scale 0.001 --seed 42
```

The arguments are the number of boats (5 to 10) and the number of visitors
(20 to 100). `--time-scale` sets the seconds per simulated minute (default
0.1) and `--seed` makes the visitors' plans reproducible.

From Python, `BoatingSimulation(boats, visitors, time_scale, seed, output).run()`
returns `(visitor, boat, ride_time)` tuples in the order the rides started.
`validate_counts(boats, visitors)` raises `ValueError` for counts out of range.

## Demand paging (`labsim-paging`)

A number of processes each run a series of binary searches over a large
array. Every process starts with ten essential pages resident; other pages
are loaded on demand into a pool of 12288 frames. When no frame is free, the
faulting process is swapped out and its frames released, until another
process finishes and it can be swapped back in. At the end the simulator
reports page accesses, page faults, swaps and the lowest degree of
multiprogramming reached.

The input file starts with the number of processes `n` and searches per
process `m`; then, for each process, its array size followed by `m` indices
to search for.

```
labsim-paging                 # reads search.txt
labsim-paging workload.txt -v # print every search as it starts
```

From Python, `read_search_file(path)` returns `(size, searches)` pairs and
`PagingSimulator(workloads, frames, verbose, output).run()` returns a
`PagingStats` with `accesses`, `faults`, `swaps` and `degree`.

## What is not included

labsim does not create input files: the customer list for the restaurant and
the search workload for demand paging must be written by hand or by another
tool. There is no shared-memory turn-taking game and no banker's-algorithm
resource manager in this package.