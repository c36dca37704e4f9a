import io

import pytest

from labsim.paging import (
    INITIAL_DEGREE,
    PagingSimulator,
    PagingStats,
    Process,
    main,
    read_search_file,
)


def _run(workloads, **kwargs):
    out = io.StringIO()
    sim = PagingSimulator(workloads, output=out, **kwargs)
    stats = sim.run()
    return sim, stats, out.getvalue()


def test_single_element_array_needs_no_access():
    _, stats, _ = _run([(1, [0])])
    assert stats == PagingStats()


def test_repeated_search_doubles_accesses_without_new_faults():
    _, one, _ = _run([(4096, [100])])
    _, two, _ = _run([(4096, [100, 100])])
    assert two.accesses == 2 * one.accesses
    assert two.faults == one.faults


def test_no_swaps_keeps_initial_degree():
    _, stats, out = _run([(5000, [1, 2, 3]), (7000, [10, 20])])
    assert stats.swaps == 0
    assert stats.degree == INITIAL_DEGREE
    assert "Swapping" not in out


def test_all_frames_returned_after_run():
    sim, _, _ = _run([(50_000, [5, 40_000]), (20_000, [19_999])], frames=40)
    assert sorted(sim.free_frames) == list(range(40))


def test_swap_out_and_in():
    sim, stats, out = _run([(3072, [0]), (3072, [0])], frames=21)
    assert stats.swaps == 1
    assert stats.degree == 1
    assert "+++ Swapping out process   0" in out
    assert "+++ Swapping in process   0" in out
    assert out.index("Swapping out") < out.index("Swapping in")
    assert sim.active == 0


def test_too_few_frames_raises():
    with pytest.raises(RuntimeError):
        _run([(3072, [0])], frames=10)


def test_frames_below_essential_pages_rejected():
    with pytest.raises(ValueError):
        PagingSimulator([(10, [1]), (10, [1])], frames=15)


def test_empty_searches_rejected():
    with pytest.raises(ValueError):
        PagingSimulator([(10, [])])


def test_oversized_array_rejected():
    with pytest.raises(ValueError):
        PagingSimulator([(10**9, [1])])


def test_verbose_reports_each_search():
    _, _, out = _run([(2048, [3, 7])], verbose=True)
    assert "\tSearch 1 by Process 0" in out
    assert "\tSearch 2 by Process 0" in out


def test_binary_search_loads_pages_on_demand():
    sim = PagingSimulator([(2048, [0])], output=io.StringIO())
    process = sim.ready[0]
    assert isinstance(process, Process)
    assert sim.binary_search(process, 0) is True
    assert set(process.page_table) == set(range(11))
    assert sim.stats.faults == 1


def test_summary_format():
    text = PagingStats(accesses=4, faults=2, swaps=1, degree=3).summary()
    assert text.splitlines()[0] == "+++ Page access summary"
    assert "\tTotal number of page access = 4" in text
    assert "\tDegree of multiprogramming = 3" in text


def test_read_search_file(tmp_path):
    path = tmp_path / "search.txt"
    path.write_text("2 3\n1000 1 2 3\n2000 4 5 6\n")
    assert read_search_file(path) == [(1000, [1, 2, 3]), (2000, [4, 5, 6])]


def test_read_search_file_truncated(tmp_path):
    path = tmp_path / "search.txt"
    path.write_text("2 3\n1000 1 2 3\n2000 4\n")
    with pytest.raises(ValueError):
        read_search_file(path)


def test_main_runs_simulation(tmp_path, capsys):
    path = tmp_path / "search.txt"
    path.write_text("1 2\n5000 10 4000\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("+++ Simulation data read from file\n+++ Kernel data initialized\n")
    assert "+++ Page access summary" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().out == "File not found\n"