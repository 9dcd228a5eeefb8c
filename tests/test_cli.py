import pytest

from cpusched.cli import main, run_all
from cpusched.process import Process, copy_processes

TITLES = [
    "[After FCFS]",
    "[After SJF]",
    "[After Priority scheduling]",
    "[After Round-Robin]",
    "[After preemptive SJF]",
    "[After preemptive priority]",
]


def _sample():
    return [
        Process(0, 0, 4, 3),
        Process(1, 1, 2, 1),
        Process(2, 3, 5, 2),
    ]


def test_run_all_sections_in_order():
    report = run_all(_sample(), 3)
    positions = [report.index(title) for title in TITLES]
    assert positions == sorted(positions)
    assert report.count("[Gantt chart]") == 6
    assert report.index("<Algorithm Performance Comparison>") > positions[-1]


def test_run_all_leaves_input_untouched():
    processes = _sample()
    before = copy_processes(processes)
    run_all(processes, 2)
    assert processes == before


def test_run_all_lists_all_algorithm_names():
    report = run_all(_sample(), 3)
    header = report.split("<Algorithm Performance Comparison>\n")[1].split("\n")[1]
    for name in ["FCFS", "SJF", "Priority", "RR", "P-SJF", "P-Pri."]:
        assert f"{name:>10} " in header


def test_main_prints_report(capsys):
    assert main(["--seed", "7", "--count", "5"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("[Initial Processes]\npid\tarrival")
    assert all(title in out for title in TITLES)


def test_main_seed_reproducible(capsys):
    main(["--seed", "11"])
    first = capsys.readouterr().out
    main(["--seed", "11"])
    second = capsys.readouterr().out
    assert first == second


def test_main_rejects_bad_quantum(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--quantum", "0"])
    assert info.value.code == 2