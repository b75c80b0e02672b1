"""
Tests for the Round Robin scheduler.

The running job keeps the CPU for a full quantum, then the next RUNNABLE
job after it in table order takes over, wrapping to the start.
"""

import pytest

from models.job import JobTable
from scheduler.round_robin import RoundRobinScheduler


def _admitted(*specs) -> JobTable:
    table = JobTable.from_specs(specs)
    for job in table:
        job.admit(job.arrival_time)
    return table


def test_idle_cpu_picks_first_runnable_in_table_order():
    table = _admitted((1, 0, 9), (2, 0, 1))
    assert RoundRobinScheduler().choose(table, 0) is table[0]


def test_keeps_running_job_within_quantum():
    table = _admitted((1, 0, 9), (2, 0, 9))
    table[0].dispatch(0)
    scheduler = RoundRobinScheduler(time_quantum=3)

    assert scheduler.choose(table, 1) is None
    assert scheduler.choose(table, 2) is None


def test_switches_to_next_job_when_quantum_expires():
    table = _admitted((1, 0, 9), (2, 0, 9), (3, 0, 9))
    table[0].dispatch(0)
    assert RoundRobinScheduler(time_quantum=3).choose(table, 3) is table[1]


def test_scan_wraps_around_the_table():
    table = JobTable.from_specs([(1, 0, 9), (2, 0, 9), (3, 0, 9), (4, 50, 1)])
    for job in table.jobs[:3]:
        job.admit(0)
    table[2].dispatch(0)
    # job 4 hasn't arrived, so the scan after index 2 wraps to index 0
    assert RoundRobinScheduler(time_quantum=3).choose(table, 3) is table[0]


def test_skips_done_jobs():
    table = _admitted((1, 0, 9), (2, 0, 1), (3, 0, 9))
    table[1].dispatch(0)
    table[1].complete(1)
    table[0].dispatch(1)
    assert RoundRobinScheduler(time_quantum=2).choose(table, 3) is table[2]


def test_lone_job_keeps_running_after_quantum():
    table = _admitted((1, 0, 9))
    table[0].dispatch(0)
    assert RoundRobinScheduler(time_quantum=3).choose(table, 5) is None


def test_time_quantum_is_configurable():
    assert RoundRobinScheduler(time_quantum=10).time_quantum == 10
    assert RoundRobinScheduler().time_quantum == 3


def test_non_positive_quantum_is_rejected():
    with pytest.raises(ValueError):
        RoundRobinScheduler(time_quantum=0)


def test_policy_name():
    assert RoundRobinScheduler().policy_name == "RR"
