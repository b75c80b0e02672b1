"""
Tests for the Job state machine and the Job Table.

Jobs move UNKNOWN → RUNNABLE → RUNNING → DONE, with RUNNING → RUNNABLE on
preemption. Every other move must be refused.
"""

import pytest

from models.enums import JobStatus
from models.job import InvalidTransitionError, Job, JobTable


def _make_job(job_id: int = 1, arrival: int = 0, duration: int = 10) -> Job:
    return Job(id=job_id, arrival_time=arrival, duration=duration)


def test_new_job_has_load_time_state():
    job = _make_job()
    assert job.status is JobStatus.UNKNOWN
    assert job.start_time == -1
    assert job.end_time == -1
    assert job.projected_end == -1


def test_admit_initializes_progress():
    job = _make_job(arrival=3, duration=7)
    job.admit(3)

    assert job.status is JobStatus.RUNNABLE
    assert job.time_running == 0
    assert job.time_left == 7
    assert job.last_started_time == -1


def test_admit_before_arrival_is_refused():
    job = _make_job(arrival=3)
    with pytest.raises(InvalidTransitionError, match="Cannot admit"):
        job.admit(2)


def test_dispatch_sets_start_and_projected_end():
    job = _make_job(arrival=2, duration=5)
    job.admit(2)
    job.dispatch(4)

    assert job.status is JobStatus.RUNNING
    assert job.start_time == 4
    assert job.last_started_time == 4
    assert job.projected_end == 9


def test_dispatch_unknown_job_is_refused():
    with pytest.raises(InvalidTransitionError, match="Cannot dispatch"):
        _make_job().dispatch(0)


def test_preempt_saves_progress():
    job = _make_job(duration=10)
    job.admit(0)
    job.dispatch(0)
    job.preempt(2)

    assert job.status is JobStatus.RUNNABLE
    assert job.time_running == 2
    assert job.time_left == 8
    assert job.time_running + job.time_left == job.duration
    assert job.end_time == -1
    assert job.projected_end == -1


def test_redispatch_keeps_first_start_time():
    job = _make_job(duration=10)
    job.admit(0)
    job.dispatch(0)
    job.preempt(2)
    job.dispatch(5)

    assert job.start_time == 0          # set once, on first dispatch
    assert job.last_started_time == 5
    assert job.projected_end == 13      # 5 + 8 ticks left


def test_preempt_idle_job_is_refused():
    job = _make_job()
    job.admit(0)
    with pytest.raises(InvalidTransitionError, match="Cannot preempt"):
        job.preempt(1)


def test_complete_freezes_final_state():
    job = _make_job(duration=4)
    job.admit(0)
    job.dispatch(0)
    job.preempt(1)
    job.dispatch(2)
    job.complete(5)

    assert job.status is JobStatus.DONE
    assert job.is_done
    assert job.end_time == 5
    assert job.time_left == 0
    assert job.time_running == job.duration


def test_complete_before_projected_end_is_refused():
    job = _make_job(duration=4)
    job.admit(0)
    job.dispatch(0)
    with pytest.raises(InvalidTransitionError, match="Cannot complete"):
        job.complete(3)


def test_remaining_at_counts_ticks_of_running_job():
    job = _make_job(duration=10)
    job.admit(0)
    job.dispatch(0)
    assert job.remaining_at(4) == 6

    job.preempt(4)
    assert job.remaining_at(7) == 6     # not running, nothing consumed


def test_table_from_specs_preserves_input_order():
    table = JobTable.from_specs([(9, 5, 1), (3, 0, 2), (7, 1, 3)])
    assert [job.id for job in table] == [9, 3, 7]
    assert len(table) == 3
    assert table[1].arrival_time == 0


def test_fresh_copy_is_independent_and_reset():
    table = JobTable.from_specs([(1, 0, 3), (2, 0, 4)])
    table[0].admit(0)
    table[0].dispatch(0)

    copy = table.fresh_copy()

    assert [job.id for job in copy] == [1, 2]
    assert all(job.status is JobStatus.UNKNOWN for job in copy)
    assert copy[0] is not table[0]
    assert table[0].status is JobStatus.RUNNING   # original untouched


def test_table_queries():
    table = JobTable.from_specs([(1, 0, 3), (2, 0, 4), (3, 5, 1)])
    table[0].admit(0)
    table[1].admit(0)
    table[1].dispatch(0)

    assert table.running() is table[1]
    assert table.runnable() == [table[0]]
    assert not table.all_done()


def test_index_of_uses_identity():
    # Two jobs with identical fields compare equal but sit at different indexes
    table = JobTable.from_specs([(1, 0, 3), (1, 0, 3)])
    assert table.index_of(table[1]) == 1

    with pytest.raises(ValueError):
        table.index_of(_make_job())


def test_empty_table_is_all_done():
    assert JobTable().all_done()
