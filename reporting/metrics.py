"""
Pydantic schemas for simulation results.

These are NOT stored on the jobs; they are computed from the final state
of a finished run:
- JobMetrics: timing of one job (turnaround, response)
- RunSummary: aggregate numbers for one policy run

turnaround = end_time - arrival_time
response   = start_time - arrival_time

A job that is not DONE when the horizon is reached has no defined
turnaround or response. Both are None for it (never computed from the -1
sentinels) and completed is False.
"""

from statistics import mean
from typing import Optional

from pydantic import BaseModel

from models.job import Job, UNSET
from scheduler.engine import SimulationResult


class JobMetrics(BaseModel):
    """Per-job row of a run log."""

    id: int
    arrival_time: int
    duration: int
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    turnaround: Optional[int] = None
    response: Optional[int] = None
    completed: bool

    @classmethod
    def from_job(cls, job: Job) -> "JobMetrics":
        start = job.start_time if job.start_time != UNSET else None
        end = job.end_time if job.end_time != UNSET else None
        if not job.is_done:
            return cls(
                id=job.id,
                arrival_time=job.arrival_time,
                duration=job.duration,
                start_time=start,
                end_time=end,
                completed=False,
            )
        return cls(
            id=job.id,
            arrival_time=job.arrival_time,
            duration=job.duration,
            start_time=start,
            end_time=end,
            turnaround=job.end_time - job.arrival_time,
            response=job.start_time - job.arrival_time,
            completed=True,
        )


class RunSummary(BaseModel):
    """Aggregate statistics of one policy run, averaged over completed jobs."""

    policy: str
    job_count: int
    completed_count: int
    completed: bool
    avg_turnaround: Optional[float] = None
    avg_response: Optional[float] = None
    makespan: Optional[int] = None      # end tick of the last job to finish
    ticks_elapsed: int
    dispatches: int
    preemptions: int
    jobs: list[JobMetrics]


def build_job_metrics(result: SimulationResult) -> list[JobMetrics]:
    return [JobMetrics.from_job(job) for job in result.table]


def summarise(result: SimulationResult) -> RunSummary:
    rows = build_job_metrics(result)
    done = [row for row in rows if row.completed]

    return RunSummary(
        policy=result.policy,
        job_count=len(rows),
        completed_count=len(done),
        completed=result.completed,
        avg_turnaround=mean(row.turnaround for row in done) if done else None,
        avg_response=mean(row.response for row in done) if done else None,
        makespan=max(row.end_time for row in done) if done else None,
        ticks_elapsed=result.ticks_elapsed,
        dispatches=result.dispatches,
        preemptions=result.preemptions,
        jobs=rows,
    )
