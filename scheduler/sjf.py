"""
Shortest Job First (SJF) scheduler.

Whenever the CPU is free, the RUNNABLE job with the smallest duration runs
next, to completion. Equal durations go to the lowest table index.

This minimizes average turnaround when all jobs arrive together.

Downside: starvation, since a long job may wait as long as shorter jobs
keep arriving.
"""

from models.job import Job
from scheduler.base import NonPreemptiveScheduler


class SJFScheduler(NonPreemptiveScheduler):

    def sort_key(self, job: Job) -> int:
        return job.duration

    @property
    def policy_name(self) -> str:
        return "SJF"
