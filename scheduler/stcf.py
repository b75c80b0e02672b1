"""
Shortest Time-to-Completion First (STCF) scheduler.

The preemptive version of SJF. Every tick, the running job and all
RUNNABLE jobs are compared by the work they still need; the smallest wins.
If that is not the running job, the engine preempts it.

Candidates are scanned in table order keeping the first strict
improvement. On an exact tie a lower-index RUNNABLE job therefore
displaces a higher-index running job, e.g.

    job 0: 4 ticks left (RUNNABLE)
    job 1: 4 ticks left (RUNNING)    → job 0 is chosen, job 1 is preempted
"""

from typing import Optional

from models.enums import JobStatus
from models.job import Job, JobTable
from scheduler.base import AbstractScheduler, first_by


class STCFScheduler(AbstractScheduler):

    def choose(self, table: JobTable, tick: int) -> Optional[Job]:
        candidates = [
            job for job in table
            if job.status in (JobStatus.RUNNABLE, JobStatus.RUNNING)
        ]
        return first_by(candidates, lambda job: job.remaining_at(tick))

    @property
    def policy_name(self) -> str:
        return "STCF"
