"""
Biggest Job First (BJF) scheduler.

The mirror image of SJF: whenever the CPU is free, the RUNNABLE job with
the largest duration runs next, to completion. Equal durations go to the
lowest table index.

Nobody would ship this. It is here as the worst-case baseline that makes
the SJF and STCF numbers meaningful in the comparison table.
"""

from models.job import Job
from scheduler.base import NonPreemptiveScheduler


class BJFScheduler(NonPreemptiveScheduler):

    def sort_key(self, job: Job) -> int:
        return -job.duration

    @property
    def policy_name(self) -> str:
        return "BJF"
