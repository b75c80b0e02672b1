"""
First In First Out (FIFO) scheduler.

The simplest scheduling policy: jobs run in the order they arrive, each
one to completion. Among RUNNABLE jobs the earliest arrival_time wins;
jobs arriving on the same tick go in table order.

Downside: a long-running job blocks everything behind it
(the "convoy effect").
"""

from models.job import Job
from scheduler.base import NonPreemptiveScheduler


class FIFOScheduler(NonPreemptiveScheduler):

    def sort_key(self, job: Job) -> int:
        return job.arrival_time

    @property
    def policy_name(self) -> str:
        return "FIFO"
