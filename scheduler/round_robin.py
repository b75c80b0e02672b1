"""
Round Robin (RR) scheduler.

Each job gets a fixed time quantum (3 ticks by default). When the running
job has held the CPU for a full quantum, the next RUNNABLE job after it in
table order gets the CPU, wrapping around to the start of the table:

    running = 2, table of 5 → scan 3, 4, 0, 1

If nobody else is RUNNABLE the running job simply keeps the CPU; it is not
re-dispatched, so its slice is not renewed and the next arrival takes over
immediately. When the CPU is free, the first RUNNABLE job in table order
runs.

Tradeoff: small quantum → very fair, lots of preemptions;
large quantum → approaches FIFO behavior.
"""

from typing import Optional

from models.enums import JobStatus
from models.job import Job, JobTable
from scheduler.base import AbstractScheduler


class RoundRobinScheduler(AbstractScheduler):

    def __init__(self, time_quantum: int = 3):
        if time_quantum <= 0:
            raise ValueError("time_quantum must be strictly positive")
        self.time_quantum = time_quantum

    def choose(self, table: JobTable, tick: int) -> Optional[Job]:
        running = table.running()
        if running is None:
            runnable = table.runnable()
            return runnable[0] if runnable else None

        if tick - running.last_started_time < self.time_quantum:
            return None

        start = table.index_of(running) + 1
        count = len(table)
        for offset in range(count):
            job = table[(start + offset) % count]
            if job.status is JobStatus.RUNNABLE:
                return job
        return None

    @property
    def policy_name(self) -> str:
        return "RR"
