"""
Abstract base class for all scheduling policies (Strategy pattern).

The SimulationEngine only knows about AbstractScheduler. Once per tick it
calls choose(table, tick) without caring whether it's FIFO, STCF, etc.

The contract:
- choose() READS the job table; it never mutates a job
- returning None means "leave the CPU as it is" (keep running the current
  job, or stay idle when nothing is running)
- returning a job means "this job should hold the CPU from this tick on";
  if another job is running, the engine preempts it

The set of policies is closed: exactly one class per SchedulingPolicy
member, wired together in scheduler/registry.py.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from models.job import Job, JobTable


def first_by(candidates: Iterable[Job], key: Callable[[Job], int]) -> Optional[Job]:
    """
    Return the candidate with the smallest key, lowest table index on ties.

    Candidates must be given in table order. The scan keeps the first
    strict improvement, so a later job with an equal key never replaces an
    earlier one. Pass a negated key to select the largest value instead.
    """
    best: Optional[Job] = None
    best_key = 0
    for job in candidates:
        k = key(job)
        if best is None or k < best_key:
            best, best_key = job, k
    return best


class AbstractScheduler(ABC):

    @abstractmethod
    def choose(self, table: JobTable, tick: int) -> Optional[Job]:
        """Pick the job that should run at `tick`, or None to change nothing."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Name of this policy as shown in run logs (e.g. 'FIFO', 'RR')."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.policy_name}>"


class NonPreemptiveScheduler(AbstractScheduler):
    """
    Shared shape of FIFO, SJF and BJF.

    While any job is RUNNING the answer is always None, so a dispatched job
    keeps the CPU until it completes. Otherwise the RUNNABLE job with the
    smallest sort_key() wins, ties going to the lowest table index.
    """

    def choose(self, table: JobTable, tick: int) -> Optional[Job]:
        if table.running() is not None:
            return None
        return first_by(table.runnable(), self.sort_key)

    @abstractmethod
    def sort_key(self, job: Job) -> int:
        ...
