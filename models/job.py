"""
Job record and Job Table — the shared mutable state of one simulation run.

A Job carries two kinds of fields:
- specs (id, arrival_time, duration): fixed when the job file is loaded
- scheduling state (status, start/end times, progress counters): owned by
  the simulation engine and changed only through the transition methods

State machine:

    UNKNOWN ──admit──> RUNNABLE ──dispatch──> RUNNING ──complete──> DONE
                          ^                      │
                          └───────preempt────────┘

Progress is accounted lazily: while a job is RUNNING its time_running and
time_left are not touched every tick. They are brought up to date when the
job is preempted or completes, so time_running + time_left == duration
holds at every tick after admission.

The Job Table keeps jobs in input order. That order is the tie-break used
by every policy (lowest index wins), so the table never re-sorts itself.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from models.enums import JobStatus

UNSET = -1


class InvalidTransitionError(RuntimeError):
    """Raised when a job is asked to make a transition its state forbids."""


@dataclass
class Job:
    id: int
    arrival_time: int
    duration: int

    status: JobStatus = JobStatus.UNKNOWN
    start_time: int = UNSET
    end_time: int = UNSET
    time_running: int = 0
    time_left: int = 0
    last_started_time: int = UNSET
    projected_end: int = UNSET

    # ── Transitions ─────────────────────────────────────────────

    def admit(self, tick: int) -> None:
        if self.status is not JobStatus.UNKNOWN or tick != self.arrival_time:
            raise InvalidTransitionError(
                f"Cannot admit job {self.id} at tick {tick} "
                f"(status {self.status.value}, arrival {self.arrival_time})"
            )
        self.status = JobStatus.RUNNABLE
        self.time_running = 0
        self.time_left = self.duration
        self.last_started_time = UNSET

    def dispatch(self, tick: int) -> None:
        if self.status is not JobStatus.RUNNABLE:
            raise InvalidTransitionError(
                f"Cannot dispatch job {self.id} in {self.status.value} state"
            )
        self.status = JobStatus.RUNNING
        if self.start_time == UNSET:
            self.start_time = tick
        self.last_started_time = tick
        self.projected_end = tick + self.time_left

    def preempt(self, tick: int) -> None:
        if self.status is not JobStatus.RUNNING:
            raise InvalidTransitionError(
                f"Cannot preempt job {self.id} in {self.status.value} state"
            )
        self._account(tick)
        self.status = JobStatus.RUNNABLE
        self.projected_end = UNSET

    def complete(self, tick: int) -> None:
        if self.status is not JobStatus.RUNNING or self.projected_end > tick:
            raise InvalidTransitionError(
                f"Cannot complete job {self.id} at tick {tick} "
                f"(status {self.status.value}, projected end {self.projected_end})"
            )
        # The final slice is always exactly the remaining work.
        self.time_running = self.duration
        self.time_left = 0
        self.end_time = tick
        self.status = JobStatus.DONE

    def _account(self, tick: int) -> None:
        ran = tick - self.last_started_time
        self.time_running += ran
        self.time_left -= ran

    # ── Read-only helpers (safe for policies) ───────────────────

    @property
    def is_done(self) -> bool:
        return self.status is JobStatus.DONE

    def remaining_at(self, tick: int) -> int:
        """
        Ticks of work still needed as seen at `tick`.

        For the RUNNING job the stored time_left is stale (it was last
        refreshed at dispatch), so the ticks run since then are subtracted.
        """
        if self.status is JobStatus.RUNNING:
            return self.time_left - (tick - self.last_started_time)
        return self.time_left

    def reset(self) -> "Job":
        """Return a copy of this job with load-time scheduling state."""
        return Job(id=self.id, arrival_time=self.arrival_time, duration=self.duration)

    def __repr__(self) -> str:
        return f"<Job {self.id} [arr={self.arrival_time} dur={self.duration}] {self.status.value}>"


@dataclass
class JobTable:
    """Ordered collection of jobs; the list index is the tie-break key."""

    jobs: list[Job] = field(default_factory=list)

    @classmethod
    def from_specs(cls, specs: Iterable[tuple[int, int, int]]) -> "JobTable":
        """Build a table from (id, arrival_time, duration) triples, in order."""
        return cls([Job(id=i, arrival_time=a, duration=d) for i, a, d in specs])

    def fresh_copy(self) -> "JobTable":
        """
        Independent copy with every job back at its load-time state.

        Each policy run gets one of these so that runs never observe each
        other's mutations.
        """
        return JobTable([job.reset() for job in self.jobs])

    def running(self) -> Optional[Job]:
        for job in self.jobs:
            if job.status is JobStatus.RUNNING:
                return job
        return None

    def runnable(self) -> list[Job]:
        return [job for job in self.jobs if job.status is JobStatus.RUNNABLE]

    def all_done(self) -> bool:
        return all(job.is_done for job in self.jobs)

    def index_of(self, job: Job) -> int:
        for i, candidate in enumerate(self.jobs):
            if candidate is job:
                return i
        raise ValueError(f"{job!r} is not in this table")

    def __iter__(self) -> Iterator[Job]:
        return iter(self.jobs)

    def __len__(self) -> int:
        return len(self.jobs)

    def __getitem__(self, index: int) -> Job:
        return self.jobs[index]
