"""
Simulation Engine — the core tick loop.

The engine is the only component that changes job state. For every tick
from 0 up to the horizon it executes, in this fixed order:

    1. Admission: UNKNOWN jobs whose arrival_time == tick become RUNNABLE
    2. Completion: the RUNNING job whose projected end <= tick becomes DONE
    3. Decision: the policy looks at the table and names a job (or None)
    4. Dispatch: if that job isn't the one running, preempt the
       incumbent and dispatch the chosen job
    5. Termination: stop as soon as every job is DONE

         Job Table                  Policy                    Job Table
    ┌──────────────┐  read   ┌──────────────────┐  job  ┌──────────────┐
    │ RUNNABLE /   │────────>│ FIFO/SJF/BJF/    │──────>│ preempt +    │
    │ RUNNING jobs │         │ STCF/RR choose() │       │ dispatch     │
    └──────────────┘         └──────────────────┘       └──────────────┘

The horizon bounds the loop, so a policy that never finishes the batch
still terminates. Such a run is returned with completed=False rather than
raised as an error.

Every transition is logged at DEBUG level; run with --trace to see the
tick-by-tick trace.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from config.settings import settings
from models.enums import JobStatus, SchedulingPolicy
from models.job import Job, JobTable
from scheduler.base import AbstractScheduler
from scheduler.registry import create_scheduler

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Final state of one policy run, handed to the reporter."""

    policy: str
    table: JobTable
    horizon: int
    ticks_elapsed: int
    completed: bool
    dispatches: int = 0
    preemptions: int = 0

    @property
    def incomplete_jobs(self) -> list[Job]:
        return [job for job in self.table if not job.is_done]


class SimulationEngine:
    """
    Drives one scheduler over one job table.

    The table passed in is mutated in place; callers that want to keep the
    loaded table pristine should pass table.fresh_copy() (run() does).
    """

    def __init__(self, scheduler: AbstractScheduler, table: JobTable, horizon: int):
        if horizon <= 0:
            raise ValueError("horizon must be strictly positive")
        self.scheduler = scheduler
        self.table = table
        self.horizon = horizon
        self._dispatches = 0
        self._preemptions = 0

    @property
    def _tag(self) -> str:
        return f"run{self.scheduler.policy_name}"

    def run(self) -> SimulationResult:
        name = self.scheduler.policy_name
        logger.info(f"Starting {name} run: {len(self.table)} jobs, horizon {self.horizon}")

        tick = 0
        finished = self.table.all_done()
        while not finished and tick < self.horizon:
            logger.debug(f"{self._tag}: ticker [{tick:03d}]")
            self._admit_arrivals(tick)
            self._complete_running(tick)
            chosen = self.scheduler.choose(self.table, tick)
            self._dispatch(chosen, tick)
            tick += 1
            finished = self.table.all_done()

        if finished:
            logger.debug(f"{self._tag}: ALL JOBS DONE")
            logger.info(f"{name} run finished after {tick} ticks")
        else:
            pending = sum(1 for job in self.table if not job.is_done)
            logger.warning(
                f"{name} run hit the horizon ({self.horizon} ticks) "
                f"with {pending} job(s) not done"
            )

        return SimulationResult(
            policy=name,
            table=self.table,
            horizon=self.horizon,
            ticks_elapsed=tick,
            completed=finished,
            dispatches=self._dispatches,
            preemptions=self._preemptions,
        )

    # ── Tick phases ─────────────────────────────────────────────

    def _admit_arrivals(self, tick: int) -> None:
        for job in self.table:
            if job.status is JobStatus.UNKNOWN and job.arrival_time == tick:
                job.admit(tick)
                logger.debug(f"{self._tag}: \tjob [{job.id}]: setting to RUNNABLE")

    def _complete_running(self, tick: int) -> None:
        running = self.table.running()
        if running is not None and running.projected_end <= tick:
            running.complete(tick)
            logger.debug(f"{self._tag}: \tjob [{running.id}]: setting to DONE")

    def _dispatch(self, chosen: Optional[Job], tick: int) -> None:
        running = self.table.running()
        if chosen is None:
            if running is None:
                logger.debug(f"{self._tag}: \tnothing to run")
            return
        if chosen is running:
            return

        if running is not None:
            running.preempt(tick)
            self._preemptions += 1
            logger.debug(
                f"{self._tag}: \tjob [{running.id}]: preempted, {running.time_left} ticks left"
            )

        chosen.dispatch(tick)
        self._dispatches += 1
        logger.debug(
            f"{self._tag}: \tjob [{chosen.id}]: start! end time {chosen.projected_end}"
        )


def run(
    policy: SchedulingPolicy | str,
    table: JobTable,
    *,
    horizon: Optional[int] = None,
    quantum: Optional[int] = None,
) -> SimulationResult:
    """
    Run one policy against a fresh copy of `table`.

    The caller's table is left untouched, so the same loaded table can be
    run under every policy in turn. horizon and quantum default to the
    values in config.settings.
    """
    policy = SchedulingPolicy.parse(policy)
    kwargs = {}
    if policy == SchedulingPolicy.RR:
        kwargs["time_quantum"] = quantum if quantum is not None else settings.ROUND_ROBIN_TIME_QUANTUM
    scheduler = create_scheduler(policy, **kwargs)

    engine = SimulationEngine(
        scheduler,
        table.fresh_copy(),
        horizon if horizon is not None else settings.SIMULATION_HORIZON,
    )
    return engine.run()
