"""
Scheduler factory — maps policy names to scheduler classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
there is ONE place that knows how to create schedulers. The mapping is
exhaustive over SchedulingPolicy.
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.bjf import BJFScheduler
from scheduler.fifo import FIFOScheduler
from scheduler.round_robin import RoundRobinScheduler
from scheduler.sjf import SJFScheduler
from scheduler.stcf import STCFScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.FIFO: FIFOScheduler,
    SchedulingPolicy.SJF: SJFScheduler,
    SchedulingPolicy.BJF: BJFScheduler,
    SchedulingPolicy.STCF: STCFScheduler,
    SchedulingPolicy.RR: RoundRobinScheduler,
}


def create_scheduler(policy: SchedulingPolicy | str, **kwargs) -> AbstractScheduler:
    """
    Create a scheduler instance for the given policy.

    For Round Robin, you can pass time_quantum as a kwarg:
        create_scheduler(SchedulingPolicy.RR, time_quantum=4)

    For all others, kwargs are ignored.
    """
    policy = SchedulingPolicy.parse(policy)
    cls = _REGISTRY.get(policy)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {policy}")

    if policy == SchedulingPolicy.RR:
        return cls(**kwargs)
    return cls()


def available_policies() -> list[SchedulingPolicy]:
    """All registered policies, in the order runs are reported."""
    return list(_REGISTRY)
