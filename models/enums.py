"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("DONE", not "JobStatus.DONE")
- They work directly as argparse choices and pydantic fields
- Typos become immediate errors instead of silent bugs
"""

import enum


class JobStatus(str, enum.Enum):
    UNKNOWN = "UNKNOWN"      # loaded, arrival tick not reached yet
    RUNNABLE = "RUNNABLE"    # arrived, waiting for the CPU
    RUNNING = "RUNNING"      # holds the CPU (at most one job at a time)
    DONE = "DONE"            # finished, terminal


class SchedulingPolicy(str, enum.Enum):
    FIFO = "FIFO"    # First In First Out, non-preemptive, by arrival time
    SJF = "SJF"      # Shortest Job First, non-preemptive, by duration
    BJF = "BJF"      # Biggest Job First, non-preemptive, by duration (worst case baseline)
    STCF = "STCF"    # Shortest Time-to-Completion First, preemptive every tick
    RR = "RR"        # Round Robin, preemptive when the time quantum expires

    @classmethod
    def parse(cls, value: "str | SchedulingPolicy") -> "SchedulingPolicy":
        """Accept an enum member or a case-insensitive policy name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown scheduling policy: '{value}'. "
                f"Available: {[p.value for p in cls]}"
            ) from None
