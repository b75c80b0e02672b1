"""
Job file loader.

The input is a stream of whitespace-separated integers read three at a
time as (id, arrival_time, duration), up to end of input:

    1 0 3
    2 2 6    3 4 4

Line breaks carry no meaning. Every triple is validated through the
JobSpec pydantic model before it becomes a Job; anything the simulator
can't run (a dangling number, a non-integer token, a negative arrival,
a negative duration, a repeated id) makes the whole file invalid.

Reading stops after max_count jobs; whatever follows is dropped without
being looked at.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from config.settings import settings
from models.job import Job, JobTable

logger = logging.getLogger(__name__)


class JobFileError(Exception):
    """The job file can't be read or doesn't describe a valid batch."""


class JobSpec(BaseModel):
    """One (id, arrival_time, duration) triple from the job file."""

    id: int
    arrival_time: int = Field(ge=0)
    duration: int = Field(ge=0)

    model_config = {"frozen": True}


def parse_jobs(text: str, max_count: Optional[int] = None, source: str = "<input>") -> JobTable:
    """Parse job triples from a string into a JobTable, in input order."""
    max_count = max_count if max_count is not None else settings.JOB_COUNT_MAX

    tokens = text.split()
    jobs: list[Job] = []
    seen: set[int] = set()
    for offset in range(0, len(tokens), 3):
        if len(jobs) == max_count:
            logger.debug(f"{source}: keeping the first {max_count} jobs, ignoring the rest")
            break

        triple = tokens[offset:offset + 3]
        if len(triple) < 3:
            raise JobFileError(
                f"{source}: expected (id, arrival, duration) triples, "
                f"got {len(tokens)} numbers"
            )
        try:
            job_id, arrival, duration = (int(token) for token in triple)
        except ValueError as e:
            raise JobFileError(f"{source}: {e}") from e

        try:
            spec = JobSpec(id=job_id, arrival_time=arrival, duration=duration)
        except ValidationError as e:
            raise JobFileError(f"{source}: invalid job #{offset // 3 + 1}: {e}") from e
        if spec.id in seen:
            raise JobFileError(f"{source}: duplicate job id {spec.id}")
        seen.add(spec.id)

        jobs.append(Job(id=spec.id, arrival_time=spec.arrival_time, duration=spec.duration))

    logger.info(f"Loaded {len(jobs)} jobs from {source}")
    return JobTable(jobs)


def load_jobs(path: str | Path, max_count: Optional[int] = None) -> JobTable:
    """Read and parse a job file. Raises JobFileError if it can't be opened."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or e
        raise JobFileError(f"cannot open file [{path}] for reading: {reason}") from e
    return parse_jobs(text, max_count=max_count, source=str(path))
