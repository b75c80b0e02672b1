"""
Shared test fixtures.

The simulator has no infrastructure to fake: everything runs in memory.
These fixtures just provide the job batches that several test modules
reuse, either as a ready JobTable or as a file on disk for the loader
and the CLI.
"""

import pytest

from models.job import JobTable

# (id, arrival_time, duration), same batch as the jobs.dat shipped at the repo root
SAMPLE_JOBS = [
    (1, 0, 3),
    (2, 2, 6),
    (3, 4, 4),
    (4, 6, 5),
    (5, 8, 2),
]


@pytest.fixture
def sample_table() -> JobTable:
    """A freshly loaded five-job batch."""
    return JobTable.from_specs(SAMPLE_JOBS)


@pytest.fixture
def jobs_file(tmp_path):
    """The sample batch written to a job file, one triple per line."""
    path = tmp_path / "jobs.dat"
    path.write_text("".join(f"{i} {a} {d}\n" for i, a, d in SAMPLE_JOBS))
    return path
