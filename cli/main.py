"""
Command-line entry point.

Loads the job file once, then runs each requested policy against its own
fresh copy of the table and prints the run logs followed by a comparison
table.

Usage:
    python -m cli.main                              # all policies, jobs.dat
    python -m cli.main --policy stcf                # single policy
    python -m cli.main --jobs-file batch.dat --quantum 2
    python -m cli.main --json                       # machine-readable output
    python -m cli.main --trace                      # tick-by-tick trace on stderr

Defaults come from config.settings (environment / .env); flags override
them for this invocation.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from config.settings import settings
from jobs.loader import JobFileError, load_jobs
from models.enums import SchedulingPolicy
from reporting.metrics import summarise
from reporting.run_log import format_comparison, format_run_log
from scheduler.engine import run
from scheduler.registry import available_policies

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tick-based CPU scheduling simulator")
    parser.add_argument(
        "--policy", type=str.upper, default="ALL",
        choices=[p.value for p in SchedulingPolicy] + ["ALL"],
        help="Which policy to simulate (default: all)",
    )
    parser.add_argument(
        "--jobs-file", type=str, default=settings.JOBS_FILE,
        help=f"Job file of (id, arrival, duration) triples (default: {settings.JOBS_FILE})",
    )
    parser.add_argument(
        "--horizon", type=int, default=settings.SIMULATION_HORIZON,
        help=f"Maximum ticks per run (default: {settings.SIMULATION_HORIZON})",
    )
    parser.add_argument(
        "--quantum", type=int, default=settings.ROUND_ROBIN_TIME_QUANTUM,
        help=f"Round Robin time quantum in ticks (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument(
        "--max-jobs", type=int, default=settings.JOB_COUNT_MAX,
        help=f"Jobs beyond this count are ignored (default: {settings.JOB_COUNT_MAX})",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--trace", action="store_true", help="Log every tick (DEBUG level)")

    args = parser.parse_args(argv)
    for name in ("horizon", "quantum", "max_jobs"):
        if getattr(args, name) <= 0:
            parser.error(f"--{name.replace('_', '-')} must be a positive integer")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.trace else getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        table = load_jobs(args.jobs_file, max_count=args.max_jobs)
    except JobFileError as e:
        logger.error(f"Cannot load jobs: {e}")
        return 1

    if args.policy == "ALL":
        policies = available_policies()
    else:
        policies = [SchedulingPolicy(args.policy)]

    summaries = [
        summarise(run(policy, table, horizon=args.horizon, quantum=args.quantum))
        for policy in policies
    ]

    if args.json:
        print(json.dumps([s.model_dump() for s in summaries], indent=2))
        return 0

    for summary in summaries:
        print(format_run_log(summary))
    print(format_comparison(summaries), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
