"""
Plain-text run log and policy comparison table.

Run log, one block per policy:

    Run log for FIFO:
    Job id 01 start/finish 00 - 03, total 03, response 00
    Job id 02 start/finish 03 - 09, total 07, response 01

Jobs the horizon cut short print "--" for their undefined values and are
marked "(incomplete)". The output depends only on the final job state, so
two runs of the same policy over the same input give identical text.
"""

from typing import Iterable, Optional

from reporting.metrics import JobMetrics, RunSummary


def _fmt(value: Optional[int]) -> str:
    return "--" if value is None else f"{value:02d}"


def format_job_line(row: JobMetrics) -> str:
    line = (
        f"Job id {row.id:02d} start/finish {_fmt(row.start_time)} - {_fmt(row.end_time)}, "
        f"total {_fmt(row.turnaround)}, response {_fmt(row.response)}"
    )
    if not row.completed:
        line += " (incomplete)"
    return line


def format_run_log(summary: RunSummary) -> str:
    lines = [f"Run log for {summary.policy}:"]
    lines.extend(format_job_line(row) for row in summary.jobs)
    return "\n".join(lines) + "\n"


def format_comparison(summaries: Iterable[RunSummary]) -> str:
    """Side-by-side averages, one row per policy."""
    header = "{:<8} {:>10} {:>10} {:>9} {:>8} {:>11}".format(
        "Policy", "Turnaround", "Response", "Makespan", "Done", "Preemptions"
    )
    lines = [header, "-" * len(header)]
    for s in summaries:
        lines.append("{:<8} {:>10} {:>10} {:>9} {:>8} {:>11}".format(
            s.policy,
            "--" if s.avg_turnaround is None else f"{s.avg_turnaround:.2f}",
            "--" if s.avg_response is None else f"{s.avg_response:.2f}",
            "--" if s.makespan is None else s.makespan,
            f"{s.completed_count}/{s.job_count}",
            s.preemptions,
        ))
    return "\n".join(lines) + "\n"
