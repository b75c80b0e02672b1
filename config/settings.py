"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., SIMULATION_HORIZON env var → Settings.SIMULATION_HORIZON)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
Command-line flags override these values for a single invocation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Input ───────────────────────────────────────────────────
    JOBS_FILE: str = "jobs.dat"
    JOB_COUNT_MAX: int = Field(default=100, gt=0)    # jobs beyond this are dropped

    # ── Simulation ──────────────────────────────────────────────
    SIMULATION_HORIZON: int = Field(default=100, gt=0)     # max ticks per run
    ROUND_ROBIN_TIME_QUANTUM: int = Field(default=3, gt=0)  # ticks per RR slice

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
