"""Job construction."""

from .builder import build_jobs, destination_for

__all__ = ["build_jobs", "destination_for"]
