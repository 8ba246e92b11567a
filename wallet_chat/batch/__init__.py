"""Batch-level utilities (configuration, key loading, runner)."""

from .config import BatchConfig
from .runner import BatchRunner, run_batch

__all__ = ["BatchConfig", "BatchRunner", "run_batch"]
