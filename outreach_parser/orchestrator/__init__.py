"""Batch orchestration that runs the line parser over a whole pasted blob."""

from .service import BatchOrchestrator, parse_text

__all__ = ["BatchOrchestrator", "parse_text"]
