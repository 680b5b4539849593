"""Observability helpers for property loads."""

from .logger import LoadLogger

__all__ = ["LoadLogger"]
