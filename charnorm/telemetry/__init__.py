"""Telemetry scaffolds.

This package emits deterministic inspection events for auditing.
"""

from .logger import InspectionLogger

__all__ = ["InspectionLogger"]
