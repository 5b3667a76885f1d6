"""Orchestration layer for the plot pipeline."""

from .coordinator import PlotCoordinator

__all__ = ["PlotCoordinator"]
