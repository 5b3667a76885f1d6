"""Chart builder module for rendering assembled chart data."""

from .base import BaseTemplate
from .builder import ChartBuilder
from .themes import Theme

__all__ = [
    "BaseTemplate",
    "ChartBuilder",
    "Theme",
]
