"""Chart templates, one per mark family."""

from .bar import BarTemplate
from .pie import PieTemplate
from .scatter import ScatterTemplate

__all__ = [
    "BarTemplate",
    "PieTemplate",
    "ScatterTemplate",
]
