"""Color definitions for tabchart charts."""

from pydantic import BaseModel, ConfigDict


class StructuralColors(BaseModel):
    """Colors for chart structural elements (axes, ticks)."""

    model_config = ConfigDict(frozen=True)

    BACKGROUND: str = "#FFFFFF"
    AXIS_LINE: str = "#475569"
    TICK_LINE: str = "#CBD5E1"


class TextColors(BaseModel):
    """Colors for text elements."""

    model_config = ConfigDict(frozen=True)

    TITLE: str = "#0F172A"
    LEGEND: str = "#334155"
    AXIS_LABEL: str = "#1F2937"


# Categorical palette; contigs and long series lists cycle through it
QUALITATIVE_10: tuple[str, ...] = (
    "#08192D",
    "#2EA9DF",
    "#2D6D4B",
    "#F7C242",
    "#F75C2F",
    "#D0104C",
    "#6F3381",
    "#E03C8A",
    "#9C755F",
    "#BAB0AC",
)

FONT_STACK = "Noto Sans, DejaVu Sans, Liberation Sans, sans-serif"
