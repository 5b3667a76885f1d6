"""Enumerations for tabchart core types."""

from enum import Enum


class ChartKind(str, Enum):
    """Plot types, each bound to one input grammar."""

    PIE = "PIE"  # key/value -> slices
    SIMPLE_HISTOGRAM = "SIMPLE_HISTOGRAM"  # key/value -> one bar series
    HISTOGRAM = "HISTOGRAM"  # header + rows matrix -> grouped bars
    STACKED_HISTOGRAM = "STACKED_HISTOGRAM"  # header + rows matrix -> stacked bars
    XYV = "XYV"  # x/y/value triples -> grouped bars
    STACKED_XYV = "STACKED_XYV"  # x/y/value triples -> stacked bars
    BUBBLE = "BUBBLE"  # fixed-arity numeric tuples -> bubble/scatter
    BEDGRAPH = "BEDGRAPH"  # genomic intervals -> scatter along the genome

    @property
    def is_genomic(self) -> bool:
        """Whether this kind needs a contig dictionary."""
        return self is ChartKind.BEDGRAPH


class ErrorCode(str, Enum):
    """Application error codes for structured error responses."""

    E400_VALIDATION = "E400_VALIDATION"
    E404_DICTIONARY_MISSING = "E404_DICTIONARY_MISSING"
    E422_NO_DATA = "E422_NO_DATA"
    E424_INPUT_UNREADABLE = "E424_INPUT_UNREADABLE"
    E500_INTERNAL = "E500_INTERNAL"


class OutputFormat(str, Enum):
    """Supported output formats."""

    PNG = "png"
    SVG = "svg"
    JSON = "json"  # raw Vega-Lite specification


class Side(str, Enum):
    """Placement of the title or legend around the plot area."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class AxisKind(str, Enum):
    """Axis scale families."""

    CATEGORICAL = "categorical"
    NUMERIC = "numeric"


class MarkType(str, Enum):
    """Mark used to draw the assembled series."""

    ARC = "arc"
    BAR = "bar"
    POINT = "point"
    BUBBLE = "bubble"


class PipelinePhase(str, Enum):
    """Processing pipeline phases for tracking and logging."""

    CONFIGURATION = "configuration"
    DICTIONARY = "dictionary"
    INGESTION = "ingestion"
    ASSEMBLY = "assembly"
    RENDERING = "rendering"
    EXPORT = "export"
