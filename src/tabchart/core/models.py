"""Pydantic models for tabchart configuration and chart structures."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .enums import AxisKind, ChartKind, MarkType, OutputFormat, Side


class PlotOptions(BaseModel):
    """Configuration for a single plot-generation request."""

    kind: ChartKind = Field(..., description="Chart type, selects the input grammar")
    input_path: Path | None = Field(default=None, description="Input file, stdin when absent")
    sort_unique: bool = Field(default=False, description="Input is the output of `sort | uniq -c`")
    chrom_position: bool = Field(default=False, description="Genomic input is CHROM/POS/VALUE, not BED")
    delimiter: str = Field(default="\t", description="Field delimiter")
    xlabel: str | None = Field(default=None, description="X axis label")
    ylabel: str | None = Field(default=None, description="Y axis label")
    title: str = Field(default="", description="Chart title")
    title_side: Side = Field(default=Side.TOP, description="Title placement")
    legend_side: Side = Field(default=Side.RIGHT, description="Legend placement")
    hide_legend: bool = Field(default=False, description="Hide the legend")
    reference: Path | None = Field(default=None, description="Reference dictionary, FASTA index or VCF")
    min_contig_size: int = Field(default=-1, description="Drop contigs shorter than this; -1 keeps all")
    bubble_columns: int = Field(default=2, ge=2, description="Number of numeric columns per bubble record")
    output: Path | None = Field(default=None, description="Output file")
    format: OutputFormat | None = Field(default=None, description="Output format, inferred when absent")
    width: int | None = Field(default=None, ge=100, le=4000, description="Chart width in pixels")
    height: int | None = Field(default=None, ge=100, le=4000, description="Chart height in pixels")
    dpi: int | None = Field(default=None, ge=72, le=600, description="Dots per inch for PNG output")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """A delimiter is exactly one character."""
        if len(v) != 1:
            raise ValueError("Delimiter must be a single character")
        return v

    def resolve_format(self, default: OutputFormat) -> OutputFormat:
        """Pick the output format: explicit, then output suffix, then default."""
        if self.format is not None:
            return self.format
        if self.output is not None:
            suffix = self.output.suffix.lower()
            if suffix == ".svg":
                return OutputFormat.SVG
            if suffix == ".png":
                return OutputFormat.PNG
            if suffix == ".json":
                return OutputFormat.JSON
        return default


class AxisSpec(BaseModel):
    """Axis description handed to the renderer."""

    kind: AxisKind = Field(..., description="Categorical or numeric scale")
    label: str | None = Field(default=None, description="Axis title")
    lower: float | None = Field(default=None, description="Lower bound of a numeric axis")
    upper: float | None = Field(default=None, description="Upper bound of a numeric axis")
    tick: float | None = Field(default=None, description="Suggested tick spacing")

    @property
    def is_degenerate(self) -> bool:
        """True when a numeric range collapses to a single value."""
        return self.kind == AxisKind.NUMERIC and self.lower is not None and self.lower == self.upper


class DataPoint(BaseModel):
    """One drawable point; x is a category label or a number."""

    x: str | float
    y: float
    size: float | None = None


class Series(BaseModel):
    """Named sequence of points drawn with the same color."""

    name: str
    points: list[DataPoint] = Field(default_factory=list)


class ChartData(BaseModel):
    """Chart-ready structure produced by the assembler."""

    kind: ChartKind
    mark: MarkType
    series: list[Series] = Field(default_factory=list)
    x_axis: AxisSpec | None = None
    y_axis: AxisSpec | None = None
    stacked: bool = False


class PlotResult(BaseModel):
    """Outcome of a plot-generation request."""

    kind: ChartKind
    format: OutputFormat
    series_count: int = Field(..., ge=0)
    point_count: int = Field(..., ge=0)
    output: Path | None = None
    content: str | bytes | None = Field(default=None, description="Exported chart when no output file was given")
    duration_ms: dict[str, float] = Field(default_factory=dict, description="Phase durations in milliseconds")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    reason: str | None = Field(default=None, description="Detailed reason for the error")
    suggestion: str | None = Field(default=None, description="Suggested correction")


class ErrorResponse(BaseModel):
    """Serializable view of an error."""

    code: str = Field(..., description="Error code (e.g., E422_NO_DATA)")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(default=None, description="Detailed error information")
    hint: str | None = Field(default=None, description="Correction hint for the user")
    phase: str | None = Field(default=None, description="Pipeline phase where error occurred")
