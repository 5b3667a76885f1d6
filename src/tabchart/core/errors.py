"""Error handling and exception definitions for tabchart."""

from pathlib import Path

from .enums import ChartKind, ErrorCode, PipelinePhase
from .models import ErrorDetail, ErrorResponse


class TabchartError(Exception):
    """Base exception for all tabchart errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
        phase: PipelinePhase | None = None,
    ):
        """Initialize tabchart error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Optional detailed error information
            hint: Optional correction hint for the user
            phase: Optional pipeline phase where error occurred
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.hint = hint
        self.phase = phase

    def to_error_response(self) -> ErrorResponse:
        """Convert exception to ErrorResponse model."""
        return ErrorResponse(
            code=self.code.value,
            message=self.message,
            details=self.details if self.details else None,
            hint=self.hint,
            phase=self.phase.value if self.phase else None,
        )


class ValidationError(TabchartError):
    """Raised when the plot configuration is invalid."""

    def __init__(
        self,
        message: str,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
    ):
        """Initialize validation error."""
        super().__init__(
            message=message,
            code=ErrorCode.E400_VALIDATION,
            details=details,
            hint=hint,
            phase=PipelinePhase.CONFIGURATION,
        )


class DictionaryMissingError(TabchartError):
    """Raised when a contig dictionary is required but absent or empty."""

    def __init__(self, message: str, path: Path | None = None):
        """Initialize dictionary missing error."""
        hint = "Provide a reference with --reference (a .dict, a .fai, an indexed FASTA or a VCF header)"
        details = [ErrorDetail(field="reference", reason=str(path))] if path else None
        super().__init__(
            message=message,
            code=ErrorCode.E404_DICTIONARY_MISSING,
            details=details,
            hint=hint,
            phase=PipelinePhase.DICTIONARY,
        )


class InputReadError(TabchartError):
    """Raised when the input stream cannot be opened or read."""

    def __init__(self, message: str, source: str | None = None):
        """Initialize input read error."""
        hint = None
        if source:
            hint = f"Check that '{source}' exists and is readable text"
        super().__init__(
            message=message,
            code=ErrorCode.E424_INPUT_UNREADABLE,
            hint=hint,
            phase=PipelinePhase.INGESTION,
        )


class NoDataError(TabchartError):
    """Raised when a full pass over the input produced nothing to plot."""

    def __init__(self, kind: ChartKind, message: str | None = None):
        """Initialize no data error."""
        super().__init__(
            message=message or f"No usable data for a {kind.value} chart",
            code=ErrorCode.E422_NO_DATA,
            hint=_INPUT_HINTS.get(kind),
            phase=PipelinePhase.INGESTION,
        )
        self.kind = kind


class ChartBuildError(TabchartError):
    """Raised when chart building fails."""

    def __init__(self, message: str, hint: str | None = None):
        """Initialize chart build error."""
        super().__init__(
            message=message,
            code=ErrorCode.E500_INTERNAL,
            hint=hint or "Failed to build the chart from the assembled data.",
            phase=PipelinePhase.RENDERING,
        )


class ExportError(TabchartError):
    """Raised when chart export fails."""

    def __init__(
        self,
        message: str,
        format: str | None = None,  # noqa: A002
    ):
        """Initialize export error."""
        hint = "Failed to export the chart."
        if format:
            hint = f"Failed to export chart as {format}. Try another output format."
        super().__init__(
            message=message,
            code=ErrorCode.E500_INTERNAL,
            hint=hint,
            phase=PipelinePhase.EXPORT,
        )


_INPUT_HINTS: dict[ChartKind, str] = {
    ChartKind.PIE: "Expected KEY<tab>VALUE lines, or `sort | uniq -c` output with --sort-unique",
    ChartKind.SIMPLE_HISTOGRAM: "Expected KEY<tab>VALUE lines, or `sort | uniq -c` output with --sort-unique",
    ChartKind.HISTOGRAM: "Expected a header line with at least two columns followed by data rows",
    ChartKind.STACKED_HISTOGRAM: "Expected a header line with at least two columns followed by data rows",
    ChartKind.XYV: "Expected X<tab>Y<tab>VALUE lines, or `sort | uniq -c` output of X<tab>Y",
    ChartKind.STACKED_XYV: "Expected X<tab>Y<tab>VALUE lines, or `sort | uniq -c` output of X<tab>Y",
    ChartKind.BUBBLE: "Expected lines with numeric columns",
    ChartKind.BEDGRAPH: (
        "Expected CHROM<tab>START<tab>END<tab>VALUE lines, or CHROM<tab>POS<tab>VALUE with --chrom-position"
    ),
}
