"""Coordinator for the plot pipeline.

Phases run in a fixed order: the contig dictionary is resolved first (only
for genomic plots, so a missing reference fails before any input is read),
then the input is ingested in one pass, assembled, rendered and exported.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from tabchart.core.aggregates import NO_DATA
from tabchart.core.chart_builder import ChartBuilder
from tabchart.core.enums import OutputFormat, PipelinePhase
from tabchart.core.errors import ExportError, NoDataError
from tabchart.core.models import PlotOptions, PlotResult
from tabchart.genome import ContigDictionary, load_dictionary
from tabchart.infra.line_source import LineSource, open_line_source
from tabchart.infra.logging import get_logger
from tabchart.infra.settings import RenderSettings
from tabchart.processing import assemble, create_grammar, ingest

logger = get_logger(__name__)


class PlotCoordinator:
    """Runs one plot-generation request from input text to exported chart."""

    def __init__(self, settings: RenderSettings | None = None, builder: ChartBuilder | None = None) -> None:
        """Initialize the coordinator.

        Args:
            settings: Rendering defaults; read from the environment when absent.
            builder: Chart builder; a default one is created when absent.
        """
        self.settings = settings or RenderSettings()
        self.builder = builder or ChartBuilder()
        self._durations: dict[str, float] = {}

    @contextmanager
    def _phase(self, phase: PipelinePhase) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            self._durations[phase.value] = elapsed
            logger.debug("Phase finished", phase=phase.value, duration_ms=round(elapsed, 3))

    def resolve_dictionary(self, options: PlotOptions) -> ContigDictionary | None:
        """Load the contig dictionary when the chart kind needs one."""
        if not options.kind.is_genomic:
            return None
        return load_dictionary(options.reference, options.min_contig_size)

    def run(self, options: PlotOptions, source: LineSource | None = None) -> PlotResult:
        """Produce a chart for `options`.

        Args:
            options: Plot configuration.
            source: Line source to read; opened from `options.input_path` when absent.

        Returns:
            PlotResult describing the exported chart.

        Raises:
            DictionaryMissingError: Genomic plot without a usable reference.
            InputReadError: The input cannot be opened or read.
            NoDataError: The input produced nothing to plot.
            ChartBuildError: Rendering failed.
            ExportError: Export or writing the output failed.
        """
        self._durations = {}
        logger.info(
            "Starting plot",
            kind=options.kind.value,
            input=str(options.input_path) if options.input_path else "<stdin>",
            sort_unique=options.sort_unique,
        )

        with self._phase(PipelinePhase.DICTIONARY):
            dictionary = self.resolve_dictionary(options)

        with self._phase(PipelinePhase.INGESTION):
            grammar = create_grammar(options, dictionary)
            owned = source is None
            lines = source if source is not None else open_line_source(options.input_path)
            try:
                aggregate = ingest(grammar, lines)
            finally:
                if owned:
                    lines.close()

        if aggregate is NO_DATA:
            logger.error("No valid data", kind=options.kind.value, lines=lines.lines_read)
            raise NoDataError(options.kind)

        with self._phase(PipelinePhase.ASSEMBLY):
            chart_data = assemble(options.kind, aggregate, options)

        width = options.width or self.settings.width
        height = options.height or self.settings.height
        with self._phase(PipelinePhase.RENDERING):
            chart = self.builder.build(chart_data, options, width=width, height=height)

        output_format = options.resolve_format(self.settings.format)
        with self._phase(PipelinePhase.EXPORT):
            content = self.builder.export(chart, output_format, dpi=options.dpi or self.settings.dpi)
            if options.output is not None:
                self._write(options.output, content, output_format)

        result = PlotResult(
            kind=options.kind,
            format=output_format,
            series_count=len(chart_data.series),
            point_count=sum(len(series.points) for series in chart_data.series),
            output=options.output,
            content=None if options.output is not None else content,
            duration_ms=dict(self._durations),
        )
        logger.info(
            "Plot completed",
            kind=options.kind.value,
            format=output_format.value,
            series=result.series_count,
            points=result.point_count,
            output=str(options.output) if options.output else None,
        )
        return result

    def _write(self, path: Path, content: str | bytes, output_format: OutputFormat) -> None:
        logger.info("Saving chart", path=str(path), format=output_format.value)
        try:
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        except OSError as e:
            msg = f"Cannot write {path}: {e}"
            raise ExportError(msg, format=output_format.value) from e
