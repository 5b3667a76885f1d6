"""End-to-end tests of the plot pipeline."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from tabchart.core.enums import ChartKind, ErrorCode, OutputFormat, PipelinePhase
from tabchart.core.errors import DictionaryMissingError, NoDataError
from tabchart.core.models import PlotOptions
from tabchart.infra.line_source import LineSource
from tabchart.infra.settings import RenderSettings
from tabchart.orchestration import PlotCoordinator

FAI = "chr1\t1000\t6\t60\t61\nchr2\t500\t1030\t60\t61\n"


@pytest.fixture
def coordinator() -> PlotCoordinator:
    """Coordinator with built-in rendering defaults."""
    return PlotCoordinator(settings=RenderSettings(_env_file=None))


def _spec(content: str | bytes | None) -> dict:
    assert isinstance(content, str)
    return json.loads(content)


class TestPipeline:
    """Runs complete requests through PlotCoordinator."""

    def test_sort_unique_pie(self, coordinator: PlotCoordinator) -> None:
        """Test counts from `sort | uniq -c` become slices in natural order."""
        source = LineSource.from_text("   12 chr10\n    3 chr2\n    7 chr1\n")
        options = PlotOptions(kind=ChartKind.PIE, sort_unique=True, format=OutputFormat.JSON)

        result = coordinator.run(options, source)

        assert result.series_count == 1
        assert result.point_count == 3
        spec = _spec(result.content)
        assert spec["encoding"]["color"]["sort"] == ["chr1", "chr2", "chr10"]
        assert set(result.duration_ms) == {"dictionary", "ingestion", "assembly", "rendering", "export"}

    def test_stacked_histogram(self, coordinator: PlotCoordinator) -> None:
        """Test a matrix rendered as stacked bars."""
        source = LineSource.from_text("Year\tBob\tJoe\n2018\t1\t2\n2019\t3\n")
        options = PlotOptions(kind=ChartKind.STACKED_HISTOGRAM, format=OutputFormat.JSON, width=300, height=200)

        result = coordinator.run(options, source)

        assert result.series_count == 2
        assert result.point_count == 4
        spec = _spec(result.content)
        assert spec["width"] == 300
        assert spec["encoding"]["y"]["stack"] == "zero"
        assert spec["encoding"]["x"]["sort"] == ["Bob", "Joe"]

    def test_histogram_with_repeated_row_names(self, coordinator: PlotCoordinator) -> None:
        """Test rows sharing a name stay two visible series."""
        source = LineSource.from_text("Y\tA\tB\nr\t1\t2\nr\t3\t4\n")

        result = coordinator.run(PlotOptions(kind=ChartKind.HISTOGRAM, format=OutputFormat.JSON), source)

        assert result.series_count == 2
        spec = _spec(result.content)
        assert spec["encoding"]["xOffset"]["field"] == "series_key"
        assert spec["encoding"]["color"]["sort"] == ["r", "r #2"]

    def test_xyv(self, coordinator: PlotCoordinator) -> None:
        """Test triples become one series per Y key."""
        source = LineSource.from_text("2018\tBob\t1\n2018\tJoe\t2\n2019\tBob\t3\n")

        result = coordinator.run(PlotOptions(kind=ChartKind.XYV, format=OutputFormat.JSON), source)

        assert result.series_count == 2
        assert result.point_count == 4

    def test_bubble(self, coordinator: PlotCoordinator) -> None:
        """Test three-column tuples become sized bubbles."""
        source = LineSource.from_text("1\t2\t3\n4\t5\t6\nbad\t1\t1\n")
        options = PlotOptions(kind=ChartKind.BUBBLE, bubble_columns=3, format=OutputFormat.JSON)

        result = coordinator.run(options, source)

        assert result.point_count == 2
        assert _spec(result.content)["encoding"]["size"]["field"] == "size"

    def test_bedgraph(self, coordinator: PlotCoordinator, tmp_path: Path) -> None:
        """Test genomic intervals placed on the linear genome."""
        reference = tmp_path / "ref.fa.fai"
        reference.write_text(FAI, encoding="utf-8")
        source = LineSource.from_text("track name=x\nchr1\t100\t200\t5\n2\t100\t200\t7\nchrUn\t1\t2\t3\n")
        options = PlotOptions(kind=ChartKind.BEDGRAPH, reference=reference, format=OutputFormat.JSON)

        result = coordinator.run(options, source)

        assert result.series_count == 2
        assert result.point_count == 2
        spec = _spec(result.content)
        assert spec["encoding"]["x"]["scale"]["domain"] == [1.0, 1500.0]
        assert spec["encoding"]["x"]["title"] == "Genomic Index"

    def test_missing_reference_fails_before_reading(self, coordinator: PlotCoordinator) -> None:
        """Test the dictionary is resolved before any input is consumed."""
        source = LineSource.from_text("chr1\t1\t2\t3\n")

        with pytest.raises(DictionaryMissingError) as exc_info:
            coordinator.run(PlotOptions(kind=ChartKind.BEDGRAPH, format=OutputFormat.JSON), source)

        assert source.lines_read == 0
        assert exc_info.value.code == ErrorCode.E404_DICTIONARY_MISSING
        assert exc_info.value.phase == PipelinePhase.DICTIONARY

    def test_no_data(self, coordinator: PlotCoordinator) -> None:
        """Test an input with only unusable lines."""
        source = LineSource.from_text("a\t-1\nb\tx\n")

        with pytest.raises(NoDataError) as exc_info:
            coordinator.run(PlotOptions(kind=ChartKind.PIE, format=OutputFormat.JSON), source)

        assert exc_info.value.kind == ChartKind.PIE

    def test_reads_input_path(self, coordinator: PlotCoordinator, tmp_path: Path) -> None:
        """Test the coordinator opens options.input_path itself."""
        path = tmp_path / "kv.tsv"
        path.write_text("a\t1\nb\t2\n", encoding="utf-8")

        result = coordinator.run(PlotOptions(kind=ChartKind.PIE, input_path=path, format=OutputFormat.JSON))

        assert result.point_count == 2

    def test_bad_byte_keeps_other_records(self, coordinator: PlotCoordinator, tmp_path: Path) -> None:
        """Test one undecodable byte does not stop the run."""
        path = tmp_path / "kv.tsv"
        path.write_bytes(b"a\t1\nb\xff\t2\nc\t3\n")

        result = coordinator.run(PlotOptions(kind=ChartKind.PIE, input_path=path, format=OutputFormat.JSON))

        assert result.point_count == 3
        assert _spec(result.content)["encoding"]["color"]["sort"] == ["a", "b\ufffd", "c"]

    def test_png_written_to_file(self, coordinator: PlotCoordinator, tmp_path: Path) -> None:
        """Test PNG export with the resolution taken from the settings."""
        output = tmp_path / "chart.png"
        source = LineSource.from_text("a\t1\nb\t2\n")

        with patch("vl_convert.vegalite_to_png", return_value=b"\x89PNG fake") as mock_png:
            result = coordinator.run(PlotOptions(kind=ChartKind.PIE, output=output), source)

        assert result.format == OutputFormat.PNG
        assert result.content is None
        assert result.output == output
        assert output.read_bytes() == b"\x89PNG fake"
        assert mock_png.call_args.kwargs["scale"] == pytest.approx(150 / 96)
