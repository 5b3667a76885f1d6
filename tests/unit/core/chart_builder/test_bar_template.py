"""Unit tests for bar chart template."""

import altair as alt
import pytest
from vega_spec import chart_values, mark_type

from tabchart.core.chart_builder.templates import BarTemplate
from tabchart.core.models import ChartData


class TestBarTemplate:
    """Test suite for BarTemplate."""

    @pytest.fixture
    def template(self) -> BarTemplate:
        """Create bar template instance."""
        return BarTemplate()

    def test_build_grouped_bars(self, template: BarTemplate, grouped_bars: ChartData) -> None:
        """Test grouped bars use an x offset per series."""
        chart = template.build(grouped_bars, width=640, height=480)

        assert isinstance(chart, alt.Chart)
        spec = chart.to_dict()
        assert mark_type(spec) == "bar"
        assert spec["width"] == 640
        assert spec["height"] == 480
        assert spec["encoding"]["x"]["field"] == "x"
        assert spec["encoding"]["x"]["sort"] == ["2018", "2019", "2020"]
        assert spec["encoding"]["x"]["title"] == "Year"
        assert spec["encoding"]["y"]["title"] == "Count"
        assert spec["encoding"]["y"]["stack"] is None
        assert spec["encoding"]["xOffset"]["field"] == "series_key"
        assert spec["encoding"]["color"]["sort"] == ["Bob", "Joe"]
        assert "order" not in spec["encoding"]

    def test_build_stacked_bars(self, template: BarTemplate, grouped_bars: ChartData) -> None:
        """Test stacked bars keep the assembled series order."""
        stacked = grouped_bars.model_copy(update={"stacked": True})
        spec = template.build(stacked).to_dict()

        assert spec["encoding"]["y"]["stack"] == "zero"
        assert "xOffset" not in spec["encoding"]
        assert spec["encoding"]["order"]["field"] == "series_rank"
        assert spec["transform"][0]["as"] == "series_rank"
        assert "'Bob', 'Joe'" in spec["transform"][0]["calculate"]

    def test_data_rows(self, template: BarTemplate, grouped_bars: ChartData) -> None:
        """Test the long-format rows handed to Vega-Lite."""
        rows = chart_values(template.build(grouped_bars).to_dict())
        assert len(rows) == 6
        assert rows[0] == {"series": "Bob", "series_key": "Bob", "x": "2018", "y": 1.0}
        assert rows[4] == {"series": "Joe", "series_key": "Joe", "x": "2019", "y": 0.0}

    def test_single_series_has_no_offset(self, template: BarTemplate, grouped_bars: ChartData) -> None:
        """Test one series is drawn without an x offset."""
        single = grouped_bars.model_copy(update={"series": grouped_bars.series[:1]})
        assert "xOffset" not in template.build(single).to_dict()["encoding"]

    def test_rank_expression_escapes_quotes(self, template: BarTemplate) -> None:
        """Test series names with quotes."""
        expression = template._rank_expression(["it's", "b"])
        assert expression == "indexof(['it\\'s', 'b'], datum.series_key)"

    def test_duplicate_series_names_drawn_side_by_side(self, template: BarTemplate, grouped_bars: ChartData) -> None:
        """Test two rows with the same name keep separate bars."""
        twins = grouped_bars.model_copy(
            update={"series": [s.model_copy(update={"name": "r"}) for s in grouped_bars.series]}
        )
        spec = template.build(twins).to_dict()

        assert spec["encoding"]["xOffset"]["field"] == "series_key"
        assert spec["encoding"]["color"]["sort"] == ["r", "r #2"]
        rows = chart_values(spec)
        assert {row["series"] for row in rows} == {"r"}
        assert [row["series_key"] for row in rows] == ["r"] * 3 + ["r #2"] * 3

    def test_duplicate_series_names_stacked(self, template: BarTemplate, grouped_bars: ChartData) -> None:
        """Test stacking ranks same-named series separately."""
        twins = grouped_bars.model_copy(
            update={"stacked": True, "series": [s.model_copy(update={"name": "r"}) for s in grouped_bars.series]}
        )
        spec = template.build(twins).to_dict()
        assert "'r', 'r #2'" in spec["transform"][0]["calculate"]

    def test_series_keys_avoid_existing_names(self, template: BarTemplate, grouped_bars: ChartData) -> None:
        """Test a suffix never collides with a real series name."""
        names = ["r", "r #2", "r"]
        data = grouped_bars.model_copy(
            update={"series": [grouped_bars.series[0].model_copy(update={"name": name}) for name in names]}
        )
        assert template.series_keys(data) == ["r", "r #2", "r #3"]
