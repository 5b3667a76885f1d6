"""Unit tests for the header-plus-rows matrix grammar."""

import pytest

from tabchart.core.aggregates import NO_DATA, CategoryMatrix
from tabchart.processing.base import GrammarConfig
from tabchart.processing.matrix import MatrixGrammar


class TestMatrixGrammar:
    """Test cases for MatrixGrammar."""

    @pytest.fixture
    def grammar(self) -> MatrixGrammar:
        """Create a matrix grammar."""
        return MatrixGrammar(GrammarConfig())

    def test_header_and_row(self, grammar: MatrixGrammar) -> None:
        """Test that a row aligns with the header columns."""
        result = grammar.ingest(["Year\tX\tY", "2018\t1\t2"])
        assert isinstance(result, CategoryMatrix)
        assert result.columns == ("X", "Y")
        assert len(result.rows) == 1
        assert result.rows[0].name == "2018"
        assert result.rows[0].values == (("X", 1.0), ("Y", 2.0))

    def test_unparsable_values_become_zero(self, grammar: MatrixGrammar) -> None:
        """Test that bad values are coerced to zero rather than dropping the row."""
        result = grammar.ingest(["Year\tX\tY", "2019\tNA\t4", "2020\t-3\tfoo"])
        assert result.rows[0].values == (("X", 0.0), ("Y", 4.0))
        assert result.rows[1].values == (("X", 0.0), ("Y", 0.0))

    def test_short_row_is_padded(self, grammar: MatrixGrammar) -> None:
        """Test that missing trailing columns become zero."""
        result = grammar.ingest(["Year\tX\tY", "2021\t5"])
        assert result.rows[0].values == (("X", 5.0), ("Y", 0.0))

    def test_extra_columns_ignored(self, grammar: MatrixGrammar) -> None:
        """Test that columns beyond the header are ignored."""
        result = grammar.ingest(["Year\tX", "2021\t5\t6\t7"])
        assert result.rows[0].values == (("X", 5.0),)

    def test_rows_keep_order_and_duplicates(self, grammar: MatrixGrammar) -> None:
        """Test that rows are appended in order and repeated names are kept."""
        result = grammar.ingest(["k\tA", "r2\t1", "", "r1\t2", "r2\t3"])
        assert [row.name for row in result.rows] == ["r2", "r1", "r2"]

    @pytest.mark.parametrize(
        "lines",
        [
            [],
            ["Year"],
            ["Year", "2018\t1"],
            ["Year\tX\tY"],
            ["Year\tX\tY", "", "  "],
        ],
    )
    def test_no_data(self, grammar: MatrixGrammar, lines: list[str]) -> None:
        """Test that a missing header or missing rows gives NO_DATA."""
        assert grammar.ingest(lines) is NO_DATA
