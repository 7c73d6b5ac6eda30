"""
Unit tests for SheetExtractor.extract (gustave_ingest.parsers.sheet).

All grids are built in memory with ``make_grid()``; see
tests/integration for the workbook-reading path.
"""

from __future__ import annotations

import pytest

from gustave_ingest.cells import ABSENT, Number, Text
from gustave_ingest.exceptions import InvalidFormatError
from gustave_ingest.models import SNAPSHOT_FIELDS, Snapshot
from gustave_ingest.parsers.sheet import SheetExtractor
from tests.conftest import JUNE_2025, MAY_2025, make_grid

METRICS = [name for name in SNAPSHOT_FIELDS if name != "date"]


def _column(base: float) -> list[float]:
    """13 distinct metric values for one period."""
    return [base + i for i in range(13)]


@pytest.fixture()
def extractor() -> SheetExtractor:
    return SheetExtractor()


class TestShapeValidation:
    def test_too_few_rows_raises(self, extractor):
        grid = make_grid([JUNE_2025], [_column(1)])[:10]
        with pytest.raises(InvalidFormatError, match="at least 14 rows"):
            extractor.extract(grid)

    def test_thirteen_rows_raises(self, extractor):
        grid = make_grid([JUNE_2025], [_column(1)])[:13]
        with pytest.raises(InvalidFormatError):
            extractor.extract(grid)

    def test_empty_grid_raises(self, extractor):
        with pytest.raises(InvalidFormatError):
            extractor.extract([])

    def test_no_data_columns_returns_empty(self, extractor):
        """14 rows but only the label column -> empty series, no error."""
        grid = make_grid([], [])
        assert len(grid) == 14
        assert extractor.extract(grid) == []

    def test_extra_rows_are_ignored(self, extractor):
        grid = make_grid([JUNE_2025], [_column(1)]) + [["Notes", "hello"]]
        result = extractor.extract(grid)
        assert len(result) == 1


class TestExtraction:
    def test_end_to_end_two_periods(self, extractor, sample_grid):
        """Headers [_, 45809, 45778] come out oldest first."""
        result = extractor.extract(sample_grid)
        assert [s.date for s in result] == ["01/05/2025", "01/06/2025"]

        may, june = result
        assert may.total_patrimoine == pytest.approx(7039.76)
        assert may.percent_epargne == pytest.approx(99.29)
        assert june.total_patrimoine == pytest.approx(7045.70)
        assert june.perf_compte_titres_percent == pytest.approx(0.48)
        assert june.pea == 0
        assert june.perf_pea_euro == 0
        assert june.percent_epargne == pytest.approx(99.21)

    def test_row_to_field_mapping(self, extractor):
        result = extractor.extract(make_grid([JUNE_2025], [_column(100)]))
        snapshot = result[0]
        for i, name in enumerate(METRICS):
            assert getattr(snapshot, name) == 100 + i, name

    def test_returns_snapshot_instances(self, extractor, sample_grid):
        assert all(isinstance(s, Snapshot) for s in extractor.extract(sample_grid))

    def test_length_matches_non_blank_headers(self, extractor):
        headers = [45900, None, 45870, "", 45839, 45809]
        grid = make_grid(headers, [_column(i) for i in range(len(headers))])
        assert len(extractor.extract(grid)) == 4

    def test_descending_input_gives_ascending_output(self, extractor):
        serials = [45900, 45870, 45839, 45809, 45778]
        grid = make_grid(serials, [_column(s) for s in serials])
        result = extractor.extract(grid)
        assert [s.total_patrimoine for s in result] == sorted(serials)

    def test_ascending_input_is_not_reordered(self, extractor):
        """Column order is an input contract; it is not auto-detected."""
        grid = make_grid([MAY_2025, JUNE_2025], [_column(1), _column(2)])
        result = extractor.extract(grid)
        assert [s.date for s in result] == ["01/06/2025", "01/05/2025"]

    def test_deterministic(self, extractor, sample_grid):
        assert extractor.extract(sample_grid) == extractor.extract(sample_grid)

    def test_does_not_mutate_input(self, extractor, sample_grid):
        before = [list(row) for row in sample_grid]
        extractor.extract(sample_grid)
        assert sample_grid == before

    def test_text_headers_kept_verbatim(self, extractor):
        grid = make_grid(["Juin 2025", "Mai 2025"], [_column(1), _column(2)])
        assert [s.date for s in extractor.extract(grid)] == ["Mai 2025", "Juin 2025"]

    def test_accepts_cell_instances(self, extractor):
        grid = make_grid(
            [Number(JUNE_2025)],
            [[Text("1 000,50 €")] + [ABSENT] * 12],
        )
        snapshot = extractor.extract(grid)[0]
        assert snapshot.date == "01/06/2025"
        assert snapshot.total_patrimoine == pytest.approx(1000.50)
        assert snapshot.percent_epargne == 0


class TestBlankHeaders:
    @pytest.mark.parametrize("blank", [None, "", "  ", 0, False])
    def test_blank_header_column_skipped(self, extractor, blank):
        """A blank header in column 3 drops only that column."""
        headers = [45870, 45839, blank, 45778]
        grid = make_grid(headers, [_column(10), _column(20), _column(30), _column(40)])
        result = extractor.extract(grid)

        assert len(result) == 3
        assert [s.total_patrimoine for s in result] == [40, 20, 10]
        assert [s.date for s in result] == ["01/05/2025", "01/07/2025", "01/08/2025"]

    def test_skipped_columns_reported(self, extractor):
        grid = make_grid([45870, None, 45778], [_column(1), _column(2), _column(3)])
        snapshots, skipped = extractor._extract(grid)
        assert skipped == [2]
        assert len(snapshots) == 2

    def test_false_header_is_not_a_period(self, extractor):
        grid = make_grid([JUNE_2025, False], [_column(1), _column(2)])
        result = extractor.extract(grid)
        assert [s.date for s in result] == ["01/06/2025"]
        assert result[0].total_patrimoine == 1


class TestCellDegradation:
    @pytest.mark.parametrize("bad", ["X", "-", None])
    @pytest.mark.parametrize("row", range(13))
    def test_bad_metric_cell_decodes_to_zero(self, extractor, row, bad):
        column = _column(1)
        column[row] = bad
        snapshot = extractor.extract(make_grid([JUNE_2025], [column]))[0]
        assert getattr(snapshot, METRICS[row]) == 0
        # Neighbouring rows are untouched
        for other in range(13):
            if other != row:
                assert getattr(snapshot, METRICS[other]) == 1 + other

    def test_jagged_metric_rows(self, extractor):
        """Rows shorter than the header row read as absent cells."""
        grid = make_grid([JUNE_2025, MAY_2025], [_column(1), _column(2)])
        grid[5] = grid[5][:2]  # drop May's perf_compte_titres_euro
        grid[13] = grid[13][:1]  # drop both percent_epargne cells
        may, june = extractor.extract(grid)
        assert may.perf_compte_titres_euro == 0
        assert june.perf_compte_titres_euro == 1 + 4
        assert may.percent_epargne == 0
        assert june.percent_epargne == 0
