"""Tests for the grid layout engine: cell sizing, banding, fill flags."""

import pytest

from memento_mori.models.cell_partition import CellSizing
from memento_mori.services.grid_layout import (
    MIN_CELL_SIZE,
    band_count,
    compute_cell_size,
    compute_partition,
    compute_rows,
)


class TestRowsAndBands:
    @pytest.mark.parametrize(
        "total, columns, rows",
        [(4160, 52, 80), (960, 12, 80), (80, 10, 8), (25, 10, 3), (1, 52, 1), (0, 52, 0)],
    )
    def test_rows_round_up(self, total, columns, rows):
        assert compute_rows(total, columns) == rows

    def test_bands(self):
        assert band_count(80, 10) == 8
        assert band_count(81, 10) == 9
        assert band_count(80, None) == 1
        assert band_count(80, 0) == 1
        assert band_count(0, 10) == 0


class TestCellSize:
    def test_square_takes_tighter_constraint(self):
        width, height = compute_cell_size(52, 10, 520, 100, 0.5)

        assert width == height
        assert width == pytest.approx(494.5 / 52)

    def test_square_height_bound(self):
        # width allows 9.5, height only (50 - 4.5) / 10
        edge, _ = compute_cell_size(52, 10, 520, 50, 0.5)
        assert edge == pytest.approx(4.55)

    def test_fill_sizes_axes_independently(self):
        width, height = compute_cell_size(
            52,
            80,
            230,
            140,
            0.5,
            group_size=10,
            band_spacing=2.0,
            sizing=CellSizing.FILL,
        )

        assert width == pytest.approx(204.5 / 52)
        assert height == pytest.approx(1.125)

    def test_max_cell_size_caps_edge(self):
        edge, _ = compute_cell_size(10, 8, 1000, 1000, 2.0, max_cell_size=10)
        assert edge == 10

    def test_min_cell_size_floor(self):
        edge, _ = compute_cell_size(52, 80, 10, 10, 1.0)
        assert edge == MIN_CELL_SIZE

    def test_zero_container(self):
        width, height = compute_cell_size(52, 80, 0, 0, 0.0, sizing=CellSizing.FILL)
        assert (width, height) == (MIN_CELL_SIZE, MIN_CELL_SIZE)


class TestPartition:
    def test_reference_scenario(self):
        partition = compute_partition(520, 52, 520, 100, 0.5, units_elapsed=100)

        assert partition.rows == 10
        assert partition.columns == 52
        assert len(partition) == 520
        assert partition.cell_width == pytest.approx(494.5 / 52)
        assert partition.filled_count == 100

    def test_repeated_calls_agree(self):
        first = compute_partition(520, 52, 520, 100, 0.5, units_elapsed=100)
        second = compute_partition(520, 52, 520, 100, 0.5, units_elapsed=100)

        assert first == second
        assert first is not second

    def test_row_major_positions(self):
        partition = compute_partition(520, 52, 520, 100, 0.5)
        step = 494.5 / 52 + 0.5
        cell = partition.cells[53]

        assert (cell.row, cell.column) == (1, 1)
        assert cell.x == pytest.approx(step)
        assert cell.y == pytest.approx(step)
        assert cell.index == cell.row * 52 + cell.column

    def test_grid_fits_container(self):
        partition = compute_partition(520, 52, 520, 100, 0.5)

        assert partition.occupied_width == pytest.approx(520)
        assert partition.occupied_height <= 100 + 1e-9
        last = partition.cells[-1]
        assert last.x + last.width == pytest.approx(520)

    def test_filled_prefix(self):
        partition = compute_partition(30, 10, 100, 100, 1.0, units_elapsed=7)

        assert [cell.filled for cell in partition] == [True] * 7 + [False] * 23

    def test_elapsed_beyond_total_fills_everything(self):
        partition = compute_partition(30, 10, 100, 100, 1.0, units_elapsed=99)
        assert partition.filled_count == 30

    def test_partial_last_row(self):
        partition = compute_partition(25, 10, 100, 100, 1.0)

        assert partition.rows == 3
        assert len(partition) == 25
        last = partition.cells[-1]
        assert (last.row, last.column) == (2, 4)

    def test_empty_grid(self):
        partition = compute_partition(0, 52, 300, 200, 1.0)

        assert partition.rows == 0
        assert partition.band_count == 0
        assert len(partition) == 0
        assert partition.occupied_width == 0.0
        assert partition.occupied_height == 0.0

    def test_band_offsets(self):
        partition = compute_partition(
            4, 1, 10, 100, 1.0, group_size=2, band_spacing=5.0
        )

        assert partition.cell_width == 10
        assert [cell.band for cell in partition] == [0, 0, 1, 1]
        assert [cell.y for cell in partition] == pytest.approx([0, 11, 26, 37])
        assert partition.occupied_height == pytest.approx(47)

    def test_decade_bands_fill_medium_canvas(self):
        partition = compute_partition(
            4160,
            52,
            230,
            140,
            0.5,
            group_size=10,
            band_spacing=2.0,
            sizing=CellSizing.FILL,
        )

        assert partition.band_count == 8
        assert partition.cell_height == pytest.approx(1.125)
        assert partition.occupied_width == pytest.approx(230)
        assert partition.occupied_height == pytest.approx(140)
        first_of_second_band = partition.cells[10 * 52]
        assert first_of_second_band.band == 1
        assert first_of_second_band.y == pytest.approx(10 * 1.625 + 1.5)

    @pytest.mark.parametrize("sizing", list(CellSizing))
    def test_band_spacing_equal_to_min_spacing_is_ungrouped(self, sizing):
        grouped = compute_partition(
            4160, 52, 230, 140, 0.5, units_elapsed=1800,
            group_size=10, band_spacing=0.5, sizing=sizing,
        )
        plain = compute_partition(
            4160, 52, 230, 140, 0.5, units_elapsed=1800, sizing=sizing
        )

        assert (grouped.cell_width, grouped.cell_height) == (
            plain.cell_width,
            plain.cell_height,
        )
        for a, b in zip(grouped, plain):
            assert (a.x, a.y, a.width, a.height, a.filled) == (
                b.x,
                b.y,
                b.width,
                b.height,
                b.filled,
            )

    def test_grouping_never_changes_fill(self):
        grouped = compute_partition(
            960, 12, 200, 400, 1.0, units_elapsed=429, group_size=10, band_spacing=4.0
        )
        plain = compute_partition(960, 12, 200, 400, 1.0, units_elapsed=429)

        assert [c.filled for c in grouped] == [c.filled for c in plain]

    def test_zero_group_size_disables_grouping(self):
        partition = compute_partition(
            100, 10, 100, 100, 1.0, group_size=0, band_spacing=9.0
        )

        assert partition.band_count == 1
        assert partition.band_spacing == 1.0

    def test_cells_never_overlap(self):
        partition = compute_partition(
            240, 12, 120, 90, 1.0, group_size=5, band_spacing=3.0,
            sizing=CellSizing.FILL,
        )
        cells = partition.cells
        for a, b in zip(cells, cells[1:]):
            if a.row == b.row:
                assert a.x + a.width <= b.x + 1e-9
            else:
                assert a.y + a.height <= b.y + 1e-9


class TestCellLookup:
    def test_point_inside_cell(self):
        partition = compute_partition(30, 10, 109, 100, 1.0)
        # 10px cells on an 11px pitch
        cell = partition.cell_at(12, 23)

        assert cell is not None
        assert (cell.row, cell.column) == (2, 1)

    def test_point_in_gap(self):
        partition = compute_partition(30, 10, 109, 100, 1.0)
        assert partition.cell_at(10.5, 5) is None

    def test_point_below_grid(self):
        partition = compute_partition(30, 10, 109, 100, 1.0)
        assert partition.cell_at(5, 95) is None
