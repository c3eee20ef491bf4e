"""Unit tests for the 3x3 neighborhood average."""

import numpy as np
import pytest

from rawforge.utils.average import box_average, neighbor_count, neighborhood_average


class TestNeighborCount:
    """Window sizes after dropping out-of-bounds cells."""

    def test_interior(self):
        assert neighbor_count((5, 5), 2, 2) == 9
        assert neighbor_count((512, 512), 100, 300) == 9

    def test_corners(self):
        for row, col in [(0, 0), (0, 4), (4, 0), (4, 4)]:
            assert neighbor_count((5, 5), row, col) == 4

    def test_edges(self):
        for row, col in [(0, 2), (2, 0), (4, 2), (2, 4)]:
            assert neighbor_count((5, 5), row, col) == 6


class TestNeighborhoodAverage:
    """Single-pixel average."""

    @pytest.fixture
    def ramp(self):
        arr = np.zeros((3, 3, 3), dtype=np.uint8)
        arr[:, :, 0] = np.arange(9, dtype=np.uint8).reshape(3, 3)
        arr[:, :, 1] = 90
        arr[:, :, 2] = 255
        return arr

    def test_corner_uses_four_cells(self, ramp):
        # 0 + 1 + 3 + 4 = 8, 8 // 4 = 2
        assert neighborhood_average(ramp, 0, 0) == (2, 90, 255)

    def test_edge_uses_six_cells(self, ramp):
        # 0 + 1 + 2 + 3 + 4 + 5 = 15, 15 // 6 = 2
        assert neighborhood_average(ramp, 0, 1) == (2, 90, 255)

    def test_center_uses_nine_cells(self, ramp):
        assert neighborhood_average(ramp, 1, 1) == (4, 90, 255)

    def test_truncates(self):
        arr = np.zeros((2, 2, 3), dtype=np.uint8)
        arr[0, 0] = (3, 3, 3)
        # 3 // 4 == 0
        assert neighborhood_average(arr, 1, 1) == (0, 0, 0)

    def test_constant_image_is_unchanged(self):
        arr = np.empty((6, 7, 3), dtype=np.uint8)
        arr[...] = (17, 200, 255)
        for row in range(6):
            for col in range(7):
                assert neighborhood_average(arr, row, col) == (17, 200, 255)

    def test_single_pixel_image(self):
        arr = np.array([[[9, 8, 7]]], dtype=np.uint8)
        assert neighborhood_average(arr, 0, 0) == (9, 8, 7)

    def test_out_of_bounds_raises(self, ramp):
        with pytest.raises(IndexError):
            neighborhood_average(ramp, 3, 0)


class TestBoxAverage:
    """Vectorized average over the whole image."""

    def test_matches_per_pixel_average(self, rng):
        arr = rng.integers(0, 256, size=(7, 9, 3), dtype=np.uint8)
        out = box_average(arr)
        assert out.shape == arr.shape
        assert out.dtype == np.uint8
        for row in range(7):
            for col in range(9):
                assert tuple(int(v) for v in out[row, col]) == neighborhood_average(arr, row, col)

    def test_no_overflow_on_white(self):
        arr = np.full((4, 4, 3), 255, dtype=np.uint8)
        np.testing.assert_array_equal(box_average(arr), arr)

    def test_input_not_modified(self, rng):
        arr = rng.integers(0, 256, size=(5, 5, 3), dtype=np.uint8)
        before = arr.copy()
        box_average(arr)
        np.testing.assert_array_equal(arr, before)

    def test_rejects_non_rgb(self):
        with pytest.raises(ValueError):
            box_average(np.zeros((4, 4), dtype=np.uint8))


class TestAverageDivisor:
    """The divisor used by the averages matches the in-bounds cell count."""

    @pytest.fixture
    def spike(self):
        # A single 255 at (0, 1); every window containing it sums to 255.
        arr = np.zeros((5, 5, 3), dtype=np.uint8)
        arr[0, 1] = 255
        return arr

    @pytest.mark.parametrize(
        "row, col, expected",
        [
            (0, 0, 255 // 4),  # corner
            (0, 2, 255 // 6),  # top edge
            (1, 0, 255 // 6),  # left edge
            (1, 1, 255 // 9),  # interior
            (1, 2, 255 // 9),  # interior
        ],
    )
    def test_box_average_divides_by_cell_count(self, spike, row, col, expected):
        assert 255 // neighbor_count(spike.shape, row, col) == expected
        out = box_average(spike)
        np.testing.assert_array_equal(out[row, col], [expected] * 3)

    @pytest.mark.parametrize("row, col", [(0, 0), (0, 2), (1, 0), (1, 1), (1, 2)])
    def test_single_pixel_average_divides_by_cell_count(self, spike, row, col):
        expected = 255 // neighbor_count(spike.shape, row, col)
        assert neighborhood_average(spike, row, col) == (expected, expected, expected)

    def test_windows_without_the_spike_are_zero(self, spike):
        out = box_average(spike)
        assert not out[2:, :].any()
        assert not out[:, 3:].any()
