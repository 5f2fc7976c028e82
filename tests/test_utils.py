"""Tests for tree-building helpers and data utilities."""

import mlx.core as mx
import numpy as np
import pytest

from mlx_tree import InvalidDataError
from mlx_tree.trees._utils import (
    freq,
    get_splits,
    majority_label,
    split_by_mask,
    uniquify,
    xlogy,
)
from mlx_tree.utils.data import to_mlx_array, to_numpy_array


class TestSplitHelpers:
    """Tests for candidate threshold and partition helpers."""

    def test_uniquify(self) -> None:
        """Test values are deduplicated and sorted."""
        assert uniquify([0.1, 0.2, 0.1]).tolist() == [0.1, 0.2]
        assert uniquify([0.3, 0.1, 0.1, 0.1, 0.2, 0.2]).tolist() == [0.1, 0.2, 0.3]

    def test_get_splits(self) -> None:
        """Test midpoints between consecutive distinct values."""
        assert get_splits([0.1, 0.2, 0.1]).tolist() == pytest.approx([0.15])
        assert get_splits([0.3, 0.1, 0.1, 0.1, 0.2, 0.2]).tolist() == pytest.approx(
            [0.15, 0.25]
        )
        assert get_splits([1.0, 3.0, 7.0, 3.0, 7.0]).tolist() == [2.0, 5.0]

    def test_get_splits_near_float_max(self) -> None:
        """Test midpoints between very large values do not overflow."""
        big = np.finfo(np.float64).max
        splits = get_splits([big, big / 2.0, -big])

        assert np.all(np.isfinite(splits))
        assert splits.tolist() == pytest.approx([-big / 4.0, 0.75 * big])

    def test_get_splits_single_value(self) -> None:
        """Test a constant feature has no candidate thresholds."""
        assert get_splits([4.0, 4.0, 4.0]).size == 0
        assert get_splits(np.array([])).size == 0

    def test_split_by_mask(self) -> None:
        """Test partitioning by a boolean mask keeps order."""
        left, right = split_by_mask(np.array([1, 2, 3]), [True, False, True])
        assert left.tolist() == [1, 3]
        assert right.tolist() == [2]

        left, right = split_by_mask(np.array([1, 2, 3]), [True, True, True])
        assert left.tolist() == [1, 2, 3]
        assert right.tolist() == []

    def test_xlogy(self) -> None:
        """Test x * ln(y) with the 0 * ln(0) convention."""
        assert xlogy(3.0, 8.0) == pytest.approx(6.2383246250395068)
        assert xlogy(0.0, 100.0) == 0.0
        assert xlogy(0.0, 0.0) == 0.0


class TestFrequencies:
    """Tests for label frequency helpers."""

    def test_freq(self) -> None:
        """Test unique labels are ascending with matching counts."""
        uniques, counts = freq(np.array([1, 2, 3, 1, 2, 4]))
        assert uniques.tolist() == [1, 2, 3, 4]
        assert counts.tolist() == [2, 2, 1, 1]

        uniques, counts = freq(np.array([1, 2, 2, 2, 2]))
        assert uniques.tolist() == [1, 2]
        assert counts.tolist() == [1, 4]

    def test_majority_label(self) -> None:
        """Test the most frequent label wins, ties going to the smallest."""
        assert majority_label(*freq(np.array([1, 2, 2, 2, 2]))) == 2
        assert majority_label(*freq(np.array([3, 1, 3, 1]))) == 1


class TestDataConversion:
    """Tests for array conversion helpers."""

    def test_to_numpy_array_from_mlx(self) -> None:
        """Test MLX arrays are converted to numpy."""
        array = to_numpy_array(mx.array([[1.0, 2.0], [3.0, 4.0]]), dtype=np.float64)

        assert isinstance(array, np.ndarray)
        assert array.dtype == np.float64
        assert array.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_to_numpy_array_ragged(self) -> None:
        """Test ragged lists raise InvalidDataError."""
        with pytest.raises(InvalidDataError):
            to_numpy_array([[1.0, 2.0], [3.0]], dtype=np.float64)

    def test_unsupported_type(self) -> None:
        """Test unsupported containers raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported data type"):
            to_numpy_array({"a": 1})
        with pytest.raises(TypeError, match="Unsupported data type"):
            to_mlx_array("abc")

    def test_to_mlx_array(self) -> None:
        """Test numpy arrays and lists become MLX arrays."""
        assert isinstance(to_mlx_array(np.array([1, 2])), mx.array)
        assert to_mlx_array([1, 2, 3]).shape == (3,)
