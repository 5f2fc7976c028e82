"""Tests for impurity criteria."""

import math

import numpy as np
import pytest

from mlx_tree import InvalidParametersError
from mlx_tree.trees import Criterion, Entropy, Gini, get_criterion


class TestGini:
    """Tests for Gini impurity."""

    def test_from_probas(self) -> None:
        """Test Gini impurity against known values."""
        gini = Gini()

        assert gini.from_probas([1.0, 0.0, 0.0]) == 0.0
        assert gini.from_probas([1 / 3, 1 / 3, 1 / 3]) == pytest.approx(2 / 3)
        assert gini.from_probas([0.0, 1 / 46, 45 / 46]) == pytest.approx(0.04253308128544431)
        assert gini.from_probas([0.0, 49 / 54, 5 / 54]) == pytest.approx(0.16803840877914955)

    def test_from_labels(self) -> None:
        """Test Gini impurity computed from raw labels."""
        gini = Gini()

        assert gini.from_labels([1, 1, 1]) == 0.0
        assert gini.from_labels([1, 1, 2, 2, 3, 3]) == pytest.approx(2 / 3)

    def test_weighted(self) -> None:
        """Test weighted impurity scales by the number of samples."""
        assert Gini().weighted(np.array([0, 0, 1, 1])) == pytest.approx(2.0)
        assert Gini().weighted(np.array([], dtype=np.int64)) == 0.0


class TestEntropy:
    """Tests for entropy."""

    def test_from_probas(self) -> None:
        """Test entropy against known values."""
        entropy = Entropy()

        assert entropy.from_probas([1.0]) == 0.0
        assert entropy.from_probas([1.0, 0.0, 0.0]) == 0.0
        assert entropy.from_probas([0.5, 0.5]) == pytest.approx(math.log(2))
        assert entropy.from_probas([1 / 3, 1 / 3, 1 / 3]) == pytest.approx(math.log(3))
        assert entropy.from_probas([0.4, 0.3, 0.3]) == pytest.approx(1.0888999753452238)

    def test_from_labels(self) -> None:
        """Test entropy computed from raw labels."""
        entropy = Entropy()

        assert entropy.from_labels(np.array([1, 2, 3])) == pytest.approx(1.0986122886681096)
        assert entropy.from_labels(np.array([1, 1, 2, 2])) == pytest.approx(0.6931471805599453)

    def test_zero_probability_is_ignored(self) -> None:
        """Test absent classes contribute nothing instead of NaN."""
        value = Entropy().from_probas(np.array([0.0, 0.5, 0.5]))

        assert not math.isnan(value)
        assert value == pytest.approx(math.log(2))


class TestCriterionProperties:
    """Properties shared by every criterion."""

    @pytest.mark.parametrize("criterion", [Gini(), Entropy()])
    def test_non_negative_and_zero_only_when_pure(self, criterion: Criterion) -> None:
        """Test scores are >= 0 and 0 exactly for a single certain class."""
        rng = np.random.default_rng(0)

        for n_classes in range(2, 6):
            counts = rng.integers(1, 20, size=n_classes)
            probas = counts / counts.sum()
            assert criterion.from_probas(probas) > 0.0

        assert criterion.from_probas([0.0, 1.0, 0.0]) == 0.0

    @pytest.mark.parametrize("criterion", [Gini(), Entropy()])
    def test_single_label_is_pure(self, criterion: Criterion) -> None:
        """Test labels with one distinct value always score 0."""
        for labels in ([0], [5, 5, 5], [2] * 50):
            assert criterion.from_labels(labels) == 0.0


class TestGetCriterion:
    """Tests for criterion lookup."""

    def test_by_name(self) -> None:
        """Test names resolve case-insensitively."""
        assert isinstance(get_criterion("gini"), Gini)
        assert isinstance(get_criterion("ENTROPY"), Entropy)

    def test_instance_passthrough(self) -> None:
        """Test Criterion instances are returned unchanged."""
        criterion = Entropy()
        assert get_criterion(criterion) is criterion

    @pytest.mark.parametrize("value", ["log_loss", None, 3])
    def test_unknown(self, value: object) -> None:
        """Test unknown criteria are rejected."""
        with pytest.raises(InvalidParametersError, match="criterion"):
            get_criterion(value)
