"""Node impurity criteria for classification trees."""

from abc import ABC, abstractmethod
from typing import Literal

import numpy as np

from mlx_tree.exceptions import InvalidParametersError
from mlx_tree.trees._utils import freq, xlogy


class Criterion(ABC):
    """Maps a label distribution to a non-negative impurity score.

    A score of 0 means the labels are pure (a single class).
    """

    name: str = ""

    @abstractmethod
    def from_probas(self, probas: np.ndarray | list[float]) -> float:
        """Compute impurity from class probabilities.

        Args:
            probas: Probability of each class present at the node.

        Returns:
            Impurity score.
        """

    def from_labels(self, labels: np.ndarray | list[int]) -> float:
        """Compute impurity from raw class labels.

        Args:
            labels: Class labels of the samples at the node.

        Returns:
            Impurity score, 0.0 for an empty label set.
        """
        labels = np.asarray(labels)
        if labels.size == 0:
            return 0.0

        _, counts = freq(labels)
        probas = counts / float(labels.size)
        return self.from_probas(probas)

    def weighted(self, labels: np.ndarray | list[int]) -> float:
        """Impurity scaled by the number of samples.

        Costs of sibling nodes are summable, so a split can be compared
        directly against the cost of leaving the node unsplit.
        """
        labels = np.asarray(labels)
        return self.from_labels(labels) * labels.size

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Gini(Criterion):
    """Gini impurity: ``1 - sum(p_i ** 2)``."""

    name = "gini"

    def from_probas(self, probas: np.ndarray | list[float]) -> float:
        probas = np.asarray(probas, dtype=np.float64)
        return 1.0 - float(np.sum(probas * probas))


class Entropy(Criterion):
    """Shannon entropy in nats: ``-sum(p_i * ln(p_i))``."""

    name = "entropy"

    def from_probas(self, probas: np.ndarray | list[float]) -> float:
        res = sum(xlogy(float(p), float(p)) for p in probas)
        return -res


_CRITERIA: dict[str, type[Criterion]] = {
    Gini.name: Gini,
    Entropy.name: Entropy,
}


def get_criterion(criterion: Literal["gini", "entropy"] | Criterion) -> Criterion:
    """Resolve a criterion name or instance.

    Args:
        criterion: "gini", "entropy" (case-insensitive) or a Criterion.

    Returns:
        Criterion instance.

    Raises:
        InvalidParametersError: If the criterion is not recognised.
    """
    if isinstance(criterion, Criterion):
        return criterion

    if isinstance(criterion, str) and criterion.lower() in _CRITERIA:
        return _CRITERIA[criterion.lower()]()

    raise InvalidParametersError(
        f"criterion must be one of {sorted(_CRITERIA)} or a Criterion instance, got {criterion!r}."
    )
