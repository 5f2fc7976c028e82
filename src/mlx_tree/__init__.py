"""MLX Tree - exact greedy decision tree classification with MLX arrays."""

from mlx_tree.base import BaseEstimator
from mlx_tree.exceptions import (
    InvalidDataError,
    InvalidParametersError,
    MLXTreeError,
    NotFittedError,
)
from mlx_tree.trees import Criterion, DecisionTreeClassifier, Entropy, Gini

__version__ = "0.1.0"
__all__ = [
    "BaseEstimator",
    "Criterion",
    "DecisionTreeClassifier",
    "Entropy",
    "Gini",
    "InvalidDataError",
    "InvalidParametersError",
    "MLXTreeError",
    "NotFittedError",
    "__version__",
]
