"""Decision Tree classifier using exact greedy split search.

This module provides the DecisionTreeClassifier estimator. Trees are built
with numpy and predictions are returned as MLX arrays.
"""

import logging
from typing import Literal

import mlx.core as mx
import numpy as np

from mlx_tree.base import BaseEstimator
from mlx_tree.exceptions import (
    InvalidDataError,
    InvalidParametersError,
    NotFittedError,
)
from mlx_tree.trees._criterion import Criterion, get_criterion
from mlx_tree.trees._predictor import predict_labels
from mlx_tree.trees._tree_builder import build_classification_tree
from mlx_tree.trees._tree_structure import Node, TreeArrays, flatten_tree
from mlx_tree.utils.data import to_numpy_array
from mlx_tree.utils.metrics import accuracy

logger = logging.getLogger(__name__)


class DecisionTreeClassifier(BaseEstimator):
    """Binary Decision Tree Classifier.

    Each node is split on the feature and threshold that minimise the
    weighted impurity of its two children, trying every midpoint between
    consecutive distinct feature values. A node becomes a leaf predicting
    its majority label when it is pure, when a stopping criterion is met,
    or when no split lowers its impurity.

    Args:
        criterion: Split criterion.
            - "gini": Gini impurity (default)
            - "entropy": Information gain
            A Criterion instance is also accepted.
        max_depth: Maximum depth of the tree. Default is None (unlimited).
        min_samples_split: Nodes with this many samples or fewer are not
            split. Default is None (unlimited).
        verbose: Verbosity level. Default is 0.

    Attributes:
        root_: Root node (Leaf or Branch) of the fitted tree.
        tree_: Fitted tree structure (TreeArrays) after calling fit().
        n_features_in_: Number of features seen during fit.
        n_classes_: Number of distinct labels seen during fit.
        classes_: Array of unique class labels.

    Example:
        >>> import mlx.core as mx
        >>> from mlx_tree import DecisionTreeClassifier
        >>> X = mx.array([[1, 2], [3, 4], [5, 6], [7, 8]])
        >>> y = mx.array([0, 0, 1, 1])
        >>> model = DecisionTreeClassifier(max_depth=3)
        >>> model.fit(X, y)
        >>> predictions = model.predict(X)
    """

    def __init__(
        self,
        criterion: Literal["gini", "entropy"] | Criterion = "gini",
        max_depth: int | None = None,
        min_samples_split: int | None = None,
        verbose: int = 0,
    ) -> None:
        self.criterion = criterion
        self.max_depth = max_depth
        self.min_samples_split = min_samples_split
        self.verbose = verbose

        self.root_: Node | None = None
        self.tree_: TreeArrays | None = None
        self.n_features_in_: int | None = None
        self.n_classes_: int | None = None
        self.classes_: mx.array | None = None

    def fit(self, X: mx.array, y: mx.array) -> "DecisionTreeClassifier":
        """Fit the decision tree classifier to training data.

        Args:
            X: Training features of shape (n_samples, n_features).
            y: Non-negative integer class labels of shape (n_samples,).

        Returns:
            Self for method chaining.

        Raises:
            InvalidParametersError: If a hyperparameter is invalid.
            InvalidDataError: If X or y cannot be used for training.
        """
        criterion = get_criterion(self.criterion)
        self._validate_params()

        X = self._validate_X(X)
        y = self._validate_y(y)

        n_samples, n_features = X.shape
        if n_samples == 0:
            raise InvalidDataError("Cannot fit a tree on zero samples.")
        if n_features == 0:
            raise InvalidDataError("Cannot fit a tree on zero features.")
        if y.shape[0] != n_samples:
            raise InvalidDataError(
                f"X and y have inconsistent numbers of samples: {n_samples} != {y.shape[0]}."
            )
        if not np.all(np.isfinite(X)):
            raise InvalidDataError("Training features must be finite (no NaN or inf).")

        root = build_classification_tree(
            X=X,
            y=y,
            criterion=criterion,
            max_depth=self.max_depth,
            min_samples_split=self.min_samples_split,
        )
        classes_np = np.unique(y)

        # Replace fitted state only once the new tree is complete
        self.root_ = root
        self.tree_ = flatten_tree(root)
        self.n_features_in_ = n_features
        self.classes_ = mx.array(classes_np.astype(np.int64))
        self.n_classes_ = len(classes_np)

        if self.verbose > 0:
            logger.info(
                f"Fitted tree on {n_samples} samples, {n_features} features, "
                f"{self.n_classes_} classes: depth {self.tree_.depth}, "
                f"{self.tree_.n_leaves} leaves"
            )

        return self

    def predict(self, X: mx.array) -> mx.array:
        """Predict class labels for new data.

        Args:
            X: Features of shape (n_samples, n_features).

        Returns:
            Predicted class labels of shape (n_samples,).

        Raises:
            NotFittedError: If model has not been fitted.
            InvalidDataError: If X does not have n_features_in_ columns.
        """
        tree = self._check_is_fitted()

        X = self._validate_X(X)
        if X.shape[1] != self.n_features_in_:
            raise InvalidDataError(
                f"X has {X.shape[1]} features, but DecisionTreeClassifier was "
                f"fitted with {self.n_features_in_} features."
            )

        predictions = predict_labels(tree, X)
        return mx.array(predictions.astype(np.int64))

    def score(self, X: mx.array, y: mx.array) -> float:
        """Mean accuracy of ``predict(X)`` against ``y``.

        Args:
            X: Features of shape (n_samples, n_features).
            y: True class labels of shape (n_samples,).

        Returns:
            Fraction of correctly predicted samples.
        """
        return accuracy(self._validate_y(y), self.predict(X))

    def get_depth(self) -> int:
        """Return the depth of the fitted tree (a single leaf has depth 0)."""
        return self._check_is_fitted().depth

    def get_n_leaves(self) -> int:
        """Return the number of leaves of the fitted tree."""
        return self._check_is_fitted().n_leaves

    def _check_is_fitted(self) -> TreeArrays:
        if self.tree_ is None or self.n_features_in_ is None:
            raise NotFittedError("Model not fitted. Call fit() first.")
        return self.tree_

    def _validate_params(self) -> None:
        """Validate depth and sample-count limits."""
        for name in ("max_depth", "min_samples_split"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise InvalidParametersError(
                    f"{name} must be None or a positive integer, got {value!r}."
                )

    def _validate_X(self, X: mx.array | np.ndarray | list) -> np.ndarray:
        """Validate and convert input features."""
        X = to_numpy_array(X, dtype=np.float64)

        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if X.ndim != 2:
            raise InvalidDataError(f"X must be 2-dimensional, got {X.ndim} dimensions.")

        return X

    def _validate_y(self, y: mx.array | np.ndarray | list) -> np.ndarray:
        """Validate and convert class labels to non-negative int64."""
        y = to_numpy_array(y).ravel()

        if y.dtype.kind == "b":
            y = y.astype(np.int64)
        elif y.dtype.kind == "f":
            if not np.all(np.isfinite(y)) or not np.all(y == np.floor(y)):
                raise InvalidDataError("Class labels must be integers.")
            y = y.astype(np.int64)
        elif y.dtype.kind in "iu":
            y = y.astype(np.int64)
        else:
            raise InvalidDataError(f"Class labels must be integers, got dtype {y.dtype}.")

        if np.any(y < 0):
            raise InvalidDataError("Class labels must be non-negative.")

        return y
