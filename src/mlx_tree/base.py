"""Base classes for MLX Tree estimators."""

from abc import ABC, abstractmethod
from typing import Any

import mlx.core as mx


class BaseEstimator(ABC):
    """Abstract base class for all MLX Tree estimators.

    All estimators should specify all the parameters that can be set
    at the class level in their ``__init__`` as explicit keyword arguments.
    Parameters are stored unmodified and only validated in ``fit``.
    """

    @abstractmethod
    def fit(self, X: mx.array, y: mx.array) -> "BaseEstimator":
        """Fit the model to training data.

        Args:
            X: Training features of shape (n_samples, n_features).
            y: Target labels of shape (n_samples,).

        Returns:
            Self for method chaining.
        """

    @abstractmethod
    def predict(self, X: mx.array) -> mx.array:
        """Make predictions on new data.

        Args:
            X: Features of shape (n_samples, n_features).

        Returns:
            Predictions of shape (n_samples,).
        """

    def get_params(self) -> dict[str, Any]:
        """Get parameters for this estimator.

        Returns:
            Parameter names mapped to their values.
        """
        code = self.__init__.__code__
        return {
            key: getattr(self, key)
            for key in code.co_varnames[1 : code.co_argcount]
            if hasattr(self, key)
        }

    def set_params(self, **params: Any) -> "BaseEstimator":
        """Set parameters for this estimator.

        Takes effect on the next call to ``fit``.

        Args:
            **params: Estimator parameters.

        Returns:
            Self for method chaining.

        Raises:
            ValueError: If a parameter name is not accepted by ``__init__``.
        """
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(
                    f"Invalid parameter {key!r} for {type(self).__name__}. "
                    f"Valid parameters are {sorted(valid)}."
                )
            setattr(self, key, value)
        return self
