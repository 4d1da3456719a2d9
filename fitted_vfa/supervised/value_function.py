"""
Value function backed by a fitted scikit-learn estimator.
"""
import logging
from typing import Any, Iterable, Optional

import numpy as np

from fitted_vfa.supervised.dataset import feature_vector, single_row
from fitted_vfa.supervised.errors import PredictionFailed
from fitted_vfa.supervised.interfaces import StateFeatures, ValueFunction

logger = logging.getLogger(__name__)


class SklearnVFA(ValueFunction):
    """
    Predicts state values with a trained scikit-learn regressor.

    The estimator and the feature extractor are fixed at construction and
    only read afterwards, so ``value`` may be called from several threads
    as long as the estimator's ``predict`` is read-only (it is for
    KNeighborsRegressor).
    """

    def __init__(
        self,
        features: StateFeatures,
        model: Any,
        n_features: Optional[int] = None
    ):
        """
        Initialize.

        Args:
            features: Feature extractor used to convert states to vectors
            model: Fitted estimator exposing predict(X)
            n_features: Number of features the model was trained on, if known
        """
        self.features = features
        self.model = model
        self.n_features = n_features

    def __repr__(self):
        return f"SklearnVFA(model={type(self.model).__name__}, n_features={self.n_features})"

    def __call__(self, state: Any) -> float:
        return self.value(state)

    def value(self, state: Any) -> float:
        """
        Compute V(s) for a single state.

        Args:
            state: Domain state

        Returns:
            Predicted value as a float

        Raises:
            PredictionFailed: If feature extraction or inference fails
        """
        try:
            row = single_row(feature_vector(self.features, state), self.n_features)
            prediction = self.model.predict(row)
            return float(np.ravel(prediction)[0])
        except Exception as e:
            raise PredictionFailed(
                f"{type(self.model).__name__} could not produce a prediction for the state: {e}",
                cause=e
            ) from e

    def values(self, states: Iterable[Any]) -> np.ndarray:
        """
        Compute V(s) for many states with a single predict call.

        Args:
            states: Iterable of domain states

        Returns:
            Predicted values, shape (n_states,)

        Raises:
            PredictionFailed: If any state cannot be evaluated
        """
        states = list(states)
        if not states:
            return np.empty(0, dtype=np.float64)

        try:
            X = np.vstack([
                single_row(feature_vector(self.features, s), self.n_features)
                for s in states
            ])
            predictions = self.model.predict(X)
        except Exception as e:
            raise PredictionFailed(
                f"{type(self.model).__name__} could not produce predictions for "
                f"{len(states)} states: {e}",
                cause=e
            ) from e

        logger.debug("predicted values for %d states", len(states))
        return np.asarray(predictions, dtype=np.float64).ravel()
