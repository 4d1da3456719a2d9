"""
Conversion of (state, value) training instances into scikit-learn arrays.

A FeatureDataset lives only for the duration of one fit: the first instance's
feature vector fixes the number of columns and every other row must match.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from fitted_vfa.supervised.errors import InvalidInput
from fitted_vfa.supervised.interfaces import StateFeatures

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupervisedVFAInstance:
    """
    Single training example for value-function fitting.

    Represents one (state, target value) pair produced by the caller,
    typically a Bellman backup computed during fitted value iteration.
    """
    state: Any
    value: float


@dataclass
class FeatureDataset:
    """
    Feature matrix and targets assembled for one training call.
    """
    X: np.ndarray       # Feature matrix, shape (n_rows, n_features)
    y: np.ndarray       # Targets, shape (n_rows,)

    def __len__(self):
        return self.X.shape[0]

    def __repr__(self):
        return f"FeatureDataset(n_rows={len(self)}, n_features={self.n_features})"

    @property
    def n_features(self) -> int:
        return self.X.shape[1]

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Return (X, y) ready for an estimator's fit.
        """
        return self.X, self.y

    def get_statistics(self) -> dict:
        """Get summary statistics of the dataset."""
        return {
            'n_rows': len(self),
            'n_features': self.n_features,
            'target_min': float(np.min(self.y)),
            'target_max': float(np.max(self.y)),
            'target_mean': float(np.mean(self.y)),
        }


def _unpack(instance: Any) -> Tuple[Any, Any]:
    if isinstance(instance, SupervisedVFAInstance):
        return instance.state, instance.value
    try:
        state, value = instance
    except (TypeError, ValueError) as e:
        raise InvalidInput(
            f"Training instance must be a SupervisedVFAInstance or a (state, value) pair, "
            f"got {type(instance).__name__}", cause=e
        ) from e
    return state, value


def feature_vector(features: StateFeatures, state: Any) -> np.ndarray:
    """
    Compute the feature vector of a state as a 1-D float array.

    Args:
        features: Feature extractor, state -> sequence of floats
        state: Domain state

    Returns:
        Feature vector, shape (n_features,)

    Raises:
        InvalidInput: If the extractor output is not a non-empty,
            one-dimensional sequence of finite numbers
    """
    raw = features(state)
    try:
        vec = np.asarray(raw, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Feature vector is not numeric: {e}", cause=e) from e

    if vec.ndim != 1:
        raise InvalidInput(f"Feature vector must be one-dimensional, got shape {vec.shape}")
    if vec.size == 0:
        raise InvalidInput("Feature vector is empty")
    if not np.all(np.isfinite(vec)):
        raise InvalidInput(f"Feature vector contains non-finite values: {vec}")
    return vec


def build_dataset(
    instances: Sequence[Any],
    features: StateFeatures
) -> FeatureDataset:
    """
    Build a feature dataset from training instances.

    Args:
        instances: Sequence of SupervisedVFAInstance or (state, value) pairs
        features: Feature extractor applied to every state

    Returns:
        FeatureDataset with one row per instance, in input order

    Raises:
        InvalidInput: If instances is empty, a feature vector's length differs
            from the first one, or a target is not a finite number

    Example:
        >>> ds = build_dataset([([0, 0], 1.0), ([1, 1], 2.0)], lambda s: s)
        >>> ds.X.shape
        (2, 2)
    """
    instances = list(instances) if instances is not None else []
    if not instances:
        raise InvalidInput("Cannot build a dataset from an empty training set")

    first_state, _ = _unpack(instances[0])
    n_features = feature_vector(features, first_state).size

    # Schema is fixed by the first instance; rows are filled in place
    X = np.empty((len(instances), n_features), dtype=np.float64)
    y = np.empty(len(instances), dtype=np.float64)

    for i, instance in enumerate(instances):
        state, target = _unpack(instance)
        vec = feature_vector(features, state)
        if vec.size != n_features:
            raise InvalidInput(
                f"Instance {i} has {vec.size} features, expected {n_features} "
                f"(from the first instance)"
            )
        try:
            y[i] = float(target)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Instance {i} has a non-numeric target: {target!r}", cause=e) from e
        if not np.isfinite(y[i]):
            raise InvalidInput(f"Instance {i} has a non-finite target: {target!r}")
        X[i] = vec

    logger.debug("built dataset rows=%d features=%d", len(instances), n_features)
    return FeatureDataset(X=X, y=y)


def single_row(vector: Sequence[float], n_features: Optional[int] = None) -> np.ndarray:
    """
    Shape one feature vector as a single-row matrix for inference.

    Args:
        vector: Feature vector
        n_features: Expected length (schema of the trained model), if known

    Returns:
        Matrix of shape (1, n_features)

    Raises:
        InvalidInput: If n_features is given and the vector length differs
    """
    row = np.asarray(vector, dtype=np.float64).reshape(1, -1)
    if n_features is not None and row.shape[1] != n_features:
        raise InvalidInput(
            f"Feature vector has {row.shape[1]} features, model was trained on {n_features}"
        )
    return row
