"""
Training logic for scikit-learn value-function approximators.

Fits a freshly generated estimator to (state, value) instances and wraps the
result in a SklearnVFA. Also provides the k-nearest-neighbour trainer, since
instance-based regressors have convergence guarantees for fitted value
iteration that most parametric regressors lack.
"""
import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Optional, Sequence

from sklearn.neighbors import KNeighborsRegressor
from sklearn.pipeline import Pipeline, make_pipeline
from sklearn.preprocessing import MinMaxScaler

from fitted_vfa.supervised.dataset import FeatureDataset, build_dataset
from fitted_vfa.supervised.errors import TrainingFailed
from fitted_vfa.supervised.interfaces import ModelGenerator, StateFeatures, SupervisedVFA
from fitted_vfa.supervised.value_function import SklearnVFA

logger = logging.getLogger(__name__)


@dataclass
class KNNConfig:
    """
    Tuning knobs for the k-nearest-neighbour regressor.

    The defaults give a KD-tree index with inverse-distance weighted voting.
    """
    weights: str = "distance"       # 'distance' or 'uniform'
    algorithm: str = "kd_tree"      # neighbour index passed to sklearn
    leaf_size: int = 30             # KD-tree leaf size
    p: int = 2                      # Minkowski power, 2 = Euclidean
    normalize: bool = False         # Min-max scale features before distances


def get_knn_params(k: int, config: Optional[KNNConfig] = None) -> dict:
    """
    Map a neighbour count and KNNConfig to KNeighborsRegressor params.

    Args:
        k: Number of nearest neighbours
        config: Remaining settings (default: KNNConfig())

    Returns:
        Dictionary of sklearn KNeighborsRegressor parameters

    Raises:
        ValueError: If k is not a positive integer or weights is unknown
    """
    if isinstance(k, bool) or not isinstance(k, Integral) or k < 1:
        raise ValueError(f"k must be a positive integer, got {k!r}")

    config = config or KNNConfig()
    if config.weights not in ('distance', 'uniform'):
        raise ValueError(f"Unknown weighting: {config.weights}")

    return {
        'n_neighbors': k,
        'weights': config.weights,
        'algorithm': config.algorithm,
        'leaf_size': config.leaf_size,
        'p': config.p
    }


def make_knn_generator(k: int, config: Optional[KNNConfig] = None) -> ModelGenerator:
    """
    Build a generator of unfitted k-nearest-neighbour regressors.

    Args:
        k: Number of nearest neighbours
        config: Remaining settings (default: KNNConfig())

    Returns:
        Zero-argument callable returning a new estimator on every call
    """
    config = config or KNNConfig()
    params = get_knn_params(k, config)

    def generate():
        regressor = KNeighborsRegressor(**params)
        if config.normalize:
            return make_pipeline(MinMaxScaler(), regressor)
        return regressor

    return generate


class SklearnVFATrainer(SupervisedVFA):
    """
    Fits scikit-learn regressors to (state, value) training instances.

    Each call to ``train`` asks the generator for a new estimator, so value
    functions returned by earlier calls are never refit.
    """

    def __init__(self, model_generator: ModelGenerator, features: StateFeatures):
        """
        Initialize.

        Args:
            model_generator: Zero-argument callable returning an unfitted estimator
            features: Feature extractor used to convert states to vectors
        """
        self.model_generator = model_generator
        self.features = features

    def __repr__(self):
        return f"{type(self).__name__}(features={self.features!r})"

    def fit_model(self, model: Any, dataset: FeatureDataset) -> Any:
        """
        Fit an estimator on the assembled dataset.

        Args:
            model: Unfitted estimator from the generator
            dataset: Training features and targets

        Returns:
            The fitted estimator
        """
        X, y = dataset.to_arrays()
        model.fit(X, y)
        return model

    def train(self, instances: Sequence[Any]) -> SklearnVFA:
        """
        Train a value function on the given instances.

        Args:
            instances: Non-empty sequence of SupervisedVFAInstance or
                (state, value) pairs

        Returns:
            SklearnVFA wrapping the fitted estimator and this trainer's
            feature extractor

        Raises:
            InvalidInput: If instances is empty or feature lengths differ
            TrainingFailed: If the generator or the estimator's fit raises

        Example:
            >>> trainer = get_knn_trainer(lambda s: s, k=1)
            >>> vfa = trainer.train([([0, 0], 1.0), ([2, 2], 3.0)])
            >>> vfa.value([2, 2])
            3.0
        """
        dataset = build_dataset(instances, self.features)

        model = None
        try:
            model = self.model_generator()
            logger.debug(
                "fitting %s rows=%d features=%d",
                type(model).__name__, len(dataset), dataset.n_features
            )
            model = self.fit_model(model, dataset)
        except Exception as e:
            name = type(model).__name__ if model is not None else "model generator"
            logger.error("training failed for %s: %s", name, e)
            raise TrainingFailed(f"{name} could not be fit: {e}", cause=e) from e

        logger.info(
            "trained %s on %d instances (%d features)",
            type(model).__name__, len(dataset), dataset.n_features
        )
        return SklearnVFA(self.features, model, n_features=dataset.n_features)

    @classmethod
    def knn(
        cls,
        features: StateFeatures,
        k: int,
        config: Optional[KNNConfig] = None
    ) -> 'KNNVFATrainer':
        """Shortcut for get_knn_trainer."""
        return get_knn_trainer(features, k, config)


class KNNVFATrainer(SklearnVFATrainer):
    """
    Trainer for k-nearest-neighbour regressors.

    When a training set has fewer rows than k, the neighbour count of that
    fit is lowered to the row count.
    """

    def __init__(self, features: StateFeatures, k: int, config: Optional[KNNConfig] = None):
        self.k = k
        self.config = config or KNNConfig()
        super().__init__(make_knn_generator(k, self.config), features)

    def __repr__(self):
        return f"KNNVFATrainer(k={self.k}, config={self.config})"

    def fit_model(self, model: Any, dataset: FeatureDataset) -> Any:
        regressor = model.steps[-1][1] if isinstance(model, Pipeline) else model
        if regressor.n_neighbors > len(dataset):
            logger.debug(
                "capping n_neighbors %d -> %d for small training set",
                regressor.n_neighbors, len(dataset)
            )
            regressor.set_params(n_neighbors=len(dataset))
        return super().fit_model(model, dataset)


def get_knn_trainer(
    features: StateFeatures,
    k: int,
    config: Optional[KNNConfig] = None
) -> KNNVFATrainer:
    """
    Create a trainer for KD-tree k-nearest-neighbour regression.

    Uses sklearn's KNeighborsRegressor with a KD-tree index and
    inverse-distance weighted voting by default.

    Args:
        features: Feature extractor used to convert states to vectors
        k: Number of nearest neighbours
        config: Optional KNNConfig overriding weighting, index or scaling

    Returns:
        KNNVFATrainer ready to train value functions

    Raises:
        ValueError: If k is not a positive integer

    Example:
        >>> trainer = get_knn_trainer(lambda s: [s['x'], s['y']], k=3)
        >>> vfa = trainer.train(instances)
        >>> v = vfa.value({'x': 0.5, 'y': 1.0})
    """
    return KNNVFATrainer(features, k, config)
