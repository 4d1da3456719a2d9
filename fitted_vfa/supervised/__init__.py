"""
Supervised value-function approximation backed by scikit-learn.

Provides the trainer that fits an estimator to (state, value) pairs and the
value function that wraps the fitted estimator.
"""

from fitted_vfa.supervised.errors import (
    VFAError,
    InvalidInput,
    TrainingFailed,
    PredictionFailed
)
from fitted_vfa.supervised.interfaces import (
    ValueFunction,
    SupervisedVFA,
    StateFeatures,
    ModelGenerator
)
from fitted_vfa.supervised.features import NumericVariableFeatures, ConcatenatedFeatures
from fitted_vfa.supervised.dataset import (
    SupervisedVFAInstance,
    FeatureDataset,
    feature_vector,
    build_dataset,
    single_row
)
from fitted_vfa.supervised.value_function import SklearnVFA
from fitted_vfa.supervised.trainer import (
    SklearnVFATrainer,
    KNNVFATrainer,
    KNNConfig,
    get_knn_trainer
)

__all__ = [
    'VFAError',
    'InvalidInput',
    'TrainingFailed',
    'PredictionFailed',
    'ValueFunction',
    'SupervisedVFA',
    'StateFeatures',
    'ModelGenerator',
    'NumericVariableFeatures',
    'ConcatenatedFeatures',
    'SupervisedVFAInstance',
    'FeatureDataset',
    'feature_vector',
    'build_dataset',
    'single_row',
    'SklearnVFA',
    'SklearnVFATrainer',
    'KNNVFATrainer',
    'KNNConfig',
    'get_knn_trainer'
]
