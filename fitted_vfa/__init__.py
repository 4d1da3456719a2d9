"""
fitted_vfa: scikit-learn value-function approximation for fitted value iteration.
"""

from fitted_vfa.supervised import (
    SupervisedVFAInstance,
    SklearnVFATrainer,
    KNNVFATrainer,
    KNNConfig,
    SklearnVFA,
    get_knn_trainer,
    VFAError,
    InvalidInput,
    TrainingFailed,
    PredictionFailed,
)

__version__ = "0.1.0"

__all__ = [
    'SupervisedVFAInstance',
    'SklearnVFATrainer',
    'KNNVFATrainer',
    'KNNConfig',
    'SklearnVFA',
    'get_knn_trainer',
    'VFAError',
    'InvalidInput',
    'TrainingFailed',
    'PredictionFailed',
]
