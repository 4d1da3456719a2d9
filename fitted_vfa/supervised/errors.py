"""
Error types raised by the supervised value-function layer.

Callers can branch on the error kind: bad training input, a failed fit,
or a failed prediction. The estimator's own exception is kept on ``cause``.
"""
from typing import Optional


class VFAError(Exception):
    """Base class for value-function approximation errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class InvalidInput(VFAError, ValueError):
    """Empty training set, inconsistent feature lengths or non-numeric data."""


class TrainingFailed(VFAError):
    """The estimator raised while being fit; no value function was produced."""


class PredictionFailed(VFAError):
    """The estimator (or feature extraction) raised for a single prediction."""
