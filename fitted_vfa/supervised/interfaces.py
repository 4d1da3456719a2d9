"""
Contracts shared by trainers and value functions.

Feature extractors and model generators are plain callables; only the two
roles that carry behaviour (training and evaluation) get base classes.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

# state -> ordered sequence of floats, fixed length per problem
StateFeatures = Callable[[Any], Sequence[float]]

# () -> fresh, unfitted scikit-learn estimator
ModelGenerator = Callable[[], Any]


class ValueFunction(ABC):
    """
    Abstract base class for state value functions.
    """

    @abstractmethod
    def value(self, state: Any) -> float:
        """
        Return the estimated value of a state.

        Args:
            state: Domain state understood by the feature extractor

        Returns:
            Estimated value V(s)
        """
        pass


class SupervisedVFA(ABC):
    """
    Abstract base class for supervised value-function approximators.

    Implementations fit a regressor to (state, value) pairs and return a
    ValueFunction wrapping the fitted model.
    """

    @abstractmethod
    def train(self, instances: Sequence[Any]) -> ValueFunction:
        """
        Fit a value function to training instances.

        Args:
            instances: Sequence of SupervisedVFAInstance or (state, value) tuples

        Returns:
            A ValueFunction over the same state space
        """
        pass
