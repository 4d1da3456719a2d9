"""
Small feature extractors for states that already carry numeric variables.

Domain-specific extraction belongs to the caller; these cover the common case
where a state is a mapping or an object whose fields are the features.
"""
from collections.abc import Mapping
from typing import Any, List, Sequence

from fitted_vfa.supervised.interfaces import StateFeatures


class NumericVariableFeatures:
    """
    Reads named numeric variables from a state, in a fixed order.

    Works with mapping states (``state[key]``) and plain objects
    (``getattr(state, key)``).

    Example:
        >>> features = NumericVariableFeatures(['x', 'y'])
        >>> features({'x': 1, 'y': 2, 'label': 'goal'})
        [1.0, 2.0]
    """

    def __init__(self, keys: Sequence[str]):
        if not keys:
            raise ValueError("NumericVariableFeatures needs at least one key")
        self.keys = list(keys)

    def __len__(self):
        return len(self.keys)

    def __call__(self, state: Any) -> List[float]:
        if isinstance(state, Mapping):
            return [float(state[key]) for key in self.keys]
        return [float(getattr(state, key)) for key in self.keys]

    def __repr__(self):
        return f"NumericVariableFeatures(keys={self.keys})"


class ConcatenatedFeatures:
    """Joins the outputs of several extractors into one vector."""

    def __init__(self, *extractors: StateFeatures):
        if not extractors:
            raise ValueError("ConcatenatedFeatures needs at least one extractor")
        self.extractors = extractors

    def __call__(self, state: Any) -> List[float]:
        vec = []
        for extractor in self.extractors:
            vec.extend(float(v) for v in extractor(state))
        return vec
