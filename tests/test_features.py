"""
Unit tests for the feature helpers.
"""
from types import SimpleNamespace

import pytest

from fitted_vfa.supervised.features import NumericVariableFeatures, ConcatenatedFeatures


class TestNumericVariableFeatures:
    """Tests for NumericVariableFeatures."""

    def test_mapping_state(self):
        """Keys are read from mappings in the configured order."""
        features = NumericVariableFeatures(['y', 'x'])

        assert features({'x': 1, 'y': 2, 'name': 'agent'}) == [2.0, 1.0]

    def test_object_state(self):
        """Attributes are read from plain objects."""
        features = NumericVariableFeatures(['x', 'y'])
        state = SimpleNamespace(x=3, y=4.5)

        assert features(state) == [3.0, 4.5]

    def test_length(self):
        """len() reports the number of features."""
        assert len(NumericVariableFeatures(['a', 'b', 'c'])) == 3

    def test_missing_key(self):
        """A missing variable surfaces as KeyError."""
        with pytest.raises(KeyError):
            NumericVariableFeatures(['x'])({'y': 1})

    def test_no_keys(self):
        """At least one key is required."""
        with pytest.raises(ValueError):
            NumericVariableFeatures([])


class TestConcatenatedFeatures:
    """Tests for ConcatenatedFeatures."""

    def test_concatenation_order(self):
        """Outputs are joined in extractor order."""
        features = ConcatenatedFeatures(
            NumericVariableFeatures(['x']),
            lambda s: [s['x'] ** 2, 1]
        )

        assert features({'x': 3}) == [3.0, 9.0, 1.0]

    def test_no_extractors(self):
        """At least one extractor is required."""
        with pytest.raises(ValueError):
            ConcatenatedFeatures()
