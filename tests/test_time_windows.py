"""
Tests for time window construction.
"""

import numpy as np
import pandas as pd
import pytest

from spikerates.rates import as_time_windows, sliding_windows, windows_from_edges


class TestWindowsFromEdges:
    """Test contiguous windows built from bin edges."""

    def test_edges(self):
        tw = windows_from_edges(np.array([0.0, 0.5, 1.0]))
        np.testing.assert_array_equal(tw, [[0.0, 0.5], [0.5, 1.0]])

    def test_range(self):
        """N + 1 edges yield N windows."""
        tw = windows_from_edges(range(0, 4))
        assert tw.shape == (3, 2)

    def test_too_few_edges(self):
        with pytest.raises(ValueError):
            windows_from_edges(np.array([1.0]))


class TestSlidingWindows:
    """Test regularly spaced windows."""

    def test_contiguous(self):
        """Default step equals the width."""
        tw = sliding_windows(0.0, 1.0, 0.25)
        np.testing.assert_allclose(tw[:, 0], [0.0, 0.25, 0.5, 0.75])
        np.testing.assert_allclose(tw[:, 1] - tw[:, 0], 0.25)

    def test_overlapping(self):
        tw = sliding_windows(0.0, 1.0, 0.5, step=0.25)
        np.testing.assert_allclose(tw, [[0.0, 0.5], [0.25, 0.75], [0.5, 1.0]])

    def test_invalid(self):
        with pytest.raises(AssertionError):
            sliding_windows(0.0, 1.0, 0.0)
        with pytest.raises(AssertionError):
            sliding_windows(0.0, 0.1, 0.5)


class TestAsTimeWindows:
    """Test normalization of time window representations."""

    def test_explicit(self):
        """Explicit windows may overlap or leave gaps."""
        explicit = [[-1.0, 0.0], [0.0, 0.5], [0.25, 1.0], [2.0, 3.0]]
        tw = as_time_windows(explicit)
        np.testing.assert_array_equal(tw, explicit)

    def test_dataframe(self):
        df = pd.DataFrame({"start": [0.0, 1.0], "end": [1.0, 3.0]})
        assert as_time_windows(df).shape == (2, 2)

    def test_edges(self):
        tw = as_time_windows(np.linspace(0, 1, 5))
        assert tw.shape == (4, 2)

    def test_wrong_columns(self):
        """Explicit windows must have exactly two columns."""
        with pytest.raises(ValueError):
            as_time_windows(np.zeros((4, 3)))
        with pytest.raises(ValueError):
            as_time_windows(np.zeros((4, 1)))

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            as_time_windows({"start": 0, "end": 1})
        with pytest.raises(TypeError):
            as_time_windows(1.0)

    def test_non_positive_duration(self):
        """Zero or negative durations are rejected."""
        with pytest.raises(ValueError):
            as_time_windows(np.array([[0.0, 1.0], [1.0, 1.0]]))
        with pytest.raises(ValueError):
            as_time_windows(np.array([[1.0, 0.0]]))
        with pytest.raises(ValueError):
            as_time_windows(np.array([1.0, 0.5, 0.0]))
