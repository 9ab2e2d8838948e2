"""
Tests for DataFrame conversion utilities.
"""

import numpy as np
import pandas as pd
import pytest

from spikerates.rates import compute_rates
from spikerates.utils import frame_to_spike_trains, rates_to_frame, spike_trains_to_frame


class TestRatesToFrame:
    def test_labels(self, spike_trains):
        edges = np.array([0.0, 1.0, 2.0])
        rates = compute_rates(spike_trains, edges)
        df = rates_to_frame(rates, edges, trials=["x", "y", "z"])

        assert df.shape == (3, 2)
        assert list(df.index) == ["x", "y", "z"]
        assert isinstance(df.columns, pd.IntervalIndex)
        assert df.columns.closed == "right"
        assert 1.0 in df.columns[0]
        np.testing.assert_array_equal(df.to_numpy(), rates)

    def test_left_edge(self):
        df = rates_to_frame(np.ones((1, 2)), np.array([[0.0, 1.0], [1.0, 2.0]]), "left")
        assert df.columns.closed == "left"
        assert list(df.index) == [0]

    def test_mismatch(self):
        with pytest.raises(AssertionError):
            rates_to_frame(np.ones((1, 3)), np.array([0.0, 1.0, 2.0]))


class TestSpikeTrainFrames:
    """Test long-format representation of spike trains."""

    def test_to_frame(self, spike_trains):
        df = spike_trains_to_frame(spike_trains)
        assert list(df.columns) == ["Trial", "Spike time"]
        assert len(df) == 10
        assert set(df["Trial"]) == {0, 2}

    def test_dict_labels(self):
        df = spike_trains_to_frame({"a": [0.1, np.nan, 0.2], "b": None})
        assert list(df["Trial"]) == ["a", "a"]

    def test_from_frame(self, spike_trains):
        df = spike_trains_to_frame(spike_trains)
        trains = frame_to_spike_trains(df, trials=[0, 1, 2])
        assert list(trains.keys()) == [0, 1, 2]
        assert trains[1] is None
        np.testing.assert_array_equal(trains[0], spike_trains[0])
        np.testing.assert_array_equal(
            compute_rates(trains, np.array([0.0, 1.0, 2.0])),
            compute_rates(spike_trains, np.array([0.0, 1.0, 2.0])),
        )
