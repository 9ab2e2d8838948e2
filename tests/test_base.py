"""
Tests for signal and spike train conversion.
"""

import numpy as np
import pandas as pd
import pytest
import torch

from spikerates._base import (
    from_single_train,
    signal_to_array,
    spike_train_to_array,
    spike_trains_to_list,
)


class TestSignalToArray:
    """Test conversion of signals to arrays."""

    def test_supported_types(self):
        """Arrays, DataFrames, Tensors and lists are converted to float arrays."""
        expected = np.array([[1.0, 2.0], [3.0, 4.0]])
        for x in (
            expected,
            pd.DataFrame(expected),
            torch.tensor(expected),
            [[1, 2], [3, 4]],
        ):
            x_a = signal_to_array(x)
            assert x_a.dtype == np.float64
            np.testing.assert_array_equal(x_a, expected)

    def test_1d(self):
        """1D inputs are kept as they are only when allowed."""
        assert signal_to_array(pd.Series([1, 2, 3]), allow_1d=True).shape == (3,)
        with pytest.raises(ValueError):
            signal_to_array(np.arange(3))

    def test_invalid(self):
        """Unsupported types and shapes are rejected."""
        with pytest.raises(TypeError):
            signal_to_array({"a": 1})
        with pytest.raises(ValueError):
            signal_to_array(np.zeros((2, 2, 2)), allow_1d=True)


class TestSpikeTrains:
    """Test normalization of spike trains."""

    def test_no_data(self):
        """None, empty and all-NaN trains carry no data."""
        assert spike_train_to_array(None) is None
        assert spike_train_to_array([]) is None
        assert spike_train_to_array(np.array([np.nan, np.nan])) is None

    def test_partial_nan_kept(self):
        """Trains with some valid spikes are kept unchanged."""
        spikes_t = spike_train_to_array([np.nan, 0.5])
        assert spikes_t is not None
        assert spikes_t.shape == (2,)

    def test_2d_train_rejected(self):
        with pytest.raises(ValueError):
            spike_train_to_array(np.zeros((2, 2)))

    def test_from_single_train(self):
        trains = from_single_train(np.array([0.1, 0.2]))
        assert len(trains) == 1
        np.testing.assert_array_equal(trains[0], [0.1, 0.2])

    def test_single_train_is_wrapped(self):
        """A flat numeric train is a set with one trial."""
        assert len(spike_trains_to_list(np.array([0.1, 0.2, 0.3]))) == 1
        assert len(spike_trains_to_list([0.1, 0.2, 0.3])) == 1
        assert len(spike_trains_to_list(torch.tensor([0.1, 0.2]))) == 1

    def test_empty_input_has_no_trials(self):
        """Every empty input is a set without trials."""
        for empty in ([], (), np.array([]), pd.Series([], dtype=float), torch.tensor([])):
            assert spike_trains_to_list(empty) == []
        assert len(from_single_train(np.array([]))) == 1

    def test_set_of_trains(self, spike_trains):
        """Trial order is preserved and no-data trials become None."""
        trains = spike_trains_to_list(spike_trains)
        assert len(trains) == 3
        assert trains[1] is None
        np.testing.assert_array_equal(trains[2], spike_trains[2])

    def test_dict_of_trains(self):
        trains = spike_trains_to_list({"b": [1.0], "a": None})
        assert len(trains) == 2
        assert trains[1] is None

    def test_invalid_set(self):
        with pytest.raises(TypeError):
            spike_trains_to_list("spikes")
