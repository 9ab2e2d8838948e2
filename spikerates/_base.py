"""This module contains the basic types for signals and spike trains.


Copyright 2023 Mattia Orlandi

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

https://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np
import pandas as pd
import torch

Signal = np.ndarray | pd.DataFrame | pd.Series | torch.Tensor
SpikeTrain = np.ndarray | pd.Series | torch.Tensor | Sequence[float] | None


def signal_to_array(x: Signal | Sequence, allow_1d: bool = False) -> np.ndarray:
    """Convert the signal to a float array.

    Parameters
    ----------
    x : Signal or sequence
        A signal with shape (n_samples, n_channels), or (n_samples,) if allow_1d is True.
    allow_1d : bool, default=False
        Whether to allow 1D signals (they are returned as they are).

    Returns
    -------
    ndarray
        The corresponding array.

    Raises
    ------
    TypeError
        If the input is neither an array, a DataFrame/Series, a Tensor nor a sequence.
    ValueError
        If the input is not 2D (or 1D if allow_1d is True).
    """
    # Convert input to array
    if isinstance(x, np.ndarray):
        x_a = x
    elif isinstance(x, pd.DataFrame) or isinstance(x, pd.Series):
        x_a = x.to_numpy()
    elif isinstance(x, torch.Tensor):
        x_a = x.detach().cpu().numpy()
    elif isinstance(x, (list, tuple, range)):
        x_a = np.asarray(x)
    else:
        raise TypeError(
            "The input is neither an array, a DataFrame/Series, a Tensor nor a sequence."
        )
    # Check shape
    n_dim = len(x_a.shape)
    if n_dim != 2 and not (allow_1d and n_dim == 1):
        raise ValueError(
            "The input is neither 2D nor 1D." if allow_1d else "The input is not 2D."
        )

    return x_a.astype(np.float64, copy=False)


def spike_train_to_array(spike_train: SpikeTrain) -> np.ndarray | None:
    """Convert a spike train to a 1D array of spike times.

    Parameters
    ----------
    spike_train : SpikeTrain
        Spike times of a single trial, or None.

    Returns
    -------
    ndarray or None
        Array of spike times, or None if the trial carries no data
        (i.e., it is None, empty or made only of NaNs).

    Raises
    ------
    TypeError
        If the input is neither an array, a Series, a Tensor nor a sequence.
    ValueError
        If the input is not 1D.
    """
    if spike_train is None:
        return None

    spikes_t = signal_to_array(spike_train, allow_1d=True)
    if spikes_t.ndim != 1:
        raise ValueError("A spike train must be 1D.")
    if np.all(np.isnan(spikes_t)):  # also true for empty trains
        return None
    return spikes_t


def _is_single_train(spike_trains) -> bool:
    """Check whether the input is a single numeric spike train rather than a set."""
    if isinstance(spike_trains, (pd.Series, torch.Tensor)):
        return len(spike_trains.shape) == 1 and spike_trains.shape[0] > 0
    if isinstance(spike_trains, np.ndarray):
        return (
            spike_trains.ndim == 1 and spike_trains.size > 0 and spike_trains.dtype != object
        )
    if isinstance(spike_trains, (list, tuple)):
        return len(spike_trains) > 0 and all(
            isinstance(s, (int, float, np.number)) for s in spike_trains
        )
    return False


def from_single_train(spike_train: SpikeTrain) -> list[np.ndarray | None]:
    """Wrap a single spike train into a set containing one trial.

    Parameters
    ----------
    spike_train : SpikeTrain
        Spike times of a single trial.

    Returns
    -------
    list of (ndarray or None)
        List with a single element.
    """
    return [spike_train_to_array(spike_train)]


def spike_trains_to_list(
    spike_trains: Sequence[SpikeTrain] | Mapping[object, SpikeTrain] | SpikeTrain,
) -> list[np.ndarray | None]:
    """Convert a set of spike trains to a list of arrays, one per trial.

    Parameters
    ----------
    spike_trains : sequence or dict of SpikeTrain, or SpikeTrain
        Spike times of each trial; if a dictionary is given, its order of
        insertion defines the order of trials. A single non-empty 1D numeric
        spike train is treated as a set with one trial, whereas an empty input
        (list, tuple, array, Series or Tensor) is a set with no trials; use
        from_single_train to get one trial without data instead.

    Returns
    -------
    list of (ndarray or None)
        Spike times of each trial; None marks trials without data.

    Raises
    ------
    TypeError
        If the input is not a supported set of spike trains.
    """
    if _is_single_train(spike_trains):
        return from_single_train(spike_trains)  # type: ignore
    if isinstance(spike_trains, Mapping):
        return [spike_train_to_array(s) for s in spike_trains.values()]
    # A 2D array yields one NaN-padded trial per row, an empty input no trials
    if isinstance(spike_trains, (list, tuple, np.ndarray, pd.Series, torch.Tensor)):
        return [spike_train_to_array(s) for s in spike_trains]
    raise TypeError(
        "The spike trains must be given as a sequence or a dictionary of spike trains."
    )
