"""This module contains utility functions for converting spike trains and rates to DataFrames.


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

from ._base import Signal, SpikeTrain, signal_to_array, spike_trains_to_list
from .rates import as_time_windows


def rates_to_frame(
    rates: Signal,
    time_windows: Signal | range,
    inclusive_edge: str = "right",
    trials: Sequence | None = None,
) -> pd.DataFrame:
    """Convert a matrix of spike rates to a DataFrame labelled by trial and time window.

    Parameters
    ----------
    rates : Signal
        Spike rates with shape (n_trials, n_windows).
    time_windows : Signal, sequence or range
        Time windows used to compute the rates (explicit or as bin edges).
    inclusive_edge : {"right", "left"}, default="right"
        Edge of the windows that includes spikes lying exactly on it.
    trials : sequence or None, default=None
        Labels of the trials; if None, trials are numbered from zero.

    Returns
    -------
    DataFrame
        DataFrame with shape (n_trials, n_windows) whose columns are the time intervals.
    """
    assert inclusive_edge in (
        "right",
        "left",
    ), f'The inclusive edge can be either "right" or "left": the provided one was "{inclusive_edge}".'

    rates_array = signal_to_array(rates)
    tw_array = as_time_windows(time_windows)
    assert (
        rates_array.shape[1] == tw_array.shape[0]
    ), f"The n. of time windows ({tw_array.shape[0]}) differs from the n. of rate columns ({rates_array.shape[1]})."

    columns = pd.IntervalIndex.from_arrays(
        tw_array[:, 0], tw_array[:, 1], closed=inclusive_edge, name="Time window"
    )
    index = pd.Index(
        np.arange(rates_array.shape[0]) if trials is None else list(trials), name="Trial"
    )
    return pd.DataFrame(rates_array, index=index, columns=columns)


def spike_trains_to_frame(
    spike_trains: Sequence[SpikeTrain] | Mapping[object, SpikeTrain] | SpikeTrain,
) -> pd.DataFrame:
    """Convert a set of spike trains to a long-format DataFrame.

    Parameters
    ----------
    spike_trains : sequence or dict of SpikeTrain
        Spike times of each trial; dictionary keys are used as trial labels.

    Returns
    -------
    DataFrame
        DataFrame with columns "Trial" and "Spike time"; trials without data are omitted.
    """
    trains = spike_trains_to_list(spike_trains)
    labels = (
        list(spike_trains.keys())
        if isinstance(spike_trains, Mapping)
        else list(range(len(trains)))
    )
    return pd.DataFrame(
        data=[
            (trial, spike_t)
            for trial, spikes_t in zip(labels, trains)
            if spikes_t is not None
            for spike_t in spikes_t[~np.isnan(spikes_t)]
        ],
        columns=["Trial", "Spike time"],
    )


def frame_to_spike_trains(
    spikes_df: pd.DataFrame, trials: Sequence | None = None
) -> dict[object, np.ndarray | None]:
    """Convert a long-format DataFrame of spike times to a dictionary of spike trains.

    Parameters
    ----------
    spikes_df : DataFrame
        DataFrame with columns "Trial" and "Spike time".
    trials : sequence or None, default=None
        Labels of the trials to extract; trials without spikes map to None.
        If None, the trials appearing in the DataFrame are extracted.

    Returns
    -------
    dict of {object : ndarray or None}
        Spike times of each trial.
    """
    grouped = {
        trial: group["Spike time"].to_numpy(dtype=np.float64)
        for trial, group in spikes_df.groupby("Trial", sort=False)
    }
    if trials is None:
        return grouped  # type: ignore
    return {trial: grouped.get(trial) for trial in trials}
