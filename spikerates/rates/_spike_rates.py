"""Functions for computing spike rates of trials over time windows.


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

import logging
from collections.abc import Mapping, Sequence

import numpy as np
from joblib import Parallel, delayed

from .._base import Signal, SpikeTrain, spike_trains_to_list
from ..smoothing import smooth
from ._time_windows import as_time_windows


def _trial_rates(
    spikes_t: np.ndarray,
    tw_array: np.ndarray,
    durations: np.ndarray,
    inclusive_edge: str,
) -> np.ndarray:
    """Compute the rate of a single trial in each time window."""
    spikes_col = spikes_t[:, np.newaxis]
    if inclusive_edge == "right":
        in_win = (spikes_col > tw_array[:, 0]) & (spikes_col <= tw_array[:, 1])
    else:
        in_win = (spikes_col >= tw_array[:, 0]) & (spikes_col < tw_array[:, 1])
    return np.count_nonzero(in_win, axis=0) / durations


def compute_rates(
    spike_trains: Sequence[SpikeTrain] | Mapping[object, SpikeTrain] | SpikeTrain,
    time_windows: Signal | range,
    inclusive_edge: str = "right",
    n_jobs: int = 1,
) -> np.ndarray:
    """Compute the spike rate of each trial in each time window.

    Parameters
    ----------
    spike_trains : sequence or dict of SpikeTrain, or SpikeTrain
        Spike times of each trial. A single 1D spike train is treated as one trial.
        Trials that are None, empty or made only of NaNs carry no data.
    time_windows : Signal, sequence or range
        Either explicit time windows with shape (n_windows, 2) or
        regular bin edges with shape (n_windows + 1,).
    inclusive_edge : {"right", "left"}, default="right"
        Edge of the window that includes spikes lying exactly on it:
        - "right": start < t <= end;
        - "left": start <= t < end.
    n_jobs : int, default=1
        Number of parallel jobs used across trials (-1 means all cores).

    Returns
    -------
    ndarray
        Spike rates (spikes per unit time) with shape (n_trials, n_windows);
        trials without data yield a row of zeros.

    Raises
    ------
    TypeError
        If the spike trains or the time windows are given in an unsupported format.
    ValueError
        If explicit time windows do not have two columns, or if any window
        has non-positive duration.
    """
    assert inclusive_edge in (
        "right",
        "left",
    ), f'The inclusive edge can be either "right" or "left": the provided one was "{inclusive_edge}".'
    assert n_jobs != 0, "The n. of jobs must be non-zero."

    tw_array = as_time_windows(time_windows)
    trains = spike_trains_to_list(spike_trains)
    n_trials, n_win = len(trains), tw_array.shape[0]

    # Compute durations ahead of time
    durations = tw_array[:, 1] - tw_array[:, 0]

    logging.info(
        f"Computing spike rates of {n_trials} trials over {n_win} windows "
        f'("{inclusive_edge}" edge inclusive).'
    )

    rates = np.zeros(shape=(n_trials, n_win), dtype=np.float64)
    valid_idx = [t for t, spikes_t in enumerate(trains) if spikes_t is not None]
    if len(valid_idx) < n_trials:
        logging.info(f"Skipping {n_trials - len(valid_idx)} trials without data.")

    results = Parallel(n_jobs=n_jobs)(
        delayed(_trial_rates)(trains[t], tw_array, durations, inclusive_edge)
        for t in valid_idx
    )
    for t, trial_rates in zip(valid_idx, results):  # type: ignore
        rates[t] = trial_rates

    return rates


def smoothed_rates(
    spike_trains: Sequence[SpikeTrain] | Mapping[object, SpikeTrain] | SpikeTrain,
    time_windows: Signal | range,
    inclusive_edge: str = "right",
    n_jobs: int = 1,
    **kwargs,
) -> np.ndarray:
    """Compute the spike rate of each trial in each time window, and smooth it along time.

    Parameters
    ----------
    spike_trains : sequence or dict of SpikeTrain, or SpikeTrain
        Spike times of each trial.
    time_windows : Signal, sequence or range
        Either explicit time windows with shape (n_windows, 2) or
        regular bin edges with shape (n_windows + 1,).
    inclusive_edge : {"right", "left"}, default="right"
        Edge of the window that includes spikes lying exactly on it.
    n_jobs : int, default=1
        Number of parallel jobs used across trials.
    **kwargs
        Keyword arguments forwarded to the smoothing function (method, window_size, gauss_limit).

    Returns
    -------
    ndarray
        Smoothed spike rates with shape (n_trials, n_windows).
    """
    assert "axis" not in kwargs, "Rates are always smoothed along the time windows."

    rates = compute_rates(spike_trains, time_windows, inclusive_edge, n_jobs)
    return smooth(rates, axis=1, n_jobs=n_jobs, **kwargs)
