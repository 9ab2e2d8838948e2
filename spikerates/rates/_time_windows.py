"""Functions for building the time windows over which spike rates are computed.


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

from math import floor

import numpy as np
import pandas as pd
import torch

from .._base import Signal


def windows_from_edges(edges: Signal | range) -> np.ndarray:
    """Build contiguous time windows from a sequence of bin edges.

    Parameters
    ----------
    edges : Signal or range
        Bin edges with shape (n_edges,).

    Returns
    -------
    ndarray
        Time windows with shape (n_edges - 1, 2) containing (start, end) pairs.

    Raises
    ------
    ValueError
        If the edges are not 1D or fewer than two edges are given.
    """
    edges_array = np.asarray(
        edges.detach().cpu().numpy() if isinstance(edges, torch.Tensor) else edges,
        dtype=np.float64,
    )
    if edges_array.ndim != 1:
        raise ValueError("The bin edges must be 1D.")
    if edges_array.size < 2:
        raise ValueError("At least two bin edges are required.")

    return np.stack([edges_array[:-1], edges_array[1:]], axis=1)


def sliding_windows(
    start: float, stop: float, width: float, step: float | None = None
) -> np.ndarray:
    """Build regularly spaced time windows with fixed width, possibly overlapping.

    Parameters
    ----------
    start : float
        Start of the first window.
    stop : float
        Upper bound for the end of the last window.
    width : float
        Width of each window.
    step : float or None, default=None
        Distance between the starts of consecutive windows; if None, it is set
        to the width (i.e., contiguous bins).

    Returns
    -------
    ndarray
        Time windows with shape (n_windows, 2) containing (start, end) pairs.
    """
    if step is None:
        step = width
    assert width > 0, "The width of the windows must be positive."
    assert step > 0, "The step between windows must be positive."
    assert stop - start >= width, "The time range is shorter than a single window."

    # Tolerance accounts for ranges that are an exact multiple of the step
    n_win = floor((stop - start - width) / step + 1e-9) + 1
    starts = start + np.arange(n_win) * step
    return np.stack([starts, starts + width], axis=1)


def as_time_windows(time_windows: Signal | range) -> np.ndarray:
    """Convert the given representation of time windows to an array of (start, end) pairs.

    Parameters
    ----------
    time_windows : Signal, sequence or range
        Either:
        - explicit time windows with shape (n_windows, 2);
        - regular bin edges with shape (n_edges,), yielding n_edges - 1 contiguous windows.

    Returns
    -------
    ndarray
        Time windows with shape (n_windows, 2).

    Raises
    ------
    TypeError
        If the time windows are neither an array, a DataFrame/Series, a Tensor,
        a sequence nor a range.
    ValueError
        If explicit time windows do not have two columns, if the input is neither
        2D nor 1D, or if any window has non-positive duration.
    """
    if isinstance(time_windows, range):
        tw_array = windows_from_edges(time_windows)
    elif isinstance(
        time_windows, (np.ndarray, pd.DataFrame, pd.Series, torch.Tensor, list, tuple)
    ):
        if isinstance(time_windows, torch.Tensor):
            raw = time_windows.detach().cpu().numpy()
        elif isinstance(time_windows, (pd.DataFrame, pd.Series)):
            raw = time_windows.to_numpy()
        else:
            raw = time_windows
        raw = np.asarray(raw, dtype=np.float64)

        if raw.ndim == 1:
            tw_array = windows_from_edges(raw)
        elif raw.ndim == 2:
            if raw.shape[1] != 2:
                raise ValueError(
                    f"Explicit time windows must have shape (n_windows, 2): the provided one was {raw.shape}."
                )
            tw_array = raw
        else:
            raise ValueError("The time windows are neither 2D nor 1D.")
    else:
        raise TypeError(
            "The time windows are neither an array, a DataFrame/Series, a Tensor, "
            "a sequence nor a range."
        )

    durations = np.diff(tw_array, axis=1).flatten()
    if np.any(~(durations > 0)):
        bad_idx = np.flatnonzero(~(durations > 0)).tolist()
        raise ValueError(
            f"Every time window must have positive duration: windows {bad_idx} do not."
        )

    return tw_array
