"""Function for smoothing spike rates along one axis.


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
from collections.abc import Sequence

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from .._base import Signal, signal_to_array
from ._abc_kernel import SmoothingKernel
from ._kernels import GaussianKernel, MeanKernel, MedianKernel


def smooth(
    x: Signal | Sequence[float],
    method: str = "gaussian",
    window_size: int = 5,
    axis: int = -1,
    gauss_limit: float = 3.0,
    n_jobs: int = 1,
) -> np.ndarray | pd.DataFrame | pd.Series:
    """Smooth a vector or a matrix of values along the given axis.

    Each 1D slice along the axis is smoothed independently; windows are truncated
    at the boundaries of the slice instead of being padded.

    Parameters
    ----------
    x : Signal or sequence
        Values with shape (n_points,) or (n_rows, n_cols), e.g., spike rates with
        shape (n_trials, n_windows).
    method : {"mean", "median", "gaussian"}, default="gaussian"
        Smoothing kernel.
    window_size : int, default=5
        Size of the smoothing window.
    axis : int, default=-1
        Axis along which the values are smoothed (for spike rates, -1 and 1
        refer to the time windows).
    gauss_limit : float, default=3.0
        Number of standard deviations covered by each half of the Gaussian kernel
        (relevant only for "gaussian" method).
    n_jobs : int, default=1
        Number of parallel jobs used across slices (-1 means all cores).

    Returns
    -------
    ndarray or DataFrame or Series
        Smoothed values with the same shape as the input; DataFrames and Series
        keep their index and columns.

    Raises
    ------
    TypeError
        If the input is neither an array, a DataFrame/Series, a Tensor nor a sequence.
    ValueError
        If the input is neither 2D nor 1D, or if the axis is out of range.

    Warns
    -----
    KernelTruncationWarning
        The slices are shorter than the full kernel.
    """
    assert method in (
        "mean",
        "median",
        "gaussian",
    ), f'Smoothing method can be either "mean", "median" or "gaussian": the provided one was "{method}".'
    assert n_jobs != 0, "The n. of jobs must be non-zero."

    kernel_dict = {
        "mean": lambda: MeanKernel(window_size),
        "median": lambda: MedianKernel(window_size),
        "gaussian": lambda: GaussianKernel(window_size, gauss_limit),
    }
    kernel: SmoothingKernel = kernel_dict[method]()

    # Convert input to array
    x_array = signal_to_array(x, allow_1d=True)
    n_dim = x_array.ndim
    if not -n_dim <= axis < n_dim:
        raise ValueError(
            f"Axis {axis} is out of range for an input with {n_dim} dimension(s)."
        )

    logging.info(
        f'Smoothing {x_array.shape} values along axis {axis} with "{method}" kernel '
        f"(half-width = {kernel.half_win})."
    )

    # Slices are smoothed in workers, so the length is checked here once
    if x_array.size > 0:
        kernel.check_length(x_array.shape[axis])

    if n_dim == 1:
        x_smooth = kernel.smooth_1d(x_array, warn=False)
    elif x_array.size == 0:
        x_smooth = np.zeros(shape=x_array.shape, dtype=np.float64)
    else:
        # Move the smoothing axis last and process each slice independently
        x_slices = np.moveaxis(x_array, axis, -1)
        results = Parallel(n_jobs=n_jobs)(
            delayed(kernel.smooth_1d)(x_slice, warn=False) for x_slice in x_slices
        )
        x_smooth = np.moveaxis(
            np.stack(results, axis=0).reshape(x_slices.shape), -1, axis  # type: ignore
        )

    if isinstance(x, pd.DataFrame):
        return pd.DataFrame(x_smooth, index=x.index, columns=x.columns)
    if isinstance(x, pd.Series):
        return pd.Series(x_smooth, index=x.index, name=x.name)
    return x_smooth
