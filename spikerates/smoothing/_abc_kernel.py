"""Interface for smoothing kernels.


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

import warnings
from abc import ABC, abstractmethod

import numpy as np

from ._utils import KernelTruncationWarning, boundary_windows, half_width


class SmoothingKernel(ABC):
    """Interface for kernels smoothing a sequence with truncated windows at its boundaries.

    Parameters
    ----------
    window_size : int, default=5
        Size of the smoothing window.

    Attributes
    ----------
    _half_win : int
        Half-width of the kernel.
    """

    def __init__(self, window_size: int = 5):
        self._half_win = half_width(window_size)

    @property
    def half_win(self) -> int:
        """int: Property for getting the half-width of the kernel."""
        return self._half_win

    @abstractmethod
    def _reduce(self, x_win: np.ndarray, kernel_slice: slice) -> float:
        """Reduce the samples in a window to a single value.

        Parameters
        ----------
        x_win : ndarray
            Samples covered by the window with shape (win_len,).
        kernel_slice : slice
            Slice of the full kernel overlapping the window.

        Returns
        -------
        float
            Smoothed value.
        """

    def check_length(self, n_points: int) -> None:
        """Warn if a sequence with the given length is shorter than the full kernel.

        Parameters
        ----------
        n_points : int
            Length of the sequence.

        Warns
        -----
        KernelTruncationWarning
            The sequence is shorter than the full kernel.
        """
        if 0 < n_points < 2 * self._half_win + 1:
            warnings.warn(
                f"The sequence ({n_points} points) is shorter than the kernel "
                f"({2 * self._half_win + 1} points): every window is truncated.",
                KernelTruncationWarning,
            )

    def smooth_1d(self, x: np.ndarray, warn: bool = True) -> np.ndarray:
        """Smooth the given sequence.

        Parameters
        ----------
        x : ndarray
            Sequence with shape (n_points,).
        warn : bool, default=True
            Whether to check the length of the sequence against the kernel.

        Returns
        -------
        ndarray
            Smoothed sequence with shape (n_points,).

        Warns
        -----
        KernelTruncationWarning
            The sequence is shorter than the full kernel (only if warn is True).
        """
        n_points = x.shape[0]
        if warn:
            self.check_length(n_points)

        x_smooth = np.zeros(shape=x.shape, dtype=np.float64)
        for i, data_slice, kernel_slice in boundary_windows(n_points, self._half_win):
            x_smooth[i] = self._reduce(x[data_slice], kernel_slice)
        return x_smooth
