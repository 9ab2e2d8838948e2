"""Classes implementing the mean, median and Gaussian smoothing kernels.


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

import numpy as np
from scipy import stats

from ._abc_kernel import SmoothingKernel


class MeanKernel(SmoothingKernel):
    """Kernel computing the moving average."""

    def _reduce(self, x_win: np.ndarray, kernel_slice: slice) -> float:
        return x_win.mean()


class MedianKernel(SmoothingKernel):
    """Kernel computing the moving median."""

    def _reduce(self, x_win: np.ndarray, kernel_slice: slice) -> float:
        return np.median(x_win)


class GaussianKernel(SmoothingKernel):
    """Kernel computing a Gaussian-weighted moving average.

    The kernel is obtained by sampling the standard normal density at 2 * half_win + 1
    evenly spaced points in [-gauss_limit, gauss_limit], and it is normalized to unit sum.
    Near the boundaries only the part of the kernel overlapping the data is used,
    after renormalizing it to unit sum.

    Parameters
    ----------
    window_size : int, default=5
        Size of the smoothing window.
    gauss_limit : float, default=3.0
        Number of standard deviations covered by each half of the kernel.

    Attributes
    ----------
    _half_win : int
        Half-width of the kernel.
    _weights : ndarray
        Weights of the full kernel with shape (2 * half_win + 1,).
    """

    def __init__(self, window_size: int = 5, gauss_limit: float = 3.0):
        assert gauss_limit > 0, "The Gaussian limit must be positive."
        super().__init__(window_size)

        x = np.linspace(-gauss_limit, gauss_limit, 2 * self._half_win + 1)
        gauss_pdf = stats.norm.pdf(x)
        self._weights = gauss_pdf / gauss_pdf.sum()

    @property
    def weights(self) -> np.ndarray:
        """ndarray: Property for getting the weights of the full kernel."""
        return self._weights

    def window_weights(self, kernel_slice: slice) -> np.ndarray:
        """Get the weights of a (possibly truncated) window, renormalized to unit sum.

        Parameters
        ----------
        kernel_slice : slice
            Slice of the full kernel overlapping the data.

        Returns
        -------
        ndarray
            Renormalized weights.
        """
        w = self._weights[kernel_slice]
        return w / w.sum()

    def _reduce(self, x_win: np.ndarray, kernel_slice: slice) -> float:
        return np.dot(x_win, self.window_weights(kernel_slice))
