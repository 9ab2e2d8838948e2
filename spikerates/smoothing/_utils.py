"""Internal utility functions for smoothing.


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

from collections.abc import Iterator


def half_width(window_size: int) -> int:
    """Compute the half-width of a kernel given its window size.

    Parameters
    ----------
    window_size : int
        Size of the smoothing window.

    Returns
    -------
    int
        Number of samples the kernel extends on each side of its center
        (ties are rounded to the nearest even number, e.g. 5 -> 2, 3 -> 2).

    Raises
    ------
    AssertionError
        If the window size is too small to yield a half-width of at least 1.
    """
    half_win = int(round(window_size / 2))
    assert half_win > 0, f"Window size {window_size} is too small."
    return half_win


def boundary_windows(n_points: int, half_win: int) -> Iterator[tuple[int, slice, slice]]:
    """Iterate over the (possibly truncated) smoothing windows of a sequence.

    In the interior the window spans [i - half_win, i + half_win]; near the start and
    the end it is truncated to the available data, without padding.

    Parameters
    ----------
    n_points : int
        Length of the sequence.
    half_win : int
        Half-width of the kernel.

    Yields
    ------
    int
        Index of the output sample.
    slice
        Slice of the sequence covered by the window.
    slice
        Slice of the full kernel (with length 2 * half_win + 1) overlapping the data.
    """
    for i in range(n_points):
        offset = i - half_win  # position of the first kernel sample in the sequence
        start = max(offset, 0)
        stop = min(i + half_win + 1, n_points)
        yield i, slice(start, stop), slice(start - offset, stop - offset)


class KernelTruncationWarning(Warning):
    """Warning related to a sequence shorter than the smoothing kernel."""
