"""This package contains kernels and functions for smoothing spike rates.


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

from ._abc_kernel import SmoothingKernel
from ._kernels import GaussianKernel, MeanKernel, MedianKernel
from ._smoothing import smooth
from ._utils import KernelTruncationWarning, boundary_windows, half_width

__all__ = [
    "SmoothingKernel",
    "GaussianKernel",
    "MeanKernel",
    "MedianKernel",
    "KernelTruncationWarning",
    "boundary_windows",
    "half_width",
    "smooth",
]
