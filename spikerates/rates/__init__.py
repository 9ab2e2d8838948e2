"""This package contains functions for computing spike rates over time windows.


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

from .._base import from_single_train
from ._spike_rates import compute_rates, smoothed_rates
from ._time_windows import as_time_windows, sliding_windows, windows_from_edges

__all__ = [
    "as_time_windows",
    "compute_rates",
    "from_single_train",
    "sliding_windows",
    "smoothed_rates",
    "windows_from_edges",
]
