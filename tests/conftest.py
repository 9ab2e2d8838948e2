"""Shared fixtures for the test suite."""

import numpy as np
import pytest


@pytest.fixture
def spike_trains():
    """Three trials, the second one without data."""
    return [
        np.array([0.1, 0.4, 0.6, 1.2, 1.9]),
        np.array([np.nan, np.nan]),
        np.array([0.0, 0.5, 1.0, 1.5, 2.0]),
    ]


@pytest.fixture
def sequence():
    """Short sequence with hand-computable moving statistics."""
    return np.array([1.0, 2.0, 6.0, 4.0, 10.0, 3.0, 8.0])
