"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

# Set random seed for reproducibility
np.random.seed(42)


# Common test data fixtures
@pytest.fixture
def sample_time_series():
    """Generate a sample time series for testing."""
    return np.random.default_rng(42).standard_normal(500)


@pytest.fixture
def rr_intervals():
    """Synthetic RR-interval series (seconds) with respiratory modulation."""
    rng = np.random.default_rng(7)
    t = np.arange(600)
    return 0.8 + 0.05 * np.sin(2 * np.pi * t / 12.0) + 0.01 * rng.standard_normal(600)


@pytest.fixture
def sawtooth():
    """Period-4 sawtooth used as the regression fixture."""
    return np.array([1, 2, 3, 2, 1, 2, 3, 2, 1, 2, 3, 2], dtype=float)


@pytest.fixture(autouse=True)
def close_figures():
    """Close matplotlib figures created by a test."""
    yield
    import matplotlib.pyplot as plt
    plt.close("all")
