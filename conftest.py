# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: L. Kouadio <etanoyau@gmail.com>
"""
conftest.py

Session-wide fixtures applied to every test: the global random generators
are seeded from ``STATNOTES_SEED`` (42 by default) so that test runs are
reproducible, and matplotlib draws on the non-interactive ``Agg`` backend
so that figure tests never open a window.
"""

import os
import random

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


@pytest.fixture(scope='session', autouse=True)
def global_rng_seed():
    """Fixture to set a globally controllable seed for all tests in the session."""
    _random_seed = os.environ.get("STATNOTES_SEED", 42)
    print(f"I: Seeding RNGs for all tests with {_random_seed}")
    np.random.seed(int(_random_seed))
    random.seed(int(_random_seed))


@pytest.fixture(autouse=True)
def close_figures():
    """Close the figures a test leaves open."""
    yield
    import matplotlib.pyplot as plt
    plt.close("all")
