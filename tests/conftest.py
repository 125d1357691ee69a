"""Test configuration and fixtures for flatforest."""

import random

import pytest

from flatforest.forest.forest import Forest

SAMPLE_IDS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
SAMPLE_DEPTHS = [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2]


def build_random_forest(seed, max_size=40):
    """Build a valid forest with unique IDs from a seeded generator."""
    rng = random.Random(seed)
    size = rng.randint(0, max_size)
    depths = []
    for position in range(size):
        if position == 0:
            depths.append(0)
        else:
            depths.append(rng.randint(0, depths[-1] + 1))
    node_ids = rng.sample(range(1, 10 * max_size), size)
    return Forest(node_ids, depths)


@pytest.fixture
def sample_forest():
    """The eleven-node forest of three trees used throughout the tests.

    1
    - 2
    - - 3
    - - - 4
    - 5
    6
    - 7
    8
    - 9
    - 10
    - - 11
    """
    return Forest(SAMPLE_IDS, SAMPLE_DEPTHS)


@pytest.fixture
def empty_forest():
    return Forest([], [])


@pytest.fixture(params=range(25))
def random_forest(request):
    return build_random_forest(request.param)
