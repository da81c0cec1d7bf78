import numpy as np
import pytest
from numpy.testing import assert_array_equal

from kmeans_sandbox.clustering import InvalidClusterCountError, UnknownMethodError
from kmeans_sandbox.clustering._init import (
    forgy_initialization,
    initialize_centroids,
    random_initialization,
)

DATA = np.array([[1, 1, 3], [3, 7, 6], [5, 8, 3], [1, 2, 1], [9, 10, 8], [4, 4, 4]], dtype=np.float64)


def test_random_initialization_picks_distinct_observations():
    centroids = random_initialization(DATA, 4, np.random.default_rng(0))

    assert centroids.shape == (4, 3)
    rows = {tuple(row) for row in DATA}
    assert all(tuple(c) in rows for c in centroids)
    assert len({tuple(c) for c in centroids}) == 4


def test_random_initialization_returns_a_copy():
    data = DATA.copy()
    centroids = random_initialization(data, 2, np.random.default_rng(0))
    centroids += 100

    assert_array_equal(data, DATA)


def test_random_initialization_can_take_every_observation():
    centroids = random_initialization(DATA, len(DATA), np.random.default_rng(1))

    assert sorted(map(tuple, centroids)) == sorted(map(tuple, DATA))


def test_forgy_initialization_stays_within_range():
    data = np.random.default_rng(1).normal(size=(200, 3))
    centroids = forgy_initialization(data, 50, np.random.default_rng(0))

    assert centroids.shape == (50, 3)
    assert (centroids >= data.min(axis=0)).all()
    assert (centroids <= data.max(axis=0)).all()


def test_forgy_initialization_constant_dimension():
    data = np.array([[2.0, 0.0], [2.0, 5.0], [2.0, 1.0]])

    centroids = forgy_initialization(data, 3, np.random.default_rng(0))

    assert_array_equal(centroids[:, 0], [2.0, 2.0, 2.0])


@pytest.mark.parametrize("method", ["random", "forgy"])
def test_initialization_rejects_too_many_clusters(method):
    with pytest.raises(InvalidClusterCountError):
        initialize_centroids(DATA, len(DATA) + 1, method, np.random.default_rng(0))


def test_initialization_same_seed_same_centroids():
    for method in ("random", "forgy"):
        first = initialize_centroids(DATA, 3, method, np.random.default_rng(42))
        second = initialize_centroids(DATA, 3, method, np.random.default_rng(42))
        assert_array_equal(first, second)


def test_initialization_unknown_method():
    with pytest.raises(UnknownMethodError, match="kmeans\\+\\+"):
        initialize_centroids(DATA, 3, "kmeans++", np.random.default_rng(0))
