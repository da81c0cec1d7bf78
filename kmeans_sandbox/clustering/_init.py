"""
Centroid initialization strategies.

Naming follows this library, not the textbook: ``random`` samples actual
observations, ``forgy`` samples coordinates uniformly within the observed
range of each dimension.
"""

from typing import Callable, Dict

import numpy as np

from ._exceptions import InvalidClusterCountError, UnknownMethodError
from ._geometry import FLOAT_ARR, data_range

SUPPORTED_METHODS = ("random", "forgy")


def _check_cluster_count(data: FLOAT_ARR, cluster_count: int) -> None:
    if cluster_count < 1 or cluster_count > data.shape[0]:
        raise InvalidClusterCountError(
            f"Cannot draw {cluster_count} centroids from {data.shape[0]} observations"
        )


def random_initialization(data: FLOAT_ARR, cluster_count: int, rng: np.random.Generator) -> FLOAT_ARR:
    """
    Pick distinct observations uniformly at random, without replacement,
    and use them verbatim as the initial centroids

    Args:
        data: input observations
        cluster_count: number of centroids to draw
        rng: source of randomness

    Returns:
        array of centroids of shape (cluster_count, n_features)
    """
    _check_cluster_count(data, cluster_count)
    indices = rng.choice(data.shape[0], size=cluster_count, replace=False)
    return data[indices].copy()


def forgy_initialization(data: FLOAT_ARR, cluster_count: int, rng: np.random.Generator) -> FLOAT_ARR:
    """
    Draw every coordinate of every centroid independently and uniformly
    from the [min, max) range of that dimension. The resulting centroids are
    generally not observations from the dataset.

    Args:
        data: input observations
        cluster_count: number of centroids to draw
        rng: source of randomness

    Returns:
        array of centroids of shape (cluster_count, n_features)
    """
    _check_cluster_count(data, cluster_count)
    mins, maxs = data_range(data)
    # uniform draws are half-open, so max itself is never drawn
    return rng.uniform(mins, maxs, size=(cluster_count, data.shape[1]))


_METHODS: Dict[str, Callable[[FLOAT_ARR, int, np.random.Generator], FLOAT_ARR]] = {
    "random": random_initialization,
    "forgy": forgy_initialization,
}


def initialize_centroids(data: FLOAT_ARR, cluster_count: int, method: str, rng: np.random.Generator) -> FLOAT_ARR:
    """
    Produce the starting centroids using the named strategy

    Args:
        data: input observations
        cluster_count: number of centroids to draw
        method: one of SUPPORTED_METHODS
        rng: source of randomness

    Returns:
        array of centroids of shape (cluster_count, n_features)
    """
    if not isinstance(method, str) or method not in _METHODS:
        raise UnknownMethodError(
            f"Input method {method} not supported. Supported methods: {*SUPPORTED_METHODS,}"
        )
    return _METHODS[method](data, cluster_count, rng)
