from typing import Tuple

import numpy as np
import numpy.typing as npt

FLOAT_ARR = npt.NDArray[np.float64]


def squared_distances(data: FLOAT_ARR, centroids: FLOAT_ARR) -> FLOAT_ARR:
    """
    Compute the squared L2 distance from every observation to every centroid.
    The square root is skipped since only the ordering is used.

    Args:
        data: observations of shape (n_samples, n_features)
        centroids: the current centroids of shape (n_clusters, n_features)

    Returns:
        distance matrix of shape (n_samples, n_clusters)
    """
    return np.square(data[:, None, :] - centroids[None, :, :]).sum(axis=-1)


def data_range(data: FLOAT_ARR) -> Tuple[FLOAT_ARR, FLOAT_ARR]:
    """
    Per-dimension minimum and maximum over all observations

    Args:
        data: observations of shape (n_samples, n_features)

    Returns:
        Tuple of minimums and maximums, each of shape (n_features,)
    """
    return data.min(axis=0), data.max(axis=0)
