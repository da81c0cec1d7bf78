import logging
import numbers
import warnings
from typing import Dict, Optional, Union

import numpy as np
import numpy.typing as npt

from ._exceptions import (
    FeatureUnavailableError,
    InsufficientDataError,
    InvalidClusterCountError,
    InvalidDataError,
    NotConvergedWarning,
    NotHydratedError,
    UnknownMethodError,
)
from ._geometry import FLOAT_ARR, squared_distances
from ._init import SUPPORTED_METHODS, initialize_centroids

logger = logging.getLogger(__name__)

INT_ARR = npt.NDArray[np.intp]
Partition = Dict[int, FLOAT_ARR]
RandomState = Optional[Union[int, np.random.Generator]]


def assign_clusters(data: FLOAT_ARR, centroids: FLOAT_ARR) -> INT_ARR:
    """
    Assign every observation to its nearest centroid. Ties go to the
    lowest centroid index.

    Args:
        data: input observations
        centroids: the current centroids

    Returns:
        cluster index for each observation
    """
    return np.argmin(squared_distances(data, centroids), axis=-1)


def build_partition(data: FLOAT_ARR, labels: INT_ARR, cluster_count: int) -> Partition:
    """
    Group the observations by cluster index, keeping their original order.
    Clusters without members map to an empty (0, n_features) array.
    """
    return {i: data[labels == i] for i in range(cluster_count)}


def update_centroids(data: FLOAT_ARR, labels: INT_ARR, centroids: FLOAT_ARR) -> FLOAT_ARR:
    """
    Recompute each centroid as the per-dimension mean of its members.
    A cluster with no members keeps its previous centroid.

    Args:
        data: input observations
        labels: cluster assignments
        centroids: the centroids the assignments were made against

    Returns:
        Updated centroids
    """
    new_centroids = centroids.copy()
    for i in range(centroids.shape[0]):
        members = data[labels == i]
        if members.shape[0]:
            new_centroids[i] = members.mean(axis=0)
    return new_centroids


def has_converged(previous: Optional[Partition], current: Partition) -> bool:
    """
    Compare two successive partitions cluster by cluster. A cluster is
    unchanged when every observation previously in it is still in it.

    Args:
        previous: the last accepted partition, None on the first iteration
        current: the partition just computed

    Returns:
        True if no cluster changed
    """
    if previous is None:
        return False
    for i, old_members in previous.items():
        new_members = current.get(i)
        if new_members is None:
            return False
        for observation in old_members:
            if not np.any(np.all(new_members == observation, axis=1)):
                return False
    return True


def _as_float_array(data) -> FLOAT_ARR:
    try:
        raw = np.asarray(data)
    except (TypeError, ValueError) as err:
        raise InvalidDataError("Observations must be equal-length sequences of numbers") from err
    # booleans, integers and floats only; strings and ragged object arrays are rejected
    if raw.dtype.kind not in "biuf":
        raise InvalidDataError(f"Observations must be numeric, got dtype {raw.dtype}")
    return np.array(raw, dtype=np.float64)


def _validate_data(data) -> FLOAT_ARR:
    data = _as_float_array(data)

    if data.ndim == 0:
        raise InvalidDataError("Data must be a sequence of observations, got a scalar")
    if data.shape[0] < 2:
        raise InsufficientDataError("Data must have more than one observation")
    if data.ndim != 2:
        raise InvalidDataError(f"Data must be 2-dimensional, got shape {data.shape}")
    if data.shape[1] < 1:
        raise InvalidDataError("Observations must have at least one dimension")
    if not np.isfinite(data).all():
        raise InvalidDataError("Observations must only contain finite values")

    data.setflags(write=False)
    return data


class KMeans():
    """
    KMeans (Lloyd's algorithm) over a fixed, in-memory dataset.

    The dataset is validated once at construction. Each call to `cluster`
    seeds centroids with the requested strategy, then alternates
    nearest-centroid assignment and mean recomputation until the partition
    stops changing or `max_iter` is reached. Results are only committed to
    the instance at the end of a run, so a failed call never exposes
    partial state.

    Empty clusters keep their previous centroid instead of being recomputed.
    """
    def __init__(self, data, max_iter: int = 300, random_state: RandomState = None) -> None:
        if not isinstance(max_iter, numbers.Integral) or isinstance(max_iter, bool) or max_iter < 1:
            raise ValueError(f"max_iter must be a positive integer, got {max_iter!r}")
        if random_state is not None and not isinstance(random_state, (numbers.Integral, np.random.Generator)):
            raise ValueError(f"random_state must be None, an int or a numpy Generator, got {random_state!r}")

        self._data = _validate_data(data)
        self._max_iter = int(max_iter)
        self.random_state = random_state

        self._centroids: Optional[FLOAT_ARR] = None
        self._labels: Optional[INT_ARR] = None
        self._clustered_data: Optional[Partition] = None
        self._n_iter: Optional[int] = None
        self._converged: Optional[bool] = None

    @property
    def supported_methods(self):
        return SUPPORTED_METHODS

    @property
    def data(self) -> FLOAT_ARR:
        return self._data

    @property
    def max_iter(self) -> int:
        return self._max_iter

    @property
    def n_iter(self) -> Optional[int]:
        return self._n_iter

    @property
    def converged(self) -> Optional[bool]:
        return self._converged

    @property
    def cluster_count(self) -> Optional[int]:
        if self._centroids is None:
            return None
        return self._centroids.shape[0]

    def cluster(self, cluster_count: int, method: str = "forgy") -> Partition:
        """
        Run k-means and hydrate the centroids and clustered data

        Args:
            cluster_count: how many clusters to split the data into
            method: initialization strategy, 'random' or 'forgy'

        Returns:
            clustered data, see `get_clustered_data`
        """
        self._validate_cluster_args(cluster_count, method)
        cluster_count = int(cluster_count)

        centroids = initialize_centroids(self._data, cluster_count, method, self._rng())
        previous_labels: Optional[INT_ARR] = None
        converged = False
        count = 0

        while count < self._max_iter:
            count += 1
            labels = assign_clusters(self._data, centroids)
            # equal observations always share a label, so this matches has_converged
            if previous_labels is not None and np.array_equal(labels, previous_labels):
                converged = True
                break

            if logger.isEnabledFor(logging.DEBUG):
                changed = self._data.shape[0] if previous_labels is None else int(np.sum(labels != previous_labels))
                logger.debug("Iteration %d: %d assignments changed", count, changed)

            previous_labels = labels
            centroids = update_centroids(self._data, labels, centroids)

        if converged:
            logger.info("Converged after %d iterations with %d clusters (%s)", count, cluster_count, method)
        else:
            warnings.warn(
                f"KMeans did not converge within {self._max_iter} iterations, "
                "returning the last accepted partition",
                NotConvergedWarning,
                stacklevel=2,
            )

        self._centroids = centroids
        self._labels = previous_labels
        self._clustered_data = build_partition(self._data, previous_labels, cluster_count)
        self._n_iter = count
        self._converged = converged
        return self.get_clustered_data()

    def predict(self, test_data) -> INT_ARR:
        """
        Assign new observations to the nearest centroid of the last run

        Args:
            test_data: observations with the same dimensionality as the dataset

        Return:
            cluster index for each observation
        """
        centroids = self._hydrated(self._centroids, "Centroids")
        test_data = _as_float_array(test_data)
        if test_data.ndim == 1:
            test_data = test_data[None, :]
        if test_data.ndim != 2 or test_data.shape[1] != centroids.shape[1]:
            raise InvalidDataError(
                f"Expected observations with {centroids.shape[1]} dimensions, got shape {test_data.shape}"
            )
        return assign_clusters(test_data, centroids)

    def get_centroids(self) -> FLOAT_ARR:
        """
        Centroids from the last successful run, one row per cluster
        """
        return self._hydrated(self._centroids, "Centroids").copy()

    def get_clustered_data(self) -> Partition:
        """
        Observations grouped by cluster index from the last successful run.
        Every index in range(cluster_count) is present, possibly with no members.
        """
        partition = self._hydrated(self._clustered_data, "Clustered data")
        return {i: members.copy() for i, members in partition.items()}

    def get_labels(self) -> INT_ARR:
        """
        Cluster index of every observation, in dataset order
        """
        return self._hydrated(self._labels, "Labels").copy()

    def get_centroid_distance(self):
        """
        Within-cluster dispersion, meant to help compare cluster counts across runs.
        Not implemented yet.
        """
        raise FeatureUnavailableError("Centroid distance is not available yet")

    def _hydrated(self, value, name: str):
        if value is None:
            raise NotHydratedError(f"{name} have not been hydrated yet - run cluster method first")
        return value

    def _validate_cluster_args(self, cluster_count: int, method: str) -> None:
        if not isinstance(cluster_count, numbers.Integral) or isinstance(cluster_count, bool):
            raise InvalidClusterCountError(f"Cluster count must be an integer, got {cluster_count!r}")
        if cluster_count < 2:
            raise InvalidClusterCountError("Cluster count must be greater than 1")
        if cluster_count > self._data.shape[0]:
            raise InvalidClusterCountError(
                f"Cluster count must not exceed the number of observations ({self._data.shape[0]})"
            )
        if not isinstance(method, str) or method not in SUPPORTED_METHODS:
            raise UnknownMethodError(
                f"Input method {method} not supported. Supported methods: {*SUPPORTED_METHODS,}"
            )

    def _rng(self) -> np.random.Generator:
        if isinstance(self.random_state, np.random.Generator):
            return self.random_state
        return np.random.default_rng(self.random_state)
