import numpy as np
from numpy.testing import assert_array_equal

from kmeans_sandbox.clustering._geometry import data_range, squared_distances


def test_squared_distances_skip_square_root():
    data = np.array([[0.0, 0.0], [3.0, 4.0]])
    centroids = np.array([[0.0, 0.0], [1.0, 1.0], [3.0, 4.0]])

    distances = squared_distances(data, centroids)

    assert distances.shape == (2, 3)
    assert_array_equal(distances, [[0.0, 2.0, 25.0], [25.0, 13.0, 0.0]])


def test_data_range_is_per_dimension():
    data = np.array([[1.0, 1.0, 3.0], [3.0, 7.0, 6.0], [5.0, 8.0, 3.0], [1.0, 2.0, 1.0]])

    mins, maxs = data_range(data)

    assert_array_equal(mins, [1.0, 1.0, 1.0])
    assert_array_equal(maxs, [5.0, 8.0, 6.0])
