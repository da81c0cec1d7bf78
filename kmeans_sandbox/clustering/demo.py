"""
Cluster synthetic Gaussian blobs and plot the result.

    python -m kmeans_sandbox.clustering.demo
"""

import matplotlib.pyplot as plt
import numpy as np
from sklearn.datasets import make_blobs
from sklearn.metrics import adjusted_rand_score

from ._kmeans import KMeans


def main(num_clusters: int = 4, method: str = "random", seed: int = 0, output_path: str = "clusters.png") -> float:
    data, targets = make_blobs(n_samples=400, centers=num_clusters, cluster_std=0.8, random_state=seed)

    kmeans = KMeans(data, random_state=seed)
    kmeans.cluster(num_clusters, method=method)
    labels = kmeans.get_labels()
    score = adjusted_rand_score(targets, labels)

    print(f"Converged: {kmeans.converged} after {kmeans.n_iter} iterations")
    print(f"Cluster sizes: {*np.bincount(labels, minlength=num_clusters),}")
    print(f"Adjusted Rand index against the generating blobs: {score}")

    centroids = kmeans.get_centroids()
    fig, ax = plt.subplots()
    ax.scatter(data[:, 0], data[:, 1], c=labels, s=8)
    ax.scatter(centroids[:, 0], centroids[:, 1], c="red", marker="x", s=80)
    ax.set_title(f"k-means ({method}), k={num_clusters}")
    fig.savefig(output_path)
    plt.close(fig)

    return score


if __name__ == '__main__':
    main()
