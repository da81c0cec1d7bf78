"""
The clustering module implements clustering algorithms
"""

from ._exceptions import (
    FeatureUnavailableError,
    InsufficientDataError,
    InvalidClusterCountError,
    InvalidDataError,
    KMeansError,
    NotConvergedWarning,
    NotHydratedError,
    UnknownMethodError,
)
from ._init import SUPPORTED_METHODS
from ._kmeans import KMeans

__all__ = [
    "KMeans",
    "SUPPORTED_METHODS",
    "KMeansError",
    "InsufficientDataError",
    "InvalidDataError",
    "InvalidClusterCountError",
    "UnknownMethodError",
    "NotHydratedError",
    "FeatureUnavailableError",
    "NotConvergedWarning",
]
