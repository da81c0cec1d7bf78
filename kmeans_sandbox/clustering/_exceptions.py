"""
Errors raised by the clustering module
"""

from sklearn.exceptions import ConvergenceWarning


class KMeansError(Exception):
    """
    Base class for every error raised by the k-means implementation
    """


class InsufficientDataError(KMeansError, ValueError):
    """Dataset has fewer than two observations"""


class InvalidDataError(KMeansError, ValueError):
    """Dataset is not a 2-D collection of finite, equal-length numeric observations"""


class InvalidClusterCountError(KMeansError, ValueError):
    """Requested cluster count is not an integer in [2, number of observations]"""


class UnknownMethodError(KMeansError, ValueError):
    """Requested initialization method is not supported"""


class NotHydratedError(KMeansError, RuntimeError):
    """Result accessor called before a successful clustering run"""


class FeatureUnavailableError(KMeansError, NotImplementedError):
    """Requested capability has not been implemented yet"""


class NotConvergedWarning(ConvergenceWarning):
    """
    Clustering hit the iteration cap before the partition stabilized.
    The last accepted partition is still committed and returned.
    """
