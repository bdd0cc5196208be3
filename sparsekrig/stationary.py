"""Stationary covariance functions: variance times a correlation of squared distance."""

from __future__ import annotations

from abc import abstractmethod

import numpy as np

from .covariance import CovarianceFunction, _as_inputs


def sq_dist(u, v) -> float:
    """Squared Euclidean distance between two vectors."""
    a = np.atleast_1d(np.asarray(u, dtype=float))
    b = np.atleast_1d(np.asarray(v, dtype=float))
    if a.shape != b.shape:
        raise ValueError(f"vectors differ in length: {a.shape} and {b.shape}")
    diff = a - b
    return float(np.dot(diff, diff))


def _cross_sq_dist(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    diff = a[:, np.newaxis, :] - b[np.newaxis, :, :]
    return np.einsum("ijk,ijk->ij", diff, diff)


def sq_dist_matrix(x) -> np.ndarray:
    """Matrix of squared distances between every pair of rows of x."""
    a = _as_inputs(x)
    d = _cross_sq_dist(a, a)
    np.fill_diagonal(d, 0.0)
    return d


class StationaryCF(CovarianceFunction):
    """Base for covariance functions of the form variance * k(squared distance).

    Parameter 0 is the length scale and parameter 1 the process variance.
    Subclasses supply ``correlation`` and ``correlation_gradient``, which
    must accept arrays of squared distances element-wise.
    """

    def __init__(self, name: str, length_scale: float, variance: float):
        super().__init__(name, ["length scale", "variance"], [length_scale, variance])

    @property
    def length_scale(self) -> float:
        """Correlation length scale."""
        return self._values[0]

    @property
    def variance(self) -> float:
        """Process variance."""
        return self._values[1]

    @abstractmethod
    def correlation(self, sq_distance):
        """Correlation for a squared distance (or an array of them)."""

    @abstractmethod
    def correlation_gradient(self, index: int, sq_distance):
        """Derivative of the correlation with respect to parameter ``index``."""

    def compute_element(self, a, b) -> float:
        return float(self.variance * self.correlation(sq_dist(a, b)))

    def compute_diagonal_element(self, a) -> float:
        return float(self.variance * self.correlation(0.0))

    def covariance(self, x1, x2=None) -> np.ndarray:
        a = _as_inputs(x1)
        if x2 is None:
            d = sq_dist_matrix(a)
        else:
            d = _cross_sq_dist(a, _as_inputs(x2))
        return self.variance * np.asarray(self.correlation(d), dtype=float)

    def covariance_gradient(self, index: int, x) -> np.ndarray:
        self._check_index(index)
        d = sq_dist_matrix(x)
        factor = self.transform(index).gradient(self._values[index])
        if index == 0:
            grad = self.variance * np.asarray(self.correlation_gradient(index, d), dtype=float)
        else:
            grad = np.asarray(self.correlation(d), dtype=float)
        return grad * factor