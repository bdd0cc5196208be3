"""Concrete covariance functions: stationary kernels, bias, white noise and neural network."""

from __future__ import annotations

import math

import numpy as np

from .covariance import CovarianceFunction, _as_inputs
from .stationary import StationaryCF


def _vector(a) -> np.ndarray:
    return np.atleast_1d(np.asarray(a, dtype=float)).ravel()


class ExponentialCF(StationaryCF):
    """Isotropic exponential covariance: variance * exp(-0.5 * r / length_scale)."""

    def __init__(self, length_scale: float, variance: float):
        super().__init__("Isotropic Exponential", length_scale, variance)

    def correlation(self, sq_distance):
        return np.exp(-0.5 * np.sqrt(sq_distance) / self.length_scale)

    def correlation_gradient(self, index: int, sq_distance):
        self._check_index(index)
        if index == 0:
            return (
                0.5
                * np.sqrt(sq_distance)
                * self.correlation(sq_distance)
                / self.length_scale**2
            )
        return np.zeros_like(np.asarray(sq_distance, dtype=float))


class GaussianCF(StationaryCF):
    """Isotropic Gaussian (squared exponential) covariance."""

    def __init__(self, length_scale: float, variance: float):
        super().__init__("Isotropic Gaussian (squared exponential)", length_scale, variance)

    def correlation(self, sq_distance):
        return np.exp(-0.5 * np.asarray(sq_distance, dtype=float) / self.length_scale**2)

    def correlation_gradient(self, index: int, sq_distance):
        self._check_index(index)
        d = np.asarray(sq_distance, dtype=float)
        if index == 0:
            return d * self.correlation(d) / self.length_scale**3
        return np.zeros_like(d)


class Matern3CF(StationaryCF):
    """Isotropic Matern covariance with nu = 3/2."""

    def __init__(self, length_scale: float, variance: float):
        super().__init__("Matern 3/2 covariance function", length_scale, variance)

    def correlation(self, sq_distance):
        r = np.sqrt(3.0 * np.asarray(sq_distance, dtype=float)) / self.length_scale
        return (1.0 + r) * np.exp(-r)

    def correlation_gradient(self, index: int, sq_distance):
        self._check_index(index)
        d = np.asarray(sq_distance, dtype=float)
        if index == 0:
            r = np.sqrt(3.0 * d) / self.length_scale
            return r**2 / self.length_scale * np.exp(-r)
        return np.zeros_like(d)


class Matern5CF(StationaryCF):
    """Isotropic Matern covariance with nu = 5/2."""

    def __init__(self, length_scale: float, variance: float):
        super().__init__("Matern 5/2 covariance function", length_scale, variance)

    def correlation(self, sq_distance):
        r = np.sqrt(5.0 * np.asarray(sq_distance, dtype=float)) / self.length_scale
        return (1.0 + r + r**2 / 3.0) * np.exp(-r)

    def correlation_gradient(self, index: int, sq_distance):
        self._check_index(index)
        d = np.asarray(sq_distance, dtype=float)
        if index == 0:
            r = np.sqrt(5.0 * d) / self.length_scale
            return (r + r**2) * r / (3.0 * self.length_scale) * np.exp(-r)
        return np.zeros_like(d)


class ConstantCF(CovarianceFunction):
    """Constant (bias) covariance: every pair of inputs has covariance ``bias``."""

    def __init__(self, bias: float):
        super().__init__("Constant", ["bias"], [bias])

    @property
    def bias(self) -> float:
        """The constant covariance value."""
        return self._values[0]

    def compute_element(self, a, b) -> float:
        return self.bias

    def compute_diagonal_element(self, a) -> float:
        return self.bias

    def covariance_gradient(self, index: int, x) -> np.ndarray:
        self._check_index(index)
        n = len(_as_inputs(x))
        factor = self.transform(index).gradient(self._values[index])
        return factor * np.ones((n, n))


class WhiteNoiseCF(CovarianceFunction):
    """Gaussian white noise: ``variance`` for identical inputs, zero otherwise."""

    def __init__(self, variance: float):
        super().__init__("Gaussian white noise", ["nugget variance"], [variance])

    @property
    def variance(self) -> float:
        """Noise variance."""
        return self._values[0]

    def compute_element(self, a, b) -> float:
        return self.variance if np.array_equal(_vector(a), _vector(b)) else 0.0

    def compute_diagonal_element(self, a) -> float:
        return self.variance

    def covariance_gradient(self, index: int, x) -> np.ndarray:
        self._check_index(index)
        factor = self.transform(index).gradient(self._values[index])
        return self.covariance(x) * (factor / self.variance)


class NeuralNetCF(CovarianceFunction):
    """Neural network covariance.

    k(a, b) = variance * 2/pi * asin(u / sqrt(vA * vB)) with
    u = offset + s * a.b and vX = 1 + offset + s * x.x, where s is ``sigma2``.
    """

    def __init__(self, length_scale: float, variance: float, offset: float = 0.0):
        if length_scale <= 0.0 or variance <= 0.0 or offset < 0.0:
            raise ValueError("neural network covariance parameters must be positive")
        super().__init__(
            "Neural network covariance function",
            ["sigma2", "variance", "offset"],
            [length_scale, variance, offset],
        )

    @property
    def sigma2(self) -> float:
        """Scaling on the input axes."""
        return self._values[0]

    @property
    def variance(self) -> float:
        """Process variance."""
        return self._values[1]

    @property
    def offset(self) -> float:
        """Offset to the origin."""
        return self._values[2]

    def compute_element(self, a, b) -> float:
        u_vec, w_vec = _vector(a), _vector(b)
        s, off = self.sigma2, self.offset
        u = off + float(np.dot(u_vec, w_vec)) * s
        va = 1.0 + off + float(np.dot(u_vec, u_vec)) * s
        vb = 1.0 + off + float(np.dot(w_vec, w_vec)) * s
        return self.variance * math.asin(u / math.sqrt(va * vb)) * 2.0 / math.pi

    def covariance_gradient(self, index: int, x) -> np.ndarray:
        self._check_index(index)
        factor = self.transform(index).gradient(self._values[index])

        if index == 1:
            return self.covariance(x) / self.variance * factor

        xs = _as_inputs(x)
        s, off = self.sigma2, self.offset
        gram = xs @ xs.T
        sq = np.diag(gram)
        va = 1.0 + off + sq * s
        vai, vbj = va[:, np.newaxis], va[np.newaxis, :]
        u = off + gram * s
        v = np.sqrt(vai * vbj)
        denom = v * np.sqrt(v * v - u * u)

        if index == 0:
            dvai, dvbj = sq[:, np.newaxis], sq[np.newaxis, :]
            dv = 0.5 * (dvai * vbj + vai * dvbj) / v
            grad = (gram * v - u * dv) / denom
        else:
            dv = 0.5 * (vbj + vai) / v
            grad = (v - u * dv) / denom

        return grad * (self.variance * 2.0 / math.pi) * factor