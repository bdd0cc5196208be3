"""Base covariance function with named, transformable parameters."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class LogTransform:
    """Maps a positive parameter to the real line through its logarithm."""

    name = "log"

    def forward(self, value):
        """Return the transformed (log-space) value."""
        return math.log(value)

    def backward(self, value):
        """Return the parameter value for a transformed (log-space) value."""
        return math.exp(value)

    def gradient(self, value):
        """Derivative of the parameter with respect to its transformed value."""
        return value

    def __repr__(self) -> str:
        return "LogTransform()"


def _as_inputs(x) -> np.ndarray:
    """Return inputs as a 2-D array with one input per row.

    A scalar is a single one-dimensional input; a 1-D array is a column of
    one-dimensional inputs.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        return arr.reshape(1, 1)
    if arr.ndim == 1:
        return arr[:, np.newaxis]
    if arr.ndim != 2:
        raise ValueError(f"inputs must be at most two-dimensional, got {arr.ndim} dimensions")
    return arr


class CovarianceFunction(ABC):
    """Abstract covariance function.

    Every parameter carries a transform (log by default) used when the
    parameters are optimised in an unconstrained space.
    """

    def __init__(self, name: str, parameter_names: Sequence[str], values: Sequence[float]):
        names = list(parameter_names)
        vals = [float(v) for v in values]
        if len(names) != len(vals):
            raise ValueError("parameter names and values must have the same length")
        self.name = name
        self._names = names
        self._values = vals
        self._transforms = [LogTransform() for _ in vals]

    # -- elements -----------------------------------------------------------

    @abstractmethod
    def compute_element(self, a, b) -> float:
        """Covariance between two single inputs."""

    def compute_diagonal_element(self, a) -> float:
        """Auto-covariance of a single input."""
        return self.compute_element(a, a)

    # -- matrices -----------------------------------------------------------

    def covariance(self, x1, x2=None) -> np.ndarray:
        """Covariance matrix cov(x1, x1), or cov(x1, x2) when x2 is given."""
        a = _as_inputs(x1)
        if x2 is not None:
            b = _as_inputs(x2)
            return np.array(
                [[self.compute_element(u, v) for v in b] for u in a], dtype=float
            ).reshape(len(a), len(b))

        n = len(a)
        c = np.empty((n, n))
        for i, u in enumerate(a):
            for j, v in enumerate(a[:i]):
                c[i, j] = c[j, i] = self.compute_element(u, v)
            c[i, i] = self.compute_diagonal_element(u)
        return c

    @abstractmethod
    def covariance_gradient(self, index: int, x) -> np.ndarray:
        """Gradient of cov(x, x) with respect to a transformed parameter."""

    def diagonal(self, x) -> np.ndarray:
        """Diagonal of cov(x, x) as a vector."""
        return np.array([self.compute_diagonal_element(u) for u in _as_inputs(x)], dtype=float)

    # -- parameters ---------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.num_parameters:
            raise IndexError(
                f"parameter index {index} out of range for {self.num_parameters} parameters"
            )

    def parameter_name(self, index: int) -> str:
        """Name of the given parameter."""
        self._check_index(index)
        return self._names[index]

    def transform(self, index: int):
        """Transform applied to the given parameter."""
        self._check_index(index)
        return self._transforms[index]

    def set_transform(self, index: int, transform) -> None:
        """Replace the transform applied to the given parameter."""
        self._check_index(index)
        self._transforms[index] = transform

    @property
    def num_parameters(self) -> int:
        """Number of parameters."""
        return len(self._values)

    @property
    def parameters(self) -> np.ndarray:
        """Current parameter values."""
        return np.array(self._values, dtype=float)

    @parameters.setter
    def parameters(self, values) -> None:
        vals = [float(v) for v in np.asarray(values, dtype=float).ravel()]
        if len(vals) != self.num_parameters:
            raise ValueError(f"expected {self.num_parameters} parameters, got {len(vals)}")
        self._values = vals

    @property
    def transformed_parameters(self) -> np.ndarray:
        """Parameter values in transformed space."""
        return np.array(
            [self.transform(i).forward(p) for i, p in enumerate(self.parameters)], dtype=float
        )

    @transformed_parameters.setter
    def transformed_parameters(self, values) -> None:
        vals = np.asarray(values, dtype=float).ravel()
        if len(vals) != self.num_parameters:
            raise ValueError(f"expected {self.num_parameters} parameters, got {len(vals)}")
        self.parameters = [self.transform(i).backward(v) for i, v in enumerate(vals)]

    def describe(self, indent: int = 0) -> str:
        """Human-readable summary of the parameters, indented by spaces."""
        pad = " " * indent
        lines = [f"{pad}Covariance function : {self.name}"]
        for i, value in enumerate(self.parameters):
            lines.append(
                f"{pad}{self.parameter_name(i)} : {value:.4f} ({self.transform(i).name})"
            )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()