"""Sum of covariance functions, for building composite kernels."""

from __future__ import annotations

import numpy as np

from .covariance import CovarianceFunction, _as_inputs


class SumCF(CovarianceFunction):
    """Covariance function equal to the sum of its components.

    Parameters are indexed in the order the components were added: the
    parameters of the first component come first, then those of the second,
    and so on. Components are shared, not copied, so changing a parameter
    through the sum changes the component too.
    """

    def __init__(self, *args: CovarianceFunction):
        super().__init__("Sum Covariance", [], [])
        self._components: list[CovarianceFunction] = []
        for component in args:
            self.add(component)

    @property
    def components(self) -> tuple[CovarianceFunction, ...]:
        """The covariance functions being summed, in order."""
        return tuple(self._components)

    def add(self, component: CovarianceFunction) -> None:
        """Append a covariance function to the sum."""
        self._components.append(component)

    def _locate(self, index: int) -> tuple[CovarianceFunction, int]:
        """Component holding overall parameter ``index`` and its local index."""
        self._check_index(index)
        for component in self._components:
            count = component.num_parameters
            if index < count:
                return component, index
            index -= count
        raise IndexError(f"parameter index {index} out of range")

    def _split(self, values) -> list[np.ndarray]:
        vals = np.asarray(values, dtype=float).ravel()
        if len(vals) != self.num_parameters:
            raise ValueError(f"expected {self.num_parameters} parameters, got {len(vals)}")
        parts = []
        start = 0
        for component in self._components:
            stop = start + component.num_parameters
            parts.append(vals[start:stop])
            start = stop
        return parts

    # -- elements and matrices ---------------------------------------------

    def compute_element(self, a, b) -> float:
        return sum((float(c.compute_element(a, b)) for c in self._components), 0.0)

    def compute_diagonal_element(self, a) -> float:
        return sum((float(c.compute_diagonal_element(a)) for c in self._components), 0.0)

    def covariance(self, x1, x2=None) -> np.ndarray:
        a = _as_inputs(x1)
        cols = len(a) if x2 is None else len(_as_inputs(x2))
        total = np.zeros((len(a), cols))
        for component in self._components:
            total = total + component.covariance(x1, x2)
        return total

    def diagonal(self, x) -> np.ndarray:
        total = np.zeros(len(_as_inputs(x)))
        for component in self._components:
            total = total + component.diagonal(x)
        return total

    def covariance_gradient(self, index: int, x) -> np.ndarray:
        component, local = self._locate(index)
        return component.covariance_gradient(local, x)

    # -- parameters ---------------------------------------------------------

    def parameter_name(self, index: int) -> str:
        component, local = self._locate(index)
        return component.parameter_name(local)

    def transform(self, index: int):
        component, local = self._locate(index)
        return component.transform(local)

    def set_transform(self, index: int, transform) -> None:
        component, local = self._locate(index)
        component.set_transform(local, transform)

    @property
    def num_parameters(self) -> int:
        """Total number of parameters over all components."""
        return sum(c.num_parameters for c in self._components)

    @property
    def parameters(self) -> np.ndarray:
        """Parameter values of all components."""
        if not self._components:
            return np.empty(0)
        return np.concatenate([c.parameters for c in self._components])

    @parameters.setter
    def parameters(self, values) -> None:
        for component, part in zip(self._components, self._split(values)):
            component.parameters = part

    @property
    def transformed_parameters(self) -> np.ndarray:
        """Transformed parameter values of all components."""
        if not self._components:
            return np.empty(0)
        return np.concatenate([c.transformed_parameters for c in self._components])

    @transformed_parameters.setter
    def transformed_parameters(self, values) -> None:
        for component, part in zip(self._components, self._split(values)):
            component.transformed_parameters = part

    def describe(self, indent: int = 0) -> str:
        pad = " " * indent
        lines = [f"{pad}Covariance function : Sum"]
        for number, component in enumerate(self._components, start=1):
            lines.append(f"{pad}+ Component: {number}")
            lines.append(component.describe(indent + 2))
        return "\n".join(lines)