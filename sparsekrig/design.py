"""Designs for choosing a well spread subsample of locations."""

from __future__ import annotations

import logging
import warnings
from abc import ABC, abstractmethod

import numpy as np

from .covariance import _as_inputs

logger = logging.getLogger(__name__)

_DEFAULT_NSAMPLES = 100


def _check_sample_size(x: np.ndarray, sample_size: int) -> None:
    if sample_size <= 0:
        raise ValueError(f"invalid sample size {sample_size}")
    if sample_size > len(x):
        raise ValueError(f"sample size {sample_size} exceeds the {len(x)} available locations")


def _pairwise_distances(x: np.ndarray) -> np.ndarray:
    diff = x[:, np.newaxis, :] - x[np.newaxis, :, :]
    return np.sqrt(np.einsum("ijk,ijk->ij", diff, diff))


def _min_distance(x: np.ndarray) -> float:
    if len(x) < 2:
        return float("inf")
    d = _pairwise_distances(x)
    return float(d[np.tril_indices(len(x), k=-1)].min())


def _max_distance(x: np.ndarray) -> float:
    return float(_pairwise_distances(x).max())


def _checked_nsamples(nsamples: int) -> int:
    if nsamples <= 0:
        warnings.warn(
            f"non-positive sample number {nsamples}; reverting to default ({_DEFAULT_NSAMPLES})",
            stacklevel=3,
        )
        return _DEFAULT_NSAMPLES
    return nsamples


class Design(ABC):
    """Strategy for subsampling a set of locations (one per row)."""

    @abstractmethod
    def subsample(self, x, sample_size: int) -> np.ndarray:
        """Return the row indices of ``sample_size`` locations taken from x."""


class GreedyMaxMinDesign(Design):
    """Greedy design adding, one at a time, the point furthest from the sample.

    The first point is the one with the largest value in the last column. The
    last column's squared difference is weighted by ``zweight`` in distances.
    """

    def __init__(self, zweight: float = 3.0):
        self.zweight = float(zweight)

    def _distances(self, r: np.ndarray, y: np.ndarray) -> np.ndarray:
        sq = (r - y) ** 2
        sq[:, -1] *= self.zweight
        return sq.sum(axis=1)

    def subsample(self, x, sample_size: int) -> np.ndarray:
        pts = _as_inputs(x)
        _check_sample_size(pts, sample_size)

        first = int(np.argmax(pts[:, -1]))
        sample = [first]
        remaining = [i for i in range(len(pts)) if i != first]
        min_dist: np.ndarray | None = None

        while len(sample) < sample_size:
            new = self._distances(pts[remaining], pts[sample[-1]])
            min_dist = new if min_dist is None else np.minimum(min_dist, new)
            best = int(np.argmax(min_dist))
            sample.append(remaining.pop(best))
            min_dist = np.delete(min_dist, best)

        return np.array(sample, dtype=int)


class MaxMinDesign(Design):
    """Random design keeping, out of ``nsamples`` random subsamples, the one
    whose minimum distance between points is largest."""

    def __init__(self, nsamples: int = _DEFAULT_NSAMPLES, rng=None):
        self.nsamples = _checked_nsamples(nsamples)
        self.rng = np.random.default_rng(rng)

    def subsample(self, x, sample_size: int) -> np.ndarray:
        pts = _as_inputs(x)
        _check_sample_size(pts, sample_size)

        best = self.rng.permutation(len(pts))
        best_min = 0.0
        for _ in range(self.nsamples):
            candidate = self.rng.permutation(len(pts))[:sample_size]
            distance = _min_distance(pts[candidate])
            if distance > best_min:
                best, best_min = candidate, distance
                logger.debug("New min distance: %g", best_min)
        return best


class MinMaxDesign(Design):
    """Random design keeping, out of ``nsamples`` random subsamples, the one
    whose maximum distance between points is smallest."""

    def __init__(self, nsamples: int = _DEFAULT_NSAMPLES, rng=None):
        self.nsamples = _checked_nsamples(nsamples)
        self.rng = np.random.default_rng(rng)

    def subsample(self, x, sample_size: int) -> np.ndarray:
        pts = _as_inputs(x)
        _check_sample_size(pts, sample_size)

        best = None
        best_max = float("inf")
        for _ in range(self.nsamples):
            candidate = self.rng.permutation(len(pts))[:sample_size]
            distance = _max_distance(pts[candidate])
            if best is None or distance < best_max:
                best, best_max = candidate, distance
        return best