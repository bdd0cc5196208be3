import numpy as np
import pytest

from sparsekrig.design import Design, GreedyMaxMinDesign, MaxMinDesign, MinMaxDesign


def _points(n=30, seed=1):
    return np.random.default_rng(seed).uniform(0.0, 10.0, size=(n, 3))


def test_design_is_abstract():
    with pytest.raises(TypeError):
        Design()


def test_greedy_starts_at_max_last_column():
    x = _points()
    result = GreedyMaxMinDesign().subsample(x, 5)
    assert result[0] == int(np.argmax(x[:, -1]))


def test_greedy_worked_example():
    x = np.array([[0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [10.0, 0.0, 0.0], [5.0, 0.0, 0.0]])
    assert GreedyMaxMinDesign(3.0).subsample(x, 3).tolist() == [0, 2, 3]


@pytest.mark.parametrize("design", [GreedyMaxMinDesign(), MaxMinDesign(rng=0), MinMaxDesign(rng=0)])
def test_subsample_is_distinct_valid_indices(design):
    x = _points()
    result = design.subsample(x, 6)
    assert len(result) == 6
    assert len(set(result.tolist())) == 6
    assert all(0 <= i < len(x) for i in result)


@pytest.mark.parametrize("design", [GreedyMaxMinDesign(), MaxMinDesign(rng=0), MinMaxDesign(rng=0)])
@pytest.mark.parametrize("size", [0, -2, 31])
def test_invalid_sample_size(design, size):
    with pytest.raises(ValueError):
        design.subsample(_points(), size)


def test_greedy_full_sample_is_permutation():
    x = _points(8)
    result = GreedyMaxMinDesign().subsample(x, 8)
    assert sorted(result.tolist()) == list(range(8))


def test_maxmin_avoids_close_pair():
    x = np.array([[0.0, 0.0], [0.0, 0.001], [10.0, 10.0]])
    result = MaxMinDesign(rng=42).subsample(x, 2)
    assert 2 in result.tolist()


def test_minmax_picks_close_pair():
    x = np.array([[0.0, 0.0], [0.0, 0.1], [10.0, 10.0]])
    result = MinMaxDesign(rng=42).subsample(x, 2)
    assert set(result.tolist()) == {0, 1}


def test_seeded_designs_are_reproducible():
    x = _points()
    a = MaxMinDesign(20, rng=7).subsample(x, 4)
    b = MaxMinDesign(20, rng=7).subsample(x, 4)
    np.testing.assert_array_equal(a, b)


@pytest.mark.parametrize("cls", [MaxMinDesign, MinMaxDesign])
def test_nonpositive_nsamples_reverts_to_default(cls):
    with pytest.warns(UserWarning):
        design = cls(0)
    assert design.nsamples == 100