import math

import numpy as np
import pytest

from sparsekrig.kernels import (
    ConstantCF,
    ExponentialCF,
    GaussianCF,
    Matern3CF,
    Matern5CF,
    NeuralNetCF,
    WhiteNoiseCF,
)

TOLERANCE = 1e-3


def _finite_difference(cf, x, index, epsilon=1e-6):
    params = cf.transformed_parameters.copy()
    plus = params.copy()
    plus[index] += epsilon
    cf.transformed_parameters = plus
    k_plus = cf.covariance(x)
    minus = params.copy()
    minus[index] -= epsilon
    cf.transformed_parameters = minus
    k_minus = cf.covariance(x)
    cf.transformed_parameters = params
    return (k_plus - k_minus) / (2.0 * epsilon)


def _grad_check_errors(cf, seed=0):
    rng = np.random.default_rng(seed)
    x = 10.0 * rng.standard_normal((10, 2))
    worst = [0.0, 0.0, 0.0]
    for i in range(cf.num_parameters):
        analytic = cf.covariance_gradient(i, x)
        numeric = _finite_difference(cf, x, i)
        err = np.abs(analytic - numeric)
        stats = [err.mean(), err.var(ddof=1), err.max()]
        worst = [max(w, s) for w, s in zip(worst, stats)]
    return worst


@pytest.mark.parametrize(
    "cf",
    [
        GaussianCF(3.3, 2.1),
        WhiteNoiseCF(4.1),
        ConstantCF(0.0123),
        Matern3CF(3.7, 2.1),
        Matern5CF(2.1, 3.7),
        NeuralNetCF(1.1, 3.7, 0.1),
        ExponentialCF(3.7, 2.1),
    ],
    ids=["gaussian", "white_noise", "constant", "matern3", "matern5", "neural_net", "exponential"],
)
def test_gradient_matches_finite_differences(cf):
    errmean, errvar, errmax = _grad_check_errors(cf)
    assert errmean < TOLERANCE
    assert errvar < TOLERANCE
    assert errmax < TOLERANCE


def test_gaussian_element_value():
    cf = GaussianCF(1.0, 2.0)
    assert cf.compute_element([0.0, 0.0], [1.0, 1.0]) == pytest.approx(2.0 * math.exp(-1.0))


def test_exponential_element_value():
    cf = ExponentialCF(1.0, 1.0)
    assert cf.compute_element([0.0], [1.0]) == pytest.approx(math.exp(-0.5))


def test_matern3_element_value():
    cf = Matern3CF(1.0, 1.0)
    r = math.sqrt(3.0)
    assert cf.compute_element([0.0], [1.0]) == pytest.approx((1.0 + r) * math.exp(-r))


def test_matern5_element_value():
    cf = Matern5CF(1.0, 1.0)
    r = math.sqrt(5.0)
    expected = (1.0 + r + r * r / 3.0) * math.exp(-r)
    assert cf.compute_element([0.0], [1.0]) == pytest.approx(expected)


@pytest.mark.parametrize("cls", [ExponentialCF, GaussianCF, Matern3CF, Matern5CF])
def test_stationary_correlation_is_one_at_zero(cls):
    cf = cls(1.5, 2.5)
    assert float(cf.correlation(0.0)) == pytest.approx(1.0)
    assert cf.compute_diagonal_element([3.0, 4.0]) == pytest.approx(2.5)


@pytest.mark.parametrize("cls", [ExponentialCF, GaussianCF, Matern3CF, Matern5CF])
def test_variance_gradient_of_correlation_is_zero(cls):
    cf = cls(1.5, 2.5)
    d = np.array([[0.0, 1.0], [1.0, 0.0]])
    np.testing.assert_array_equal(cf.correlation_gradient(1, d), np.zeros((2, 2)))


@pytest.mark.parametrize("cls", [ExponentialCF, GaussianCF, Matern3CF, Matern5CF])
def test_correlation_gradient_rejects_bad_index(cls):
    cf = cls(1.0, 1.0)
    with pytest.raises(IndexError):
        cf.correlation_gradient(2, 1.0)


@pytest.mark.parametrize("cls", [ExponentialCF, GaussianCF, Matern3CF, Matern5CF])
def test_stationary_covariance_matches_elements(cls):
    cf = cls(2.0, 1.7)
    x = np.array([[0.0, 0.0], [1.0, 2.0], [-1.5, 0.5]])
    c = cf.covariance(x)
    for i in range(3):
        for j in range(3):
            assert c[i, j] == pytest.approx(cf.compute_element(x[i], x[j]))


def test_constant_covariance_is_all_bias():
    cf = ConstantCF(0.7)
    c = cf.covariance(np.array([[0.0, 1.0], [2.0, 3.0], [5.0, 5.0]]))
    np.testing.assert_allclose(c, np.full((3, 3), 0.7))
    assert cf.parameter_name(0) == "bias"


def test_constant_gradient_log_transform():
    cf = ConstantCF(0.5)
    np.testing.assert_allclose(cf.covariance_gradient(0, np.zeros((2, 1))), np.full((2, 2), 0.5))
    with pytest.raises(IndexError):
        cf.covariance_gradient(1, np.zeros((2, 1)))


def test_white_noise_identical_inputs():
    cf = WhiteNoiseCF(2.0)
    assert cf.compute_element([1.0, 2.0], [1.0, 2.0]) == 2.0
    assert cf.compute_element([1.0, 2.0], [1.0, 2.5]) == 0.0
    c = cf.covariance(np.array([[0.0, 0.0], [1.0, 1.0], [0.0, 0.0]]))
    expected = np.array([[2.0, 0.0, 2.0], [0.0, 2.0, 0.0], [2.0, 0.0, 2.0]])
    np.testing.assert_array_equal(c, expected)
    assert cf.parameter_name(0) == "nugget variance"


def test_white_noise_gradient_equals_covariance_under_log_transform():
    cf = WhiteNoiseCF(3.0)
    x = np.array([[0.0], [1.0], [2.0]])
    np.testing.assert_allclose(cf.covariance_gradient(0, x), cf.covariance(x))


def test_neural_net_parameter_names_and_values():
    cf = NeuralNetCF(1.1, 3.7, 0.1)
    assert [cf.parameter_name(i) for i in range(3)] == ["sigma2", "variance", "offset"]
    np.testing.assert_allclose(cf.parameters, [1.1, 3.7, 0.1])


def test_neural_net_element_at_origin():
    cf = NeuralNetCF(1.0, 2.0, 1.0)
    # u = 1, vA = vB = 2 -> asin(0.5) = pi/6
    assert cf.compute_element([0.0], [0.0]) == pytest.approx(2.0 * (math.pi / 6) * 2 / math.pi)


def test_neural_net_covariance_is_symmetric():
    cf = NeuralNetCF(0.8, 1.5, 0.2)
    x = np.random.default_rng(3).standard_normal((6, 2))
    c = cf.covariance(x)
    np.testing.assert_allclose(c, c.T)
    np.testing.assert_allclose(np.diag(c), cf.diagonal(x))


def test_neural_net_rejects_non_positive_parameters():
    with pytest.raises(ValueError):
        NeuralNetCF(0.0, 1.0, 0.1)
    with pytest.raises(ValueError):
        NeuralNetCF(1.0, -1.0, 0.1)


def test_neural_net_variance_gradient():
    cf = NeuralNetCF(1.0, 2.0, 0.5)
    x = np.array([[0.0, 1.0], [1.0, -1.0]])
    np.testing.assert_allclose(cf.covariance_gradient(1, x), cf.covariance(x))