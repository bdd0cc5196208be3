# sparsekrig

Building blocks for Gaussian process regression and kriging on spatial data:

- **Covariance functions.** Each one has named parameters, and each parameter has a transform. The default transform is a log transform, so positive parameters can be optimised in unconstrained space.
- **Analytic gradients.** For each covariance function you can get the gradient of the covariance matrix `cov(x, x)` with respect to each transformed parameter.
- **Subsampling designs.** These pick a well-spread subset of observation locations.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Inputs

Inputs are given one per row of a 2-D array.

- A 1-D array is read as a column of one-dimensional inputs.
- A scalar is read as a single one-dimensional input.
- Arrays with more than two dimensions raise `ValueError`.

## Covariance functions

| Class | Module | Parameters (in order) |
|-------|--------|-----------------------|
| `GaussianCF(length_scale, variance)` | `sparsekrig.kernels` | length scale, variance |
| `ExponentialCF(length_scale, variance)` | `sparsekrig.kernels` | length scale, variance |
| `Matern3CF(length_scale, variance)` | `sparsekrig.kernels` | length scale, variance |
| `Matern5CF(length_scale, variance)` | `sparsekrig.kernels` | length scale, variance |
| `NeuralNetCF(length_scale, variance, offset=0.0)` | `sparsekrig.kernels` | sigma2, variance, offset |
| `ConstantCF(bias)` | `sparsekrig.kernels` | bias |
| `WhiteNoiseCF(variance)` | `sparsekrig.kernels` | nugget variance |
| `SumCF(*components)` | `sparsekrig.sum` | the components' parameters, in order |

Notes on individual kernels:

- **Stationary kernels.** The four stationary kernels derive from `StationaryCF` in `sparsekrig.stationary`. Each one computes `variance * correlation(squared distance)`. The same module provides `sq_dist(u, v)` and `sq_dist_matrix(x)`. `sq_dist` raises `ValueError` when the two vectors differ in length.
- **`WhiteNoiseCF`.** It returns the variance for identical inputs and zero otherwise.
- **`NeuralNetCF`.** It raises `ValueError` unless the length scale and variance are positive and the offset is not negative. With an offset of zero, the log transform of that parameter is undefined. In that case, reading the transformed parameters fails.

Every covariance function provides these members:

| Member | What it gives |
|--------|---------------|
| `covariance(x1, x2=None)` | `cov(x1, x1)`, or `cov(x1, x2)` when `x2` is given |
| `diagonal(x)` | the diagonal of `cov(x, x)` as a vector |
| `compute_element(a, b)` | covariance of two single inputs |
| `compute_diagonal_element(a)` | auto-covariance of a single input |
| `covariance_gradient(index, x)` | gradient of `cov(x, x)` with respect to transformed parameter `index` |
| `parameters` | settable property holding the parameter values |
| `transformed_parameters` | settable property holding the values in transformed space |
| `num_parameters` | number of parameters |
| `parameter_name(i)` | name of parameter `i` |
| `transform(i)` | the transform of parameter `i` |
| `set_transform(i, t)` | replace the transform of parameter `i` |
| `describe(indent=0)` | text summary of the parameters (also what `str()` returns) |

A parameter index that is out of range raises `IndexError`. Setting a parameter vector of the wrong length raises `ValueError`.

```python
import numpy as np
from sparsekrig.kernels import GaussianCF, WhiteNoiseCF
from sparsekrig.sum import SumCF

kernel = GaussianCF(length_scale=2.0, variance=3.0)
noise = WhiteNoiseCF(0.1)
cov = SumCF(kernel, noise)

X = np.random.default_rng(0).normal(size=(10, 2))
K = cov.covariance(X)                   # 10 x 10 covariance matrix
dK = cov.covariance_gradient(0, X)      # gradient w.r.t. log length scale

print(cov.num_parameters)               # 3
print(cov.transformed_parameters)       # log of each parameter value
cov.parameters = [1.5, 2.0, 0.05]       # sets the components' parameters
print(cov.describe())
```

### How `SumCF` handles parameters

- Parameters of a `SumCF` are indexed in the order the components were added.
- `parameter_name(i)`, `transform(i)`, `set_transform(i, t)` and `covariance_gradient(i, x)` all refer to the component that owns parameter `i`.
- Components are shared, not copied. Changing parameters through the sum changes the components as well.
- The `components` property returns the components in order.

## Transforms

`LogTransform` in `sparsekrig.covariance` is the default transform for every parameter:

- `forward(value)` returns `log(value)`.
- `backward(value)` returns `exp(value)`.
- `gradient(value)` returns `value`. This is the derivative of the parameter with respect to its log.

Any object with the same three methods and a `name` attribute can be passed to `set_transform`.

## Subsampling designs

All designs live in `sparsekrig.design`. They share the `Design.subsample(x, sample_size)` interface, which returns an integer array of the selected row indices.

`subsample` raises `ValueError` in two cases:

- `sample_size` is not positive.
- `sample_size` exceeds the number of rows.

The designs:

- **`GreedyMaxMinDesign(zweight=3.0)`**
  - It starts from the point with the largest value in the last column.
  - It then repeatedly adds the remaining point whose minimum distance to the sample so far is largest.
  - In these distances, the squared difference in the last column is weighted by `zweight`.
- **`MaxMinDesign(nsamples=100, rng=None)`**
  - It draws `nsamples` random subsets and keeps the one with the largest minimum pairwise distance.
  - If no subset has a positive minimum distance, it returns a random permutation of all rows.
- **`MinMaxDesign(nsamples=100, rng=None)`**
  - It draws `nsamples` random subsets and keeps the one with the smallest maximum pairwise distance.

For the two random designs:

- `rng` is a seed or a `numpy.random.Generator`.
- A non-positive `nsamples` issues a warning and falls back to 100.

```python
import numpy as np
from sparsekrig.design import GreedyMaxMinDesign, MaxMinDesign

points = np.random.default_rng(1).uniform(size=(200, 3))
idx = GreedyMaxMinDesign(3.0).subsample(points, 20)
subset = points[idx]

idx2 = MaxMinDesign(nsamples=50, rng=42).subsample(points, 20)
```

## What this package does not do

The package supplies covariance functions and designs only. It does not include:

- Gaussian process or sparse Gaussian process models.
- Likelihood models.
- Parameter optimisers.
- Prediction.
- Reading or writing data files.
- A command-line program.

To fit a model, use these pieces with your own inference and optimisation code.