"""Covariance functions with transformable parameters and analytic gradients, and subsampling designs."""

__version__ = "0.1.0"
__all__ = ["covariance", "stationary", "kernels", "sum", "design"]