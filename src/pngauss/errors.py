"""Exceptions."""


class InvalidCovarianceError(ValueError):
    """The covariance (or its square root) is not square, symmetric and positive-definite."""


class DimensionMismatchError(ValueError):
    """An array does not match the dimension of the distribution."""
