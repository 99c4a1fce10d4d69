"""Multivariate Gaussians in square-root form."""

from . import config, errors, linalg, random, rv
from .rv import Gaussian

__version__ = "0.0.1"


# for all modules:
config.update("enable_x64", True)
