"""Configuration management."""

import jax

# Tolerances for the symmetry check on covariance matrices.
# Read at call time, so they can be changed after import.
SYMMETRY_RTOL = 1e-7
SYMMETRY_ATOL = 1e-10


def update(str_without_jax, value, /):
    jax.config.update(f"jax_{str_without_jax}", value)
