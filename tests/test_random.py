"""Tests for random number generation."""

import jax.numpy as jnp

from pngauss import random


def test_normal_shape():
    key = random.prng_key(seed=2)
    assert random.normal(key, shape=(3, 2)).shape == (3, 2)


def test_split_gives_independent_keys():
    key = random.prng_key(seed=2)
    key1, key2 = random.split(key, num=2)
    x1 = random.normal(key1, shape=(4,))
    x2 = random.normal(key2, shape=(4,))
    assert not jnp.allclose(x1, x2)


def test_same_seed_same_draws():
    x1 = random.normal(random.prng_key(seed=3), shape=(4,))
    x2 = random.normal(random.prng_key(seed=3), shape=(4,))
    assert jnp.array_equal(x1, x2)
