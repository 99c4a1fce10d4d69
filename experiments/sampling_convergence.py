"""Empirical convergence of sample moments of a square-root Gaussian."""

import logging
import pathlib

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s - sampling convergence - %(message)s",
)

import jax.numpy as jnp
import plotting
import tqdm

import pngauss


def moment_errors(gaussian, *, key, num):
    samples = gaussian.sample_n(key, num)
    error_mean = jnp.linalg.norm(jnp.mean(samples, axis=0) - gaussian.mean)
    error_cov = jnp.linalg.norm(jnp.cov(samples, rowvar=False) - gaussian.cov)
    return error_mean, error_cov


def save_result(result, /, *, path=plotting.PATH_RESULTS + "sampling_convergence/"):
    nums, errors_mean, errors_cov = result
    pathlib.Path(path).mkdir(parents=True, exist_ok=True)
    jnp.save(path + "nums.npy", nums)
    jnp.save(path + "errors_mean.npy", errors_mean)
    jnp.save(path + "errors_cov.npy", errors_cov)


# Hyperparameters
SEED = 4
DIMENSION = 4
NUMS_SAMPLES = 2 ** jnp.arange(6, 18)
PROGRESSBAR = True

# Target distribution: a random SPD covariance with a non-trivial mean
A = jnp.sin(jnp.arange(1.0, DIMENSION**2 + 1.0)).reshape((DIMENSION, DIMENSION))
COV = A @ A.T + 0.5 * jnp.eye(DIMENSION)
MEAN = jnp.linspace(-2.0, 2.0, DIMENSION)
GAUSSIAN = pngauss.Gaussian.from_mean_and_cov(MEAN, COV)

keys = pngauss.random.split(pngauss.random.prng_key(seed=SEED), num=len(NUMS_SAMPLES))
errors_mean, errors_cov = [], []
for key, num in tqdm.tqdm(
    zip(keys, NUMS_SAMPLES), total=len(NUMS_SAMPLES), disable=not PROGRESSBAR
):
    error_mean, error_cov = moment_errors(GAUSSIAN, key=key, num=int(num))
    logging.info(
        "N=%7d: |mean error|=%.2e, |cov error|=%.2e",
        int(num),
        float(error_mean),
        float(error_cov),
    )
    errors_mean.append(error_mean)
    errors_cov.append(error_cov)

RESULT = (NUMS_SAMPLES, jnp.asarray(errors_mean), jnp.asarray(errors_cov))
save_result(RESULT)

plotting.figure_sampling_convergence()
