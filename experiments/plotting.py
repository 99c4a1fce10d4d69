"""Plotting code for the experiments."""

import pathlib

import jax.numpy as jnp
import matplotlib.pyplot as plt

PATH_RESULTS = "experiments/results/"

# Column width of a two-column paper template (in inches).
TEXTWIDTH_SINGLE = 3.25


def figure_sampling_convergence(path=PATH_RESULTS):
    path = path + "sampling_convergence/"
    nums, errors_mean, errors_cov = figure_sampling_convergence_load_results(path=path)

    figure_size = (TEXTWIDTH_SINGLE, 0.75 * TEXTWIDTH_SINGLE)
    fig, ax = plt.subplots(dpi=200, figsize=figure_size)

    ax.loglog(nums, errors_mean, marker="o", label="Mean")
    ax.loglog(nums, errors_cov, marker="s", label="Covariance")

    # Monte-Carlo rate, anchored at the first mean error
    reference = errors_mean[0] * jnp.sqrt(nums[0] / nums)
    ax.loglog(nums, reference, linestyle="dashed", color="gray", label=r"$N^{-1/2}$")

    ax.set_xlabel("Number of samples $N$")
    ax.set_ylabel("Error (Frobenius norm)")
    ax.legend()
    ax.grid(which="major", linestyle="dotted")

    fig.tight_layout()
    plt.savefig(path + "figure.pdf")
    plt.show()


def figure_sampling_convergence_load_results(*, path):
    path = pathlib.Path(path)
    nums = jnp.load(path / "nums.npy")
    errors_mean = jnp.load(path / "errors_mean.npy")
    errors_cov = jnp.load(path / "errors_cov.npy")
    return nums, errors_mean, errors_cov
