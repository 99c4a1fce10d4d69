"""Tests for linear-algebra routines."""

import jax.numpy as jnp
import pytest

from pngauss import config, errors, linalg


@pytest.fixture
def cov():
    return jnp.array([[4.0, 2.0], [2.0, 3.0]])


def test_cholesky_upper(cov):
    chol = linalg.cholesky_upper(cov)
    assert jnp.allclose(chol.T @ chol, cov)
    assert jnp.allclose(chol, jnp.triu(chol))


def test_cholesky_upper_promotes_integers():
    chol = linalg.cholesky_upper(jnp.array([[4, 0], [0, 9]]))
    assert jnp.issubdtype(chol.dtype, jnp.floating)
    assert jnp.allclose(chol, jnp.diag(jnp.array([2.0, 3.0])))


@pytest.mark.parametrize(
    "matrix",
    [
        jnp.ones((2, 3)),
        jnp.ones((3,)),
        jnp.array([[1.0, 0.1], [0.0, 1.0]]),
        jnp.array([[0.0, 0.0], [0.0, 1.0]]),
        jnp.array([[1.0, jnp.nan], [jnp.nan, 1.0]]),
    ],
)
def test_cholesky_upper_rejects(matrix):
    with pytest.raises(errors.InvalidCovarianceError):
        linalg.cholesky_upper(matrix)


def test_symmetry_tolerance_is_configurable(cov, monkeypatch):
    cov_perturbed = cov.at[0, 1].add(1e-6)
    assert not linalg.is_symmetric(cov_perturbed)

    monkeypatch.setattr(config, "SYMMETRY_ATOL", 1e-5)
    assert linalg.is_symmetric(cov_perturbed)


def test_triangularise(cov):
    eigvals, eigvecs = jnp.linalg.eigh(cov)
    sqrtm = jnp.diag(jnp.sqrt(eigvals)) @ eigvecs.T
    R = linalg.triangularise(sqrtm)
    assert jnp.allclose(R.T @ R, cov)
    assert jnp.allclose(R, jnp.triu(R))
    assert jnp.all(jnp.diagonal(R) >= 0)


def test_is_singular_triangular():
    assert linalg.is_singular_triangular(jnp.array([[1.0, 2.0], [0.0, 0.0]]))
    assert linalg.is_singular_triangular(jnp.array([[1.0, jnp.inf], [0.0, 1.0]]))
    assert not linalg.is_singular_triangular(jnp.array([[1.0, 2.0], [0.0, 1e-3]]))


def test_solve_triangular(cov):
    chol = linalg.cholesky_upper(cov)
    rhs = jnp.array([1.0, -2.0])
    solution = linalg.solve_triangular(chol, rhs, trans="T", lower=False)
    assert jnp.allclose(chol.T @ solution, rhs)


def test_logdet_triangular(cov):
    chol = linalg.cholesky_upper(cov)
    assert jnp.allclose(2 * linalg.logdet_triangular(chol), jnp.log(jnp.linalg.det(cov)))


def test_column_norms():
    matrix = jnp.array([[3.0, 0.0], [4.0, 2.0]])
    assert jnp.allclose(linalg.column_norms(matrix), jnp.array([5.0, 2.0]))
