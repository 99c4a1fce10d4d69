"""Linear-algebra routines.

All square-root factors in this package are *upper* triangular,
which means that ``cov = cholesky.T @ cholesky``.
"""

import logging

import jax.numpy as jnp
import jax.scipy.linalg

from pngauss import config, errors

logger = logging.getLogger(__name__)


def as_float_array(arr, /):
    """Convert to a JAX array with a floating-point dtype."""
    arr = jnp.asarray(arr)
    return arr.astype(jnp.result_type(arr, float))


def is_symmetric(arr, /):
    return bool(
        jnp.allclose(
            arr, arr.T, rtol=config.SYMMETRY_RTOL, atol=config.SYMMETRY_ATOL
        )
    )


def cholesky_upper(cov, /):
    """Upper-triangular Cholesky factor of a symmetric, positive-definite matrix.

    Raises
    ------
    InvalidCovarianceError
        If the matrix is not square, not symmetric, or not positive-definite.
    """
    cov = as_float_array(cov)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise errors.InvalidCovarianceError(
            f"Covariance must be a square matrix, but has shape {cov.shape}."
        )
    if not is_symmetric(cov):
        logger.debug("Rejecting asymmetric covariance of shape %s.", cov.shape)
        raise errors.InvalidCovarianceError("Covariance matrix is not symmetric.")

    # JAX signals a failed factorisation with NaNs instead of an exception.
    cholesky = jnp.linalg.cholesky(cov).T
    if is_singular_triangular(cholesky):
        logger.debug("Cholesky factorisation failed for shape %s.", cov.shape)
        raise errors.InvalidCovarianceError(
            "Covariance matrix is not positive-definite."
        )
    return cholesky


def triangularise(sqrtm, /):
    """Upper-triangular R with R.T @ R == sqrtm.T @ sqrtm.

    The diagonal of R is non-negative, so for a non-singular
    square root the result coincides with the Cholesky factor.
    """
    R = jnp.linalg.qr(sqrtm, mode="r")
    signs = jnp.where(jnp.diagonal(R) < 0, -1.0, 1.0).astype(R.dtype)
    return signs[:, None] * R


def is_singular_triangular(matrix, /):
    """Check a triangular matrix for (numerical) singularity.

    Same tolerance as numpy.linalg.matrix_rank.
    """
    diagonal = jnp.abs(jnp.diagonal(matrix))
    if not bool(jnp.all(jnp.isfinite(matrix))):
        return True
    if diagonal.shape[0] == 0:
        return False
    tol = jnp.max(diagonal) * diagonal.shape[0] * jnp.finfo(matrix.dtype).eps
    return bool(jnp.any(diagonal <= tol))


def solve_triangular(matrix, rhs, /, *, trans=0, lower=False):
    return jax.scipy.linalg.solve_triangular(matrix, rhs, trans=trans, lower=lower)


def logdet_triangular(matrix, /):
    """Log-determinant of a triangular matrix (up to the sign)."""
    return jnp.sum(jnp.log(jnp.abs(jnp.diagonal(matrix))))


def column_norms(matrix, /):
    return jnp.linalg.norm(matrix, axis=0)
