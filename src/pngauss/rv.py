"""Random variables."""

import logging
from collections import namedtuple

import jax.numpy as jnp

from pngauss import errors, linalg, random

logger = logging.getLogger(__name__)


class Gaussian(namedtuple("_Gaussian", "mean cov_sqrtm")):
    """Multivariate normal distributions in square-root form.

    The covariance is represented by an upper-triangular matrix square root,
    ``cov = cov_sqrtm.T @ cov_sqrtm``, which is never inverted explicitly.

    Use the ``from_*`` constructors to build a distribution from a
    covariance matrix. They validate their input eagerly and can therefore
    not be traced. Calling ``Gaussian(mean, cov_sqrtm)`` directly skips all
    checks, which is what JAX does when it reassembles the namedtuple
    inside ``jax.jit`` or ``jax.vmap``.
    """

    @classmethod
    def from_mean_and_cov(cls, mean, cov):
        """Gaussian with mean ``mean`` and covariance ``cov``.

        Parameters
        ----------
        mean
            Mean vector of shape ``(n,)``.
        cov
            Symmetric, positive-definite covariance of shape ``(n, n)``.

        Raises
        ------
        InvalidCovarianceError
            If ``cov`` is not square, symmetric and positive-definite.
        DimensionMismatchError
            If ``mean`` is not a vector of length ``n``.
        """
        cov_sqrtm = linalg.cholesky_upper(cov)
        return cls._from_validated_sqrtm(mean, cov_sqrtm)

    @classmethod
    def from_cov(cls, cov):
        """Zero-mean Gaussian with covariance ``cov``."""
        cov_sqrtm = linalg.cholesky_upper(cov)
        mean = jnp.zeros(cov_sqrtm.shape[0], dtype=cov_sqrtm.dtype)
        return cls._from_validated_sqrtm(mean, cov_sqrtm)

    @classmethod
    def from_diagonal_cov(cls, diagonal):
        """Zero-mean Gaussian with covariance ``diag(diagonal)``.

        Parameters
        ----------
        diagonal
            Vector of strictly positive variances.
        """
        diagonal = linalg.as_float_array(diagonal)
        if diagonal.ndim != 1:
            raise errors.InvalidCovarianceError(
                f"Expected a vector of variances, but got shape {diagonal.shape}."
            )
        if not bool(jnp.all(jnp.isfinite(diagonal) & (diagonal > 0))):
            raise errors.InvalidCovarianceError(
                "Variances must be strictly positive and finite."
            )
        cov_sqrtm = jnp.diag(jnp.sqrt(diagonal))
        return cls._from_validated_sqrtm(jnp.zeros_like(diagonal), cov_sqrtm)

    @classmethod
    def from_mean_and_cov_sqrtm(cls, mean, cov_sqrtm):
        """Gaussian from an arbitrary square root of the covariance.

        Any ``S`` with ``S.T @ S == cov`` is accepted, for example
        ``diag(sqrt(eigvals)) @ eigvecs.T``. The factor is triangularised
        by a QR decomposition before it is stored.

        Raises
        ------
        InvalidCovarianceError
            If ``cov_sqrtm`` is not square or is singular.
        DimensionMismatchError
            If ``mean`` does not match ``cov_sqrtm``.
        """
        cov_sqrtm = linalg.as_float_array(cov_sqrtm)
        if cov_sqrtm.ndim != 2 or cov_sqrtm.shape[0] != cov_sqrtm.shape[1]:
            raise errors.InvalidCovarianceError(
                f"Square root must be a square matrix, but has shape {cov_sqrtm.shape}."
            )
        cov_sqrtm = linalg.triangularise(cov_sqrtm)
        if linalg.is_singular_triangular(cov_sqrtm):
            logger.debug("Rejecting singular square root of shape %s.", cov_sqrtm.shape)
            raise errors.InvalidCovarianceError("Square root is singular.")
        return cls._from_validated_sqrtm(mean, cov_sqrtm)

    @classmethod
    def _from_validated_sqrtm(cls, mean, cov_sqrtm):
        n = cov_sqrtm.shape[0]
        mean = jnp.asarray(mean)
        if mean.shape != (n,):
            raise errors.DimensionMismatchError(
                f"Mean of shape {mean.shape} does not match covariance of shape {cov_sqrtm.shape}."
            )
        logger.debug("Constructed a %d-dimensional Gaussian.", n)
        return cls(mean=mean, cov_sqrtm=cov_sqrtm)

    @property
    def dimension(self):
        return self.mean.shape[0]

    @property
    def cov(self):
        return self.cov_sqrtm.T @ self.cov_sqrtm

    @property
    def logdet_cov(self):
        return 2.0 * linalg.logdet_triangular(self.cov_sqrtm)

    @property
    def marginal_std(self):
        # sqrt(diag(cov)) without assembling cov
        return linalg.column_norms(self.cov_sqrtm)

    def sample(self, key):
        """Draw a single sample via the reparametrisation trick."""
        z = random.normal(key, shape=(self.dimension,))
        return self.mean + self.cov_sqrtm.T @ z

    def sample_n(self, key, num):
        """Draw ``num`` independent samples. Returns an array of shape ``(num, n)``."""
        if num < 0:
            raise ValueError(f"num >= 0 required, but got num={num}.")
        z = random.normal(key, shape=(num, self.dimension))
        return self.mean[None, :] + z @ self.cov_sqrtm

    def logpdf(self, x):
        """Log-density at ``x`` of shape ``(n,)``, or row-wise for shape ``(k, n)``."""
        residual_white = self._residual_white(x)
        return (
            -linalg.logdet_triangular(self.cov_sqrtm)
            - 0.5 * jnp.sum(residual_white * residual_white, axis=-1)
            - 0.5 * self.dimension * jnp.log(2.0 * jnp.pi)
        )

    def pdf(self, x):
        return jnp.exp(self.logpdf(x))

    def mahalanobis_norm(self, x):
        residual_white = self._residual_white(x)
        return jnp.linalg.norm(residual_white, axis=-1)

    def _residual_white(self, x):
        x = jnp.asarray(x)
        if x.ndim not in (1, 2) or x.shape[-1] != self.dimension:
            raise errors.DimensionMismatchError(
                f"Expected shape ({self.dimension},) or (k, {self.dimension}), but got {x.shape}."
            )
        residual = x - self.mean

        # Batches are stored row-wise, the solve wants them column-wise.
        return linalg.solve_triangular(
            self.cov_sqrtm, residual.T, trans="T", lower=False
        ).T
