"""Low-rank projection bases learned from a TF-IDF matrix.

Three methods are supported:

* ``svd``: top right singular vectors of the TF-IDF matrix.
* ``pca``: the same on the column-centred matrix (principal axes).
* ``laplacian``: eigenvectors of the document similarity Laplacian with the
  smallest non-zero eigenvalues, lifted into term space so unseen documents
  can be projected.

Every basis has orthonormal columns in term space and at most
``min(k, rank)`` of them. Projection is a plain ``basis.T @ vector`` so an
all-zero TF-IDF vector stays zero for every method.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from sklearn.utils.extmath import svd_flip

from local_embeddings.config import SPECTRAL_METHODS
from local_embeddings.errors import UnsupportedMethodError
from local_embeddings.spectral.laplacian import build_laplacian

DEFAULT_MAX_DIMENSION = 128
RANK_TOLERANCE = 1e-10


def resolve_dimension(requested: Optional[int], n_terms: int, n_documents: int) -> int:
    """Effective basis width for a requested dimension and a matrix shape."""

    k = min(DEFAULT_MAX_DIMENSION, n_terms) if requested is None else requested
    return max(0, min(k, n_terms, n_documents))


def _rank_tolerance(values: np.ndarray, shape: tuple) -> float:
    if values.size == 0:
        return 0.0
    return float(np.abs(values).max()) * max(shape) * np.finfo(np.float64).eps


def _svd_basis(matrix: np.ndarray, k: int) -> np.ndarray:
    u, singular_values, vt = np.linalg.svd(matrix, full_matrices=False)
    u, vt = svd_flip(u, vt)
    threshold = max(_rank_tolerance(singular_values, matrix.shape), RANK_TOLERANCE)
    rank = int((singular_values > threshold).sum())
    return vt[: min(k, rank)].T.copy()


def _orthonormal_columns(lifted: np.ndarray) -> np.ndarray:
    if lifted.shape[1] == 0:
        return lifted
    q, r = np.linalg.qr(lifted)
    diagonal = np.abs(np.diag(r))
    keep = diagonal > max(_rank_tolerance(diagonal, lifted.shape), RANK_TOLERANCE)
    q = q[:, keep]
    if q.shape[1] == 0:
        return q
    # largest-magnitude entry of each column is positive
    pivots = np.argmax(np.abs(q), axis=0)
    signs = np.sign(q[pivots, np.arange(q.shape[1])])
    return q * signs


def _laplacian_basis(matrix: np.ndarray, k: int) -> np.ndarray:
    eigenvalues, eigenvectors = np.linalg.eigh(build_laplacian(matrix))
    threshold = RANK_TOLERANCE * max(1.0, float(np.abs(eigenvalues).max()))
    nontrivial = eigenvectors[:, eigenvalues > threshold][:, :k]
    return _orthonormal_columns(matrix.T @ nontrivial)


def fit_basis(matrix: np.ndarray, k: int, method: str = "svd") -> np.ndarray:
    """Learn a ``(terms, k')`` projection basis with ``k' <= min(k, terms, documents)``."""

    if method not in SPECTRAL_METHODS:
        raise UnsupportedMethodError(
            f"Unsupported spectral method {method!r}; expected one of {', '.join(SPECTRAL_METHODS)}"
        )

    matrix = np.asarray(matrix, dtype=np.float64)
    n_documents, n_terms = matrix.shape
    k = max(0, min(k, n_terms, n_documents))
    if k == 0:
        return np.zeros((n_terms, 0))

    if method == "laplacian":
        return _laplacian_basis(matrix, k)
    if method == "pca":
        matrix = matrix - matrix.mean(axis=0)
    return _svd_basis(matrix, k)


def project(vector: np.ndarray, basis: np.ndarray) -> np.ndarray:
    """Coordinates of ``vector`` along each basis column (``basis.T @ vector``)."""

    vector = np.asarray(vector, dtype=np.float64)
    if vector.shape[0] != basis.shape[0]:
        raise ValueError(
            f"Vector length {vector.shape[0]} does not match basis rows {basis.shape[0]}"
        )
    return basis.T @ vector


__all__ = [
    "DEFAULT_MAX_DIMENSION",
    "resolve_dimension",
    "fit_basis",
    "project",
]
