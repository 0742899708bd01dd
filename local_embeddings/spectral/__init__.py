"""Spectral projection of TF-IDF vectors."""

from .laplacian import build_laplacian, similarity_matrix
from .projector import DEFAULT_MAX_DIMENSION, fit_basis, project, resolve_dimension

__all__ = [
    "build_laplacian",
    "similarity_matrix",
    "DEFAULT_MAX_DIMENSION",
    "fit_basis",
    "project",
    "resolve_dimension",
]
