"""Document similarity graph Laplacian."""

from __future__ import annotations

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity


def similarity_matrix(matrix: np.ndarray) -> np.ndarray:
    """Cosine similarity between rows; rows with zero norm score 0 against everything."""

    matrix = np.asarray(matrix, dtype=np.float64)
    n_rows = matrix.shape[0]
    if n_rows == 0 or matrix.shape[1] == 0:
        return np.zeros((n_rows, n_rows))
    return cosine_similarity(matrix)


def build_laplacian(matrix: np.ndarray) -> np.ndarray:
    """Unnormalised graph Laplacian ``L = D - S`` over the rows of ``matrix``."""

    similarity = similarity_matrix(matrix)
    degree = np.diag(similarity.sum(axis=1))
    return degree - similarity


__all__ = ["similarity_matrix", "build_laplacian"]
