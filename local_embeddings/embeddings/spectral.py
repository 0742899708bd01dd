"""Spectral embedder: TF-IDF vectors projected onto a learned low-rank basis."""

from __future__ import annotations

import logging
from typing import List, Optional

from local_embeddings.config import SpectralEmbeddingConfig
from local_embeddings.embeddings.base import FIT_WARNING_STACKLEVEL, LocalEmbedder
from local_embeddings.embeddings.model import FittedModel
from local_embeddings.spectral.projector import fit_basis, resolve_dimension
from local_embeddings.text.weighting import build_matrix

logger = logging.getLogger(__name__)


class SpectralEmbedder(LocalEmbedder):
    """Embed texts with SVD, PCA or Laplacian-eigenmap projections of TF-IDF."""

    name = "spectral"

    def __init__(self, config: Optional[SpectralEmbeddingConfig] = None) -> None:
        config = config or SpectralEmbeddingConfig()
        if not isinstance(config, SpectralEmbeddingConfig):
            raise TypeError("SpectralEmbedder requires a SpectralEmbeddingConfig")
        super().__init__(config)

    def _build_model(self, corpus: List[str]) -> FittedModel:
        tfidf = build_matrix(
            corpus,
            smoothing=self._config.idf_smoothing,
            stacklevel=FIT_WARNING_STACKLEVEL,
        )
        n_documents, n_terms = tfidf.matrix.shape
        k = resolve_dimension(self._config.dimension, n_terms, n_documents)
        basis = fit_basis(tfidf.matrix, k, method=self._config.method)

        requested = self._config.dimension
        if basis.shape[1] == 0:
            logger.warning(
                "%s basis is empty (terms=%d, documents=%d); embeddings will be zero-dimensional",
                self._config.method,
                n_terms,
                n_documents,
            )
        elif requested is not None and basis.shape[1] < requested:
            logger.info(
                "Requested dimension %d capped to %d (terms=%d, documents=%d)",
                requested,
                basis.shape[1],
                n_terms,
                n_documents,
            )
        return FittedModel(
            vocabulary=tfidf.vocabulary,
            idf=tfidf.idf,
            basis=basis,
            method=self._config.method,
        )
