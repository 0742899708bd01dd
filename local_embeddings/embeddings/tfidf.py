"""TF-IDF embedder: the weighted term vector is the embedding."""

from __future__ import annotations

from typing import List, Optional

from local_embeddings.config import TfidfEmbeddingConfig
from local_embeddings.embeddings.base import FIT_WARNING_STACKLEVEL, LocalEmbedder
from local_embeddings.embeddings.model import FittedModel
from local_embeddings.text.weighting import build_matrix


class TfidfEmbedder(LocalEmbedder):
    """Embedder that transforms texts into TF-IDF vectors over a fitted vocabulary."""

    name = "tfidf"

    def __init__(self, config: Optional[TfidfEmbeddingConfig] = None) -> None:
        config = config or TfidfEmbeddingConfig()
        if config.type != "tfidf":
            raise TypeError(f"TfidfEmbedder requires a tfidf config, got type={config.type!r}")
        super().__init__(config)

    def _build_model(self, corpus: List[str]) -> FittedModel:
        tfidf = build_matrix(
            corpus,
            smoothing=self._config.idf_smoothing,
            max_terms=self._config.dimension,
            stacklevel=FIT_WARNING_STACKLEVEL,
        )
        return FittedModel(vocabulary=tfidf.vocabulary, idf=tfidf.idf)
