"""Embedding backend contract and the fit/embed lifecycle shared by local backends."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from local_embeddings.embeddings.model import FittedModel
from local_embeddings.errors import EmptyCorpusError, NotFittedError

logger = logging.getLogger(__name__)

# build_matrix <- _build_model <- _fit <- fit / fit_embed_batch <- caller
FIT_WARNING_STACKLEVEL = 5


@runtime_checkable
class EmbeddingBackend(Protocol):
    """Operations every embedding backend exposes to callers."""

    def fit(self, corpus: Sequence[str]) -> None:
        ...

    def embed(self, text: str) -> List[float]:
        ...

    def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        ...

    def get_dimension(self) -> int:
        ...

    def get_config(self) -> Any:
        ...

    def is_healthy(self) -> bool:
        ...

    def disconnect(self) -> None:
        ...


class LocalEmbedder(ABC):
    """Fit/embed lifecycle over an immutable :class:`FittedModel`.

    ``fit`` builds a complete model before publishing it with a single
    attribute assignment, so a failed fit leaves the previous model in place
    and readers never see a half-updated vocabulary/idf pair. Concurrent
    ``fit`` calls are last-writer-wins.
    """

    name = "local"

    def __init__(self, config: Any) -> None:
        self._config = config
        self._model: Optional[FittedModel] = None

    @abstractmethod
    def _build_model(self, corpus: List[str]) -> FittedModel:
        """Learn a complete model from a non-empty list of documents."""

    def _fit(self, corpus: Sequence[str]) -> FittedModel:
        if isinstance(corpus, str):
            raise TypeError("corpus must be a sequence of documents, not a single string")
        documents = list(corpus)
        if not documents:
            raise EmptyCorpusError(f"{self.name}: cannot fit on an empty corpus")

        model = self._build_model(documents)
        self._model = model
        logger.info(
            "%s embedder fitted: method=%s documents=%d vocabulary=%d dimension=%d",
            self.name,
            model.method or "tfidf",
            len(documents),
            len(model.vocabulary),
            model.dimension,
        )
        return model

    def _require_model(self) -> FittedModel:
        model = self._model
        if model is None:
            raise NotFittedError(f"{self.name}: model not fitted; call fit() with a corpus first")
        return model

    def fit(self, corpus: Sequence[str]) -> None:
        self._fit(corpus)

    def embed(self, text: str) -> List[float]:
        return self._require_model().transform(text).tolist()

    def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        """Embed ``texts`` against the current model without refitting."""

        if not texts:
            return []
        model = self._require_model()
        return [model.transform(text).tolist() for text in texts]

    def fit_embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        """Refit on ``texts`` and embed each of them with the new model."""

        model = self._fit(texts)
        return [model.transform(text).tolist() for text in texts]

    def get_dimension(self) -> int:
        model = self._model
        return model.dimension if model is not None else 0

    def get_config(self) -> Any:
        return self._config

    def is_healthy(self) -> bool:
        model = self._model
        return model is not None and model.dimension > 0

    def disconnect(self) -> None:
        self._model = None
        logger.debug("%s embedder reset", self.name)

    @property
    def is_fitted(self) -> bool:
        return self._model is not None

    @property
    def vocabulary(self) -> Tuple[str, ...]:
        model = self._model
        return model.vocabulary if model is not None else ()


__all__ = ["EmbeddingBackend", "LocalEmbedder"]
