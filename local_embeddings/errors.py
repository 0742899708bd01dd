"""Exceptions and warnings raised by the local embedding backends."""


class EmbeddingError(Exception):
    """Base error for local embedding backends."""


class NotFittedError(EmbeddingError):
    """Raised when embedding is attempted before a successful ``fit``."""


class EmptyCorpusError(EmbeddingError):
    """Raised when ``fit`` receives a corpus with zero documents."""


class UnsupportedMethodError(EmbeddingError):
    """Raised when a spectral method outside the supported set is configured."""


class DegenerateDocumentWarning(UserWarning):
    """A corpus document produced no tokens; its TF-IDF row is all zeros."""


__all__ = [
    "EmbeddingError",
    "NotFittedError",
    "EmptyCorpusError",
    "UnsupportedMethodError",
    "DegenerateDocumentWarning",
]
