"""Local text embeddings from TF-IDF weighting and spectral projection."""

from .config import SpectralEmbeddingConfig, TfidfEmbeddingConfig, config_from_env, load_config
from .embeddings import EmbeddingBackend, FittedModel, SpectralEmbedder, TfidfEmbedder
from .errors import (
    DegenerateDocumentWarning,
    EmbeddingError,
    EmptyCorpusError,
    NotFittedError,
    UnsupportedMethodError,
)
from .log_setup import configure_logging

__all__ = [
    "SpectralEmbeddingConfig",
    "TfidfEmbeddingConfig",
    "config_from_env",
    "load_config",
    "EmbeddingBackend",
    "FittedModel",
    "SpectralEmbedder",
    "TfidfEmbedder",
    "DegenerateDocumentWarning",
    "EmbeddingError",
    "EmptyCorpusError",
    "NotFittedError",
    "UnsupportedMethodError",
    "configure_logging",
]
