"""Embedding backends used across the project."""

from .base import EmbeddingBackend, LocalEmbedder
from .model import FittedModel
from .spectral import SpectralEmbedder
from .tfidf import TfidfEmbedder

__all__ = [
    "EmbeddingBackend",
    "LocalEmbedder",
    "FittedModel",
    "SpectralEmbedder",
    "TfidfEmbedder",
]
