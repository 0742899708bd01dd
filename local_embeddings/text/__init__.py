"""Tokenization, vocabulary and TF-IDF weighting."""

from .tokenizer import tokenize
from .vocabulary import TermCounts, build_vocabulary, count_terms
from .weighting import (
    TfidfMatrix,
    build_matrix,
    build_vector,
    idf_vector,
    inverse_document_frequency,
    term_frequency,
)

__all__ = [
    "tokenize",
    "TermCounts",
    "build_vocabulary",
    "count_terms",
    "TfidfMatrix",
    "build_matrix",
    "build_vector",
    "idf_vector",
    "inverse_document_frequency",
    "term_frequency",
]
