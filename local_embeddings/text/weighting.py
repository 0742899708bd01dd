"""TF-IDF weighting for a fitted corpus and for single out-of-corpus documents."""

from __future__ import annotations

import warnings
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from local_embeddings.config import IDF_SMOOTHING_POLICIES
from local_embeddings.errors import DegenerateDocumentWarning, EmptyCorpusError
from local_embeddings.text.tokenizer import tokenize
from local_embeddings.text.vocabulary import count_terms


@dataclass(frozen=True)
class TfidfMatrix:
    """Vocabulary, idf weights and the document-by-term TF-IDF matrix."""

    vocabulary: Tuple[str, ...]
    idf: np.ndarray
    matrix: np.ndarray


def term_frequency(terms: Sequence[str], term: str) -> float:
    """Share of ``terms`` equal to ``term``; 0.0 for an empty token list."""

    if len(terms) == 0:
        return 0.0
    return list(terms).count(term) / len(terms)


def idf_vector(document_frequencies: np.ndarray, n_documents: int, smoothing: str = "smoothed") -> np.ndarray:
    if smoothing not in IDF_SMOOTHING_POLICIES:
        raise ValueError(
            f"Unknown idf smoothing policy: {smoothing!r}; expected one of {', '.join(IDF_SMOOTHING_POLICIES)}"
        )
    df = np.asarray(document_frequencies, dtype=np.float64)
    if smoothing == "smoothed":
        return np.log((n_documents + 1) / (df + 1)) + 1.0
    return np.log(n_documents / (df + 1))


def inverse_document_frequency(corpus: Sequence[str], term: str, smoothing: str = "smoothed") -> float:
    """IDF of ``term`` where document frequency counts documents containing it as a token."""

    if len(corpus) == 0:
        raise EmptyCorpusError("Cannot compute idf over an empty corpus")
    needle = term.lower()
    df = sum(1 for doc in corpus if needle in set(tokenize(doc)))
    return float(idf_vector(np.array([df]), len(corpus), smoothing)[0])


def build_matrix(
    corpus: Sequence[str],
    smoothing: str = "smoothed",
    max_terms: Optional[int] = None,
    stacklevel: int = 2,
) -> TfidfMatrix:
    """Build vocabulary, corpus-wide idf and one weighted row per document.

    ``stacklevel`` is forwarded to the ``DegenerateDocumentWarning`` raised for
    documents without tokens so wrappers can attribute it to their caller.
    """

    counts = count_terms(corpus, max_terms=max_terms)
    idf = idf_vector(counts.document_frequencies, len(corpus), smoothing)

    lengths = counts.lengths.astype(np.float64)[:, np.newaxis]
    for row in np.flatnonzero(counts.lengths == 0):
        warnings.warn(
            f"Document {row} contains no tokens; its TF-IDF row is zero",
            DegenerateDocumentWarning,
            stacklevel=stacklevel,
        )

    tf = np.divide(counts.counts, lengths, out=np.zeros_like(counts.counts), where=lengths > 0)
    return TfidfMatrix(vocabulary=counts.vocabulary, idf=idf, matrix=tf * idf)


def build_vector(text: str, vocabulary: Sequence[str], idf: np.ndarray) -> np.ndarray:
    """Weight ``text`` against an already fitted vocabulary; unseen terms are ignored."""

    vector = np.zeros(len(vocabulary), dtype=np.float64)
    terms = tokenize(text)
    if not terms:
        return vector

    index = {term: position for position, term in enumerate(vocabulary)}
    total = len(terms)
    for term, count in Counter(terms).items():
        position = index.get(term)
        if position is not None:
            vector[position] = (count / total) * idf[position]
    return vector


__all__ = [
    "TfidfMatrix",
    "term_frequency",
    "idf_vector",
    "inverse_document_frequency",
    "build_matrix",
    "build_vector",
]
