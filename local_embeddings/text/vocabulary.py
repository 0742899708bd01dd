"""Vocabulary construction over a corpus of raw documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer

from local_embeddings.errors import EmptyCorpusError
from local_embeddings.text.tokenizer import tokenize


@dataclass(frozen=True)
class TermCounts:
    """Raw term counts for a corpus, columns aligned to ``vocabulary``."""

    vocabulary: Tuple[str, ...]
    counts: np.ndarray
    lengths: np.ndarray

    @property
    def document_frequencies(self) -> np.ndarray:
        return (self.counts > 0).sum(axis=0)


def _pretokenized(tokens: List[str]) -> List[str]:
    return tokens


def count_terms(corpus: Sequence[str], max_terms: Optional[int] = None) -> TermCounts:
    """Tokenize ``corpus`` and count every term per document.

    The vocabulary is sorted alphabetically. With ``max_terms`` only the most
    frequent terms across the corpus are kept; ties go to the term that sorts
    first.
    """

    if len(corpus) == 0:
        raise EmptyCorpusError("Cannot build a vocabulary from an empty corpus")

    tokenized = [tokenize(doc) for doc in corpus]
    lengths = np.array([len(tokens) for tokens in tokenized], dtype=np.int64)
    if not lengths.any():
        return TermCounts(vocabulary=(), counts=np.zeros((len(corpus), 0)), lengths=lengths)

    vectorizer = CountVectorizer(analyzer=_pretokenized)
    counts = vectorizer.fit_transform(tokenized).toarray().astype(np.float64)
    vocabulary = vectorizer.get_feature_names_out().tolist()

    if max_terms is not None and len(vocabulary) > max_terms:
        totals = counts.sum(axis=0)
        keep = np.sort(np.argsort(-totals, kind="stable")[:max_terms])
        counts = counts[:, keep]
        vocabulary = [vocabulary[i] for i in keep]

    return TermCounts(vocabulary=tuple(vocabulary), counts=counts, lengths=lengths)


def build_vocabulary(corpus: Sequence[str], max_terms: Optional[int] = None) -> Tuple[str, ...]:
    """Return the ordered set of distinct terms observed in ``corpus``."""

    return count_terms(corpus, max_terms=max_terms).vocabulary


__all__ = ["TermCounts", "count_terms", "build_vocabulary"]
