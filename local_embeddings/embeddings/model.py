"""Immutable fitted state shared by the local embedders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from local_embeddings.spectral.projector import project
from local_embeddings.text.weighting import build_vector


def _frozen(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=np.float64, copy=True)
    array.flags.writeable = False
    return array


@dataclass(frozen=True)
class FittedModel:
    """Vocabulary, idf weights and optional projection basis from one ``fit`` call.

    Instances are never mutated; refitting produces a new model.
    """

    vocabulary: Tuple[str, ...]
    idf: np.ndarray
    basis: Optional[np.ndarray] = None
    method: Optional[str] = None

    def __post_init__(self) -> None:
        if len(self.idf) != len(self.vocabulary):
            raise ValueError(
                f"idf length {len(self.idf)} does not match vocabulary size {len(self.vocabulary)}"
            )
        object.__setattr__(self, "vocabulary", tuple(self.vocabulary))
        object.__setattr__(self, "idf", _frozen(self.idf))
        if self.basis is not None:
            if self.basis.shape[0] != len(self.vocabulary):
                raise ValueError("basis rows must match vocabulary size")
            object.__setattr__(self, "basis", _frozen(self.basis))

    @property
    def dimension(self) -> int:
        if self.basis is not None:
            return int(self.basis.shape[1])
        return len(self.vocabulary)

    def vectorize(self, text: str) -> np.ndarray:
        return build_vector(text, self.vocabulary, self.idf)

    def transform(self, text: str) -> np.ndarray:
        """TF-IDF vector of ``text``, projected onto the basis when there is one."""

        vector = self.vectorize(text)
        if self.basis is None:
            return vector
        return project(vector, self.basis)


__all__ = ["FittedModel"]
