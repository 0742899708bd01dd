"""Configuration models and loaders for the local embedding backends."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator

from local_embeddings.errors import UnsupportedMethodError

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config/settings.yaml")

SPECTRAL_METHODS = ("svd", "pca", "laplacian")
IDF_SMOOTHING_POLICIES = ("smoothed", "unsmoothed")


class TfidfEmbeddingConfig(BaseModel):
    """Settings for the plain TF-IDF embedder.

    ``dimension`` caps the vocabulary to the most frequent terms; when unset
    every observed term becomes a dimension.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["tfidf"] = "tfidf"
    dimension: Optional[PositiveInt] = None
    idf_smoothing: Literal["smoothed", "unsmoothed"] = "smoothed"

    @field_validator("idf_smoothing")
    @classmethod
    def warn_unsmoothed(cls, value: str) -> str:
        if value == "unsmoothed":
            logger.warning(
                "idf_smoothing=unsmoothed: log(N / (1 + df)) is zero or negative "
                "for terms found in most documents"
            )
        return value


class SpectralEmbeddingConfig(TfidfEmbeddingConfig):
    """Settings for the spectral embedder.

    ``dimension`` is the requested output width; the fitted width is capped
    at the number of terms and documents. Defaults to ``min(128, terms)``.
    """

    type: Literal["spectral"] = "spectral"  # type: ignore[assignment]
    method: str = "svd"

    @field_validator("method")
    @classmethod
    def validate_method(cls, value: str) -> str:
        method = value.lower()
        if method not in SPECTRAL_METHODS:
            raise UnsupportedMethodError(
                f"Unsupported spectral method {value!r}; expected one of {', '.join(SPECTRAL_METHODS)}"
            )
        return method


EmbeddingConfig = Union[TfidfEmbeddingConfig, SpectralEmbeddingConfig]


def build_config(raw: Dict[str, Any]) -> EmbeddingConfig:
    """Validate a mapping into the config model selected by its ``type`` key."""

    data = dict(raw)
    kind = data.setdefault("type", "tfidf")
    if kind == "tfidf":
        return TfidfEmbeddingConfig.model_validate(data)
    if kind == "spectral":
        return SpectralEmbeddingConfig.model_validate(data)
    raise ValueError(f"Unknown embedding type: {kind!r}")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_config(path: Path) -> EmbeddingConfig:
    """Read the ``embedding`` section of a YAML settings file."""

    raw = _load_yaml(Path(path))
    section = raw.get("embedding") or {}
    if not isinstance(section, dict):
        raise ValueError(f"'embedding' section in {path} must be a mapping")
    return build_config(section)


@lru_cache(maxsize=1)
def get_config(path: Optional[Path] = None) -> EmbeddingConfig:
    """Load and cache the embedding configuration."""

    return load_config(path or CONFIG_PATH)


def config_from_env() -> EmbeddingConfig:
    """Build a configuration from ``EMBEDDING_*`` environment variables (.env aware)."""

    load_dotenv()
    raw: Dict[str, Any] = {"type": os.getenv("EMBEDDING_TYPE", "tfidf").lower()}
    method = os.getenv("EMBEDDING_METHOD")
    if method and raw["type"] == "spectral":
        raw["method"] = method
    dimension = os.getenv("EMBEDDING_DIMENSION")
    if dimension:
        raw["dimension"] = int(dimension)
    smoothing = os.getenv("EMBEDDING_IDF_SMOOTHING")
    if smoothing:
        raw["idf_smoothing"] = smoothing.lower()
    return build_config(raw)


__all__ = [
    "CONFIG_PATH",
    "SPECTRAL_METHODS",
    "IDF_SMOOTHING_POLICIES",
    "TfidfEmbeddingConfig",
    "SpectralEmbeddingConfig",
    "EmbeddingConfig",
    "build_config",
    "load_config",
    "get_config",
    "config_from_env",
]
