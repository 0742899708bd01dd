import math

import pytest

from local_embeddings.config import SpectralEmbeddingConfig, TfidfEmbeddingConfig
from local_embeddings.embeddings import EmbeddingBackend, LocalEmbedder, TfidfEmbedder
from local_embeddings.errors import DegenerateDocumentWarning, EmptyCorpusError, NotFittedError

CORPUS = ["the cat sat", "the dog ran"]


def test_tfidf_embedder_returns_vectors() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)

    embeddings = embedder.embed_batch(["the cat sat", "a dog", "???"])

    assert len(embeddings) == 3
    assert all(len(vec) == embedder.get_dimension() == 5 for vec in embeddings)


def test_embed_weights_terms_by_tf_and_smoothed_idf() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)

    weights = dict(zip(embedder.vocabulary, embedder.embed("the cat sat")))

    assert set(weights) == {"the", "cat", "sat", "dog", "ran"}
    assert weights["the"] == pytest.approx(1 / 3)
    assert weights["cat"] == pytest.approx((math.log(3 / 2) + 1) / 3)
    assert weights["sat"] == pytest.approx((math.log(3 / 2) + 1) / 3)
    assert weights["dog"] == 0.0
    assert weights["ran"] == 0.0


def test_unfitted_embedder_reports_empty_state() -> None:
    embedder = TfidfEmbedder()

    assert embedder.get_dimension() == 0
    assert not embedder.is_healthy()
    assert not embedder.is_fitted
    assert embedder.vocabulary == ()
    with pytest.raises(NotFittedError):
        embedder.embed("the cat")
    with pytest.raises(NotFittedError):
        embedder.embed_batch(["the cat"])
    assert embedder.embed_batch([]) == []


def test_repeated_embedding_is_identical() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)

    assert embedder.embed("the dog sat") == embedder.embed("the dog sat")


def test_unseen_terms_embed_to_zero_vector() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)

    assert embedder.embed("zebra giraffe") == [0.0] * 5


def test_refitting_same_corpus_gives_same_vocabulary() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)
    first = embedder.vocabulary
    embedder.fit(list(CORPUS))

    assert embedder.vocabulary == first


def test_configured_dimension_caps_vocabulary() -> None:
    embedder = TfidfEmbedder(TfidfEmbeddingConfig(dimension=2))
    embedder.fit(["apple apple pear", "apple plum", "pear"])

    assert embedder.vocabulary == ("apple", "pear")
    assert embedder.get_dimension() == 2
    assert len(embedder.embed("plum apple")) == 2


def test_embed_batch_does_not_refit() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)

    vectors = embedder.embed_batch(["bright red fox", "lazy brown dog"])

    assert embedder.vocabulary == ("cat", "dog", "ran", "sat", "the")
    assert vectors[0] == [0.0] * 5


def test_fit_embed_batch_learns_from_the_batch() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)

    vectors = embedder.fit_embed_batch(["bright red fox", "lazy brown dog"])

    assert embedder.vocabulary == ("bright", "brown", "dog", "fox", "lazy", "red")
    assert len(vectors) == 2
    assert all(len(vec) == 6 for vec in vectors)


def test_failed_fit_keeps_previous_model() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)
    before = embedder.embed("the cat")

    with pytest.raises(EmptyCorpusError):
        embedder.fit([])

    assert embedder.is_healthy()
    assert embedder.embed("the cat") == before


def test_fit_rejects_single_string_corpus() -> None:
    with pytest.raises(TypeError):
        TfidfEmbedder().fit("the cat sat")


def test_disconnect_resets_and_is_idempotent() -> None:
    embedder = TfidfEmbedder()
    embedder.fit(CORPUS)

    embedder.disconnect()
    embedder.disconnect()

    assert embedder.get_dimension() == 0
    assert not embedder.is_healthy()
    with pytest.raises(NotFittedError):
        embedder.embed("the cat")


def test_corpus_without_tokens_fits_but_is_unhealthy() -> None:
    embedder = TfidfEmbedder()

    with pytest.warns(DegenerateDocumentWarning):
        embedder.fit(["", "..."])

    assert embedder.is_fitted
    assert embedder.get_dimension() == 0
    assert not embedder.is_healthy()
    assert embedder.embed("anything") == []


def test_get_config_returns_construction_config() -> None:
    config = TfidfEmbeddingConfig(idf_smoothing="unsmoothed")
    embedder = TfidfEmbedder(config)

    assert embedder.get_config() is config


def test_unsmoothed_policy_flows_into_weights() -> None:
    embedder = TfidfEmbedder(TfidfEmbeddingConfig(idf_smoothing="unsmoothed"))
    embedder.fit(["a b", "a c", "d"])

    weights = dict(zip(embedder.vocabulary, embedder.embed("a")))

    assert weights["a"] == pytest.approx(0.0)


def test_requires_tfidf_config() -> None:
    with pytest.raises(TypeError):
        TfidfEmbedder(SpectralEmbeddingConfig(method="pca", dimension=2))


def test_empty_document_warning_points_at_fit_caller() -> None:
    embedder = TfidfEmbedder()

    with pytest.warns(DegenerateDocumentWarning) as record:
        embedder.fit(["the cat", "!!!"])

    assert record[0].filename == __file__


def test_satisfies_backend_contract() -> None:
    assert isinstance(TfidfEmbedder(), EmbeddingBackend)


def test_local_embedder_cannot_be_instantiated_directly() -> None:
    with pytest.raises(TypeError):
        LocalEmbedder(TfidfEmbeddingConfig())
