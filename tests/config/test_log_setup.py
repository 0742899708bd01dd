import logging

import pytest

from local_embeddings.log_setup import LOG_FORMAT, configure_logging


def test_configure_logging_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging()
    configure_logging(debug=True)

    assert calls == [
        {"level": logging.INFO, "format": LOG_FORMAT},
        {"level": logging.DEBUG, "format": LOG_FORMAT},
    ]
