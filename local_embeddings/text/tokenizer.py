"""Word tokenizer shared by vocabulary construction and vectorisation."""

from __future__ import annotations

import re
from typing import List, Optional

_SPLIT_RE = re.compile(r"\W+")


def tokenize(text: Optional[str]) -> List[str]:
    """Split ``text`` on runs of non-word characters and lowercase each token.

    Empty tokens are dropped, so blank or punctuation-only text yields ``[]``.
    """

    if not text:
        return []
    return [token.lower() for token in _SPLIT_RE.split(text) if token]


__all__ = ["tokenize"]
