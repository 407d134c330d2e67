"""Output normalizer: canonicalizes rendered and expected text before comparison."""

from __future__ import annotations

import re

# Zero-width space, non-joiner, joiner and the byte order mark.
_ZERO_WIDTH_RE = re.compile("[\u200b-\u200d\ufeff]")
_WHITESPACE_RE = re.compile(r"\s+")
# Trailing periods, including any whitespace left between them ("a . ." -> "a").
_TRAILING_PERIODS_RE = re.compile(r"[.\s]+$")


def normalize(text: str | None) -> str:
    """Return ``text`` without invisible marks, whitespace variance or trailing periods.

    Total: ``None`` or empty input yields ``""``.
    """
    if not text:
        return ""
    cleaned = _ZERO_WIDTH_RE.sub("", text)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    return _TRAILING_PERIODS_RE.sub("", cleaned)
