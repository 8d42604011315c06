from __future__ import annotations

import re
import unicodedata

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s.+#-]")
_WHITESPACE = re.compile(r"\s+")


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def normalize_text(text: str) -> str:
    """Lowercase ``text`` and reduce it to ``[a-z0-9 .+#-]`` with single spaces.

    ``+ # . -`` survive so tokens such as ``c++``, ``c#`` and ``node.js`` stay intact.
    """
    if not text:
        return ""
    lowered = _fold_accents(text).lower()
    cleaned = _DISALLOWED_CHARS.sub(" ", lowered)
    return _WHITESPACE.sub(" ", cleaned)
