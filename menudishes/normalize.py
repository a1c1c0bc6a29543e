"""Text normalization for diacritic- and case-insensitive search."""

from __future__ import annotations

import re
import unicodedata

_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9 ]+")


def normalize(text: str) -> str:
    """Return the canonical comparison form of `text`.

    Canonical decomposition (NFD) splits accented letters into a base letter plus
    combining marks; everything outside ASCII letters, digits and the plain space
    is then dropped without replacement, and the result is lower-cased.

    The folding does not depend on the host locale, so the result is stable and
    `normalize(normalize(s)) == normalize(s)`.
    """
    decomposed = unicodedata.normalize("NFD", text or "")
    return _DISALLOWED_RE.sub("", decomposed).lower()
