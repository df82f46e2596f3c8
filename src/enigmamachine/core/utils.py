from __future__ import annotations

import re
from typing import Iterable


_AZ_ONLY_RE = re.compile(r"[^A-Z]+")
_SEPARATORS_RE = re.compile(r"[\s,;:]+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    if s is None:
        return ""
    s = f"{s}".upper()
    return _AZ_ONLY_RE.sub("", s)


def strip_separators(s: str) -> str:
    """Drop whitespace, commas, semicolons and colons (e.g. 'AB CD,EF' -> 'ABCDEF')."""
    return _SEPARATORS_RE.sub("", s or "")


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf


def group_text(text: str, size: int = 5, sep: str = " ") -> str:
    """Split text into fixed-size groups, the way messages were written out for transmission."""
    if size <= 0:
        return text
    return sep.join("".join(g) for g in chunked(text, size))
