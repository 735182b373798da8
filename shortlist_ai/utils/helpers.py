"""Helper utilities for the CV shortlisting engine."""

import re
from typing import Iterable, List


def deduplicate_casefold(values: Iterable[str]) -> List[str]:
    """Remove case-insensitive duplicates; the first casing seen is kept for display."""
    seen: set[str] = set()
    result: List[str] = []
    for v in values:
        key = (v or "").strip().lower()
        if key and key not in seen:
            seen.add(key)
            result.append(v.strip())
    return result


def lowered_set(values: Iterable[str]) -> set[str]:
    """Lower-cased, stripped set for case-insensitive membership checks."""
    return set((v or "").strip().lower() for v in values if (v or "").strip())


def split_section_line(line: str, min_len: int, max_len: int) -> List[str]:
    """Split a 'Skills: a, b; c | d' style value and keep tokens with min_len <= len <= max_len."""
    tokens = []
    for part in re.split(r"[,;|]", line or ""):
        trimmed = part.strip()
        if min_len <= len(trimmed) <= max_len:
            tokens.append(trimmed)
    return tokens
