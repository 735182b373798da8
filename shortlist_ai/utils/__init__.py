"""Utility exports."""

from .helpers import deduplicate_casefold, lowered_set, split_section_line
from .logger import get_logger

__all__ = [
    "get_logger",
    "deduplicate_casefold",
    "lowered_set",
    "split_section_line",
]
