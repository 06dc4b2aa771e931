"""API endpoint modules for v1."""

from wordbank.api.v1.endpoints import pronunciations, stage_words, words

__all__ = [
    "pronunciations",
    "stage_words",
    "words",
]
