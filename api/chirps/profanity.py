"""
Profanity masking for chirps.

Matching is per token, where tokens come from splitting on a single space
character. Runs of spaces yield empty tokens and tabs stay inside tokens, so
the output keeps the input's exact spacing.
"""

from __future__ import annotations

BLOCKED_WORDS: frozenset[str] = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"

_FOLDED_BLOCKED_WORDS = frozenset(word.casefold() for word in BLOCKED_WORDS)


def clean_chirp(text: str, *, blocked: frozenset[str] = BLOCKED_WORDS) -> str:
    if blocked is BLOCKED_WORDS:
        folded_blocked = _FOLDED_BLOCKED_WORDS
    else:
        folded_blocked = frozenset(word.casefold() for word in blocked)

    words = text.split(" ")
    return " ".join(MASK if word.casefold() in folded_blocked else word for word in words)
