import re

BANNED_WORDS = ("kerfuffle", "sharbert", "fornax", "Fornax")
REPLACEMENT = "****"

_pattern = re.compile("|".join(re.escape(word) for word in BANNED_WORDS))


def clean_body(body: str) -> str:
    """Mask banned words (case-sensitive substring match)."""
    return _pattern.sub(REPLACEMENT, body)
