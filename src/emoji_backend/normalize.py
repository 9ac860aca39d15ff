from __future__ import annotations
import unicodedata


def clean_query(raw: object) -> str:
    """
    Boundary check for text coming from a host widget or request.

    Rules:
      * non-text input is rejected (TypeError), the engine only sees str
      * NFC-normalized so composed/decomposed input compares equal to corpus text
      * case and whitespace are kept; matching is case-sensitive
    """
    if not isinstance(raw, str):
        raise TypeError(f"query must be str, not {type(raw).__name__}")
    return unicodedata.normalize("NFC", raw)


def clean_description(raw: str) -> str:
    """Corpus keys may come snake_cased ("red_apple"); show them with spaces."""
    text = unicodedata.normalize("NFC", raw.strip())
    return " ".join(text.replace("_", " ").split())


def is_boundary(text: str, i: int) -> bool:
    """True when text[i] starts a word: start of text, after a separator, or a camel hump."""
    if i == 0:
        return True
    prev, ch = text[i - 1], text[i]
    if not prev.isalnum():
        return True
    return prev.islower() and ch.isupper()
