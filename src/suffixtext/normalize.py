"""Index normalization: lower-case ASCII letters and digits only."""
import regex

# Anything outside basic Latin letters and digits is dropped, so non-ASCII
# letters never reach str.lower() and cannot fold into ASCII.
_NON_INDEX_CHARS = regex.compile(r"[^A-Za-z0-9]+")
_INDEX_CHAR = regex.compile(r"[a-z0-9]")


def normalize(text: str | None) -> str:
    """Return text lower-cased with every non-alphanumeric character removed.

    "Hello, World! 123" -> "helloworld123". Lossy and one-way.
    """
    if not text:
        return ""
    return _NON_INDEX_CHARS.sub("", text).lower()


def is_index_char(ch: str) -> bool:
    """True if ch is in the normalized alphabet (a-z, 0-9)."""
    return len(ch) == 1 and _INDEX_CHAR.fullmatch(ch) is not None
