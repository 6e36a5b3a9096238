"""Code-point-safe boundary utilities.

Text that passed through UTF-16 may hold a supplementary character as two
surrogate code points instead of one. Everything here treats a valid
high/low pair as a single logical character and never splits it.
"""

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
MAX_CODE_POINT = 0x10FFFF


class InvalidArgumentError(ValueError):
    """Raised when an operation that needs a logical character gets none."""


def is_high_surrogate(ch: str) -> bool:
    """True if ch is the leading half of a UTF-16 surrogate pair."""
    return HIGH_SURROGATE_START <= ord(ch) <= HIGH_SURROGATE_END


def is_low_surrogate(ch: str) -> bool:
    """True if ch is the trailing half of a UTF-16 surrogate pair."""
    return LOW_SURROGATE_START <= ord(ch) <= LOW_SURROGATE_END


def _is_pair(high: str, low: str) -> bool:
    return is_high_surrogate(high) and is_low_surrogate(low)


def _combine(high: str, low: str) -> int:
    return 0x10000 + ((ord(high) - HIGH_SURROGATE_START) << 10) + (ord(low) - LOW_SURROGATE_START)


def _last_width(text: str) -> int:
    # Number of code points taken by the final logical character.
    if len(text) >= 2 and _is_pair(text[-2], text[-1]):
        return 2
    return 1


def _first_width(text: str) -> int:
    if len(text) >= 2 and _is_pair(text[0], text[1]):
        return 2
    return 1


def last_scalar_value(text: str | None) -> int:
    """Return the code point of the final logical character of text.

    A trailing surrogate pair is combined into one supplementary code point.
    An unpaired surrogate is returned as is. Raises InvalidArgumentError on
    empty or None input.
    """
    if not text:
        raise InvalidArgumentError("last_scalar_value needs a non-empty string")
    if _last_width(text) == 2:
        return _combine(text[-2], text[-1])
    return ord(text[-1])


def first_scalar_value(text: str | None) -> int:
    """Return the code point of the first logical character of text."""
    if not text:
        raise InvalidArgumentError("first_scalar_value needs a non-empty string")
    if _first_width(text) == 2:
        return _combine(text[0], text[1])
    return ord(text[0])


def remove_last_scalar_value(text: str | None) -> str:
    """Return text without its final logical character.

    None, empty and single-character input (including a lone surrogate
    pair) all yield "".
    """
    if not text:
        return ""
    width = _last_width(text)
    if width >= len(text):
        return ""
    return text[:-width]


def remove_first_scalar_value(text: str | None) -> str:
    """Return text without its first logical character. Same rules as above."""
    if not text:
        return ""
    width = _first_width(text)
    if width >= len(text):
        return ""
    return text[width:]


def last_char(text: str | None) -> str:
    """Return the final logical character as it appears in text.

    A surrogate pair comes back as both code points, so
    remove_last_scalar_value(text) + last_char(text) == text.
    """
    if not text:
        raise InvalidArgumentError("last_char needs a non-empty string")
    return text[-_last_width(text):]


def first_char(text: str | None) -> str:
    """Return the first logical character as it appears in text."""
    if not text:
        raise InvalidArgumentError("first_char needs a non-empty string")
    return text[:_first_width(text)]


def char_offsets(text: str | None) -> list[int]:
    """Code point offsets where each logical character starts, plus len(text).

    text[offsets[i]:offsets[j]] is the run of logical characters i..j-1 in
    the input's own representation.
    """
    if not text:
        return [0]
    offsets = [0]
    i = 0
    n = len(text)
    while i < n:
        if i + 1 < n and _is_pair(text[i], text[i + 1]):
            i += 2
        else:
            i += 1
        offsets.append(i)
    return offsets


def scalar_values(text: str | None) -> list[int]:
    """Decode text into its ordered scalar values, merging surrogate pairs."""
    if not text:
        return []
    values = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if i + 1 < n and _is_pair(ch, text[i + 1]):
            values.append(_combine(ch, text[i + 1]))
            i += 2
        else:
            values.append(ord(ch))
            i += 1
    return values


def scalar_length(text: str | None) -> int:
    """Number of logical characters in text."""
    return len(scalar_values(text))


def encode_scalar_value(codepoint: int) -> str:
    """Canonical one-code-point string for a scalar value."""
    if not 0 <= codepoint <= MAX_CODE_POINT:
        raise InvalidArgumentError(f"code point out of range: {codepoint!r}")
    return chr(codepoint)


def from_scalar_values(values) -> str:
    """Re-encode a sequence of scalar values."""
    return "".join(encode_scalar_value(cp) for cp in values)
