"""Tests for index normalization."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from suffixtext.normalize import is_index_char, normalize


def test_normalize_example():
    assert normalize("Hello, World! 123") == "helloworld123"


def test_normalize_empty():
    assert normalize("") == ""
    assert normalize(None) == ""


def test_normalize_drops_non_ascii_letters():
    assert normalize("Caf\u00e9 na\u00efve") == "cafnave"
    # Kelvin sign and dotted capital I have ASCII lower-case forms in full Unicode casing
    assert normalize("\u212a\u0130x") == "x"
    assert normalize("\U0001F600ab") == "ab"


def test_normalize_keeps_order():
    assert normalize("Z-9 y_8 X.7") == "z9y8x7"


def test_is_index_char():
    assert is_index_char("a")
    assert is_index_char("0")
    assert not is_index_char("A")
    assert not is_index_char("-")
    assert not is_index_char("ab")
    assert not is_index_char("")


def test_index_chars_fit_in_a_byte():
    for ch in normalize("abcdefghijklmnopqrstuvwxyz0123456789"):
        assert is_index_char(ch)
        assert len(ch.encode("latin-1")) == 1
