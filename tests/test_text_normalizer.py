"""Unit tests for the shared text normalization."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from services.text_normalizer import normalize, tokenize


def test_arabic_words_are_kept():
    """Test that plain Arabic text tokenizes on whitespace."""
    assert tokenize("ا ا ب") == ["ا", "ا", "ب"]
    assert tokenize("كتاب جديد") == ["كتاب", "جديد"]


def test_punctuation_and_digits_removed():
    """Test that digits, punctuation and symbols are discarded."""
    assert tokenize("1234 !!!") == []
    assert tokenize("٣٤٥ ؟ ، ؛") == []


def test_latin_text_removed():
    """Test that non-Arabic letters do not survive normalization."""
    assert tokenize("hello كتاب world") == ["كتاب"]


def test_punctuation_separates_words():
    """Test that punctuation between words acts as a separator."""
    assert tokenize("كتاب،قلم") == ["كتاب", "قلم"]


def test_diacritics_and_tatweel_stripped():
    """Test that vowel marks and tatweel do not split or change words."""
    assert tokenize("كِتَابٌ") == ["كتاب"]
    assert tokenize("كـتـاب") == ["كتاب"]


def test_whitespace_collapsed():
    """Test that runs of whitespace, tabs and newlines collapse."""
    assert tokenize("  ا\n\n\tب   ") == ["ا", "ب"]


def test_empty_and_none():
    """Test that empty input normalizes to no tokens."""
    assert normalize(None) == ""
    assert normalize("") == ""
    assert tokenize(None) == []
    assert tokenize("   ") == []
