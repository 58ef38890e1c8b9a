"""Text normalization shared by corpus building and query scoring."""
import re
from typing import List, Optional

# Harakat, superscript alef, Quranic marks and tatweel are dropped in place
_re_diacritics = re.compile(r"[\u0610-\u061A\u0640\u064B-\u065F\u0670\u06D6-\u06ED]")

# Anything that is neither an Arabic letter nor whitespace separates words
_re_non_arabic = re.compile(
    r"[^\u0621-\u063A\u0641-\u064A\u066E-\u066F\u0671-\u06D3\u06D5"
    r"\u06EE-\u06EF\u06FA-\u06FC\u06FF\s]+"
)


def normalize(text: Optional[str]) -> str:
    """
    Keep only Arabic letters and whitespace.

    Digits (Arabic-Indic included), punctuation, Latin letters and other
    symbols are replaced by a space so neighbouring words stay apart.
    """
    if not text:
        return ""
    text = _re_diacritics.sub("", text)
    return _re_non_arabic.sub(" ", text)


def tokenize(text: Optional[str]) -> List[str]:
    """Normalize text and split it on whitespace. May return an empty list."""
    return normalize(text).split()
