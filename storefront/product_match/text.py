"""
Text normalization and tokenization for Arabic/English product text.

normalize() folds letter variants that shoppers type interchangeably so that
"أحمد" and "احمد" compare equal, and turns punctuation into spaces.
"""

import re

# Alef with hamza above/below and alef with madda -> bare alef,
# teh marbuta -> heh, alef maksura -> yeh.
_FOLD_MAP = {
    "أ": "ا",
    "إ": "ا",
    "آ": "ا",
    "ة": "ه",
    "ى": "ي",
}

# Harakat/tanwin/shadda/sukun (U+064B-U+065F), tatweel, standalone hamza
_STRIP_CHARS = [chr(c) for c in range(0x064B, 0x0660)] + ["ـ", "ء"]

_TRANSLATION = str.maketrans({**_FOLD_MAP, **{c: None for c in _STRIP_CHARS}})

# Anything that is not an ASCII word char, whitespace or Arabic block
_NOISE_RE = re.compile(r"[^A-Za-z0-9_\s\u0600-\u06FF]")
_SPLIT_RE = re.compile(r"\s+")

MIN_TOKEN_LENGTH = 2


def normalize(text: str) -> str:
    """
    Fold text into its canonical comparison form.

    Empty or None input returns "". Surrounding whitespace is trimmed after
    punctuation is blanked, so normalize(normalize(x)) == normalize(x).
    """
    if not text:
        return ""
    folded = text.lower().translate(_TRANSLATION)
    return _NOISE_RE.sub(" ", folded).strip()


def tokenize(text: str) -> list[str]:
    """Split normalized text into tokens of at least two characters, in order."""
    normalized = normalize(text)
    return [t for t in _SPLIT_RE.split(normalized) if len(t) >= MIN_TOKEN_LENGTH]
