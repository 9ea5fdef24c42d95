"""
Edit distance for typo-tolerant token matching.

Plain Levenshtein: insertion, deletion and substitution each cost 1.
Adjacent transpositions count as two edits (no Damerau variant here).
"""

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """Number of single-character edits turning a into b, counted on code points."""
    return Levenshtein.distance(a or "", b or "")
