"""Edit-distance scoring for matching queries against text fragments."""

from rapidfuzz.distance import Levenshtein


def normalize(text: str, case_sensitive: bool = False) -> str:
    """Fold case unless the comparison is case sensitive."""
    if not case_sensitive:
        return text.lower()
    return text


def distance(a: str, b: str) -> int:
    """
    Compute the Levenshtein edit distance between two strings.

    Args:
        a: The source string
        b: The target string

    Returns:
        Minimum number of single-character insertions, deletions or
        substitutions turning a into b, counted in code points
    """
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Score how far apart two strings are.

    Args:
        a: The first string (usually the normalized query)
        b: The second string (usually a normalized fragment)

    Returns:
        0.0 for identical strings, up to 1.0 when every character differs
        relative to the longer string
    """
    # Exact match, also covers two empty strings
    if a == b:
        return 0.0
    return distance(a, b) / max(len(a), len(b))
