"""
Fuzzy matching for typo-tolerant search.

Provides Levenshtein edit distance and the matcher that decides whether a
query term approximately matches any of a document's tokens.

Matching tiers, best first:
- Exact token match (score 1.0, stops the scan)
- Prefix match, scaled by how much of the token the term covers
- Edit-distance match within a length-dependent budget
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..core.config_loader import ScoringConfig


_DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True)
class FuzzyMatch:
    """Outcome of matching one term against a set of tokens."""
    matched: bool
    best_score: float


def edit_distance(a: str, b: str) -> int:
    """
    Calculate the Levenshtein (edit) distance between two strings.

    Fills a (len(b) + 1) x (len(a) + 1) table with unit costs for
    substitution, insertion and deletion. Comparison is case-sensitive.

    Each row is computed in bulk: substitutions and deletions come from the
    previous row, and insertions are resolved with a running minimum of
    ``row[j] - j``.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character edits turning a into b.

    Examples:
        >>> edit_distance("kitten", "sitting")
        3
        >>> edit_distance("hello", "hallo")
        1
        >>> edit_distance("", "abc")
        3
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    columns = np.arange(len(a) + 1)
    a_chars = np.array(list(a))

    matrix = np.zeros((len(b) + 1, len(a) + 1), dtype=np.int64)
    matrix[0] = columns

    for i, char in enumerate(b, start=1):
        previous = matrix[i - 1]
        cost = (a_chars != char).astype(np.int64)

        candidates = np.empty(len(a) + 1, dtype=np.int64)
        candidates[0] = i
        candidates[1:] = np.minimum(previous[1:] + 1, previous[:-1] + cost)

        matrix[i] = np.minimum.accumulate(candidates - columns) + columns

    return int(matrix[len(b), len(a)])


def max_edit_distance(term_length: int, scoring: ScoringConfig = None) -> int:
    """
    Get the maximum allowed edit distance for a term based on its length.

    Short words only match exactly, so that terms like "to" or "at" do not
    fuzzy-match unrelated short tokens.

    Args:
        term_length: Length of the search term.
        scoring: Scoring settings holding the length thresholds.

    Returns:
        0 below four characters, 1 up to six characters, 2 beyond.
    """
    scoring = scoring or _DEFAULT_SCORING

    if term_length < scoring.exact_only_below:
        return 0
    if term_length <= scoring.one_edit_max_length:
        return 1
    return 2


def fuzzy_match(term: str, tokens: Iterable[str], scoring: ScoringConfig = None) -> FuzzyMatch:
    """
    Check if a term approximately matches any document token.

    Prefix and edit-distance candidates are both evaluated for every token
    and the best candidate score is kept. An exact token match returns
    immediately with the exact score.

    Args:
        term: The query term. Lowercased before comparison.
        tokens: Lowercase document tokens.
        scoring: Weights and thresholds; defaults when omitted.

    Returns:
        FuzzyMatch with matched=True when any candidate scored above zero.
    """
    scoring = scoring or _DEFAULT_SCORING
    term = term.lower()
    max_distance = max_edit_distance(len(term), scoring)

    best_score = 0.0

    for token in tokens:
        if token == term:
            return FuzzyMatch(matched=True, best_score=scoring.exact_weight)

        if token.startswith(term):
            prefix_score = len(term) / len(token)
            best_score = max(best_score, prefix_score * scoring.fuzzy_prefix_multiplier)

        if max_distance > 0:
            distance = edit_distance(term, token)
            if distance <= max_distance:
                similarity = 1 - distance / max(len(term), len(token))
                best_score = max(best_score, similarity * scoring.fuzzy_edit_multiplier)

    return FuzzyMatch(matched=best_score > 0, best_score=best_score)


if __name__ == "__main__":
    for a, b in [("kitten", "sitting"), ("hello", "hell"), ("", "abc"), ("flaw", "lawn")]:
        print(f"edit_distance({a!r}, {b!r}) = {edit_distance(a, b)}")

    for tokens in (["hello"], ["hell"], ["helloworld"], ["xyz"]):
        print(f"fuzzy_match('hello', {tokens}) = {fuzzy_match('hello', tokens)}")
