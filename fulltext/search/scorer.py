"""
Relevance scoring for full-text search.

Combines term frequency, first-occurrence position, multi-term coverage
and phrase matches into a single score per document.
"""

import math
from typing import Any, Sequence

from ..core.config_loader import ScoringConfig
from ..utils.text_utils import tokenize
from .fuzzy import fuzzy_match


_DEFAULT_SCORING = ScoringConfig()


def calculate_relevance_score(
    document_text: Any,
    terms: Sequence[str],
    phrases: Sequence[str],
    scoring: ScoringConfig = None
) -> float:
    """
    Calculate the relevance score of a document for a parsed query.

    Scoring factors:
    - Term frequency: every token adds to a term's count (exact 1.0,
      prefix 0.7, fuzzy by match quality), dampened with 1 + ln(count)
    - Position: up to 0.5 extra when the term first appears early
    - Coverage: 0.3 scaled by the fraction of terms matched, when more
      than one term was given and more than one matched
    - Phrases: a flat 2.0 per phrase contained in the text

    Args:
        document_text: Text of the document's search field.
        terms: Query terms.
        phrases: Lowercase query phrases.
        scoring: Weights and thresholds; defaults when omitted.

    Returns:
        Non-negative score, 0.0 when nothing matched.
    """
    if not document_text or not isinstance(document_text, str):
        return 0.0

    doc_tokens = tokenize(document_text)
    if not doc_tokens:
        return 0.0

    scoring = scoring or _DEFAULT_SCORING
    doc_lower = document_text.lower()

    total_score = 0.0
    matched_terms = 0

    for term in terms:
        term_lower = term.lower()
        term_count = 0.0
        first_position = -1

        for position, token in enumerate(doc_tokens):
            if token == term_lower:
                contribution = scoring.exact_weight
            elif token.startswith(term_lower):
                contribution = scoring.prefix_weight
            else:
                match = fuzzy_match(term_lower, [token], scoring)
                contribution = match.best_score if match.matched else 0.0

            if contribution > 0:
                term_count += contribution
                if first_position == -1:
                    first_position = position

        if term_count > 0:
            matched_terms += 1

            tf_score = max(0.0, 1 + math.log(term_count))
            position_bonus = scoring.position_bonus * (1 - first_position / len(doc_tokens))

            total_score += tf_score + position_bonus

    if len(terms) > 1 and matched_terms > 1:
        total_score += scoring.multi_term_bonus * (matched_terms / len(terms))

    for phrase in phrases:
        if phrase in doc_lower:
            total_score += scoring.phrase_bonus

    return total_score


if __name__ == "__main__":
    print(calculate_relevance_score("the cat sat", ["cat"], []))
    print(calculate_relevance_score("a catalog of cats", ["cat"], []))
    print(calculate_relevance_score("the quick brown fox", [], ["quick brown"]))
    print(calculate_relevance_score("the quick brown fox", ["quick", "brown"], []))
