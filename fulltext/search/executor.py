"""
Full-text search execution.

Validates a search filter state against its index, applies equality
filters, scores each remaining document and ranks the matches.
"""

from typing import Any, Dict, Iterable, List, Mapping

from ..core import (
    get_logger,
    EmptyQueryError,
    FieldMismatchError,
    NoValidTermsError
)
from ..core.config_loader import ScoringConfig
from .models import EqFilter, ScoredDocument, SearchFilterState, SearchIndexConfig
from .query_parser import parse_search_query
from .scorer import calculate_relevance_score

logger = get_logger(__name__)


SCORE_KEY = "_score"

_MISSING = object()


def _strict_equals(left: Any, right: Any) -> bool:
    """Equality that never treats booleans as the numbers 0 and 1."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def _passes_filter(document: Mapping[str, Any], eq_filter: EqFilter) -> bool:
    """Check one equality filter; an absent field never passes."""
    value = document.get(eq_filter.field, _MISSING)
    if value is _MISSING:
        return False
    return _strict_equals(value, eq_filter.value)


def execute_search(
    documents: Iterable[Mapping[str, Any]],
    search_state: SearchFilterState,
    index_config: SearchIndexConfig,
    scoring: ScoringConfig = None
) -> List[ScoredDocument]:
    """
    Execute a full-text search over a collection of documents.

    The query and field are validated before any document is visited.
    Documents whose search field is missing or not a string are skipped.

    Args:
        documents: The documents to search, each a field-name to value mapping.
        search_state: The search condition and equality filters.
        index_config: The search index configuration.
        scoring: Weights and thresholds; defaults when omitted.

    Returns:
        Matching documents with a positive score, best first. Documents
        with equal scores keep their input order.

    Raises:
        EmptyQueryError: If the query is missing or blank.
        FieldMismatchError: If the search field is not the index's.
        NoValidTermsError: If the query holds no terms and no phrases.
    """
    query = search_state.search_query
    if not query or not query.strip():
        logger.warning(f"Rejected empty query on index '{index_config.name}'")
        raise EmptyQueryError(query)

    search_field = search_state.search_field or index_config.search_field
    if search_field != index_config.search_field:
        logger.warning(
            f"Rejected search on field '{search_field}' of index '{index_config.name}'"
        )
        raise FieldMismatchError(search_field, index_config.search_field, query=query)

    parsed = parse_search_query(query)
    if parsed.is_empty:
        logger.warning(f"Rejected query without search terms: {query!r}")
        raise NoValidTermsError(query)

    results: List[ScoredDocument] = []
    scanned = 0

    for document in documents:
        scanned += 1

        if not all(_passes_filter(document, f) for f in search_state.eq_filters):
            continue

        text = document.get(search_field)
        if not isinstance(text, str):
            continue

        score = calculate_relevance_score(text, parsed.terms, parsed.phrases, scoring)

        if score > 0:
            results.append(ScoredDocument(document=document, score=score))

    # sorted() is stable, including with reverse=True
    results = sorted(results, key=lambda result: result.score, reverse=True)

    logger.debug(
        f"Search {query!r} on '{index_config.name}': "
        f"{len(results)} of {scanned} documents matched"
    )

    return results


def add_scores_to_documents(scored_documents: Iterable[ScoredDocument]) -> List[Dict[str, Any]]:
    """
    Merge each score into a copy of its document under the "_score" key.

    Args:
        scored_documents: Ranked search results.

    Returns:
        Shallow document copies in the same order.
    """
    return [
        {**result.document, SCORE_KEY: result.score}
        for result in scored_documents
    ]
