"""
Search module for in-memory full-text search with relevance ranking.

Provides query parsing, fuzzy matching, relevance scoring, filter
building, index lookup and search execution.
"""

from .models import (
    SearchIndexConfig,
    SearchFilterState,
    EqFilter,
    ParsedQuery,
    ScoredDocument,
    SearchStats
)
from .query_parser import QueryParser, parse_search_query
from .fuzzy import FuzzyMatch, edit_distance, fuzzy_match, max_edit_distance
from .scorer import calculate_relevance_score
from .filter_builder import SearchFilterBuilder
from .executor import execute_search, add_scores_to_documents
from .registry import SearchIndexRegistry
from .engine import SearchEngine

__all__ = [
    "SearchIndexConfig",
    "SearchFilterState",
    "EqFilter",
    "ParsedQuery",
    "ScoredDocument",
    "SearchStats",
    "QueryParser",
    "parse_search_query",
    "FuzzyMatch",
    "edit_distance",
    "fuzzy_match",
    "max_edit_distance",
    "calculate_relevance_score",
    "SearchFilterBuilder",
    "execute_search",
    "add_scores_to_documents",
    "SearchIndexRegistry",
    "SearchEngine"
]
