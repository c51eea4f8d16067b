"""
Data models for search functionality.

Defines the index declaration, the accumulated search filter state,
parsed queries and ranked results used throughout the search module.
"""

from dataclasses import dataclass, field, replace
from typing import Any, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SearchIndexConfig:
    """
    Declaration of a search index.

    Attributes:
        name: Name of the search index.
        search_field: The single text field eligible for full-text search.
        filter_fields: Fields eligible for equality filtering, in declared
            order and without duplicates.
    """
    name: str
    search_field: str
    filter_fields: Tuple[str, ...] = ()

    def __post_init__(self):
        if isinstance(self.filter_fields, str):
            raise TypeError(
                f"filter_fields of index '{self.name}' must be a sequence of field names, "
                f"not the string {self.filter_fields!r}"
            )
        object.__setattr__(self, "filter_fields", tuple(dict.fromkeys(self.filter_fields)))

    def is_filter_field(self, field_name: str) -> bool:
        """Return True if equality filters may target this field."""
        return field_name in self.filter_fields


@dataclass(frozen=True)
class EqFilter:
    """A single equality constraint on a filter field."""
    field: str
    value: Any


@dataclass(frozen=True)
class SearchFilterState:
    """
    Search conditions accumulated before execution.

    Updates return new instances, so a state can be shared freely.

    Attributes:
        search_field: The field to search, or None to use the index default.
        search_query: The raw search query string.
        eq_filters: Equality filters, applied in order.
    """
    search_field: Optional[str] = None
    search_query: Optional[str] = None
    eq_filters: Tuple[EqFilter, ...] = ()

    def with_search(self, field_name: str, query: str) -> "SearchFilterState":
        """Return a copy with the search field and query set."""
        return replace(self, search_field=field_name, search_query=query)

    def with_eq(self, field_name: str, value: Any) -> "SearchFilterState":
        """Return a copy with one more equality filter appended."""
        return replace(self, eq_filters=self.eq_filters + (EqFilter(field_name, value),))


@dataclass
class ParsedQuery:
    """
    A raw query split into bare terms and quoted phrases.

    Attributes:
        terms: Lowercase tokens outside of quotes, in query order.
        phrases: Lowercase quoted phrases without quotes, in query order.
    """
    terms: List[str] = field(default_factory=list)
    phrases: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when the query produced neither terms nor phrases."""
        return not self.terms and not self.phrases


@dataclass
class ScoredDocument:
    """
    A document that matched a search, with its relevance score.

    Attributes:
        document: The original document mapping.
        score: Relevance score, always strictly positive.
    """
    document: Mapping[str, Any]
    score: float


@dataclass
class SearchStats:
    """
    Statistics about a search execution.

    Attributes:
        query: The original query text.
        index_name: The search index that was queried.
        total_results: Total matching documents before pagination.
        execution_time_ms: Search execution time in milliseconds.
        page: Current page number.
        total_pages: Total number of pages.
    """
    query: str
    index_name: str
    total_results: int
    execution_time_ms: float
    page: int = 1
    total_pages: int = 1
