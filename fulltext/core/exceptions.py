"""
Custom exception hierarchy for the full-text search engine.

Provides specific exception types for different failure modes:
configuration errors and the caller-input errors raised while
building or executing a search.
"""

from typing import Iterable


class FullTextSearchError(Exception):
    """Base exception for all full-text search engine errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(FullTextSearchError):
    """Raised when configuration is invalid or missing."""
    pass


class SearchError(FullTextSearchError):
    """Raised when a search cannot be built or executed."""

    def __init__(self, message: str, query: str = None, details: dict = None):
        """
        Initialize search error.

        Args:
            message: Error description.
            query: The problematic search query.
            details: Additional context.
        """
        super().__init__(message, details)
        self.query = query


class EmptyQueryError(SearchError):
    """Raised when the search query is missing or blank."""

    def __init__(self, query: str = None):
        super().__init__(
            "Empty search query is not allowed. Please provide a search term.",
            query=query
        )


class FieldMismatchError(SearchError):
    """Raised when a field is not the search field of the index."""

    def __init__(self, field: str, expected: str, query: str = None):
        """
        Initialize field mismatch error.

        Args:
            field: The field that was requested.
            expected: The search field declared by the index.
            query: The search query, if known.
        """
        super().__init__(
            f"Field '{field}' is not the search field for this index. "
            f"Expected '{expected}'.",
            query=query,
            details={"field": field, "expected": expected}
        )
        self.field = field
        self.expected = expected


class InvalidFilterFieldError(SearchError):
    """Raised when an equality filter targets an undeclared filter field."""

    def __init__(self, field: str, allowed: Iterable[str]):
        """
        Initialize invalid filter field error.

        Args:
            field: The field that was requested.
            allowed: Filter fields declared by the index.
        """
        allowed = tuple(allowed)
        super().__init__(
            f"Field '{field}' is not a filter field for this index. "
            f"Available filter fields: {', '.join(allowed)}",
            details={"field": field, "allowed": list(allowed)}
        )
        self.field = field
        self.allowed = allowed


class NoValidTermsError(SearchError):
    """Raised when a non-empty query yields no terms and no phrases."""

    def __init__(self, query: str = None):
        super().__init__(
            "Invalid search query. No valid search terms found.",
            query=query
        )


class UnknownSearchIndexError(SearchError):
    """Raised when a search index name is not registered."""

    def __init__(self, index_name: str, available: Iterable[str] = ()):
        available = list(available)
        super().__init__(
            f"Search index '{index_name}' is not defined.",
            details={"index": index_name, "available": available}
        )
        self.index_name = index_name


if __name__ == "__main__":
    try:
        raise ConfigurationError("Config file not found", {"path": "/config/config.json"})
    except FullTextSearchError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise InvalidFilterFieldError("author", ["category", "status"])
    except SearchError as e:
        print(f"Rejected filter: {e.message}")
