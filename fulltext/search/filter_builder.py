"""
Search filter builder.

Accumulates a full-text search condition and equality filters for one
search index, validating every field as soon as it is named.
"""

from typing import Any

from ..core import FieldMismatchError, InvalidFilterFieldError
from .models import SearchFilterState, SearchIndexConfig


class SearchFilterBuilder:
    """
    Builds a SearchFilterState for a given search index.

    Each call returns a new builder, leaving the original untouched:

        builder = SearchFilterBuilder(index)
        state = builder.search("body", "react hooks").eq("status", "published").state
    """

    def __init__(self, index_config: SearchIndexConfig, state: SearchFilterState = None):
        """
        Initialize the builder.

        Args:
            index_config: The index the conditions are validated against.
            state: Starting state, empty when omitted.
        """
        self.index_config = index_config
        self._state = state or SearchFilterState()

    @property
    def state(self) -> SearchFilterState:
        """The accumulated filter state."""
        return self._state

    def search(self, field: str, query: str) -> "SearchFilterBuilder":
        """
        Add the full-text search condition.

        Args:
            field: Must be the index's search field.
            query: The search text.

        Returns:
            A new builder carrying the condition.

        Raises:
            FieldMismatchError: If field is not the index's search field.
        """
        if field != self.index_config.search_field:
            raise FieldMismatchError(field, self.index_config.search_field, query=query)

        return SearchFilterBuilder(self.index_config, self._state.with_search(field, query))

    def eq(self, field: str, value: Any) -> "SearchFilterBuilder":
        """
        Add an equality filter.

        Args:
            field: Must be one of the index's filter fields.
            value: The value the field must equal.

        Returns:
            A new builder carrying the filter.

        Raises:
            InvalidFilterFieldError: If field is not a declared filter field.
        """
        if not self.index_config.is_filter_field(field):
            raise InvalidFilterFieldError(field, self.index_config.filter_fields)

        return SearchFilterBuilder(self.index_config, self._state.with_eq(field, value))

    def __repr__(self) -> str:
        return f"SearchFilterBuilder(index={self.index_config.name!r}, state={self._state!r})"
