"""
Tests for the search filter builder.

Tests field validation at call time and immutable chaining.
"""

import pytest

from fulltext.core.exceptions import FieldMismatchError, InvalidFilterFieldError
from fulltext.search.filter_builder import SearchFilterBuilder
from fulltext.search.models import EqFilter, SearchFilterState


class TestSearch:
    """Tests for SearchFilterBuilder.search."""

    def test_sets_field_and_query(self, body_index):
        """Test that search records the field and query."""
        builder = SearchFilterBuilder(body_index).search("body", "cat")

        assert builder.state.search_field == "body"
        assert builder.state.search_query == "cat"

    def test_wrong_field_raises(self, body_index):
        """Test that only the index's search field is accepted."""
        with pytest.raises(FieldMismatchError) as exc_info:
            SearchFilterBuilder(body_index).search("title", "cat")

        assert exc_info.value.field == "title"
        assert exc_info.value.expected == "body"
        assert exc_info.value.query == "cat"


class TestEq:
    """Tests for SearchFilterBuilder.eq."""

    def test_adds_filter(self, body_index):
        """Test that eq records an equality filter."""
        builder = SearchFilterBuilder(body_index).eq("category", "pets")

        assert builder.state.eq_filters == (EqFilter("category", "pets"),)

    def test_unregistered_field_raises(self, body_index):
        """Test that eq rejects fields outside the filter set."""
        with pytest.raises(InvalidFilterFieldError) as exc_info:
            SearchFilterBuilder(body_index).eq("unregisteredField", "x")

        assert exc_info.value.field == "unregisteredField"
        assert exc_info.value.allowed == ("category",)

    def test_search_field_is_not_a_filter_field(self, body_index):
        """Test that the search field itself cannot be eq-filtered."""
        with pytest.raises(InvalidFilterFieldError):
            SearchFilterBuilder(body_index).eq("body", "the cat sat")


class TestChaining:
    """Tests for chained, immutable building."""

    def test_chain_accumulates(self, content_index):
        """Test a full chain of calls."""
        state = (
            SearchFilterBuilder(content_index)
            .search("content", "react hooks")
            .eq("status", "published")
            .eq("category", "programming")
            .state
        )

        assert state == SearchFilterState(
            search_field="content",
            search_query="react hooks",
            eq_filters=(
                EqFilter("status", "published"),
                EqFilter("category", "programming"),
            )
        )

    def test_each_call_returns_new_builder(self, body_index):
        """Test that the original builder is left untouched."""
        builder = SearchFilterBuilder(body_index)

        searched = builder.search("body", "cat")

        assert searched is not builder
        assert builder.state == SearchFilterState()

    def test_failed_call_leaves_builder_usable(self, body_index):
        """Test that a rejected call does not corrupt earlier state."""
        builder = SearchFilterBuilder(body_index).search("body", "cat")

        with pytest.raises(InvalidFilterFieldError):
            builder.eq("author", "me")

        assert builder.state.eq_filters == ()
        assert builder.eq("category", "pets").state.search_query == "cat"

    def test_starting_state(self, body_index):
        """Test building on top of an existing state."""
        start = SearchFilterState().with_eq("category", "pets")

        builder = SearchFilterBuilder(body_index, start).search("body", "cat")

        assert builder.state.eq_filters == (EqFilter("category", "pets"),)
