"""
Search engine facade.

Resolves a search index by name, lets the caller describe the search
through a SearchFilterBuilder callback, executes it over an in-memory
document collection and paginates the ranked results.
"""

import time
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple

from ..core import get_config, get_logger, Config, SearchError
from .executor import add_scores_to_documents, execute_search
from .filter_builder import SearchFilterBuilder
from .models import ScoredDocument, SearchStats
from .registry import SearchIndexRegistry

logger = get_logger(__name__)


SearchFilterCallback = Callable[[SearchFilterBuilder], SearchFilterBuilder]


class SearchEngine:
    """
    Full-text search over caller-supplied documents.

    Usage:
        engine = SearchEngine()
        results, stats = engine.search(
            documents,
            "search_body",
            lambda q: q.search("body", "react hooks").eq("status", "published"),
            limit=10
        )
    """

    def __init__(self, registry: SearchIndexRegistry = None, config: Config = None):
        """
        Initialize the search engine with configuration.

        Args:
            registry: Known search indexes. Built from config when omitted.
            config: Loaded configuration. Uses get_config() when omitted.
        """
        self.config = config or get_config()
        self.registry = registry or SearchIndexRegistry.from_config(self.config)

        self.scoring = self.config.scoring
        self.default_limit = self.config.search.default_limit
        self.max_limit = self.config.search.max_limit

    def search(
        self,
        documents: Iterable[Mapping[str, Any]],
        index_name: str,
        search_filter: SearchFilterCallback,
        limit: int = None,
        offset: int = 0
    ) -> Tuple[List[ScoredDocument], SearchStats]:
        """
        Execute a search and return one page of ranked results.

        Args:
            documents: The documents to search.
            index_name: Name of a registered search index.
            search_filter: Receives an empty builder for the index and
                returns the builder with the search condition applied.
            limit: Maximum results, clamped to the configured maximum.
            offset: Number of ranked results to skip.

        Returns:
            Tuple of (page of ScoredDocument, SearchStats).

        Raises:
            SearchError: If the index is unknown, the callback misbehaves
                or the search is invalid.
        """
        if offset < 0:
            raise SearchError("Offset must not be negative", details={"offset": offset})
        if limit is not None and limit < 0:
            raise SearchError("Limit must not be negative", details={"limit": limit})

        start_time = time.time()

        results, query = self._execute(documents, index_name, search_filter)

        limit = min(limit or self.default_limit, self.max_limit)
        total_count = len(results)
        page_results = results[offset:offset + limit]

        execution_time = (time.time() - start_time) * 1000

        total_pages = max(1, (total_count + limit - 1) // limit)
        current_page = (offset // limit) + 1

        stats = SearchStats(
            query=query,
            index_name=index_name,
            total_results=total_count,
            execution_time_ms=round(execution_time, 2),
            page=current_page,
            total_pages=total_pages
        )

        logger.debug(
            f"Search '{query}' on '{index_name}': {total_count} results in {execution_time:.1f}ms"
        )

        return page_results, stats

    def collect(
        self,
        documents: Iterable[Mapping[str, Any]],
        index_name: str,
        search_filter: SearchFilterCallback
    ) -> List[Dict[str, Any]]:
        """
        Execute a search and return every match with its "_score" merged in.

        Args:
            documents: The documents to search.
            index_name: Name of a registered search index.
            search_filter: Builder callback, as for search().

        Returns:
            Document copies, best first.
        """
        results, _ = self._execute(documents, index_name, search_filter)
        return add_scores_to_documents(results)

    def _execute(
        self,
        documents: Iterable[Mapping[str, Any]],
        index_name: str,
        search_filter: SearchFilterCallback
    ) -> Tuple[List[ScoredDocument], str]:
        """Resolve the index, build the filter state and run the search."""
        index = self.registry.require(index_name)

        builder = search_filter(SearchFilterBuilder(index))
        if not isinstance(builder, SearchFilterBuilder):
            raise SearchError(
                "Search filter callback must return the SearchFilterBuilder it was given",
                details={"index": index_name, "returned": type(builder).__name__}
            )

        state = builder.state
        results = execute_search(documents, state, index, self.scoring)

        return results, state.search_query
