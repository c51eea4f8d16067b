"""
Lookup of search index declarations by name.

The registry is an explicit object handed to whoever needs it; there is
no process-wide index table.
"""

from typing import Dict, Iterable, List, Optional

from ..core import Config, ConfigurationError, UnknownSearchIndexError, get_logger
from .models import SearchIndexConfig

logger = get_logger(__name__)


class SearchIndexRegistry:
    """
    Holds the search indexes known to an application.

    Indexes are usually declared in the "indexes" section of config.json
    and loaded with from_config().
    """

    def __init__(self, indexes: Iterable[SearchIndexConfig] = ()):
        """
        Initialize the registry.

        Args:
            indexes: Index declarations to register up front.
        """
        self._indexes: Dict[str, SearchIndexConfig] = {}
        for index in indexes:
            self.register(index)

    @classmethod
    def from_config(cls, config: Config) -> "SearchIndexRegistry":
        """
        Build a registry from the configured index declarations.

        Args:
            config: Loaded configuration.

        Returns:
            Registry holding one entry per configured index.

        Raises:
            ConfigurationError: If two indexes share a name.
        """
        registry = cls(
            SearchIndexConfig(
                name=entry.name,
                search_field=entry.search_field,
                filter_fields=tuple(entry.filter_fields)
            )
            for entry in config.indexes
        )
        logger.debug(f"Loaded {len(registry)} search indexes: {registry.names()}")
        return registry

    def register(self, index: SearchIndexConfig) -> None:
        """
        Add an index declaration.

        Raises:
            ConfigurationError: If an index with the same name exists.
        """
        if index.name in self._indexes:
            raise ConfigurationError(
                f"Search index '{index.name}' is already defined",
                {"index": index.name}
            )
        self._indexes[index.name] = index

    def get(self, name: str) -> Optional[SearchIndexConfig]:
        """Return the index declaration, or None if unknown."""
        return self._indexes.get(name)

    def require(self, name: str) -> SearchIndexConfig:
        """
        Return the index declaration.

        Raises:
            UnknownSearchIndexError: If no index has this name.
        """
        index = self._indexes.get(name)
        if index is None:
            raise UnknownSearchIndexError(name, self.names())
        return index

    def names(self) -> List[str]:
        """Registered index names in registration order."""
        return list(self._indexes)

    def __contains__(self, name: str) -> bool:
        return name in self._indexes

    def __len__(self) -> int:
        return len(self._indexes)
