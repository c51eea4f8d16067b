"""
Configuration loader for the full-text search engine.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

from .exceptions import ConfigurationError


DEFAULT_INDEXES = [
    {"name": "search_content", "search_field": "content", "filter_fields": ["category", "status"]},
    {"name": "search_body", "search_field": "body", "filter_fields": ["category", "status"]},
    {"name": "search_products", "search_field": "description", "filter_fields": ["category", "brand"]},
    {"name": "search_messages", "search_field": "content", "filter_fields": ["channelId", "authorId"]},
    {"name": "search_docs", "search_field": "content", "filter_fields": ["version"]},
]


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    logs_directory: Path


@dataclass
class SearchConfig:
    """Configuration for result pagination."""
    default_limit: int
    max_limit: int


@dataclass(frozen=True)
class ScoringConfig:
    """
    Relevance scoring weights and fuzzy matching thresholds.

    Defaults reproduce the reference ranking: exact > prefix > fuzzy,
    a bonus for early first occurrence, a bonus for covering several
    query terms and a flat bonus per matched quoted phrase.

    Attributes:
        exact_weight: Term count added per exact token match.
        prefix_weight: Term count added per prefix token match.
        fuzzy_prefix_multiplier: Scale of prefix candidates in fuzzy matching.
        fuzzy_edit_multiplier: Scale of edit-distance candidates in fuzzy matching.
        position_bonus: Maximum bonus for a term found at the first token.
        multi_term_bonus: Bonus scaled by the fraction of matched terms.
        phrase_bonus: Flat bonus per quoted phrase found in the text.
        exact_only_below: Terms shorter than this only match exactly.
        one_edit_max_length: Longest term allowed a single edit; longer get two.
    """
    exact_weight: float = 1.0
    prefix_weight: float = 0.7
    fuzzy_prefix_multiplier: float = 0.9
    fuzzy_edit_multiplier: float = 0.8
    position_bonus: float = 0.5
    multi_term_bonus: float = 0.3
    phrase_bonus: float = 2.0
    exact_only_below: int = 4
    one_edit_max_length: int = 6


@dataclass
class IndexConfig:
    """Declaration of one search index."""
    name: str
    search_field: str
    filter_fields: List[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    search: SearchConfig
    scoring: ScoringConfig
    indexes: List[IndexConfig]
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            logs_directory=cls._resolve_path(paths_data.get("logs_directory", "output/logs"), project_root)
        )

        search_data = data.get("search", {})
        search = SearchConfig(
            default_limit=search_data.get("default_limit", 50),
            max_limit=search_data.get("max_limit", 500)
        )
        if search.default_limit <= 0 or search.max_limit <= 0:
            raise ConfigurationError(
                "Search limits must be positive",
                {"default_limit": search.default_limit, "max_limit": search.max_limit}
            )

        scoring = cls._parse_scoring(data.get("scoring", {}))

        indexes = [
            cls._parse_index(entry)
            for entry in data.get("indexes", DEFAULT_INDEXES)
        ]

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            search=search,
            scoring=scoring,
            indexes=indexes,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _parse_scoring(scoring_data: dict) -> ScoringConfig:
        """Overlay configured scoring values onto the defaults."""
        known = {f.name for f in fields(ScoringConfig)}
        unknown = set(scoring_data) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown scoring settings: {', '.join(sorted(unknown))}",
                {"unknown": sorted(unknown)}
            )

        for name, value in scoring_data.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                raise ConfigurationError(
                    f"Scoring setting '{name}' must be a non-negative number",
                    {"setting": name, "value": value}
                )

        return ScoringConfig(**scoring_data)

    @staticmethod
    def _parse_index(entry: dict) -> IndexConfig:
        """Parse one entry of the indexes section."""
        name = entry.get("name")
        search_field = entry.get("search_field")
        if not name or not search_field:
            raise ConfigurationError(
                "Search index entries require 'name' and 'search_field'",
                {"entry": entry}
            )

        return IndexConfig(
            name=name,
            search_field=search_field,
            filter_fields=list(entry.get("filter_fields", []))
        )

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Path:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Logs directory: {config.paths.logs_directory}")
        print(f"Default limit: {config.search.default_limit}")
        print(f"Indexes: {[index.name for index in config.indexes]}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
