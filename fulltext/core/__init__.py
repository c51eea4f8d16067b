"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, Config, ScoringConfig, IndexConfig
from .logger import get_logger
from .exceptions import (
    FullTextSearchError,
    ConfigurationError,
    SearchError,
    EmptyQueryError,
    FieldMismatchError,
    InvalidFilterFieldError,
    NoValidTermsError,
    UnknownSearchIndexError
)

__all__ = [
    "get_config",
    "Config",
    "ScoringConfig",
    "IndexConfig",
    "get_logger",
    "FullTextSearchError",
    "ConfigurationError",
    "SearchError",
    "EmptyQueryError",
    "FieldMismatchError",
    "InvalidFilterFieldError",
    "NoValidTermsError",
    "UnknownSearchIndexError"
]
