"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, a temporary config.json, sample documents
and singleton reset helpers so tests stay isolated.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from fulltext.search.models import SearchIndexConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="fulltext_search_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "logs_directory": str(logs_dir)
        },
        "search": {
            "default_limit": 20,
            "max_limit": 100
        },
        "scoring": {
            "phrase_bonus": 2.0
        },
        "indexes": [
            {"name": "search_body", "search_field": "body", "filter_fields": ["category", "status"]},
            {"name": "search_content", "search_field": "content", "filter_fields": ["category", "status"]}
        ],
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def body_index() -> SearchIndexConfig:
    """Index searching "body" with a single "category" filter field."""
    return SearchIndexConfig(
        name="search_body",
        search_field="body",
        filter_fields=("category",)
    )


@pytest.fixture
def content_index() -> SearchIndexConfig:
    """Index searching "content" filterable by category and status."""
    return SearchIndexConfig(
        name="search_content",
        search_field="content",
        filter_fields=("category", "status")
    )


@pytest.fixture
def pet_documents() -> list:
    """Two short documents sharing the "cat" stem."""
    return [
        {"body": "the cat sat", "category": "pets"},
        {"body": "a catalog of cats", "category": "retail"},
    ]


@pytest.fixture
def sample_documents() -> list:
    """
    Small article collection with content, category and status fields.
    """
    return [
        {
            "_id": "doc_1",
            "title": "Introduction to TypeScript",
            "content": "TypeScript is a typed superset of JavaScript that compiles to plain JavaScript.",
            "category": "programming",
            "status": "published",
        },
        {
            "_id": "doc_2",
            "title": "React Hooks Guide",
            "content": "React hooks let you use state and other React features without writing a class.",
            "category": "programming",
            "status": "published",
        },
        {
            "_id": "doc_3",
            "title": "JavaScript Fundamentals",
            "content": "JavaScript is a dynamic programming language used for web development.",
            "category": "programming",
            "status": "draft",
        },
        {
            "_id": "doc_4",
            "title": "CSS Grid Layout",
            "content": "CSS Grid Layout is a two-dimensional layout system for the web.",
            "category": "design",
            "status": "published",
        },
        {
            "_id": "doc_5",
            "title": "TypeScript Advanced Types",
            "content": "Advanced TypeScript types include generics, conditional types, and mapped types.",
            "category": "programming",
            "status": "published",
        },
    ]


@pytest.fixture
def sample_documents_path(temp_dir: Path, sample_documents: list) -> Path:
    """Write the sample documents to a JSON file."""
    path = temp_dir / "documents.json"
    path.write_text(json.dumps(sample_documents), encoding="utf-8")
    return path


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from fulltext.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from fulltext.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False
