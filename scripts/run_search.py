"""
CLI script to run a full-text search over a JSON document file.

Usage:
    python scripts/run_search.py --documents docs.json --index search_body --query "react hooks"
    python scripts/run_search.py --documents docs.json --index search_body \\
        --query '"exact phrase" other' --eq status=published --limit 5
    python scripts/run_search.py ... --config path/to/config.json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Tuple

sys.path.insert(0, str(Path(__file__).parent.parent))

from fulltext.core import get_config, get_logger, ConfigurationError, FullTextSearchError
from fulltext.core.config_loader import reload_config
from fulltext.search import SearchEngine


def parse_args(argv: List[str] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rank the documents of a JSON file by full-text relevance"
    )

    parser.add_argument(
        "--documents",
        type=str,
        required=True,
        help="Path to a JSON file holding an array of document objects"
    )

    parser.add_argument(
        "--index",
        type=str,
        required=True,
        help="Name of the search index to query"
    )

    parser.add_argument(
        "--query",
        type=str,
        required=True,
        help='Search text; wrap phrases in double quotes'
    )

    parser.add_argument(
        "--eq",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Equality filter on a filter field (repeatable)"
    )

    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of results"
    )

    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Number of ranked results to skip"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    return parser.parse_args(argv)


def parse_eq_filter(text: str) -> Tuple[str, Any]:
    """
    Split a FIELD=VALUE argument.

    The value is decoded as JSON when possible, so numbers, booleans and
    null keep their types; anything else is taken as a plain string.
    """
    field, separator, raw_value = text.partition("=")
    if not separator or not field:
        raise ValueError(f"Expected FIELD=VALUE, got '{text}'")

    try:
        value = json.loads(raw_value)
    except json.JSONDecodeError:
        value = raw_value

    return field, value


def load_documents(path: Path) -> List[dict]:
    """Load the document array from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        documents = json.load(f)

    if not isinstance(documents, list):
        raise ValueError(f"{path} must contain a JSON array of documents")

    return [doc for doc in documents if isinstance(doc, dict)]


def main(argv: List[str] = None) -> int:
    """Main entry point for the search CLI."""
    args = parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1
        try:
            reload_config(config_path)
        except ConfigurationError as e:
            print(f"Configuration error: {e.message}")
            return 1

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        return 1

    logger = get_logger(__name__)

    try:
        documents = load_documents(Path(args.documents))
        eq_filters = [parse_eq_filter(item) for item in args.eq]
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    logger.info(f"Loaded {len(documents)} documents from {args.documents}")

    def build_filter(q):
        q = q.search(q.index_config.search_field, args.query)
        for field, value in eq_filters:
            q = q.eq(field, value)
        return q

    engine = SearchEngine(config=config)

    try:
        results, stats = engine.search(
            documents,
            args.index,
            build_filter,
            limit=args.limit,
            offset=args.offset
        )
    except FullTextSearchError as e:
        print(f"Search error: {e.message}")
        return 1

    print("=" * 60)
    print(f"Query:   {stats.query}")
    print(f"Index:   {stats.index_name}")
    print(f"Results: {stats.total_results} in {stats.execution_time_ms}ms "
          f"(page {stats.page}/{stats.total_pages})")
    print("=" * 60)

    for rank, result in enumerate(results, start=args.offset + 1):
        print(f"{rank:>3}. score={result.score:.3f}  {json.dumps(result.document, ensure_ascii=False)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
