"""
Query parser for full-text search.

Splits a raw user query into quoted phrases and bare terms.
Only terms and double-quoted phrases are recognized; there is no
boolean operator syntax.
"""

import re
from typing import Any

from ..core import get_logger
from ..utils.text_utils import tokenize
from .models import ParsedQuery

logger = get_logger(__name__)


PHRASE_PATTERN = re.compile(r'"([^"]+)"')


class QueryParser:
    """
    Parses search queries into terms and phrases.

    Phrases are the double-quoted spans of the query, lowercased and in
    the order they appear. Everything outside of the quotes is tokenized
    into terms.
    """

    def parse(self, query: Any) -> ParsedQuery:
        """
        Parse a raw query.

        Never raises: a query with nothing searchable in it yields an
        empty ParsedQuery, which callers must reject themselves.

        Args:
            query: Raw user input.

        Returns:
            ParsedQuery with terms and phrases.
        """
        if not query or not isinstance(query, str):
            return ParsedQuery()

        phrases = [phrase.lower() for phrase in PHRASE_PATTERN.findall(query)]

        remaining = PHRASE_PATTERN.sub("", query)
        terms = tokenize(remaining)

        logger.debug(f"Parsed query {query!r}: terms={terms} phrases={phrases}")

        return ParsedQuery(terms=terms, phrases=phrases)


_default_parser = QueryParser()


def parse_search_query(query: Any) -> ParsedQuery:
    """
    Parse a raw query with the default parser.

    Args:
        query: Raw user input.

    Returns:
        ParsedQuery with terms and phrases.
    """
    return _default_parser.parse(query)


if __name__ == "__main__":
    parser = QueryParser()

    test_queries = [
        "hello world",
        '"exact phrase"',
        'typescript "type system" generics',
        '"first" middle "second"',
        "!!! ???",
        'unterminated "quote',
    ]

    for q in test_queries:
        result = parser.parse(q)
        print(f"  {q!r} -> terms={result.terms} phrases={result.phrases}")
