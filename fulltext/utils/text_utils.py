"""
Text utility functions for the full-text search engine.

Provides the tokenizer shared by query parsing and document scoring.
"""

import re
from typing import Any, List


# Whitespace plus , . : ; ! ? ( ) [ ] { } ' "
TOKEN_SEPARATORS = re.compile(r"[\s,.:;!?()\[\]{}'\"]+")


def tokenize(text: Any) -> List[str]:
    """
    Split text into lowercase word tokens.

    No stemming and no stop-word removal; token order follows the text.

    Args:
        text: Text to tokenize. Non-string input is treated as empty.

    Returns:
        List of non-empty lowercase tokens.
    """
    if not text or not isinstance(text, str):
        return []

    return [token for token in TOKEN_SEPARATORS.split(text.lower()) if token]


if __name__ == "__main__":
    print(tokenize("Hello, World! (Testing) [brackets] {braces} 'quotes' \"double\""))
    print(tokenize("C++ and C# are kept: c++ c#"))
    print(tokenize(None))
