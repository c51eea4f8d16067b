"""
Full-Text Search Engine Package.

Tokenizes document text, parses queries into terms and quoted phrases,
matches terms exactly, by prefix or by edit distance, and ranks
in-memory documents by a composite relevance score.
"""

__version__ = "1.0.0"
