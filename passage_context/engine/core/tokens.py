"""Token counting utilities.

Uses tiktoken's cl100k_base encoding to report how much of a model's
context window a returned passage set will occupy.
"""

import tiktoken

_encoding: tiktoken.Encoding | None = None


def get_encoder() -> tiktoken.Encoding:
    """Get or create the tiktoken encoder (lazy initialization).

    Returns:
        The tiktoken encoding instance for cl100k_base
    """
    global _encoding
    if _encoding is None:
        _encoding = tiktoken.get_encoding("cl100k_base")
    return _encoding


def count_tokens(text: str) -> int:
    """Count tokens in text using tiktoken.

    Args:
        text: Text to count tokens for

    Returns:
        Number of tokens in the text (0 for empty text)
    """
    if not text:
        return 0
    return len(get_encoder().encode(text))
