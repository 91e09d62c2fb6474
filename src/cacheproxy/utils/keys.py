"""Cache key normalization."""

import re

_NON_WORD = re.compile(r"\W+", re.ASCII)


def normalize_key(text: str, separator: str = "_") -> str:
    """Replace every run of non-word characters with a single separator.

    Args:
        text: The raw key text.
        separator: Character used in place of each non-word run.

    Returns:
        A key safe for stores that reject spaces and punctuation.
    """
    return _NON_WORD.sub(separator, text)
