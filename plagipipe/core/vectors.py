"""
Frequency vector construction.

A frequency vector is a sparse mapping from token to the number of times it
occurs in one document. Tokens that do not occur are simply absent and count
as zero.
"""

import logging
from collections import Counter
from typing import Iterable

logger = logging.getLogger(__name__)


def build_frequency_vector(tokens: Iterable[str]) -> Counter:
    """
    Counts the occurrences of each distinct token.

    Empty strings are skipped so they never become keys of the vector.

    Args:
        tokens (Iterable[str]): Tokens produced by a tokenizer, duplicates included.

    Returns:
        Counter: Mapping of token to its count; every count is at least 1.
    """
    vector = Counter(token for token in tokens if token)
    logger.debug(
        f"Built frequency vector with {len(vector)} distinct tokens "
        f"({sum(vector.values())} total)."
    )
    return vector
