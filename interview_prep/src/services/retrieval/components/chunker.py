"""Document chunking module.

Splits extracted document text into fixed-size word windows. Each window is
embedded separately, so the window size bounds what the embedding model sees.
"""

import logging
import re
from typing import List

from interview_prep.conf.config import Config

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def chunk_text(text: str, max_words: int = Config.CHUNK_MAX_WORDS) -> List[str]:
    """Split text into chunks of at most max_words words.

    Words are separated by runs of whitespace and re-joined with single spaces.
    The total number of words across all chunks equals the number of words in
    the input.

    Args:
        text: Text to split
        max_words: Maximum number of words per chunk

    Returns:
        List of chunk strings, empty if the text contains no words

    Raises:
        ValueError: If max_words is not positive
    """
    if max_words <= 0:
        raise ValueError(f"max_words must be positive, got {max_words}")

    words = [word for word in _WHITESPACE.split(text) if word]
    chunks = [
        " ".join(words[start : start + max_words])
        for start in range(0, len(words), max_words)
    ]

    logger.debug(f"Split {len(words)} words into {len(chunks)} chunks")
    return chunks
