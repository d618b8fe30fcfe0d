"""
Tokenizer components for the PlagiPipe pipeline.

A tokenizer turns the raw text fields of a document into a flat list of
normalized word tokens. Both documents of a comparison must go through the
same tokenizer, otherwise their frequency vectors are not comparable.
"""

from abc import ABC, abstractmethod
import logging
import re
from typing import Iterable, List

logger = logging.getLogger(__name__)

_re_whitespace = re.compile(r"\s+", re.ASCII)
_re_non_alphanumeric = re.compile(r"[^a-zA-Z0-9]")


class BaseTokenizer(ABC):
    """Abstract base class for all tokenizer components."""

    @abstractmethod
    def tokenize(self, fields: Iterable[str]) -> List[str]:
        """
        Splits the fields of one document into tokens.

        Args:
            fields (Iterable[str]): The raw text fields of a document.

        Returns:
            List[str]: Tokens in reading order, duplicates retained.
        """
        pass


class AlphanumericTokenizer(BaseTokenizer):
    """
    Lowercases each field, splits it on whitespace and strips every character
    that is not an ASCII letter or digit. Fragments left empty are dropped.
    """

    def clean_token(self, fragment: str) -> str:
        return _re_non_alphanumeric.sub("", fragment)

    def tokenize(self, fields: Iterable[str]) -> List[str]:
        tokens = []
        for text in fields:
            for fragment in _re_whitespace.split(text.lower()):
                token = self.clean_token(fragment)
                if token:
                    tokens.append(token)
        logger.debug(f"Tokenized document into {len(tokens)} tokens.")
        return tokens
