"""
Similarity scoring components for the PlagiPipe pipeline.

A scorer compares the frequency vectors of two documents and returns a
single similarity value.
"""

from abc import ABC, abstractmethod
import logging
import math
from typing import Mapping

logger = logging.getLogger(__name__)


class BaseScorer(ABC):
    """Abstract base class for all similarity scorer components."""

    @abstractmethod
    def score(self, vector_a: Mapping[str, int], vector_b: Mapping[str, int]) -> float:
        """
        Computes the similarity between two frequency vectors.

        Args:
            vector_a (Mapping[str, int]): Token counts of the first document.
            vector_b (Mapping[str, int]): Token counts of the second document.

        Returns:
            float: The similarity score.
        """
        pass


class CosineSimilarityScorer(BaseScorer):
    """
    Cosine similarity over term-frequency vectors.

    The dot product and both squared magnitudes are accumulated as integers,
    so the result does not depend on the order of the arguments or of the
    keys: score(a, b) == score(b, a) holds exactly.
    """

    def score(self, vector_a: Mapping[str, int], vector_b: Mapping[str, int]) -> float:
        dot_product = 0
        magnitude_a = 0
        magnitude_b = 0

        for token in set(vector_a) | set(vector_b):
            count_a = vector_a.get(token, 0)
            count_b = vector_b.get(token, 0)
            dot_product += count_a * count_b
            magnitude_a += count_a * count_a
            magnitude_b += count_b * count_b

        if magnitude_a == 0 or magnitude_b == 0:
            logger.debug("At least one vector is empty, similarity is 0.0.")
            return 0.0

        # sqrt of the product keeps self-similarity at exactly 1.0
        similarity = dot_product / math.sqrt(magnitude_a * magnitude_b)
        return min(similarity, 1.0)
