"""
Core data models for the PlagiPipe pipeline.

This module defines the records that are passed between the components of
the comparison pipeline.
"""

from dataclasses import dataclass, field
from typing import Tuple

from ..core.classifier import Severity


@dataclass(frozen=True)
class Document:
    """
    A loaded document, ready to be tokenized.

    Attributes:
        name (str): Identifier of the source the document was read from,
            usually a file path.
        fields (Tuple[str, ...]): The raw text fields in the order they were
            read. The tuple is never modified after loading.
    """

    name: str
    fields: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def field_count(self) -> int:
        return len(self.fields)


@dataclass(frozen=True)
class ComparisonResult:
    """
    The outcome of comparing two documents.

    Attributes:
        source_a (str): Name of the first document.
        source_b (str): Name of the second document.
        score (float): Cosine similarity of the two frequency vectors.
        severity (Severity): Classification of the score.
        tokens_a (int): Number of valid tokens found in the first document.
        tokens_b (int): Number of valid tokens found in the second document.
    """

    source_a: str
    source_b: str
    score: float
    severity: Severity
    tokens_a: int = 0
    tokens_b: int = 0

    @property
    def percentage(self) -> float:
        return self.score * 100


@dataclass(frozen=True)
class PipelineRun:
    """A comparison result together with where its report was written."""

    result: ComparisonResult
    report_destination: str
