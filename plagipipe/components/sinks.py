"""
Report sink components for the PlagiPipe pipeline.

A sink receives the result of a comparison and appends a report entry to its
destination. Entries accumulate across runs, most recent last.
"""

from abc import ABC, abstractmethod
from datetime import datetime
import json
import logging
from pathlib import Path
from typing import Callable, List, Optional

from ..utils.data_models import ComparisonResult
from ..utils.formatting import format_percentage, format_score, format_timestamp

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40
REPORT_TITLE = "=== PLAGIARISM DETECTION REPORT ==="


def _local_now() -> datetime:
    return datetime.now().astimezone()


class BaseSink(ABC):
    """Abstract base class for all report sink components."""

    @property
    @abstractmethod
    def destination(self) -> str:
        """A human-readable description of where reports are written."""
        pass

    @abstractmethod
    def write(self, result: ComparisonResult):
        """
        Appends a report entry for the given result.

        Args:
            result (ComparisonResult): The comparison to report on.

        Raises:
            OSError: If the destination cannot be written.
        """
        pass


class _FileSink(BaseSink):
    """Shared handling for sinks that append to a local file."""

    def __init__(self, path: str, clock: Optional[Callable[[], datetime]] = None):
        self.path = Path(path)
        self.clock = clock or _local_now
        logger.debug(f"Initialized {self.__class__.__name__} with path='{self.path}'")

    @property
    def destination(self) -> str:
        return str(self.path)

    def _append(self, text: str):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(text)


class TextReportSink(_FileSink):
    """
    Appends a plain-text report block per comparison.
    """

    def render(self, result: ComparisonResult) -> str:
        lines: List[str] = [
            "",
            SEPARATOR,
            f"Execution Time: {format_timestamp(self.clock())}",
            SEPARATOR,
            REPORT_TITLE,
            f"File 1: {result.source_a}",
            f"File 2: {result.source_b}",
            f"Cosine Similarity Score: {format_score(result.score)}",
            f"Similarity Percentage: {format_percentage(result.score)}",
            f"Result: {result.severity.message}",
        ]
        return "\n".join(lines) + "\n"

    def write(self, result: ComparisonResult):
        logger.info(f"Appending text report to '{self.path}'")
        self._append(self.render(result))


class JsonLinesReportSink(_FileSink):
    """
    Appends one JSON object per comparison, one object per line.
    """

    def render(self, result: ComparisonResult) -> str:
        record = {
            "timestamp": self.clock().isoformat(),
            "source_a": result.source_a,
            "source_b": result.source_b,
            "score": round(result.score, 4),
            "percentage": round(result.percentage, 2),
            "severity": result.severity.value,
            "result": result.severity.message,
        }
        return json.dumps(record) + "\n"

    def write(self, result: ComparisonResult):
        logger.info(f"Appending JSON report line to '{self.path}'")
        self._append(self.render(result))
