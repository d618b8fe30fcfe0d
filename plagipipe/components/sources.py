"""
Document source components for the PlagiPipe pipeline.

A source turns an identifier (usually a file path) into a Document holding
the raw text fields of that input.
"""

from abc import ABC, abstractmethod
from pathlib import Path
import logging
from typing import Iterable, List

from ..utils.data_models import Document

logger = logging.getLogger(__name__)


class BaseSource(ABC):
    """Abstract base class for all document source components."""

    @abstractmethod
    def load_document(self, identifier: str) -> Document:
        """
        Loads a single document.

        Raises:
            FileNotFoundError: If the document does not exist or cannot be accessed.
            OSError: If the document exists but cannot be read completely.
        """
        pass

    @abstractmethod
    def check_source(self, identifier: str):
        """
        Checks that a document can be loaded without reading it.

        Raises:
            FileNotFoundError: If the document does not exist or cannot be accessed.
        """
        pass


def split_fields(lines: Iterable[str], delimiter: str = ",") -> List[str]:
    """
    Splits lines on a literal delimiter and keeps the non-empty fields.

    Each field is trimmed and lowercased. There is no quoting: a delimiter
    inside a field always splits it.
    """
    fields = []
    for line in lines:
        for value in line.split(delimiter):
            value = value.strip()
            if value:
                fields.append(value.lower())
    return fields


class DelimitedFileSource(BaseSource):
    """
    Loads documents from delimited text files, one or more fields per line.
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8"):
        if not delimiter:
            raise ValueError("Delimiter must be a non-empty string.")
        self.delimiter = delimiter
        self.encoding = encoding
        logger.debug(
            f"Initialized DelimitedFileSource with delimiter={delimiter!r}, encoding='{encoding}'"
        )

    def check_source(self, identifier: str):
        path = Path(identifier)
        if not path.exists():
            raise FileNotFoundError(f"{identifier} (No such file or directory)")
        if not path.is_file():
            raise FileNotFoundError(f"{identifier} (Not a regular file)")

    def load_document(self, identifier: str) -> Document:
        self.check_source(identifier)
        logger.info(f"Reading document from '{identifier}'.")
        try:
            with open(identifier, "r", encoding=self.encoding) as f:
                fields = split_fields(f, self.delimiter)
        except PermissionError as e:
            raise FileNotFoundError(f"{identifier} (Permission denied)") from e
        except UnicodeDecodeError as e:
            raise OSError(
                f"Could not decode '{identifier}' as {self.encoding}: {e}"
            ) from e

        if not fields:
            logger.warning(f"Document '{identifier}' contains no text fields.")
        document = Document(name=identifier, fields=tuple(fields))
        logger.debug(f"Loaded {document.field_count} fields from '{identifier}'.")
        return document
