"""
Tests for the document source components.
"""

import pytest
from unittest.mock import patch

from plagipipe.components.sources import DelimitedFileSource, split_fields
from plagipipe.utils.data_models import Document


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "doc.csv"
    path.write_text(
        "Java is a programming language, It is widely used\n"
        "  , ,\n"
        "\n"
        "Second Line ,  trailing  \n",
        encoding="utf-8",
    )
    return path


def test_delimited_source_loads_trimmed_lowercase_fields(csv_file):
    """Tests that DelimitedFileSource splits, trims and lowercases fields."""
    source = DelimitedFileSource()
    document = source.load_document(str(csv_file))

    assert isinstance(document, Document)
    assert document.name == str(csv_file)
    assert document.fields == (
        "java is a programming language",
        "it is widely used",
        "second line",
        "trailing",
    )
    assert document.field_count == 4


def test_delimited_source_custom_delimiter(tmp_path):
    path = tmp_path / "doc.tsv"
    path.write_text("alpha beta;gamma\ndelta;;", encoding="utf-8")

    document = DelimitedFileSource(delimiter=";").load_document(str(path))

    assert document.fields == ("alpha beta", "gamma", "delta")


def test_delimited_source_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    document = DelimitedFileSource().load_document(str(path))

    assert document.fields == ()


def test_delimited_source_missing_file_raises_not_found(tmp_path):
    source = DelimitedFileSource()
    with pytest.raises(FileNotFoundError):
        source.load_document(str(tmp_path / "missing.csv"))


def test_delimited_source_directory_raises_not_found(tmp_path):
    source = DelimitedFileSource()
    with pytest.raises(FileNotFoundError):
        source.check_source(str(tmp_path))


def test_delimited_source_permission_error_is_not_found(csv_file):
    source = DelimitedFileSource()
    with patch("builtins.open", side_effect=PermissionError("denied")):
        with pytest.raises(FileNotFoundError, match="Permission denied"):
            source.load_document(str(csv_file))


def test_delimited_source_undecodable_file_raises_io_error(tmp_path):
    path = tmp_path / "binary.csv"
    path.write_bytes(b"\xff\xfe\xfa invalid")

    source = DelimitedFileSource(encoding="utf-8")
    with pytest.raises(OSError) as exc_info:
        source.load_document(str(path))
    assert not isinstance(exc_info.value, FileNotFoundError)


def test_delimited_source_rejects_empty_delimiter():
    with pytest.raises(ValueError):
        DelimitedFileSource(delimiter="")


def test_split_fields_has_no_quoting():
    assert split_fields(['"a, b", c']) == ['"a', 'b"', "c"]
