"""
Tests for the pipeline orchestration.
"""

import math

import pytest
from unittest.mock import patch

from plagipipe.core.classifier import Severity
from plagipipe.core.pipeline import compare_documents, run_pipeline
from plagipipe.utils.config import default_config
from plagipipe.utils.data_models import Document


@pytest.fixture
def doc_a():
    return Document(
        name="a.csv",
        fields=("java is a programming language", "it is widely used"),
    )


@pytest.fixture
def doc_b():
    return Document(
        name="b.csv",
        fields=("java is a popular language", "it is used in many applications"),
    )


@pytest.fixture
def config(tmp_path):
    config = default_config()
    config["sink"]["config"]["path"] = str(tmp_path / "report" / "report.txt")
    return config


def test_compare_documents_worked_example(doc_a, doc_b):
    """Shared tokens give a dot product of 9 against magnitudes 11 and 13."""
    result = compare_documents(doc_a, doc_b)

    assert result.score == pytest.approx(9 / math.sqrt(143))
    assert result.severity is Severity.MODERATE
    assert result.tokens_a == 9
    assert result.tokens_b == 11
    assert (result.source_a, result.source_b) == ("a.csv", "b.csv")


def test_compare_documents_is_symmetric(doc_a, doc_b):
    assert compare_documents(doc_a, doc_b).score == compare_documents(doc_b, doc_a).score


def test_compare_documents_self_similarity(doc_a):
    result = compare_documents(doc_a, doc_a)
    assert result.score == 1.0
    assert result.severity is Severity.HIGH


def test_compare_documents_without_tokens_scores_zero(doc_a):
    empty = Document(name="empty.csv", fields=("!!!", "   "))
    result = compare_documents(doc_a, empty)
    assert result.score == 0.0
    assert result.severity is Severity.NONE
    assert result.tokens_b == 0


def test_run_pipeline_writes_report(tmp_path, config):
    file_a = tmp_path / "a.csv"
    file_b = tmp_path / "b.csv"
    file_a.write_text("Java is a programming language,It is widely used\n")
    file_b.write_text("Java is a popular language,It is used in many applications\n")

    run = run_pipeline(str(file_a), str(file_b), config)

    assert run.result.severity is Severity.MODERATE
    assert run.report_destination == config["sink"]["config"]["path"]
    report = (tmp_path / "report" / "report.txt").read_text(encoding="utf-8")
    assert f"File 1: {file_a}" in report
    assert "Cosine Similarity Score: 0.7526" in report
    assert "Similarity Percentage: 75.26%" in report
    assert "Result: MODERATE PLAGIARISM DETECTED" in report


def test_run_pipeline_twice_appends_identical_results(tmp_path, config):
    file_a = tmp_path / "a.csv"
    file_a.write_text("the quick brown fox, jumps over the lazy dog")
    file_b = tmp_path / "b.csv"
    file_b.write_text("the lazy dog sleeps")

    first = run_pipeline(str(file_a), str(file_b), config)
    second = run_pipeline(str(file_a), str(file_b), config)

    assert first.result == second.result
    report = (tmp_path / "report" / "report.txt").read_text(encoding="utf-8")
    assert report.count("=== PLAGIARISM DETECTION REPORT ===") == 2


def test_run_pipeline_missing_document_writes_no_report(tmp_path, config):
    file_a = tmp_path / "a.csv"
    file_a.write_text("some text")

    with patch("plagipipe.components.sources.DelimitedFileSource.load_document") as mock_load:
        with pytest.raises(FileNotFoundError):
            run_pipeline(str(file_a), str(tmp_path / "missing.csv"), config)
        mock_load.assert_not_called()

    assert not (tmp_path / "report" / "report.txt").exists()


def test_run_pipeline_invalid_component_type(tmp_path, config):
    config["scorer"] = {"type": "jaccard", "config": {}}
    with pytest.raises(ValueError):
        run_pipeline("a.csv", "b.csv", config)
