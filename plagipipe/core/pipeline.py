"""
Core pipeline orchestration module.

This module wires the comparison together: it builds the components named in
the configuration, loads both documents, tokenizes and counts them, scores
and classifies the pair, and hands the result to the report sink.
"""

import logging
from typing import Optional

from .classifier import classify
from .factory import (
    build_component,
    SOURCE_REGISTRY,
    TOKENIZER_REGISTRY,
    SCORER_REGISTRY,
    SINK_REGISTRY,
)
from .vectors import build_frequency_vector
from ..components.scorers import BaseScorer, CosineSimilarityScorer
from ..components.tokenizers import AlphanumericTokenizer, BaseTokenizer
from ..utils.config import default_config
from ..utils.data_models import ComparisonResult, Document, PipelineRun

logger = logging.getLogger(__name__)


def _build_components(config: dict) -> tuple:
    """Builds all pipeline components based on the configuration."""
    logger.info("Building pipeline components...")
    try:
        source = build_component(config["source"], SOURCE_REGISTRY)
        tokenizer = build_component(config["tokenizer"], TOKENIZER_REGISTRY)
        scorer = build_component(config["scorer"], SCORER_REGISTRY)
        sink = build_component(config["sink"], SINK_REGISTRY)
        logger.info("All components built successfully.")
        return source, tokenizer, scorer, sink
    except (ValueError, KeyError) as e:
        logger.error(f"Error building components: {e}", exc_info=True)
        raise


def compare_documents(
    doc_a: Document,
    doc_b: Document,
    tokenizer: Optional[BaseTokenizer] = None,
    scorer: Optional[BaseScorer] = None,
) -> ComparisonResult:
    """
    Compares two loaded documents.

    Both documents go through the same tokenizer so that their frequency
    vectors share one vocabulary.

    Args:
        doc_a (Document): The first document.
        doc_b (Document): The second document.
        tokenizer (Optional[BaseTokenizer]): Defaults to AlphanumericTokenizer.
        scorer (Optional[BaseScorer]): Defaults to CosineSimilarityScorer.

    Returns:
        ComparisonResult: The score and its classification.
    """
    tokenizer = tokenizer or AlphanumericTokenizer()
    scorer = scorer or CosineSimilarityScorer()

    tokens_a = tokenizer.tokenize(doc_a.fields)
    tokens_b = tokenizer.tokenize(doc_b.fields)
    vector_a = build_frequency_vector(tokens_a)
    vector_b = build_frequency_vector(tokens_b)

    score = scorer.score(vector_a, vector_b)
    severity = classify(score)
    logger.debug(f"Score {score:.6f} classified as {severity.value}.")

    return ComparisonResult(
        source_a=doc_a.name,
        source_b=doc_b.name,
        score=score,
        severity=severity,
        tokens_a=len(tokens_a),
        tokens_b=len(tokens_b),
    )


def run_pipeline(
    source_a: str, source_b: str, config: Optional[dict] = None
) -> PipelineRun:
    """
    Runs a full comparison of two document sources and writes the report.

    Errors from loading or reporting are not handled here; they propagate to
    the caller and no report entry is written for a failed run.

    Args:
        source_a (str): Identifier of the first document, e.g. a file path.
        source_b (str): Identifier of the second document.
        config (Optional[dict]): Pipeline configuration; defaults are used
            when None.

    Returns:
        PipelineRun: The comparison result and the report destination.

    Raises:
        FileNotFoundError: If a document cannot be found or accessed.
        OSError: If a document cannot be read or the report cannot be written.
    """
    config = config or default_config()
    source, tokenizer, scorer, sink = _build_components(config)

    logger.info("Reading input files...")
    source.check_source(source_a)
    source.check_source(source_b)
    doc_a = source.load_document(source_a)
    doc_b = source.load_document(source_b)

    logger.info("Calculating similarity...")
    result = compare_documents(doc_a, doc_b, tokenizer, scorer)
    logger.info(
        f"Similarity between '{result.source_a}' and '{result.source_b}': "
        f"{result.score:.4f} ({result.severity.value})"
    )

    logger.info("Writing report to file...")
    sink.write(result)

    return PipelineRun(result=result, report_destination=sink.destination)
