"""
Component Factory for the PlagiPipe pipeline.

This module implements the factory pattern for creating pipeline components.
It uses registries to map configuration strings (e.g., 'delimited_file') to
the actual component classes, so the document source, tokenizer, scorer and
report sink can be replaced via configuration without touching the pipeline.
"""

import logging
from ..components.sources import DelimitedFileSource
from ..components.tokenizers import AlphanumericTokenizer
from ..components.scorers import CosineSimilarityScorer
from ..components.sinks import TextReportSink, JsonLinesReportSink

logger = logging.getLogger(__name__)

# A registry mapping 'type' strings to their corresponding Source classes.
SOURCE_REGISTRY = {"delimited_file": DelimitedFileSource}

# A registry mapping 'type' strings to their corresponding Tokenizer classes.
TOKENIZER_REGISTRY = {"alphanumeric": AlphanumericTokenizer}

# A registry mapping 'type' strings to their corresponding Scorer classes.
SCORER_REGISTRY = {"cosine": CosineSimilarityScorer}

# A registry mapping 'type' strings to their corresponding Sink classes.
SINK_REGISTRY = {"text_report": TextReportSink, "jsonl_report": JsonLinesReportSink}


def build_component(component_config: dict, registry: dict):
    """
    Builds a component instance from a configuration dictionary and a registry.

    Args:
        component_config (dict): The component's configuration dictionary,
            expected to have 'type' and 'config' keys.
        registry (dict): The registry (e.g., SOURCE_REGISTRY) to look up the
            component class.

    Returns:
        An instance of the component class.

    Raises:
        ValueError: If the 'type' is not specified in the config, if the
            type is not found in the registry, or if the config does not fit
            the component's parameters.
    """
    component_type = component_config.get("type", "")
    config = component_config.get("config") or {}

    if not component_type:
        raise ValueError("Component 'type' not specified in configuration.")

    component_class = registry.get(component_type)
    if not component_class:
        raise ValueError(f"'{component_type}' is not a valid component type.")

    logger.debug(
        f"Building component '{component_class.__name__}' with config: {config}"
    )
    try:
        return component_class(**config)
    except TypeError as e:
        raise ValueError(
            f"Invalid configuration for '{component_type}': {e}"
        ) from e
