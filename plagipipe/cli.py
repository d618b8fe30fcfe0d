"""
Command-Line Interface for PlagiPipe.
"""

import typer
import logging
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

from .core.pipeline import run_pipeline
from .core.factory import (
    SOURCE_REGISTRY,
    TOKENIZER_REGISTRY,
    SCORER_REGISTRY,
    SINK_REGISTRY,
)
from .utils.config import load_config
from .utils.config_models import DEFAULT_REPORT_PATH
from .utils.formatting import format_percentage


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Compare two delimited text documents for plagiarism.")


def _print_error(title: str, message: str, guidance: Optional[str] = None):
    typer.echo(title, err=True)
    typer.echo(f"Message: {message}", err=True)
    if guidance:
        typer.echo(guidance, err=True)


@app.command()
def compare(
    document_a: Annotated[str, typer.Argument(help="First delimited text file.")],
    document_b: Annotated[str, typer.Argument(help="Second delimited text file.")],
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to the pipeline's YAML configuration file."
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Report destination. Defaults to '{DEFAULT_REPORT_PATH}'.",
    ),
):
    """Compares two documents and appends the result to the report."""
    config = load_config(config_path)
    sink_config = config["sink"].setdefault("config", {})
    if output:
        sink_config["path"] = output
    else:
        sink_config.setdefault("path", DEFAULT_REPORT_PATH)

    try:
        run = run_pipeline(document_a, document_b, config)
    except FileNotFoundError as e:
        _print_error(
            "* ERROR: File Not Found *",
            str(e),
            "Please ensure both input files exist and are readable.",
        )
        raise typer.Exit(code=1)
    except OSError as e:
        _print_error(
            "\n=== ERROR: Input/Output Exception ===",
            str(e),
            "Please check file permissions and disk space.",
        )
        raise typer.Exit(code=1)
    except Exception as e:
        _print_error("\n=== ERROR: Unexpected Exception ===", str(e))
        logger.error(f"Plagiarism check failed: {e}", exc_info=True)
        raise typer.Exit(code=1)

    typer.echo("* Plagiarism Check Completed Successfully *")
    typer.echo(f"Similarity Score: {format_percentage(run.result.score)}")
    typer.echo(f"Result: {run.result.severity.message}")
    typer.echo(f"Report saved to: {run.report_destination}")


@app.command()
def init():
    """Initializes a new PlagiPipe project."""
    logger.info("Initializing new PlagiPipe project...")
    report_dir = Path(DEFAULT_REPORT_PATH).parent
    report_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Created '{report_dir}' directory.")

    config_file = Path("pipeline.yaml")
    if config_file.exists():
        logger.warning("'pipeline.yaml' already exists.")
    else:
        DEFAULT_YAML_CONTENT = f"""# Default PlagiPipe Pipeline Configuration
source:
  type: delimited_file
  config:
    delimiter: ","
    encoding: utf-8

tokenizer:
  type: alphanumeric

scorer:
  type: cosine

sink:
  type: text_report
  config:
    path: {DEFAULT_REPORT_PATH}
"""
        config_file.write_text(DEFAULT_YAML_CONTENT.strip() + "\n")
        logger.info("Created default 'pipeline.yaml'.")

    logger.info("Project initialized.")


@app.command(name="list-components")
def list_components():
    """Lists all available components."""
    logger.info("Listing available components...")

    def print_registry(title, registry):
        typer.echo(f"\n--- {title} ---")
        for name in sorted(registry.keys()):
            typer.echo(f"  - {name}")

    print_registry("Sources", SOURCE_REGISTRY)
    print_registry("Tokenizers", TOKENIZER_REGISTRY)
    print_registry("Scorers", SCORER_REGISTRY)
    print_registry("Sinks", SINK_REGISTRY)
