from pydantic import BaseModel, Field
from typing import Dict, Any

DEFAULT_REPORT_PATH = "report/plagiarism_report.txt"


class ComponentConfig(BaseModel):
    """A model for a single component's configuration (source, scorer, etc.)"""

    type: str
    config: Dict[str, Any] = {}


class PipelineConfig(BaseModel):
    """The top-level model for the entire pipeline.yaml configuration."""

    source: ComponentConfig = Field(
        default_factory=lambda: ComponentConfig(type="delimited_file")
    )
    tokenizer: ComponentConfig = Field(
        default_factory=lambda: ComponentConfig(type="alphanumeric")
    )
    scorer: ComponentConfig = Field(
        default_factory=lambda: ComponentConfig(type="cosine")
    )
    sink: ComponentConfig = Field(
        default_factory=lambda: ComponentConfig(
            type="text_report", config={"path": DEFAULT_REPORT_PATH}
        )
    )
