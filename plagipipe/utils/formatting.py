"""
Formatting helpers shared by the report sinks and the CLI.
"""

from datetime import datetime

TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def format_score(score: float) -> str:
    """Formats a similarity score with four decimal places."""
    return f"{score:.4f}"


def format_percentage(score: float) -> str:
    """Formats a similarity score as a percentage with two decimal places."""
    return f"{score * 100:.2f}%"


def format_timestamp(moment: datetime) -> str:
    """
    Formats a timestamp for the report header, e.g. 'Mon Oct 19 14:03:11 UTC 2026'.

    Naive datetimes are assumed to be local time.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.strftime(TIMESTAMP_FORMAT)
