"""
Classification of similarity scores into severity tiers.

The thresholds are checked from the highest to the lowest and each one is
inclusive on its lower bound, so a score of exactly 0.8 is HIGH and a score
just below 0.3 is NONE.
"""

from enum import Enum


class Severity(str, Enum):
    """Ordered severity tiers for a similarity score."""

    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"
    NONE = "NONE"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Severity.HIGH: "HIGH PLAGIARISM DETECTED",
    Severity.MODERATE: "MODERATE PLAGIARISM DETECTED",
    Severity.LOW: "LOW PLAGIARISM DETECTED",
    Severity.NONE: "NO SIGNIFICANT PLAGIARISM",
}

# (lower bound, severity), highest first.
THRESHOLDS = (
    (0.8, Severity.HIGH),
    (0.5, Severity.MODERATE),
    (0.3, Severity.LOW),
)


def classify(score: float) -> Severity:
    """
    Maps a similarity score to its severity tier.

    Args:
        score (float): A similarity score, normally in [0.0, 1.0].

    Returns:
        Severity: The first tier whose lower bound the score reaches, or
            Severity.NONE if it reaches none of them.
    """
    for lower_bound, severity in THRESHOLDS:
        if score >= lower_bound:
            return severity
    return Severity.NONE
