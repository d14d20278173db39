"""Filter category types for TUI dashboard."""

from enum import Enum


class LabelKind(Enum):
    """Label categories a project can be filtered by."""

    POLICY = "policy"
    SDG = "sdg"
