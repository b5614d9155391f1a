"""Interactive collection exports."""

from .collection_outcomes import CollectionResult
from .prompt_provider import (
    ESCAPE_CHOICE,
    AcceptDefaultsPromptProvider,
    ClickPromptProvider,
    EscapeChoice,
    PromptProvider,
)
from .values_collector import CollectionError, collect_values

__all__ = [
    "CollectionError",
    "CollectionResult",
    "ESCAPE_CHOICE",
    "AcceptDefaultsPromptProvider",
    "ClickPromptProvider",
    "EscapeChoice",
    "PromptProvider",
    "collect_values",
]
