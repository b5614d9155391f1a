"""Values validation exports."""

from .document_validator import validate_document
from .validation_outcomes import ValidationOutcome, ValidationViolation

__all__ = ["ValidationOutcome", "ValidationViolation", "validate_document"]
