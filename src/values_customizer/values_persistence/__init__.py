"""Values persistence exports."""

from .default_document_reader import DefaultsLoadError, load_default_document
from .values_document_writer import render_values_document, write_values_document

__all__ = [
    "DefaultsLoadError",
    "load_default_document",
    "render_values_document",
    "write_values_document",
]
