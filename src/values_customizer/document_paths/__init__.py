"""Document path exports."""

from .document_models import (
    PATH_SEPARATOR,
    Document,
    DocumentScalar,
    DocumentValue,
    FlatPathMap,
)
from .path_flattener import changed_paths, flatten_document, unflatten_document

__all__ = [
    "PATH_SEPARATOR",
    "Document",
    "DocumentScalar",
    "DocumentValue",
    "FlatPathMap",
    "changed_paths",
    "flatten_document",
    "unflatten_document",
]
