"""Application ports package."""

from .database import DatabaseEnginePort
from .document_store import DocumentStoreError, DocumentStorePort

__all__ = [
    "DatabaseEnginePort",
    "DocumentStoreError",
    "DocumentStorePort",
]
