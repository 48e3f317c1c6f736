"""Data models for legal documents."""

from .document import LegalDocument
from .document_type import DocumentType

__all__ = ["DocumentType", "LegalDocument"]
