"""Legal document toolkit - filtering, keyword search and SSN redaction."""

from .exceptions import LegalDocsError, ValidationError, WorkflowError
from .models.document import LegalDocument
from .models.document_type import DocumentType
from .processing import (
    find_case_numbers_for_motions,
    redact_documents,
    redact_ssn,
    simple_search_by_keyword,
)

__version__ = "0.1.0"
__all__ = [
    "DocumentType",
    "LegalDocsError",
    "LegalDocument",
    "ValidationError",
    "WorkflowError",
    "find_case_numbers_for_motions",
    "redact_documents",
    "redact_ssn",
    "simple_search_by_keyword",
]
