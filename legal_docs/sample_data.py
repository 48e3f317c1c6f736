"""Sample documents used by the demonstration driver."""

from .models.document import LegalDocument
from .models.document_type import DocumentType

SAMPLE_DOCUMENTS: list[LegalDocument] = [
    LegalDocument(
        id="doc1",
        content_snippet="Argument supporting motion... sensitive info: 123-456-7890. More text.",
        potential_type=DocumentType.MOTION,
        metadata={"caseNumber": "CV-2025-123"},
        ssn="123-456-7890",
    ),
    LegalDocument(
        id="doc2",
        content_snippet="List of exhibit items...",
        potential_type=DocumentType.EXHIBIT,
        metadata={"exhibitNum": "A"},
    ),
    LegalDocument(
        id="doc3",
        content_snippet="Order granting relief...",
        potential_type=DocumentType.ORDER,
        metadata={"caseNumber": "CV-2025-123"},
    ),
    LegalDocument(
        id="doc4",
        content_snippet="Further argument on motion...",
        potential_type=DocumentType.MOTION,
        metadata={"caseNumber": "CV-2025-456"},
    ),
]
