"""Utility functions for calculating document statistics."""

from dataclasses import dataclass, field

from ..config import REDACTION_MARKER
from ..models.document import LegalDocument
from ..models.document_type import DocumentType


@dataclass
class DocumentStatistics:
    """Container for document processing statistics."""

    total: int
    by_type: dict[DocumentType, int] = field(default_factory=dict)
    with_ssn: int = 0
    redacted: int = 0
    remaining_ssn: int = 0

    def to_display_string(self) -> str:
        """Format statistics for a single report line."""
        type_counts = ", ".join(
            f"{doc_type.display_name}: {count}"
            for doc_type, count in self.by_type.items()
        )
        return (
            f"Total: {self.total} ({type_counts or 'none'}) | "
            f"With SSN: {self.with_ssn} | Redacted: {self.redacted} | "
            f"SSN remaining: {self.remaining_ssn}"
        )


def calculate_document_statistics(
    original: list[LegalDocument],
    redacted: list[LegalDocument],
) -> DocumentStatistics:
    """Calculate statistics for a document list before and after redaction.

    Args:
        original: Documents as they were before redaction
        redacted: The same documents after redaction, in the same order

    Returns:
        DocumentStatistics object containing calculated statistics

    """
    by_type: dict[DocumentType, int] = {}
    for doc in original:
        by_type[doc.potential_type] = by_type.get(doc.potential_type, 0) + 1

    with_ssn = sum(1 for doc in original if doc.has_ssn)

    redacted_count = sum(
        1
        for before, after in zip(original, redacted)
        if after.content_snippet != before.content_snippet
        and REDACTION_MARKER in after.content_snippet
    )

    remaining_ssn = sum(1 for doc in redacted if doc.has_ssn)

    return DocumentStatistics(
        total=len(original),
        by_type=by_type,
        with_ssn=with_ssn,
        redacted=redacted_count,
        remaining_ssn=remaining_ssn,
    )
