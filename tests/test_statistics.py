"""
Unit tests for document statistics.
"""

from legal_docs.models.document_type import DocumentType
from legal_docs.processing.redaction import redact_documents
from legal_docs.sample_data import SAMPLE_DOCUMENTS
from legal_docs.utils.statistics import calculate_document_statistics


class TestDocumentStatistics:
    """Test cases for calculate_document_statistics"""

    def test_empty(self):
        """Test statistics for no documents"""
        stats = calculate_document_statistics([], [])

        assert stats.total == 0
        assert stats.by_type == {}
        assert stats.with_ssn == 0
        assert stats.to_display_string() == (
            "Total: 0 (none) | With SSN: 0 | Redacted: 0 | SSN remaining: 0"
        )

    def test_sample_documents(self):
        """Test statistics over the sample set"""
        redacted = redact_documents(SAMPLE_DOCUMENTS)

        stats = calculate_document_statistics(SAMPLE_DOCUMENTS, redacted)

        assert stats.total == 4
        assert stats.by_type == {
            DocumentType.MOTION: 2,
            DocumentType.EXHIBIT: 1,
            DocumentType.ORDER: 1,
        }
        assert stats.with_ssn == 1
        assert stats.redacted == 1
        assert stats.remaining_ssn == 0

    def test_before_redaction(self):
        """Test that unredacted documents count as remaining"""
        stats = calculate_document_statistics(SAMPLE_DOCUMENTS, SAMPLE_DOCUMENTS)

        assert stats.redacted == 0
        assert stats.remaining_ssn == 1

    def test_display_string(self):
        """Test formatting of the summary line"""
        stats = calculate_document_statistics(
            SAMPLE_DOCUMENTS, redact_documents(SAMPLE_DOCUMENTS)
        )

        assert stats.to_display_string() == (
            "Total: 4 (Motion: 2, Exhibit: 1, Order: 1) | "
            "With SSN: 1 | Redacted: 1 | SSN remaining: 0"
        )
