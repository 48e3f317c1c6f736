"""Custom exceptions for the legal document toolkit."""


class LegalDocsError(Exception):
    """Base exception for the legal document toolkit."""

    pass


class ValidationError(LegalDocsError):
    """Raised when a document is constructed with invalid field values."""

    pass


class WorkflowError(LegalDocsError):
    """Raised when the demonstration pipeline fails."""

    pass
