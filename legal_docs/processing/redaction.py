import logging
from dataclasses import replace

from ..config import REDACTION_MARKER
from ..models.document import LegalDocument

logger = logging.getLogger(__name__)


def redact_ssn(doc: LegalDocument) -> LegalDocument:
    """Redact a document's known SSN from its content snippet.

    The document's own ``ssn`` value is the only thing redacted; no pattern
    matching is done on the content.

    - SSN present, non-empty and found in the snippet: every occurrence is
      replaced with ``[REDACTED_SSN]`` and the ``ssn`` field is cleared.
    - SSN present but empty, or not found in the snippet: only the ``ssn``
      field is cleared.
    - No SSN: the document is returned as is.

    Args:
        doc: Document to redact

    Returns:
        A new document when anything changed, otherwise ``doc`` itself

    """
    ssn = doc.ssn
    if ssn is None:
        return doc

    if ssn and ssn in doc.content_snippet:
        occurrences = doc.content_snippet.count(ssn)
        logger.debug(f"Redacting {occurrences} SSN occurrence(s) in {doc.id}")
        return replace(
            doc,
            content_snippet=doc.content_snippet.replace(ssn, REDACTION_MARKER),
            ssn=None,
        )

    logger.debug(f"SSN for {doc.id} not present in content, clearing field only")
    return replace(doc, ssn=None)


def redact_documents(documents: list[LegalDocument]) -> list[LegalDocument]:
    """Apply :func:`redact_ssn` to each document, preserving order."""
    return [redact_ssn(doc) for doc in documents]
