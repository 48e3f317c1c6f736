import logging

from ...processing.redaction import redact_documents
from ..state import PipelineState

logger = logging.getLogger(__name__)


def redact(state: PipelineState) -> dict:
    """Redact known SSNs from every document in the state.

    Args:
        state: Pipeline state containing the documents

    Returns:
        Dict with the redacted documents, in input order

    """
    documents = state.get("documents", [])
    redacted = redact_documents(documents)
    changed = sum(1 for before, after in zip(documents, redacted) if after is not before)
    logger.info(f"Redaction changed {changed} of {len(documents)} document(s)")
    return {"redacted_documents": redacted}
