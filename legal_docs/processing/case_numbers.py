import logging

from ..config import CASE_NUMBER_KEY
from ..models.document import LegalDocument
from ..models.document_type import DocumentType

logger = logging.getLogger(__name__)


def find_case_numbers_for_motions(documents: list[LegalDocument]) -> list[str]:
    """Collect case numbers from motion documents.

    Only documents typed as ``MOTION`` are considered. Motions without a
    ``caseNumber`` metadata entry are skipped rather than contributing an
    empty value. Input order and duplicates are preserved.

    Args:
        documents: Documents to scan

    Returns:
        Case numbers of the motions, in input order

    """
    motions = [doc for doc in documents if doc.potential_type == DocumentType.MOTION]

    case_numbers = [
        doc.metadata[CASE_NUMBER_KEY]
        for doc in motions
        if CASE_NUMBER_KEY in doc.metadata
    ]

    if len(case_numbers) < len(motions):
        missing = [doc.id for doc in motions if CASE_NUMBER_KEY not in doc.metadata]
        logger.debug(f"Motions without a case number: {', '.join(missing)}")

    logger.debug(
        f"Found {len(case_numbers)} case number(s) across {len(motions)} motion(s)"
    )
    return case_numbers
