import logging

from ...processing.case_numbers import find_case_numbers_for_motions
from ..state import PipelineState

logger = logging.getLogger(__name__)


def find_case_numbers(state: PipelineState) -> dict:
    """Collect case numbers of the motions in the state.

    Args:
        state: Pipeline state containing the documents

    Returns:
        Dict with the case numbers, in input order

    """
    case_numbers = find_case_numbers_for_motions(state.get("documents", []))
    logger.info(f"Found {len(case_numbers)} motion case number(s)")
    return {"case_numbers": case_numbers}
