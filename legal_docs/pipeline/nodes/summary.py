import logging

from ...utils.statistics import calculate_document_statistics
from ..state import PipelineState

logger = logging.getLogger(__name__)


def summarize(state: PipelineState) -> dict:
    """Compute statistics for the original and redacted documents.

    Args:
        state: Pipeline state containing the original and redacted documents

    Returns:
        Dict with the DocumentStatistics for this run

    """
    statistics = calculate_document_statistics(
        state.get("documents", []), state.get("redacted_documents") or []
    )
    logger.info(f"Summary: {statistics.to_display_string()}")
    return {"statistics": statistics}
