import logging

from ...processing.search import simple_search_by_keyword
from ..state import PipelineState

logger = logging.getLogger(__name__)


def search_documents(state: PipelineState) -> dict:
    """Search the state's documents for its keyword.

    Args:
        state: Pipeline state containing the documents and keyword

    Returns:
        Dict with the ids of matching documents, in input order

    """
    keyword = state.get("keyword", "")
    search_results = simple_search_by_keyword(state.get("documents", []), keyword)
    logger.info(f"Keyword '{keyword}' matched {len(search_results)} document(s)")
    return {"search_results": search_results}
