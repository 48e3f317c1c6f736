import logging
from typing import cast

from langgraph.graph import StateGraph
from langgraph.graph.state import CompiledStateGraph

from ..exceptions import WorkflowError
from ..models.document import LegalDocument
from .nodes.case_numbers import find_case_numbers
from .nodes.redaction import redact
from .nodes.search import search_documents
from .nodes.summary import summarize
from .state import PipelineState

logger = logging.getLogger(__name__)


def get_compiled_workflow() -> CompiledStateGraph:
    """Build and compile the document pipeline.

    Returns:
        Compiled LangGraph workflow

    """
    workflow = StateGraph(PipelineState)

    # Add nodes
    workflow.add_node("find_case_numbers", find_case_numbers)
    workflow.add_node("search", search_documents)
    workflow.add_node("redact", redact)
    workflow.add_node("summarize", summarize)

    # Every operation reads the original documents, never a previous step's output
    workflow.add_edge("find_case_numbers", "search")
    workflow.add_edge("search", "redact")
    workflow.add_edge("redact", "summarize")

    workflow.set_entry_point("find_case_numbers")
    workflow.set_finish_point("summarize")

    return workflow.compile()


def create_initial_state(documents: list[LegalDocument], keyword: str) -> PipelineState:
    """Create initial state for a pipeline run.

    Args:
        documents: Documents to process
        keyword: Keyword for the search step

    Returns:
        Initial pipeline state

    """
    return {
        "documents": list(documents),
        "keyword": keyword,
        "case_numbers": None,
        "search_results": None,
        "redacted_documents": None,
        "statistics": None,
    }


def run_pipeline(documents: list[LegalDocument], keyword: str) -> PipelineState:
    """Run the documents through the full pipeline.

    Args:
        documents: Documents to process
        keyword: Keyword for the search step

    Returns:
        Pipeline state after processing

    Raises:
        WorkflowError: If any pipeline step fails

    """
    app = get_compiled_workflow()
    initial_state = create_initial_state(documents, keyword)

    logger.info(f"Running pipeline over {len(initial_state['documents'])} document(s)")
    try:
        result = app.invoke(initial_state)
    except Exception as e:
        logger.error(f"Pipeline failed: {e!s}")
        raise WorkflowError(f"Pipeline failed: {e!s}") from e

    return cast(PipelineState, result)
