from typing import TypedDict

from ..models.document import LegalDocument
from ..utils.statistics import DocumentStatistics


class PipelineState(TypedDict):
    """State that flows through the LangGraph pipeline."""

    # Input fields
    documents: list[LegalDocument]
    keyword: str

    # Operation results
    case_numbers: list[str] | None
    search_results: list[str] | None
    redacted_documents: list[LegalDocument] | None

    # Summary
    statistics: DocumentStatistics | None
