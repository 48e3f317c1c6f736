"""LangGraph pipeline running the document operations in sequence."""

from .state import PipelineState
from .workflow import get_compiled_workflow, run_pipeline

__all__ = ["PipelineState", "get_compiled_workflow", "run_pipeline"]
