"""Operations over lists of legal documents."""

from .case_numbers import find_case_numbers_for_motions
from .redaction import redact_documents, redact_ssn
from .search import simple_search_by_keyword

__all__ = [
    "find_case_numbers_for_motions",
    "redact_documents",
    "redact_ssn",
    "simple_search_by_keyword",
]
