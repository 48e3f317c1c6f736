import logging

from ..models.document import LegalDocument

logger = logging.getLogger(__name__)


def simple_search_by_keyword(documents: list[LegalDocument], keyword: str) -> list[str]:
    """Return ids of documents whose snippet contains the keyword.

    Matching is a caseless substring test using ``str.casefold`` on both
    sides, so ``"ß"`` and ``"SS"`` match alike. An empty keyword matches
    every document.
    """
    needle = keyword.casefold()
    matches = [doc.id for doc in documents if needle in doc.content_snippet.casefold()]
    logger.debug(f"Keyword '{keyword}' matched {len(matches)} document(s)")
    return matches
