"""
Unit tests for the individual pipeline nodes.
"""

import logging

import pytest
from legal_docs.pipeline.nodes.case_numbers import find_case_numbers
from legal_docs.pipeline.nodes.redaction import redact
from legal_docs.pipeline.nodes.search import search_documents
from legal_docs.pipeline.nodes.summary import summarize
from legal_docs.pipeline.workflow import create_initial_state
from legal_docs.sample_data import SAMPLE_DOCUMENTS


class TestPipelineNodes:
    """Test cases for the pipeline nodes"""

    @pytest.fixture
    def state(self):
        """Initial state over the sample documents"""
        return create_initial_state(SAMPLE_DOCUMENTS, "argument")

    def test_find_case_numbers(self, state, caplog):
        """Test the case number node's update and log line"""
        with caplog.at_level(logging.INFO, logger="legal_docs.pipeline.nodes"):
            update = find_case_numbers(state)

        assert update == {"case_numbers": ["CV-2025-123", "CV-2025-456"]}
        assert "Found 2 motion case number(s)" in caplog.text

    def test_search_documents(self, state, caplog):
        """Test the search node's update and log line"""
        with caplog.at_level(logging.INFO, logger="legal_docs.pipeline.nodes"):
            update = search_documents(state)

        assert update == {"search_results": ["doc1", "doc4"]}
        assert "Keyword 'argument' matched 2 document(s)" in caplog.text

    def test_redact(self, state, caplog):
        """Test the redaction node's update and log line"""
        with caplog.at_level(logging.INFO, logger="legal_docs.pipeline.nodes"):
            update = redact(state)

        assert [doc.id for doc in update["redacted_documents"]] == [
            "doc1", "doc2", "doc3", "doc4"
        ]
        assert "Redaction changed 1 of 4 document(s)" in caplog.text
        assert "123-456-7890" not in caplog.text

    def test_summarize(self, state, caplog):
        """Test the summary node's update and log line"""
        state.update(redact(state))

        with caplog.at_level(logging.INFO, logger="legal_docs.pipeline.nodes"):
            update = summarize(state)

        assert list(update) == ["statistics"]
        assert update["statistics"].redacted == 1
        assert "Summary: Total: 4" in caplog.text

    def test_summarize_without_redaction(self, state):
        """Test that a missing redaction result counts as nothing redacted"""
        update = summarize(state)

        assert update["statistics"].total == 4
        assert update["statistics"].redacted == 0
