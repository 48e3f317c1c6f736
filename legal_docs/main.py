import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import (
    DEFAULT_SEARCH_KEYWORD,
    LOG_FORMAT,
    LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    LOG_LEVELS,
)
from .models.document import LegalDocument
from .pipeline import PipelineState, run_pipeline
from .sample_data import SAMPLE_DOCUMENTS


def format_document_line(doc: LegalDocument) -> str:
    """Format a redacted document as a single report line."""
    return (
        f" - ID: {doc.id:<5} | Has SSN: {str(doc.has_ssn):<5} | "
        f"Content Snippet: {doc.content_snippet}"
    )


def format_report(state: PipelineState) -> str:
    """Build the human-readable demo report from a finished pipeline state."""
    lines = [
        f"Found Case Numbers for Motions: {', '.join(state.get('case_numbers') or [])}",
        f"Docs containing '{state.get('keyword', '')}': "
        f"{', '.join(state.get('search_results') or [])}",
        "",
        "Redacted Documents (showing content and SSN presence):",
    ]
    lines.extend(format_document_line(doc) for doc in state.get("redacted_documents") or [])

    statistics = state.get("statistics")
    if statistics is not None:
        lines.append(f"Summary: {statistics.to_display_string()}")

    lines.extend(["", "Demo completed."])
    return "\n".join(lines)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the legal document processing demo on sample data"
    )
    parser.add_argument(
        "--keyword",
        type=str,
        default=DEFAULT_SEARCH_KEYWORD,
        help="Keyword to search for in document snippets",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv(LOG_LEVEL_ENV_VAR, LOG_LEVEL),
        help=f"Logging level (default: ${LOG_LEVEL_ENV_VAR} or {LOG_LEVEL})",
    )
    args = parser.parse_args(argv)

    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid {LOG_LEVEL_ENV_VAR} value: {args.log_level!r} "
            f"(choose from {', '.join(LOG_LEVELS)})"
        )
    return args


def main(argv: list[str] | None = None) -> None:
    """Run the demo pipeline over the sample documents and print a report."""
    # Load environment variables from .env file next to the package
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(env_path)

    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )

    state = run_pipeline(SAMPLE_DOCUMENTS, args.keyword)
    print(format_report(state))


if __name__ == "__main__":
    main()
