"""Configuration settings for the legal document toolkit."""

# Metadata key holding a document's case number
CASE_NUMBER_KEY = "caseNumber"

# Replacement text for redacted SSN values
REDACTION_MARKER = "[REDACTED_SSN]"

# Demo defaults
DEFAULT_SEARCH_KEYWORD = "argument"

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL_ENV_VAR = "LEGAL_DOCS_LOG_LEVEL"
