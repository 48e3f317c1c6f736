"""Document type tags assigned ahead of processing."""

from enum import Enum


class DocumentType(str, Enum):
    """Pre-assigned legal document types."""

    PLEADING = "pleading"
    MOTION = "motion"
    ORDER = "order"
    EXHIBIT = "exhibit"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.value.title()

    @classmethod
    def from_string(cls, value: str | None) -> "DocumentType | None":
        """Create DocumentType from string value."""
        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None
