from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..exceptions import ValidationError
from .document_type import DocumentType


@dataclass(frozen=True)
class LegalDocument:
    """Represents a legal document with pre-assigned type and metadata.

    Records are immutable. Processing steps such as redaction return a new
    record via ``dataclasses.replace`` and leave the original untouched.
    """

    id: str
    content_snippet: str
    potential_type: DocumentType  # Result of an earlier classification step
    metadata: Mapping[str, str] = field(default_factory=dict)  # Pre-extracted fields
    ssn: str | None = None

    def __post_init__(self) -> None:
        potential_type = self.potential_type
        if not isinstance(potential_type, DocumentType):
            potential_type = (
                DocumentType.from_string(potential_type)
                if isinstance(potential_type, str)
                else None
            )
            if potential_type is None:
                raise ValidationError(
                    f"Invalid document type for {self.id}: {self.potential_type!r}"
                )
            object.__setattr__(self, "potential_type", potential_type)

        # Read-only view over a private copy of the caller's mapping
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def has_ssn(self) -> bool:
        """Whether the document still carries an SSN value."""
        return self.ssn is not None

    def to_dict(self) -> dict:
        """Convert document to dictionary for serialization.

        The SSN value itself is never included.
        """
        return {
            "id": self.id,
            "content_snippet": self.content_snippet,
            "potential_type": self.potential_type.value,
            "metadata": dict(self.metadata),
            "has_ssn": self.has_ssn,
        }
