"""
Configuration for the schema parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DRAFT_04_SCHEMA = "http://json-schema.org/draft-04/schema"


@dataclass
class ParserConfig:
    """Configuration options for parsing schema documents."""

    # Meta-schema URIs accepted in "$schema" (exact match)
    supported_versions: list[str] = field(default_factory=lambda: [DRAFT_04_SCHEMA])

    # Maximum nesting depth of a single document, at most
    # sys.getrecursionlimit() // 4 since each level takes up to four frames
    max_depth: int = 200

    # Raise on a node no interpreter matches instead of collecting it
    strict: bool = False

    # Log and skip documents with fatal errors instead of aborting the run
    skip_invalid_documents: bool = False

    @staticmethod
    def from_dict(d: dict) -> ParserConfig:
        """Create a config from a dictionary."""
        config = ParserConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "supported_versions": list(self.supported_versions),
            "max_depth": self.max_depth,
            "strict": self.strict,
            "skip_invalid_documents": self.skip_invalid_documents,
        }
