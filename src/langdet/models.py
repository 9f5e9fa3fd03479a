"""Data models for language detection."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .exceptions import ProfileFormatError
from .ngrams import NGRAM_DEPTH, create_occurrence_map, update_occurrence_map
from .ranking import create_rank_lookup_map

# name reported when no language is confident enough
UNDETERMINED = "undetermined"


@dataclass(frozen=True)
class Language:
    """A named language and its n-gram rank profile."""

    name: str
    profile: Mapping[str, int] = field(default_factory=dict, repr=False, hash=False)

    def __post_init__(self):
        """Freeze the profile so the language can be shared between detectors."""
        object.__setattr__(self, "profile", MappingProxyType(dict(self.profile)))

    @property
    def size(self) -> int:
        """Number of distinct n-grams in the profile."""
        return len(self.profile)

    def __repr__(self) -> str:
        return f"Language(name='{self.name}', size={self.size})"

    @classmethod
    def from_text(cls, text: str, name: str, depth: int = NGRAM_DEPTH) -> "Language":
        """Build a language profile from a single training text."""
        return cls(name=name, profile=create_rank_lookup_map(create_occurrence_map(text, depth)))

    @classmethod
    def from_chunks(cls, chunks: Iterable[str], name: str, depth: int = NGRAM_DEPTH) -> "Language":
        """Build a language profile from many training texts."""
        occurrences: dict[str, int] = {}
        for chunk in chunks:
            update_occurrence_map(occurrences, chunk, depth)
        return cls(name=name, profile=create_rank_lookup_map(occurrences))

    @classmethod
    def from_dict(cls, record: Any) -> "Language":
        """
        Create a language from an exchange record.

        Args:
            record: Mapping with ``name`` and ``profile`` keys

        Returns:
            Language instance

        Raises:
            ProfileFormatError: If the record is malformed
        """
        if not isinstance(record, Mapping):
            raise ProfileFormatError(
                "Language record must be an object",
                {"type": type(record).__name__},
            )

        name = record.get("name")
        if not isinstance(name, str):
            raise ProfileFormatError("Language record needs a string 'name'", {"name": name})

        profile = record.get("profile")
        if not isinstance(profile, Mapping):
            raise ProfileFormatError(
                f"Language '{name}' needs an object 'profile'",
                {"type": type(profile).__name__},
            )

        for token, rank in profile.items():
            if not isinstance(token, str):
                raise ProfileFormatError(f"Language '{name}' has a non-string token", {"token": token})
            # bool is an int subclass but never a rank
            if isinstance(rank, bool) or not isinstance(rank, int) or rank < 1:
                raise ProfileFormatError(
                    f"Language '{name}' has an invalid rank for '{token}'",
                    {"token": token, "rank": rank},
                )

        return cls(name=name, profile=profile)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the exchange record for JSON serialization."""
        return {"name": self.name, "profile": dict(self.profile)}


@dataclass(frozen=True)
class DetectionResult:
    """Confidence of one language for a detected text."""

    name: str
    confidence: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "confidence": self.confidence}
