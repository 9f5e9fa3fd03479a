"""Default language collections shared by many detectors."""

import logging
from pathlib import Path
from typing import IO, Iterable, Tuple

from .detector import DEFAULT_MINIMUM_CONFIDENCE, Detector
from .models import Language
from .storage import load_languages_from_reader, load_profiles

logger = logging.getLogger(__name__)


class LanguagePreset:
    """
    A fixed set of languages loaded once and handed out to new detectors.

    Every detector gets its own copy of the language list, so adding a
    language to one of them leaves the preset and other detectors untouched.
    """

    def __init__(self, languages: Iterable[Language]):
        self._languages: Tuple[Language, ...] = tuple(languages)
        logger.info(f"Language preset holds: {[language.name for language in self._languages]}")

    @classmethod
    def from_path(cls, path: str | Path) -> "LanguagePreset":
        """Load the preset from a JSON array file or a directory of records."""
        return cls(load_profiles(path))

    @classmethod
    def from_reader(cls, reader: IO) -> "LanguagePreset":
        """Load the preset from a stream holding a JSON array of records."""
        return cls(load_languages_from_reader(reader))

    @property
    def languages(self) -> Tuple[Language, ...]:
        return self._languages

    def new_detector(self, minimum_confidence: float = DEFAULT_MINIMUM_CONFIDENCE, **kwargs) -> Detector:
        """Create a detector holding the preset languages."""
        return Detector(languages=self._languages, minimum_confidence=minimum_confidence, **kwargs)
