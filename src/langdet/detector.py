"""N-gram language detector."""

import logging
from threading import RLock
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .cache import DetectionCache
from .distance import get_confidence
from .models import UNDETERMINED, DetectionResult, Language
from .ngrams import NGRAM_DEPTH, create_occurrence_map
from .ranking import create_rank_lookup_map

logger = logging.getLogger(__name__)

# minimum confidence a language match needs to be reported as detected
DEFAULT_MINIMUM_CONFIDENCE = 0.7


class Detector:
    """Holds detectable languages and finds the closest one to a text."""

    def __init__(
        self,
        languages: Optional[Iterable[Language]] = None,
        minimum_confidence: float = DEFAULT_MINIMUM_CONFIDENCE,
        enable_cache: bool = True,
        cache_max_size: int = 1000,
        cache_max_age_seconds: int = 3600,
    ):
        """
        Initialize the detector.

        Args:
            languages: Initial languages, in priority order for confidence ties
            minimum_confidence: Fraction in (0, 1] a match needs to be reported
            enable_cache: Whether to cache detection results per text
            cache_max_size: Maximum number of cache entries
            cache_max_age_seconds: Maximum age of cache entries in seconds
        """
        # guards the language list; scoring works on snapshots taken under it
        self._lock = RLock()
        self._languages: List[Language] = list(languages or [])
        # bumped on every mutation so results scored on an old snapshot are not cached
        self._generation = 0
        self.minimum_confidence = minimum_confidence

        self.cache: Optional[DetectionCache] = None
        if enable_cache:
            self.cache = DetectionCache(max_size=cache_max_size, max_age_seconds=cache_max_age_seconds)

        logger.debug(
            f"Created detector with {len(self._languages)} languages, "
            f"minimum_confidence={self.minimum_confidence}"
        )

    @property
    def minimum_confidence(self) -> float:
        return self._minimum_confidence

    @minimum_confidence.setter
    def minimum_confidence(self, value: float) -> None:
        # out of range values fall back to the default instead of failing
        try:
            valid = 0 < value <= 1
        except TypeError:
            valid = False
        if not valid:
            logger.debug(f"Invalid minimum confidence {value}, using {DEFAULT_MINIMUM_CONFIDENCE}")
            value = DEFAULT_MINIMUM_CONFIDENCE
        self._minimum_confidence = value

    @property
    def languages(self) -> Tuple[Language, ...]:
        """Snapshot of the detectable languages."""
        with self._lock:
            return tuple(self._languages)

    def language_names(self) -> List[str]:
        return [language.name for language in self.languages]

    def __len__(self) -> int:
        with self._lock:
            return len(self._languages)

    def add_language(self, *languages: Language) -> None:
        """Add languages to the list of languages detectable by this detector."""
        with self._lock:
            self._languages.extend(languages)
            self._generation += 1
            if self.cache is not None:
                self.cache.clear()
        for language in languages:
            logger.info(f"Added language '{language.name}' ({language.size} n-grams)")

    def add_language_from_text(self, text: str, name: str) -> Language:
        """
        Analyze a text and add it as a new detectable language.

        Args:
            text: Training text
            name: Name of the new language

        Returns:
            The new Language
        """
        language = Language.from_text(text, name, NGRAM_DEPTH)
        self.add_language(language)
        return language

    def detect_all(self, text: str) -> List[DetectionResult]:
        """
        Score a text against every language of this detector.

        Returns:
            Results sorted by confidence, highest first. Languages with equal
            confidence keep the order in which they were added.
        """
        if self.cache is not None:
            cached = self.cache.get(text)
            if cached is not None:
                return list(cached)

        with self._lock:
            languages = tuple(self._languages)
            generation = self._generation

        sample = create_rank_lookup_map(create_occurrence_map(text, NGRAM_DEPTH))
        results = [
            DetectionResult(name=language.name, confidence=get_confidence(sample, language.profile))
            for language in languages
        ]
        results.sort(key=lambda result: result.confidence, reverse=True)
        logger.debug(f"Scored {len(sample)} n-grams against {len(languages)} languages")

        if self.cache is not None:
            with self._lock:
                if generation == self._generation:
                    self.cache.put(text, tuple(results))

        return results

    def detect_best(self, text: str) -> str:
        """
        Return the name of the closest language if it is confident enough.

        Returns UNDETERMINED when no language reaches the minimum confidence
        or when the detector has no languages.
        """
        return self.detect_closest(text)[0]

    def detect_closest(self, text: str) -> Tuple[str, int]:
        """
        Score a text once and return the thresholded name with the top confidence.

        Returns:
            (name, confidence) where name is UNDETERMINED when the closest
            language is below the minimum confidence, and confidence is the
            closest language's confidence (0 without languages)
        """
        if len(self) == 0:
            logger.warning("no languages configured for this detector")
            return UNDETERMINED, 0

        results = self.detect_all(text)
        if not results:
            return UNDETERMINED, 0
        best = results[0]
        if best.confidence / 100 < self.minimum_confidence:
            return UNDETERMINED, best.confidence
        return best.name, best.confidence

    def get_cache_info(self) -> Optional[Dict[str, Any]]:
        """Get cache information and statistics, or None if the cache is disabled."""
        if self.cache is not None:
            return self.cache.get_info()
        return None

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()
