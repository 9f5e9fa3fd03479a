"""Configuration for langdet."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .detector import DEFAULT_MINIMUM_CONFIDENCE, Detector
from .storage import load_profiles

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class DetectorConfig:
    """Configuration for building a detector."""

    minimum_confidence: float = DEFAULT_MINIMUM_CONFIDENCE
    profiles_path: Path | None = None
    enable_cache: bool = True
    cache_max_size: int = 1000
    cache_max_age_seconds: int = 3600

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Create configuration from environment variables."""
        profiles = os.getenv("LANGDET_PROFILES")
        return cls(
            minimum_confidence=float(
                os.getenv("LANGDET_MINIMUM_CONFIDENCE", str(DEFAULT_MINIMUM_CONFIDENCE))
            ),
            profiles_path=Path(profiles) if profiles else None,
            enable_cache=_env_bool("LANGDET_CACHE_ENABLED", True),
            cache_max_size=int(os.getenv("LANGDET_CACHE_MAX_SIZE", "1000")),
            cache_max_age_seconds=int(os.getenv("LANGDET_CACHE_MAX_AGE", "3600")),
        )


def create_detector(config: DetectorConfig) -> Detector:
    """
    Build a detector from configuration.

    Languages are loaded from ``config.profiles_path`` when it is set.

    Raises:
        ProfileLoadError: If the configured profiles cannot be loaded
    """
    detector = Detector(
        minimum_confidence=config.minimum_confidence,
        enable_cache=config.enable_cache,
        cache_max_size=config.cache_max_size,
        cache_max_age_seconds=config.cache_max_age_seconds,
    )
    if config.profiles_path:
        detector.add_language(*load_profiles(config.profiles_path))
    else:
        logger.info("No profiles configured, detector starts without languages")
    return detector
