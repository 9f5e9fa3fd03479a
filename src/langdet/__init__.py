"""langdet - natural language detection with character n-gram profiles."""

__version__ = "0.1.0"

from .config import DetectorConfig, create_detector
from .detector import DEFAULT_MINIMUM_CONFIDENCE, Detector
from .distance import MAX_RANK, get_confidence, get_distance
from .exceptions import CorpusError, LangdetError, ProfileFormatError, ProfileLoadError
from .models import UNDETERMINED, DetectionResult, Language
from .ngrams import NGRAM_DEPTH, TRAINING_DEPTH, create_occurrence_map, update_occurrence_map
from .preset import LanguagePreset
from .ranking import create_rank_lookup_map
from .storage import (
    load_language,
    load_languages,
    load_languages_from_dir,
    load_languages_from_reader,
    load_profiles,
    save_language,
    save_languages,
)

__all__ = [
    "Detector", "DetectionResult", "Language", "LanguagePreset",
    "DetectorConfig", "create_detector",
    "create_occurrence_map", "update_occurrence_map", "create_rank_lookup_map",
    "get_distance", "get_confidence",
    "load_language", "load_languages", "load_languages_from_dir",
    "load_languages_from_reader", "load_profiles", "save_language", "save_languages",
    "LangdetError", "ProfileFormatError", "ProfileLoadError", "CorpusError",
    "DEFAULT_MINIMUM_CONFIDENCE", "MAX_RANK", "NGRAM_DEPTH", "TRAINING_DEPTH", "UNDETERMINED",
    "__version__",
]
