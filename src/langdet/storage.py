"""Reading and writing language profiles as JSON.

A language is stored as ``{"name": ..., "profile": {ngram: rank}}``. A
collection is either a JSON array of such records in one file, or a
directory holding one record per file.
"""

import json
import logging
from pathlib import Path
from typing import IO, Any, Iterable, List

from .exceptions import ProfileFormatError, ProfileLoadError
from .models import Language

logger = logging.getLogger(__name__)


def _parse_records(payload: Any, source: str) -> List[Language]:
    if not isinstance(payload, list):
        raise ProfileLoadError(
            f"Expected a list of languages in {source}",
            {"source": source, "type": type(payload).__name__},
        )
    try:
        return [Language.from_dict(record) for record in payload]
    except ProfileFormatError as e:
        raise ProfileLoadError(f"Could not parse languages from {source}: {e}", {"source": source}) from e


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise ProfileLoadError(f"Could not open languages file: {e}", {"path": str(path)}) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProfileLoadError(f"Could not decode languages file {path}: {e}", {"path": str(path)}) from e


def load_languages_from_reader(reader: IO) -> List[Language]:
    """Parse a JSON array of language records from an open text or binary stream."""
    try:
        payload = json.load(reader)
    except OSError as e:
        raise ProfileLoadError(f"Could not read languages stream: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProfileLoadError(f"Could not decode languages stream: {e}") from e
    return _parse_records(payload, "stream")


def load_languages(path: str | Path) -> List[Language]:
    """Load a JSON array of language records from a file."""
    path = Path(path)
    languages = _parse_records(_read_json(path), str(path))
    logger.info(f"Loaded {len(languages)} languages from {path}")
    return languages


def load_language(path: str | Path) -> Language:
    """Load a single language record from a file."""
    path = Path(path)
    try:
        return Language.from_dict(_read_json(path))
    except ProfileFormatError as e:
        raise ProfileLoadError(f"Could not parse language from {path}: {e}", {"path": str(path)}) from e


def load_languages_from_dir(path: str | Path) -> List[Language]:
    """
    Load one language per file from a directory.

    Files are read in name order; subdirectories are skipped.

    Raises:
        ProfileLoadError: If the directory or any file in it cannot be loaded
    """
    path = Path(path)
    try:
        entries = sorted(path.iterdir())
    except OSError as e:
        raise ProfileLoadError(f"Could not list languages directory: {e}", {"path": str(path)}) from e

    languages = [load_language(entry) for entry in entries if entry.is_file()]
    logger.info(f"Loaded {len(languages)} languages from directory {path}")
    return languages


def load_profiles(path: str | Path) -> List[Language]:
    """Load languages from a directory of records or from a file holding an array."""
    path = Path(path)
    if path.is_dir():
        return load_languages_from_dir(path)
    return load_languages(path)


def save_language(language: Language, path: str | Path) -> None:
    """Write one language record to a file."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(language.to_dict(), f, ensure_ascii=False)
    logger.info(f"Saved language '{language.name}' to {path}")


def save_languages(languages: Iterable[Language], path: str | Path) -> None:
    """Write a JSON array of language records to a file."""
    path = Path(path)
    records = [language.to_dict() for language in languages]
    with path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False)
    logger.info(f"Saved {len(records)} languages to {path}")
