"""Error types raised by langdet."""

from typing import Any


class LangdetError(Exception):
    """Base class for langdet errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "LANGDET_ERROR",
        technical_details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.user_message = message
        self.technical_details = technical_details or {}


class ProfileFormatError(LangdetError, ValueError):
    """A language record does not have the expected shape."""

    def __init__(self, message: str, technical_details: dict[str, Any] | None = None):
        super().__init__(message, "PROFILE_FORMAT_ERROR", technical_details)


class ProfileLoadError(LangdetError):
    """Language profiles could not be read or parsed."""

    def __init__(self, message: str, technical_details: dict[str, Any] | None = None):
        super().__init__(message, "PROFILE_LOAD_ERROR", technical_details)


class CorpusError(LangdetError):
    """A training corpus could not be downloaded or parsed."""

    def __init__(self, message: str, technical_details: dict[str, Any] | None = None):
        super().__init__(message, "CORPUS_ERROR", technical_details)
