"""FastMCP server exposing language detection tools."""

import logging

from fastmcp.exceptions import ToolError
from fastmcp.server import FastMCP
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations

from .detector import Detector
from .models import UNDETERMINED

logger = logging.getLogger(__name__)


def create_mcp_server(detector: Detector) -> FastMCP:
    """
    Create an MCP server answering language detection requests.

    Args:
        detector: Detector shared by all tool calls

    Returns:
        FastMCP server instance
    """
    mcp = FastMCP("langdet-mcp")
    logger.debug(f"FastMCP instance created with languages: {detector.language_names()}")

    @mcp.tool(
        annotations=ToolAnnotations(
            title="Detect Language",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        )
    )
    async def detect_language(text: str) -> ToolResult:
        """
        Detect the natural language of a text.

        Examples:
            >>> await detect_language(text="the cat sat on the mat")
            {
                "language": "en",
                "confidence": 84,
                "minimum_confidence": 0.7
            }

        Args:
            text: Text sample to classify

        Returns:
            ToolResult with:
            - language: Name of the closest language, or "undetermined" when no
              language reaches the minimum confidence
            - confidence: Confidence (0-100) of the closest language, 0 if none
            - minimum_confidence: Threshold the detector applies (fraction)

        Raises:
            ToolError: When detection fails
        """
        try:
            language, confidence = detector.detect_closest(text)

            if language == UNDETERMINED:
                message = f"Language undetermined (best confidence: {confidence})"
            else:
                message = f"Detected language: {language} (confidence: {confidence})"

            return ToolResult(
                content=[TextContent(type="text", text=message)],
                structured_content={
                    "language": language,
                    "confidence": confidence,
                    "minimum_confidence": detector.minimum_confidence,
                },
            )

        except Exception as e:
            logger.error(f"Failed to detect language: {e}")
            raise ToolError(f"Failed to detect language: {e}")

    @mcp.tool(
        annotations=ToolAnnotations(
            title="Rank Languages",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        )
    )
    async def rank_languages(text: str, limit: int = 10) -> ToolResult:
        """
        Score a text against every known language.

        Args:
            text: Text sample to classify
            limit: Maximum results to return (default: 10, max: 100)

        Returns:
            ToolResult with:
            - results: Array of {name, confidence}, highest confidence first
            - total_languages: Number of languages the detector holds

        Raises:
            ToolError: When scoring fails
        """
        try:
            limit = min(max(1, limit), 100)
            results = detector.detect_all(text)
            formatted_results = [result.to_dict() for result in results[:limit]]

            result_text = f"Scored {len(results)} languages\n\n"
            for i, res in enumerate(formatted_results, 1):
                result_text += f"{i}. {res['name']}: {res['confidence']}\n"

            return ToolResult(
                content=[TextContent(type="text", text=result_text)],
                structured_content={
                    "results": formatted_results,
                    "total_languages": len(results),
                },
            )

        except Exception as e:
            logger.error(f"Failed to rank languages: {e}")
            raise ToolError(f"Failed to rank languages: {e}")

    @mcp.tool(
        annotations=ToolAnnotations(
            title="List Languages",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        )
    )
    async def list_languages() -> ToolResult:
        """
        List the languages the detector can recognize.

        Returns:
            ToolResult with:
            - languages: Array of {name, size} where size is the number of
              n-grams in the language profile
        """
        languages = [{"name": language.name, "size": language.size} for language in detector.languages]
        if languages:
            result_text = "Known languages: " + ", ".join(lang["name"] for lang in languages)
        else:
            result_text = "No languages configured"

        return ToolResult(
            content=[TextContent(type="text", text=result_text)],
            structured_content={"languages": languages},
        )

    @mcp.tool(
        annotations=ToolAnnotations(
            title="Add Language",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=False,
            openWorldHint=False,
        )
    )
    async def add_language_from_text(text: str, name: str) -> ToolResult:
        """
        Train a new language from a text and make it detectable.

        Args:
            text: Training text, the longer the better
            name: Name reported for the new language

        Returns:
            ToolResult with:
            - name: Name of the added language
            - size: Number of n-grams in its profile
            - total_languages: Number of languages after adding

        Raises:
            ToolError: When the name is empty or training fails
        """
        if not name or not name.strip():
            raise ToolError("Language name cannot be empty")

        try:
            language = detector.add_language_from_text(text, name.strip())
            message = f"Added language '{language.name}' ({language.size} n-grams)"

            return ToolResult(
                content=[TextContent(type="text", text=message)],
                structured_content={
                    "name": language.name,
                    "size": language.size,
                    "total_languages": len(detector),
                },
            )

        except Exception as e:
            logger.error(f"Failed to add language: {e}")
            raise ToolError(f"Failed to add language: {e}")

    logger.info("MCP Server tools registered:")
    logger.info("  • detect_language - Detect the language of a text")
    logger.info("  • rank_languages - Score a text against all languages")
    logger.info("  • list_languages - List known languages")
    logger.info("  • add_language_from_text - Train and add a language")

    return mcp
