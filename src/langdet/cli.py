"""Command-line interface for langdet."""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from .config import DetectorConfig, create_detector
from .corpus import iter_abstracts, train_language
from .exceptions import LangdetError
from .models import UNDETERMINED
from .ngrams import TRAINING_DEPTH
from .server import create_mcp_server
from .storage import save_language

# Configure logging - default to WARNING to reduce verbosity
logging.basicConfig(
    level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20000


def train(source: str, lang: str, output: Path, depth: int = TRAINING_DEPTH, limit: int = DEFAULT_LIMIT) -> int:
    """
    Build a language profile from a Wikipedia abstracts dump and save it.

    Args:
        source: URL or path of the abstracts XML dump
        lang: Name of the language to build
        output: Path of the profile file to write
        depth: Maximum n-gram length
        limit: Maximum number of abstracts to process

    Returns:
        Exit code: 0 for success, 1 for failure
    """
    logger.info(f"Training language '{lang}' from {source} (depth={depth}, limit={limit})")
    try:
        abstracts = iter_abstracts(source, limit=limit)
        language = train_language(abstracts, lang, depth=depth, limit=limit, progress=True)
        save_language(language, output)
    except (LangdetError, OSError) as e:
        logger.error(f"Training failed: {e}")
        return 1

    print(f"Language processing is done: {language.name} ({language.size} n-grams) -> {output}", file=sys.stderr)
    return 0


def detect(text: str, config: DetectorConfig, show_all: bool = False) -> int:
    """
    Print the language of a text.

    Returns:
        Exit code: 0 for success, 1 if the profiles cannot be loaded
    """
    try:
        detector = create_detector(config)
    except LangdetError as e:
        logger.error(f"Could not load profiles: {e}")
        return 1

    if show_all:
        for result in detector.detect_all(text):
            print(f"{result.name}\t{result.confidence}")
    else:
        print(detector.detect_best(text))
    return 0


async def serve(config: DetectorConfig) -> None:
    """Run the MCP server over stdio."""
    detector = create_detector(config)
    mcp = create_mcp_server(detector)
    logger.info(f"Serving {len(detector)} languages over stdio")
    await mcp.run_stdio_async()


def cli(argv: list[str] | None = None) -> int:
    """Command-line interface for langdet."""
    parser = argparse.ArgumentParser(
        prog="langdet",
        description="langdet - n-gram based natural language detection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build an English profile from the first 10k Wikipedia abstracts
  langdet train --url https://dumps.wikimedia.org/enwiki/20170120/enwiki-20170120-abstract.xml \\
      --lang en --file en.json --limit 10000

  # Detect the language of a text with profiles from a directory
  langdet detect --profiles profiles/ "the cat sat on the mat"

  # Show the confidence of every language
  echo "le chat est assis" | langdet detect --profiles languages.json --all

  # Serve detection tools over MCP
  export LANGDET_PROFILES=profiles/
  langdet serve
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    train_parser = subparsers.add_parser("train", help="Build a profile from Wikipedia abstracts")
    train_parser.add_argument("--url", default=None, help="URL or path of a Wikipedia abstract dump")
    train_parser.add_argument("--lang", default=None, help="Language to parse")
    train_parser.add_argument("--file", default=None, help="Output filename")
    train_parser.add_argument(
        "--depth",
        type=int,
        default=TRAINING_DEPTH,
        help=f"Occurrence map depth (default: {TRAINING_DEPTH})",
    )
    train_parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Maximum number of abstracts to process (default: {DEFAULT_LIMIT})",
    )

    for name, help_text in (("detect", "Detect the language of a text"), ("serve", "Run the MCP server over stdio")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--profiles",
            "-p",
            default=None,
            help="Profile file or directory (default: LANGDET_PROFILES)",
        )
        sub.add_argument(
            "--minimum-confidence",
            type=float,
            default=None,
            help="Minimum confidence in (0, 1] (default: 0.7)",
        )
        if name == "detect":
            sub.add_argument("text", nargs="?", default=None, help="Text to analyze (default: stdin)")
            sub.add_argument("--all", action="store_true", help="Print the confidence of every language")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "train":
        url = args.url or os.getenv("LANGDET_TRAIN_URL")
        if not url:
            parser.error("--url is a required argument")
        if not args.lang:
            parser.error("--lang is a required argument")
        if not args.file:
            parser.error("--file is a required argument")
        if args.depth < 1:
            parser.error("--depth must be at least 1")
        if args.limit < 0:
            parser.error("--limit cannot be negative")
        return train(url, args.lang, Path(args.file), depth=args.depth, limit=args.limit)

    try:
        config = DetectorConfig.from_env()
    except ValueError as e:
        parser.error(f"Invalid environment configuration: {e}")
    if args.profiles:
        config.profiles_path = Path(args.profiles)
    if args.minimum_confidence is not None:
        config.minimum_confidence = args.minimum_confidence

    if args.command == "detect":
        text = args.text if args.text is not None else sys.stdin.read()
        return detect(text, config, show_all=args.all)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully...")
    except LangdetError as e:
        logger.error(f"Server error: {e}")
        return 1
    return 0


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
