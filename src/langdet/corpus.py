"""Training corpora: Wikipedia abstract dumps and profile building.

Abstract dumps look like::

    <feed>
      <doc>
        <title>Wikipedia: ...</title>
        <abstract>...</abstract>
      </doc>
      ...
    </feed>
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

import httpx
from lxml import etree
from tqdm import tqdm

from .exceptions import CorpusError
from .models import Language
from .ngrams import TRAINING_DEPTH, update_occurrence_map
from .ranking import create_rank_lookup_map

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _iter_source_bytes(source: str, client: Optional[httpx.Client]) -> Iterator[bytes]:
    if source.startswith(("http://", "https://")):
        owns_client = client is None
        http = client or httpx.Client(follow_redirects=True, timeout=httpx.Timeout(30.0, read=None))
        try:
            with http.stream("GET", source) as response:
                response.raise_for_status()
                yield from response.iter_bytes(CHUNK_SIZE)
        finally:
            if owns_client:
                http.close()
    else:
        with Path(source).open("rb") as f:
            while chunk := f.read(CHUNK_SIZE):
                yield chunk


def iter_abstracts(
    source: str,
    limit: Optional[int] = None,
    client: Optional[httpx.Client] = None,
) -> Iterator[str]:
    """
    Stream the abstracts of a Wikipedia abstract dump.

    Args:
        source: http(s) URL or local path of the XML dump
        limit: Maximum number of documents to read
        client: Optional httpx client used for URL sources

    Yields:
        Abstract text of each ``<doc>`` (empty string when missing)

    Raises:
        CorpusError: If the dump cannot be downloaded, read or parsed
    """
    if limit is not None and limit <= 0:
        return

    parser = etree.XMLPullParser(events=("end",), tag="doc", recover=False)
    processed = 0
    chunks = _iter_source_bytes(source, client)
    try:
        for chunk in chunks:
            parser.feed(chunk)
            for _, element in parser.read_events():
                yield element.findtext("abstract") or ""
                processed += 1
                element.clear()
                while element.getprevious() is not None:
                    del element.getparent()[0]
                if limit is not None and processed >= limit:
                    return
        parser.close()
    except httpx.HTTPError as e:
        raise CorpusError(f"Could not download corpus: {e}", {"source": source}) from e
    except OSError as e:
        raise CorpusError(f"Could not read corpus: {e}", {"source": source}) from e
    except etree.XMLSyntaxError as e:
        raise CorpusError(f"Could not parse corpus: {e}", {"source": source}) from e
    finally:
        chunks.close()

    logger.debug(f"Read {processed} documents from {source}")


def train_language(
    chunks: Iterable[str],
    name: str,
    depth: int = TRAINING_DEPTH,
    limit: Optional[int] = None,
    progress: bool = False,
) -> Language:
    """
    Build a language profile from many texts.

    Args:
        chunks: Training texts, e.g. article abstracts
        name: Name of the language
        depth: Maximum n-gram length
        limit: Expected number of chunks, used for the progress bar
        progress: Show a progress bar on stderr

    Returns:
        The trained Language
    """
    occurrences: dict[str, int] = {}
    count = 0
    for chunk in tqdm(chunks, total=limit, disable=not progress, unit="doc"):
        update_occurrence_map(occurrences, chunk, depth)
        count += 1

    language = Language(name=name, profile=create_rank_lookup_map(occurrences))
    logger.info(f"Trained language '{name}' from {count} texts ({language.size} n-grams, depth {depth})")
    return language
