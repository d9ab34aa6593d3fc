"""
Export service - fetch a concept catalog and write it as CSV.

Both the CLI and the HTTP endpoint go through export_concepts(), so the
pipeline can be exercised without a network listener.
"""
import logging
from typing import Optional, TextIO
from urllib.parse import urlsplit

from harvestdoc.adapters.source_file import FileCatalogSource
from harvestdoc.connectors.harvest import HarvestConnector
from harvestdoc.export.csv_emitter import CSVEncoder
from harvestdoc.ports.sources import CatalogSource

logger = logging.getLogger(__name__)


def is_remote(target: str) -> bool:
    """True when target is an http(s) URL rather than a file path."""
    try:
        scheme = urlsplit(target).scheme
    except ValueError:
        # Malformed URL, e.g. an unclosed IPv6 host; the connector reports it
        return target.lower().startswith(("http://", "https://"))
    return scheme.lower() in ("http", "https")


def catalog_source_for(target: str, token: Optional[str] = None) -> CatalogSource:
    """
    Pick the catalog origin for a CLI/API target.

    Args:
        target: Harvest API endpoint URL or path to a JSON file
        token: API token (remote origin only)

    Returns:
        HarvestConnector for URLs, FileCatalogSource otherwise
    """
    if is_remote(target):
        return HarvestConnector(target, token=token)

    if token:
        logger.warning(f"Ignoring API token for file source {target}")
    return FileCatalogSource(target)


def export_concepts(source: CatalogSource, sink: TextIO) -> int:
    """
    Fetch all concepts from source and encode them into sink.

    Args:
        source: Catalog origin
        sink: Writable text stream

    Returns:
        Number of CSV data rows written

    Raises:
        SourceError: If the catalog cannot be fetched or decoded
        EncodeError: If the sink rejects the output
    """
    concepts = source.concepts()
    rows = CSVEncoder(sink).encode(concepts)
    logger.info(f"Exported {rows} fields from {len(concepts)} concepts ({source.describe()})")
    return rows
