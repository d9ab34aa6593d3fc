"""
File-backed catalog source: a JSON dump of the concepts endpoint.
"""
import logging
from pathlib import Path
from typing import List, Union

from harvestdoc.core.errors import CatalogIOError
from harvestdoc.ports.sources import CatalogSource
from harvestdoc.schemas.concept import Concept, decode_concepts

logger = logging.getLogger(__name__)


class FileCatalogSource(CatalogSource):
    """Reads concepts from a local JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def concepts(self) -> List[Concept]:
        try:
            with open(self.path, "rb") as f:
                payload = f.read()
        except OSError as e:
            logger.error(f"Cannot read catalog file {self.path}: {e}")
            raise CatalogIOError(f"open {self.path}: {e.strerror or e}") from e

        concepts = decode_concepts(payload)
        logger.info(f"Read {len(concepts)} concepts from {self.path}")
        return concepts
