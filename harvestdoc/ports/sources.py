"""
Catalog source interface.

A catalog source yields the concept catalog from exactly one origin:
- Remote: Harvest API over HTTP (connectors.harvest)
- Local: JSON file on disk (adapters.source_file)

The exporter only sees this interface, so origins swap without touching it.
"""
from abc import ABC, abstractmethod
from typing import List

from harvestdoc.schemas.concept import Concept


class CatalogSource(ABC):
    """Produces an ordered list of concepts."""

    @abstractmethod
    def concepts(self) -> List[Concept]:
        """
        Fetch and decode the concept catalog.

        Order is the source's order; nothing is deduplicated, filtered or sorted.

        Returns:
            List of concepts

        Raises:
            SourceError: If the catalog cannot be retrieved or decoded
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable origin, used in log messages."""
        pass

    def close(self) -> None:
        """Release transport resources held by the source."""
        pass

    def __enter__(self) -> "CatalogSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
