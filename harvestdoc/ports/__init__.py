"""
Ports (interfaces) for catalog retrieval.
"""
from harvestdoc.ports.sources import CatalogSource

__all__ = ["CatalogSource"]
